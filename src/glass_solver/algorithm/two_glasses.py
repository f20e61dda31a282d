"""
Closed-form operation counts for exactly two glasses.

With two glasses every useful strategy is "fill the source, pour it into the
destination, empty the destination when it is full, repeat". After k fills
of the source and j empties of the destination the water left in play is
k * from - j * to, so the number of operations follows from the smallest k
that leaves the wanted amount behind (Bezout / modular inverse).

Counts are `int`, or `None` when a strategy cannot produce the target.
"""
from typing import Iterable, Optional, Tuple

from glass_solver.algorithm.arithmetic import gcd, mod_inverse


def fills_needed(from_cap: int, to_cap: int, target: int) -> Optional[int]:
    """Smallest k >= 1 with k * from_cap ≡ target (mod to_cap), or None."""
    d = gcd(from_cap, to_cap)
    if target % d != 0:
        return None

    fd, td, tgt = from_cap // d, to_cap // d, target // d
    k = (tgt * mod_inverse(fd, td)) % td
    if k == 0:
        # At least one fill is always needed.
        k = td
    return k


def count_ops_target_in_to(from_cap: int, to_cap: int, target: int) -> Optional[int]:
    """
    Operations until the destination holds `target` and the source is empty.
    Every fill and every empty is followed by a pour: 2k + 2j.
    """
    if target == 0:
        return 0
    if target == to_cap:
        return 1

    k = fills_needed(from_cap, to_cap, target)
    if k is None:
        return None
    j = (k * from_cap - target) // to_cap
    return 2 * k + 2 * j


def count_ops_target_in_from(from_cap: int, to_cap: int, target: int) -> Optional[int]:
    """
    Operations until the source holds `target` and the destination was just
    emptied. The last empty leaves the target in place, so there is no
    final pour: 2k + 2j - 1.
    """
    if target == 0:
        return 0
    if target == from_cap:
        return 1

    k = fills_needed(from_cap, to_cap, target)
    if k is None:
        return None
    j = (k * from_cap - target) // to_cap
    return 2 * k + 2 * j - 1


def count_ops_target_in_from_to_full(from_cap: int, to_cap: int, target: int) -> Optional[int]:
    """
    Operations until the source holds `target` and the destination is full,
    i.e. target + to_cap water in play: 2k + 2j.
    """
    if target == 0:
        return 0
    if target == from_cap:
        return 1

    k = fills_needed(from_cap, to_cap, target)
    if k is None:
        return None
    j = (k * from_cap - target - to_cap) // to_cap
    if j < 0:
        return None
    return 2 * k + 2 * j


def _best(candidates: Iterable[Optional[int]]) -> Optional[int]:
    counts = [c for c in candidates if c is not None]
    return min(counts) if counts else None


def _plus_one(count: Optional[int]) -> Optional[int]:
    return None if count is None else count + 1


def _strategies(a: int, b: int, ta: int, tb: int) -> Iterable[Optional[int]]:
    """Every applicable strategy for glasses (a, b) ending at (ta, tb)."""
    if ta == 0:
        yield count_ops_target_in_to(a, b, tb)  # fill A, pour into B
        yield count_ops_target_in_from(b, a, tb)  # fill B, pour into A

    if tb == 0:
        yield count_ops_target_in_to(b, a, ta)
        yield count_ops_target_in_from(a, b, ta)

    if ta == a:
        # Reach (0, tb) either way, then fill A.
        yield _plus_one(count_ops_target_in_to(a, b, tb))
        yield _plus_one(count_ops_target_in_from(b, a, tb))
        # Pouring B into A without ever emptying A fills A naturally.
        if (a + tb) % b == 0:
            yield 2 * ((a + tb) // b)
        yield count_ops_target_in_from_to_full(b, a, tb)

    if tb == b:
        yield _plus_one(count_ops_target_in_to(b, a, ta))
        yield _plus_one(count_ops_target_in_from(a, b, ta))
        if (b + ta) % a == 0:
            yield 2 * ((b + ta) // a)
        yield count_ops_target_in_from_to_full(a, b, ta)


def solve_for_two(a: int, b: int, ta: int, tb: int) -> Optional[int]:
    """
    Minimum operations to take glasses of capacity (a, b) from empty to
    levels (ta, tb). None if none of the known strategies applies.
    """
    boundary: dict[Tuple[int, int], int] = {
        (0, 0): 0,
        (a, b): 2,
        (a, 0): 1,
        (0, b): 1,
    }
    if (ta, tb) in boundary:
        return boundary[(ta, tb)]

    return _best(_strategies(a, b, ta, tb))
