from typing import Optional, Sequence

from glass_solver.algorithm.arithmetic import gcd_all


def can_possibly_reach(capacities: Sequence[int], targets: Sequence[int]) -> bool:
    """
    Cheap necessary conditions for a target to be reachable.
    - every target must be a multiple of the gcd of all capacities
    - at least one glass must end up exactly empty or exactly full,
      since every operation leaves one of the glasses it touches that way
    """
    g = gcd_all(capacities)
    if g and any(target % g for target in targets):
        return False
    return any(
        target == 0 or target == capacity
        for capacity, target in zip(capacities, targets)
    )


def solve_if_trivial(capacities: Sequence[int], targets: Sequence[int]) -> Optional[int]:
    """
    When every target is either empty or full, one fill per full glass is
    enough. Returns None if some glass needs an intermediate amount.
    """
    fill_count = 0
    for capacity, target in zip(capacities, targets):
        if target == 0:
            continue
        if target == capacity:
            fill_count += 1
            continue
        return None
    return fill_count
