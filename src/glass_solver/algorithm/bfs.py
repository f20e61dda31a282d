from collections import deque
from typing import Callable, Dict, Hashable, Iterator, Sequence, Tuple

from glass_solver.algorithm.fingerprint import fingerprint

State = Tuple[int, ...]


def successors(state: State, capacities: Sequence[int]) -> Iterator[State]:
    """
    Every state one operation away. For each glass i: empty it, fill it,
    then pour it into every other glass j that is not full.
    """
    n = len(capacities)
    for i in range(n):
        level = state[i]

        if level != 0:
            yield state[:i] + (0,) + state[i + 1:]
        if level != capacities[i]:
            yield state[:i] + (capacities[i],) + state[i + 1:]

        if level == 0:
            continue
        for j in range(n):
            if j == i or state[j] == capacities[j]:
                continue
            poured = min(level, capacities[j] - state[j])
            levels = list(state)
            levels[i] -= poured
            levels[j] += poured
            yield tuple(levels)


def bfs_solve(capacities: Sequence[int], targets: Sequence[int], *, exact: bool = False) -> int:
    """
    Breadth-first search from the all-empty state.
    Returns the distance to the target, or -1 if the reachable space is
    exhausted without meeting it.

    By default states are keyed by their 64-bit fingerprint, so a collision
    would be taken as equality. Pass exact=True to key by the state itself.
    """
    key: Callable[[State], Hashable] = tuple if exact else fingerprint
    goal = key(tuple(targets))

    initial: State = (0,) * len(capacities)
    visited = {key(initial)}
    queue = deque([(initial, 0)])

    while queue:
        state, steps = queue.popleft()
        steps += 1
        for nxt in successors(state, capacities):
            h = key(nxt)
            if h == goal:
                return steps
            if h not in visited:
                visited.add(h)
                queue.append((nxt, steps))
    return -1


def reachable_distances(capacities: Sequence[int]) -> Dict[State, int]:
    """Exact shortest operation count for every reachable state."""
    initial: State = (0,) * len(capacities)
    distances = {initial: 0}
    queue = deque([initial])

    while queue:
        state = queue.popleft()
        for nxt in successors(state, capacities):
            if nxt not in distances:
                distances[nxt] = distances[state] + 1
                queue.append(nxt)
    return distances
