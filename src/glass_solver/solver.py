from typing import Sequence

import structlog

from glass_solver.algorithm.bfs import bfs_solve
from glass_solver.algorithm.precheck import can_possibly_reach, solve_if_trivial
from glass_solver.algorithm.two_glasses import solve_for_two
from glass_solver.utils import ensure_logging

ensure_logging()
log = structlog.get_logger()

UNREACHABLE = -1


def solve(capacities: Sequence[int], targets: Sequence[int], *, exact: bool = False) -> int:
    """
    Minimum number of fill/empty/pour operations that take all-empty glasses
    to `targets`, or -1 if that is impossible.

    Dispatches to the cheapest solver that applies: the feasibility
    pre-check, the all-empty-or-full shortcut, the closed form for two
    glasses, and breadth-first search for everything else.
    """
    kept = [(cap, goal) for cap, goal in zip(capacities, targets) if cap > 0]
    capacities = [cap for cap, _ in kept]
    targets = [goal for _, goal in kept]

    if not capacities or not any(targets):
        log.debug("dispatch", solver="none", glasses=len(capacities))
        return 0

    if not can_possibly_reach(capacities, targets):
        log.debug("dispatch", solver="precheck", glasses=len(capacities), result=UNREACHABLE)
        return UNREACHABLE

    trivial = solve_if_trivial(capacities, targets)
    if trivial is not None:
        log.debug("dispatch", solver="trivial", glasses=len(capacities), result=trivial)
        return trivial

    if len(capacities) == 2:
        answer = solve_for_two(capacities[0], capacities[1], targets[0], targets[1])
        if answer is not None:
            log.debug("dispatch", solver="two_glasses", result=answer)
            return answer
        log.warning(
            "closed form found no strategy, falling back to search",
            capacities=capacities,
            targets=targets,
        )

    answer = bfs_solve(capacities, targets, exact=exact)
    log.debug("dispatch", solver="bfs", glasses=len(capacities), exact=exact, result=answer)
    return answer
