"""
Sweep every pair of small capacities and compare the two-glass solver with
an exhaustive breadth-first search over the same glasses.
"""
from typing import Iterator, Optional, Tuple

import structlog
from rich.progress import Progress, TaskID

from glass_solver.algorithm.bfs import reachable_distances
from glass_solver.algorithm.precheck import can_possibly_reach, solve_if_trivial
from glass_solver.algorithm.two_glasses import solve_for_two
from glass_solver.models.report import CrosscheckReport, Mismatch
from glass_solver.utils import ensure_logging

ensure_logging()
log = structlog.get_logger()

DEFAULT_MAX_CAPACITY = 20


def boundary_targets(a: int, b: int) -> Iterator[Tuple[int, int]]:
    """Levels (ta, tb) with at least one glass exactly empty or full."""
    for ta in range(a + 1):
        for tb in range(b + 1):
            if ta in (0, a) or tb in (0, b):
                yield ta, tb


def crosscheck(
    max_capacity: int = DEFAULT_MAX_CAPACITY,
    *,
    progress: Optional[Progress] = None,
    task: Optional[TaskID] = None,
) -> CrosscheckReport:
    """
    Compare solve_for_two() against exact distances for all
    1 <= a, b <= max_capacity. A missing closed-form answer is recorded
    as a mismatch with actual == -1.
    """
    report = CrosscheckReport(max_capacity=max_capacity)

    for a in range(1, max_capacity + 1):
        for b in range(1, max_capacity + 1):
            distances = reachable_distances((a, b))
            for ta, tb in boundary_targets(a, b):
                capacities, targets = (a, b), (ta, tb)
                if not can_possibly_reach(capacities, targets):
                    continue
                if solve_if_trivial(capacities, targets) is not None:
                    continue

                expected = distances.get(targets, -1)
                answer = solve_for_two(a, b, ta, tb)
                actual = -1 if answer is None else answer
                report.compared += 1
                if answer is None or actual != expected:
                    log.warning("mismatch", a=a, b=b, ta=ta, tb=tb, expected=expected, actual=actual)
                    report.mismatches.append(
                        Mismatch(a=a, b=b, ta=ta, tb=tb, expected=expected, actual=actual)
                    )

            report.pairs += 1
            if progress is not None and task is not None:
                progress.advance(task)

    log.info("crosscheck finished", pairs=report.pairs, compared=report.compared, mismatches=len(report.mismatches))
    return report
