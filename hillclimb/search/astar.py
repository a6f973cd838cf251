"""Generic A* search over any hashable node type."""

from __future__ import annotations

import heapq
import itertools
import logging
from typing import Callable, Hashable, Iterable, TypeVar

from hillclimb.terrain.errors import SearchBudgetExceededError

logger = logging.getLogger(__name__)

N = TypeVar("N", bound=Hashable)


def astar(
    start: N,
    successors: Callable[[N], Iterable[tuple[N, int]]],
    heuristic: Callable[[N], int],
    success: Callable[[N], bool],
    *,
    max_expansions: int | None = None,
) -> tuple[list[N], int] | None:
    """Return the cheapest path from ``start`` to a node passing ``success``.

    ``heuristic`` must never overestimate the remaining cost, otherwise the
    returned path may not be optimal. Returns ``None`` when the frontier is
    exhausted without reaching a goal.
    """
    tie = itertools.count()
    open_set: list[tuple[int, int, int, N]] = []
    heapq.heappush(open_set, (heuristic(start), next(tie), 0, start))
    came_from: dict[N, N | None] = {start: None}
    g_score: dict[N, int] = {start: 0}
    expansions = 0

    while open_set:
        _, _, cost, current = heapq.heappop(open_set)
        if cost > g_score[current]:
            continue
        if success(current):
            logger.debug(
                "A* reached %s at cost %d after %d expansions",
                current,
                cost,
                expansions,
            )
            return reconstruct_path(came_from, current), cost

        expansions += 1
        if max_expansions is not None and expansions > max_expansions:
            raise SearchBudgetExceededError(expansions - 1)

        for neighbor, step_cost in successors(current):
            tentative = cost + step_cost
            if neighbor not in g_score or tentative < g_score[neighbor]:
                came_from[neighbor] = current
                g_score[neighbor] = tentative
                f_score = tentative + heuristic(neighbor)
                heapq.heappush(open_set, (f_score, next(tie), tentative, neighbor))

    logger.debug(
        "A* exhausted the frontier from %s after %d expansions", start, expansions
    )
    return None


def reconstruct_path(came_from: dict[N, N | None], current: N) -> list[N]:
    path = [current]
    parent = came_from[current]
    while parent is not None:
        path.append(parent)
        parent = came_from[parent]
    path.reverse()
    return path
