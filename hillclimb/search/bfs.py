"""Breadth-first search for unit-cost graphs."""

from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Hashable, Iterable, TypeVar

from hillclimb.search.astar import reconstruct_path
from hillclimb.terrain.errors import SearchBudgetExceededError

logger = logging.getLogger(__name__)

N = TypeVar("N", bound=Hashable)


def bfs(
    start: N,
    successors: Callable[[N], Iterable[tuple[N, int]]],
    success: Callable[[N], bool],
    *,
    max_expansions: int | None = None,
) -> tuple[list[N], int] | None:
    """Return the fewest-steps path to the first node passing ``success``.

    Step costs reported by ``successors`` are ignored; every edge counts as one.
    """
    queue: deque[N] = deque([start])
    came_from: dict[N, N | None] = {start: None}
    expansions = 0

    while queue:
        current = queue.popleft()
        if success(current):
            path = reconstruct_path(came_from, current)
            logger.debug(
                "BFS reached %s in %d steps after %d expansions",
                current,
                len(path) - 1,
                expansions,
            )
            return path, len(path) - 1

        expansions += 1
        if max_expansions is not None and expansions > max_expansions:
            raise SearchBudgetExceededError(expansions - 1)

        for neighbor, _ in successors(current):
            if neighbor in came_from:
                continue
            came_from[neighbor] = current
            queue.append(neighbor)

    logger.debug(
        "BFS exhausted the frontier from %s after %d expansions", start, expansions
    )
    return None
