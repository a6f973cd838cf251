"""Shortest-path queries over a terrain grid."""

from __future__ import annotations

import logging
from concurrent.futures import ProcessPoolExecutor
from functools import partial
from typing import Iterable

from hillclimb.config import SearchConfig
from hillclimb.search.astar import astar
from hillclimb.search.bfs import bfs
from hillclimb.search.contracts import PathResult
from hillclimb.terrain.adjacency import predecessors, successors
from hillclimb.terrain.coordinate import Coordinate
from hillclimb.terrain.grid import LOWEST, Predicate, TerrainGrid

logger = logging.getLogger(__name__)


def shortest_path(
    grid: TerrainGrid,
    source: Coordinate | None = None,
    goal: Coordinate | None = None,
    *,
    config: SearchConfig | None = None,
) -> PathResult | None:
    config = config or SearchConfig()
    if source is None:
        source = grid.start
    if goal is None:
        goal = grid.goal
    grid.check_bounds(source)
    grid.check_bounds(goal)

    found = astar(
        source,
        partial(successors, grid),
        lambda pos: pos.manhattan(goal),
        lambda pos: pos == goal,
        max_expansions=config.max_expansions,
    )
    if found is None:
        return None
    path, _ = found
    return PathResult.from_path(path)


def shortest_path_from_any(
    grid: TerrainGrid,
    predicate: Predicate | None = None,
    *,
    config: SearchConfig | None = None,
) -> PathResult | None:
    """Return the shortest path to the goal from any cell passing ``predicate``.

    The default predicate selects every cell at the lowest elevation.
    """
    config = config or SearchConfig()
    if config.strategy == "reverse":
        return _reverse_search(grid, predicate, config)
    return _brute_force(grid, predicate, config)


def _brute_force(
    grid: TerrainGrid, predicate: Predicate | None, config: SearchConfig
) -> PathResult | None:
    candidates = list(grid.starting_positions(predicate))
    search = partial(shortest_path, grid, goal=grid.goal, config=config)
    if config.workers > 1 and len(candidates) > 1:
        with ProcessPoolExecutor(max_workers=config.workers) as pool:
            results = list(pool.map(search, candidates))
    else:
        results = [search(pos) for pos in candidates]

    best = _shortest(results)
    logger.debug(
        "Searched %d candidate sources, %d reached the goal, best cost %s",
        len(candidates),
        sum(1 for result in results if result is not None),
        best.cost if best else None,
    )
    return best


def _reverse_search(
    grid: TerrainGrid, predicate: Predicate | None, config: SearchConfig
) -> PathResult | None:
    def accept(pos: Coordinate) -> bool:
        if predicate is None:
            return grid.value(pos) == LOWEST
        return predicate(grid, pos)

    found = bfs(
        grid.goal,
        partial(predecessors, grid),
        accept,
        max_expansions=config.max_expansions,
    )
    if found is None:
        logger.debug("Reverse search from %s found no matching source", grid.goal)
        return None
    path, _ = found
    path.reverse()
    return PathResult.from_path(path)


def _shortest(results: Iterable[PathResult | None]) -> PathResult | None:
    best: PathResult | None = None
    for result in results:
        if result is None:
            continue
        if best is None or result.cost < best.cost:
            best = result
    return best
