"""Climb rule: a step may descend any amount but ascend at most one level."""

from __future__ import annotations

from typing import Sequence

from hillclimb.terrain.coordinate import Coordinate
from hillclimb.terrain.grid import TerrainGrid

MAX_CLIMB = 1
STEP_COST = 1


def successors(grid: TerrainGrid, pos: Coordinate) -> list[tuple[Coordinate, int]]:
    level = grid.elevation(pos)
    return [
        (neighbor, STEP_COST)
        for neighbor in _neighbors_in_bounds(grid, pos)
        if grid.elevation(neighbor) <= level + MAX_CLIMB
    ]


def predecessors(grid: TerrainGrid, pos: Coordinate) -> list[tuple[Coordinate, int]]:
    """Return the cells that can step onto ``pos`` under the climb rule."""
    level = grid.elevation(pos)
    return [
        (neighbor, STEP_COST)
        for neighbor in _neighbors_in_bounds(grid, pos)
        if level <= grid.elevation(neighbor) + MAX_CLIMB
    ]


def can_step(grid: TerrainGrid, src: Coordinate, dst: Coordinate) -> bool:
    grid.check_bounds(src)
    grid.check_bounds(dst)
    if src.manhattan(dst) != 1:
        return False
    return grid.elevation(dst) <= grid.elevation(src) + MAX_CLIMB


def is_valid_path(grid: TerrainGrid, path: Sequence[Coordinate]) -> bool:
    return all(can_step(grid, src, dst) for src, dst in zip(path, path[1:]))


def _neighbors_in_bounds(grid: TerrainGrid, pos: Coordinate) -> list[Coordinate]:
    grid.check_bounds(pos)
    return [neighbor for neighbor in pos.neighbors() if grid.in_bounds(neighbor)]
