"""Terrain model: coordinates, heightmap grids and the climb rule."""

from hillclimb.terrain.adjacency import (
    can_step,
    is_valid_path,
    predecessors,
    successors,
)
from hillclimb.terrain.coordinate import Coordinate
from hillclimb.terrain.errors import (
    DuplicateMarkerError,
    GridShapeError,
    InvalidCellError,
    MissingMarkerError,
    OutOfBoundsError,
    SearchBudgetExceededError,
    TerrainError,
)
from hillclimb.terrain.grid import TerrainGrid, at_elevation, at_most_elevation

__all__ = [
    "Coordinate",
    "TerrainGrid",
    "TerrainError",
    "MissingMarkerError",
    "DuplicateMarkerError",
    "GridShapeError",
    "InvalidCellError",
    "OutOfBoundsError",
    "SearchBudgetExceededError",
    "at_elevation",
    "at_most_elevation",
    "successors",
    "predecessors",
    "can_step",
    "is_valid_path",
]
