"""Errors raised while building or querying terrain grids."""

from __future__ import annotations

from hillclimb.terrain.coordinate import Coordinate


class TerrainError(ValueError):
    """Base class for malformed terrain input or invalid grid access."""


class MissingMarkerError(TerrainError):
    def __init__(self, marker: str) -> None:
        super().__init__(f"Marker {marker!r} not found in terrain data.")
        self.marker = marker


class DuplicateMarkerError(TerrainError):
    def __init__(self, marker: str, positions: list[Coordinate]) -> None:
        listed = ", ".join(f"({pos.x}, {pos.y})" for pos in positions)
        super().__init__(
            f"Marker {marker!r} must occur exactly once, found at {listed}."
        )
        self.marker = marker
        self.positions = positions


class GridShapeError(TerrainError):
    """Dimensions are invalid or disagree with the number of cells."""


class InvalidCellError(TerrainError):
    def __init__(self, char: str, index: int) -> None:
        super().__init__(f"Invalid terrain cell {char!r} at index {index}.")
        self.char = char
        self.index = index


class OutOfBoundsError(TerrainError, IndexError):
    def __init__(self, pos: Coordinate, width: int, height: int) -> None:
        super().__init__(
            f"Coordinate ({pos.x}, {pos.y}) is outside a {width}x{height} grid."
        )
        self.pos = pos
        self.width = width
        self.height = height


class SearchBudgetExceededError(RuntimeError):
    def __init__(self, expansions: int) -> None:
        super().__init__(f"Search gave up after expanding {expansions} nodes.")
        self.expansions = expansions
