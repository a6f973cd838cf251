"""Dense elevation grid with start and goal markers."""

from __future__ import annotations

import logging
from typing import Callable, Iterator

from hillclimb.terrain.coordinate import Coordinate
from hillclimb.terrain.errors import (
    DuplicateMarkerError,
    GridShapeError,
    InvalidCellError,
    MissingMarkerError,
    OutOfBoundsError,
)

logger = logging.getLogger(__name__)

START_MARKER = "S"
GOAL_MARKER = "E"
LOWEST = "a"
HIGHEST = "z"

MARKER_ELEVATIONS = {START_MARKER: LOWEST, GOAL_MARKER: HIGHEST}
VALID_CELLS = frozenset("abcdefghijklmnopqrstuvwxyz") | frozenset(MARKER_ELEVATIONS)

Predicate = Callable[["TerrainGrid", Coordinate], bool]


class TerrainGrid:
    """Read-only heightmap addressed as ``data[y * width + x]``."""

    def __init__(self, raw_cells: str | bytes, width: int, height: int) -> None:
        if isinstance(raw_cells, bytes):
            raw_cells = raw_cells.decode("latin-1")
        if width <= 0 or height <= 0:
            raise GridShapeError(f"Grid dimensions must be positive: {width}x{height}.")
        if len(raw_cells) != width * height:
            raise GridShapeError(
                f"Expected {width * height} cells for a {width}x{height} grid, "
                f"got {len(raw_cells)}."
            )
        for index, char in enumerate(raw_cells):
            if char not in VALID_CELLS:
                raise InvalidCellError(char, index)

        self._width = width
        self._height = height
        self._raw = raw_cells
        self._start = self._find_marker(START_MARKER)
        self._goal = self._find_marker(GOAL_MARKER)
        self._levels = tuple(
            ord(MARKER_ELEVATIONS.get(char, char)) - ord(LOWEST) for char in raw_cells
        )
        self._lowest = tuple(pos for pos in self.cells() if self.value(pos) == LOWEST)
        logger.debug(
            "Built %dx%d terrain grid (start=%s, goal=%s, %d lowest cells)",
            width,
            height,
            self._start,
            self._goal,
            len(self._lowest),
        )

    @classmethod
    def new(cls, raw_cells: str | bytes, width: int, height: int) -> TerrainGrid:
        return cls(raw_cells, width, height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def start(self) -> Coordinate:
        return self._start

    @property
    def goal(self) -> Coordinate:
        return self._goal

    def in_bounds(self, pos: Coordinate) -> bool:
        return pos.x < self._width and pos.y < self._height

    def check_bounds(self, pos: Coordinate) -> None:
        if not self.in_bounds(pos):
            raise OutOfBoundsError(pos, self._width, self._height)

    def value(self, pos: Coordinate) -> str:
        """Return the elevation letter at ``pos`` with markers substituted."""
        self.check_bounds(pos)
        char = self._raw[pos.y * self._width + pos.x]
        return MARKER_ELEVATIONS.get(char, char)

    def elevation(self, pos: Coordinate) -> int:
        self.check_bounds(pos)
        return self._levels[pos.y * self._width + pos.x]

    def cells(self) -> Iterator[Coordinate]:
        for y in range(self._height):
            for x in range(self._width):
                yield Coordinate(x, y)

    def starting_positions(
        self, predicate: Predicate | None = None
    ) -> Iterator[Coordinate]:
        """Yield candidate sources in row-major order.

        Without a predicate this is every cell at the lowest elevation.
        """
        if predicate is None:
            return iter(self._lowest)
        return (pos for pos in self.cells() if predicate(self, pos))

    def manhattan_distance(self, pos: Coordinate) -> int:
        return pos.manhattan(self._goal)

    def rows(self) -> list[str]:
        return [
            self._raw[y * self._width : (y + 1) * self._width]
            for y in range(self._height)
        ]

    def _find_marker(self, marker: str) -> Coordinate:
        positions = [
            Coordinate(index % self._width, index // self._width)
            for index, char in enumerate(self._raw)
            if char == marker
        ]
        if not positions:
            raise MissingMarkerError(marker)
        if len(positions) > 1:
            raise DuplicateMarkerError(marker, positions)
        return positions[0]

    def __repr__(self) -> str:
        width = getattr(self, "_width", None)
        height = getattr(self, "_height", None)
        start = getattr(self, "_start", None)
        goal = getattr(self, "_goal", None)
        return (
            f"TerrainGrid(width={width}, height={height}, "
            f"start={start}, goal={goal})"
        )


def at_elevation(letter: str) -> Predicate:
    _check_letter(letter)

    def _predicate(grid: TerrainGrid, pos: Coordinate) -> bool:
        return grid.value(pos) == letter

    return _predicate


def at_most_elevation(letter: str) -> Predicate:
    _check_letter(letter)

    def _predicate(grid: TerrainGrid, pos: Coordinate) -> bool:
        return grid.value(pos) <= letter

    return _predicate


def _check_letter(letter: str) -> None:
    if len(letter) != 1 or not LOWEST <= letter <= HIGHEST:
        raise ValueError(f"Elevation must be a single letter a-z, got {letter!r}.")
