"""Immutable grid coordinates and their axis-aligned neighbors."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Coordinate:
    x: int
    y: int

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError(f"Coordinate components must be non-negative: {self}")

    def up(self) -> Coordinate | None:
        if self.y == 0:
            return None
        return Coordinate(self.x, self.y - 1)

    def down(self) -> Coordinate:
        return Coordinate(self.x, self.y + 1)

    def left(self) -> Coordinate | None:
        if self.x == 0:
            return None
        return Coordinate(self.x - 1, self.y)

    def right(self) -> Coordinate:
        return Coordinate(self.x + 1, self.y)

    def neighbors(self) -> list[Coordinate]:
        """Return up, down, right and left, skipping the ones that would underflow.

        Neighbors are not checked against any grid size.
        """
        candidates = [self.up(), self.down(), self.right(), self.left()]
        return [pos for pos in candidates if pos is not None]

    def manhattan(self, other: Coordinate) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)
