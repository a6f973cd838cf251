"""Search results and their serializable summaries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from pydantic import BaseModel, ConfigDict, model_validator

from hillclimb.terrain.coordinate import Coordinate


class PathSummary(BaseModel):
    model_config = ConfigDict(extra="forbid")

    source: tuple[int, int]
    goal: tuple[int, int]
    steps: int
    path: list[tuple[int, int]]

    @model_validator(mode="after")
    def validate_steps(self) -> "PathSummary":
        if not self.path:
            raise ValueError("path must not be empty")
        if self.steps != len(self.path) - 1:
            raise ValueError("steps must equal len(path) - 1")
        if self.path[0] != self.source or self.path[-1] != self.goal:
            raise ValueError("path must run from source to goal")
        return self


@dataclass(frozen=True)
class PathResult:
    """Cells from source to goal inclusive, each step costing one."""

    path: tuple[Coordinate, ...]
    cost: int

    def __post_init__(self) -> None:
        if not self.path:
            raise ValueError("A path result needs at least one coordinate.")
        if self.cost != len(self.path) - 1:
            raise ValueError(
                f"Cost {self.cost} does not match a path of {len(self.path)} cells."
            )

    @classmethod
    def from_path(cls, path: list[Coordinate]) -> PathResult:
        return cls(path=tuple(path), cost=len(path) - 1)

    @property
    def source(self) -> Coordinate:
        return self.path[0]

    @property
    def goal(self) -> Coordinate:
        return self.path[-1]

    @property
    def steps(self) -> int:
        return self.cost

    def __iter__(self) -> Iterator[list[Coordinate] | int]:
        yield list(self.path)
        yield self.cost

    def summary(self) -> PathSummary:
        return PathSummary(
            source=self.source.as_tuple(),
            goal=self.goal.as_tuple(),
            steps=self.steps,
            path=[pos.as_tuple() for pos in self.path],
        )
