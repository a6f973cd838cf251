"""Shortest-path search over terrain grids."""

from hillclimb.search.astar import astar
from hillclimb.search.bfs import bfs
from hillclimb.search.contracts import PathResult, PathSummary
from hillclimb.search.queries import shortest_path, shortest_path_from_any

__all__ = [
    "PathResult",
    "PathSummary",
    "astar",
    "bfs",
    "shortest_path",
    "shortest_path_from_any",
]
