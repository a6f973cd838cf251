import pytest
from pydantic import ValidationError

from hillclimb.search.contracts import PathResult, PathSummary
from hillclimb.terrain.coordinate import Coordinate


def test_cost_must_match_path_length() -> None:
    path = (Coordinate(0, 0), Coordinate(1, 0))
    assert PathResult(path=path, cost=1).steps == 1

    with pytest.raises(ValueError):
        PathResult(path=path, cost=2)
    with pytest.raises(ValueError):
        PathResult(path=(), cost=-1)


def test_summary_serializes_coordinates() -> None:
    result = PathResult.from_path(
        [Coordinate(0, 0), Coordinate(0, 1), Coordinate(1, 1)]
    )
    summary = result.summary()

    assert summary.model_dump() == {
        "source": (0, 0),
        "goal": (1, 1),
        "steps": 2,
        "path": [(0, 0), (0, 1), (1, 1)],
    }
    assert PathSummary.model_validate_json(summary.model_dump_json()) == summary


def test_summary_rejects_inconsistent_steps() -> None:
    with pytest.raises(ValidationError):
        PathSummary(source=(0, 0), goal=(0, 1), steps=3, path=[(0, 0), (0, 1)])
