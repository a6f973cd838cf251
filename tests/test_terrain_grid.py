import pytest

from hillclimb.terrain.coordinate import Coordinate
from hillclimb.terrain.errors import (
    DuplicateMarkerError,
    GridShapeError,
    InvalidCellError,
    MissingMarkerError,
    OutOfBoundsError,
    TerrainError,
)
from hillclimb.terrain.grid import TerrainGrid, at_elevation, at_most_elevation

SAMPLE = "SabqponmabcryxxlaccszExkacctuvwjabdefghi"


def test_markers_become_start_and_goal() -> None:
    grid = TerrainGrid.new(SAMPLE, 8, 5)

    assert grid.start == Coordinate(0, 0)
    assert grid.goal == Coordinate(5, 2)
    assert grid.value(grid.start) == "a"
    assert grid.value(grid.goal) == "z"
    assert grid.elevation(grid.start) == 0
    assert grid.elevation(grid.goal) == 25
    assert grid.value(Coordinate(3, 0)) == "q"


def test_bytes_input_is_accepted() -> None:
    grid = TerrainGrid(SAMPLE.encode("ascii"), 8, 5)
    assert grid.goal == Coordinate(5, 2)


def test_non_ascii_bytes_are_invalid_cells() -> None:
    with pytest.raises(InvalidCellError) as excinfo:
        TerrainGrid(b"Sa\xffbcE", 3, 2)
    assert excinfo.value.index == 2
    assert isinstance(excinfo.value, TerrainError)


def test_repr_of_partially_built_grid() -> None:
    grid = TerrainGrid.__new__(TerrainGrid)
    assert repr(grid) == "TerrainGrid(width=None, height=None, start=None, goal=None)"

    built = TerrainGrid("SabcdE", 3, 2)
    assert "width=3" in repr(built)
    assert "goal=Coordinate(x=2, y=1)" in repr(built)


def test_rows_keep_markers() -> None:
    grid = TerrainGrid(SAMPLE, 8, 5)
    rows = grid.rows()
    assert rows[0] == "Sabqponm"
    assert rows[2] == "accszExk"
    assert len(rows) == 5


def test_starting_positions_default_to_lowest_cells() -> None:
    grid = TerrainGrid(SAMPLE, 8, 5)
    positions = list(grid.starting_positions())

    assert positions[0] == Coordinate(0, 0)
    assert positions[1] == Coordinate(1, 0)
    assert len(positions) == 6
    assert all(grid.value(pos) == "a" for pos in positions)
    assert positions == sorted(positions, key=lambda pos: (pos.y, pos.x))
    assert list(grid.starting_positions()) == positions


def test_starting_positions_with_predicate() -> None:
    grid = TerrainGrid(SAMPLE, 8, 5)

    assert list(grid.starting_positions(at_elevation("z"))) == [
        Coordinate(4, 2),
        grid.goal,
    ]
    at_most_b = list(grid.starting_positions(at_most_elevation("b")))
    assert Coordinate(3, 0) not in at_most_b
    assert Coordinate(2, 0) in at_most_b
    assert Coordinate(1, 1) in at_most_b
    assert len(at_most_b) == 9


def test_elevation_helpers_reject_bad_letters() -> None:
    with pytest.raises(ValueError):
        at_elevation("S")
    with pytest.raises(ValueError):
        at_most_elevation("ab")


def test_manhattan_distance_to_goal() -> None:
    grid = TerrainGrid(SAMPLE, 8, 5)
    assert grid.manhattan_distance(grid.goal) == 0
    assert grid.manhattan_distance(Coordinate(0, 0)) == 7
    assert grid.manhattan_distance(Coordinate(7, 4)) == 4


@pytest.mark.parametrize(
    ("raw", "marker"),
    [("abcdEf", "S"), ("abSdef", "E")],
)
def test_missing_marker_fails(raw: str, marker: str) -> None:
    with pytest.raises(MissingMarkerError) as excinfo:
        TerrainGrid(raw, 3, 2)
    assert excinfo.value.marker == marker


def test_duplicate_marker_is_rejected() -> None:
    with pytest.raises(DuplicateMarkerError) as excinfo:
        TerrainGrid("SaSbcE", 3, 2)
    assert excinfo.value.marker == "S"
    assert excinfo.value.positions == [Coordinate(0, 0), Coordinate(2, 0)]


def test_shape_must_match_cells() -> None:
    with pytest.raises(GridShapeError):
        TerrainGrid("SabcdE", 4, 2)
    with pytest.raises(GridShapeError):
        TerrainGrid("", 0, 0)


def test_unknown_cells_are_rejected() -> None:
    with pytest.raises(InvalidCellError) as excinfo:
        TerrainGrid("Sa#bcE", 3, 2)
    assert excinfo.value.index == 2


def test_out_of_bounds_access_raises() -> None:
    grid = TerrainGrid(SAMPLE, 8, 5)

    assert not grid.in_bounds(Coordinate(8, 0))
    with pytest.raises(OutOfBoundsError):
        grid.value(Coordinate(8, 0))
    with pytest.raises(IndexError):
        grid.elevation(Coordinate(0, 5))


def test_errors_share_a_base() -> None:
    assert issubclass(MissingMarkerError, TerrainError)
    assert issubclass(TerrainError, ValueError)
