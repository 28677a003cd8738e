"""
Unit tests for the Grid.

Tests shape after init/clear, indexed and neighbor queries, and the single
selection invariant.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from frontline.domain.cell import Cell
from frontline.domain.coordinates import Coordinates, opposite
from frontline.domain.enums import CellType, Direction
from frontline.domain.errors import FrontlineError, InvalidIndexError
from frontline.domain.grid import Grid


def _is_default(cell: Cell) -> bool:
    return (cell.kind, cell.units, cell.owner, cell.visible) == (CellType.OPEN, None, None, False)


def _selected_indices(grid: Grid) -> list[int]:
    return [cell.index() for cell in grid if cell.selected]


class TestShape:
    def test_empty_grid(self) -> None:
        grid = Grid()
        assert grid.height() == 0
        assert grid.width() == 0
        assert grid.length() == 0
        assert grid.selected is None

    @given(rows=st.integers(min_value=0, max_value=12), cols=st.integers(min_value=0, max_value=12))
    def test_init_shape_and_defaults(self, rows: int, cols: int) -> None:
        grid = Grid()
        grid.init(rows, cols)
        assert grid.height() == rows
        assert grid.width() == (cols if rows else 0)
        assert grid.length() == rows * cols
        assert len(list(grid)) == rows * cols
        assert all(_is_default(cell) and not cell.selected for cell in grid)

    def test_init_clears_previous_state(self, grid: Grid) -> None:
        old = grid.get_cell(4)
        old.units = 12
        grid.select(4)
        grid.init(2, 5)
        assert grid.height() == 2
        assert grid.width() == 5
        assert grid.selected is None
        assert all(_is_default(cell) for cell in grid)
        with pytest.raises(FrontlineError):
            old.index()

    def test_init_is_idempotent(self) -> None:
        grid = Grid()
        grid.init(3, 3)
        grid.init(3, 3)
        assert grid.length() == 9
        assert [cell.index() for cell in grid] == list(range(9))

    def test_init_rejects_negative_dimensions(self) -> None:
        with pytest.raises(ValueError):
            Grid().init(-1, 3)

    def test_clear(self, grid: Grid) -> None:
        cell = grid.get_cell(0)
        grid.select(0)
        grid.clear()
        assert grid.length() == 0
        assert grid.height() == 0
        assert grid.selected is None
        with pytest.raises(FrontlineError):
            cell.index()


class TestCellAccess:
    def test_get_cell(self, grid: Grid) -> None:
        assert grid.get_cell(0).index() == 0
        assert grid.get_cell(8).index() == 8

    @pytest.mark.parametrize("bad", [-1, 9, 1.5, "1", None])
    def test_get_cell_out_of_range(self, grid: Grid, bad: object) -> None:
        with pytest.raises(InvalidIndexError):
            grid.get_cell(bad)  # type: ignore[arg-type]
        assert grid.get_cell_safe(bad) is None

    def test_out_of_range_error_is_an_index_error(self, grid: Grid) -> None:
        with pytest.raises(IndexError):
            grid.get_cell(100)

    def test_get_cell_safe(self, grid: Grid) -> None:
        assert isinstance(grid.get_cell_safe(0), Cell)
        assert isinstance(grid.get_cell_safe(8), Cell)

    def test_coordinates_and_index(self) -> None:
        grid = Grid()
        grid.init(3, 4)
        assert grid.coordinates(5) == Coordinates(1, 1)
        assert grid.index(Coordinates(1, 1)) == 5
        with pytest.raises(InvalidIndexError):
            grid.coordinates(12)


class TestNeighbors:
    @pytest.fixture
    def wide(self) -> Grid:
        grid = Grid()
        grid.init(3, 4)
        return grid

    def test_neighbors_of_center(self, wide: Grid) -> None:
        assert wide.get_neighbor_cell(5, Direction.UP).index() == 1
        assert wide.get_neighbor_cell(5, Direction.LEFT).index() == 4
        assert wide.get_neighbor_cell(5, Direction.RIGHT).index() == 6
        assert wide.get_neighbor_cell(5, Direction.DOWN).index() == 9

    def test_missing_neighbors(self, wide: Grid) -> None:
        assert wide.get_neighbor_cell(1, Direction.UP) is None
        assert wide.get_neighbor_cell(0, Direction.LEFT) is None
        assert wide.get_neighbor_cell(3, Direction.RIGHT) is None
        assert wide.get_neighbor_cell(11, Direction.DOWN) is None
        assert wide.get_neighbor_cell(12, Direction.UP) is None

    def test_neighbor_cells_order(self, wide: Grid) -> None:
        assert [cell.index() for cell in wide.get_neighbor_cells(5)] == [1, 9, 4, 6]
        assert [cell.index() for cell in wide.get_neighbor_cells(0)] == [4, 1]
        assert [cell.index() for cell in wide.get_neighbor_cells(11)] == [7, 10]
        assert wide.get_neighbor_cells(42) == []

    def test_single_cell_has_no_neighbors(self) -> None:
        grid = Grid()
        grid.init(1, 1)
        assert grid.get_neighbor_cells(0) == []

    @pytest.mark.parametrize("index", range(12))
    @pytest.mark.parametrize("direction", list(Direction))
    def test_symmetry(self, wide: Grid, index: int, direction: Direction) -> None:
        target = wide.get_neighbor_cell(index, direction)
        if target is not None:
            back = wide.get_neighbor_cell(target.index(), opposite(direction))
            assert back.index() == index


class TestSelection:
    def test_select(self, grid: Grid) -> None:
        grid.select(2)
        assert grid.selected == 2
        assert grid.get_cell(2).selected
        assert _selected_indices(grid) == [2]

    def test_select_moves_selection(self, grid: Grid) -> None:
        grid.select(2)
        grid.select(3)
        assert grid.selected == 3
        assert not grid.get_cell(2).selected
        assert _selected_indices(grid) == [3]

    def test_select_index_zero(self, grid: Grid) -> None:
        grid.select(0)
        grid.select(1)
        assert _selected_indices(grid) == [1]

    @pytest.mark.parametrize("bad", [-1, 9, None, "3"])
    def test_select_invalid_deselects_but_keeps_index(self, grid: Grid, bad: object) -> None:
        grid.select(4)
        grid.select(bad)
        assert grid.selected == 4
        assert _selected_indices(grid) == []

    def test_select_invalid_without_previous(self, grid: Grid) -> None:
        grid.select(99)
        assert grid.selected is None
        assert _selected_indices(grid) == []

    def test_selection_does_not_touch_other_attributes(self, grid: Grid) -> None:
        cell = grid.get_cell(4)
        cell.kind = CellType.CITY
        cell.units = 3
        grid.select(4)
        assert cell.kind is CellType.CITY
        assert cell.units == 3


class RecordingObserver:
    def __init__(self) -> None:
        self.events: list[tuple[str, int | None]] = []

    def grid_initialized(self, grid: Grid) -> None:
        self.events.append(("init", None))

    def grid_cleared(self, grid: Grid) -> None:
        self.events.append(("clear", None))

    def cell_changed(self, grid: Grid, index: int) -> None:
        self.events.append(("cell", index))


class TestObservers:
    def test_notifications(self) -> None:
        grid = Grid()
        observer = RecordingObserver()
        grid.subscribe(observer)
        grid.init(2, 2)
        grid.get_cell(3).units = 5
        grid.select(1)
        grid.select(2)
        assert observer.events == [
            ("clear", None),
            ("init", None),
            ("cell", 3),
            ("cell", 1),
            ("cell", 1),
            ("cell", 2),
        ]

    def test_rejected_write_still_validates_first(self) -> None:
        grid = Grid()
        observer = RecordingObserver()
        grid.init(1, 1)
        grid.subscribe(observer)
        with pytest.raises(ValueError):
            grid.get_cell(0).units = -3
        assert observer.events == []

    def test_unsubscribe(self) -> None:
        grid = Grid()
        observer = RecordingObserver()
        grid.subscribe(observer)
        grid.unsubscribe(observer)
        grid.init(1, 1)
        assert observer.events == []
