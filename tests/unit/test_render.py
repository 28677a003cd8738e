"""Tests for mirroring the grid onto a rendering surface."""

import pytest

from frontline.domain.enums import CellType
from frontline.domain.errors import CellValidationError
from frontline.domain.grid import Grid
from frontline.render import CellState, MemorySurface, SurfaceBinding, read_cell_state
from frontline.render.binding import (
    OWNER_ATTRIBUTE,
    SELECTED_ATTRIBUTE,
    TYPE_ATTRIBUTE,
    VISIBLE_ATTRIBUTE,
)


@pytest.fixture
def surface() -> MemorySurface:
    return MemorySurface()


@pytest.fixture
def binding(surface: MemorySurface) -> SurfaceBinding:
    grid = Grid()
    binding = SurfaceBinding(grid, surface)
    grid.init(2, 3)
    return binding


class TestStructure:
    def test_init_builds_rows(self, binding: SurfaceBinding, surface: MemorySurface) -> None:
        assert len(surface.rows) == 2
        assert all(len(row) == 3 for row in surface.rows)

    def test_reinit_replaces_rows(self, binding: SurfaceBinding, surface: MemorySurface) -> None:
        binding.grid.init(1, 1)
        assert len(surface.rows) == 1
        assert len(surface.rows[0]) == 1

    def test_clear_removes_rows(self, binding: SurfaceBinding, surface: MemorySurface) -> None:
        binding.grid.clear()
        assert surface.rows == []

    def test_binding_an_allocated_grid(self, surface: MemorySurface) -> None:
        grid = Grid()
        grid.init(2, 2)
        grid.get_cell(3).units = 8
        SurfaceBinding(grid, surface)
        assert surface.get_text(surface.node_at(1, 1)) == "8"

    def test_index_of(self, binding: SurfaceBinding, surface: MemorySurface) -> None:
        assert binding.index_of(surface.node_at(1, 2)) == 5
        assert binding.index_of(surface.create_node()) is None

    def test_close_stops_mirroring(self, binding: SurfaceBinding, surface: MemorySurface) -> None:
        binding.close()
        binding.grid.get_cell(0).units = 4
        assert surface.get_text(surface.node_at(0, 0)) == ""


class TestAttributes:
    def test_default_cell(self, binding: SurfaceBinding, surface: MemorySurface) -> None:
        node = surface.node_at(0, 0)
        assert node.attributes == {TYPE_ATTRIBUTE: "open"}
        assert node.text == ""
        assert read_cell_state(surface, node) == CellState()

    def test_pushes_changes(self, binding: SurfaceBinding, surface: MemorySurface) -> None:
        cell = binding.grid.get_cell(4)
        cell.kind = CellType.CITY
        cell.units = 99
        cell.owner = 2
        cell.visible = True
        node = surface.node_at(1, 1)
        assert node.attributes == {
            TYPE_ATTRIBUTE: "city",
            OWNER_ATTRIBUTE: "2",
            VISIBLE_ATTRIBUTE: "true",
        }
        assert node.text == "99"
        assert read_cell_state(surface, node) == CellState(
            kind=CellType.CITY, units=99, owner=2, visible=True
        )

    def test_unset_values_remove_attributes(
        self, binding: SurfaceBinding, surface: MemorySurface
    ) -> None:
        cell = binding.grid.get_cell(0)
        cell.owner = 1
        cell.units = 3
        cell.owner = None
        cell.units = None
        node = surface.node_at(0, 0)
        assert OWNER_ATTRIBUTE not in node.attributes
        assert node.text == ""

    def test_selection_is_mirrored(self, binding: SurfaceBinding, surface: MemorySurface) -> None:
        binding.grid.select(1)
        assert surface.get_attribute(surface.node_at(0, 1), SELECTED_ATTRIBUTE) == "true"
        binding.grid.select(2)
        assert surface.get_attribute(surface.node_at(0, 1), SELECTED_ATTRIBUTE) is None
        assert read_cell_state(surface, surface.node_at(0, 2)).selected is True


class TestReadCellState:
    @pytest.mark.parametrize(
        "key, value",
        [
            (TYPE_ATTRIBUTE, "General"),
            (TYPE_ATTRIBUTE, ""),
            (OWNER_ATTRIBUTE, "-1"),
            (OWNER_ATTRIBUTE, "one"),
            (VISIBLE_ATTRIBUTE, "True"),
            (VISIBLE_ATTRIBUTE, "1"),
            (SELECTED_ATTRIBUTE, "yes"),
        ],
    )
    def test_corrupt_attributes(self, surface: MemorySurface, key: str, value: str) -> None:
        node = surface.create_node()
        surface.set_attribute(node, key, value)
        with pytest.raises(CellValidationError):
            read_cell_state(surface, node)

    @pytest.mark.parametrize("text", ["-3", "1.5", "abc", "٣"])
    def test_corrupt_units_text(self, surface: MemorySurface, text: str) -> None:
        node = surface.create_node()
        surface.set_text(node, text)
        with pytest.raises(CellValidationError):
            read_cell_state(surface, node)

    def test_explicit_false(self, surface: MemorySurface) -> None:
        node = surface.create_node()
        surface.set_attribute(node, VISIBLE_ATTRIBUTE, "false")
        surface.set_text(node, "42")
        state = read_cell_state(surface, node)
        assert state.visible is False
        assert state.units == 42
