"""Mirror grid state onto a rendering surface's string attributes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from frontline.domain.cell import Cell
from frontline.domain.coordinates import Coordinates
from frontline.domain.enums import CellType, decode_cell_type
from frontline.domain.errors import CellValidationError, DecodeError
from frontline.domain.grid import Grid

from .surface import Surface

TYPE_ATTRIBUTE = "data-type"
OWNER_ATTRIBUTE = "data-owner"
VISIBLE_ATTRIBUTE = "data-visible"
SELECTED_ATTRIBUTE = "data-selected"


@dataclass(frozen=True, slots=True)
class CellState:
    """Typed values decoded back from a surface node."""

    kind: CellType = CellType.OPEN
    units: int | None = None
    owner: int | None = None
    visible: bool = False
    selected: bool = False


class SurfaceBinding:
    """
    Keep a surface in step with a grid.

    The binding subscribes to the grid: ``init`` rebuilds the surface rows,
    ``clear`` removes them and every cell change rewrites that cell's node.
    The grid stays the source of truth; the surface is write-only from here.
    """

    def __init__(self, grid: Grid, surface: Surface[Any]) -> None:
        self.grid = grid
        self.surface = surface
        self._nodes: list[Any] = []
        grid.subscribe(self)
        if grid.length():
            self.grid_initialized(grid)

    def close(self) -> None:
        self.grid.unsubscribe(self)

    def node(self, index: int) -> Any:
        return self._nodes[index]

    def index_of(self, node: Any) -> int | None:
        """Return the grid index of ``node``, or None if the surface does not hold it."""

        position = self.surface.locate(node)
        if position is None:
            return None
        return self.grid.index(Coordinates(*position))

    def grid_initialized(self, grid: Grid) -> None:
        self.surface.remove_rows()
        self._nodes = []
        for _ in range(grid.height()):
            row = [self.surface.create_node() for _ in range(grid.width())]
            self.surface.append_row(row)
            self._nodes.extend(row)
        for cell in grid:
            self.push(cell)

    def grid_cleared(self, grid: Grid) -> None:
        self.surface.remove_rows()
        self._nodes = []

    def cell_changed(self, grid: Grid, index: int) -> None:
        # Notifications can arrive for cells of a grid that is being rebuilt.
        if index < len(self._nodes):
            self.push(grid.get_cell(index))

    def push(self, cell: Cell) -> None:
        node = self._nodes[cell.index()]
        surface = self.surface
        surface.set_attribute(node, TYPE_ATTRIBUTE, cell.kind.value)
        surface.set_attribute(node, OWNER_ATTRIBUTE, _optional_text(cell.owner))
        surface.set_attribute(node, VISIBLE_ATTRIBUTE, "true" if cell.visible else None)
        surface.set_attribute(node, SELECTED_ATTRIBUTE, "true" if cell.selected else None)
        surface.set_text(node, _optional_text(cell.units) or "")


def read_cell_state(surface: Surface[Any], node: Any) -> CellState:
    """
    Decode the attributes of ``node`` back into typed values.

    Raises:
        CellValidationError: If any stored text is outside its attribute's domain
    """
    return CellState(
        kind=_read_kind(surface.get_attribute(node, TYPE_ATTRIBUTE)),
        units=_read_count("units", surface.get_text(node)),
        owner=_read_count("owner", surface.get_attribute(node, OWNER_ATTRIBUTE)),
        visible=_read_flag("visible", surface.get_attribute(node, VISIBLE_ATTRIBUTE)),
        selected=_read_flag("selected", surface.get_attribute(node, SELECTED_ATTRIBUTE)),
    )


def _optional_text(value: int | None) -> str | None:
    return None if value is None else str(value)


def _read_kind(text: str | None) -> CellType:
    if text is None:
        return CellType.OPEN
    try:
        return decode_cell_type(text)
    except DecodeError as exc:
        raise CellValidationError("kind", text, str(exc)) from exc


def _read_count(attribute: str, text: str | None) -> int | None:
    if not text:
        return None
    if not text.isdigit() or not text.isascii():
        raise CellValidationError(attribute, text, "expected a non-negative integer")
    return int(text)


def _read_flag(attribute: str, text: str | None) -> bool:
    if text is None:
        return False
    if text == "true":
        return True
    if text == "false":
        return False
    raise CellValidationError(attribute, text, 'expected "true" or "false"')
