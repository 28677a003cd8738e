"""Rectangular collection of cells plus the player's current selection."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol

from . import coordinates as coords
from .cell import Cell
from .enums import Direction
from .errors import InvalidIndexError


class GridObserver(Protocol):
    """Receives structural and per-cell change notifications from a grid."""

    def grid_initialized(self, grid: Grid) -> None: ...

    def grid_cleared(self, grid: Grid) -> None: ...

    def cell_changed(self, grid: Grid, index: int) -> None: ...


class Grid:
    """
    Row-major grid of ``Cell`` records.

    The grid is the only owner of the selection. ``selected`` is the index of
    the last successfully selected cell; ``Cell.selected`` is computed from it.
    Selecting an invalid index deselects the highlighted cell but keeps the
    recorded index, so the player's move source survives a stray click.
    """

    def __init__(self) -> None:
        self._rows: list[list[Cell]] = []
        self._selected: int | None = None
        self._highlighted = False
        self._observers: list[GridObserver] = []

    def __iter__(self) -> Iterator[Cell]:
        for row in self._rows:
            yield from row

    def __len__(self) -> int:
        return self.length()

    def __repr__(self) -> str:
        return f"Grid(height={self.height()}, width={self.width()}, selected={self._selected!r})"

    # --- Observers -------------------------------------------------------------

    def subscribe(self, observer: GridObserver) -> None:
        self._observers.append(observer)

    def unsubscribe(self, observer: GridObserver) -> None:
        self._observers.remove(observer)

    def notify(self, index: int) -> None:
        """Tell observers that the cell at ``index`` changed."""

        for observer in self._observers:
            observer.cell_changed(self, index)

    # --- Shape -----------------------------------------------------------------

    def height(self) -> int:
        return len(self._rows)

    def width(self) -> int:
        if not self._rows:
            return 0
        # Rows are uniform, the first one is representative.
        return len(self._rows[0])

    def length(self) -> int:
        return self.height() * self.width()

    def is_valid_index(self, index: object) -> bool:
        return coords.is_valid_index(index, self.length())

    def coordinates(self, index: int) -> coords.Coordinates:
        """Return the (row, col) of ``index``; raise ``InvalidIndexError`` when out of range."""

        return coords.coordinates(index, self.width(), self.length())

    def index(self, coordinates: coords.Coordinates) -> int:
        return coords.index(coordinates, self.width())

    # --- Cell access -----------------------------------------------------------

    def get_cell(self, index: int) -> Cell:
        if not self.is_valid_index(index):
            raise InvalidIndexError(index, self.length())
        position = self.coordinates(index)
        return self._rows[position.row][position.col]

    def get_cell_safe(self, index: object) -> Cell | None:
        try:
            return self.get_cell(index)  # type: ignore[arg-type]
        except InvalidIndexError:
            return None

    def get_neighbor_cell(self, index: int, direction: Direction) -> Cell | None:
        """Return the adjacent cell in ``direction``, or None at an edge or for a bad index."""

        target = coords.neighbor(index, direction, self.height(), self.width())
        if target is None:
            return None
        return self.get_cell_safe(target)

    def get_neighbor_cells(self, index: int) -> list[Cell]:
        """Return the existing neighbors of ``index`` in Up, Down, Left, Right order."""

        neighbors: list[Cell] = []
        for direction in coords.NEIGHBOR_ORDER:
            cell = self.get_neighbor_cell(index, direction)
            if cell is not None:
                neighbors.append(cell)
        return neighbors

    # --- Selection -------------------------------------------------------------

    @property
    def selected(self) -> int | None:
        return self._selected

    def is_selected(self, index: int) -> bool:
        return self._highlighted and self._selected == index

    def select(self, index: object) -> None:
        """
        Select the cell at ``index``.

        The highlighted cell is always deselected first. An invalid index then
        selects nothing and leaves ``selected`` unchanged.
        """
        if self._highlighted and self._selected is not None:
            self._highlighted = False
            self.notify(self._selected)
        if not self.is_valid_index(index):
            return
        self._selected = index  # type: ignore[assignment]
        self._highlighted = True
        self.notify(self._selected)

    # --- Lifecycle -------------------------------------------------------------

    def init(self, rows: int, cols: int) -> None:
        """Clear the grid, then allocate ``rows * cols`` default cells row-major."""

        if rows < 0 or cols < 0:
            raise ValueError(f"grid dimensions must not be negative: {rows}x{cols}")
        self.clear()
        for row in range(rows):
            cells = []
            for col in range(cols):
                cell = Cell()
                cell._attach(self, row * cols + col)
                cells.append(cell)
            self._rows.append(cells)
        for observer in self._observers:
            observer.grid_initialized(self)

    def clear(self) -> None:
        """Remove every cell and forget the selection."""

        for cell in self:
            cell._detach()
        self._rows = []
        self._selected = None
        self._highlighted = False
        for observer in self._observers:
            observer.grid_cleared(self)
