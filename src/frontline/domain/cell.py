"""Typed, validated state of one grid position."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .enums import CellType
from .errors import CellValidationError, FrontlineError

if TYPE_CHECKING:
    from .grid import Grid


def validate_count(attribute: str, value: object) -> int | None:
    """Check a unit count or player id: a non-negative ``int`` or None."""

    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise CellValidationError(attribute, value, "expected a non-negative integer")
    if value < 0:
        raise CellValidationError(attribute, value, "must not be negative")
    return value


def validate_flag(attribute: str, value: object) -> bool | None:
    """Check a flag: exactly True, False or None. Truthy stand-ins are rejected."""

    if value is None or value is True or value is False:
        return value
    raise CellValidationError(attribute, value, "expected a boolean")


def validate_kind(value: object) -> CellType | None:
    if value is None or isinstance(value, CellType):
        return value
    raise CellValidationError("kind", value, "expected a CellType")


class Cell:
    """
    One grid position's observable state.

    Attributes:
        kind: Terrain or role of the cell, ``CellType.OPEN`` when unset
        units: Army count, None when unknown or empty
        owner: Owning player id, None when unowned
        visible: Whether the player currently observes the cell
        selected: Whether the owning grid has this cell selected (read-only)

    Every setter validates before writing; a rejected value leaves the cell
    unchanged. Assigning None resets the attribute to its default.
    """

    __slots__ = ("_kind", "_units", "_owner", "_visible", "_grid", "_position")

    def __init__(self) -> None:
        self._kind: CellType | None = None
        self._units: int | None = None
        self._owner: int | None = None
        self._visible: bool | None = None
        self._grid: Grid | None = None
        self._position: int | None = None

    def __repr__(self) -> str:
        return (
            f"Cell(index={self._position!r}, kind={self.kind.value!r}, units={self._units!r}, "
            f"owner={self._owner!r}, visible={self.visible!r})"
        )

    @property
    def kind(self) -> CellType:
        return CellType.OPEN if self._kind is None else self._kind

    @kind.setter
    def kind(self, value: CellType | None) -> None:
        self._kind = validate_kind(value)
        self._changed()

    @property
    def units(self) -> int | None:
        return self._units

    @units.setter
    def units(self, value: int | None) -> None:
        self._units = validate_count("units", value)
        self._changed()

    @property
    def owner(self) -> int | None:
        return self._owner

    @owner.setter
    def owner(self, value: int | None) -> None:
        self._owner = validate_count("owner", value)
        self._changed()

    @property
    def visible(self) -> bool:
        return bool(self._visible)

    @visible.setter
    def visible(self, value: bool | None) -> None:
        self._visible = validate_flag("visible", value)
        self._changed()

    @property
    def selected(self) -> bool:
        if self._grid is None or self._position is None:
            return False
        return self._grid.is_selected(self._position)

    def index(self) -> int:
        """Return this cell's position in its grid; raise if the cell is detached."""

        if self._grid is None or self._position is None:
            raise FrontlineError("cell is not attached to a grid")
        return self._position

    def reset(self, kind: CellType | None = None) -> None:
        """Clear every attribute at once, optionally forcing ``kind``."""

        self._kind = validate_kind(kind)
        self._units = None
        self._owner = None
        self._visible = None
        self._changed()

    def _attach(self, grid: Grid, position: int) -> None:
        self._grid = grid
        self._position = position

    def _detach(self) -> None:
        self._grid = None
        self._position = None

    def _changed(self) -> None:
        if self._grid is not None and self._position is not None:
            self._grid.notify(self._position)
