"""Closed enumerations used by the grid model and their string codecs."""

from __future__ import annotations

from enum import StrEnum

from .errors import DecodeError


class CellType(StrEnum):
    """Terrain or role of a cell."""

    MOUNTAIN = "mountain"
    OPEN = "open"
    CITY = "city"
    GENERAL = "general"


class Direction(StrEnum):
    """Directions a move can be issued in."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


IMPASSABLE = CellType.MOUNTAIN

_CELL_TYPES = {member.value: member for member in CellType}
_DIRECTIONS = {member.value: member for member in Direction}


def encode_cell_type(kind: CellType) -> str:
    """Return the wire code of ``kind``; raise ``DecodeError`` for non-members."""

    if not isinstance(kind, CellType):
        raise DecodeError(f"not a valid CellType: {kind!r}")
    return kind.value


def decode_cell_type(code: object) -> CellType:
    """Parse a case-sensitive wire code into a ``CellType``.

    >>> decode_cell_type("city")
    <CellType.CITY: 'city'>
    """

    if isinstance(code, str):
        kind = _CELL_TYPES.get(code)
        if kind is not None:
            return kind
    raise DecodeError(f"not a valid CellType: {code!r}")


def encode_direction(direction: Direction) -> str:
    """Return the wire code of ``direction``; raise ``DecodeError`` for non-members."""

    if not isinstance(direction, Direction):
        raise DecodeError(f"not a valid Direction: {direction!r}")
    return direction.value


def decode_direction(code: object) -> Direction:
    """Parse a case-sensitive wire code into a ``Direction``."""

    if isinstance(code, str):
        direction = _DIRECTIONS.get(code)
        if direction is not None:
            return direction
    raise DecodeError(f"not a valid Direction: {code!r}")
