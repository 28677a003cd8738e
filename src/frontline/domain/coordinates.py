"""
Rectangular coordinate system for the Frontline grid.

Cells are stored row-major, so every cell has two equivalent addresses:

1. Linear index - a single integer in ``[0, height * width)``
   - Used on the wire (tile updates, move commands)
   - Used as the Grid's selection

2. Coordinates (row, col) - for boundary checks
   - row: 0 is the top row
   - col: 0 is the leftmost column
   - Conversion: index = row * width + col

Neighbors only exist in the four cardinal directions. A neighbor lookup never
wraps around: moving right from the last column or up from the first row
yields no neighbor.
"""

from __future__ import annotations

from dataclasses import dataclass

from .enums import Direction
from .errors import InvalidIndexError

OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

# Order used when listing every neighbor of a cell.
NEIGHBOR_ORDER: tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True, slots=True)
class Coordinates:
    """
    Cartesian position of a cell.

    Attributes:
        row: Row index, 0 at the top
        col: Column index, 0 on the left

    Both values must be non-negative integers. Whether they fit inside a given
    grid is checked by the grid, not here.

    Example:
        >>> Coordinates(row=1, col=2)
        Coordinates(row=1, col=2)
        >>> Coordinates(row=-1, col=0)
        Traceback (most recent call last):
        ...
        TypeError: invalid coordinates: -1, 0
    """

    row: int
    col: int

    def __post_init__(self) -> None:
        if not (_is_int(self.row) and _is_int(self.col)) or self.row < 0 or self.col < 0:
            raise TypeError(f"invalid coordinates: {self.row!r}, {self.col!r}")


def is_valid_index(index: object, length: int) -> bool:
    """Return True when ``index`` is an integer in ``[0, length)``."""

    return _is_int(index) and 0 <= index < length  # type: ignore[operator]


def coordinates(index: int, width: int, length: int) -> Coordinates:
    """
    Convert a linear index into coordinates.

    Args:
        index: Linear cell index
        width: Number of columns of the grid
        length: Number of cells of the grid

    Returns:
        The ``Coordinates`` of the cell

    Raises:
        InvalidIndexError: If ``index`` is not an integer in ``[0, length)``

    Example:
        >>> coordinates(5, width=3, length=9)
        Coordinates(row=1, col=2)
    """
    if not is_valid_index(index, length):
        raise InvalidIndexError(index, length)
    return Coordinates(index // width, index % width)


def index(coords: Coordinates, width: int) -> int:
    """
    Convert coordinates into a linear index.

    No bounds check is done against the grid: coordinates built out of range
    are a caller error.

    Example:
        >>> index(Coordinates(1, 2), width=3)
        5
    """
    if not isinstance(coords, Coordinates):
        raise TypeError(f"expected Coordinates, got {type(coords).__name__}")
    return coords.row * width + coords.col


def neighbor(index: int, direction: Direction, height: int, width: int) -> int | None:
    """
    Return the index of the neighbor of ``index`` in ``direction``.

    Args:
        index: A valid linear index
        direction: Direction of the neighbor
        height: Number of rows of the grid
        width: Number of columns of the grid

    Returns:
        The neighbor's index, or None when the neighbor would cross the edge
        of the grid (or ``index`` itself is invalid)

    Example:
        >>> neighbor(4, Direction.UP, height=3, width=3)
        1
        >>> neighbor(0, Direction.LEFT, height=3, width=3) is None
        True
    """
    length = height * width
    if not is_valid_index(index, length):
        return None
    coords = coordinates(index, width, length)
    if direction is Direction.RIGHT:
        return None if coords.col == width - 1 else index + 1
    if direction is Direction.LEFT:
        return None if coords.col == 0 else index - 1
    if direction is Direction.UP:
        return None if coords.row == 0 else index - width
    if direction is Direction.DOWN:
        return None if coords.row == height - 1 else index + width
    raise ValueError(f"unknown direction: {direction!r}")


def opposite(direction: Direction) -> Direction:
    """Return the direction pointing back the way ``direction`` came."""

    return OPPOSITES[direction]
