"""Adapters between the grid model and a rendering surface."""

from .binding import CellState, SurfaceBinding, read_cell_state
from .surface import MemoryNode, MemorySurface, Surface

__all__ = [
    "CellState",
    "MemoryNode",
    "MemorySurface",
    "Surface",
    "SurfaceBinding",
    "read_cell_state",
]
