from .command import MoveCommand
from .grid import CellSnapshot, ClickRequest, GridSnapshot, KeyRequest
from .update import TilePatch, UpdateEnvelope

__all__ = [
    "CellSnapshot",
    "ClickRequest",
    "GridSnapshot",
    "KeyRequest",
    "MoveCommand",
    "TilePatch",
    "UpdateEnvelope",
]
