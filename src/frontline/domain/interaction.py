"""Selection and move state machine driven by player input."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from frontline.channels import MessageChannel
from frontline.schemas.command import MoveCommand

from .enums import IMPASSABLE, Direction
from .grid import Grid

logger = logging.getLogger(__name__)

DEFAULT_KEY_BINDINGS: dict[str, Direction] = {
    "w": Direction.UP,
    "a": Direction.LEFT,
    "s": Direction.DOWN,
    "d": Direction.RIGHT,
}


class InteractionController:
    """
    Turn clicks and direction keys into selections and move commands.

    The controller is in ``NoSelection`` while ``grid.selected`` is None and in
    ``Selected(i)`` otherwise. It only touches cells through ``Grid.select``;
    ownership of the source cell is left for the server to check.
    """

    def __init__(
        self,
        grid: Grid,
        channel: MessageChannel,
        *,
        key_bindings: Mapping[str, Direction] | None = None,
    ) -> None:
        self.grid = grid
        self.channel = channel
        bindings = DEFAULT_KEY_BINDINGS if key_bindings is None else key_bindings
        # Codes are matched case-insensitively.
        self.key_bindings = {code.lower(): direction for code, direction in bindings.items()}

    def on_cell_clicked(self, index: int) -> None:
        self.grid.select(index)

    def on_key_pressed(self, code: str) -> MoveCommand | None:
        """Map a raw key code to a direction; unbound keys are ignored."""

        direction = self.key_bindings.get(code.lower())
        if direction is None:
            return None
        return self.on_direction_key(direction)

    def on_direction_key(self, direction: Direction) -> MoveCommand | None:
        """Issue a move from the selected cell, returning the command sent (if any)."""

        source = self.grid.selected
        if source is None:
            return None
        target = self.grid.get_neighbor_cell(source, direction)
        if target is None:
            return None
        if target.kind is IMPASSABLE:
            return None

        command = MoveCommand(from_=source, direction=direction)
        self.send(command)
        self.grid.select(target.index())
        return command

    def send(self, command: MoveCommand) -> None:
        message = command.to_json()
        logger.debug(">>> %s", message)
        self.channel.send(message)
