"""A client session: one grid, one outbound channel and the input controller."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from frontline.channels import MessageChannel
from frontline.domain.enums import Direction
from frontline.domain.errors import FrontlineError
from frontline.domain.grid import Grid
from frontline.domain.interaction import InteractionController
from frontline.domain.sync import apply_update
from frontline.render.binding import SurfaceBinding
from frontline.render.surface import Surface
from frontline.schemas.command import MoveCommand
from frontline.schemas.grid import CellSnapshot, GridSnapshot
from frontline.schemas.update import UpdateEnvelope

logger = logging.getLogger(__name__)


class GameSession:
    """
    Everything one connected player's client needs.

    Sessions share nothing, so several can run side by side. Each inbound
    message and input event is handled to completion before the next one.
    """

    def __init__(
        self,
        channel: MessageChannel,
        *,
        surface: Surface[Any] | None = None,
        key_bindings: dict[str, Direction] | None = None,
    ) -> None:
        self.grid = Grid()
        self.channel = channel
        self.controller = InteractionController(self.grid, channel, key_bindings=key_bindings)
        self.binding = SurfaceBinding(self.grid, surface) if surface is not None else None
        self.turn: Any = None
        self.players: Any = None

    def handle_message(self, raw: str | bytes) -> bool:
        """Apply one server message. Malformed messages are logged and dropped."""

        logger.debug("<<< %s", raw)
        try:
            payload = json.loads(raw)
        except (ValueError, RecursionError) as exc:
            # ValueError covers JSONDecodeError and UnicodeDecodeError.
            logger.warning("dropping message that is not JSON: %s", exc)
            return False
        try:
            self.apply(payload)
        except FrontlineError as exc:
            logger.warning("dropping invalid update: %s", exc)
            return False
        return True

    def apply(self, payload: Mapping[str, object] | UpdateEnvelope) -> UpdateEnvelope:
        """Apply a decoded envelope, raising on schema, range or validation errors."""

        envelope = apply_update(self.grid, payload)
        self.turn = envelope.turn
        self.players = envelope.players
        return envelope

    def on_cell_clicked(self, index: int) -> None:
        self.controller.on_cell_clicked(index)

    def on_node_clicked(self, node: Any) -> None:
        """Select the cell displayed by ``node``; clicks outside the grid are ignored."""

        if self.binding is None:
            return
        index = self.binding.index_of(node)
        if index is not None:
            self.controller.on_cell_clicked(index)

    def on_key_pressed(self, code: str) -> MoveCommand | None:
        return self.controller.on_key_pressed(code)

    def snapshot(self) -> GridSnapshot:
        grid = self.grid
        cells = []
        for cell in grid:
            index = cell.index()
            position = grid.coordinates(index)
            cells.append(
                CellSnapshot(
                    index=index,
                    row=position.row,
                    col=position.col,
                    kind=cell.kind,
                    units=cell.units,
                    owner=cell.owner,
                    visible=cell.visible,
                    selected=cell.selected,
                )
            )
        return GridSnapshot(
            height=grid.height(),
            width=grid.width(),
            selected=grid.selected,
            turn=self.turn,
            cells=cells,
        )
