"""Runtime state backing the Frontline HTTP bridge."""

from __future__ import annotations

import asyncio
import logging
from contextlib import suppress

from fastapi import WebSocket, status

from frontline.channels import QueueChannel
from frontline.config import Settings, get_settings
from frontline.render.surface import MemorySurface
from frontline.session import GameSession

logger = logging.getLogger(__name__)


class ApiState:
    """The single session hosted by the bridge plus its outbound queue."""

    def __init__(self, *, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self.channel = QueueChannel()
        self.surface = MemorySurface()
        self.session = GameSession(
            self.channel,
            surface=self.surface,
            key_bindings=self.settings.key_bindings,
        )
        self._writers: set[asyncio.Task[None]] = set()

    async def serve_feed(self, websocket: WebSocket) -> None:
        """
        Accept the game server feed and run it until disconnect.

        Inbound frames are applied to the session; queued move commands are
        written back on the same socket. Only one feed is served at a time,
        a second connection is closed before it is accepted.
        """
        if self.channel.attached:
            logger.warning("rejecting a second server feed")
            await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
            return

        self.channel.attach()
        try:
            await websocket.accept()
        except BaseException:
            self.channel.detach()
            raise
        writer = asyncio.create_task(self._pump_commands(websocket))
        self._writers.add(writer)
        try:
            async for message in websocket.iter_text():
                self.session.handle_message(message)
        finally:
            self.channel.detach()
            writer.cancel()
            with suppress(asyncio.CancelledError):
                await writer
            self._writers.discard(writer)
            logger.info("server feed disconnected")

    async def _pump_commands(self, websocket: WebSocket) -> None:
        while True:
            message = await self.channel.get()
            await websocket.send_text(message)

    async def shutdown(self) -> None:
        for writer in list(self._writers):
            writer.cancel()
            with suppress(asyncio.CancelledError):
                await writer
        self._writers.clear()


def build_state(settings: Settings) -> ApiState:
    """Factory used by the API to initialize state."""

    return ApiState(settings=settings)
