"""Outbound message channels the interaction controller writes to."""

from __future__ import annotations

import asyncio
import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class MessageChannel(Protocol):
    """Anything that can carry a serialized JSON message to the game server."""

    def send(self, message: str) -> None: ...


class RecordingChannel:
    """Keep every sent message in memory."""

    def __init__(self) -> None:
        self.sent: list[str] = []

    def send(self, message: str) -> None:
        self.sent.append(message)


class QueueChannel:
    """
    Buffer outbound messages until an async writer drains them.

    Messages are only queued while a reader is attached. Sends made with no
    reader are dropped, and attaching or detaching discards anything left
    over, so a later reader never receives stale commands.
    """

    def __init__(self, maxsize: int = 0) -> None:
        self._queue: asyncio.Queue[str] = asyncio.Queue(maxsize=maxsize)
        self._attached = False

    @property
    def attached(self) -> bool:
        return self._attached

    def attach(self) -> None:
        self._drain()
        self._attached = True

    def detach(self) -> None:
        self._attached = False
        self._drain()

    def send(self, message: str) -> None:
        if not self._attached:
            logger.warning("no reader attached, dropping %s", message)
            return
        self._queue.put_nowait(message)

    async def get(self) -> str:
        return await self._queue.get()

    def pending(self) -> int:
        return self._queue.qsize()

    def _drain(self) -> None:
        while not self._queue.empty():
            self._queue.get_nowait()
