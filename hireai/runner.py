"""Run gateway coroutines from synchronous Streamlit code on one long-lived loop.

The async SDK clients keep pooled connections bound to the loop that opened
them, so every call in a session has to go through the same loop.
"""
from __future__ import annotations

import asyncio
from typing import Any, Coroutine, TypeVar

from hireai.log import get_logger

log = get_logger(__name__)

T = TypeVar("T")


class LoopRunner:
    def __init__(self) -> None:
        self._loop: asyncio.AbstractEventLoop | None = None

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None or self._loop.is_closed():
            self._loop = asyncio.new_event_loop()
            log.debug("Started event loop %#x", id(self._loop))
        return self._loop

    def run(self, coro: Coroutine[Any, Any, T]) -> T:
        return self.loop.run_until_complete(coro)

    def close(self) -> None:
        if self._loop is None or self._loop.is_closed():
            return
        self._loop.run_until_complete(self._loop.shutdown_asyncgens())
        self._loop.close()
        self._loop = None
