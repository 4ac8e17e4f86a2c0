"""Deferred callback scheduling used for delayed layer reactivation."""

from __future__ import annotations

import asyncio
import heapq
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Protocol

Callback = Callable[[], None]


class Scheduler(Protocol):
    """Runs ``callback`` once, ``delay`` time units from now."""

    def after(self, delay: int, callback: Callback) -> None: ...


@dataclass(order=True)
class _Scheduled:
    due: int
    sequence: int
    callback: Callback = field(compare=False)


class ManualScheduler:
    """Virtual clock; nothing runs until ``advance`` moves time forward."""

    def __init__(self) -> None:
        self.now = 0
        self._queue: List[_Scheduled] = []
        self._counter = 0

    @property
    def pending(self) -> int:
        return len(self._queue)

    def after(self, delay: int, callback: Callback) -> None:
        self._counter += 1
        heapq.heappush(
            self._queue, _Scheduled(self.now + max(0, delay), self._counter, callback)
        )

    def advance(self, units: int) -> int:
        """Move the clock and run everything that became due, in order.

        Callbacks scheduled while advancing run in the same call if they fall
        inside the window. Returns the number of callbacks executed.
        """

        target = self.now + units
        ran = 0
        while self._queue and self._queue[0].due <= target:
            item = heapq.heappop(self._queue)
            self.now = item.due
            item.callback()
            ran += 1
        self.now = target
        return ran

    def run_all(self) -> int:
        ran = 0
        while self._queue:
            ran += self.advance(self._queue[0].due - self.now)
        return ran


class AsyncioScheduler:
    """Maps time units to milliseconds on an asyncio event loop."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop

    def after(self, delay: int, callback: Callback) -> None:
        loop = self._loop or asyncio.get_running_loop()
        loop.call_later(delay / 1000.0, callback)


__all__ = ["Callback", "Scheduler", "ManualScheduler", "AsyncioScheduler"]
