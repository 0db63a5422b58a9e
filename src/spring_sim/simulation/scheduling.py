"""Scheduling hosts that deliver ticks to a simulation run.

A host only needs to run a callback after a delay and to cancel a callback
that has not run yet. The run re-schedules itself after each tick, so every
physics step is a fresh callback.
"""
from __future__ import annotations

import asyncio
import itertools
from typing import Any, Callable, Protocol


class Scheduler(Protocol):
    def call_later(self, delay: float, callback: Callable[[], None]) -> Any:
        """Run ``callback`` after ``delay`` seconds; return a cancellable handle."""
        ...

    def cancel(self, handle: Any) -> None:
        """Prevent a not-yet-run callback from running."""
        ...


class ManualScheduler:
    """Deterministic host driven explicitly by the caller.

    Delays are ignored: queued callbacks run in FIFO order when
    :meth:`run_pending` is called.
    """

    def __init__(self) -> None:
        self._queue: dict[int, Callable[[], None]] = {}
        self._ids = itertools.count()

    def call_later(self, delay: float, callback: Callable[[], None]) -> int:
        handle = next(self._ids)
        self._queue[handle] = callback
        return handle

    def cancel(self, handle: int) -> None:
        self._queue.pop(handle, None)

    @property
    def pending(self) -> int:
        return len(self._queue)

    def run_pending(self) -> int:
        """Run the callbacks queued before this call. Returns how many ran.

        Callbacks scheduled while running wait for the next call, and a
        callback cancelled by an earlier one in the same batch is skipped.
        """
        ran = 0
        for handle in list(self._queue):
            callback = self._queue.pop(handle, None)
            if callback is None:
                continue
            callback()
            ran += 1
        return ran

    def run(self, n_ticks: int) -> int:
        """Call :meth:`run_pending` up to ``n_ticks`` times, stopping when idle."""
        total = 0
        for _ in range(n_ticks):
            ran = self.run_pending()
            if ran == 0:
                break
            total += ran
        return total


class AsyncioScheduler:
    """Real-time host on an asyncio event loop."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        return self.loop.call_later(delay, callback)

    def cancel(self, handle: asyncio.TimerHandle) -> None:
        handle.cancel()
