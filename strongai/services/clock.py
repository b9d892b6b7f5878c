"""Clock primitive: a monotonic time source plus a cancellable scheduled callback.

The rest timer only needs ``now()`` and ``call_later()``; the asyncio implementation
runs ticks on the event loop so they never overlap a mutating call.
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import Callable
from typing import Protocol


class TickHandle(Protocol):
    def cancel(self) -> None: ...


class Clock(Protocol):
    def now(self) -> float:
        """Monotonic time in seconds."""
        ...

    def call_later(self, delay: float, callback: Callable[[], None]) -> TickHandle: ...


class LoopClock:
    """Clock backed by the running asyncio event loop."""

    def now(self) -> float:
        return time.monotonic()

    def call_later(self, delay: float, callback: Callable[[], None]) -> TickHandle:
        return asyncio.get_running_loop().call_later(delay, callback)
