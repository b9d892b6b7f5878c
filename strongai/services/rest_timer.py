"""Rest timer between sets.

The countdown is an absolute deadline, not a decrementing counter: every wake
recomputes ``ceil(deadline - now)``, so scheduling jitter never accumulates and
pause/resume/add-time are plain deadline arithmetic. Every mutator cancels the
pending tick before touching state, so a stale tick cannot revive a stopped timer.
"""

from __future__ import annotations

import logging
import math

from strongai.schemas.timer import TimerState
from strongai.services.clock import Clock, TickHandle
from strongai.services.notifications import LoggingNotifier, TimerNotifier

logger = logging.getLogger(__name__)


def format_countdown(seconds: int) -> str:
    """``M:SS`` with no leading zero on minutes."""
    seconds = max(0, int(seconds))
    return f"{seconds // 60}:{seconds % 60:02d}"


class RestTimer:
    """Single countdown owned by the active workout context."""

    def __init__(
        self,
        clock: Clock,
        notifier: TimerNotifier | None = None,
        tick_interval: float = 0.1,
    ) -> None:
        self.clock = clock
        self.notifier = notifier or LoggingNotifier()
        self.tick_interval = tick_interval
        self._handle: TickHandle | None = None
        self._deadline: float | None = None
        self._remaining = 0
        self._total = 0
        self._running = False

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def remaining_time(self) -> int:
        if self._running and self._deadline is not None:
            return self._seconds_left()
        return self._remaining

    @property
    def total_duration(self) -> int:
        return self._total

    @property
    def time_string(self) -> str:
        return format_countdown(self.remaining_time)

    @property
    def progress(self) -> float:
        if self._total <= 0:
            return 0.0
        return self.remaining_time / self._total

    def snapshot(self) -> TimerState:
        return TimerState(
            is_running=self.is_running,
            remaining_time=self.remaining_time,
            total_duration=self.total_duration,
            time_string=self.time_string,
            progress=round(self.progress, 3),
        )

    # ── Mutators ─────────────────────────────────────────────────────────

    def start(self, duration_seconds: int) -> None:
        """Start a new countdown, replacing any running one."""
        self._cancel_tick()
        duration_seconds = int(duration_seconds)
        if duration_seconds <= 0:
            self._reset()
            return
        self._deadline = self.clock.now() + duration_seconds
        self._remaining = duration_seconds
        self._total = duration_seconds
        self._running = True
        self._schedule_tick()
        logger.debug("Rest timer started for %ss", duration_seconds)

    def pause(self) -> None:
        if not self._running:
            return
        self._cancel_tick()
        remaining = self._seconds_left()
        if remaining <= 0:
            # Deadline passed before the tick fired
            self._complete()
            return
        self._remaining = remaining
        self._deadline = None
        self._running = False

    def resume(self) -> None:
        if self._running or self._remaining <= 0:
            return
        self._cancel_tick()
        self._deadline = self.clock.now() + self._remaining
        self._running = True
        self._schedule_tick()

    def add_time(self, seconds: int) -> None:
        """Extend the countdown. A stopped timer starts a fresh countdown of ``seconds``."""
        seconds = int(seconds)
        if seconds <= 0:
            return
        if self._running and self._deadline is not None:
            self._cancel_tick()
            if self._seconds_left() <= 0:
                self._complete()
                return
            self._deadline += seconds
            self._total += seconds
            self._remaining = self._seconds_left()
            self._schedule_tick()
        elif self._remaining > 0:
            # Paused counts as not stopped: extend the preserved remainder and stay
            # paused. Only a stopped timer (nothing remaining) starts afresh.
            self._remaining += seconds
            self._total += seconds
        else:
            self.start(seconds)

    def stop(self) -> None:
        """Cancel and reset to zero. Safe to call repeatedly."""
        self._cancel_tick()
        self._reset()

    # ── Internals ────────────────────────────────────────────────────────

    def _seconds_left(self) -> int:
        if self._deadline is None:
            return 0
        # Millisecond resolution before ceil keeps float noise out of whole seconds
        left_ms = round((self._deadline - self.clock.now()) * 1000)
        return max(0, math.ceil(left_ms / 1000))

    def _reset(self) -> None:
        self._running = False
        self._deadline = None
        self._remaining = 0
        self._total = 0

    def _schedule_tick(self) -> None:
        self._handle = self.clock.call_later(self.tick_interval, self._tick)

    def _cancel_tick(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _tick(self) -> None:
        self._handle = None
        if not self._running:
            return
        remaining = self._seconds_left()
        if remaining <= 0:
            self._complete()
            return
        self._remaining = remaining
        self._schedule_tick()

    def _complete(self) -> None:
        self._cancel_tick()
        self._reset()
        try:
            self.notifier.notify_timer_complete()
        except Exception:
            logger.exception("Timer-complete notification failed")
