"""Timer-complete notification sink (audible / haptic alert in the UI)."""

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class TimerNotifier(Protocol):
    def notify_timer_complete(self) -> None: ...


class LoggingNotifier:
    """Default sink when no device alert is wired in."""

    def notify_timer_complete(self) -> None:
        logger.info("Rest timer complete")
