"""
This module implements the minute countdown behind the ``timer`` command.

For each remaining minute the countdown emits a progress notification and
then waits one interval. An interrupted wait (Ctrl+C, or a cancellable
sleeper whose event fires) stops the loop at once and reports how many
minutes were still outstanding.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from shellbox.core.clock import Sleeper, SystemSleeper
from shellbox.core.errors import WaitCancelled
from shellbox.core.notification import NullNotifier, Notifier

logger = logging.getLogger(__name__)

MINUTE_SECONDS = 60.0


class CountdownStatus(str, Enum):
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass
class TimerState:
    remaining_minutes: int
    cancelled: bool = False


@dataclass(frozen=True)
class CountdownResult:
    status: CountdownStatus
    remaining: int = 0
    waits: int = 0

    @property
    def completed(self) -> bool:
        return self.status == CountdownStatus.COMPLETED


def _plural(count: int) -> str:
    return "minute" if count == 1 else "minutes"


def countdown(minutes: int, sleeper: Optional[Sleeper] = None, notifier: Optional[Notifier] = None,
              interval: float = MINUTE_SECONDS) -> CountdownResult:
    """
    Count down ``minutes`` one interval at a time.

    :param minutes: Number of minutes to count. Zero or less completes at once.
    :param sleeper: Performs each wait. Defaults to ``SystemSleeper``.
    :param notifier: Receives 'progress', 'completed' and 'cancelled' events.
    :param interval: Seconds per minute step.
    :return: ``CountdownResult`` with status COMPLETED, or CANCELLED and the
             minutes left when the wait was interrupted.
    """
    sleeper = sleeper or SystemSleeper()
    notifier = notifier or NullNotifier()

    if minutes <= 0:
        logger.info(f"Countdown requested for {minutes} minutes, nothing to wait for")
        return CountdownResult(CountdownStatus.COMPLETED)

    state = TimerState(remaining_minutes=minutes)
    waits = 0
    logger.info(f"Starting {minutes} minute countdown")

    while state.remaining_minutes > 0:
        notifier.notify("progress", f"{state.remaining_minutes} {_plural(state.remaining_minutes)} remaining",
                        remaining=state.remaining_minutes)
        try:
            sleeper.sleep(interval)
        except (KeyboardInterrupt, WaitCancelled):
            state.cancelled = True
            break
        waits += 1
        state.remaining_minutes -= 1

    if state.cancelled:
        logger.info(f"Countdown cancelled with {state.remaining_minutes} minutes remaining")
        notifier.notify("cancelled", f"Timer cancelled with {state.remaining_minutes} "
                                     f"{_plural(state.remaining_minutes)} remaining",
                        remaining=state.remaining_minutes)
        return CountdownResult(CountdownStatus.CANCELLED, state.remaining_minutes, waits)

    logger.info(f"Countdown of {minutes} minutes completed")
    notifier.notify("completed", f"Time's up! {minutes} {_plural(minutes)} elapsed", minutes=minutes)
    return CountdownResult(CountdownStatus.COMPLETED, 0, waits)
