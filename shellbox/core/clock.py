"""
Sleep primitives used by the blocking utilities.

The terminator and the countdown timer never call ``time.sleep`` directly;
they take a sleeper object so tests can substitute an instant fake.
"""
import threading
import time
from typing import Optional, Protocol

from shellbox.core.errors import WaitCancelled


class Sleeper(Protocol):
    def sleep(self, seconds: float) -> None:
        ...


class SystemSleeper:
    """Blocks the calling thread with ``time.sleep``."""

    def sleep(self, seconds: float) -> None:
        if seconds > 0:
            time.sleep(seconds)


class CancellableSleeper:
    """
    Waits on a ``threading.Event`` so another thread can cut a wait short.

    When the event is set during (or before) a wait, ``sleep`` raises
    ``WaitCancelled`` instead of returning.
    """

    def __init__(self, cancel_event: Optional[threading.Event] = None):
        self.cancel_event = cancel_event or threading.Event()

    def cancel(self) -> None:
        self.cancel_event.set()

    def sleep(self, seconds: float) -> None:
        started = time.monotonic()
        if self.cancel_event.wait(max(seconds, 0)):
            raise WaitCancelled(waited=time.monotonic() - started)
