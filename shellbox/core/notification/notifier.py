import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional

from .base import NotificationChannel
from .console import ConsoleChannel
from .logfile import LogFileChannel
from .webhook import WebhookChannel

logger = logging.getLogger(__name__)


class Notifier:
    """
    Fans a timer event out to every configured channel.

    Channel failures are logged and never interrupt the caller.
    """

    def __init__(self, channels: Optional[Dict[str, NotificationChannel]] = None):
        self.channels: Dict[str, NotificationChannel] = channels or {}

    @classmethod
    def from_settings(cls, timer_settings, console=None) -> "Notifier":
        available = {
            "console": lambda: ConsoleChannel(console=console),
            "logfile": lambda: LogFileChannel(timer_settings.log_path),
            "webhook": lambda: WebhookChannel(timer_settings.webhook_url),
        }
        channels = {}
        for name in timer_settings.channels:
            factory = available.get(name)
            if factory is None:
                logger.warning(f"Notification channel '{name}' not found or configured.")
                continue
            channels[name] = factory()
        return cls(channels)

    def notify(self, kind: str, message: str, **details) -> List[str]:
        """
        Send an event and return the names of channels that accepted it.
        """
        event = {
            "kind": kind,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            **details,
        }
        delivered = []
        for name, channel in self.channels.items():
            try:
                if channel.send(event):
                    delivered.append(name)
            except Exception as e:
                logger.error(f"Failed to send event via {name}: {e}")
        return delivered


class NullNotifier(Notifier):
    def notify(self, kind: str, message: str, **details) -> List[str]:
        logger.debug(f"[{kind}] {message}")
        return []
