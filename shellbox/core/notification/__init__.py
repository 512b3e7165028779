from .base import NotificationChannel
from .console import ConsoleChannel
from .logfile import LogFileChannel
from .webhook import WebhookChannel
from .notifier import Notifier, NullNotifier

__all__ = ["NotificationChannel", "ConsoleChannel", "LogFileChannel", "WebhookChannel", "Notifier", "NullNotifier"]
