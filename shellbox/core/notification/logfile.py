import json
import logging
from typing import Dict

from .base import NotificationChannel

logger = logging.getLogger(__name__)


class LogFileChannel(NotificationChannel):
    def __init__(self, log_path: str = "timer_events.log"):
        self.log_path = log_path

    def send(self, event: Dict) -> bool:
        try:
            with open(self.log_path, 'a') as f:
                f.write(json.dumps(event) + '\n')
            return True
        except OSError as e:
            logger.error(f"Failed to write event to log file {self.log_path}: {e}")
            return False
