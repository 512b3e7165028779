import logging
import os
from typing import Dict

import requests

from .base import NotificationChannel

logger = logging.getLogger(__name__)


class WebhookChannel(NotificationChannel):
    def __init__(self, url: str = None, timeout: float = 10):
        self.url = url or os.getenv("SHELLBOX_WEBHOOK_URL")
        self.timeout = timeout

    def send(self, event: Dict) -> bool:
        if not self.url:
            logger.warning("Webhook URL not configured. Cannot send timer event.")
            return False

        try:
            response = requests.post(self.url, json=event, timeout=self.timeout)
            response.raise_for_status()
            return True
        except requests.exceptions.RequestException as e:
            logger.error(f"Failed to send webhook event: {e}")
            return False
