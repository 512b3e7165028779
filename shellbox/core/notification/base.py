from abc import ABC, abstractmethod
from typing import Dict


class NotificationChannel(ABC):
    @abstractmethod
    def send(self, event: Dict) -> bool:
        """
        Deliver a timer event.

        Every event carries 'kind', 'message' and an ISO-8601 UTC 'timestamp'.
        The countdown emits three kinds, each with one extra key:

        - 'progress': 'remaining', the whole minutes left before this wait.
        - 'completed': 'minutes', the length of the finished countdown.
        - 'cancelled': 'remaining', the minutes left when it was interrupted.

        :param event: The event dictionary described above.
        :return: True if the event was delivered, False otherwise.
        """
        pass
