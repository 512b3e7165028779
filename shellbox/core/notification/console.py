from typing import Dict

from rich.console import Console

from .base import NotificationChannel

_STYLES = {
    "progress": "cyan",
    "completed": "bold green",
    "cancelled": "bold yellow",
}


class ConsoleChannel(NotificationChannel):
    def __init__(self, console: Console = None, bell: bool = True):
        self.console = console or Console()
        self.bell = bell

    def send(self, event: Dict) -> bool:
        style = _STYLES.get(event.get("kind"), "white")
        self.console.print(f"[{style}]{event.get('message', '')}[/{style}]")
        if self.bell and event.get("kind") == "completed":
            self.console.bell()
        return True
