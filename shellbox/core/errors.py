"""
Error types raised by the shellbox utilities.

Every error carries the input that caused it so the CLI layer can print a
message naming both the failed operation and the offending value.
"""
from typing import List, Optional


class ShellboxError(Exception):
    """Base class for all shellbox errors."""

    operation = "shellbox"

    def describe(self) -> str:
        return f"{self.operation} failed: {self}"


class ParseError(ShellboxError):
    """Raised when a URL cannot be parsed."""

    operation = "parseurl"

    def __init__(self, input: str, cause):
        self.input = input
        self.cause = cause
        super().__init__(f"cannot parse {input!r}: {cause}")


class NotFoundError(ShellboxError):
    """Raised when no running process matches a termination target."""

    operation = "murder"

    def __init__(self, target: str):
        self.target = target
        super().__init__(f"no running process matches {target!r}")


class SignalPermissionError(ShellboxError, PermissionError):
    """Raised when the OS refuses to deliver a signal to a process."""

    operation = "murder"

    def __init__(self, target: str, pid: Optional[int] = None, signal_name: str = "terminate"):
        self.target = target
        self.pid = pid
        self.signal_name = signal_name
        super().__init__(f"permission denied sending {signal_name} to {target!r} (pid {pid})")


class EscalationFailure(ShellboxError):
    """Raised when a process survives the forced termination signal."""

    operation = "murder"

    def __init__(self, target: str, survivors: List[int]):
        self.target = target
        self.survivors = list(survivors)
        super().__init__(f"{target!r} still running after forced kill (pids {self.survivors})")


class WaitCancelled(ShellboxError):
    """Raised by a cancellable sleeper when its cancel event fires."""

    operation = "wait"

    def __init__(self, waited: float = 0.0):
        self.waited = waited
        super().__init__("wait cancelled")
