"""
This module implements the ProcessTerminator behind the ``murder`` command.

A target is either a numeric PID or a process name. The terminator sends a
graceful termination signal, waits out a grace period, and escalates to a
forced kill only for processes that are still alive afterwards. Each call
walks the same small state machine:

    RESOLVING -> GRACEFUL_SIGNAL_SENT -> WAITING -> EXITED
                                                 -> STILL_RUNNING -> FORCE_SIGNAL_SENT -> EXITED
                                                                                       -> STILL_RUNNING_AFTER_FORCE

There is no retry beyond that single escalation. A process that survives
the forced kill is reported as a failure.
"""
import logging
import os
import platform
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

import psutil

from shellbox.core.clock import Sleeper, SystemSleeper
from shellbox.core.errors import (EscalationFailure, NotFoundError, SignalPermissionError,
                                  WaitCancelled)

logger = logging.getLogger(__name__)

DEFAULT_GRACE_PERIOD = 10.0
# Pause between the forced signal and the final liveness check.
FORCE_SETTLE_SECONDS = 1.0

_PID_PATTERN = re.compile(r"^[0-9]+$")


class TerminationState(str, Enum):
    RESOLVING = "resolving"
    GRACEFUL_SIGNAL_SENT = "graceful_signal_sent"
    WAITING = "waiting"
    EXITED = "exited"
    STILL_RUNNING = "still_running"
    FORCE_SIGNAL_SENT = "force_signal_sent"
    STILL_RUNNING_AFTER_FORCE = "still_running_after_force"


class TerminationOutcome(str, Enum):
    NOT_FOUND = "not_found"
    GRACEFUL_EXIT = "graceful_exit"
    FORCE_KILLED = "force_killed"
    STILL_RUNNING_AFTER_FORCE = "still_running_after_force"
    INTERRUPTED = "interrupted"


@dataclass
class TerminationRequest:
    target: str
    grace_period: float = DEFAULT_GRACE_PERIOD


@dataclass
class TerminationResult:
    target: str
    outcome: TerminationOutcome
    pids: List[int] = field(default_factory=list)
    survivors: List[int] = field(default_factory=list)
    states: List[TerminationState] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.outcome in (TerminationOutcome.GRACEFUL_EXIT, TerminationOutcome.FORCE_KILLED)


def is_pid(target: str) -> bool:
    return bool(_PID_PATTERN.match(target))


def ensure_terminated(result: TerminationResult) -> TerminationResult:
    """
    Turn a failed ``TerminationResult`` into the matching exception.

    :raises NotFoundError: If nothing matched the target.
    :raises EscalationFailure: If a process survived the forced kill.
    """
    if result.outcome == TerminationOutcome.NOT_FOUND:
        raise NotFoundError(result.target)
    if result.outcome == TerminationOutcome.STILL_RUNNING_AFTER_FORCE:
        raise EscalationFailure(result.target, result.survivors)
    return result


class ProcessTerminator:
    """
    Gracefully terminates a process by PID or name, escalating to a forced
    kill after a grace period.
    """

    def __init__(self, sleeper: Optional[Sleeper] = None, grace_period: float = DEFAULT_GRACE_PERIOD):
        """
        Args:
            sleeper (Optional[Sleeper]): Used for the grace period wait. Defaults to
                                         ``SystemSleeper``.
            grace_period (float): Default seconds to wait between the graceful and
                                  the forced signal.
        """
        self.sleeper = sleeper or SystemSleeper()
        self.grace_period = grace_period
        self.case_insensitive = platform.system() == "Windows"

    def _name_matches(self, name: Optional[str], target: str) -> bool:
        if not name:
            return False
        if self.case_insensitive:
            name, target = name.casefold(), target.casefold()
            if name.endswith(".exe") and not target.endswith(".exe"):
                name = name[:-4]
        return name == target

    def resolve(self, target: str) -> List[psutil.Process]:
        """
        Resolve a target to the running processes it names.

        Digits-only targets are treated as a PID. Anything else is matched
        against process names. The calling process is never returned.
        """
        if is_pid(target):
            if int(target) == os.getpid():
                logger.warning(f"Refusing to target the calling process (pid {target})")
                return []
            try:
                proc = psutil.Process(int(target))
            except psutil.NoSuchProcess:
                return []
            return [proc] if self._is_alive(proc) else []

        own_pid = os.getpid()
        matches = []
        for proc in psutil.process_iter(['pid', 'name']):
            try:
                if proc.pid != own_pid and self._name_matches(proc.info.get('name'), target):
                    matches.append(proc)
            except (psutil.NoSuchProcess, psutil.ZombieProcess):
                continue
        return [p for p in matches if self._is_alive(p)]

    @staticmethod
    def _is_alive(proc: psutil.Process) -> bool:
        try:
            return proc.is_running() and proc.status() != psutil.STATUS_ZOMBIE
        except (psutil.NoSuchProcess, psutil.ZombieProcess):
            return False
        except psutil.AccessDenied:
            # Can't read the status, but the process exists.
            return True

    def _alive(self, procs: List[psutil.Process]) -> List[psutil.Process]:
        return [p for p in procs if self._is_alive(p)]

    @staticmethod
    def _signal(procs: List[psutil.Process], target: str, force: bool) -> None:
        signal_name = "kill" if force else "terminate"
        for proc in procs:
            try:
                if force:
                    proc.kill()
                else:
                    proc.terminate()
                logger.info(f"Sent {signal_name} to pid {proc.pid} ({target})")
            except psutil.NoSuchProcess:
                logger.debug(f"pid {proc.pid} exited before {signal_name} was delivered")
            except psutil.AccessDenied as e:
                logger.error(f"Permission denied sending {signal_name} to pid {proc.pid}: {e}")
                raise SignalPermissionError(target, proc.pid, signal_name) from e

    def terminate(self, target: str, grace_period: Optional[float] = None) -> TerminationResult:
        """
        Terminate every process matching ``target``.

        Args:
            target (str): A PID ("1234") or a process name ("firefox").
            grace_period (Optional[float]): Seconds to wait before escalating.
                                            Defaults to the instance setting.

        Returns:
            TerminationResult: The terminal outcome plus the PIDs involved.

        Raises:
            SignalPermissionError: If a signal could not be delivered. The state
                                   machine stops at that step.
        """
        wait_for = self.grace_period if grace_period is None else grace_period
        request = TerminationRequest(target=target, grace_period=wait_for)
        states = [TerminationState.RESOLVING]

        procs = self.resolve(request.target)
        if not procs:
            logger.warning(f"No running process matches {request.target!r}")
            return TerminationResult(request.target, TerminationOutcome.NOT_FOUND, states=states)

        pids = [p.pid for p in procs]
        logger.info(f"Resolved {request.target!r} to pids {pids}")

        self._signal(procs, request.target, force=False)
        states.append(TerminationState.GRACEFUL_SIGNAL_SENT)

        states.append(TerminationState.WAITING)
        try:
            self.sleeper.sleep(request.grace_period)
        except (KeyboardInterrupt, WaitCancelled):
            survivors = [p.pid for p in self._alive(procs)]
            logger.warning(f"Grace period for {request.target!r} interrupted; still running: {survivors}")
            return TerminationResult(request.target, TerminationOutcome.INTERRUPTED, pids, survivors, states)

        remaining = self._alive(procs)
        if not remaining:
            states.append(TerminationState.EXITED)
            logger.info(f"{request.target!r} exited within {request.grace_period}s")
            return TerminationResult(request.target, TerminationOutcome.GRACEFUL_EXIT, pids, [], states)

        states.append(TerminationState.STILL_RUNNING)
        logger.warning(f"{request.target!r} still running after {request.grace_period}s, forcing kill")
        self._signal(remaining, request.target, force=True)
        states.append(TerminationState.FORCE_SIGNAL_SENT)
        try:
            self.sleeper.sleep(FORCE_SETTLE_SECONDS)
        except (KeyboardInterrupt, WaitCancelled):
            survivors = [p.pid for p in self._alive(remaining)]
            logger.warning(f"Wait after forced kill of {request.target!r} interrupted; still running: {survivors}")
            return TerminationResult(request.target, TerminationOutcome.INTERRUPTED, pids, survivors, states)

        survivors = [p.pid for p in self._alive(remaining)]
        if survivors:
            states.append(TerminationState.STILL_RUNNING_AFTER_FORCE)
            logger.error(f"{request.target!r} survived forced kill: {survivors}")
            return TerminationResult(request.target, TerminationOutcome.STILL_RUNNING_AFTER_FORCE,
                                     pids, survivors, states)

        states.append(TerminationState.EXITED)
        return TerminationResult(request.target, TerminationOutcome.FORCE_KILLED, pids, [], states)


def terminate(target: str, grace_period: float = DEFAULT_GRACE_PERIOD, sleeper: Optional[Sleeper] = None) -> TerminationResult:
    return ProcessTerminator(sleeper=sleeper, grace_period=grace_period).terminate(target)
