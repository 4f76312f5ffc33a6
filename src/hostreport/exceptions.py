"""Exception types raised by hostreport."""

from __future__ import annotations


class HostReportError(Exception):
    """Base class for hostreport errors."""


class CommandError(HostReportError):
    """An OS query utility could not be run or produced unusable output."""

    def __init__(self, command: str, reason: str) -> None:
        self.command = command
        self.reason = reason
        super().__init__(f"{command}: {reason}")
