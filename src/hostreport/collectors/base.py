"""Collector base class and the OS command helpers collectors share."""

from __future__ import annotations

import codecs
import json
import locale
import logging
import subprocess
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError

from hostreport.exceptions import CommandError
from hostreport.models.records import Record

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 120.0

# Only defined on Windows; keeps console windows from flashing up.
_NO_WINDOW = getattr(subprocess, "CREATE_NO_WINDOW", 0)

UTF8_OUTPUT = "[Console]::OutputEncoding = [System.Text.Encoding]::UTF8"


# Console utilities such as systeminfo write in the OEM code page.
def _fallback_encoding() -> str:
    try:
        codecs.lookup("oem")
    except LookupError:
        return locale.getpreferredencoding(False)
    return "oem"


def _decode(raw: bytes) -> str:
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError:
        text = raw.decode(_fallback_encoding(), errors="replace")
    return text.replace("\x00", "")


def run_command(args: Sequence[str], timeout: float | None = DEFAULT_TIMEOUT) -> str:
    """Run an OS query utility and return its decoded stdout.

    Raises:
        CommandError: If the executable cannot be started, times out or exits non-zero
    """
    command = args[0]
    try:
        completed = subprocess.run(
            list(args),
            capture_output=True,
            timeout=timeout,
            creationflags=_NO_WINDOW,
        )
    except FileNotFoundError as e:
        raise CommandError(command, "command not found") from e
    except OSError as e:
        raise CommandError(command, str(e) or "could not be started") from e
    except subprocess.TimeoutExpired as e:
        raise CommandError(command, f"timed out after {timeout}s") from e

    if completed.returncode != 0:
        stderr = _decode(completed.stderr).strip()
        raise CommandError(command, f"exited with status {completed.returncode}: {stderr}")
    return _decode(completed.stdout).strip()


def run_powershell(script: str, timeout: float | None = DEFAULT_TIMEOUT) -> str:
    """Run a PowerShell script and return its stdout."""
    return run_command(
        [
            "powershell",
            "-NoProfile",
            "-NonInteractive",
            "-ExecutionPolicy",
            "Bypass",
            "-Command",
            f"{UTF8_OUTPUT}; {script}",
        ],
        timeout=timeout,
    )


def ps_json(script: str, timeout: float | None = DEFAULT_TIMEOUT) -> list[dict[str, Any]]:
    """Run a PowerShell pipeline, convert its output to JSON and return a list of objects.

    A single object is wrapped in a list; no output gives an empty list.
    """
    raw = run_powershell(f"{script} | ConvertTo-Json -Depth 4 -Compress", timeout=timeout)
    if not raw:
        return []
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise CommandError("powershell", f"unparseable JSON output: {e}") from e
    if isinstance(data, dict):
        return [data]
    if isinstance(data, list):
        return [item for item in data if isinstance(item, dict)]
    raise CommandError("powershell", f"unexpected JSON output of type {type(data).__name__}")


def join_values(value: Any, sep: str = ", ") -> str:
    """Flatten a scalar or list value from PowerShell JSON into a display string."""
    if value is None:
        return ""
    if isinstance(value, list):
        return sep.join(str(v) for v in value if v not in (None, ""))
    return str(value)


def is_true(value: Any) -> bool:
    """Interpret PowerShell booleans, including GpoBoolean strings and ints."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value == 1
    return str(value).strip().lower() == "true"


class Collector(ABC):
    """Base class for querying one OS subsystem into a table of records."""

    def __init__(self, timeout: float | None = DEFAULT_TIMEOUT) -> None:
        self.timeout = timeout

    @property
    @abstractmethod
    def name(self) -> str:
        """Short name of the subsystem this collector queries."""
        ...

    @abstractmethod
    def collect(self) -> list[Record]:
        """Query the subsystem. May raise CommandError."""
        ...

    def run(self) -> list[Record]:
        """Collect records, degrading any query failure to an empty table."""
        try:
            records = self.collect()
        except (CommandError, ValidationError) as e:
            logger.warning("%s collector returned no data: %s", self.name, e)
            return []
        logger.info("%s collector produced %d records", self.name, len(records))
        return records
