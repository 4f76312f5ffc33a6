"""Report configuration: optional YAML file validated with pydantic."""

from __future__ import annotations

import sys
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from hostreport.collectors.base import DEFAULT_TIMEOUT
from hostreport.reporting.html_renderer import DEFAULT_TITLE

REPORT_FILENAME = "report.html"


def default_output_path() -> Path:
    """`report.html` next to the running program."""
    return Path(sys.argv[0]).resolve().parent / REPORT_FILENAME


class ReportConfig(BaseModel):
    """Settings for a report run. Defaults need no file at all."""

    title: str = DEFAULT_TITLE
    output_path: Path | None = Field(None, description="Defaults to report.html beside the program")
    command_timeout: float | None = Field(
        DEFAULT_TIMEOUT, gt=0, description="Seconds per OS query; null disables the timeout"
    )

    def resolved_output_path(self) -> Path:
        return self.output_path or default_output_path()


def load_config(path: Path) -> ReportConfig:
    """Load a report configuration YAML file. An empty file gives the defaults."""
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return ReportConfig.model_validate(data or {})
