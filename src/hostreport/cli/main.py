"""hostreport CLI: thin Typer wrapper over the report pipeline."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from hostreport import __version__
from hostreport.utils.logging import configure_logging

app = typer.Typer(
    name="hostreport",
    help="Collect Windows host information into a tabbed HTML report.",
    add_completion=False,
)
console = Console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"hostreport {__version__}")
        raise typer.Exit()


@app.command()
def main(
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Report path (default: report.html beside the program)"
    ),
    config_file: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to report configuration YAML"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log collector activity to stderr"),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
) -> None:
    """Generate the host information report."""
    from hostreport.config import ReportConfig, load_config
    from hostreport.privilege import is_elevated
    from hostreport.reporting.builder import generate_report

    configure_logging(logging.DEBUG if verbose else logging.WARNING)

    if not is_elevated():
        console.print("[red]This script must be run as Administrator.[/red]")
        raise typer.Exit(1)

    config = ReportConfig()
    if config_file:
        try:
            config = load_config(config_file)
        except (OSError, yaml.YAMLError, ValidationError) as e:
            console.print(f"[red]Invalid configuration:[/red] {escape(str(e))}")
            raise typer.Exit(2)
    if output:
        config = config.model_copy(update={"output_path": output})

    path = generate_report(config)
    console.print(f"[green]Report generated at {escape(str(path))}[/green]")


if __name__ == "__main__":
    app()
