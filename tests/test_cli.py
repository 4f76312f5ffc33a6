from __future__ import annotations

import importlib
import logging
import runpy
import sys
from pathlib import Path

import pytest
from typer.testing import CliRunner

from hostreport import __version__
from hostreport.cli.main import app

runner = CliRunner()
FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    logger = logging.getLogger("hostreport")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def elevated(monkeypatch):
    monkeypatch.setattr("hostreport.privilege.is_elevated", lambda: True)


@pytest.fixture
def not_elevated(monkeypatch):
    monkeypatch.setattr("hostreport.privilege.is_elevated", lambda: False)


@pytest.fixture
def fake_sources(monkeypatch, full_sources):
    timeouts = []

    def sources(timeout=None):
        timeouts.append(timeout)
        return full_sources

    monkeypatch.setattr("hostreport.reporting.builder.default_sources", sources)
    return timeouts


def test_cli_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert f"hostreport {__version__}" in result.stdout


def test_cli_not_elevated(not_elevated, fake_sources, tmp_path: Path):
    output = tmp_path / "report.html"
    result = runner.invoke(app, ["--output", str(output)])
    assert result.exit_code == 1
    assert "must be run as Administrator" in result.stdout
    assert not output.exists()
    assert fake_sources == []


def test_cli_privilege_checked_before_config(not_elevated, tmp_path: Path):
    bad = tmp_path / "bad.yaml"
    bad.write_text("command_timeout: -1\n")
    result = runner.invoke(app, ["--config", str(bad), "--output", str(tmp_path / "r.html")])
    assert result.exit_code == 1


def test_cli_generates_report(elevated, fake_sources, tmp_path: Path):
    output = tmp_path / "report.html"
    result = runner.invoke(app, ["--output", str(output)])
    assert result.exit_code == 0
    assert "Report generated at" in result.stdout
    assert output.exists()

    html = output.read_text(encoding="utf-8")
    assert html.count("<button id='btn_") == 8
    assert "showTab('System_Info')" in html
    assert fake_sources == [120.0]


def test_cli_with_config(elevated, fake_sources, tmp_path: Path):
    output = tmp_path / "report.html"
    result = runner.invoke(
        app,
        ["--config", str(FIXTURES_DIR / "sample_config.yaml"), "--output", str(output)],
    )
    assert result.exit_code == 0
    assert "<title>Web Tier Inventory</title>" in output.read_text(encoding="utf-8")
    assert fake_sources == [30.0]


def test_cli_invalid_config(elevated, fake_sources, tmp_path: Path):
    bad = tmp_path / "bad.yaml"
    bad.write_text("command_timeout: -1\n")
    output = tmp_path / "report.html"
    result = runner.invoke(app, ["--config", str(bad), "--output", str(output)])
    assert result.exit_code == 2
    assert "Invalid configuration" in result.stdout
    assert not output.exists()


def test_cli_missing_config(elevated, fake_sources, tmp_path: Path):
    result = runner.invoke(app, ["--config", str(tmp_path / "nope.yaml")])
    assert result.exit_code == 2


def test_cli_verbose_flag(elevated, fake_sources, tmp_path: Path):
    output = tmp_path / "report.html"
    result = runner.invoke(app, ["-v", "-o", str(output)])
    assert result.exit_code == 0
    assert output.exists()


def test_main_module_import_does_not_run_app():
    module = importlib.import_module("hostreport.__main__")
    assert module.app is app


def test_python_dash_m_version(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["hostreport", "--version"])
    with pytest.raises(SystemExit) as info:
        runpy.run_module("hostreport", run_name="__main__")
    assert info.value.code in (0, None)
    assert __version__ in capsys.readouterr().out
