"""Tests for the privilege guard."""

import os
from types import SimpleNamespace

from hostreport import privilege


def _windll(result):
    return SimpleNamespace(windll=SimpleNamespace(shell32=SimpleNamespace(IsUserAnAdmin=lambda: result)))


def test_windows_admin(monkeypatch):
    monkeypatch.setattr(privilege.os, "name", "nt")
    monkeypatch.setattr(privilege, "ctypes", _windll(1))
    assert privilege.is_elevated() is True


def test_windows_standard_user(monkeypatch):
    monkeypatch.setattr(privilege.os, "name", "nt")
    monkeypatch.setattr(privilege, "ctypes", _windll(0))
    assert privilege.is_elevated() is False


def test_windows_shell32_unavailable(monkeypatch):
    monkeypatch.setattr(privilege.os, "name", "nt")
    monkeypatch.setattr(privilege, "ctypes", SimpleNamespace())
    assert privilege.is_elevated() is False


def test_posix_root(monkeypatch):
    monkeypatch.setattr(privilege.os, "name", "posix")
    monkeypatch.setattr(os, "geteuid", lambda: 0, raising=False)
    assert privilege.is_elevated() is True


def test_posix_user(monkeypatch):
    monkeypatch.setattr(privilege.os, "name", "posix")
    monkeypatch.setattr(os, "geteuid", lambda: 1000, raising=False)
    assert privilege.is_elevated() is False
