"""Pytest fixtures and configuration for btrls tests."""
from __future__ import annotations

import os
import pathlib
import sys

import pytest

# Ensure the btrls package is importable when running tests from a checkout
_REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external requirements")
    config.addinivalue_line("markers", "posix: tests relying on POSIX permission bits or byte filenames")
    config.addinivalue_line("markers", "nonroot: tests relying on permission checks that root bypasses")


def pytest_runtest_setup(item):
    """Skip POSIX-only tests elsewhere and permission tests under root."""
    if item.get_closest_marker("posix") and os.name != "posix":
        pytest.skip("requires POSIX filesystem semantics")
    if item.get_closest_marker("nonroot") and hasattr(os, "geteuid") and os.geteuid() == 0:
        pytest.skip("root ignores permission bits")


@pytest.fixture(autouse=True)
def reset_environment(monkeypatch, tmp_path):
    """Keep the user's own config out of every test."""
    monkeypatch.delenv("BTRLS_CONFIG", raising=False)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("APPDATA", str(home))


@pytest.fixture
def sample_dir(tmp_path) -> pathlib.Path:
    """
    root/
      sub/
      a.txt      (100 bytes)
      .secret    (10 bytes)
    """
    root = tmp_path / "root"
    root.mkdir()
    (root / "sub").mkdir()
    (root / "a.txt").write_bytes(b"x" * 100)
    (root / ".secret").write_bytes(b"s" * 10)
    return root


@pytest.fixture
def nested_dir(tmp_path) -> pathlib.Path:
    """
    tree/
      a.txt
      .hidden_dir/
        inside.txt
      sub/
        b.txt
        inner/
          deep.txt
    """
    root = tmp_path / "tree"
    (root / "sub" / "inner").mkdir(parents=True)
    (root / ".hidden_dir").mkdir()
    (root / "a.txt").write_text("a", encoding="utf-8")
    (root / ".hidden_dir" / "inside.txt").write_text("i", encoding="utf-8")
    (root / "sub" / "b.txt").write_text("bb", encoding="utf-8")
    (root / "sub" / "inner" / "deep.txt").write_text("ddd", encoding="utf-8")
    return root


@pytest.fixture
def write_config(tmp_path):
    """Write a TOML config file and return its path."""
    def _write(content: str, name: str = "btrls.toml") -> pathlib.Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write
