"""Tests for btrls.tree module."""
from __future__ import annotations

import io
import os

import pytest

from btrls.tree import BRANCH, CONTINUATION, recursive_listing


def _walk(path, depth, show_hidden=False) -> list[str]:
    out = io.StringIO()
    recursive_listing(path, depth, 0, "", show_hidden, out=out)
    return out.getvalue().splitlines()


@pytest.mark.unit
class TestRecursiveListing:
    """Tests for the streaming tree walker."""

    def test_depth_zero_prints_only_children(self, nested_dir):
        lines = _walk(nested_dir, 0)
        assert sorted(lines) == sorted([f"{BRANCH}a.txt", f"{BRANCH}sub"])

    def test_depth_one_expands_one_level(self, nested_dir):
        lines = _walk(nested_dir, 1)
        assert f"{CONTINUATION}{BRANCH}b.txt" in lines
        assert f"{CONTINUATION}{BRANCH}inner" in lines
        assert not any("deep.txt" in line for line in lines)

    def test_deep_walk(self, nested_dir):
        lines = _walk(nested_dir, 5)
        assert f"{CONTINUATION * 2}{BRANCH}deep.txt" in lines
        assert len(lines) == 5

    def test_children_follow_their_parent(self, nested_dir):
        lines = _walk(nested_dir, 1)
        sub_at = lines.index(f"{BRANCH}sub")
        nested = lines[sub_at + 1:sub_at + 3]
        assert sorted(nested) == sorted([f"{CONTINUATION}{BRANCH}b.txt", f"{CONTINUATION}{BRANCH}inner"])

    def test_hidden_skipped_by_default(self, nested_dir):
        lines = _walk(nested_dir, 2)
        assert not any(".hidden_dir" in line or "inside.txt" in line for line in lines)

    def test_hidden_shown_when_requested(self, nested_dir):
        lines = _walk(nested_dir, 1, show_hidden=True)
        assert f"{BRANCH}.hidden_dir" in lines
        assert f"{CONTINUATION}{BRANCH}inside.txt" in lines

    def test_special_files_always_shown(self, tmp_path):
        (tmp_path / "proj").mkdir()
        (tmp_path / "proj" / ".gitignore").write_text("", encoding="utf-8")
        assert _walk(tmp_path / "proj", 0) == [f"{BRANCH}.gitignore"]

    def test_unreadable_root_prints_nothing(self, tmp_path):
        assert _walk(tmp_path / "missing", 3) == []

    @pytest.mark.posix
    @pytest.mark.nonroot
    def test_unreadable_subdirectory_ends_branch(self, tmp_path):
        root = tmp_path / "walk"
        (root / "open").mkdir(parents=True)
        (root / "locked").mkdir()
        (root / "open" / "file.txt").write_text("", encoding="utf-8")
        (root / "locked" / "secret.txt").write_text("", encoding="utf-8")
        (root / "locked").chmod(0)
        try:
            lines = _walk(root, 2)
        finally:
            (root / "locked").chmod(0o755)
        assert f"{BRANCH}locked" in lines
        assert f"{BRANCH}open" in lines
        assert f"{CONTINUATION}{BRANCH}file.txt" in lines
        assert not any("secret.txt" in line for line in lines)

    @pytest.mark.posix
    def test_executable_marker(self, tmp_path):
        root = tmp_path / "bin"
        root.mkdir()
        script = root / "run.sh"
        script.write_text("#!/bin/sh\n", encoding="utf-8")
        script.chmod(0o755)
        (root / "notes.txt").write_text("", encoding="utf-8")

        lines = _walk(root, 0)
        assert sorted(lines) == sorted([f"{BRANCH}*run.sh", f"{BRANCH}notes.txt"])

    @pytest.mark.posix
    def test_dangling_symlink_skipped(self, tmp_path):
        root = tmp_path / "links"
        root.mkdir()
        os.symlink(root / "nowhere", root / "dangling")
        assert _walk(root, 0) == []

    def test_defaults_to_stdout(self, nested_dir, capsys):
        recursive_listing(nested_dir, 0)
        captured = capsys.readouterr().out.splitlines()
        assert f"{BRANCH}sub" in captured
