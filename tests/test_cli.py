#!/usr/bin/env python3
"""
Tests for the command line interface.
"""

from pathlib import Path

import pytest

from fs_toolkit.cli import main


def test_log_command_appends_newline(tmp_path: Path):
	path = tmp_path / "cli.log"
	main(["log", "hello", "-p", str(path)])
	main(["log", "world", "-p", str(path), "--no-newline"])
	assert path.read_text() == "hello\nworld"


def test_log_command_reads_config_file(tmp_path: Path):
	path = tmp_path / "conf.log"
	config_path = tmp_path / "log.yml"
	config_path.write_text(f"path: {path}\nmax_size: 3\nrotation: 1\n")
	main(["log", "first", "-c", str(config_path)])
	main(["log", "second", "-c", str(config_path)])
	assert path.read_text() == "second\n"
	assert (tmp_path / "conf.log.1").read_text() == "first\n"


def test_log_command_without_path_fails(capsys):
	with pytest.raises(SystemExit) as excinfo:
		main(["log", "orphan"])
	assert excinfo.value.code == 1
	assert "Missing path" in capsys.readouterr().err


def test_search_command(tree: Path, capsys):
	main(["search", str(tree), "-s", "*", "-n", "/cont/i", "--sorted"])
	lines = capsys.readouterr().out.splitlines()
	assert lines == [
		str(tree / "dir1" / "dir11" / "dir111" / "deepFile"),
		str(tree / "file"),
	]


def test_walk_command(tree: Path, capsys):
	main(["walk", str(tree)])
	output = capsys.readouterr().out
	assert "[F] " in output
	assert output.count("[D] ") == 6


def test_remove_command(tree: Path):
	main(["remove", str(tree)])
	assert not tree.exists()


def test_walk_missing_directory(tmp_path: Path):
	with pytest.raises(SystemExit):
		main(["walk", str(tmp_path / "nope")])
