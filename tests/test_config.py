#!/usr/bin/env python3
"""
Tests for logger option handling and config files.
"""

import json
from pathlib import Path

import pytest

from fs_toolkit.config import LogConfig, load_log_config, normalize_options, parse_rights
from fs_toolkit.errors import ConfigError


def test_parse_rights_forms():
	assert parse_rights(0o644) == 0o644
	assert parse_rights("644") == 0o644
	assert parse_rights("0644") == 0o644
	assert parse_rights("0o755") == 0o755
	with pytest.raises(ConfigError):
		parse_rights("rw-r--r--")
	with pytest.raises(ConfigError):
		parse_rights(True)


def test_merge_keeps_unspecified_fields():
	base = LogConfig(path=Path("/tmp/a.log"), rotation=2)
	merged = base.merged({"max_size": "512"})
	assert merged == LogConfig(path=Path("/tmp/a.log"), max_size=512, rotation=2)
	assert base.merged(None) is base


def test_normalize_rejects_bad_values():
	with pytest.raises(ConfigError, match="integer"):
		normalize_options({"max_size": "big"})
	with pytest.raises(ConfigError):
		normalize_options({"rotation": True})
	assert normalize_options({"path": ""}) == {"path": None}


def test_fractional_sizes_rejected():
	with pytest.raises(ConfigError, match="max_size"):
		normalize_options({"max_size": 1.5})
	with pytest.raises(ConfigError, match="rotation"):
		normalize_options({"rotation": 2.25})
	assert normalize_options({"max_size": 2048.0, "rotation": 2.0}) == {
		"max_size": 2048,
		"rotation": 2,
	}


def test_load_yaml_config(tmp_path: Path):
	config_path = tmp_path / "log.yaml"
	config_path.write_text("path: /var/tmp/app.log\nmax_size: 2048\nrights: '0640'\n")
	loaded = load_log_config(config_path)
	assert loaded == {"path": "/var/tmp/app.log", "max_size": 2048, "rights": "0640"}
	assert LogConfig().merged(loaded).rights == 0o640


def test_load_json_config(tmp_path: Path):
	config_path = tmp_path / "log.json"
	config_path.write_text(json.dumps({"rotation": 3}))
	assert load_log_config(config_path) == {"rotation": 3}


def test_missing_or_empty_config(tmp_path: Path):
	assert load_log_config(None) == {}
	assert load_log_config(tmp_path / "absent.yml") == {}
	empty = tmp_path / "empty.yml"
	empty.write_text("")
	assert load_log_config(empty) == {}
	listing = tmp_path / "list.yml"
	listing.write_text("- a\n- b\n")
	with pytest.raises(ConfigError):
		load_log_config(listing)
