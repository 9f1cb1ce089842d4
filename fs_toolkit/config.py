#!/usr/bin/env python3
from __future__ import annotations

# Standard Library
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Mapping
import json

# PIP3 modules
import yaml

# local repo modules
from .errors import ConfigError

#============================================

DEFAULT_MAX_SIZE = 1048576
OPTION_KEYS = ("path", "max_size", "rotation", "rights")

#============================================


@dataclass(frozen=True, slots=True)
class LogConfig:
	"""
	Options for one rotating log write.

	Attributes:
		path: Log file path, None when not configured yet.
		max_size: Size in bytes above which the file is rotated.
		rotation: Number of old generations kept, 0 keeps none.
		rights: Permission bits applied after writing, None skips chmod.
	"""
	path: Path | None = None
	max_size: int = DEFAULT_MAX_SIZE
	rotation: int = 0
	rights: int | None = None

	#============================================
	def merged(self, options: Mapping[str, Any] | None) -> LogConfig:
		"""
		Layer options over this config.

		Args:
			options: Partial options, keys from OPTION_KEYS.

		Returns:
			New validated LogConfig.
		"""
		if not options:
			return self
		changes = normalize_options(options)
		return replace(self, **changes)

	#============================================
	def require_path(self) -> Path:
		"""
		Return the configured path.

		Raises:
			ConfigError: When no path is configured.
		"""
		if self.path is None:
			raise ConfigError("Missing path")
		return self.path


#============================================


def normalize_options(options: Mapping[str, Any]) -> dict[str, Any]:
	"""
	Validate and coerce partial logger options.

	Args:
		options: Mapping of option names to values.

	Returns:
		Dictionary ready for LogConfig construction.

	Raises:
		ConfigError: On unknown keys or out of range values.
	"""
	unknown = sorted(set(options) - set(OPTION_KEYS))
	if unknown:
		raise ConfigError(f"Unknown logger options: {', '.join(unknown)}")
	cleaned: dict[str, Any] = {}
	if "path" in options:
		value = options["path"]
		cleaned["path"] = None if value in (None, "") else Path(value)
	if "max_size" in options:
		max_size = _as_int("max_size", options["max_size"])
		if max_size <= 0:
			raise ConfigError(f"max_size must be positive, got {max_size}")
		cleaned["max_size"] = max_size
	if "rotation" in options:
		rotation = _as_int("rotation", options["rotation"])
		if rotation < 0:
			raise ConfigError(f"rotation must not be negative, got {rotation}")
		cleaned["rotation"] = rotation
	if "rights" in options:
		rights = options["rights"]
		if rights is not None:
			rights = parse_rights(rights)
		cleaned["rights"] = rights
	return cleaned


#============================================


def _as_int(name: str, value: Any) -> int:
	if isinstance(value, bool):
		raise ConfigError(f"{name} must be an integer, got {value!r}")
	# int() would truncate 1.5 to 1
	if isinstance(value, float) and not value.is_integer():
		raise ConfigError(f"{name} must be an integer, got {value!r}")
	try:
		return int(value)
	except (TypeError, ValueError) as error:
		raise ConfigError(f"{name} must be an integer, got {value!r}") from error


#============================================


def parse_rights(value: int | str) -> int:
	"""
	Parse permission bits.

	Strings are read as octal ("644", "0644" and "0o644" are equal).

	Args:
		value: Integer mode or octal string.

	Returns:
		Integer mode.
	"""
	if isinstance(value, int) and not isinstance(value, bool):
		mode = value
	elif isinstance(value, str):
		text = value.strip().lower()
		if text.startswith("0o"):
			text = text[2:]
		try:
			mode = int(text, 8)
		except ValueError as error:
			raise ConfigError(f"Invalid rights value {value!r}") from error
	else:
		raise ConfigError(f"Invalid rights value {value!r}")
	if mode < 0 or mode > 0o7777:
		raise ConfigError(f"Invalid rights value {value!r}")
	return mode


#============================================


def build_defaults(options: Mapping[str, Any] | None = None) -> LogConfig:
	"""
	Build a LogConfig from partial options over the built-in defaults.
	"""
	return LogConfig().merged(options)


#============================================


def load_log_config(config_path: Path | None) -> dict:
	"""
	Load logger options from yaml or json.

	Args:
		config_path: Path to config file.

	Returns:
		Dictionary of loaded values or empty dict.
	"""
	if not config_path:
		return {}
	if not config_path.exists():
		return {}
	if config_path.suffix.lower() in {".yml", ".yaml"}:
		with config_path.open("r", encoding="utf-8") as handle:
			loaded = yaml.safe_load(handle)
	else:
		with config_path.open("r", encoding="utf-8") as handle:
			loaded = json.load(handle)
	if not loaded:
		return {}
	if not isinstance(loaded, dict):
		raise ConfigError(f"Config file {config_path} must hold a mapping")
	return loaded

