#!/usr/bin/env python3
"""
Append-only log writer with size based file rotation.

Example:
	writer = RotatingLogger({"path": "/var/tmp/app.log", "rotation": 3})
	writer.log("started\\n")

When app.log grows past max_size the next write shifts the chain
app.log -> app.log.1 -> app.log.2 -> app.log.3 (the oldest is dropped)
and starts a fresh app.log. One writer per file is assumed.
"""

from __future__ import annotations

# Standard Library
import logging
from pathlib import Path
from typing import Any, Mapping

# local repo modules
from .config import LogConfig, build_defaults
from .filesystem import FileSystem, default_fs, resolve_dir

logger = logging.getLogger(__name__)

#============================================


def generation_path(path: Path, index: int) -> Path:
	"""
	Path of one generation in the rotation chain.

	Args:
		path: Base log path.
		index: Generation number, 0 is the live file.

	Returns:
		path for index 0, otherwise path with a ".<index>" suffix.
	"""
	if index == 0:
		return path
	return path.with_name(f"{path.name}.{index}")


#============================================


class RotatingLogger:
	"""
	Size bounded log file writer.
	"""

	#============================================
	def __init__(
		self,
		options: Mapping[str, Any] | None = None,
		fs: FileSystem | None = None,
	) -> None:
		self.fs = fs or default_fs()
		self.defaults: LogConfig = build_defaults(options)

	#============================================
	def set_defaults(self, options: Mapping[str, Any], override: bool = False) -> None:
		"""
		Set default options.

		Args:
			options: Partial options (path, max_size, rotation, rights).
			override: Replace the stored defaults, unspecified fields fall back
				to the built-in values. Otherwise options update the stored ones.
		"""
		if override:
			self.defaults = build_defaults(options)
			return
		self.defaults = self.defaults.merged(options)

	#============================================
	def effective_config(
		self,
		path: str | Path | None = None,
		options: Mapping[str, Any] | None = None,
	) -> LogConfig:
		"""
		Resolve options for one call: options, then path, then defaults.
		"""
		config = self.defaults
		if path is not None:
			config = config.merged({"path": path})
		return config.merged(options)

	#============================================
	def _target(self, config: LogConfig) -> Path:
		path = config.require_path()
		real_dir = resolve_dir(path.parent, self.fs)
		return real_dir / path.name

	#============================================
	def rotate(
		self,
		path: str | Path | None = None,
		options: Mapping[str, Any] | None = None,
	) -> bool:
		"""
		Rotate the log file when it is larger than max_size.

		Args:
			path: Log path, overrides the stored default.
			options: Partial options for this call.

		Returns:
			True when the chain was shifted.

		Raises:
			ConfigError: When no path resolves.
			PathError: When the parent directory is invalid.
		"""
		config = self.effective_config(path, options)
		return self._rotate(self._target(config), config)

	#============================================
	def _rotate(self, target: Path, config: LogConfig) -> bool:
		if not self.fs.exists(target):
			return False
		current_size = self.fs.size(target)
		if current_size <= config.max_size:
			return False
		logger.info("rotated %s (%d bytes > %d)", target, current_size, config.max_size)
		for index in range(config.rotation, 0, -1):
			dest = generation_path(target, index)
			if self.fs.exists(dest):
				self.fs.remove_file(dest)
			source = generation_path(target, index - 1)
			if self.fs.exists(source):
				logger.debug("shift %s -> %s", source, dest)
				self.fs.rename(source, dest)
		# nothing was shifted when rotation == 0
		if self.fs.exists(target):
			self.fs.remove_file(target)
		return True

	#============================================
	def log(
		self,
		message: str,
		path: str | Path | None = None,
		options: Mapping[str, Any] | None = None,
	) -> None:
		"""
		Rotate if needed, then append the message.

		Args:
			message: Text appended as is, no newline is added.
			path: Log path, overrides the stored default.
			options: Partial options for this call.

		Raises:
			ConfigError: When no path resolves.
			PathError: When the parent directory is invalid.
		"""
		config = self.effective_config(path, options)
		target = self._target(config)
		self._rotate(target, config)
		self.fs.append_text(target, message)
		if config.rights is not None:
			self.fs.chmod(target, config.rights)

	#============================================
	def generations(self, path: str | Path | None = None) -> list[Path]:
		"""
		List the existing rotation chain, newest first.

		Stops at the first missing generation.
		"""
		config = self.effective_config(path)
		target = self._target(config)
		chain: list[Path] = []
		index = 0
		while self.fs.exists(generation_path(target, index)):
			chain.append(generation_path(target, index))
			index += 1
		return chain
