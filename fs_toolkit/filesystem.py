#!/usr/bin/env python3
"""
Filesystem provider used by the logger, walker and search.
"""

from __future__ import annotations

# Standard Library
import os
from pathlib import Path
from typing import Protocol

# local repo modules
from .errors import PathError

#============================================


class FileSystem(Protocol):
	"""
	Primitive filesystem operations.

	Paths passed in are whatever the caller built; implementations do not
	canonicalize them except in resolve().
	"""

	def resolve(self, path: Path) -> Path:
		"""
		Return the canonical absolute path, raising OSError when missing.
		"""

	def exists(self, path: Path) -> bool: ...

	def is_dir(self, path: Path) -> bool: ...

	def is_file(self, path: Path) -> bool: ...

	def is_symlink(self, path: Path) -> bool: ...

	def list_dir(self, path: Path) -> list[str]:
		"""
		Names inside a directory, without the "." and ".." entries.
		"""

	def size(self, path: Path) -> int:
		"""
		Current size in bytes, never served from a cache.
		"""

	def read_text(self, path: Path) -> str: ...

	def append_text(self, path: Path, text: str) -> None: ...

	def rename(self, source: Path, target: Path) -> None: ...

	def remove_file(self, path: Path) -> None: ...

	def remove_dir(self, path: Path) -> None: ...

	def chmod(self, path: Path, mode: int) -> None: ...


#============================================


class LocalFileSystem:
	"""
	FileSystem backed by the host operating system.
	"""

	#============================================
	def resolve(self, path: Path) -> Path:
		return Path(path).resolve(strict=True)

	#============================================
	def exists(self, path: Path) -> bool:
		return os.path.lexists(path)

	#============================================
	def is_dir(self, path: Path) -> bool:
		return Path(path).is_dir()

	#============================================
	def is_file(self, path: Path) -> bool:
		return Path(path).is_file()

	#============================================
	def is_symlink(self, path: Path) -> bool:
		return Path(path).is_symlink()

	#============================================
	def list_dir(self, path: Path) -> list[str]:
		# os.scandir never yields "." or ".."
		with os.scandir(path) as entries:
			return [entry.name for entry in entries]

	#============================================
	def size(self, path: Path) -> int:
		return os.stat(path).st_size

	#============================================
	def read_text(self, path: Path) -> str:
		return Path(path).read_text(encoding="utf-8", errors="replace")

	#============================================
	def append_text(self, path: Path, text: str) -> None:
		with open(path, "a", encoding="utf-8") as handle:
			handle.write(text)

	#============================================
	def rename(self, source: Path, target: Path) -> None:
		os.replace(source, target)

	#============================================
	def remove_file(self, path: Path) -> None:
		os.unlink(path)

	#============================================
	def remove_dir(self, path: Path) -> None:
		os.rmdir(path)

	#============================================
	def chmod(self, path: Path, mode: int) -> None:
		os.chmod(path, mode)


#============================================


def default_fs() -> FileSystem:
	"""
	Filesystem used when the caller does not pass one.

	Returns:
		LocalFileSystem instance.
	"""
	return LocalFileSystem()


#============================================


def resolve_dir(path: str | Path, fs: FileSystem | None = None) -> Path:
	"""
	Canonicalize a directory path.

	Args:
		path: Directory path, relative or absolute.
		fs: Filesystem provider.

	Returns:
		Absolute canonical Path of the directory.

	Raises:
		PathError: When path is missing or not a directory.
	"""
	fs = fs or default_fs()
	try:
		real_path = fs.resolve(Path(path))
	except OSError as error:
		raise PathError(f"Passed path \"{path}\" isn't a directory") from error
	if not fs.is_dir(real_path):
		raise PathError(f"Passed path \"{path}\" isn't a directory")
	return real_path


#============================================


def read_dir(path: str | Path, fs: FileSystem | None = None) -> tuple[Path, list[str]]:
	"""
	Canonicalize a directory path and list it.

	Only the first listing is checked here; errors below the root are
	left to the caller.

	Args:
		path: Directory path, relative or absolute.
		fs: Filesystem provider.

	Returns:
		Tuple of the canonical Path and the names inside it.

	Raises:
		PathError: When path is missing, not a directory or unreadable.
	"""
	fs = fs or default_fs()
	real_path = resolve_dir(path, fs)
	try:
		names = fs.list_dir(real_path)
	except OSError as error:
		raise PathError(f"Passed path \"{path}\" isn't a directory") from error
	return real_path, names
