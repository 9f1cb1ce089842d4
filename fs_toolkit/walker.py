#!/usr/bin/env python3
"""
Recursive directory walking and removal.
"""

from __future__ import annotations

# Standard Library
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterator

# local repo modules
from .filesystem import FileSystem, default_fs, read_dir

logger = logging.getLogger(__name__)

#============================================


@dataclass(frozen=True, slots=True)
class Entry:
	"""
	Filesystem node met during a walk.

	Attributes:
		path: Absolute path under the canonical walk root.
		is_dir: True for real directories, False for files and symlinks.
	"""
	path: Path
	is_dir: bool


@dataclass(frozen=True, slots=True)
class WalkContext:
	"""
	Extra data handed to walk visitors.

	Attributes:
		root: Path as passed to walk_dir.
	"""
	root: Path


WalkVisitor = Callable[[Entry, WalkContext], None]

#============================================


def _walk(fs: FileSystem, directory: Path, names: list[str] | None = None) -> Iterator[Entry]:
	if names is None:
		names = fs.list_dir(directory)
	for name in names:
		child = directory / name
		if fs.is_dir(child) and not fs.is_symlink(child):
			yield from _walk(fs, child)
			yield Entry(path=child, is_dir=True)
		else:
			yield Entry(path=child, is_dir=False)


#============================================


def iter_entries(path: str | Path, fs: FileSystem | None = None) -> Iterator[Entry]:
	"""
	Iterate descendants of a directory, children before their parent.

	The directory is resolved and listed before iteration starts. Errors
	listing nested directories surface as OSError while iterating.

	Args:
		path: Directory to walk.
		fs: Filesystem provider.

	Returns:
		Iterator of Entry objects, the root itself excluded.

	Raises:
		PathError: When path is not an existing, readable directory.
	"""
	fs = fs or default_fs()
	real_path, names = read_dir(path, fs)
	return _walk(fs, real_path, names)


#============================================


def walk_dir(path: str | Path, visitor: WalkVisitor, fs: FileSystem | None = None) -> None:
	"""
	Walk a directory recursively in post-order.

	Args:
		path: Directory to walk.
		visitor: Called with (entry, context) for every descendant.
		fs: Filesystem provider.

	Raises:
		PathError: When path is not an existing, readable directory.
	"""
	context = WalkContext(root=Path(path))
	for entry in iter_entries(path, fs):
		visitor(entry, context)


#============================================


def remove_dir(path: str | Path, fs: FileSystem | None = None) -> None:
	"""
	Remove a directory and everything below it.

	Args:
		path: Directory to remove.
		fs: Filesystem provider.

	Raises:
		PathError: When path is not an existing, readable directory.
		OSError: When an entry cannot be removed.
	"""
	fs = fs or default_fs()

	def _remove(entry: Entry, _context: WalkContext) -> None:
		if entry.is_dir:
			fs.remove_dir(entry.path)
		else:
			fs.remove_file(entry.path)

	walk_dir(path, _remove, fs)
	fs.remove_dir(Path(path))
	logger.debug("removed directory %s", path)
