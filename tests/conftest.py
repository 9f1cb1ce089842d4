"""
Pytest config to ensure local package imports work without installation.
"""

from __future__ import annotations

import errno
import posixpath
import sys
from pathlib import Path

import pytest


def _add_repo_root_to_path() -> None:
	"""
	Insert the repo root into sys.path for local imports.
	"""
	repo_root = Path(__file__).resolve().parent.parent
	repo_root_str = str(repo_root)
	if repo_root_str not in sys.path:
		sys.path.insert(0, repo_root_str)


_add_repo_root_to_path()


class MemoryFileSystem:
	"""
	Test-only in-memory FileSystem, absolute POSIX paths only.
	"""

	def __init__(self) -> None:
		self.dirs: set[str] = {"/"}
		self.files: dict[str, str] = {}
		self.modes: dict[str, int] = {}

	def _key(self, path) -> str:
		return posixpath.normpath(str(path))

	def mkdir(self, path) -> None:
		key = self._key(path)
		while key not in self.dirs:
			self.dirs.add(key)
			key = posixpath.dirname(key)

	def write(self, path, text: str) -> None:
		key = self._key(path)
		self.mkdir(posixpath.dirname(key))
		self.files[key] = text

	def resolve(self, path: Path) -> Path:
		key = self._key(path)
		if not self.exists(key):
			raise FileNotFoundError(errno.ENOENT, "No such file or directory", key)
		return Path(key)

	def exists(self, path: Path) -> bool:
		key = self._key(path)
		return key in self.dirs or key in self.files

	def is_dir(self, path: Path) -> bool:
		return self._key(path) in self.dirs

	def is_file(self, path: Path) -> bool:
		return self._key(path) in self.files

	def is_symlink(self, path: Path) -> bool:
		return False

	def list_dir(self, path: Path) -> list[str]:
		key = self._key(path)
		if key not in self.dirs:
			raise NotADirectoryError(errno.ENOTDIR, "Not a directory", key)
		names = {
			posixpath.basename(item)
			for item in self.dirs | set(self.files)
			if item != key and posixpath.dirname(item) == key
		}
		return sorted(names)

	def size(self, path: Path) -> int:
		return len(self.read_text(path).encode("utf-8"))

	def read_text(self, path: Path) -> str:
		key = self._key(path)
		if key not in self.files:
			raise FileNotFoundError(errno.ENOENT, "No such file or directory", key)
		return self.files[key]

	def append_text(self, path: Path, text: str) -> None:
		key = self._key(path)
		if posixpath.dirname(key) not in self.dirs:
			raise FileNotFoundError(errno.ENOENT, "No such file or directory", key)
		self.files[key] = self.files.get(key, "") + text

	def rename(self, source: Path, target: Path) -> None:
		text = self.read_text(source)
		del self.files[self._key(source)]
		self.files[self._key(target)] = text

	def remove_file(self, path: Path) -> None:
		key = self._key(path)
		if key not in self.files:
			raise FileNotFoundError(errno.ENOENT, "No such file or directory", key)
		del self.files[key]

	def remove_dir(self, path: Path) -> None:
		key = self._key(path)
		if key not in self.dirs:
			raise FileNotFoundError(errno.ENOENT, "No such file or directory", key)
		if self.list_dir(key):
			raise OSError(errno.ENOTEMPTY, "Directory not empty", key)
		self.dirs.discard(key)

	def chmod(self, path: Path, mode: int) -> None:
		self.modes[self._key(path)] = mode


def build_tree(root: Path) -> Path:
	"""
	Create the sample tree used by walker and search tests.

	root/
		dir1/dir11/dir111/deepFile ("contraception")
		dir2/dir22/
		dir3/
		file ("someCONTEnt")
	"""
	deep_path = root / "dir1" / "dir11" / "dir111"
	deep_path.mkdir(parents=True)
	(root / "dir2" / "dir22").mkdir(parents=True)
	(root / "dir3").mkdir()
	(root / "file").write_text("someCONTEnt", encoding="utf-8")
	(deep_path / "deepFile").write_text("contraception", encoding="utf-8")
	return root


@pytest.fixture
def memory_fs() -> MemoryFileSystem:
	return MemoryFileSystem()


@pytest.fixture
def tree(tmp_path: Path) -> Path:
	return build_tree(tmp_path / "tree")
