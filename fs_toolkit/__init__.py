"""
fs_toolkit
==========

Rotating log writer plus recursive directory walking and searching.
"""

from .config import LogConfig
from .errors import ConfigError, FsToolkitError, PathError, PatternError
from .filesystem import FileSystem, LocalFileSystem, read_dir, resolve_dir
from .globbing import GlobFlag
from .rotating_log import RotatingLogger
from .search import Collect, SearchContext, SearchRequest, Visit, run_search, search
from .walker import Entry, WalkContext, iter_entries, remove_dir, walk_dir

__version__ = "0.1.0"

__all__ = [
	"Collect",
	"ConfigError",
	"Entry",
	"FileSystem",
	"FsToolkitError",
	"GlobFlag",
	"LocalFileSystem",
	"LogConfig",
	"PathError",
	"PatternError",
	"RotatingLogger",
	"SearchContext",
	"SearchRequest",
	"Visit",
	"WalkContext",
	"iter_entries",
	"read_dir",
	"remove_dir",
	"resolve_dir",
	"run_search",
	"search",
	"walk_dir",
]
