#!/usr/bin/env python3
"""
Recursive file search by name patterns and content.

Examples:
	# every directory below root
	search(root, GlobFlag.ONLYDIR, [], ["*", ".*"])

	# rewrite files containing "needle"
	def rewrite(path, context):
		text = path.read_text()
		path.write_text(text.replace(context.needle, "replacement"))

	search(root, 0, ["*", ".*"], ["*", ".*"], "needle", rewrite)

A needle starting with "/" is a delimited regular expression such as
"/cont/i"; any other needle is a case sensitive substring.
"""

from __future__ import annotations

# Standard Library
import logging
import re
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Callable, Iterable, Iterator, Mapping

# local repo modules
from .errors import PatternError
from .filesystem import FileSystem, default_fs, read_dir
from .globbing import GlobFlag, glob_dir

logger = logging.getLogger(__name__)

_REGEX_MODIFIERS = {
	"i": re.IGNORECASE,
	"m": re.MULTILINE,
	"s": re.DOTALL,
	"x": re.VERBOSE,
	# str patterns are unicode aware already
	"u": 0,
}
# flags carried over from the caller when listing subdirectories
_SUBDIR_FLAGS = GlobFlag.BRACE | GlobFlag.NOSORT

#============================================


@dataclass(frozen=True, slots=True)
class SearchContext:
	"""
	Data handed to search visitors.

	Attributes:
		root: Top level directory of the search, as passed.
		needle: Content needle, None when searching by name only.
		args: Caller supplied visitor arguments.
	"""
	root: Path
	needle: str | None
	args: Mapping[str, Any]


SearchVisitor = Callable[[Path, SearchContext], None]


@dataclass(frozen=True, slots=True)
class Collect:
	"""
	Return matches from search().
	"""


@dataclass(frozen=True, slots=True)
class Visit:
	"""
	Stream matches to a callback, search() returns an empty list.
	"""
	callback: SearchVisitor


SearchMode = Collect | Visit

#============================================


def compile_needle(needle: str) -> re.Pattern[str]:
	"""
	Compile a "/body/modifiers" needle.

	Args:
		needle: Needle starting with "/".

	Returns:
		Compiled pattern.

	Raises:
		PatternError: On a missing end delimiter, an unknown modifier or an
			invalid expression.
	"""
	end = needle.rfind("/")
	if end <= 0:
		raise PatternError(f"No ending delimiter '/' in needle {needle!r}")
	body = needle[1:end]
	flags = 0
	for modifier in needle[end + 1:]:
		if modifier not in _REGEX_MODIFIERS:
			raise PatternError(f"Unknown modifier {modifier!r} in needle {needle!r}")
		flags |= _REGEX_MODIFIERS[modifier]
	try:
		return re.compile(body, flags)
	except re.error as error:
		raise PatternError(f"Invalid needle {needle!r}: {error}") from error


#============================================


class ContentMatcher:
	"""
	Content test for one needle.
	"""

	#============================================
	def __init__(self, needle: str) -> None:
		self.needle = needle
		self.regex: re.Pattern[str] | None = None
		if needle.startswith("/"):
			self.regex = compile_needle(needle)

	#============================================
	def matches(self, text: str) -> bool:
		if self.regex is not None:
			return self.regex.search(text) is not None
		return self.needle in text

	#============================================
	def matches_file(self, fs: FileSystem, path: Path) -> bool:
		"""
		Test a file's content; directories never match.
		"""
		if not fs.is_file(path):
			return False
		return self.matches(fs.read_text(path))


#============================================


@dataclass(frozen=True, slots=True)
class SearchRequest:
	"""
	One search call.

	Attributes:
		root: Directory searched at this level.
		flags: GlobFlag combination for file patterns.
		file_patterns: Patterns selecting results, in reporting order.
		subdir_patterns: Patterns selecting subdirectories to descend into,
			empty disables recursion.
		needle: Optional content needle.
		mode: Collect or Visit.
		visitor_args: Opaque mapping passed through to visitors.
	"""
	root: Path
	flags: GlobFlag = GlobFlag.NONE
	file_patterns: tuple[str, ...] = ()
	subdir_patterns: tuple[str, ...] = ()
	needle: str | None = None
	mode: SearchMode = field(default_factory=Collect)
	visitor_args: Mapping[str, Any] = field(default_factory=dict)

	#============================================
	def descend(self, subdir: Path) -> SearchRequest:
		return replace(self, root=subdir)


#============================================


def _unique(paths: Iterable[Path]) -> list[Path]:
	return list(dict.fromkeys(paths))


#============================================


def _search_level(
	fs: FileSystem,
	request: SearchRequest,
	matcher: ContentMatcher | None,
	context: SearchContext,
	seen: set[Path],
) -> Iterator[Path]:
	matches: list[Path] = []
	for pattern in request.file_patterns:
		matches.extend(glob_dir(fs, request.root, pattern, request.flags))
	for path in _unique(matches):
		if path in seen:
			continue
		if matcher is not None and not matcher.matches_file(fs, path):
			continue
		seen.add(path)
		if isinstance(request.mode, Visit):
			request.mode.callback(path, context)
		else:
			yield path

	subdir_flags = GlobFlag.ONLYDIR | (request.flags & _SUBDIR_FLAGS)
	subdirs: list[Path] = []
	for pattern in request.subdir_patterns:
		subdirs.extend(glob_dir(fs, request.root, pattern, subdir_flags))
	subdirs = _unique(subdirs)
	# directories cannot match content
	if matcher is None and isinstance(request.mode, Collect):
		for subdir in subdirs:
			if subdir not in seen:
				seen.add(subdir)
				yield subdir
	# reported or not, every listed subdirectory is searched
	for subdir in subdirs:
		yield from _search_level(fs, request.descend(subdir), matcher, context, seen)


#============================================


def run_search(request: SearchRequest, fs: FileSystem | None = None) -> list[Path]:
	"""
	Execute a prepared search request.

	Args:
		request: Search request.
		fs: Filesystem provider.

	Returns:
		Matching paths in pattern order then depth first, without
		duplicates. Always empty in Visit mode, where the visitor sees
		each path once.

	Raises:
		PathError: When the root is not an existing, readable directory.
		PatternError: When the needle is a malformed expression.
	"""
	if not request.file_patterns and not request.subdir_patterns:
		return []
	fs = fs or default_fs()
	read_dir(request.root, fs)
	matcher = ContentMatcher(request.needle) if request.needle is not None else None
	context = SearchContext(
		root=request.root,
		needle=request.needle,
		args=request.visitor_args,
	)
	found = list(_search_level(fs, request, matcher, context, set()))
	logger.debug("search in %s found %d paths", request.root, len(found))
	return found


#============================================


def search(
	directory: str | Path,
	flags: int = GlobFlag.NONE,
	file_patterns: Iterable[str] = (),
	subdir_patterns: Iterable[str] = (),
	needle: str | None = None,
	visitor: SearchVisitor | None = None,
	args: Mapping[str, Any] | None = None,
	fs: FileSystem | None = None,
) -> list[Path]:
	"""
	Search files and directories by name patterns and content.

	Args:
		directory: Top level directory, "" means the current directory.
		flags: GlobFlag combination used for file patterns.
		file_patterns: Glob patterns selecting results at every level.
		subdir_patterns: Glob patterns selecting subdirectories to descend
			into; matching directories are reported too unless a needle is set.
		needle: Content needle, "/regex/modifiers" or a plain substring.
		visitor: Called with (path, context) per match instead of collecting.
		args: Extra data exposed to the visitor as context.args.
		fs: Filesystem provider.

	Returns:
		List of matching paths, empty when a visitor is given.
	"""
	request = SearchRequest(
		root=Path(directory),
		flags=GlobFlag(flags),
		file_patterns=tuple(file_patterns),
		subdir_patterns=tuple(subdir_patterns),
		needle=needle,
		mode=Visit(visitor) if visitor is not None else Collect(),
		visitor_args=dict(args or {}),
	)
	return run_search(request, fs)
