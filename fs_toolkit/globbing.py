#!/usr/bin/env python3
"""
Shell style pattern expansion over a FileSystem provider.
"""

from __future__ import annotations

# Standard Library
import enum
import fnmatch
from pathlib import Path

# local repo modules
from .filesystem import FileSystem

#============================================

DOT_ENTRIES = frozenset({".", ".."})
_MAGIC_CHARS = frozenset("*?[")

#============================================


class GlobFlag(enum.IntFlag):
	"""
	Pattern expansion flags.
	"""
	NONE = 0
	# keep directories only
	ONLYDIR = 1
	# keep enumeration order
	NOSORT = 2
	# expand {a,b} alternatives
	BRACE = 4
	# return the pattern itself when nothing matches
	NOCHECK = 8


#============================================


def has_magic(segment: str) -> bool:
	return any(char in _MAGIC_CHARS for char in segment)


#============================================


def expand_braces(pattern: str) -> list[str]:
	"""
	Expand the {a,b} alternatives of a pattern.

	Nested groups are expanded recursively, an unbalanced brace is kept
	literally.

	Args:
		pattern: Glob pattern.

	Returns:
		Patterns in alternative order.
	"""
	start = pattern.find("{")
	if start < 0:
		return [pattern]
	depth = 0
	parts: list[str] = []
	last = start + 1
	for index in range(start, len(pattern)):
		char = pattern[index]
		if char == "{":
			depth += 1
		elif char == "," and depth == 1:
			parts.append(pattern[last:index])
			last = index + 1
		elif char == "}":
			depth -= 1
			if depth == 0:
				parts.append(pattern[last:index])
				prefix = pattern[:start]
				suffix = pattern[index + 1:]
				expanded: list[str] = []
				for part in parts:
					expanded.extend(expand_braces(prefix + part + suffix))
				return expanded
	return [pattern]


#============================================


def _match_name(name: str, segment: str) -> bool:
	# leading dots must be matched explicitly
	if name.startswith(".") and not segment.startswith("."):
		return False
	return fnmatch.fnmatchcase(name, segment)


#============================================


def _expand_one(fs: FileSystem, root: Path, pattern: str) -> list[Path]:
	segments = [segment for segment in pattern.split("/") if segment]
	if not segments:
		return []
	candidates: list[Path] = [root]
	for position, segment in enumerate(segments):
		is_last = position == len(segments) - 1
		# "." and ".." are never reported as matches
		if is_last and segment in DOT_ENTRIES:
			return []
		next_candidates: list[Path] = []
		for base in candidates:
			if not has_magic(segment):
				candidate = base / segment
				if is_last and fs.exists(candidate):
					next_candidates.append(candidate)
				elif not is_last and fs.is_dir(candidate):
					next_candidates.append(candidate)
				continue
			if not fs.is_dir(base):
				continue
			for name in fs.list_dir(base):
				if not _match_name(name, segment):
					continue
				candidate = base / name
				if is_last or fs.is_dir(candidate):
					next_candidates.append(candidate)
		candidates = next_candidates
		if not candidates:
			break
	return candidates


#============================================


def glob_dir(
	fs: FileSystem,
	root: Path,
	pattern: str,
	flags: int = GlobFlag.NONE,
) -> list[Path]:
	"""
	Expand a pattern relative to a directory.

	Args:
		fs: Filesystem provider.
		root: Directory the pattern is relative to.
		pattern: Glob pattern, may span several "/" separated segments.
		flags: GlobFlag combination.

	Returns:
		Matching paths, joined onto root.
	"""
	flags = GlobFlag(flags)
	patterns = expand_braces(pattern) if flags & GlobFlag.BRACE else [pattern]
	results: list[Path] = []
	for item in patterns:
		matches = _expand_one(fs, root, item)
		if not flags & GlobFlag.NOSORT:
			matches.sort(key=str)
		results.extend(matches)
	if flags & GlobFlag.ONLYDIR:
		results = [path for path in results if fs.is_dir(path)]
	if not results and flags & GlobFlag.NOCHECK:
		return [root / pattern]
	return results
