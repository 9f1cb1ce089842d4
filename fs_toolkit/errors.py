#!/usr/bin/env python3
"""
Error types raised by fs_toolkit.

Filesystem failures (rename, unlink, chmod, read, write) are not wrapped:
they surface as the OSError raised by the operating system.
"""

#============================================


class FsToolkitError(Exception):
	"""
	Base class for fs_toolkit errors.
	"""


class ConfigError(FsToolkitError, ValueError):
	"""
	Missing or invalid logger options.
	"""


class PathError(FsToolkitError, ValueError):
	"""
	Path does not resolve to an existing directory.
	"""


class PatternError(FsToolkitError, ValueError):
	"""
	Malformed regular expression content needle.
	"""
