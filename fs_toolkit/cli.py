#!/usr/bin/env python3
"""
Command line interface for fs-toolkit.
"""

# Standard Library
import argparse
import logging
from pathlib import Path
import sys

# local repo modules
from .config import load_log_config, parse_rights
from .errors import FsToolkitError
from .globbing import GlobFlag
from .rotating_log import RotatingLogger
from .search import search
from .walker import Entry, WalkContext, remove_dir, walk_dir

#============================================


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	"""
	Parse CLI arguments.
	"""
	parser = argparse.ArgumentParser(
		description="Rotating log writer and recursive file search."
	)
	parser.add_argument(
		"-v",
		"--verbose",
		dest="verbose",
		action="store_true",
		help="Verbose logging.",
	)
	commands = parser.add_subparsers(dest="command", required=True)

	log_parser = commands.add_parser("log", help="Append a message to a rotating log.")
	log_parser.add_argument(
		"message",
		help="Message to append, '-' reads standard input.",
	)
	log_parser.add_argument(
		"-p",
		"--path",
		dest="path",
		help="Log file path (overrides the config file).",
	)
	log_parser.add_argument(
		"-m",
		"--max-size",
		dest="max_size",
		type=int,
		help="Rotate when the file is larger than this many bytes (default 1 MB).",
	)
	log_parser.add_argument(
		"-r",
		"--rotation",
		dest="rotation",
		type=int,
		help="Number of old log files to keep (default 0).",
	)
	log_parser.add_argument(
		"--rights",
		dest="rights",
		help="Octal file mode applied after writing, e.g. 0644.",
	)
	log_parser.add_argument(
		"-c",
		"--config",
		dest="config_path",
		help="Optional JSON or YAML file with logger defaults.",
	)
	log_parser.add_argument(
		"--no-newline",
		dest="newline",
		action="store_false",
		help="Do not append a newline to the message.",
	)

	search_parser = commands.add_parser("search", help="Search files by pattern and content.")
	search_parser.add_argument("directory", help="Top level directory.")
	search_parser.add_argument(
		"-f",
		"--pattern",
		dest="patterns",
		action="append",
		help="File name pattern (repeatable, default '*').",
	)
	search_parser.add_argument(
		"-s",
		"--subdir",
		dest="subdirs",
		action="append",
		default=[],
		help="Subdirectory pattern to descend into (repeatable).",
	)
	search_parser.add_argument(
		"-n",
		"--needle",
		dest="needle",
		help="Content to look for, '/regex/flags' for a regular expression.",
	)
	search_parser.add_argument(
		"-D",
		"--only-dir",
		dest="only_dir",
		action="store_true",
		help="Match directories only.",
	)
	search_parser.add_argument(
		"-b",
		"--brace",
		dest="brace",
		action="store_true",
		help="Expand {a,b} alternatives in patterns.",
	)
	search_parser.add_argument(
		"-S",
		"--sorted",
		dest="sorted",
		action="store_true",
		help="Print results sorted.",
	)

	walk_parser = commands.add_parser("walk", help="List a directory tree, children first.")
	walk_parser.add_argument("directory", help="Directory to walk.")

	remove_parser = commands.add_parser("remove", help="Remove a directory tree.")
	remove_parser.add_argument("directory", help="Directory to remove.")
	return parser.parse_args(argv)


#============================================


def _color(text: str, code: str) -> str:
	if sys.stdout.isatty():
		return f"\033[{code}m{text}\033[0m"
	return text


#============================================


def build_log_options(args: argparse.Namespace) -> dict:
	"""
	Merge config file values with CLI flags, flags win.

	Args:
		args: Parsed arguments of the log command.

	Returns:
		Logger options dictionary.
	"""
	options: dict = {}
	if args.config_path:
		options.update(load_log_config(Path(args.config_path).expanduser()))
	if args.path:
		options["path"] = Path(args.path).expanduser()
	if args.max_size is not None:
		options["max_size"] = args.max_size
	if args.rotation is not None:
		options["rotation"] = args.rotation
	if args.rights:
		options["rights"] = parse_rights(args.rights)
	return options


#============================================


def run_log(args: argparse.Namespace) -> None:
	message = sys.stdin.read() if args.message == "-" else args.message
	if args.newline and not message.endswith("\n"):
		message += "\n"
	writer = RotatingLogger(build_log_options(args))
	writer.log(message)


#============================================


def run_search_command(args: argparse.Namespace) -> None:
	flags = GlobFlag.NONE
	if args.only_dir:
		flags |= GlobFlag.ONLYDIR
	if args.brace:
		flags |= GlobFlag.BRACE
	patterns = args.patterns or ["*"]
	results = search(args.directory, flags, patterns, args.subdirs, args.needle)
	if args.sorted:
		results = sorted(results, key=str)
	for path in results:
		print(path)


#============================================


def run_walk(args: argparse.Namespace) -> None:
	def _print_entry(entry: Entry, context: WalkContext) -> None:
		tag = _color("[D]", "34") if entry.is_dir else _color("[F]", "32")
		print(f"{tag} {entry.path}")

	walk_dir(args.directory, _print_entry)


#============================================


def main(argv: list[str] | None = None) -> None:
	"""
	Entry point for the CLI.
	"""
	args = parse_args(argv)
	if args.verbose:
		logging.basicConfig(level=logging.INFO)
	else:
		logging.basicConfig(level=logging.WARNING)
	handlers = {
		"log": run_log,
		"search": run_search_command,
		"walk": run_walk,
		"remove": lambda parsed: remove_dir(parsed.directory),
	}
	try:
		handlers[args.command](args)
	except FsToolkitError as error:
		print(f"{_color('[ERROR]', '31')} {error}", file=sys.stderr)
		raise SystemExit(1) from error


#============================================


if __name__ == "__main__":
	main()
