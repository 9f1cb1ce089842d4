#!/usr/bin/env python3
"""
Repo-root runner for fs_toolkit.

Examples:
	python run_fs_toolkit.py log "service started" -p /tmp/app.log -m 4096 -r 3
	python run_fs_toolkit.py search ~/project -f "*.py" -s "*" -n "/todo/i"
	python run_fs_toolkit.py walk ~/project/build
	python run_fs_toolkit.py remove ~/project/build
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
	"""
	Run the CLI entrypoint with repo-root import behavior.
	"""
	repo_root = Path(__file__).resolve().parent
	if str(repo_root) not in sys.path:
		sys.path.insert(0, str(repo_root))

	from fs_toolkit.cli import main as cli_main

	cli_main()


if __name__ == "__main__":
	main()
