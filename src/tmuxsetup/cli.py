#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
cli.py

Create the tmux session described by a YAML file in the current directory.

Example:
  tmuxsetup                      # uses ./.tmuxsetup.yaml
  tmuxsetup -c dev.yaml          # alternate config
  tmuxsetup -n                   # print the tmux commands instead of running them
  tmuxsetup -k                   # kill the configured session
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import DEFAULT_CONFIG, SessionSpec
from .errors import ConfigurationError, ExecutionError
from .executor import Executor
from .generate import generate
from .resolve import resolve

logger = logging.getLogger(__name__)


def load_session(config: str, base_path: Optional[Path] = None) -> SessionSpec:
    """! @brief Load and resolve the session described by @p config.

    @param config Config file path (relative to the current directory).
    @param base_path Directory names and roots are derived from; defaults to cwd.
    @return Resolved SessionSpec.
    @throws ConfigurationError on any load or resolution problem.
    """
    base = base_path if base_path is not None else Path.cwd()
    partial = SessionSpec.from_yaml(Path(config))
    return resolve(partial, base)


def cmd_start(args: argparse.Namespace) -> int:
    """! @brief Create (and by default attach to) the configured session.

    @param args Parsed argparse args.
    @return Process exit code.
    """
    session = load_session(args.config)
    operations = generate(session)
    logger.debug("Generated %d operations for session %s", len(operations), session.name)

    if args.dry_run:
        for op in operations:
            print(op.command_line())
        return 0

    Executor().run(operations)
    if not session.attach:
        print(
            f"tmux session '{session.name}' started.\n"
            f"Attach with: tmux attach-session -t {session.name}"
        )
    return 0


def cmd_kill(args: argparse.Namespace) -> int:
    session = load_session(args.config)
    if args.dry_run:
        print(f"tmux kill-session -t {session.name}")
        return 0
    Executor().kill(session.name)
    print(f"Killed session: {session.name}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="tmuxsetup",
        description="Create a tmux session from a YAML description.",
    )
    p.add_argument(
        "-c", "--config",
        default=DEFAULT_CONFIG,
        help="Configuration file (default: %(default)s).",
    )
    p.add_argument("-k", "--kill", action="store_true", help="Kill the configured session.")
    p.add_argument(
        "-n", "--dry-run",
        action="store_true",
        help="Print the tmux commands instead of running them.",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Log every tmux call.")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
    )
    handler = cmd_kill if args.kill else cmd_start
    try:
        return int(handler(args))
    except (ConfigurationError, ExecutionError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
