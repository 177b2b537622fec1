from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Reads a tree listing from a file or stdin, builds the in-memory tree,
prints it back in the requested view and optionally materializes it on
disk.
"""

import json
import os
import sys
from typing import BinaryIO, List, Optional

from memtree.core.materialize import materialize
from memtree.core.memfs import MemFS
from memtree.core.parsing.strategies import TAB, UNIX, LineParser
from memtree.core.rendering.tree_renderer import render_tree
from memtree.domain.errors import MemTreeError
from memtree.infra.logging import configure_logging, get_logger
from memtree.interface.cli import args as cli_args

logger = get_logger(__name__)

_STRATEGIES = {"unix": UNIX, "tab": TAB}

EXIT_OK = 0
EXIT_PARSE_ERROR = 1
EXIT_MISSING_INPUT = 2
EXIT_LOG_ERROR = 3

# -----------------------------------------------------------------------------
# ENTRYPOINT
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional argument list. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 parse failure, 2 missing input,
            3 log file unusable).
    """
    if sys.platform == "win32" and hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8")

    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    try:
        configure_logging(cli_args.args_to_logging_config(args), force=True)
    except OSError as e:
        print(f"ERROR: Cannot open log file '{args.log_file}': {e}", file=sys.stderr)
        return EXIT_LOG_ERROR

    # 1. Input resolution
    if args.input != "-" and not os.path.isfile(args.input):
        msg = f"Input listing does not exist: {args.input}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_MISSING_INPUT

    # 2. Parsing phase
    strategy = _STRATEGIES[args.input_format]
    logger.debug(f"Parsing '{args.input}' as {args.input_format} listing")
    try:
        fs = _parse(args.input, strategy)
    except (MemTreeError, OSError) as e:
        logger.error(f"Failed to parse '{args.input}': {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_PARSE_ERROR

    # 3. Optional disk materialization
    if args.materialize_dir:
        try:
            materialize(fs, args.materialize_dir)
        except OSError as e:
            logger.error(f"Failed to materialize into '{args.materialize_dir}': {e}")
            print(f"ERROR: {e}", file=sys.stderr)
            return EXIT_PARSE_ERROR

    # 4. Output rendering
    try:
        _print_view(fs, args.render or args.input_format, args.mark_dirs)
    except ValueError as e:
        logger.error(f"Failed to render '{args.input}': {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_PARSE_ERROR
    return EXIT_OK

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _parse(source: str, strategy: LineParser) -> MemFS:
    if source == "-":
        return strategy.build_tree(_stdin_bytes())
    with open(source, "rb") as f:
        return strategy.build_tree(f)


def _stdin_bytes() -> BinaryIO:
    return sys.stdin.buffer


def _print_view(fs: MemFS, view: str, mark_dirs: bool) -> None:
    if view == "json":
        print(json.dumps(fs.to_dict(), ensure_ascii=False, indent=2, sort_keys=True))
        return
    for line in render_tree(fs, style=view, mark_dirs=mark_dirs):
        print(line)
