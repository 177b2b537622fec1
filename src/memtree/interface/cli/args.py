from __future__ import annotations

"""
CLI Argument Definition.

Defines the command line schema of the memtree tool and maps the parsed
namespace onto the logging configuration.
"""

import argparse

from memtree.core.rendering.tree_renderer import RENDER_STYLES
from memtree.infra.logging import LoggingConfig

INPUT_FORMATS = ("unix", "tab")

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the memtree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="memtree",
        description="Parse a 'tree' or tab-indented listing into a directory tree.",
    )

    p.add_argument(
        "input",
        help="Listing to parse, or '-' to read standard input.",
    )
    p.add_argument(
        "-f", "--format",
        dest="input_format",
        choices=INPUT_FORMATS,
        default="unix",
        help="Dialect of the input listing (default: unix).",
    )
    p.add_argument(
        "-r", "--render",
        dest="render",
        choices=RENDER_STYLES + ("json",),
        default=None,
        help="Output view (default: same dialect as the input).",
    )
    p.add_argument(
        "--no-mark-dirs",
        dest="mark_dirs",
        action="store_false",
        help="Do not append '/' to directory names in the rendered output.",
    )
    p.add_argument(
        "--materialize",
        dest="materialize_dir",
        default=None,
        metavar="DIR",
        help="Also create the parsed hierarchy on disk under DIR.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Enable verbose logging on stderr.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this rotating file.",
    )

    return p


def args_to_logging_config(args: argparse.Namespace) -> LoggingConfig:
    """
    Translate diagnostic flags into a LoggingConfig.

    Args:
        args: Parsed namespace from build_parser.

    Returns:
        LoggingConfig: Settings for configure_logging.
    """
    level = "DEBUG" if args.debug else "INFO"
    return LoggingConfig(level=level, console=True, log_file=args.log_file)
