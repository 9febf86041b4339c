from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Declares the command-line schema of the treefs shell and translates the
parsed namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict

from treefs.domain.constants import APP_NAME, APP_VERSION

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the treefs CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=APP_NAME,
        description="In-memory directory tree shell.",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")

    # --- Command Sources ---
    p.add_argument(
        "-c", "--command",
        dest="commands",
        action="append",
        default=[],
        help="Run a shell command (repeatable, executed in order).",
    )
    p.add_argument(
        "-s", "--script",
        dest="script_path",
        default=None,
        help="Read commands from a file, one per line.",
    )
    p.add_argument(
        "--demo",
        action="store_true",
        help="Replay the built-in demonstration session.",
    )

    # --- Behaviour ---
    p.add_argument(
        "--stop-on-error",
        action="store_true",
        help="Abort at the first failing command.",
    )
    p.add_argument(
        "--sizes",
        action="store_true",
        help="Show file sizes in ls and tree output.",
    )

    # --- Configuration and Diagnostics ---
    p.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="JSON configuration file.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration and exit.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Write diagnostics to a rotating log file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    # --- Format Selection ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Emit command results as JSON.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate parsed arguments into configuration overrides.

    Only flags explicitly given on the command line appear in the result,
    so file-based settings survive when a flag is omitted.
    """
    overrides: Dict[str, Any] = {}

    if args.stop_on_error:
        overrides["stop_on_error"] = True
    if args.sizes:
        overrides["show_sizes"] = True
    if args.debug:
        overrides["log_level"] = "DEBUG"
    if args.log_file:
        overrides["log_file"] = args.log_file

    return overrides
