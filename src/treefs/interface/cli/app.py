from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration loading
and merging (defaults, JSON file, CLI overrides), validation, command
execution against a fresh namespace and result rendering.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, Iterable, List, Optional

from treefs.core.validator import validate_config
from treefs.domain.config import load_config
from treefs.infra.logging import LoggingConfig, configure_logging, get_logger
from treefs.interface.cli import args as cli_args
from treefs.interface.cli.shell import DEMO_SCRIPT, CommandResult, Shell

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_COMMAND_FAILED = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Command line arguments. Defaults to sys.argv.

    Returns:
        int: 0 when every command succeeded, 1 when one failed, 2 on
        configuration or script errors, 130 when interrupted.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 1. Logging bootstrap (console only until the config is known)
    configure_logging(LoggingConfig(level="DEBUG" if args.debug else "WARNING"))

    # 2. Configuration resolution
    raw_conf = _merge_config(load_config(args.config_path), cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    configure_logging(
        LoggingConfig(level=clean_conf["log_level"], log_file=clean_conf["log_file"] or None),
        force=True,
    )

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    shell = Shell(config=clean_conf)
    live = False

    # 3. Execution
    try:
        if args.demo:
            results = shell.run_script(DEMO_SCRIPT)
        elif args.commands or args.script_path:
            lines = list(args.commands)
            if args.script_path:
                try:
                    lines.extend(_read_script(args.script_path))
                except OSError as e:
                    logger.error(f"Cannot read script '{args.script_path}': {e}")
                    print(f"ERROR: cannot read script '{args.script_path}': {e}", file=sys.stderr)
                    return EXIT_USAGE
            results = shell.run_script(lines)
        else:
            live = _is_terminal(sys.stdin) and not args.json_output
            results = _run_stream(shell, sys.stdin, json_output=args.json_output)
    except KeyboardInterrupt:
        logger.warning("Session interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED

    # 4. Rendering
    if args.json_output:
        print(json.dumps([asdict(r) for r in results], ensure_ascii=False, indent=2))
    elif not live:
        for r in results:
            _print_result(r)

    return EXIT_OK if all(r.ok for r in results) else EXIT_COMMAND_FAILED

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow-merge non-None overrides into the base configuration."""
    out = dict(base)
    for k, v in overrides.items():
        if v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# EXECUTION HELPERS
# -----------------------------------------------------------------------------

def _read_script(path: str) -> List[str]:
    with open(path, "r", encoding="utf-8") as f:
        return f.read().splitlines()


def _run_stream(shell: Shell, stream: Any, json_output: bool = False) -> List[CommandResult]:
    """
    Read commands from a stream until EOF or exit.

    A prompt is shown and results are printed as they happen when the
    stream is a terminal; otherwise the stream is treated as a script.
    """
    if not _is_terminal(stream):
        return shell.run_script(_iter_lines(stream))

    results: List[CommandResult] = []
    while True:
        try:
            line = input(shell.prompt)
        except EOFError:
            print()
            break
        result = shell.execute(line)
        if not result.command.strip():
            continue
        results.append(result)
        if not json_output:
            _print_result(result)
        if result.exit_requested:
            break
    return results


def _is_terminal(stream: Any) -> bool:
    return bool(getattr(stream, "isatty", None)) and stream.isatty()


def _iter_lines(stream: Any) -> Iterable[str]:
    for line in stream:
        yield line.rstrip("\n")

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_result(result: CommandResult) -> None:
    if not result.ok:
        print(f"error: {result.error}", file=sys.stderr)
        return
    if result.output:
        print(result.output)


if __name__ == "__main__":
    sys.exit(main())
