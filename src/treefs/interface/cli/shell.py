from __future__ import annotations

"""
Namespace Command Shell.

Line-oriented interpreter that maps shell-like commands (cd, ls, mkdir,
cat, ...) onto the operations of a single Namespace. Namespace errors are
reported per command and never end the session.
"""

import logging
import shlex
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional

from treefs.core.namespace import Namespace
from treefs.domain.config import get_default_config
from treefs.domain.errors import NamespaceError

logger = logging.getLogger(__name__)

# Walkthrough session: ascending past the root is clamped,
# so the final listing of "usr" runs from the root.
DEMO_SCRIPT: List[str] = [
    "mkdir usr",
    "mkdir usr/share",
    "mkdir usr/local",
    "cd usr/local",
    "pwd",
    "cd ../../../",
    "pwd",
    "ls usr",
    "write kernel hello",
    "cat kernel",
    "edit kernel 'hello again'",
    "cat kernel",
    "tree /",
]

HELP_TEXT = """\
Commands:
  cd <path>              change the current directory
  pwd                    print the current directory
  ls [path]              list a directory (current one by default)
  mkdir <path>...        create directories
  rmdir <path>...        delete directories and their contents
  touch <path>...        create empty files
  write <path> <text>    create a file holding <text>
  edit <path> <text>     replace the content of a file
  cat <path>             print the content of a file
  rm <path>...           delete files
  stat [path]            describe an entry
  tree [path]            draw a directory subtree
  help                   show this message
  exit | quit            end the session"""

# -----------------------------------------------------------------------------
# RESULT MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class CommandResult:
    """
    Outcome of one shell line.

    Attributes:
        command: The raw line as received.
        ok: False when the command failed.
        output: Text produced for stdout (may be empty).
        error: Failure description, empty on success.
        exit_requested: The line asked to end the session.
    """
    command: str
    ok: bool
    output: str = ""
    error: str = ""
    exit_requested: bool = False


class ShellUsageError(Exception):
    """Malformed command line (unknown command, wrong arity, bad quoting)."""

# -----------------------------------------------------------------------------
# SHELL
# -----------------------------------------------------------------------------

class Shell:
    """
    Interprets command lines against one Namespace.

    Args:
        namespace: Tree to operate on; a fresh one when omitted.
        config: Validated session configuration; defaults when omitted.
    """

    def __init__(
            self,
            namespace: Optional[Namespace] = None,
            config: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.namespace = namespace if namespace is not None else Namespace()
        self.config = config if config is not None else get_default_config()

        self._commands: Dict[str, Callable[[List[str]], str]] = {
            "cd": self._cmd_cd,
            "pwd": self._cmd_pwd,
            "ls": self._cmd_ls,
            "mkdir": self._cmd_mkdir,
            "rmdir": self._cmd_rmdir,
            "touch": self._cmd_touch,
            "write": self._cmd_write,
            "edit": self._cmd_edit,
            "cat": self._cmd_cat,
            "rm": self._cmd_rm,
            "stat": self._cmd_stat,
            "tree": self._cmd_tree,
            "help": self._cmd_help,
        }

    @property
    def prompt(self) -> str:
        return self.config["prompt"].format(cwd=self.namespace.print_working_directory())

    def execute(self, line: str) -> CommandResult:
        """
        Run a single command line.

        Args:
            line: Raw command text.

        Returns:
            CommandResult: Success flag with output or error message.
        """
        try:
            tokens = shlex.split(line, comments=True)
        except ValueError as e:
            return CommandResult(command=line, ok=False, error=f"parse error: {e}")

        if not tokens:
            return CommandResult(command=line, ok=True)

        name, args = tokens[0], tokens[1:]
        if name in ("exit", "quit"):
            return CommandResult(command=line, ok=True, exit_requested=True)

        handler = self._commands.get(name)
        if handler is None:
            return CommandResult(command=line, ok=False, error=f"unknown command: {name}")

        try:
            output = handler(args)
        except (NamespaceError, ShellUsageError) as e:
            logger.debug(f"Command failed: {line!r}: {e}")
            return CommandResult(command=line, ok=False, error=str(e))

        return CommandResult(command=line, ok=True, output=output)

    def run_script(self, lines: Iterable[str]) -> List[CommandResult]:
        """
        Execute lines in order until exhausted, `exit`, or (with
        stop_on_error) the first failure.
        """
        results: List[CommandResult] = []
        for raw in lines:
            line = raw.strip()
            if not line or line.startswith("#"):
                continue
            result = self.execute(line)
            results.append(result)
            if result.exit_requested:
                break
            if not result.ok and self.config["stop_on_error"]:
                logger.info(f"Stopping after failed command: {line!r}")
                break
        return results

    # -----------------------------------------------------------------------------
    # COMMANDS
    # -----------------------------------------------------------------------------

    def _cmd_cd(self, args: List[str]) -> str:
        _expect(args, "cd", 1, 1)
        self.namespace.change_directory(args[0])
        return ""

    def _cmd_pwd(self, args: List[str]) -> str:
        _expect(args, "pwd", 0, 0)
        return self.namespace.print_working_directory()

    def _cmd_ls(self, args: List[str]) -> str:
        _expect(args, "ls", 0, 1)
        entries = self.namespace.list_directory_contents(args[0] if args else "")
        lines = []
        for name in sorted(entries):
            view = entries[name]
            if view.is_directory:
                lines.append(f"{name}/")
            elif self.config["show_sizes"]:
                lines.append(f"{name} ({view.size} B)")
            else:
                lines.append(name)
        return "\n".join(lines)

    def _cmd_mkdir(self, args: List[str]) -> str:
        _expect(args, "mkdir", 1)
        for path in args:
            self.namespace.create_directory(path)
        return ""

    def _cmd_rmdir(self, args: List[str]) -> str:
        _expect(args, "rmdir", 1)
        for path in args:
            self.namespace.delete_directory(path)
        return ""

    def _cmd_touch(self, args: List[str]) -> str:
        _expect(args, "touch", 1)
        for path in args:
            self.namespace.create_file(path, b"")
        return ""

    def _cmd_write(self, args: List[str]) -> str:
        _expect(args, "write", 1)
        self.namespace.create_file(args[0], self._encode(args[1:]))
        return ""

    def _cmd_edit(self, args: List[str]) -> str:
        _expect(args, "edit", 1)
        self.namespace.edit_file(args[0], self._encode(args[1:]))
        return ""

    def _cmd_cat(self, args: List[str]) -> str:
        _expect(args, "cat", 1, 1)
        content = self.namespace.read_file(args[0])
        return content.decode(self.config["encoding"], errors="replace")

    def _cmd_rm(self, args: List[str]) -> str:
        _expect(args, "rm", 1)
        for path in args:
            self.namespace.delete_file(path)
        return ""

    def _cmd_stat(self, args: List[str]) -> str:
        _expect(args, "stat", 0, 1)
        view = self.namespace.stat(args[0] if args else "")
        kind = "directory" if view.is_directory else "file"
        unit = "entries" if view.is_directory else "bytes"
        return f"{view.path}: {kind}, {view.size} {unit}"

    def _cmd_tree(self, args: List[str]) -> str:
        _expect(args, "tree", 0, 1)
        lines = self.namespace.render_tree(
            args[0] if args else "", show_sizes=self.config["show_sizes"]
        )
        return "\n".join(lines)

    def _cmd_help(self, args: List[str]) -> str:
        _expect(args, "help", 0, 0)
        return HELP_TEXT

    def _encode(self, words: List[str]) -> bytes:
        encoding = self.config["encoding"]
        try:
            return " ".join(words).encode(encoding)
        except UnicodeEncodeError as e:
            raise ShellUsageError(f"cannot encode text as {encoding}: {e}") from e

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _expect(args: List[str], command: str, minimum: int, maximum: Optional[int] = None) -> None:
    """Validate the number of arguments given to a command."""
    if len(args) < minimum or (maximum is not None and len(args) > maximum):
        if maximum is None:
            expected = f"at least {minimum}"
        elif minimum == maximum:
            expected = str(minimum)
        else:
            expected = f"{minimum} to {maximum}"
        raise ShellUsageError(f"{command}: expected {expected} argument(s), got {len(args)}")
