from __future__ import annotations

"""
Unit tests for the Namespace Command Shell.

Verifies:
1. Command dispatch onto namespace operations.
2. Error reporting without ending the session.
3. Script execution, comments, exit and stop-on-error handling.
"""

import pytest

from treefs.core.namespace import Namespace
from treefs.domain.config import get_default_config
from treefs.interface.cli.shell import DEMO_SCRIPT, CommandResult, Shell


@pytest.fixture
def shell() -> Shell:
    return Shell()


def test_shell_uses_given_namespace():
    ns = Namespace()
    sh = Shell(namespace=ns)
    sh.execute("mkdir usr")
    assert ns.exists("usr")


def test_mkdir_cd_pwd(shell):
    assert shell.execute("mkdir usr usr/share").ok
    assert shell.execute("cd usr/share").ok
    result = shell.execute("pwd")
    assert result == CommandResult(command="pwd", ok=True, output="/usr/share")


def test_write_cat_edit(shell):
    shell.execute("write notes hello world")
    assert shell.execute("cat notes").output == "hello world"

    shell.execute("edit notes 'second version'")
    assert shell.execute("cat notes").output == "second version"


def test_touch_creates_empty_file(shell):
    shell.execute("touch a b")
    assert shell.execute("cat a").output == ""
    assert shell.namespace.read_file("b") == b""


def test_ls_marks_directories_and_sorts(shell):
    shell.execute("mkdir zeta")
    shell.execute("write alpha x")
    assert shell.execute("ls").output == "alpha\nzeta/"


def test_ls_with_sizes():
    sh = Shell(config=dict(get_default_config(), show_sizes=True))
    sh.execute("write alpha abc")
    assert sh.execute("ls /").output == "alpha (3 B)"


def test_rm_and_rmdir(shell):
    shell.execute("mkdir d")
    shell.execute("touch d/f")
    assert shell.execute("rm d/f").ok
    assert shell.execute("rmdir d").ok
    assert shell.execute("ls").output == ""


def test_stat_output(shell):
    shell.execute("write f abc")
    assert shell.execute("stat f").output == "/f: file, 3 bytes"
    assert shell.execute("stat").output == "/: directory, 1 entries"


def test_tree_output(shell):
    shell.execute("mkdir a")
    shell.execute("touch a/x")
    assert shell.execute("tree /").output == "/\n└── a/\n    └── x"


def test_namespace_error_is_reported(shell):
    result = shell.execute("cd missing")
    assert not result.ok
    assert "missing" in result.error
    assert shell.execute("pwd").output == "/"


def test_unknown_command(shell):
    result = shell.execute("format c:")
    assert not result.ok
    assert result.error == "unknown command: format"


def test_wrong_arity(shell):
    result = shell.execute("cd a b")
    assert not result.ok
    assert result.error == "cd: expected 1 argument(s), got 2"

    assert shell.execute("mkdir").error == "mkdir: expected at least 1 argument(s), got 0"
    assert shell.execute("ls a b").error == "ls: expected 0 to 1 argument(s), got 2"


def test_unbalanced_quotes_are_reported(shell):
    result = shell.execute("write f 'oops")
    assert not result.ok
    assert result.error.startswith("parse error")


def test_blank_and_comment_lines_are_noops(shell):
    assert shell.execute("   ").ok
    assert shell.execute("# just a comment").ok


def test_exit_requests_end_of_session(shell):
    assert shell.execute("exit").exit_requested
    assert shell.execute("quit").exit_requested


def test_help_lists_commands(shell):
    output = shell.execute("help").output
    for name in ("cd", "mkdir", "cat", "tree"):
        assert name in output


def test_help_rejects_arguments(shell):
    result = shell.execute("help cd")
    assert not result.ok
    assert result.error == "help: expected 0 argument(s), got 1"


def test_unencodable_text_is_reported_per_command():
    sh = Shell(config=dict(get_default_config(), encoding="ascii"))

    result = sh.execute("write f café")
    assert not result.ok
    assert result.error.startswith("cannot encode text as ascii")
    assert not sh.namespace.exists("f")

    sh.execute("write f plain")
    result = sh.execute("edit f café")
    assert not result.ok
    assert sh.execute("cat f").output == "plain"


def test_prompt_tracks_current_directory(shell):
    shell.execute("mkdir usr")
    shell.execute("cd usr")
    assert shell.prompt == "treefs:/usr$ "


def test_run_script_skips_comments_and_stops_at_exit(shell):
    results = shell.run_script([
        "# setup",
        "",
        "mkdir a",
        "exit",
        "mkdir b",
    ])
    assert [r.command for r in results] == ["mkdir a", "exit"]
    assert not shell.namespace.exists("b")


def test_run_script_continues_after_error_by_default(shell):
    results = shell.run_script(["cd nowhere", "mkdir a"])
    assert [r.ok for r in results] == [False, True]


def test_run_script_stop_on_error():
    sh = Shell(config=dict(get_default_config(), stop_on_error=True))
    results = sh.run_script(["cd nowhere", "mkdir a"])
    assert len(results) == 1
    assert not sh.namespace.exists("a")


def test_demo_script_runs_cleanly(shell):
    results = shell.run_script(DEMO_SCRIPT)
    assert all(r.ok for r in results)

    outputs = {r.command: r.output for r in results}
    assert outputs["ls usr"] == "local/\nshare/"
    assert outputs["cat kernel"] == "hello again"
    assert [r.output for r in results if r.command == "pwd"] == ["/usr/local", "/"]
