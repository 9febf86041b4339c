from __future__ import annotations

"""
Unit tests for Domain Models and Errors.

Verifies:
1. Node size semantics and NodeView snapshots.
2. Immutability of NodeView.
3. Error messages and the common base class.
"""

import dataclasses

import pytest

from treefs.domain.errors import (
    AlreadyExistsError,
    EntryNotFoundError,
    NamespaceError,
    PathNotFoundError,
)
from treefs.domain.node_models import Node, NodeId, NodeView


def test_file_node_size_is_byte_length():
    node = Node(name="f", path="/f", is_directory=False, content=b"abcd")
    assert node.size == 4


def test_directory_node_size_is_entry_count():
    node = Node(name="d", path="/d", is_directory=True)
    node.children["x"] = NodeId(1, 0)
    assert node.size == 1


def test_directory_children_are_not_shared():
    first = Node(name="a", path="/a", is_directory=True)
    second = Node(name="b", path="/b", is_directory=True)
    first.children["x"] = NodeId(3, 0)
    assert second.children == {}


def test_node_view_snapshot():
    node = Node(name="f", path="/f", is_directory=False, content=b"abc")
    view = NodeView.from_node(node)
    node.content = b""

    assert view == NodeView(name="f", path="/f", is_directory=False, size=3)


def test_node_view_is_frozen():
    view = NodeView(name="f", path="/f", is_directory=False, size=0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        view.size = 10  # type: ignore[misc]


def test_errors_share_base_and_carry_path():
    for cls in (PathNotFoundError, AlreadyExistsError, EntryNotFoundError):
        err = cls("/usr/x")
        assert isinstance(err, NamespaceError)
        assert err.path == "/usr/x"
        assert "/usr/x" in str(err)


def test_error_custom_message():
    err = EntryNotFoundError("f", "can't edit a file that doesn't exist")
    assert err.message == "can't edit a file that doesn't exist"
    assert str(err) == "can't edit a file that doesn't exist: 'f'"
