from __future__ import annotations

"""
Unit tests for the Node Arena.

Verifies:
1. Allocation and dereferencing of live ids.
2. Subtree release and stale-id detection.
3. Slot recycling with generation bumps.
"""

import pytest

from treefs.core.arena import NodeArena
from treefs.domain.errors import StaleNodeError
from treefs.domain.node_models import Node, NodeId


def _dir(name: str, parent=None) -> Node:
    return Node(name=name, path=f"/{name}", is_directory=True, parent=parent)


def test_allocate_and_get_returns_same_node():
    arena = NodeArena()
    node = _dir("a")
    node_id = arena.allocate(node)

    assert arena.get(node_id) is node
    assert arena.is_alive(node_id)
    assert len(arena) == 1


def test_release_frees_whole_subtree():
    arena = NodeArena()
    top = arena.allocate(_dir("a"))
    mid = arena.allocate(_dir("b", parent=top))
    leaf = arena.allocate(Node(name="f", path="/a/b/f", is_directory=False, parent=mid))
    arena.get(top).children["b"] = mid
    arena.get(mid).children["f"] = leaf

    freed = arena.release(top)

    assert freed == 3
    assert len(arena) == 0
    for node_id in (top, mid, leaf):
        assert not arena.is_alive(node_id)
        with pytest.raises(StaleNodeError):
            arena.get(node_id)


def test_recycled_slot_rejects_old_id():
    arena = NodeArena()
    old = arena.allocate(_dir("old"))
    arena.release(old)

    new = arena.allocate(_dir("new"))

    assert new.index == old.index
    assert new.generation == old.generation + 1
    assert arena.get(new).name == "new"
    with pytest.raises(StaleNodeError):
        arena.get(old)


def test_unknown_index_is_not_alive():
    arena = NodeArena()
    assert not arena.is_alive(NodeId(5, 0))
    assert not arena.is_alive(NodeId(-1, 0))


def test_len_counts_only_live_nodes():
    arena = NodeArena()
    a = arena.allocate(_dir("a"))
    b = arena.allocate(_dir("b"))
    arena.release(a)

    assert len(arena) == 1
    assert arena.get(b).name == "b"
