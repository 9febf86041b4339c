from __future__ import annotations

"""
Path Resolution Engine.

Turns path strings into arena node ids. The walk is a recursive descent
over a pre-split list of segments driven by a cursor:

- A leading separator restarts resolution from the root.
- ".." ascends one level and is clamped (a no-op) at the root.
- Every other segment, "." included, must name an existing child.

The split helper resolves the container of a leaf name so mutating
operations can check the leaf against its siblings without walking to an
entry that may not exist yet.
"""

from typing import List, Tuple

from treefs.core.arena import NodeArena
from treefs.domain.constants import PARENT_SEGMENT, SEPARATOR
from treefs.domain.errors import NotDirectoryError, PathNotFoundError
from treefs.domain.node_models import Node, NodeId

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def walk(arena: NodeArena, start: NodeId, path: str) -> NodeId:
    """
    Resolve a path relative to a starting node.

    Args:
        arena: The arena owning the tree.
        start: Node the relative resolution begins at.
        path: Absolute or relative path.

    Returns:
        NodeId: The resolved node.

    Raises:
        PathNotFoundError: A segment names no existing child.
    """
    if path.startswith(SEPARATOR):
        root = _ascend_to_root(arena, start)
        if not path.strip(SEPARATOR):
            return root
        start = root

    return _walk_segments(arena, start, split_segments(path), 0, path)


def split_path(arena: NodeArena, current: NodeId, path: str) -> Tuple[NodeId, str]:
    """
    Separate a path into its resolved container and its leaf name.

    Trailing separators are ignored. A path without separators lives in
    the current directory; a path made only of separators yields the root
    with an empty leaf.

    Args:
        arena: The arena owning the tree.
        current: The session's current directory.
        path: Path naming the target entry.

    Returns:
        Tuple[NodeId, str]: (container directory id, leaf name).

    Raises:
        PathNotFoundError: The container path does not resolve.
        NotDirectoryError: The container path resolves to a file.
    """
    trimmed = path.rstrip(SEPARATOR)
    if path and not trimmed:
        return walk(arena, current, SEPARATOR), ""

    cut = trimmed.rfind(SEPARATOR)
    if cut == -1:
        container, leaf, container_path = current, trimmed, ""
    else:
        container_path = trimmed[:cut] or SEPARATOR
        container = walk(arena, current, container_path)
        leaf = trimmed[cut + 1:]

    if not arena.get(container).is_directory:
        raise NotDirectoryError(container_path)

    return container, leaf


def split_segments(path: str) -> List[str]:
    """
    Break a path into its segments.

    Outer separators and empty inner segments are dropped. A path with no
    segment at all yields a single empty segment, which never names an
    entry.
    """
    segments = [s for s in path.strip(SEPARATOR).split(SEPARATOR) if s]
    return segments or [""]


def join_path(container: Node, name: str) -> str:
    """Compute the absolute path of a new entry named `name` under `container`."""
    if container.parent is None:
        return container.path + name
    return container.path + SEPARATOR + name

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _ascend_to_root(arena: NodeArena, node_id: NodeId) -> NodeId:
    """Follow parent links until the root is reached."""
    parent = arena.get(node_id).parent
    if parent is None:
        return node_id
    return _ascend_to_root(arena, parent)


def _walk_segments(
        arena: NodeArena,
        node_id: NodeId,
        segments: List[str],
        cursor: int,
        path: str,
) -> NodeId:
    """
    Consume segments[cursor] from node_id and recurse on the remainder.
    """
    # Only reachable when trailing ".." segments were clamped at the root
    if cursor >= len(segments):
        return node_id

    node = arena.get(node_id)
    segment = segments[cursor]
    is_last = cursor == len(segments) - 1

    if segment == PARENT_SEGMENT:
        if node.parent is None:
            return _walk_segments(arena, node_id, segments, cursor + 1, path)
        if is_last:
            return node.parent
        return _walk_segments(arena, node.parent, segments, cursor + 1, path)

    child = node.children.get(segment)
    if child is None:
        raise PathNotFoundError(path)

    if is_last:
        return child
    return _walk_segments(arena, child, segments, cursor + 1, path)
