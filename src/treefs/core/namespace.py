from __future__ import annotations

"""
Namespace Service.

Owns an in-memory tree of directories and files together with the
session's current directory. Every public operation resolves its path
through the walk engine (whole-path operations) or the split helper
(operations that validate a leaf against its container), checks its
precondition and only then mutates the tree, so a failed call never
leaves a partial change behind.
"""

import logging
from typing import Dict, List, Tuple

from treefs.core.arena import NodeArena
from treefs.core.tree_renderer import render_tree_structure
from treefs.core.walker import join_path, split_path, walk
from treefs.domain.constants import (
    PARENT_SEGMENT,
    RESERVED_NAMES,
    ROOT_NAME,
    ROOT_PATH,
)
from treefs.domain.errors import (
    AlreadyExistsError,
    DirectoryBusyError,
    EntryNotFoundError,
    InvalidNameError,
    IsDirectoryError,
    NamespaceError,
    NotDirectoryError,
)
from treefs.domain.node_models import Node, NodeId, NodeView

logger = logging.getLogger(__name__)


class Namespace:
    """
    Single-session handle over one directory tree.

    Not thread-safe: callers sharing an instance must serialize every
    operation behind one exclusive lock.
    """

    def __init__(self) -> None:
        self._arena = NodeArena()
        self._root = self._arena.allocate(
            Node(name=ROOT_NAME, path=ROOT_PATH, is_directory=True)
        )
        self._current = self._root

    # -----------------------------------------------------------------------------
    # NAVIGATION
    # -----------------------------------------------------------------------------

    def change_directory(self, path: str) -> None:
        """
        Move the current directory to the directory at `path`.

        Raises:
            PathNotFoundError: The path does not resolve.
            NotDirectoryError: The path names a file.
        """
        target = walk(self._arena, self._current, path)
        node = self._arena.get(target)
        if not node.is_directory:
            raise self._fail(NotDirectoryError(path, "can't cd to a file"))

        self._current = target
        logger.debug(f"Changed directory to {node.path}")

    def print_working_directory(self) -> str:
        """Return the absolute path of the current directory."""
        return self._arena.get(self._current).path

    # -----------------------------------------------------------------------------
    # DIRECTORY OPERATIONS
    # -----------------------------------------------------------------------------

    def create_directory(self, path: str) -> None:
        """
        Create an empty directory. Every ancestor must already exist.

        Raises:
            PathNotFoundError: The container path does not resolve.
            InvalidNameError: The leaf is empty or "..".
            AlreadyExistsError: The container already holds the leaf name.
        """
        container, name = self._prepare_create(path)
        self._insert(container, Node(name=name, path="", is_directory=True))

    def delete_directory(self, path: str) -> None:
        """
        Remove a directory and release its whole subtree.

        The current directory and its ancestors cannot be deleted.

        Raises:
            EntryNotFoundError: The container holds no such entry.
            NotDirectoryError: The entry is a file.
            DirectoryBusyError: The entry is the current directory or one
                of its ancestors.
        """
        container, name = split_path(self._arena, self._current, path)
        target = self._lookup(container, name, path, "can't delete a directory that doesn't exist")
        if not self._arena.get(target).is_directory:
            raise self._fail(NotDirectoryError(path))
        if self._is_current_or_ancestor(target):
            raise self._fail(DirectoryBusyError(path))

        self._detach(container, name, target)

    def list_directory_contents(self, path: str) -> Dict[str, NodeView]:
        """
        Return the children of the directory at `path`.

        The leaf is looked up in its container, ".." names the container's
        parent (clamped at the root) and a path made only of separators
        lists the root itself.

        Returns:
            Dict[str, NodeView]: Child name to read-only descriptor.

        Raises:
            EntryNotFoundError: The container holds no such entry.
            NotDirectoryError: The entry is a file.
        """
        container, name = split_path(self._arena, self._current, path)

        if name == "":
            target = container
        elif name == PARENT_SEGMENT:
            parent = self._arena.get(container).parent
            target = container if parent is None else parent
        else:
            target = self._lookup(
                container, name, path, "can't list items inside a directory that doesn't exist"
            )

        node = self._arena.get(target)
        if not node.is_directory:
            raise self._fail(NotDirectoryError(path))

        return {
            child_name: NodeView.from_node(self._arena.get(child_id))
            for child_name, child_id in node.children.items()
        }

    # -----------------------------------------------------------------------------
    # FILE OPERATIONS
    # -----------------------------------------------------------------------------

    def create_file(self, path: str, content: bytes = b"") -> None:
        """
        Create a file holding `content`. Every ancestor must already exist.

        Raises:
            PathNotFoundError: The container path does not resolve.
            InvalidNameError: The leaf is empty or "..".
            AlreadyExistsError: The container already holds the leaf name.
        """
        container, name = self._prepare_create(path)
        self._insert(
            container,
            Node(name=name, path="", is_directory=False, content=bytes(content)),
        )

    def delete_file(self, path: str) -> None:
        """
        Remove a file.

        Raises:
            EntryNotFoundError: The container holds no such entry.
            IsDirectoryError: The entry is a directory.
        """
        container, name = split_path(self._arena, self._current, path)
        target = self._lookup(container, name, path, "can't delete a file that doesn't exist")
        if self._arena.get(target).is_directory:
            raise self._fail(IsDirectoryError(path))

        self._detach(container, name, target)

    def read_file(self, path: str) -> bytes:
        """
        Return the content of the file at `path`.

        Raises:
            PathNotFoundError: The path does not resolve.
            IsDirectoryError: The path names a directory.
        """
        node = self._arena.get(walk(self._arena, self._current, path))
        if node.is_directory:
            raise self._fail(IsDirectoryError(path, "can't read content of a directory"))
        return node.content

    def edit_file(self, path: str, content: bytes) -> None:
        """
        Replace the content of an existing file. Name, path and identity
        of the entry are preserved.

        Raises:
            EntryNotFoundError: The container holds no such entry.
            IsDirectoryError: The entry is a directory.
        """
        container, name = split_path(self._arena, self._current, path)
        target = self._lookup(container, name, path, "can't edit a file that doesn't exist")
        node = self._arena.get(target)
        if node.is_directory:
            raise self._fail(IsDirectoryError(path))

        node.content = bytes(content)
        logger.debug(f"Edited {node.path} ({len(node.content)} bytes)")

    # -----------------------------------------------------------------------------
    # INSPECTION
    # -----------------------------------------------------------------------------

    def stat(self, path: str = "") -> NodeView:
        """
        Describe the entry at `path`; the empty path describes the current
        directory.

        Raises:
            PathNotFoundError: The path does not resolve.
        """
        target = walk(self._arena, self._current, path) if path else self._current
        return NodeView.from_node(self._arena.get(target))

    def exists(self, path: str) -> bool:
        try:
            self.stat(path)
        except NamespaceError:
            return False
        return True

    def render_tree(self, path: str = "", show_sizes: bool = False) -> List[str]:
        """
        Render the subtree at `path` (the current directory when empty).

        The first line is the absolute path of the rendered directory.

        Raises:
            PathNotFoundError: The path does not resolve.
            NotDirectoryError: The path names a file.
        """
        target = walk(self._arena, self._current, path) if path else self._current
        node = self._arena.get(target)
        if not node.is_directory:
            raise self._fail(NotDirectoryError(path))

        lines: List[str] = [node.path]
        render_tree_structure(self._arena, target, lines, show_sizes=show_sizes)
        return lines

    def __len__(self) -> int:
        """Number of live entries, the root included."""
        return len(self._arena)

    # -----------------------------------------------------------------------------
    # INTERNAL HELPERS
    # -----------------------------------------------------------------------------

    def _prepare_create(self, path: str) -> Tuple[NodeId, str]:
        container, name = split_path(self._arena, self._current, path)
        if name in RESERVED_NAMES:
            raise self._fail(InvalidNameError(path))
        if name in self._arena.get(container).children:
            raise self._fail(AlreadyExistsError(path))
        return container, name

    def _insert(self, container: NodeId, node: Node) -> NodeId:
        parent = self._arena.get(container)
        node.parent = container
        node.path = join_path(parent, node.name)

        child_id = self._arena.allocate(node)
        parent.children[node.name] = child_id

        kind = "directory" if node.is_directory else "file"
        logger.debug(f"Created {kind} {node.path}")
        return child_id

    def _lookup(self, container: NodeId, name: str, path: str, message: str) -> NodeId:
        child_id = self._arena.get(container).children.get(name)
        if child_id is None:
            raise self._fail(EntryNotFoundError(path, message))
        return child_id

    def _detach(self, container: NodeId, name: str, target: NodeId) -> None:
        removed_path = self._arena.get(target).path
        del self._arena.get(container).children[name]
        freed = self._arena.release(target)
        logger.debug(f"Deleted {removed_path} ({freed} entries released)")

    def _is_current_or_ancestor(self, target: NodeId) -> bool:
        cursor = self._current
        while True:
            if cursor == target:
                return True
            parent = self._arena.get(cursor).parent
            if parent is None:
                return False
            cursor = parent

    @staticmethod
    def _fail(error: NamespaceError) -> NamespaceError:
        logger.debug(f"Rejected operation: {error}")
        return error
