from __future__ import annotations

"""
Namespace Tree Data Models.

Defines the arena-addressed node record used internally by the namespace
and the immutable descriptor handed to callers. Nodes never reference each
other directly: parents and children are expressed as generational ids.
"""

from dataclasses import dataclass, field
from typing import Dict, NamedTuple, Optional

# -----------------------------------------------------------------------------
# IDENTIFIERS
# -----------------------------------------------------------------------------

class NodeId(NamedTuple):
    """
    Generational handle into a NodeArena slot.

    Attributes:
        index: Slot position inside the arena.
        generation: Slot generation at allocation time.
    """
    index: int
    generation: int

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass
class Node:
    """
    Mutable tree element stored in the arena.

    Attributes:
        name: Leaf segment name ("/" for the root).
        path: Cached absolute path from the root.
        is_directory: Directory flag; files carry content instead of children.
        parent: Id of the containing directory, None only for the root.
        children: Child name to child id (directories only).
        content: Byte payload (files only).
    """
    name: str
    path: str
    is_directory: bool
    parent: Optional[NodeId] = None
    children: Dict[str, NodeId] = field(default_factory=dict)
    content: bytes = b""

    @property
    def size(self) -> int:
        """Byte length for files, entry count for directories."""
        if self.is_directory:
            return len(self.children)
        return len(self.content)


@dataclass(frozen=True)
class NodeView:
    """
    Read-only snapshot of a node returned by the public API.

    Attributes:
        name: Leaf segment name.
        path: Absolute path at snapshot time.
        is_directory: Directory flag.
        size: Byte length for files, entry count for directories.
    """
    name: str
    path: str
    is_directory: bool
    size: int

    @classmethod
    def from_node(cls, node: Node) -> "NodeView":
        return cls(
            name=node.name,
            path=node.path,
            is_directory=node.is_directory,
            size=node.size,
        )
