from __future__ import annotations

"""
Node Arena.

Owns every node of a namespace tree in a flat slot table addressed by
generational ids. Releasing a node bumps the generation of its slot, so
any id handed out before the release is detected as stale instead of
silently resolving to a recycled node.
"""

import logging
from typing import List, Optional, cast

from treefs.domain.errors import StaleNodeError
from treefs.domain.node_models import Node, NodeId

logger = logging.getLogger(__name__)


class NodeArena:
    """
    Slot table holding the nodes of a single tree.

    Freed slots are kept on a free list and recycled by later allocations
    with an incremented generation.
    """

    def __init__(self) -> None:
        self._slots: List[Optional[Node]] = []
        self._generations: List[int] = []
        self._free: List[int] = []

    # -----------------------------------------------------------------------------
    # LIFECYCLE
    # -----------------------------------------------------------------------------

    def allocate(self, node: Node) -> NodeId:
        """
        Store a node in a free slot (or a new one) and return its id.

        Args:
            node: The node record to own.

        Returns:
            NodeId: Handle valid until the node is released.
        """
        if self._free:
            index = self._free.pop()
            self._slots[index] = node
        else:
            index = len(self._slots)
            self._slots.append(node)
            self._generations.append(0)
        return NodeId(index, self._generations[index])

    def release(self, node_id: NodeId) -> int:
        """
        Free a node and every descendant reachable through its children.

        The parent's children mapping is not touched; callers detach the
        entry first.

        Args:
            node_id: Root of the subtree to free.

        Returns:
            int: Number of slots freed.
        """
        freed = 0
        pending = [node_id]
        while pending:
            current = pending.pop()
            node = self.get(current)
            pending.extend(node.children.values())
            self._slots[current.index] = None
            self._generations[current.index] += 1
            self._free.append(current.index)
            freed += 1
        logger.debug(f"Released {freed} arena slot(s) starting at {node_id}")
        return freed

    # -----------------------------------------------------------------------------
    # ACCESS
    # -----------------------------------------------------------------------------

    def get(self, node_id: NodeId) -> Node:
        """
        Dereference an id after checking it is still live.

        Raises:
            StaleNodeError: The slot was released or recycled.
        """
        if not self.is_alive(node_id):
            raise StaleNodeError(str(node_id))
        return cast(Node, self._slots[node_id.index])

    def is_alive(self, node_id: NodeId) -> bool:
        index, generation = node_id
        if index < 0 or index >= len(self._slots):
            return False
        return self._slots[index] is not None and self._generations[index] == generation

    def __len__(self) -> int:
        return len(self._slots) - len(self._free)
