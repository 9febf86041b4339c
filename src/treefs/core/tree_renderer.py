from __future__ import annotations

"""
Tree Renderer.

Converts a namespace subtree into a visual ASCII representation using the
standard connectors (├──, └──) and indentation guides (│).
"""

from typing import List

from treefs.core.arena import NodeArena
from treefs.domain.node_models import NodeId

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree_structure(
        arena: NodeArena,
        node_id: NodeId,
        lines: List[str],
        prefix: str = "",
        show_sizes: bool = False,
) -> None:
    """
    Recursively append one line per descendant of a directory node.

    Entries are listed in name order. Directories carry a trailing
    separator so they can be told apart from files.

    Args:
        arena: The arena owning the tree.
        node_id: Directory whose children are rendered.
        lines: Accumulator list for output strings.
        prefix: Indentation prefix for the current recursion level.
        show_sizes: Append the byte length to file entries.
    """
    children = arena.get(node_id).children
    entries = sorted(children.keys())
    total = len(entries)

    for i, entry in enumerate(entries):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "

        child_id = children[entry]
        child = arena.get(child_id)

        if child.is_directory:
            lines.append(f"{prefix}{connector}{entry}/")
            render_tree_structure(
                arena,
                child_id,
                lines,
                prefix=prefix + ("    " if is_last else "│   "),
                show_sizes=show_sizes,
            )
            continue

        if show_sizes:
            lines.append(f"{prefix}{connector}{entry} ({child.size} B)")
        else:
            lines.append(f"{prefix}{connector}{entry}")
