from __future__ import annotations

"""
treefs: in-memory hierarchical namespace.

A single-session tree of directories and files with path resolution
("..", absolute and relative paths) and a current directory.
"""

from treefs.core.namespace import Namespace
from treefs.domain.constants import APP_VERSION as __version__
from treefs.domain.errors import (
    AlreadyExistsError,
    DirectoryBusyError,
    EntryNotFoundError,
    InvalidNameError,
    IsDirectoryError,
    NamespaceError,
    NotDirectoryError,
    PathNotFoundError,
    StaleNodeError,
)
from treefs.domain.node_models import NodeView

__all__ = [
    "Namespace",
    "NodeView",
    "NamespaceError",
    "PathNotFoundError",
    "NotDirectoryError",
    "IsDirectoryError",
    "AlreadyExistsError",
    "EntryNotFoundError",
    "InvalidNameError",
    "DirectoryBusyError",
    "StaleNodeError",
    "__version__",
]
