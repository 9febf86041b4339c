from __future__ import annotations

"""
Namespace Error Taxonomy.

Flat hierarchy of failures detected by the resolution engine and the
namespace operations. Every error carries the path that triggered it so
interface layers can report it without re-parsing the message.
"""

from typing import Optional


class NamespaceError(Exception):
    """
    Base class for every failure raised by the namespace.

    Attributes:
        path: The path (or leaf name) that caused the failure.
    """

    default_message = "namespace operation failed"

    def __init__(self, path: str, message: Optional[str] = None) -> None:
        self.path = path
        self.message = message or self.default_message
        super().__init__(f"{self.message}: {path!r}")


class PathNotFoundError(NamespaceError):
    """A segment does not exist while walking a path."""

    default_message = "can't walk to an entry that doesn't exist"


class NotDirectoryError(NamespaceError):
    """A directory was expected but the path names a file."""

    default_message = "not a directory"


class IsDirectoryError(NamespaceError):
    """A file was expected but the path names a directory."""

    default_message = "is a directory"


class AlreadyExistsError(NamespaceError):
    """A create operation targets a name already present among siblings."""

    default_message = "entry already exists"


class EntryNotFoundError(NamespaceError):
    """A delete, edit or list operation targets a name absent among siblings."""

    default_message = "entry does not exist"


class InvalidNameError(NamespaceError):
    """The leaf name can never be stored in the tree."""

    default_message = "invalid entry name"


class DirectoryBusyError(NamespaceError):
    """Deleting the current directory or one of its ancestors."""

    default_message = "directory is in use by the current session"


class StaleNodeError(NamespaceError):
    """A node id refers to a released or recycled arena slot."""

    default_message = "stale node reference"
