from __future__ import annotations

"""
Domain Constants.

Centralizes the path grammar tokens and naming rules shared by the
resolution engine, the namespace operations and the shell.
"""

from typing import FrozenSet

APP_NAME = "treefs"
APP_VERSION = "0.1.0"

# -----------------------------------------------------------------------------
# PATH GRAMMAR
# -----------------------------------------------------------------------------

SEPARATOR = "/"
PARENT_SEGMENT = ".."

ROOT_NAME = SEPARATOR
ROOT_PATH = SEPARATOR

# Leaf names that can never be materialized as tree entries: the empty
# name is unreachable and ".." is always interpreted as an ascent.
RESERVED_NAMES: FrozenSet[str] = frozenset({"", PARENT_SEGMENT})
