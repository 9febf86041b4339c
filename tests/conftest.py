from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Puts the 'src' directory on sys.path so the package imports uninstalled.
2. Provides namespaces in known states for the unit tests.
"""

import os
import sys

import pytest

_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from treefs.core.namespace import Namespace  # noqa: E402


@pytest.fixture
def namespace() -> Namespace:
    """Fresh namespace holding only the root."""
    return Namespace()


@pytest.fixture
def populated_namespace() -> Namespace:
    """
    Namespace with a small fixed tree, current directory at the root.

    Structure:
    /
      etc/
        hosts        (b"127.0.0.1 localhost")
      usr/
        local/
        share/
          doc/
            README   (b"read me")
    """
    ns = Namespace()
    ns.create_directory("etc")
    ns.create_file("etc/hosts", b"127.0.0.1 localhost")
    ns.create_directory("usr")
    ns.create_directory("usr/local")
    ns.create_directory("usr/share")
    ns.create_directory("/usr/share/doc")
    ns.create_file("/usr/share/doc/README", b"read me")
    return ns
