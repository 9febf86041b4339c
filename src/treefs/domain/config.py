from __future__ import annotations

"""
Session Configuration.

Dict-based settings that drive the shell and the CLI. Values can be
overridden from a JSON file and, on top of that, from command-line flags.
The tree itself is never persisted.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_PROMPT = "treefs:{cwd}$ "
DEFAULT_ENCODING = "utf-8"


def get_default_config() -> Dict[str, Any]:
    """
    Build the default session configuration.

    Returns:
        Dict[str, Any]: Fresh dictionary of default values.
    """
    return {
        # Shell presentation
        "prompt": DEFAULT_PROMPT,
        "encoding": DEFAULT_ENCODING,
        "show_sizes": False,

        # Execution
        "stop_on_error": False,

        # Diagnostics
        "log_level": "WARNING",
        "log_file": "",
    }


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load a JSON configuration file merged over the defaults.

    Unknown keys are kept so the validator can report them. A missing or
    unreadable file yields the defaults.

    Args:
        path: Location of the JSON file, or None for defaults only.

    Returns:
        Dict[str, Any]: Merged configuration.
    """
    config = get_default_config()
    if not path:
        return config

    if not os.path.exists(path):
        logger.warning(f"Config file not found: {path}. Using defaults.")
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to load config '{path}': {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Config file '{path}' is not a JSON object. Using defaults.")
        return config

    config.update(data)
    return config
