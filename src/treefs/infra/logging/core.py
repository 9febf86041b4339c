from __future__ import annotations

"""
Logging Bootstrap.

Idempotent configuration of the root logger. Records are pushed through a
QueueHandler and written by a QueueListener thread, so file I/O never
runs inside a namespace operation.
"""

import atexit
import logging
import queue
import sys
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from treefs.infra.logging.config import _LEVEL_MAP, LoggingConfig
from treefs.infra.logging.handlers import (
    _create_console_handler,
    _create_rotating_file_handler,
    _is_our_handler,
    _tag_handler,
)

_CONFIGURED_FLAG_ATTR: str = "_treefs_configured"
_QUEUE_LISTENER_ATTR: str = "_treefs_queue_listener"

# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Attach the package handlers to the root logger.

    A second call is a no-op unless `force` is set, in which case the
    previous handlers and listener are torn down first. If building the
    pipeline fails, a bare stderr handler is installed instead.

    Args:
        cfg: Logging settings.
        force: Rebuild the handlers even if already configured.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()
    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    shutdown_logging()

    level_int = _parse_level(cfg.level)
    root.setLevel(level_int)

    try:
        handlers_list: List[logging.Handler] = []
        if cfg.console:
            handlers_list.append(
                _create_console_handler(level_int, logging.Formatter(cfg.console_fmt))
            )
        if cfg.log_file:
            fh = _create_rotating_file_handler(
                cfg.log_file,
                level_int,
                logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt),
                cfg.max_bytes,
                cfg.backup_count,
            )
            if fh:
                handlers_list.append(fh)

        if not handlers_list:
            return root

        log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)
        listener = QueueListener(log_queue, *handlers_list, respect_handler_level=True)
        listener.start()

        root.addHandler(_tag_handler(QueueHandler(log_queue)))
        setattr(root, _QUEUE_LISTENER_ATTR, listener)
        setattr(root, _CONFIGURED_FLAG_ATTR, True)
        atexit.register(_safe_stop_listener, listener)

    except (OSError, RuntimeError, ValueError) as e:
        shutdown_logging()
        sh = logging.StreamHandler(sys.stderr)
        sh.setFormatter(logging.Formatter("FALLBACK | %(levelname)s | %(message)s"))
        root.addHandler(_tag_handler(sh))
        root.warning(f"Logging setup failed ({e}); using console fallback.")

    return root


def shutdown_logging() -> None:
    """Stop the listener and detach every handler this package installed."""
    root = logging.getLogger()

    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    _safe_stop_listener(listener)
    setattr(root, _QUEUE_LISTENER_ATTR, None)

    for h in list(root.handlers):
        if _is_our_handler(h):
            root.removeHandler(h)
            h.close()

    setattr(root, _CONFIGURED_FLAG_ATTR, False)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)

# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _parse_level(level: str) -> int:
    if not level:
        return logging.WARNING
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.WARNING)


def _safe_stop_listener(listener: Optional[QueueListener]) -> None:
    """Stop a listener once; later calls (atexit, tests) are no-ops."""
    if listener is None:
        return
    if getattr(listener, "_thread", None) is None:
        return
    listener.stop()
    for h in listener.handlers:
        h.close()
