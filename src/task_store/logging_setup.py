from __future__ import annotations

import logging
import sys
from typing import Optional

from .settings import get_settings


# PUBLIC_INTERFACE
def setup_logging(level: Optional[int] = None) -> None:
    """
    Configure the root logger with a single stderr handler.

    Call this once, early, from an entry point. Library modules only create
    loggers via logging.getLogger(__name__).
    """
    if level is None:
        level = get_settings().log_level

    root = logging.getLogger()
    root.setLevel(level)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(handler)
