"""Logging helpers for composable_rules."""

from __future__ import annotations

import logging
from typing import Optional, Union

from .config import get_settings


def configure_logging(level: Optional[Union[int, str]] = None) -> None:
    """Configure default logging if no handlers are present."""
    root = logging.getLogger()
    if root.handlers:
        return
    if level is None:
        level = get_settings().log_level
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler()],
    )
