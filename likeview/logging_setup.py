from __future__ import annotations

import logging
import os
from typing import Any, Optional


def _parse_level(s: Optional[str]) -> Optional[int]:
    if not s:
        return None
    v = str(s).strip().upper()
    if not v:
        return None
    if v == "WARN":
        v = "WARNING"
    level = logging.getLevelName(v)
    return level if isinstance(level, int) else None


def resolve_level(args: Any = None) -> int:
    env_level = _parse_level(os.environ.get("LIKEVIEW_LOG_LEVEL"))
    if env_level is not None:
        return env_level
    if args is not None and getattr(args, "debug", False):
        return logging.DEBUG
    if args is not None and getattr(args, "quiet", False):
        return logging.WARNING
    return logging.INFO


def setup_logging(args: Any = None, *, name: str = "likeview") -> None:
    """Configure python logging once.

    Priority (highest first):
    - env LIKEVIEW_LOG_LEVEL
    - CLI flags: --debug / --quiet (if present on args)
    - default: INFO
    """

    root = logging.getLogger()
    if root.handlers:
        return

    level = resolve_level(args)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )

    logging.getLogger(name).debug("logging initialized (level=%s)", logging.getLevelName(level))
