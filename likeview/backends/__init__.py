"""Rendering backends.

Each backend hosts a ``LikeView`` in a window and draws its icon and
particle sprites. Only a pygame backend exists.
"""

from __future__ import annotations

__all__ = []
