from __future__ import annotations

from .context import IconResources
from .measure import MeasureMode, MeasureSpec
from .view import LikeView, Rect

__all__ = ["IconResources", "LikeView", "MeasureMode", "MeasureSpec", "Rect"]
