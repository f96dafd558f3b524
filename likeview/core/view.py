"""Backend-agnostic like view.

Holds the liked state, the icon resources and one ``BurstEngine``. A backend
session forwards touches and display refreshes to it and draws what it
exposes (current icon, icon rect, particle sprites).
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Any, Hashable, List, Optional, Tuple

from ..config.schema import ViewConfig
from ..engine import BurstEngine, FrameResult, ParticleSprite
from ..math.util import rect_center
from .context import IconResources
from .measure import MeasureSpec, measure


@dataclass(frozen=True)
class Rect:
    left: int
    top: int
    right: int
    bottom: int

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    @property
    def center(self) -> Tuple[float, float]:
        return rect_center(self.left, self.top, self.right, self.bottom)


def _image_size(image: Any) -> Tuple[int, int]:
    if image is None or not hasattr(image, "get_size"):
        return (0, 0)
    w, h = image.get_size()
    return (int(w), int(h))


class LikeView:
    def __init__(self, icons: IconResources, config: Optional[ViewConfig] = None, engine: Optional[BurstEngine] = None):
        self.config = config if config is not None else ViewConfig()
        self.icons = icons
        self.engine = engine if engine is not None else BurstEngine(self.config.burst, random.Random(self.config.seed))
        self.is_liked = False
        self.needs_redraw = True
        self._logger = logging.getLogger(__name__)
        self._reload_icons()

    def _reload_icons(self) -> None:
        # The rect is sized from the liked icon whichever one is showing.
        w, h = _image_size(self.icons.image(True))
        lay = self.config.layout
        self.icon_rect = Rect(
            left=lay.left,
            top=lay.top,
            right=lay.left + max(0, w - lay.inset),
            bottom=lay.top + max(0, h - lay.inset),
        )
        self.image = self.icons.image(self.is_liked)

    def set_icons(self, liked: Hashable, unliked: Hashable) -> None:
        self.icons.cleanup()
        self.icons.set_handles(liked, unliked)
        self._reload_icons()
        self.needs_redraw = True

    @property
    def animating(self) -> bool:
        return bool(self.engine.store)

    def on_touch_down(self) -> bool:
        self.is_liked = not self.is_liked
        self.image = self.icons.image(self.is_liked)
        self.engine.on_trigger(self.icon_rect.center)
        self.needs_redraw = True
        self._logger.debug("like toggled -> %s", self.is_liked)
        return True

    def frame(self, now_ms: float) -> FrameResult:
        res = self.engine.on_frame(now_ms)
        self.needs_redraw = not res.completed or self.engine.dirty
        return res

    def sprites(self) -> List[ParticleSprite]:
        return self.engine.render()

    def mark_drawn(self) -> None:
        self.engine.mark_clean()
        self.needs_redraw = self.animating

    def measure(self, width_spec: MeasureSpec, height_spec: MeasureSpec) -> Tuple[int, int]:
        return measure(width_spec, height_spec)
