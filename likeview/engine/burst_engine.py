from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from ..config.schema import BurstConfig
from .advance import advance
from .burst import generate_burst
from .particle import Particle, ParticleSprite
from .store import ParticleStore

logger = logging.getLogger(__name__)


class EngineState(Enum):
    IDLE = "idle"
    RUNNING = "running"


@dataclass(frozen=True)
class FrameResult:
    completed: bool
    live: int = 0


class BurstEngine:
    """Particle burst of a single like view.

    The engine owns no timer: the host calls :meth:`on_frame` once per display
    refresh until it reports ``completed``. The animation clock starts on the
    first frame after a trigger and is shared by every particle of the burst.
    """

    def __init__(self, config: Optional[BurstConfig] = None, rng: Optional[random.Random] = None):
        self.config = config if config is not None else BurstConfig()
        self.rng = rng if rng is not None else random.Random()
        self.store = ParticleStore()
        self.start_ms: Optional[float] = None
        self.dirty = False

    @property
    def state(self) -> EngineState:
        return EngineState.RUNNING if self.store else EngineState.IDLE

    @property
    def particles(self) -> List[Particle]:
        return self.store.snapshot()

    def on_trigger(self, center: Tuple[float, float]) -> None:
        # An in-flight burst is dropped, not faded out.
        if self.store:
            logger.debug("discarding in-flight burst of %d particles", len(self.store))
        self.store.replace(generate_burst(center, self.rng, self.config))
        self.start_ms = None
        self.dirty = True
        logger.debug("burst triggered at (%.1f, %.1f) with %d particles", center[0], center[1], len(self.store))

    def on_frame(self, now_ms: float) -> FrameResult:
        if not self.store:
            return FrameResult(completed=True)

        if self.start_ms is None:
            self.start_ms = now_ms
        elapsed = now_ms - self.start_ms
        duration = self.config.duration_ms

        def step(p: Particle) -> bool:
            st = advance(p, elapsed, duration)
            p.current_distance = max(p.current_distance, st.distance)
            p.alpha = st.alpha
            return not st.done

        self.store.retain(step)
        self.dirty = True

        if not self.store:
            self.start_ms = None
            logger.debug("burst finished after %.0f ms", elapsed)
            return FrameResult(completed=True)
        return FrameResult(completed=False, live=len(self.store))

    def render(self) -> List[ParticleSprite]:
        sprites = []
        for p in self.store:
            x, y = p.point()
            r, g, b, _ = p.color
            sprites.append(ParticleSprite(x=x, y=y, size=p.size, color=(r, g, b, p.alpha)))
        return sprites

    def mark_clean(self) -> None:
        self.dirty = False
