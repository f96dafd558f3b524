from __future__ import annotations

from ..config.schema import ANIMATION_DURATION_MS
from ..math.easing import decelerate, fast_out_slow_in
from ..math.util import clamp
from .particle import FrameStep, Particle


def fade_alpha(base_alpha: int, path_gone: float) -> int:
    # Truncate the product first, then // 3 * 2: the fade bottoms out near a third of base.
    return 255 - int(base_alpha * decelerate(path_gone)) // 3 * 2


def advance(particle: Particle, elapsed_ms: float, duration_ms: int = ANIMATION_DURATION_MS) -> FrameStep:
    """Eased distance and alpha of ``particle`` at ``elapsed_ms`` into the burst.

    The distance is computed once and used both for the completion check and
    as the value to store, so the two can never disagree.
    """
    path_gone = clamp(float(elapsed_ms) / float(duration_ms), 0.0, 1.0)

    if path_gone < 1.0:
        distance = particle.target_distance * fast_out_slow_in(path_gone)
        alpha = fade_alpha(particle.color[3], path_gone)
    else:
        distance = particle.target_distance
        alpha = 0

    return FrameStep(distance=distance, alpha=alpha, done=distance == particle.target_distance)
