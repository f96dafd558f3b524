from __future__ import annotations

import random
from typing import List, Optional, Tuple

from ..config.schema import BurstConfig
from .particle import Particle


def particle_count(rng: random.Random, config: BurstConfig) -> int:
    lo, hi = config.particle_count
    return rng.randint(lo, hi)


def generate_burst(
    center: Tuple[float, float],
    rng: Optional[random.Random] = None,
    config: Optional[BurstConfig] = None,
) -> List[Particle]:
    """Create a fresh cohort of particles around ``center``.

    Distances, sizes and angles are drawn as whole numbers from the inclusive
    ranges of ``config``. Nothing else is touched; the caller owns storing
    the cohort and starting the clock.
    """
    rng = rng if rng is not None else random.Random()
    config = config if config is not None else BurstConfig()
    cx, cy = float(center[0]), float(center[1])

    particles = []
    for _ in range(particle_count(rng, config)):
        particles.append(Particle(
            x=cx,
            y=cy,
            target_distance=float(rng.randint(*config.target_distance)),
            size=float(rng.randint(*config.size)),
            angle=float(rng.randint(*config.angle)),
            color=config.color,
        ))
    return particles
