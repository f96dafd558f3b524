"""Like button widget with a particle burst animation."""

from .config import BurstConfig, ViewConfig
from .core import IconResources, LikeView
from .engine import BurstEngine, FrameResult, Particle, ParticleSprite, advance, generate_burst

__version__ = "0.1.0"

__all__ = [
    "BurstConfig",
    "BurstEngine",
    "FrameResult",
    "IconResources",
    "LikeView",
    "Particle",
    "ParticleSprite",
    "ViewConfig",
    "advance",
    "generate_burst",
]
