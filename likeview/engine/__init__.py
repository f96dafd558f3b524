"""Particle burst engine.

Store, frame advancer and burst generator behind a single ``BurstEngine``
that a host view drives once per display refresh.
"""

from .advance import advance
from .burst import generate_burst
from .burst_engine import BurstEngine, EngineState, FrameResult
from .particle import FrameStep, Particle, ParticleSprite
from .store import ParticleStore

__all__ = [
    "BurstEngine",
    "EngineState",
    "FrameResult",
    "FrameStep",
    "Particle",
    "ParticleSprite",
    "ParticleStore",
    "advance",
    "generate_burst",
]
