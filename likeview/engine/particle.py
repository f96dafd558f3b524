from __future__ import annotations

from dataclasses import FrozenInstanceError, dataclass, field
from typing import Tuple

from ..math.util import polar_offset

# Set once at creation; only current_distance and alpha move during a burst.
_FIXED_FIELDS = frozenset({"x", "y", "target_distance", "size", "angle", "color"})


@dataclass
class Particle:
    """One dot of a burst.

    ``x``/``y`` is the burst origin and never changes; the particle travels
    along ``angle`` (degrees) until ``current_distance`` reaches
    ``target_distance``.
    """

    x: float
    y: float
    target_distance: float
    size: float
    angle: float
    color: Tuple[int, int, int, int]
    current_distance: float = 0.0
    alpha: int = field(default=-1)

    def __post_init__(self):
        if self.alpha < 0:
            self.alpha = self.color[3]

    def __setattr__(self, name, value):
        if name in _FIXED_FIELDS and name in self.__dict__:
            raise FrozenInstanceError(f"cannot assign to field {name!r}")
        super().__setattr__(name, value)

    @property
    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def point(self) -> Tuple[float, float]:
        dx, dy = polar_offset(self.angle, self.current_distance)
        return (self.x + dx, self.y + dy)


@dataclass(frozen=True)
class FrameStep:
    distance: float
    alpha: int
    done: bool


@dataclass(frozen=True)
class ParticleSprite:
    x: float
    y: float
    size: float
    color: Tuple[int, int, int, int]
