"""Immutable configuration for the like view and its particle burst.

Configuration objects are built once (from defaults, a config file and CLI
flags) and passed explicitly to the engine, the view and the session.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, Mapping, Optional, Tuple

ANIMATION_DURATION_MS = 300
PARTICLE_COUNT_RANGE = (12, 15)
TARGET_DISTANCE_RANGE = (60, 70)
PARTICLE_SIZE_RANGE = (2, 6)
ANGLE_RANGE = (0, 360)
PARTICLE_COLOR = (228, 13, 86, 255)


def _as_ints(name: str, value: Any, sizes: Tuple[int, ...]) -> Tuple[int, ...]:
    if not isinstance(value, (list, tuple)) or len(value) not in sizes:
        raise ValueError(f"{name} must be a list of {' or '.join(map(str, sizes))} numbers, got {value!r}")
    out = []
    for v in value:
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValueError(f"{name} items must be numbers, got {v!r}")
        out.append(int(v))
    return tuple(out)


def _check_range(name: str, rng: Any, lo_bound: Optional[int] = None) -> Tuple[int, int]:
    if not isinstance(rng, (list, tuple)) or len(rng) != 2:
        raise ValueError(f"{name} must be a (min, max) pair, got {rng!r}")
    lo, hi = _as_ints(name, rng, (2,))
    if lo > hi:
        raise ValueError(f"{name} min {lo} is greater than max {hi}")
    if lo_bound is not None and lo < lo_bound:
        raise ValueError(f"{name} min must be >= {lo_bound}, got {lo}")
    return (lo, hi)


@dataclass(frozen=True)
class BurstConfig:
    """Parameters of one particle burst.

    All ranges are inclusive integer ranges. ``particle_count`` is the number
    of particles generated per trigger; configure ``(13, 17)`` to reproduce
    the realized counts of the original widget.
    """

    duration_ms: int = ANIMATION_DURATION_MS
    particle_count: Tuple[int, int] = PARTICLE_COUNT_RANGE
    target_distance: Tuple[int, int] = TARGET_DISTANCE_RANGE
    size: Tuple[int, int] = PARTICLE_SIZE_RANGE
    angle: Tuple[int, int] = ANGLE_RANGE
    color: Tuple[int, int, int, int] = PARTICLE_COLOR

    def __post_init__(self):
        (duration,) = _as_ints("duration_ms", [self.duration_ms], (1,))
        if duration <= 0:
            raise ValueError(f"duration_ms must be positive, got {self.duration_ms}")
        object.__setattr__(self, "duration_ms", duration)
        object.__setattr__(self, "particle_count", _check_range("particle_count", self.particle_count, 0))
        object.__setattr__(self, "target_distance", _check_range("target_distance", self.target_distance, 0))
        object.__setattr__(self, "size", _check_range("size", self.size, 0))
        object.__setattr__(self, "angle", _check_range("angle", self.angle))

        color = _as_ints("color", self.color, (3, 4))
        if len(color) == 3:
            color = color + (255,)
        if any(c < 0 or c > 255 for c in color):
            raise ValueError(f"color must be RGB or RGBA with channels in 0..255, got {self.color!r}")
        object.__setattr__(self, "color", color)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "BurstConfig":
        known = {f.name for f in fields(cls)}
        kwargs = {k: (tuple(v) if isinstance(v, list) else v) for k, v in data.items() if k in known and v is not None}
        return cls(**kwargs)


@dataclass(frozen=True)
class IconLayout:
    """Where the like icon is drawn: fixed origin, icon size shrunk by ``inset``."""

    left: int = 200
    top: int = 200
    inset: int = 50


@dataclass(frozen=True)
class ViewConfig:
    w: int = 540
    h: int = 960
    fps: int = 120
    liked_icon: Optional[str] = None
    unliked_icon: Optional[str] = None
    seed: Optional[int] = None
    layout: IconLayout = field(default_factory=IconLayout)
    burst: BurstConfig = field(default_factory=BurstConfig)

    def __post_init__(self):
        w, h, fps = _as_ints("window", [self.w, self.h, self.fps], (3,))
        if w <= 0 or h <= 0:
            raise ValueError(f"window size must be positive, got {w}x{h}")
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        object.__setattr__(self, "w", w)
        object.__setattr__(self, "h", h)
        object.__setattr__(self, "fps", fps)

    @classmethod
    def from_flat(cls, flat: Mapping[str, Any]) -> "ViewConfig":
        """Build a config from flattened keys (config file and/or CLI args)."""

        cfg = cls()
        top: Dict[str, Any] = {}
        for k in ("w", "h", "fps", "liked_icon", "unliked_icon", "seed"):
            if flat.get(k) is not None:
                top[k] = flat[k]

        layout_kw = {
            k: _as_ints(f"icon_{k}", [flat[f"icon_{k}"]], (1,))[0]
            for k in ("left", "top", "inset")
            if flat.get(f"icon_{k}") is not None
        }
        burst_kw = {
            "duration_ms": flat.get("duration_ms"),
            "particle_count": flat.get("particle_count"),
            "target_distance": flat.get("target_distance"),
            "size": flat.get("particle_size"),
            "angle": flat.get("angle"),
            "color": flat.get("particle_color"),
        }

        return replace(
            cfg,
            layout=replace(cfg.layout, **layout_kw),
            burst=BurstConfig.from_mapping(burst_kw),
            **top,
        )
