from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

DESIRED_WIDTH = 100
DESIRED_HEIGHT = 500


class MeasureMode(Enum):
    UNSPECIFIED = "unspecified"
    EXACTLY = "exactly"
    AT_MOST = "at_most"


@dataclass(frozen=True)
class MeasureSpec:
    mode: MeasureMode
    size: int = 0

    @classmethod
    def exactly(cls, size: int) -> "MeasureSpec":
        return cls(MeasureMode.EXACTLY, int(size))

    @classmethod
    def at_most(cls, size: int) -> "MeasureSpec":
        return cls(MeasureMode.AT_MOST, int(size))

    @classmethod
    def unspecified(cls) -> "MeasureSpec":
        return cls(MeasureMode.UNSPECIFIED)


def resolve_size(spec: MeasureSpec, desired: int) -> int:
    if spec.mode is MeasureMode.EXACTLY:
        return spec.size
    if spec.mode is MeasureMode.AT_MOST:
        return min(desired, spec.size)
    return desired


def measure(width_spec: MeasureSpec, height_spec: MeasureSpec) -> Tuple[int, int]:
    return (resolve_size(width_spec, DESIRED_WIDTH), resolve_size(height_spec, DESIRED_HEIGHT))
