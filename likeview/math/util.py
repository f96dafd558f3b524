from __future__ import annotations

import math
from typing import Tuple


def clamp(x, a, b):
    return a if x < a else b if x > b else x


def polar_offset(angle_deg: float, distance: float) -> Tuple[float, float]:
    # 0 degrees points down the y axis, 90 along +x
    rad = angle_deg * math.pi / 180
    return (distance * math.sin(rad), distance * math.cos(rad))


def rect_center(left: int, top: int, right: int, bottom: int) -> Tuple[float, float]:
    return (float((left + right) // 2), float((top + bottom) // 2))
