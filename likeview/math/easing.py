from __future__ import annotations

from typing import Callable


def cubic_bezier_y_for_x(x1, y1, x2, y2, x, iters=24):
    # Solve u s.t. Bx(u)=x by binary search, then return By(u).
    # Control points: (0,0), (x1,y1), (x2,y2), (1,1)
    if x <= 0.0:
        return 0.0
    if x >= 1.0:
        return 1.0

    def bx(u):
        a = 1 - u
        return 3*a*a*u*x1 + 3*a*u*u*x2 + u*u*u

    def by(u):
        a = 1 - u
        return 3*a*a*u*y1 + 3*a*u*u*y2 + u*u*u

    lo, hi = 0.0, 1.0
    for _ in range(iters):
        mid = (lo + hi) * 0.5
        if bx(mid) < x:
            lo = mid
        else:
            hi = mid
    return by((lo + hi) * 0.5)


def cubic_bezier(x1: float, y1: float, x2: float, y2: float) -> Callable[[float], float]:
    def ease(t: float) -> float:
        return cubic_bezier_y_for_x(x1, y1, x2, y2, t)
    return ease


# Material "standard" curve: accelerates quickly, settles slowly.
fast_out_slow_in = cubic_bezier(0.4, 0.0, 0.2, 1.0)


def decelerate(t: float) -> float:
    if t <= 0.0:
        return 0.0
    if t >= 1.0:
        return 1.0
    return 1 - (1 - t) * (1 - t)
