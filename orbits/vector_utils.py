#!/usr/bin/env python3
"""
Vector and colour helpers for 2D drawing.

These are small, fast functions used throughout the app.
"""
import math
from typing import Tuple


def clamp(x: float, a: float, b: float) -> float:
    """Clamp x to the inclusive range [a, b]."""
    return max(a, min(b, x))


def polar_to_cartesian(r: float, theta: float) -> Tuple[float, float]:
    return (r * math.cos(theta), r * math.sin(theta))


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def blend_color(a: Tuple[int, int, int], b: Tuple[int, int, int], t: float) -> Tuple[int, int, int]:
    """Mix colour a toward b; t=0 gives a, t=1 gives b."""
    t = clamp(t, 0.0, 1.0)
    return (
        int(round(lerp(a[0], b[0], t))),
        int(round(lerp(a[1], b[1], t))),
        int(round(lerp(a[2], b[2], t))),
    )
