#!/usr/bin/env python3
"""
General utilities for Orbits.
"""
import math
from typing import Optional


def try_int(val) -> Optional[int]:
    """Parse an integer from text, or return None if it is not one."""
    try:
        return int(str(val).strip(), 10)
    except ValueError:
        return None


def try_float(val) -> Optional[float]:
    """Parse a finite float from text, or return None if it is not one."""
    try:
        value = float(val)
    except (TypeError, ValueError):
        return None
    if math.isnan(value) or math.isinf(value):
        return None
    return value
