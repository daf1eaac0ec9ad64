#!/usr/bin/env python3
"""
Orbit and gravity helpers for Orbits.

Planets follow prescribed circular orbits instead of being integrated, using
Kepler's relation between radius and angular speed:

    v = sqrt(GM / r)        omega = v / r = sqrt(GM / r^3)

Satellites are massless test particles; ``point_accelerations`` gives the
softened pull of the central body and planets on them.

Units follow the rest of the app: world units for length, seconds for time.
"""
import math
from typing import List, Sequence, Tuple

Point = Tuple[float, float]

TWO_PI = 2.0 * math.pi


def circular_orbit_velocity(gm: float, orbital_radius: float) -> float:
    """
    Calculate the speed needed for a circular orbit.

    Args:
        gm: Gravitational parameter G*M of the central body
        orbital_radius: Orbital radius

    Returns:
        Tangential speed for a circular orbit, or 0.0 for a non-positive radius
    """
    if orbital_radius <= 0:
        return 0.0
    return math.sqrt(gm / orbital_radius)


def orbital_angular_velocity(gm: float, orbital_radius: float) -> float:
    """Angular speed in radians per second on a circular orbit."""
    if orbital_radius <= 0:
        return 0.0
    return circular_orbit_velocity(gm, orbital_radius) / orbital_radius


def wrap_angle(theta: float) -> float:
    """Wrap an angle into [0, 2*pi)."""
    theta = math.fmod(theta, TWO_PI)
    if theta < 0.0:
        theta += TWO_PI
    # fmod of a tiny negative value can round back up to exactly 2*pi
    if theta >= TWO_PI:
        theta = 0.0
    return theta


def point_accelerations(
    positions: Sequence[Point],
    attractors: Sequence[Tuple[Point, float]],
    softening: float = 0.0,
) -> List[Point]:
    """
    Gravitational acceleration on massless test particles.

    For each particle i, sums over attractors j with parameter gm_j:

        a_i = sum_j gm_j * r_ij / (|r_ij|^2 + eps^2)^(3/2)

    where r_ij points from the particle to the attractor. Particles do not
    pull on each other or on the attractors.

    Args:
        positions: (x, y) of each particle.
        attractors: ((x, y), gm) pairs.
        softening: eps, added in quadrature to every separation.

    Returns:
        (ax, ay) per particle, same order as ``positions``.
    """
    eps_squared = softening * softening
    out = []
    for xi, yi in positions:
        ax_total, ay_total = 0.0, 0.0
        for (xj, yj), gm in attractors:
            dx = xj - xi
            dy = yj - yi
            r_squared_soft = dx * dx + dy * dy + eps_squared
            if r_squared_soft == 0.0:
                continue
            inv_r_cubed = 1.0 / (r_squared_soft * math.sqrt(r_squared_soft))
            ax_total += dx * gm * inv_r_cubed
            ay_total += dy * gm * inv_r_cubed
        out.append((ax_total, ay_total))
    return out
