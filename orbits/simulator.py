#!/usr/bin/env python3
"""
Orbit simulator: owns the planets, the satellites and their trail history.

The simulator is driven from the main loop, one ``advance`` per displayed
frame, and exposes a snapshot of everything drawable through
``render_state`` (planets) and ``satellite_state``. It never touches pygame,
so it can be exercised headless.

Satellites
- Spawn as a Poisson process at ``spawn_rate`` per second, at a random point
  inside the bounds with a random heading and ``SATELLITE_SPEED``.
- Fall under the softened gravity of the central body and every planet
  (semi-implicit Euler, one step per frame).
- Die when they leave the bounds or touch the central body or a planet.
  A dead satellite stops, loses one trail point per frame and is removed
  once its trail is empty.
"""
import logging
import math
import random
from typing import List, Optional, Sequence, Tuple

from .constants import (
    CENTRAL_GM,
    CENTRAL_RADIUS,
    DEFAULT_SPAWN_RATE,
    GRAVITY_SOFTENING,
    MAX_ORBIT_RADIUS,
    MIN_ORBIT_RADIUS,
    PLANET_GM,
    PLANET_RADIUS,
    SATELLITE_RADIUS,
    SATELLITE_SPEED,
    VIEW_MARGIN,
)
from .data_models import Body, BodyState, Color, Point, Satellite, SatelliteState, TrailBuffer
from .physics import TWO_PI, orbital_angular_velocity, point_accelerations, wrap_angle
from .vector_utils import polar_to_cartesian

log = logging.getLogger(__name__)

Bounds = Tuple[float, float, float, float]  # (xmin, ymin, xmax, ymax)


def random_color(rng: random.Random) -> Color:
    """Random colour bright enough to read against the dark background."""
    return (rng.randint(60, 255), rng.randint(60, 255), rng.randint(60, 255))


def orbit_radii(num_planets: int) -> List[float]:
    """Evenly spaced, strictly increasing orbital radii."""
    if num_planets == 1:
        return [(MIN_ORBIT_RADIUS + MAX_ORBIT_RADIUS) / 2.0]
    step = (MAX_ORBIT_RADIUS - MIN_ORBIT_RADIUS) / (num_planets - 1)
    return [MIN_ORBIT_RADIUS + i * step for i in range(num_planets)]


def outside(position: Point, radius: float, bounds: Bounds) -> bool:
    """True once a circle is entirely past any edge of ``bounds``."""
    x, y = position
    xmin, ymin, xmax, ymax = bounds
    return x + radius < xmin or y + radius < ymin or x - radius > xmax or y - radius > ymax


class OrbitSimulator:
    """
    Maintains N bodies on circular orbits around a common centre.

    Bodies start evenly spaced in angle with the first one straight up, on
    radii growing outward; each moves at its Kepler angular velocity so inner
    planets overtake outer ones.
    """

    def __init__(self, num_planets: int, trail_length: int, rng: Optional[random.Random] = None,
                 spawn_rate: float = DEFAULT_SPAWN_RATE):
        if num_planets < 1:
            raise ValueError(f"num_planets must be at least 1, got {num_planets}")
        if trail_length < 0:
            raise ValueError(f"trail_length must be >= 0, got {trail_length}")
        if spawn_rate < 0:
            raise ValueError(f"spawn_rate must be >= 0, got {spawn_rate}")
        self.trail_length = trail_length
        self.spawn_rate = spawn_rate
        self.central_radius = CENTRAL_RADIUS
        self.frame_count = 0
        self.elapsed = 0.0
        self._rng = rng or random.Random()

        self._bodies: List[Body] = []
        for i, r in enumerate(orbit_radii(num_planets)):
            theta = wrap_angle(TWO_PI * i / num_planets - math.pi / 2)
            self._bodies.append(Body(
                radius=r,
                angle=theta,
                angular_velocity=orbital_angular_velocity(CENTRAL_GM, r),
                color=random_color(self._rng),
                size=PLANET_RADIUS,
                trail=TrailBuffer(trail_length),
            ))
        self._satellites: List[Satellite] = []
        half = MAX_ORBIT_RADIUS * VIEW_MARGIN
        self.bounds: Bounds = (-half, -half, half, half)
        log.debug("created %d bodies, trail length %d", num_planets, trail_length)

    @property
    def bodies(self) -> Sequence[Body]:
        return tuple(self._bodies)

    @property
    def satellites(self) -> Sequence[Satellite]:
        return tuple(self._satellites)

    @property
    def max_orbit_radius(self) -> float:
        return max(b.radius for b in self._bodies)

    def set_bounds(self, xmin: float, ymin: float, xmax: float, ymax: float) -> None:
        """World rectangle satellites may occupy; usually the visible area."""
        self.bounds = (xmin, ymin, xmax, ymax)

    def spawn_satellite(self, position: Point, velocity: Point, color: Optional[Color] = None) -> Satellite:
        sat = Satellite(
            position=position,
            velocity=velocity,
            color=color or random_color(self._rng),
            size=SATELLITE_RADIUS,
            trail=TrailBuffer(self.trail_length),
        )
        self._satellites.append(sat)
        return sat

    def spawn_random_satellite(self) -> Satellite:
        xmin, ymin, xmax, ymax = self.bounds
        position = (self._rng.uniform(xmin, xmax), self._rng.uniform(ymin, ymax))
        velocity = polar_to_cartesian(SATELLITE_SPEED, self._rng.uniform(0.0, TWO_PI))
        return self.spawn_satellite(position, velocity)

    def advance(self, dt: float) -> None:
        """
        Move every body forward by ``dt`` seconds.

        The pre-call position goes onto each trail first, so a non-positive
        ``dt`` still shifts trails while leaving angles untouched.
        """
        moving = dt > 0
        for b in self._bodies:
            b.add_trail_point()
            if moving:
                b.angle = wrap_angle(b.angle + b.angular_velocity * dt)
        self._step_satellites(dt)
        if moving and self.spawn_rate > 0:
            # chance of at least one arrival in dt for a Poisson process
            if self._rng.random() < 1.0 - math.exp(-self.spawn_rate * dt):
                self.spawn_random_satellite()
        self.frame_count += 1
        if moving:
            self.elapsed += dt

    def _attractors(self) -> List[Tuple[Point, float]]:
        attractors = [((0.0, 0.0), CENTRAL_GM)]
        attractors.extend((b.position, PLANET_GM) for b in self._bodies)
        return attractors

    def _hits_body(self, sat: Satellite) -> bool:
        x, y = sat.position
        if math.hypot(x, y) < self.central_radius + sat.size:
            return True
        for b in self._bodies:
            bx, by = b.position
            if math.hypot(x - bx, y - by) < b.size + sat.size:
                return True
        return False

    def _step_satellites(self, dt: float) -> None:
        live = [s for s in self._satellites if not s.dead]
        if dt > 0 and live:
            accelerations = point_accelerations(
                [s.position for s in live], self._attractors(), GRAVITY_SOFTENING)
        else:
            accelerations = [(0.0, 0.0)] * len(live)

        for s in self._satellites:
            if s.dead:
                s.trail.pop_oldest()

        for s, (ax, ay) in zip(live, accelerations):
            s.add_trail_point()
            if dt > 0:
                vx = s.velocity[0] + ax * dt
                vy = s.velocity[1] + ay * dt
                s.velocity = (vx, vy)
                s.position = (s.position[0] + vx * dt, s.position[1] + vy * dt)
            if outside(s.position, s.size, self.bounds) or self._hits_body(s):
                s.dead = True

        self._satellites = [s for s in self._satellites if not s.dead or len(s.trail) > 0]

    def render_state(self) -> List[BodyState]:
        """Current position and trail (oldest to newest) of every body."""
        return [
            BodyState(
                position=b.position,
                trail=b.trail.snapshot(),
                color=b.color,
                size=b.size,
                radius=b.radius,
                angle=b.angle,
                angular_velocity=b.angular_velocity,
            )
            for b in self._bodies
        ]

    def satellite_state(self) -> List[SatelliteState]:
        """Every satellite still on screen, dead ones included while their trail drains."""
        return [
            SatelliteState(
                position=s.position,
                trail=s.trail.snapshot(),
                color=s.color,
                size=s.size,
                dead=s.dead,
            )
            for s in self._satellites
        ]

    def clear_trails(self) -> None:
        for b in self._bodies:
            b.trail.clear()
        for s in self._satellites:
            s.trail.clear()
        self._satellites = [s for s in self._satellites if not s.dead]
