#!/usr/bin/env python3
"""
Data models for Orbits.

This module defines the records shared between the simulator, the renderer
and the command line.

Units and usage
- positions are world units relative to the central body at the origin.
- angles are radians in [0, 2*pi); angular velocity is radians per second.
- trail stores past positions to render fading motion paths; it is mutated
  only by OrbitSimulator.advance.
"""
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from .constants import (
    DEFAULT_NUM_PLANETS,
    DEFAULT_SPAWN_RATE,
    DEFAULT_TRAIL_LENGTH,
    PLANET_RADIUS,
    SATELLITE_RADIUS,
)
from .vector_utils import polar_to_cartesian

Point = Tuple[float, float]
Color = Tuple[int, int, int]


class TrailBuffer:
    """
    Fixed-capacity ring of past positions.

    Slots are allocated once; ``push`` overwrites the oldest slot when full,
    so each frame costs O(1) per body. Iteration runs oldest to newest.
    A capacity of zero records nothing.
    """

    def __init__(self, capacity: int):
        if capacity < 0:
            raise ValueError(f"trail capacity must be >= 0, got {capacity}")
        self._slots: List[Optional[Point]] = [None] * capacity
        self._head = 0  # index of the oldest entry
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Point]:
        cap = len(self._slots)
        for k in range(self._size):
            yield self._slots[(self._head + k) % cap]

    def is_full(self) -> bool:
        return self._size == len(self._slots)

    def push(self, point: Point) -> None:
        """Append a position, evicting the oldest one when at capacity."""
        cap = len(self._slots)
        if cap == 0:
            return
        if self.is_full():
            self._slots[self._head] = point
            self._head = (self._head + 1) % cap
        else:
            self._slots[(self._head + self._size) % cap] = point
            self._size += 1

    def pop_oldest(self) -> Optional[Point]:
        """Remove and return the oldest position, or None when empty."""
        if self._size == 0:
            return None
        point = self._slots[self._head]
        self._slots[self._head] = None
        self._head = (self._head + 1) % len(self._slots)
        self._size -= 1
        return point

    def clear(self) -> None:
        for i in range(len(self._slots)):
            self._slots[i] = None
        self._head = 0
        self._size = 0

    def snapshot(self) -> Tuple[Point, ...]:
        return tuple(self)


@dataclass
class Body:
    """
    One planet on a circular orbit around the central body.

    Fields:
    - radius: Orbital radius in world units
    - angle: Angular position in radians
    - angular_velocity: Radians per second
    - color: RGB tuple used for rendering
    - size: Drawn radius of the planet in world units
    - trail: Ring buffer of past positions
    """
    radius: float
    angle: float
    angular_velocity: float
    color: Color = (200, 200, 255)
    size: float = PLANET_RADIUS
    trail: TrailBuffer = field(default_factory=lambda: TrailBuffer(DEFAULT_TRAIL_LENGTH))

    @property
    def position(self) -> Point:
        return polar_to_cartesian(self.radius, self.angle)

    def add_trail_point(self) -> None:
        """Append the current position to the trail."""
        self.trail.push(self.position)


@dataclass
class Satellite:
    """
    A free particle falling through the field of the central body and planets.

    Fields:
    - position: (x, y) in world units
    - velocity: (vx, vy) in world units per second
    - color: RGB tuple used for rendering
    - size: Drawn and collision radius in world units
    - dead: Set once it leaves the bounds or hits a body; it then stops
      moving and its trail drains one point per frame
    - trail: Ring buffer of past positions
    """
    position: Point
    velocity: Point
    color: Color = (200, 200, 255)
    size: float = SATELLITE_RADIUS
    dead: bool = False
    trail: TrailBuffer = field(default_factory=lambda: TrailBuffer(DEFAULT_TRAIL_LENGTH))

    def add_trail_point(self) -> None:
        self.trail.push(self.position)


@dataclass(frozen=True)
class SatelliteState:
    """Read-only snapshot of one satellite for drawing."""
    position: Point
    trail: Tuple[Point, ...]
    color: Color
    size: float
    dead: bool


@dataclass(frozen=True)
class BodyState:
    """Read-only snapshot of one body for drawing."""
    position: Point
    trail: Tuple[Point, ...]
    color: Color
    size: float
    radius: float
    angle: float
    angular_velocity: float


@dataclass(frozen=True)
class OrbitConfig:
    """Startup configuration; never changes while the program runs."""
    num_planets: int = DEFAULT_NUM_PLANETS
    trail_length: int = DEFAULT_TRAIL_LENGTH
    spawn_rate: float = DEFAULT_SPAWN_RATE
    fullscreen: bool = False
    show_panel: bool = False
    seed: Optional[int] = None
    verbose: bool = False
