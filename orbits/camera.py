#!/usr/bin/env python3
"""
Camera utilities for 2D world-to-screen transforms.
"""
from typing import Tuple
from .constants import VIEW_HEIGHT, VIEW_MARGIN, VIEW_WIDTH


class Camera2D:
    """
    Simple 2D camera that maps world coordinates to screen pixels.

    ``scale`` is pixels per world unit; the world origin (the central body)
    is kept at ``center`` in world space.
    """

    def __init__(self, center=(0.0, 0.0), scale: float = 1.0):
        self.center = [center[0], center[1]]
        self.scale = scale
        self.viewport_size = (VIEW_WIDTH, VIEW_HEIGHT)

    def set_viewport_size(self, w: int, h: int) -> None:
        self.viewport_size = (w, h)

    def world_to_screen(self, pos: Tuple[float, float]) -> Tuple[int, int]:
        cx, cy = self.center
        px = (pos[0] - cx) * self.scale + self.viewport_size[0] / 2
        py = (pos[1] - cy) * self.scale + self.viewport_size[1] / 2
        return (int(px), int(py))

    def screen_to_world(self, screen: Tuple[int, int]) -> Tuple[float, float]:
        cx, cy = self.center
        wx = (screen[0] - self.viewport_size[0] / 2) / self.scale + cx
        wy = (screen[1] - self.viewport_size[1] / 2) / self.scale + cy
        return (wx, wy)

    def length_to_screen(self, length: float, minimum: int = 1) -> int:
        return max(minimum, int(round(length * self.scale)))

    def fit_radius(self, radius: float, margin: float = VIEW_MARGIN) -> None:
        """Centre on the origin and zoom so a circle of ``radius`` fits the viewport."""
        self.center = [0.0, 0.0]
        half = min(self.viewport_size) / 2
        extent = max(radius * margin, 1e-9)
        self.scale = half / extent
