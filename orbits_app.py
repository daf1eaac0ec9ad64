#!/usr/bin/env python3
"""
Orbits application entry point and renderer.

What this module does
- Parses the command line into a frozen OrbitConfig.
- Opens a pygame window (fixed 800x800, or fullscreen at desktop resolution).
- Runs a single loop: handle events, advance the OrbitSimulator by the real
  elapsed time, draw, flip. The optional Dear PyGui stats panel is stepped
  from the same loop.

Units and conventions
- The simulator works in world units centred on the central body; Camera2D
  maps them to pixels so every orbit fits the window.
- Colors are RGB tuples in 0..255.

Running
1) Install: `pip install -e .`
2) Run: `orbits -n 6 -l 150` (or `python orbits_app.py --help`)

Closing the window, pressing Escape, or Ctrl+C all exit cleanly.
"""

import logging
import random
import sys
import time
from typing import List, Optional, Sequence, Tuple

import pygame
from pygame import gfxdraw

from orbits.camera import Camera2D
from orbits.cli import parse_config
from orbits.constants import (
    APP_NAME,
    BACKGROUND_COLOR,
    CENTRAL_COLOR,
    FPS_LIMIT,
    MAX_FRAME_DT,
    SAFE_COORD_LIMIT,
    TRAIL_MIN_BRIGHTNESS,
    VIEW_HEIGHT,
    VIEW_WIDTH,
)
from orbits.data_models import BodyState, Color, OrbitConfig, SatelliteState
from orbits.panel import StatsPanel
from orbits.simulator import OrbitSimulator
from orbits.vector_utils import blend_color, lerp

log = logging.getLogger("orbits")


def _safe_point(pt) -> Optional[Tuple[int, int]]:
    try:
        x, y = int(pt[0]), int(pt[1])
    except (TypeError, ValueError, OverflowError):
        return None
    if -SAFE_COORD_LIMIT <= x <= SAFE_COORD_LIMIT and -SAFE_COORD_LIMIT <= y <= SAFE_COORD_LIMIT:
        return (x, y)
    return None


def trail_colors(color: Color, segments: int, background: Color = BACKGROUND_COLOR) -> List[Color]:
    """
    Colour of each trail segment, oldest first.

    Segments fade from almost the background colour up to the body colour at
    the newest end.
    """
    if segments <= 0:
        return []
    if segments == 1:
        return [color]
    out = []
    for k in range(segments):
        t = lerp(TRAIL_MIN_BRIGHTNESS, 1.0, k / (segments - 1))
        out.append(blend_color(background, color, t))
    return out


class Renderer:
    """Draws the central body, fading trails, planets and satellites onto a surface."""

    def __init__(self, camera: Camera2D, central_radius: float):
        self.camera = camera
        self.central_radius = central_radius

    def draw(self, surf: pygame.Surface, states: Sequence[BodyState],
             satellites: Sequence[SatelliteState] = ()) -> None:
        surf.fill(BACKGROUND_COLOR)

        center = _safe_point(self.camera.world_to_screen((0.0, 0.0)))
        if center:
            r = self.camera.length_to_screen(self.central_radius, minimum=2)
            gfxdraw.filled_circle(surf, center[0], center[1], r, CENTRAL_COLOR)
            gfxdraw.aacircle(surf, center[0], center[1], r, CENTRAL_COLOR)

        for s in states:
            self.draw_trail(surf, s.trail + (s.position,), s.color)
        for sat in satellites:
            # a dead satellite has stopped; only its draining trail is left
            pts = sat.trail if sat.dead else sat.trail + (sat.position,)
            self.draw_trail(surf, pts, sat.color)

        for s in states:
            self.draw_disc(surf, s.position, s.size, s.color)
        for sat in satellites:
            if not sat.dead:
                self.draw_disc(surf, sat.position, sat.size, sat.color, minimum=1)

    def draw_disc(self, surf: pygame.Surface, position, size: float, color: Color, minimum: int = 2) -> None:
        p = _safe_point(self.camera.world_to_screen(position))
        if p is None:
            return
        r = self.camera.length_to_screen(size, minimum=minimum)
        gfxdraw.filled_circle(surf, p[0], p[1], r, color)
        gfxdraw.aacircle(surf, p[0], p[1], r, color)

    def draw_trail(self, surf: pygame.Surface, points: Sequence[Tuple[float, float]], color: Color) -> None:
        pts = []
        for p in points:
            sp = _safe_point(self.camera.world_to_screen(p))
            if sp:
                pts.append(sp)
        if len(pts) < 2:
            return
        colors = trail_colors(color, len(pts) - 1)
        for k, c in enumerate(colors):
            pygame.draw.aaline(surf, c, pts[k], pts[k + 1])


class OrbitApp:
    """
    Owns the window, the simulator and the frame loop.
    """

    def __init__(self, config: OrbitConfig):
        self.config = config
        rng = random.Random(config.seed) if config.seed is not None else random.Random()
        self.sim = OrbitSimulator(config.num_planets, config.trail_length, rng=rng,
                                  spawn_rate=config.spawn_rate)
        self.camera = Camera2D()
        self.renderer = Renderer(self.camera, self.sim.central_radius)
        self.panel = None
        self.surface = None
        self.clock = None
        self.running = False
        self._last_caption = None

    def setup(self) -> None:
        pygame.init()
        if self.config.fullscreen:
            self.surface = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
            pygame.mouse.set_visible(False)
            pygame.event.set_grab(True)
        else:
            self.surface = pygame.display.set_mode((VIEW_WIDTH, VIEW_HEIGHT))
        pygame.display.set_caption(APP_NAME)
        w, h = self.surface.get_size()
        self.camera.set_viewport_size(w, h)
        self.camera.fit_radius(self.sim.max_orbit_radius)
        x0, y0 = self.camera.screen_to_world((0, 0))
        x1, y1 = self.camera.screen_to_world((w, h))
        self.sim.set_bounds(x0, y0, x1, y1)
        self.clock = pygame.time.Clock()
        log.info("window %dx%d%s", w, h, " (fullscreen)" if self.config.fullscreen else "")

        if self.config.show_panel:
            self.panel = StatsPanel(self.config.num_planets)
            self.panel.open()
        self.running = True

    def handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False

    def update_caption(self) -> None:
        fps = int(round(self.clock.get_fps()))
        if fps != self._last_caption:
            pygame.display.set_caption(f"{APP_NAME} ({fps} fps)")
            self._last_caption = fps

    def run(self) -> None:
        last_time = time.perf_counter()
        while self.running:
            now = time.perf_counter()
            real_dt = min(now - last_time, MAX_FRAME_DT)
            last_time = now

            self.handle_events()
            if not self.running:
                break

            self.sim.advance(real_dt)
            states = self.sim.render_state()
            satellites = self.sim.satellite_state()
            self.renderer.draw(self.surface, states, satellites)
            self.update_caption()
            pygame.display.flip()

            if self.panel is not None:
                if not self.panel.is_open:
                    self.running = False
                    break
                self.panel.update(states, self.clock.get_fps(), self.sim.frame_count, self.sim.elapsed,
                                  satellites=len(satellites))

            self.clock.tick(FPS_LIMIT)

    def shutdown(self) -> None:
        self.running = False
        if self.panel is not None:
            self.panel.close()
        pygame.quit()
        log.info("stopped after %d frames, %.1f s simulated", self.sim.frame_count, self.sim.elapsed)


def main(argv: Optional[Sequence[str]] = None) -> int:
    config = parse_config(argv)
    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    log.info(
        "starting: %d planets, trail length %d, %.2f satellites/s, fullscreen=%s",
        config.num_planets, config.trail_length, config.spawn_rate, config.fullscreen,
    )

    app = OrbitApp(config)
    try:
        app.setup()
        app.run()
    except pygame.error as e:
        log.error("display error: %s", e)
        return 1
    except KeyboardInterrupt:
        log.info("interrupted")
    finally:
        app.shutdown()
    return 0


if __name__ == "__main__":
    sys.exit(main())
