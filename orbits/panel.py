#!/usr/bin/env python3
"""
Read-only Dear PyGui stats panel.

The panel is stepped from the pygame loop (one ``render_dearpygui_frame`` per
frame), so the app keeps a single thread. Closing the panel window ends the
application, the same as closing the viewport.
"""
import math
from typing import List, Sequence, Tuple

import dearpygui.dearpygui as dpg

from .data_models import BodyState

PANEL_WIDTH = 460
PANEL_HEIGHT = 420
REFRESH_EVERY = 6  # frames between table refreshes (~10 Hz at 60 FPS)

COLUMNS = ("#", "Radius", "Angle (deg)", "Omega (rad/s)", "Trail")


def format_body_rows(states: Sequence[BodyState]) -> List[Tuple[str, ...]]:
    """Table rows for the planet list, one per body in simulator order."""
    rows = []
    for i, s in enumerate(states):
        rows.append((
            str(i + 1),
            f"{s.radius:.1f}",
            f"{math.degrees(s.angle):.1f}",
            f"{s.angular_velocity:.3f}",
            str(len(s.trail)),
        ))
    return rows


class StatsPanel:
    """Shows frame rate, frame count, satellite count and a per-planet table."""

    def __init__(self, num_planets: int):
        self.num_planets = num_planets
        self._context = False
        self._open = False
        self._frames = 0

    @property
    def is_open(self) -> bool:
        return self._open and dpg.is_dearpygui_running()

    def _on_close(self, *args) -> None:
        # Closing the Stats window hides it inside a still-running viewport
        self._open = False

    def open(self) -> None:
        dpg.create_context()
        self._context = True
        dpg.create_viewport(title="orbits - Stats", width=PANEL_WIDTH + 20, height=PANEL_HEIGHT + 20)

        with dpg.window(label="Stats", width=PANEL_WIDTH, height=PANEL_HEIGHT, pos=(10, 10),
                        tag="stats_window", on_close=self._on_close):
            dpg.add_text("FPS: -", tag="fps_text")
            dpg.add_text("Frame: 0", tag="frame_text")
            dpg.add_text("Simulated time: 0.0 s", tag="time_text")
            dpg.add_text("Satellites: 0", tag="satellite_text")
            dpg.add_separator()
            with dpg.table(header_row=True, tag="body_table"):
                for label in COLUMNS:
                    dpg.add_table_column(label=label)
                for i in range(self.num_planets):
                    with dpg.table_row():
                        for c in range(len(COLUMNS)):
                            dpg.add_text("", tag=f"cell_{i}_{c}")

        dpg.setup_dearpygui()
        dpg.show_viewport()
        self._open = True

    def update(self, states: Sequence[BodyState], fps: float, frame_count: int, elapsed: float,
               satellites: int = 0) -> None:
        if not self.is_open:
            return
        self._frames += 1
        if self._frames % REFRESH_EVERY == 1:
            dpg.set_value("fps_text", f"FPS: {fps:.0f}")
            dpg.set_value("frame_text", f"Frame: {frame_count}")
            dpg.set_value("time_text", f"Simulated time: {elapsed:.1f} s")
            dpg.set_value("satellite_text", f"Satellites: {satellites}")
            for i, row in enumerate(format_body_rows(states)):
                for c, text in enumerate(row):
                    dpg.set_value(f"cell_{i}_{c}", text)
        dpg.render_dearpygui_frame()

    def close(self) -> None:
        self._open = False
        if self._context:
            dpg.destroy_context()
            self._context = False
