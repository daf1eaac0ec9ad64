#!/usr/bin/env python3
"""
Shared constants for Orbits.

World units are pixels of the reference 800x800 window; the camera rescales
them for other window sizes. Time is in seconds.
"""

APP_NAME = "orbits"
APP_VERSION = "0.1.0"

# Command-line defaults
DEFAULT_NUM_PLANETS = 1
DEFAULT_TRAIL_LENGTH = 100

# Orbit layout (world units)
CENTRAL_RADIUS = 25.0
PLANET_RADIUS = 5.0
MIN_ORBIT_RADIUS = 60.0
MAX_ORBIT_RADIUS = 300.0

# Gravitational parameter of the central body; sets orbital periods
# (about 2.9 s for the innermost orbit, 33 s for the outermost).
CENTRAL_GM = 1.0e6

# Rendering (viewport)
VIEW_WIDTH = 800
VIEW_HEIGHT = 800
FPS_LIMIT = 60
VIEW_MARGIN = 1.15  # fraction of the outermost orbit kept visible
BACKGROUND_COLOR = (0, 0, 0)
CENTRAL_COLOR = (255, 204, 0)
TRAIL_MIN_BRIGHTNESS = 0.05  # oldest trail segment, as a blend toward body colour

MAX_FRAME_DT = 0.25  # seconds; longest step passed to the simulator per frame

# Safety: avoid drawing outside reasonable integer pixel ranges
SAFE_COORD_LIMIT = 30000

# Satellites: free particles that fall through the field of the central body
# and the planets until they leave the view or hit something.
DEFAULT_SPAWN_RATE = 0.6  # expected spawns per second
SATELLITE_RADIUS = 2.5
SATELLITE_SPEED = 100.0  # launch speed, world units per second
PLANET_GM = 1.0e5  # gravitational parameter of each orbiting planet
GRAVITY_SOFTENING = 5.0  # world units; keeps close passes finite
