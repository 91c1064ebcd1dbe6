"""
Game constants and runtime settings.

Geometry and timing are module-level constants; the handful of values that
can be changed from the command line live on `Settings`.
"""

from dataclasses import dataclass
from typing import Optional


# ----------------------------- Config -----------------------------

WINDOW_W, WINDOW_H = 800, 720
FPS = 60

# Road layout. Lanes split the road evenly and the road sits centred in the window.
ROAD_WIDTH = 400
LANE_COUNT = 3
LANE_WIDTH = ROAD_WIDTH / LANE_COUNT
START_LANE = 1

CAR_WIDTH = 50
CAR_HEIGHT = 80
PLAYER_BOTTOM_MARGIN = 20

POWERUP_SIZE = 30
POWERUP_DRIFT = 3  # px per tick

# Speeds are in pixels per tick
BASE_MAX_SPEED = 5
BOOST_MAX_SPEED = 8
ACCELERATION = 0.01
OPPONENT_SPEED_MIN = 2
OPPONENT_SPEED_SPREAD = 3  # speed is drawn from [MIN, MIN + SPREAD)

# Timers in milliseconds
CAR_SPAWN_RATE_MS = 2000
POWERUP_SPAWN_RATE_MS = 10000
BOOST_DURATION_MS = 5000

SCORE_PER_OPPONENT = 10

# Power-up types
POWERUP_SPEED_BOOST = "SPEED_BOOST"
POWERUP_TYPES = (POWERUP_SPEED_BOOST,)

# Audio cues
CUE_ENGINE = "engine"
CUE_CRASH = "crash"
CUE_BOOST = "boost"
CUE_SCORE = "score"
CUE_VOLUMES = {
    CUE_ENGINE: 0.3,
    CUE_CRASH: 0.7,
    CUE_BOOST: 0.5,
    CUE_SCORE: 0.5,
}

# Colors
COL_BG = (0, 0, 0)
COL_ROAD = (51, 51, 51)
COL_LANE_LINE = (255, 255, 255)
COL_PLAYER = (255, 0, 0)
COL_WINDOW = (170, 221, 255)
COL_HEADLIGHT = (255, 255, 153)
COL_TAILLIGHT = (255, 51, 51)
COL_POWERUP = (255, 255, 0)
COL_POWERUP_ICON = (0, 0, 0)
COL_BOOST = (255, 255, 0)
COL_TEXT = (255, 255, 255)
COL_UI_BG = (20, 20, 30, 220)
COL_BUTTON = (37, 99, 235)

OPPONENT_COLORS = [
    (0, 0, 255),
    (0, 255, 0),
    (255, 0, 255),
    (255, 255, 0),
    (0, 255, 255),
]

# Lane divider dash pattern (px)
LANE_LINE_WIDTH = 5
DASH_LENGTH = 50
DASH_GAP = 30


@dataclass
class Settings:
    width: int = WINDOW_W
    height: int = WINDOW_H
    fps: int = FPS
    seed: Optional[int] = None
    mute: bool = False
