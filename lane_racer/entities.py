from dataclasses import dataclass
from typing import Tuple

from .config import (
    CAR_HEIGHT,
    CAR_WIDTH,
    COL_PLAYER,
    LANE_COUNT,
    LANE_WIDTH,
    PLAYER_BOTTOM_MARGIN,
    POWERUP_DRIFT,
    POWERUP_SIZE,
    ROAD_WIDTH,
    START_LANE,
)

Box = Tuple[float, float, float, float]  # x, y, w, h


# ----------------------------- Helpers -----------------------------

def clamp(v, lo, hi):
    return lo if v < lo else hi if v > hi else v


@dataclass(frozen=True)
class Viewport:
    width: int
    height: int

    def road_left(self) -> float:
        return self.width / 2 - ROAD_WIDTH / 2

    def lane_left(self, lane: int) -> float:
        return self.road_left() + LANE_WIDTH * lane

    def lane_center(self, lane: int) -> float:
        return self.lane_left(lane) + LANE_WIDTH / 2


def is_colliding(a: Box, b: Box) -> bool:
    """Axis-aligned overlap test. Touching edges do not count as a hit."""
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by


# ----------------------------- Game Objects -----------------------------

@dataclass
class PlayerCar:
    lane: int = START_LANE
    width: int = CAR_WIDTH
    height: int = CAR_HEIGHT
    color: Tuple[int, int, int] = COL_PLAYER

    def steer(self, delta: int):
        self.lane = clamp(self.lane + delta, 0, LANE_COUNT - 1)

    def box(self, viewport: Viewport) -> Box:
        # Recomputed from the viewport every time so a resize never leaves it stale.
        x = viewport.lane_center(self.lane) - self.width / 2
        y = viewport.height - self.height - PLAYER_BOTTOM_MARGIN
        return x, y, self.width, self.height


@dataclass
class OpponentCar:
    lane: int
    y: float
    speed: float  # px per tick, downward
    color: Tuple[int, int, int]
    width: int = CAR_WIDTH
    height: int = CAR_HEIGHT

    def update(self):
        self.y += self.speed

    def box(self, viewport: Viewport) -> Box:
        x = viewport.lane_center(self.lane) - self.width / 2
        return x, self.y, self.width, self.height


@dataclass
class Powerup:
    lane: int
    y: float
    kind: str
    width: int = POWERUP_SIZE
    height: int = POWERUP_SIZE

    def update(self):
        self.y += POWERUP_DRIFT

    def box(self, viewport: Viewport) -> Box:
        x = viewport.lane_center(self.lane) - self.width / 2
        return x, self.y, self.width, self.height
