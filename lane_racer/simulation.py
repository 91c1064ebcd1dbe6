"""
One tick of the driving simulation.

`step` takes the run state plus everything the outside world provides (the
clock reading, the viewport, the spawner with its random source and the cue
sink) and returns the advanced state. Nothing in here draws or reads input.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Callable, Dict, List

from .audio import CueSink
from .config import (
    ACCELERATION,
    BASE_MAX_SPEED,
    BOOST_DURATION_MS,
    BOOST_MAX_SPEED,
    CUE_BOOST,
    CUE_SCORE,
    POWERUP_SPEED_BOOST,
    SCORE_PER_OPPONENT,
)
from .entities import OpponentCar, PlayerCar, Powerup, Viewport, is_colliding
from .spawner import Spawner

logger = logging.getLogger(__name__)


@dataclass
class RunState:
    running: bool = False
    crashed: bool = False
    score: float = 0.0
    speed: float = 0.0
    max_speed: float = BASE_MAX_SPEED
    acceleration: float = ACCELERATION
    road_offset: float = 0.0
    speed_boost_active: bool = False
    speed_boost_end_ms: int = 0
    last_car_ms: int = 0
    last_powerup_ms: int = 0
    player: PlayerCar = field(default_factory=PlayerCar)
    opponents: List[OpponentCar] = field(default_factory=list)
    powerups: List[Powerup] = field(default_factory=list)

    @property
    def display_score(self) -> int:
        return math.floor(self.score)


def new_run() -> RunState:
    """A freshly started run: zero score and speed, empty road, timers cleared."""
    return RunState(running=True)


# ----------------------------- Power-up effects -----------------------------

def activate_speed_boost(state: RunState, now_ms: int, cues: CueSink):
    # A second pickup while boosted just pushes the expiry out.
    state.speed_boost_active = True
    state.max_speed = BOOST_MAX_SPEED
    state.speed_boost_end_ms = now_ms + BOOST_DURATION_MS
    cues.play(CUE_BOOST)
    logger.debug("speed boost until %d", state.speed_boost_end_ms)


POWERUP_EFFECTS: Dict[str, Callable[[RunState, int, CueSink], None]] = {
    POWERUP_SPEED_BOOST: activate_speed_boost,
}


# ----------------------------- Step -----------------------------

def ramp_speed(state: RunState):
    # Moves toward the cap by one acceleration step; after a boost ends the
    # speed bleeds off the same way instead of snapping down.
    if state.speed < state.max_speed:
        state.speed = min(state.speed + state.acceleration, state.max_speed)
    elif state.speed > state.max_speed:
        state.speed = max(state.speed - state.acceleration, state.max_speed)


def update_opponents(state: RunState, viewport: Viewport, cues: CueSink):
    kept = []
    for car in state.opponents:
        car.update()
        if car.y > viewport.height:
            state.score += SCORE_PER_OPPONENT
            cues.play(CUE_SCORE)
        else:
            kept.append(car)
    state.opponents = kept


def update_powerups(state: RunState, viewport: Viewport):
    for pu in state.powerups:
        pu.update()
    state.powerups = [pu for pu in state.powerups if pu.y <= viewport.height]


def resolve_collisions(state: RunState, now_ms: int, viewport: Viewport, cues: CueSink):
    player_box = state.player.box(viewport)

    for car in state.opponents:
        if is_colliding(player_box, car.box(viewport)):
            state.running = False
            state.crashed = True
            logger.debug("hit opponent in lane %d", car.lane)
            break

    kept = []
    for pu in state.powerups:
        if is_colliding(player_box, pu.box(viewport)):
            effect = POWERUP_EFFECTS.get(pu.kind)
            if effect is not None:
                effect(state, now_ms, cues)
            logger.debug("picked up %s", pu.kind)
        else:
            kept.append(pu)
    state.powerups = kept


def expire_boost(state: RunState, now_ms: int):
    if state.speed_boost_active and now_ms > state.speed_boost_end_ms:
        state.speed_boost_active = False
        state.max_speed = BASE_MAX_SPEED
        logger.debug("speed boost expired")


def step(state: RunState, now_ms: int, viewport: Viewport,
         spawner: Spawner, cues: CueSink) -> RunState:
    state.road_offset += state.speed
    if state.road_offset >= viewport.height:
        state.road_offset = 0

    ramp_speed(state)
    spawner.update(state, now_ms)
    update_opponents(state, viewport, cues)
    update_powerups(state, viewport)
    resolve_collisions(state, now_ms, viewport, cues)
    expire_boost(state, now_ms)
    return state
