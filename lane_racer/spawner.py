import logging
import random

from .config import (
    CAR_HEIGHT,
    CAR_SPAWN_RATE_MS,
    LANE_COUNT,
    OPPONENT_COLORS,
    OPPONENT_SPEED_MIN,
    OPPONENT_SPEED_SPREAD,
    POWERUP_SIZE,
    POWERUP_SPAWN_RATE_MS,
    POWERUP_TYPES,
)
from .entities import OpponentCar, Powerup

logger = logging.getLogger(__name__)


class Spawner:
    """Emits one opponent every `car_rate_ms` and one power-up every
    `powerup_rate_ms`.

    The spawn timers live on the run state (`last_car_ms`, `last_powerup_ms`)
    so a fresh state restarts them. `prime` backdates both so the first step
    of a run spawns one of each. Every random draw goes through `rng`.
    """

    def __init__(self, rng: random.Random,
                 car_rate_ms: int = CAR_SPAWN_RATE_MS,
                 powerup_rate_ms: int = POWERUP_SPAWN_RATE_MS):
        self.rng = rng
        self.car_rate_ms = car_rate_ms
        self.powerup_rate_ms = powerup_rate_ms

    def prime(self, state, now_ms: int):
        state.last_car_ms = now_ms - self.car_rate_ms - 1
        state.last_powerup_ms = now_ms - self.powerup_rate_ms - 1

    def update(self, state, now_ms: int):
        if now_ms - state.last_car_ms > self.car_rate_ms:
            state.opponents.append(self.spawn_car())
            state.last_car_ms = now_ms

        if now_ms - state.last_powerup_ms > self.powerup_rate_ms:
            state.powerups.append(self.spawn_powerup())
            state.last_powerup_ms = now_ms

    def spawn_car(self) -> OpponentCar:
        lane = self.rng.randrange(LANE_COUNT)
        color = self.rng.choice(OPPONENT_COLORS)
        speed = OPPONENT_SPEED_MIN + self.rng.random() * OPPONENT_SPEED_SPREAD
        logger.debug("spawned opponent lane=%d speed=%.2f", lane, speed)
        return OpponentCar(lane=lane, y=-CAR_HEIGHT, speed=speed, color=color)

    def spawn_powerup(self) -> Powerup:
        lane = self.rng.randrange(LANE_COUNT)
        kind = self.rng.choice(POWERUP_TYPES)
        logger.debug("spawned %s lane=%d", kind, lane)
        return Powerup(lane=lane, y=-POWERUP_SIZE, kind=kind)
