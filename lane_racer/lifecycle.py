import logging
import random
from typing import Callable, Optional

from .audio import CueSink
from .config import CUE_CRASH, CUE_ENGINE
from .entities import Viewport
from .simulation import RunState, new_run, step
from .spawner import Spawner

logger = logging.getLogger(__name__)

PHASE_IDLE = "idle"
PHASE_RUNNING = "running"
PHASE_GAME_OVER = "game_over"

STEER_LEFT = -1
STEER_RIGHT = 1


class Session:
    """Start / game-over / restart state machine around one RunState.

    Knows nothing about pygame: the window layer turns events into
    `activate()` and `steer()` calls and calls `tick()` once per frame.
    """

    def __init__(self, cues: CueSink, clock: Callable[[], int],
                 rng: Optional[random.Random] = None):
        self.cues = cues
        self.clock = clock
        self.spawner = Spawner(rng or random.Random())
        self.state = RunState()
        self.phase = PHASE_IDLE
        self.final_score = 0
        self.best_score = 0

    @property
    def running(self) -> bool:
        return self.phase == PHASE_RUNNING

    @property
    def overlay_visible(self) -> bool:
        return self.phase != PHASE_RUNNING

    def start(self):
        self.state = new_run()
        # Traffic shows up on the first frame no matter how soon after launch.
        self.spawner.prime(self.state, self.clock())
        self.phase = PHASE_RUNNING
        self.cues.stop(CUE_ENGINE)
        self.cues.play(CUE_ENGINE)
        logger.info("run started")

    restart = start

    def activate(self):
        """The overlay button: start from the menu, restart after a crash."""
        if self.phase != PHASE_RUNNING:
            self.start()

    def steer(self, delta: int):
        if self.phase != PHASE_RUNNING:
            return
        self.state.player.steer(delta)

    def tick(self, viewport: Viewport) -> RunState:
        if self.phase == PHASE_RUNNING:
            step(self.state, self.clock(), viewport, self.spawner, self.cues)
            if self.state.crashed:
                self._game_over()
        return self.state

    def _game_over(self):
        self.phase = PHASE_GAME_OVER
        self.final_score = self.state.display_score
        self.best_score = max(self.best_score, self.final_score)
        self.cues.stop(CUE_ENGINE)
        self.cues.play(CUE_CRASH)
        logger.info("game over, score %d", self.final_score)
