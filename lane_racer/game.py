"""
Lane Racer: dodge traffic on a three-lane road.

Controls:
- Left / Right arrows: change lane
- Enter / Space or click the button: start, play again
- Esc: quit

Requires: pygame 2.x  (pip install pygame)

Run:
    lane-racer
    python -m lane_racer --mute --seed 42
"""

import argparse
import logging
import random
import sys
from typing import Optional

import pygame

from .audio import SAMPLE_RATE, CueSink, MixerCues, SilentCues
from .config import Settings
from .entities import Viewport
from .lifecycle import STEER_LEFT, STEER_RIGHT, Session
from .render import Renderer, button_rect

logger = logging.getLogger(__name__)


def now_ms() -> int:
    return pygame.time.get_ticks()


# ----------------------------- Game -----------------------------

class Game:
    def __init__(self, settings: Optional[Settings] = None, cues: Optional[CueSink] = None):
        self.settings = settings or Settings()

        pygame.mixer.pre_init(SAMPLE_RATE, -16, 1, 512)
        pygame.init()
        pygame.display.set_caption("Lane Racer")
        self.screen = pygame.display.set_mode((self.settings.width, self.settings.height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.viewport = Viewport(*self.screen.get_size())

        if cues is None:
            cues = SilentCues() if self.settings.mute else MixerCues.create()
        rng = random.Random(self.settings.seed)
        self.session = Session(cues, now_ms, rng)
        self.renderer = Renderer()

    def run(self):
        while True:
            self.clock.tick(self.settings.fps)

            for event in pygame.event.get():
                self.handle_event(event)

            self.session.tick(self.viewport)
            self.renderer.draw(self.screen, self.session)
            pygame.display.flip()

    def handle_event(self, event: pygame.event.Event):
        if event.type == pygame.QUIT:
            self._quit()

        elif event.type == pygame.VIDEORESIZE:
            self._resize()

        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self._quit()
            elif event.key == pygame.K_LEFT:
                self.session.steer(STEER_LEFT)
            elif event.key == pygame.K_RIGHT:
                self.session.steer(STEER_RIGHT)
            elif event.key in (pygame.K_RETURN, pygame.K_SPACE):
                self.session.activate()

        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.session.overlay_visible and button_rect(self.viewport).collidepoint(event.pos):
                self.session.activate()

    def _resize(self):
        # pygame 2 resizes the display surface itself; just re-read it.
        self.screen = pygame.display.get_surface()
        self.viewport = Viewport(*self.screen.get_size())
        logger.debug("viewport now %dx%d", self.viewport.width, self.viewport.height)

    def _quit(self):
        pygame.quit()
        sys.exit(0)


# ----------------------------- Entry point -----------------------------

def positive_int(value: str) -> int:
    n = int(value)
    if n <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return n


def parse_args(argv=None) -> argparse.Namespace:
    defaults = Settings()
    parser = argparse.ArgumentParser(prog="lane-racer", description="Lane Racer")
    parser.add_argument("--width", type=positive_int, default=defaults.width, help="initial window width")
    parser.add_argument("--height", type=positive_int, default=defaults.height, help="initial window height")
    parser.add_argument("--fps", type=positive_int, default=defaults.fps, help="frame rate cap")
    parser.add_argument("--seed", type=int, default=None, help="seed for traffic and power-up spawns")
    parser.add_argument("--mute", action="store_true", help="disable sound")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="logging verbosity")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    settings = Settings(width=args.width, height=args.height, fps=args.fps, seed=args.seed, mute=args.mute)
    Game(settings).run()


if __name__ == "__main__":
    main()
