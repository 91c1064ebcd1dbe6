"""
Audio cues.

The simulation only ever says "play this cue" or "stop that cue"; whether a
sound actually comes out is the sink's business. Playback is fire-and-forget:
a failing backend is logged and otherwise ignored.
"""

import logging
import math
import random
from array import array
from typing import Dict, List, Tuple

import pygame

from .config import CUE_BOOST, CUE_CRASH, CUE_ENGINE, CUE_SCORE, CUE_VOLUMES

logger = logging.getLogger(__name__)

SAMPLE_RATE = 22050


class CueSink:
    """Named, fire-and-forget sounds."""

    def play(self, cue: str):
        raise NotImplementedError

    def stop(self, cue: str):
        raise NotImplementedError


class SilentCues(CueSink):
    """Plays nothing; keeps a log of calls so tests can inspect them."""

    def __init__(self):
        self.calls: List[Tuple[str, str]] = []

    def play(self, cue: str):
        self.calls.append(("play", cue))

    def stop(self, cue: str):
        self.calls.append(("stop", cue))

    def played(self, cue: str) -> int:
        return self.calls.count(("play", cue))


# ----------------------------- Synthesis -----------------------------

def _samples(duration_ms: int, wave) -> List[float]:
    n = int(SAMPLE_RATE * duration_ms / 1000.0)
    return [wave(i / SAMPLE_RATE, i / n) for i in range(n)]


def engine_wave(t: float, p: float) -> float:
    base = 0.6 * math.sin(2 * math.pi * 78.0 * t)
    wob = 0.12 * math.sin(2 * math.pi * 157.0 * t + 0.7 * math.sin(2 * math.pi * 1.5 * t))
    return base + wob


def crash_wave(t: float, p: float) -> float:
    env = math.exp(-5.0 * p)
    thump = 0.6 * math.sin(2 * math.pi * 120 * t) * math.exp(-8.0 * p)
    noise = (random.random() * 2 - 1) * 0.6 * env
    return noise + thump


def boost_wave(t: float, p: float) -> float:
    # Rising sweep
    freq = 300 + 900 * p
    return 0.5 * math.sin(2 * math.pi * freq * t) * (1.0 - p)


def score_wave(t: float, p: float) -> float:
    freq = 880 if p < 0.5 else 1320
    return 0.4 * math.sin(2 * math.pi * freq * t) * (1.0 - p)


CUE_WAVES = {
    CUE_ENGINE: (800, engine_wave),
    CUE_CRASH: (700, crash_wave),
    CUE_BOOST: (400, boost_wave),
    CUE_SCORE: (150, score_wave),
}


def to_pcm(samples: List[float], channels: int) -> bytes:
    arr = array("h")
    for s in samples:
        v = int(32767 * max(-1.0, min(1.0, s)))
        for _ in range(channels):
            arr.append(v)
    return arr.tobytes()


class MixerCues(CueSink):
    """Cues synthesized in memory and played through pygame.mixer."""

    def __init__(self, sounds: Dict[str, "pygame.mixer.Sound"]):
        self.sounds = sounds

    @classmethod
    def create(cls) -> CueSink:
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
            _, _, channels = pygame.mixer.get_init()
            sounds = {}
            for cue, (duration_ms, wave) in CUE_WAVES.items():
                sound = pygame.mixer.Sound(buffer=to_pcm(_samples(duration_ms, wave), channels))
                sound.set_volume(CUE_VOLUMES[cue])
                sounds[cue] = sound
        except (pygame.error, TypeError) as e:
            logger.warning("audio unavailable, running silent: %s", e)
            return SilentCues()
        return cls(sounds)

    def play(self, cue: str):
        sound = self.sounds.get(cue)
        if sound is None:
            return
        try:
            sound.play(loops=-1 if cue == CUE_ENGINE else 0)
        except pygame.error as e:
            logger.debug("could not play %s: %s", cue, e)

    def stop(self, cue: str):
        sound = self.sounds.get(cue)
        if sound is None:
            return
        try:
            sound.stop()
        except pygame.error as e:
            logger.debug("could not stop %s: %s", cue, e)
