"""
Tests for lane_racer.render. Draws onto an off-screen surface under the
dummy SDL video driver.
"""

import copy
import os
import random
import unittest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402

from lane_racer.audio import SilentCues  # noqa: E402
from lane_racer.config import (  # noqa: E402
    COL_BG,
    COL_BOOST,
    COL_BUTTON,
    COL_LANE_LINE,
    COL_PLAYER,
    COL_ROAD,
)
from lane_racer.entities import OpponentCar, Viewport  # noqa: E402
from lane_racer.lifecycle import Session  # noqa: E402
from lane_racer.render import Renderer, button_rect, dash_segments, to_rect  # noqa: E402


def rgb(surf, pos):
    return tuple(surf.get_at(pos))[:3]


# =============================================================================
# 1. PURE HELPERS
# =============================================================================

class TestDashSegments(unittest.TestCase):

    def test_unscrolled_pattern(self):
        self.assertEqual(dash_segments(0, 200), [(0, 50), (80, 130), (160, 200)])

    def test_pattern_follows_offset(self):
        self.assertEqual(dash_segments(10, 200), [(10, 60), (90, 140), (170, 200)])

    def test_partial_dash_at_top(self):
        self.assertEqual(dash_segments(60, 200), [(0, 30), (60, 110), (140, 190)])

    def test_pattern_repeats_every_period(self):
        self.assertEqual(dash_segments(5, 720), dash_segments(85, 720))

    def test_button_is_inside_window(self):
        vp = Viewport(800, 720)
        r = button_rect(vp)
        self.assertTrue(pygame.Rect(0, 0, vp.width, vp.height).contains(r))
        self.assertEqual(r.centerx, 400)

    def test_to_rect_rounds(self):
        self.assertEqual(to_rect((374.6, 10.2, 50, 80)), pygame.Rect(375, 10, 50, 80))


# =============================================================================
# 2. FRAMES
# =============================================================================

class TestRenderer(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        pygame.init()
        cls.renderer = Renderer()

    @classmethod
    def tearDownClass(cls):
        pygame.quit()

    def setUp(self):
        self.surf = pygame.Surface((800, 720))
        self.session = Session(SilentCues(), lambda: 0, random.Random(1))

    def test_running_frame_layout(self):
        self.session.start()
        self.renderer.draw(self.surf, self.session)
        self.assertEqual(rgb(self.surf, (50, 300)), COL_BG)
        self.assertEqual(rgb(self.surf, (250, 300)), COL_ROAD)
        self.assertEqual(rgb(self.surf, (400, 660)), COL_PLAYER)

    def test_lane_divider_dashes(self):
        self.session.start()
        self.renderer.draw(self.surf, self.session)
        self.assertEqual(rgb(self.surf, (333, 25)), COL_LANE_LINE)
        self.assertEqual(rgb(self.surf, (333, 65)), COL_ROAD)

    def test_opponent_is_drawn_in_its_lane(self):
        self.session.start()
        self.session.state.opponents.append(OpponentCar(lane=0, y=200, speed=2, color=(0, 255, 0)))
        self.renderer.draw(self.surf, self.session)
        self.assertEqual(rgb(self.surf, (266, 260)), (0, 255, 0))

    def test_boost_outline(self):
        self.session.start()
        self.session.state.speed_boost_active = True
        self.renderer.draw(self.surf, self.session)
        self.assertEqual(rgb(self.surf, (373, 660)), COL_BOOST)

    def test_no_boost_outline_normally(self):
        self.session.start()
        self.renderer.draw(self.surf, self.session)
        self.assertNotEqual(rgb(self.surf, (373, 660)), COL_BOOST)

    def test_overlay_button_when_idle(self):
        self.renderer.draw(self.surf, self.session)
        r = button_rect(Viewport(800, 720))
        self.assertEqual(rgb(self.surf, (r.x + 10, r.centery)), COL_BUTTON)

    def test_draw_does_not_touch_state(self):
        self.session.start()
        self.session.state.opponents.append(OpponentCar(lane=2, y=50, speed=3, color=(0, 0, 255)))
        before = copy.deepcopy(self.session.state)
        self.renderer.draw(self.surf, self.session)
        self.assertEqual(self.session.state, before)

    def test_resized_surface(self):
        self.session.start()
        small = pygame.Surface((500, 400))
        self.renderer.draw(small, self.session)
        # Road is re-centred: 500 / 2 - 200 = 50
        self.assertEqual(rgb(small, (60, 200)), COL_ROAD)
        self.assertEqual(rgb(small, (250, 340)), COL_PLAYER)


# =============================================================================
# RUN
# =============================================================================

if __name__ == "__main__":
    unittest.main()
