from typing import List, Tuple

import pygame

from .config import (
    COL_BG,
    COL_BOOST,
    COL_BUTTON,
    COL_HEADLIGHT,
    COL_LANE_LINE,
    COL_POWERUP,
    COL_POWERUP_ICON,
    COL_ROAD,
    COL_TAILLIGHT,
    COL_TEXT,
    COL_UI_BG,
    COL_WINDOW,
    DASH_GAP,
    DASH_LENGTH,
    LANE_COUNT,
    LANE_LINE_WIDTH,
    LANE_WIDTH,
    POWERUP_SPEED_BOOST,
    ROAD_WIDTH,
)
from .entities import Box, Viewport
from .lifecycle import PHASE_GAME_OVER, Session
from .simulation import RunState

CARD_W, CARD_H = 450, 300
BUTTON_W, BUTTON_H = 220, 56


# ----------------------------- Helpers -----------------------------

def to_rect(box: Box) -> pygame.Rect:
    x, y, w, h = box
    return pygame.Rect(round(x), round(y), w, h)


def dash_segments(offset: float, height: int) -> List[Tuple[float, float]]:
    """Visible (top, bottom) spans of a dashed divider scrolled down by `offset`."""
    period = DASH_LENGTH + DASH_GAP
    segments = []
    y = offset % period - period
    while y < height:
        top, bottom = max(y, 0), min(y + DASH_LENGTH, height)
        if bottom > top:
            segments.append((top, bottom))
        y += period
    return segments


def card_origin(viewport: Viewport) -> Tuple[int, int]:
    return (viewport.width - CARD_W) // 2, (viewport.height - CARD_H) // 2


def button_rect(viewport: Viewport) -> pygame.Rect:
    """Screen rect of the overlay's START / PLAY AGAIN button."""
    x, y = card_origin(viewport)
    return pygame.Rect(x + (CARD_W - BUTTON_W) // 2, y + CARD_H - BUTTON_H - 30, BUTTON_W, BUTTON_H)


# ----------------------------- Renderer -----------------------------

class Renderer:
    """Draws a frame from the session. Never touches simulation state."""

    def __init__(self):
        self.font = pygame.font.SysFont("arial", 24)
        self.font_small = pygame.font.SysFont("arial", 18)
        self.font_boost = pygame.font.SysFont("arial", 20)
        self.font_big = pygame.font.SysFont("arial", 48, bold=True)
        self.font_title = pygame.font.SysFont("arial", 56, bold=True)

    def draw(self, surf: pygame.Surface, session: Session):
        viewport = Viewport(*surf.get_size())
        state = session.state

        surf.fill(COL_BG)
        self.draw_road(surf, viewport, state.road_offset)

        for car in state.opponents:
            self.draw_vehicle(surf, car.box(viewport), car.color, taillights=False)

        player_box = state.player.box(viewport)
        self.draw_vehicle(surf, player_box, state.player.color)
        if state.speed_boost_active:
            pygame.draw.rect(surf, COL_BOOST, to_rect(player_box).inflate(4, 4), width=3, border_radius=12)

        for pu in state.powerups:
            self.draw_powerup(surf, pu.box(viewport), pu.kind)

        self.draw_hud(surf, viewport, state)

        if session.overlay_visible:
            self.draw_overlay(surf, viewport, session)

    def draw_road(self, surf: pygame.Surface, viewport: Viewport, road_offset: float):
        left = viewport.road_left()
        pygame.draw.rect(surf, COL_ROAD, (round(left), 0, ROAD_WIDTH, viewport.height))

        # Dividers between lanes only, not on the road edges
        segments = dash_segments(road_offset, viewport.height)
        for i in range(1, LANE_COUNT):
            x = round(left + LANE_WIDTH * i)
            for top, bottom in segments:
                pygame.draw.line(surf, COL_LANE_LINE, (x, round(top)), (x, round(bottom)), LANE_LINE_WIDTH)

    def draw_vehicle(self, surf: pygame.Surface, box: Box, color, taillights: bool = True):
        r = to_rect(box)

        # Body
        pygame.draw.rect(surf, color, r, border_radius=10)

        # Window band
        pygame.draw.rect(surf, COL_WINDOW, (r.x + 5, r.y + 10, r.w - 10, 20), border_radius=5)

        # Headlights
        pygame.draw.rect(surf, COL_HEADLIGHT, (r.x + 5, r.y + 5, 10, 5))
        pygame.draw.rect(surf, COL_HEADLIGHT, (r.right - 15, r.y + 5, 10, 5))

        if taillights:
            pygame.draw.rect(surf, COL_TAILLIGHT, (r.x + 5, r.bottom - 10, 10, 5))
            pygame.draw.rect(surf, COL_TAILLIGHT, (r.right - 15, r.bottom - 10, 10, 5))

    def draw_powerup(self, surf: pygame.Surface, box: Box, kind: str):
        if kind != POWERUP_SPEED_BOOST:
            return
        r = to_rect(box)
        cx, cy = r.center
        pygame.draw.circle(surf, COL_POWERUP, (cx, cy), r.w // 2)

        # Lightning bolt
        bolt = [(2, -10), (-6, 2), (0, 2), (-2, 10), (6, -2), (0, -2)]
        pygame.draw.polygon(surf, COL_POWERUP_ICON, [(cx + dx, cy + dy) for dx, dy in bolt])

    def draw_hud(self, surf: pygame.Surface, viewport: Viewport, state: RunState):
        score_txt = self.font.render(f"Score: {state.display_score}", True, COL_TEXT)
        surf.blit(score_txt, (20, 20))

        if state.speed_boost_active:
            boost_txt = self.font_boost.render("SPEED BOOST!", True, COL_BOOST)
            surf.blit(boost_txt, (viewport.width - 20 - boost_txt.get_width(), 22))

    def draw_overlay(self, surf: pygame.Surface, viewport: Viewport, session: Session):
        card = pygame.Surface((CARD_W, CARD_H), pygame.SRCALPHA)
        pygame.draw.rect(card, COL_UI_BG, card.get_rect(), border_radius=25)
        pygame.draw.rect(card, (100, 200, 255, 60), card.get_rect(), width=4, border_radius=25)

        if session.phase == PHASE_GAME_OVER:
            title = self.font_title.render("GAME OVER", True, (255, 100, 100))
            lines = [
                self.font_big.render(f"Score: {session.final_score}", True, (255, 230, 80)),
                self.font_small.render(f"Best: {session.best_score}", True, (180, 220, 255)),
            ]
            label = "PLAY AGAIN"
        else:
            title = self.font_title.render("LANE RACER", True, COL_TEXT)
            lines = [
                self.font_small.render("Left / Right arrows change lanes", True, (200, 200, 200)),
                self.font_small.render("Dodge traffic, grab the bolts", True, (200, 200, 200)),
            ]
            label = "START"

        card.blit(title, ((CARD_W - title.get_width()) // 2, 25))
        y = 100
        for line in lines:
            card.blit(line, ((CARD_W - line.get_width()) // 2, y))
            y += line.get_height() + 8

        x0, y0 = card_origin(viewport)
        surf.blit(card, (x0, y0))

        button = button_rect(viewport)
        pygame.draw.rect(surf, COL_BUTTON, button, border_radius=8)
        text = self.font.render(label, True, COL_TEXT)
        surf.blit(text, text.get_rect(center=button.center))
