# visualization.py
"""
Handles the visualization of the card effects using Pygame.
"""
import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

import pygame

from constants import (
    BACKGROUND_COLOR, CARD_BORDER_COLOR, CARD_BORDER_WIDTH, CARD_HEIGHT,
    CARD_LABEL_FONT_SIZE, CARD_MARGIN, CARD_TEXT_COLOR, CARD_WIDTH, FPS
)
from effect_config import Color, EffectConfig
from simulation import CardEffect

# --- Data Contracts ---
#
# class PygameSurfaceRenderer:
#   - __init__(self, surface: pygame.Surface, scale: float = 1.0):
#     - Inputs:
#       - surface: An SRCALPHA surface to draw on.
#       - scale: Factor applied to every coordinate and size, mapping the
#         effect's logical surface onto the card's pixel size.
#   - clear(width, height): fills the scaled area with full transparency.
#   - fill_rect(x, y, width, height, color, alpha): writes an RGBA square.
#
# class CardView:
#   - Pairs a CardEffect with its on-screen rect and hover presentation.
#   - update_hover(pos) -> bool: sends pointer enter/leave to the effect on
#     transitions; returns whether the pointer is inside the card.
#
# class Visualizer:
#   - __init__(self, effects: list of per-card option dicts, vis_params: dict)
#     - Side Effects: Initializes Pygame, creates the window and one CardView
#       per entry.
#   - draw(self) -> bool:
#     - Outputs: False if the user has quit, True otherwise.
#     - Side Effects: Dispatches pointer signals, ticks every card, renders.


class PygameSurfaceRenderer:
    """
    Draws squares onto a per-pixel-alpha pygame Surface.
    """
    def __init__(self, surface: pygame.Surface, scale: float = 1.0):
        self.surface = surface
        self.scale = scale

    def clear(self, width: float, height: float):
        rect = pygame.Rect(0, 0, round(width * self.scale), round(height * self.scale))
        self.surface.fill((0, 0, 0, 0), rect)

    def fill_rect(self, x: float, y: float, width: float, height: float,
                  color: Color, alpha: float):
        # Squares never overlap and the surface is cleared every frame, so
        # writing RGBA directly is equivalent to alpha blending over nothing.
        s = self.scale
        rect = pygame.Rect(round(x * s), round(y * s),
                           max(1, round(width * s)), max(1, round(height * s)))
        a = int(round(max(0.0, min(1.0, alpha)) * 255))
        self.surface.fill((color.r, color.g, color.b, a), rect)


class CardView:
    """
    A single card on screen: the effect, its rect, and its hover styling.
    """
    def __init__(self, effect: CardEffect, surface: pygame.Surface, rect: pygame.Rect,
                 label: str = "", text_color_hover: Optional[Sequence[int]] = None,
                 border_color_hover: Optional[Sequence[int]] = None):
        self.effect = effect
        self.surface = surface
        self.rect = rect
        self.label = label
        self.text_color_hover = tuple(text_color_hover or CARD_TEXT_COLOR)
        self.border_color_hover = tuple(border_color_hover or CARD_BORDER_COLOR)
        self.hovered = False

    def update_hover(self, pos: Tuple[int, int]) -> bool:
        """Sends enter/leave signals to the effect when the hover state changes."""
        inside = bool(self.rect.collidepoint(pos))
        if inside and not self.hovered:
            self.effect.on_pointer_enter()
        elif not inside and self.hovered:
            self.effect.on_pointer_leave()
        self.hovered = inside
        return inside

    def leave(self):
        if self.hovered:
            self.effect.on_pointer_leave()
            self.hovered = False

    @property
    def text_color(self) -> Tuple[int, ...]:
        return self.text_color_hover if self.hovered else CARD_TEXT_COLOR

    @property
    def border_color(self) -> Tuple[int, ...]:
        return self.border_color_hover if self.hovered else CARD_BORDER_COLOR


def build_card_view(options: Dict[str, Any], rect: pygame.Rect) -> CardView:
    """
    Creates the effect, its offscreen surface and renderer for one card.

    The effect's logical surface is scaled to fit the card's shorter side
    and centred inside the card.
    """
    config = EffectConfig.from_dict(options)
    side = config.surface_side
    target = min(rect.width, rect.height)
    scale = target / side if side > 0 else 1.0
    surface = pygame.Surface((target, target), pygame.SRCALPHA)
    effect = CardEffect(PygameSurfaceRenderer(surface, scale), config)
    logging.debug(f"Card surface {side:g}px scaled by {scale:.4f} to {target}px.")
    return CardView(
        effect, surface, rect,
        label=options.get('label', ''),
        text_color_hover=options.get('text_color_hover'),
        border_color_hover=options.get('border_color_hover'),
    )


class Visualizer:
    """
    Renders a row of cards and turns mouse motion into hover signals.
    """
    def __init__(self, effects: List[Dict[str, Any]], vis_params: Optional[dict] = None):
        """
        Initializes Pygame, the display window and every card.
        """
        vis_params = vis_params if vis_params is not None else {}
        self.card_width = vis_params.get('card_width', CARD_WIDTH)
        self.card_height = vis_params.get('card_height', CARD_HEIGHT)
        self.card_margin = vis_params.get('card_margin', CARD_MARGIN)
        self.background_color = tuple(vis_params.get('background_color', BACKGROUND_COLOR))

        pygame.init()
        pygame.font.init()

        count = max(1, len(effects))
        width = count * (self.card_width + self.card_margin) + self.card_margin
        height = self.card_height + 2 * self.card_margin
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("Power-On Cards")
        self.clock = pygame.time.Clock()

        try:
            self.font_label = pygame.font.SysFont("Segoe UI", CARD_LABEL_FONT_SIZE, bold=True)
        except pygame.error:
            logging.warning("Segoe UI font not found, falling back to default sans-serif.")
            self.font_label = pygame.font.SysFont(None, CARD_LABEL_FONT_SIZE, bold=True)

        self.cards: List[CardView] = []
        for index, options in enumerate(effects):
            x = self.card_margin + index * (self.card_width + self.card_margin)
            rect = pygame.Rect(x, self.card_margin, self.card_width, self.card_height)
            card = build_card_view(options, rect)
            # Initial static frame
            card.effect.draw_grid()
            self.cards.append(card)

        logging.info(
            f"Visualizer initialized with Pygame display ({width}x{height}), "
            f"{len(self.cards)} cards."
        )

    def _dispatch_pointer(self, pos: Optional[Tuple[int, int]]):
        for card in self.cards:
            if pos is None:
                card.leave()
            else:
                card.update_hover(pos)

    def _draw_card(self, card: CardView):
        # The effect surface fades in with the card intensity.
        card.surface.set_alpha(int(round(card.effect.intensity * 255)))
        surface_rect = card.surface.get_rect(center=card.rect.center)
        self.screen.blit(card.surface, surface_rect)

        pygame.draw.rect(self.screen, card.border_color, card.rect, CARD_BORDER_WIDTH)

        if card.label:
            text_surf = self.font_label.render(card.label, True, card.text_color)
            text_rect = text_surf.get_rect(center=card.rect.center)
            self.screen.blit(text_surf, text_rect)

    def draw(self) -> bool:
        """
        Advances every card by one frame and renders them, and handles events.

        Returns:
            bool: False if the loop should exit, True otherwise.
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                logging.info("Quit event received. Shutting down visualizer.")
                return False

            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                logging.info("ESC key pressed. Shutting down visualizer.")
                return False

            if event.type == pygame.MOUSEMOTION:
                self._dispatch_pointer(event.pos)
            elif event.type == pygame.WINDOWLEAVE:
                self._dispatch_pointer(None)

        self.screen.fill(self.background_color)
        for card in self.cards:
            card.effect.tick()
            self._draw_card(card)

        pygame.display.flip()
        self.clock.tick(FPS)
        return True

    def close(self):
        """Shuts down Pygame."""
        pygame.font.quit()
        pygame.quit()
