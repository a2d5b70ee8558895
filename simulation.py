# simulation.py
"""
Handles the per-frame fade-wave logic for a single card.

This module defines the CardEffect class, which owns a ParticleGrid and a
HoverEasing and advances the card by one frame on every tick: it eases the
wave front and intensity, gates each square's fade direction by the wave
front, integrates opacity, bounces it at 0 and 1, and draws every square
through a SurfaceRenderer.
"""
import logging
from typing import Protocol

import numpy as np
from numba import jit

from easing import HoverEasing
from effect_config import Color, EffectConfig
from particle import ParticleGrid

# --- Data Contracts ---
#
# class SurfaceRenderer(Protocol):
#   - clear(width, height) -> None: erases the full surface.
#   - fill_rect(x, y, width, height, color, alpha) -> None: draws one
#     axis-aligned square of `color` at opacity `alpha` in [0, 1].
#
# class CardEffect:
#   - __init__(self, renderer: SurfaceRenderer, config: EffectConfig):
#     - Inputs:
#       - renderer: The drawing surface collaborator.
#       - config: A validated EffectConfig.
#     - Side Effects: Builds the particle grid. Draws nothing.
#
#   - draw_grid(self) -> None:
#     - Side Effects: clear + one fill_rect per square. No state change.
#
#   - tick(self) -> None:
#     - Side Effects: Eases wave_front/intensity, mutates the grid arrays in
#       place, then clear + one fill_rect per square.
#     - Invariants: 0 <= opacity <= 1 for every square afterwards. Particle
#       count never changes.


@jit(nopython=True)
def _advance_particles_numba(opacities, speeds, normalized_distances, wave_front, point_fade_speed_factor):
    """
    Numba-jitted per-square update: wave gate, opacity integration, bounce.

    The sign of each speed is the square's state: positive while fading in,
    negative while fading out.
    """
    for i in range(opacities.shape[0]):
        # Wave gate: outside the lit radius a square may not fade in.
        if normalized_distances[i] > wave_front and speeds[i] > 0:
            speeds[i] = -abs(speeds[i])

        opacities[i] += speeds[i] * point_fade_speed_factor

        # Bounce at the opacity bounds
        if opacities[i] > 1.0:
            opacities[i] = 1.0
            speeds[i] = -speeds[i]
        elif opacities[i] < 0.0:
            opacities[i] = 0.0
            speeds[i] = -speeds[i]


class SurfaceRenderer(Protocol):
    """The drawing surface a CardEffect paints onto."""

    def clear(self, width: float, height: float) -> None:
        ...

    def fill_rect(self, x: float, y: float, width: float, height: float,
                  color: Color, alpha: float) -> None:
        ...


class CardEffect:
    """
    One animated card: a grid of squares lit by a hover-driven wave.
    """
    def __init__(self, renderer: SurfaceRenderer, config: EffectConfig):
        """
        Initializes the effect and lays out its grid.

        Args:
            renderer (SurfaceRenderer): Where squares are drawn.
            config (EffectConfig): Validated effect options.
        """
        self.renderer = renderer
        self.config = config
        self.grid = ParticleGrid(config)
        self.easing = HoverEasing(config.fade_speed_factor, config.card_speed_factor)
        self.frame_count = 0

        logging.info(
            f"CardEffect initialized: {config.grid_cells}x{config.grid_cells} grid, "
            f"{len(config.colors)} colors."
        )

    @property
    def width(self) -> float:
        return self.grid.side

    @property
    def height(self) -> float:
        return self.grid.side

    @property
    def hovering(self) -> bool:
        return self.easing.hovering

    @property
    def wave_front(self) -> float:
        return self.easing.wave_front

    @property
    def intensity(self) -> float:
        """Overall card opacity the caller should apply after each tick."""
        return self.easing.intensity

    @property
    def max_distance(self) -> float:
        return self.grid.max_distance

    def on_pointer_enter(self):
        self.easing.on_pointer_enter()

    def on_pointer_leave(self):
        self.easing.on_pointer_leave()

    def draw_grid(self):
        """
        Clears the surface and draws every square with its current state.
        """
        self.renderer.clear(self.width, self.height)
        size = self.config.square_size
        colors = self.config.colors
        positions = self.grid.positions
        opacities = self.grid.opacities
        color_indices = self.grid.color_indices
        for i in range(self.grid.particle_count):
            self.renderer.fill_rect(
                float(positions[i, 0]), float(positions[i, 1]), size, size,
                colors[color_indices[i]], float(opacities[i])
            )

    def tick(self):
        """
        Executes one frame: easing, particle update, redraw.
        """
        # 1. Ease the card-wide scalars toward the hover target
        self.easing.step()

        # 2. Gate, integrate and bounce every square (using Numba)
        _advance_particles_numba(
            self.grid.opacities, self.grid.speeds, self.grid.normalized_distances,
            self.easing.wave_front, self.config.point_fade_speed_factor
        )

        # 3. Redraw
        self.draw_grid()
        self.frame_count += 1

    def mean_opacity(self) -> float:
        """Average square opacity, for throttled diagnostics."""
        if self.grid.particle_count == 0:
            return 0.0
        return float(np.mean(self.grid.opacities))
