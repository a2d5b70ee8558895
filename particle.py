# particle.py
"""
Manages the state of all squares on a card.

This module defines the ParticleGrid class, which lays out the fixed grid of
squares for one effect and stores their per-square state (position, opacity,
signed fade speed, color, distance from the surface center) in NumPy arrays.
"""
import logging
from dataclasses import dataclass
from typing import Iterator

import numpy as np

from effect_config import Color, EffectConfig

# --- Data Contracts ---
#
# class ParticleGrid:
#   - __init__(self, config: EffectConfig):
#     - Inputs:
#       - config: A validated EffectConfig.
#     - Outputs: None
#     - Side Effects: Initializes internal NumPy arrays for particle state.
#     - Invariants:
#       - particle_count == config.grid_cells ** 2, laid out row-major.
#       - self.positions is (N, 2) float64, never mutated after construction.
#       - self.opacities is (N,) float64, starts at 0.
#       - self.speeds is (N,) float64, drawn from [min, max + 1).
#       - self.color_indices is (N,) int32 indexing into config.colors.
#       - self.distances is (N,) float64, top-left corner to surface center.
#       - self.max_distance == max(self.distances), or 0 for an empty grid.


@dataclass(frozen=True)
class Particle:
    """A read-only snapshot of one square's state."""
    x: float
    y: float
    opacity: float
    speed: float
    color: Color
    distance_from_center: float


class ParticleGrid:
    """
    A container for all squares of one card, managing their state via NumPy arrays.
    """
    def __init__(self, config: EffectConfig):
        """
        Builds the grid layout and the initial particle state.

        Args:
            config (EffectConfig): Geometry, speed range and palette.
        """
        self.config = config
        self.side = config.surface_side
        self.particle_count = config.grid_cells * config.grid_cells

        # Rule 12: All randomness is controlled by a single master seed.
        self.rng = np.random.default_rng(config.seed)

        # Row-major cell origins, then centre each square inside its cell.
        pitch = config.cell_size + config.gap_size
        inset = (config.cell_size - config.square_size) / 2
        rows, cols = np.divmod(np.arange(self.particle_count), config.grid_cells)
        self.positions = np.empty((self.particle_count, 2), dtype=np.float64)
        self.positions[:, 0] = cols * pitch + inset
        self.positions[:, 1] = rows * pitch + inset

        # Distances are measured from the square's top-left corner, not its
        # visual centre; the wave shape depends on it.
        half = self.side / 2
        self.distances = np.sqrt(
            (self.positions[:, 0] - half) ** 2 + (self.positions[:, 1] - half) ** 2
        )
        self.max_distance = float(self.distances.max()) if self.particle_count else 0.0
        if self.max_distance > 0:
            self.normalized_distances = self.distances / self.max_distance
        else:
            self.normalized_distances = np.zeros(self.particle_count, dtype=np.float64)

        self.opacities = np.zeros(self.particle_count, dtype=np.float64)
        # The upper bound is max + 1, so speeds may exceed max_point_fade_speed.
        self.speeds = self.rng.uniform(
            low=config.min_point_fade_speed,
            high=config.max_point_fade_speed + 1,
            size=self.particle_count
        )
        self.color_indices = self.rng.integers(
            low=0,
            high=len(config.colors),
            size=self.particle_count,
            dtype=np.int32
        )

        logging.info(
            f"ParticleGrid initialized with {self.particle_count} squares "
            f"on a {self.side:g}x{self.side:g} surface."
        )
        if self.particle_count:
            logging.debug(
                f"Max distance from center: {self.max_distance:.2f}. "
                f"Speed range: [{self.speeds.min():.2f}, {self.speeds.max():.2f}]"
            )

    def __len__(self) -> int:
        return self.particle_count

    def particle(self, index: int) -> Particle:
        """Returns a snapshot of the square at `index` (row-major)."""
        return Particle(
            x=float(self.positions[index, 0]),
            y=float(self.positions[index, 1]),
            opacity=float(self.opacities[index]),
            speed=float(self.speeds[index]),
            color=self.config.colors[self.color_indices[index]],
            distance_from_center=float(self.distances[index]),
        )

    def __iter__(self) -> Iterator[Particle]:
        for i in range(self.particle_count):
            yield self.particle(i)
