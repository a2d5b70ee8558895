# effect_config.py
"""
Immutable configuration for a single card effect.

This module defines the EffectConfig dataclass, which carries the grid
geometry, fade speeds and color palette consumed when a CardEffect is
constructed. The configuration is validated once, on creation; an invalid
configuration never produces an effect.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, NamedTuple, Optional, Sequence, Tuple

from constants import DEFAULT_EFFECT_OPTIONS, PRESENTATION_KEYS

# --- Data Contracts ---
#
# class Color(NamedTuple):
#   - r, g, b: int in [0, 255].
#   - Immutable; shared between particles that pick the same palette entry.
#
# class EffectConfig:
#   - Inputs: grid geometry (cell_size, gap_size, grid_cells, square_size),
#     fade speeds (min/max_point_fade_speed, point_fade_speed_factor,
#     card_speed_factor, fade_speed_factor), colors and an optional seed.
#   - Invariants:
#     - max_point_fade_speed >= min_point_fade_speed.
#     - point_fade_speed_factor > 0.
#     - colors is a non-empty tuple of Color.
#   - Raises: ValueError when any invariant is violated.


class Color(NamedTuple):
    """An RGB triple with integer channels in [0, 255]."""
    r: int
    g: int
    b: int

    @classmethod
    def from_sequence(cls, rgb: Sequence[int]) -> "Color":
        """Builds a Color from a 3-item list or tuple, as found in config.json."""
        if len(rgb) != 3:
            raise ValueError(f"A color needs exactly 3 channels, got {list(rgb)}.")
        channels = [int(c) for c in rgb]
        for channel in channels:
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel {channel} is outside [0, 255].")
        return cls(*channels)


@dataclass(frozen=True)
class EffectConfig:
    """
    Validated, immutable options for one card effect.
    """
    cell_size: float
    gap_size: float
    grid_cells: int
    square_size: float
    min_point_fade_speed: float
    max_point_fade_speed: float
    point_fade_speed_factor: float
    card_speed_factor: float
    fade_speed_factor: float
    colors: Tuple[Color, ...] = field(default_factory=tuple)
    seed: Optional[int] = None

    def __post_init__(self):
        # Normalize whatever sequence was passed into a tuple of Colors.
        colors = tuple(
            c if isinstance(c, Color) else Color.from_sequence(c)
            for c in self.colors
        )
        object.__setattr__(self, 'colors', colors)

        # Rule 7: Enforce data contracts. Validate config on initialization.
        if self.max_point_fade_speed < self.min_point_fade_speed:
            msg = (
                f"Configuration error: max_point_fade_speed ({self.max_point_fade_speed}) "
                f"must be greater than or equal to min_point_fade_speed "
                f"({self.min_point_fade_speed})."
            )
            logging.critical(msg)
            raise ValueError(msg)

        if self.point_fade_speed_factor <= 0:
            msg = (
                f"Configuration error: point_fade_speed_factor "
                f"({self.point_fade_speed_factor}) must be greater than 0."
            )
            logging.critical(msg)
            raise ValueError(msg)

        if not self.colors:
            msg = "Configuration error: at least one color is required."
            logging.critical(msg)
            raise ValueError(msg)

    @property
    def surface_side(self) -> float:
        """Width and height of the (square) drawing surface in pixels."""
        return self.grid_cells * (self.cell_size + self.gap_size) - self.gap_size

    @classmethod
    def from_dict(cls, params: Dict[str, Any]) -> "EffectConfig":
        """
        Builds a config from a dictionary of overrides.

        The overrides are merged on top of DEFAULT_EFFECT_OPTIONS. Presentation
        keys (label, hover colors) are ignored here; the visualizer reads them.
        Unknown keys are logged and skipped.

        Args:
            params (Dict[str, Any]): Per-card options, typically one entry of
                the "effects" list in config.json.

        Returns:
            EffectConfig: The validated configuration.
        """
        merged = dict(DEFAULT_EFFECT_OPTIONS)
        for key, value in params.items():
            if key in PRESENTATION_KEYS:
                continue
            if key not in DEFAULT_EFFECT_OPTIONS:
                logging.warning(f"Ignoring unknown effect option '{key}'.")
                continue
            merged[key] = value
        return cls(**merged)
