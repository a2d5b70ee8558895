"""Shared pytest configuration and fixtures."""

import os

# Pygame must never open a real window during tests.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from effect_config import EffectConfig


class RecordingRenderer:
    """SurfaceRenderer that records every call instead of drawing."""

    def __init__(self) -> None:
        self.calls = []

    def clear(self, width, height) -> None:
        self.calls.append(("clear", width, height))

    def fill_rect(self, x, y, width, height, color, alpha) -> None:
        self.calls.append(("fill_rect", x, y, width, height, color, alpha))

    def reset(self) -> None:
        self.calls = []

    @property
    def rects(self):
        return [call for call in self.calls if call[0] == "fill_rect"]


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def tiny_config() -> EffectConfig:
    """The 2x2 grid with 10px cells and no gap."""
    return EffectConfig.from_dict(
        {
            "grid_cells": 2,
            "cell_size": 10,
            "gap_size": 0,
            "square_size": 10,
            "min_point_fade_speed": 1,
            "max_point_fade_speed": 2,
            "seed": 7,
        }
    )


@pytest.fixture
def small_config() -> EffectConfig:
    """A 6x6 grid with gaps, fast easing and a fixed seed."""
    return EffectConfig.from_dict(
        {
            "grid_cells": 6,
            "cell_size": 30,
            "gap_size": 20,
            "square_size": 10,
            "min_point_fade_speed": 2,
            "max_point_fade_speed": 4,
            "fade_speed_factor": 0.25,
            "card_speed_factor": 0.5,
            "seed": 1234,
        }
    )
