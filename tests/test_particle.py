"""Unit tests for the grid layout and particle state."""

import math

import numpy as np
import pytest

from effect_config import EffectConfig
from particle import Particle, ParticleGrid


class TestGridLayout:
    """Positions and distances of the generated squares."""

    def test_particle_count(self, small_config) -> None:
        """Test that exactly grid_cells squared particles are created."""
        grid = ParticleGrid(small_config)

        assert len(grid) == 36
        assert grid.positions.shape == (36, 2)
        assert grid.opacities.shape == grid.speeds.shape == (36,)

    def test_two_by_two_positions(self, tiny_config) -> None:
        """Test row-major positions of the 2x2 grid."""
        grid = ParticleGrid(tiny_config)

        assert grid.side == 20
        expected = [(0, 0), (10, 0), (0, 10), (10, 10)]
        assert [tuple(p) for p in grid.positions] == expected

    def test_two_by_two_distances(self, tiny_config) -> None:
        """Test distances are measured from each top-left corner to (10, 10)."""
        grid = ParticleGrid(tiny_config)

        assert grid.distances[0] == pytest.approx(math.sqrt(200))
        assert grid.distances[1] == pytest.approx(10)
        assert grid.distances[2] == pytest.approx(10)
        assert grid.distances[3] == 0
        assert grid.max_distance == pytest.approx(math.sqrt(200))

    def test_normalized_distances(self, tiny_config) -> None:
        """Test that distances are normalized by the farthest square."""
        grid = ParticleGrid(tiny_config)

        assert grid.normalized_distances[0] == pytest.approx(1.0)
        assert grid.normalized_distances[1] == pytest.approx(10 / math.sqrt(200))
        assert grid.normalized_distances[3] == 0

    def test_squares_are_centred_in_cells(self, small_config) -> None:
        """Test the (cell_size - square_size) / 2 inset and the cell pitch."""
        grid = ParticleGrid(small_config)

        # cell 30, gap 20, square 10: pitch 50, inset 10
        assert tuple(grid.positions[0]) == (10, 10)
        assert tuple(grid.positions[1]) == (60, 10)
        assert tuple(grid.positions[6]) == (10, 60)

    def test_single_point_grid_has_zero_max_distance(self) -> None:
        """Test the degenerate grid where every distance is zero."""
        config = EffectConfig.from_dict({"grid_cells": 1, "cell_size": 10, "square_size": 0})
        grid = ParticleGrid(config)

        assert grid.max_distance == 0
        assert list(grid.normalized_distances) == [0.0]

    def test_empty_grid(self) -> None:
        """Test that a zero-cell grid builds with no particles."""
        grid = ParticleGrid(EffectConfig.from_dict({"grid_cells": 0}))

        assert len(grid) == 0
        assert grid.max_distance == 0


class TestInitialState:
    """Initial opacity, speed and color of each square."""

    def test_opacity_starts_at_zero(self, small_config) -> None:
        """Test that every square starts fully transparent."""
        grid = ParticleGrid(small_config)

        assert np.all(grid.opacities == 0)

    def test_speed_range_is_widened_by_one(self) -> None:
        """Test the [min, max + 1) speed range.

        Known deviation from a [min, max] range: speeds above the configured
        maximum are expected.
        """
        config = EffectConfig.from_dict(
            {"grid_cells": 40, "min_point_fade_speed": 1, "max_point_fade_speed": 2, "seed": 3}
        )
        grid = ParticleGrid(config)

        assert grid.speeds.min() >= 1
        assert grid.speeds.max() < 3
        assert grid.speeds.max() > 2

    def test_colors_come_from_palette(self, small_config) -> None:
        """Test that every square uses one of the configured colors."""
        grid = ParticleGrid(small_config)

        assert all(p.color in small_config.colors for p in grid)

    def test_seed_makes_layout_reproducible(self, small_config) -> None:
        """Test that the same seed yields the same speeds and colors."""
        first = ParticleGrid(small_config)
        second = ParticleGrid(small_config)

        np.testing.assert_array_equal(first.speeds, second.speeds)
        np.testing.assert_array_equal(first.color_indices, second.color_indices)


class TestParticleSnapshot:
    """Record view of a single square."""

    def test_snapshot_fields(self, tiny_config) -> None:
        """Test that a snapshot mirrors the array state."""
        grid = ParticleGrid(tiny_config)
        grid.opacities[3] = 0.25

        particle = grid.particle(3)

        assert isinstance(particle, Particle)
        assert (particle.x, particle.y) == (10, 10)
        assert particle.opacity == 0.25
        assert particle.speed == grid.speeds[3]
        assert particle.distance_from_center == 0
        assert particle.color == tiny_config.colors[grid.color_indices[3]]

    def test_iteration_is_row_major(self, tiny_config) -> None:
        """Test that iterating yields squares in row-major order."""
        grid = ParticleGrid(tiny_config)

        assert [(p.x, p.y) for p in grid] == [(0, 0), (10, 0), (0, 10), (10, 10)]
