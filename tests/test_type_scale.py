"""
Tests for the fluid type scale generator.
"""

import math

import pytest
from pydantic import ValidationError

from fluidscale.calculator.type_scale import (
    calculate_type_size,
    calculate_type_step,
    generate_type_scale,
)
from fluidscale.enums import RelativeTo
from fluidscale.io import TypeScaleConfig, TypeStep


class TestCalculateTypeSize:
    """Tests for calculate_type_size."""

    def test_base_step_is_font_size(self, type_config):
        assert calculate_type_size(type_config, 320, 0) == pytest.approx(18)
        assert calculate_type_size(type_config, 1240, 0) == pytest.approx(20)

    def test_positive_step_multiplies_by_scale(self, type_config):
        assert calculate_type_size(type_config, 320, 1) == pytest.approx(21.6)
        assert calculate_type_size(type_config, 1240, 2) == pytest.approx(31.25)

    def test_negative_step_divides_by_scale(self, type_config):
        assert calculate_type_size(type_config, 320, -1) == pytest.approx(15)
        assert calculate_type_size(type_config, 1240, -1) == pytest.approx(16)

    def test_midpoint_interpolates_size_and_scale(self, type_config):
        """At the middle of the range both base size and ratio are halfway."""
        assert calculate_type_size(type_config, 780, 1) == pytest.approx(19 * 1.225)


class TestCalculateTypeStep:
    """Tests for calculate_type_step."""

    def test_base_step(self, type_config):
        step = calculate_type_step(type_config, 0)

        assert isinstance(step, TypeStep)
        assert step.step == 0
        assert step.min_font_size == 18
        assert step.max_font_size == 20
        assert step.wcag_violation is None
        assert step.clamp == "clamp(1.125rem, 1.0815rem + 0.2174vi, 1.25rem)"

    def test_sizes_are_rounded(self, type_config):
        step = calculate_type_step(type_config, 3)
        assert step.min_font_size == pytest.approx(31.104)
        assert step.max_font_size == 39.0625

    def test_wcag_violation_reported(self, steep_type_config):
        assert calculate_type_step(steep_type_config, 0).wcag_violation == 1600


class TestGenerateTypeScale:
    """Tests for generate_type_scale."""

    def test_symmetric_steps(self, type_config):
        config = type_config.model_copy(update={"positive_steps": 2, "negative_steps": 2})
        steps = generate_type_scale(config)

        assert [s.step for s in steps] == [2, 1, 0, -1, -2]

    def test_full_scale_order(self, type_config):
        steps = generate_type_scale(type_config)
        assert [s.step for s in steps] == [5, 4, 3, 2, 1, 0, -1, -2]

    def test_default_is_base_step_only(self):
        config = TypeScaleConfig(
            min_width=320, max_width=1240,
            min_font_size=18, max_font_size=20,
            min_type_scale=1.2, max_type_scale=1.25,
        )
        steps = generate_type_scale(config)

        assert len(steps) == 1
        assert steps[0].step == 0

    def test_sizes_decrease_down_the_scale(self, type_config):
        steps = generate_type_scale(type_config)
        min_sizes = [s.min_font_size for s in steps]
        max_sizes = [s.max_font_size for s in steps]

        assert min_sizes == sorted(min_sizes, reverse=True)
        assert max_sizes == sorted(max_sizes, reverse=True)

    def test_relative_to_container(self, type_config):
        config = type_config.model_copy(update={"relative_to": RelativeTo.CONTAINER})
        assert all("cqi" in s.clamp for s in generate_type_scale(config))

    def test_large_steps_fail_wcag(self):
        """A heading that grows much faster than body text fails the zoom check."""
        config = TypeScaleConfig(
            min_width=320, max_width=1240,
            min_font_size=16, max_font_size=20,
            min_type_scale=1.1, max_type_scale=1.5,
            positive_steps=6,
        )
        steps = generate_type_scale(config)

        assert steps[0].step == 6
        assert steps[0].wcag_violation is not None
        assert steps[-1].wcag_violation is None

    def test_overflowing_steps(self):
        """Steps past the float range render as Infinity rather than raising."""
        config = TypeScaleConfig(
            min_width=320, max_width=1240,
            min_font_size=18, max_font_size=20,
            min_type_scale=10, max_type_scale=12,
            positive_steps=320,
        )
        steps = generate_type_scale(config)

        assert len(steps) == 321
        assert steps[0].step == 320
        assert steps[0].min_font_size == math.inf
        assert "Infinity" in steps[0].clamp
        assert steps[-1].clamp == "clamp(1.125rem, 1.0815rem + 0.2174vi, 1.25rem)"

    def test_null_step_counts_mean_zero(self, type_config_dict):
        type_config_dict["positiveSteps"] = None
        type_config_dict["negativeSteps"] = None
        steps = generate_type_scale(TypeScaleConfig.model_validate(type_config_dict))
        assert [s.step for s in steps] == [0]

    def test_rejects_negative_step_count(self, type_config_dict):
        type_config_dict["negativeSteps"] = -1
        with pytest.raises(ValidationError):
            TypeScaleConfig.model_validate(type_config_dict)

    def test_rejects_zero_scale(self, type_config_dict):
        type_config_dict["minTypeScale"] = 0
        with pytest.raises(ValidationError):
            TypeScaleConfig.model_validate(type_config_dict)
