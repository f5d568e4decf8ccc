"""
Tests for clamp() synthesis.
"""

import re
import pytest
from pydantic import ValidationError

from fluidscale.calculator.clamp import (
    synthesize_clamp,
    synthesize_clamp_batch,
    synthesize_clamp_units,
)
from fluidscale.enums import RelativeTo
from fluidscale.io import ClampConfig, ClampsConfig, ClampResult

CLAMP_PATTERN = re.compile(
    r"^clamp\((?P<lower>-?[\d.]+)(?P<unit>rem|px), "
    r"(?P<intersection>-?[\d.]+)(?P=unit) \+ (?P<slope>-?[\d.]+)(?P<relative>vi|vw|cqi), "
    r"(?P<upper>-?[\d.]+)(?P=unit)\)$"
)


def _clamp(**kwargs) -> str:
    config = dict(min_width=320, max_width=1240)
    config.update(kwargs)
    return synthesize_clamp(ClampConfig(**config))


class TestSynthesizeClamp:
    """Tests for synthesize_clamp."""

    def test_end_to_end(self):
        """16px -> 24px between 320px and 1240px viewports."""
        assert _clamp(min_size=16, max_size=24) == "clamp(1rem, 0.8261rem + 0.8696vi, 1.5rem)"

    def test_px_units(self):
        assert _clamp(min_size=16, max_size=24, use_px=True) == \
            "clamp(16px, 13.2174px + 0.8696vi, 24px)"

    def test_relative_units(self):
        assert _clamp(min_size=16, max_size=24).endswith("0.8696vi, 1.5rem)")
        assert "0.8696vw" in _clamp(min_size=16, max_size=24, relative_to=RelativeTo.VIEWPORT_WIDTH)
        assert "0.8696cqi" in _clamp(min_size=16, max_size=24, relative_to=RelativeTo.CONTAINER)

    def test_relative_to_from_string(self):
        assert "cqi" in _clamp(min_size=16, max_size=24, relative_to="container")

    def test_shrinking_value_swaps_bounds_only(self):
        """min_size > max_size keeps the negative slope but orders the bounds."""
        assert _clamp(min_size=24, max_size=16) == "clamp(1rem, 1.6739rem + -0.8696vi, 1.5rem)"

    def test_constant_value(self):
        assert _clamp(min_size=5, max_size=5) == "clamp(0.3125rem, 0.3125rem + 0vi, 0.3125rem)"

    @pytest.mark.parametrize("min_size,max_size", [
        (16, 24), (24, 16), (12, 12), (0, 100), (100, 0), (13.5, 97.25), (-8, 8),
    ])
    @pytest.mark.parametrize("use_px", [False, True])
    def test_bracket_ordering(self, min_size, max_size, use_px):
        """The first bound of every clamp is <= its last bound."""
        match = CLAMP_PATTERN.match(_clamp(min_size=min_size, max_size=max_size, use_px=use_px))
        assert match is not None
        assert float(match.group("lower")) <= float(match.group("upper"))

    def test_preferred_value_hits_endpoints(self):
        """The fluid term evaluates to min_size at min_width and max_size at max_width."""
        match = CLAMP_PATTERN.match(_clamp(min_size=16, max_size=24, use_px=True))
        intersection = float(match.group("intersection"))
        slope = float(match.group("slope")) / 100

        assert intersection + slope * 320 == pytest.approx(16, abs=0.01)
        assert intersection + slope * 1240 == pytest.approx(24, abs=0.01)

    def test_rejects_inverted_widths(self):
        with pytest.raises(ValidationError):
            ClampConfig(min_size=16, max_size=24, min_width=1240, max_width=320)

    def test_rejects_equal_widths(self):
        with pytest.raises(ValidationError):
            ClampConfig(min_size=16, max_size=24, min_width=800, max_width=800)

    def test_camel_case_input(self):
        config = ClampConfig.model_validate({
            "minSize": 16, "maxSize": 24, "minWidth": 320, "maxWidth": 1240, "usePx": True,
        })
        assert synthesize_clamp(config) == "clamp(16px, 13.2174px + 0.8696vi, 24px)"

    def test_config_is_frozen(self):
        config = ClampConfig(min_size=16, max_size=24, min_width=320, max_width=1240)
        with pytest.raises(ValidationError):
            config.min_size = 10


class TestSynthesizeClampUnits:
    """Tests for synthesize_clamp_units."""

    def test_returns_rem_and_px(self):
        clamp_rem, clamp_px = synthesize_clamp_units(16, 24, 320, 1240)
        assert clamp_rem == "clamp(1rem, 0.8261rem + 0.8696vi, 1.5rem)"
        assert clamp_px == "clamp(16px, 13.2174px + 0.8696vi, 24px)"

    def test_relative_to_applies_to_both(self):
        clamp_rem, clamp_px = synthesize_clamp_units(16, 24, 320, 1240, RelativeTo.CONTAINER)
        assert clamp_rem.count("cqi") == 1
        assert clamp_px.count("cqi") == 1


class TestSynthesizeClampBatch:
    """Tests for synthesize_clamp_batch."""

    def test_labels_and_order(self, clamps_config):
        results = synthesize_clamp_batch(clamps_config)

        assert [r.label for r in results] == ["16-24", "32-12"]
        assert all(isinstance(r, ClampResult) for r in results)

    def test_values_match_single_clamp(self, clamps_config):
        first = synthesize_clamp_batch(clamps_config)[0]
        assert first.clamp == "clamp(1rem, 0.8261rem + 0.8696vi, 1.5rem)"
        assert first.clamp_px == "clamp(16px, 13.2174px + 0.8696vi, 24px)"

    def test_fractional_label(self):
        results = synthesize_clamp_batch(ClampsConfig(min_width=320, max_width=1240, pairs=[(16.5, 24)]))
        assert results[0].label == "16.5-24"

    def test_empty_pairs(self):
        assert synthesize_clamp_batch(ClampsConfig(min_width=320, max_width=1240)) == []

    def test_relative_to(self):
        config = ClampsConfig(
            min_width=320, max_width=1240, pairs=[(16, 24)], relative_to=RelativeTo.VIEWPORT_WIDTH
        )
        result = synthesize_clamp_batch(config)[0]
        assert "vw" in result.clamp
        assert "vw" in result.clamp_px
