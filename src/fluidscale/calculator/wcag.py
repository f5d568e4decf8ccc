"""
Fluid Scale Calculator - WCAG 1.4.4 Check

WCAG 1.4.4 (Resize text) requires that text can be scaled to 200%. Fluid
type partly ignores browser zoom because its preferred value is tied to the
viewport, so a steep slope can stop text from ever doubling.

Calculation after Maxwell Barvian (fluid.style).
"""

from typing import Optional

from ..io import InterpolationSpec
from .constants import WCAG_REQUIRED_RATIO, WCAG_ZOOM_FACTOR
from .interpolation import clamp_to_range


def check_accessibility_violation(spec: InterpolationSpec) -> Optional[float]:
    """
    Find the viewport width at which a fluid size fails WCAG 1.4.4.

    At 1x zoom the size follows the clamped line through both endpoints.
    At 5x zoom the rem parts (bounds and intercept) scale by 5 while the
    viewport term does not. Only two points can break the 2x requirement:
    the lowest point of the zoomed curve (5 * min_width) and the peak of
    the unzoomed one (max_width).

    Args:
        spec: min_size/max_size across min_width/max_width

    Returns:
        First failing viewport width, or None if the size passes
    """
    min_size = spec.min_size
    max_size = spec.max_size
    min_width = spec.min_width
    max_width = spec.max_width

    slope = (max_size - min_size) / (max_width - min_width)
    intercept = min_size - (min_width * slope)

    def zoom1(vw: float) -> float:
        return clamp_to_range(min_size, intercept + slope * vw, max_size)

    def zoom5(vw: float) -> float:
        return clamp_to_range(
            WCAG_ZOOM_FACTOR * min_size,
            WCAG_ZOOM_FACTOR * intercept + slope * vw,
            WCAG_ZOOM_FACTOR * max_size,
        )

    lowest_zoomed = WCAG_ZOOM_FACTOR * min_width
    if zoom5(lowest_zoomed) < WCAG_REQUIRED_RATIO * zoom1(lowest_zoomed):
        return lowest_zoomed
    elif zoom5(max_width) < WCAG_REQUIRED_RATIO * zoom1(max_width):
        return max_width

    return None
