"""
Fluid Scale Calculator - Type Scale

A fluid modular scale: both the base font size and the scale ratio are
interpolated across the viewport range, so headings can grow faster than
body text on large screens.
"""

import logging
import math
from typing import List

from ..io import ClampConfig, InterpolationSpec, TypeScaleConfig, TypeStep
from .clamp import synthesize_clamp
from .interpolation import range_map, round_to_precision
from .wcag import check_accessibility_violation

logger = logging.getLogger(__name__)


def calculate_type_size(config: TypeScaleConfig, viewport: float, step: int) -> float:
    """Font size of `step` at a given viewport width (unrounded)."""
    scale = range_map(
        config.min_width, config.max_width,
        config.min_type_scale, config.max_type_scale,
        viewport,
    )
    font_size = range_map(
        config.min_width, config.max_width,
        config.min_font_size, config.max_font_size,
        viewport,
    )
    try:
        factor = scale ** step
    except OverflowError:
        # Float pow raises where a browser would give Infinity
        factor = math.inf
    return font_size * factor


def calculate_type_step(config: TypeScaleConfig, step: int) -> TypeStep:
    """Evaluate one step at both breakpoints and build its clamp."""
    min_font_size = calculate_type_size(config, config.min_width, step)
    max_font_size = calculate_type_size(config, config.max_width, step)

    wcag_violation = check_accessibility_violation(InterpolationSpec(
        min_size=min_font_size,
        max_size=max_font_size,
        min_width=config.min_width,
        max_width=config.max_width,
    ))
    if wcag_violation is not None:
        logger.debug(f"Step {step} fails WCAG 1.4.4 at {wcag_violation}px")

    return TypeStep(
        step=step,
        min_font_size=round_to_precision(min_font_size),
        max_font_size=round_to_precision(max_font_size),
        wcag_violation=wcag_violation,
        clamp=synthesize_clamp(ClampConfig(
            min_size=min_font_size,
            max_size=max_font_size,
            min_width=config.min_width,
            max_width=config.max_width,
            relative_to=config.relative_to,
        )),
    )


def generate_type_scale(config: TypeScaleConfig) -> List[TypeStep]:
    """
    Generate a fluid type scale.

    Args:
        config: Breakpoints, base sizes, ratios and step counts

    Returns:
        Steps ordered largest first: +positive_steps .. +1, 0, -1 .. -negative_steps
    """
    positive = [
        calculate_type_step(config, i + 1) for i in range(config.positive_steps)
    ]
    positive.reverse()

    negative = [
        calculate_type_step(config, -1 * (i + 1)) for i in range(config.negative_steps)
    ]

    steps = positive + [calculate_type_step(config, 0)] + negative

    logger.info(
        f"Type scale: {len(steps)} steps "
        f"(+{config.positive_steps}/-{config.negative_steps}) "
        f"for {config.min_width}-{config.max_width}px"
    )
    return steps
