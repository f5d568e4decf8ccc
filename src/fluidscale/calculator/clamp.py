"""
Fluid Scale Calculator - clamp() Synthesis

Converts a linear interpolation between two viewport breakpoints into a CSS
clamp() expression:

    clamp(MIN, INTERSECTION + SLOPE * 100 <unit>, MAX)

The preferred value is the line through (min_width, min_size) and
(max_width, max_size); MIN and MAX stop it growing past either endpoint.
"""

import logging
from typing import List, Tuple

from ..enums import RelativeTo
from ..io import ClampConfig, ClampsConfig, ClampResult
from .constants import (
    DEFAULT_RELATIVE_TO,
    RELATIVE_UNITS,
    REM_BASE_PX,
    UNIT_PX,
    UNIT_REM,
)
from .interpolation import format_number, round_to_precision

logger = logging.getLogger(__name__)


def synthesize_clamp(config: ClampConfig) -> str:
    """
    Build a CSS clamp() expression for a fluid value.

    Args:
        config: Sizes, viewport breakpoints and unit options

    Returns:
        CSS string, e.g. "clamp(1rem, 0.8261rem + 0.8696vi, 1.5rem)"

    A shrinking value (min_size > max_size) keeps its negative slope; only
    the bounds swap, since clamp() needs its first argument <= its third.
    """
    min_size = config.min_size
    max_size = config.max_size

    is_negative = min_size > max_size
    lower = max_size if is_negative else min_size
    upper = min_size if is_negative else max_size

    divider = 1.0 if config.use_px else REM_BASE_PX
    unit = UNIT_PX if config.use_px else UNIT_REM
    relative_unit = RELATIVE_UNITS.get(config.relative_to, RELATIVE_UNITS[DEFAULT_RELATIVE_TO])

    # Line through both endpoints, in output units
    slope = ((max_size / divider) - (min_size / divider)) / (
        (config.max_width / divider) - (config.min_width / divider)
    )
    intersection = (-1 * (config.min_width / divider)) * slope + (min_size / divider)

    lower_str = format_number(round_to_precision(lower / divider))
    upper_str = format_number(round_to_precision(upper / divider))
    intersection_str = format_number(round_to_precision(intersection))
    slope_str = format_number(round_to_precision(slope * 100))

    return (
        f"clamp({lower_str}{unit}, "
        f"{intersection_str}{unit} + {slope_str}{relative_unit}, "
        f"{upper_str}{unit})"
    )


def synthesize_clamp_units(
    min_size: float,
    max_size: float,
    min_width: float,
    max_width: float,
    relative_to: RelativeTo = DEFAULT_RELATIVE_TO,
) -> Tuple[str, str]:
    """
    Build the rem and px variants of the same clamp.

    Returns:
        (clamp_rem, clamp_px)
    """
    common = dict(
        min_size=min_size,
        max_size=max_size,
        min_width=min_width,
        max_width=max_width,
        relative_to=relative_to,
    )
    return (
        synthesize_clamp(ClampConfig(**common)),
        synthesize_clamp(ClampConfig(use_px=True, **common)),
    )


def synthesize_clamp_batch(config: ClampsConfig) -> List[ClampResult]:
    """
    Build clamps for a list of (min_size, max_size) pairs.

    Each result is labelled "{min_size}-{max_size}", e.g. "16-24".
    """
    results = []
    for min_size, max_size in config.pairs:
        clamp_rem, clamp_px = synthesize_clamp_units(
            min_size,
            max_size,
            config.min_width,
            config.max_width,
            config.relative_to,
        )
        results.append(ClampResult(
            label=f"{format_number(min_size)}-{format_number(max_size)}",
            clamp=clamp_rem,
            clamp_px=clamp_px,
        ))

    logger.debug(f"Synthesized {len(results)} clamps for {config.min_width}-{config.max_width}px")
    return results
