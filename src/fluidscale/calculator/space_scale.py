"""
Fluid Scale Calculator - Space Scale

Spacing tokens derived from a base size by fixed multipliers, named with
t-shirt sizes (3xs .. xs, s, m, l, xl, 2xl ..).

Besides the individual sizes the scale provides pairs that interpolate from
one size's minimum to another size's maximum:
- one-up pairs: each size to the next larger one ("s-m")
- custom pairs: any two sizes requested by name ("s-xl")
"""

import logging
from typing import Iterable, List, Optional, Sequence

from ..io import SpaceScale, SpaceScaleConfig, SpaceSize
from .clamp import synthesize_clamp_units
from .constants import (
    SPACE_BASE_LABEL,
    SPACE_LARGE_SUFFIX,
    SPACE_PAIR_SEPARATOR,
    SPACE_POSITIVE_LABELS,
    SPACE_SMALL_SUFFIX,
)
from .interpolation import round_half_up, round_to_precision, sort_ascending

logger = logging.getLogger(__name__)


def space_label(step: int) -> str:
    """
    Name of a space step.

    0 -> s, -1 -> xs, -2 -> 2xs, 1 -> m, 2 -> l, 3 -> xl, 4 -> 2xl, ...
    """
    if step == 0:
        return SPACE_BASE_LABEL
    if step < 0:
        if step == -1:
            return SPACE_SMALL_SUFFIX
        return f"{abs(step)}{SPACE_SMALL_SUFFIX}"
    if step < len(SPACE_POSITIVE_LABELS):
        return SPACE_POSITIVE_LABELS[step]
    return f"{step - 2}{SPACE_LARGE_SUFFIX}"


def _make_size(config: SpaceScaleConfig, label: str, min_size: float, max_size: float) -> SpaceSize:
    clamp_rem, clamp_px = synthesize_clamp_units(
        min_size,
        max_size,
        config.min_width,
        config.max_width,
        config.relative_to,
    )
    return SpaceSize(
        label=label,
        min_size=round_to_precision(min_size),
        max_size=round_to_precision(max_size),
        clamp=clamp_rem,
        clamp_px=clamp_px,
    )


def calculate_space_size(config: SpaceScaleConfig, multiplier: float, step: int) -> SpaceSize:
    """Size for one step; sizes are rounded to whole pixels before the clamp."""
    min_size = round_half_up(config.min_size * multiplier)
    max_size = round_half_up(config.max_size * multiplier)
    return _make_size(config, space_label(step).lower(), min_size, max_size)


def calculate_one_up_pairs(config: SpaceScaleConfig, sizes: Sequence[SpaceSize]) -> List[SpaceSize]:
    """
    Pair every size with the next larger one.

    Args:
        sizes: Scale sizes, largest first

    Returns:
        len(sizes) - 1 pairs, smallest first
    """
    ascending = list(reversed(sizes))
    return [
        _make_size(config, f"{prev.label}{SPACE_PAIR_SEPARATOR}{size.label}", prev.min_size, size.max_size)
        for prev, size in zip(ascending, ascending[1:])
    ]


def _resolve_custom_pair(
    config: SpaceScaleConfig,
    sizes: Sequence[SpaceSize],
    name: str,
) -> Optional[SpaceSize]:
    """Build the pair named "a-b", or None if it can't be resolved."""
    parts = name.split(SPACE_PAIR_SEPARATOR)
    if len(parts) != 2 or not parts[0] or not parts[1]:
        return None

    key_a, key_b = parts
    a = next((s for s in sizes if s.label == key_a), None)
    b = next((s for s in sizes if s.label == key_b), None)
    if a is None or b is None:
        return None

    return _make_size(config, f"{key_a}{SPACE_PAIR_SEPARATOR}{key_b}", a.min_size, b.max_size)


def calculate_custom_pairs(config: SpaceScaleConfig, sizes: Sequence[SpaceSize]) -> List[SpaceSize]:
    """
    Build the pairs requested in config.custom_sizes.

    Names that are malformed or reference an unknown size are dropped.
    """
    pairs = []
    for name in config.custom_sizes:
        pair = _resolve_custom_pair(config, sizes, name)
        if pair is None:
            logger.debug(f"Dropping custom space pair {name!r}: no matching sizes")
            continue
        pairs.append(pair)
    return pairs


def unresolved_custom_sizes(config: SpaceScaleConfig, scale: SpaceScale) -> List[str]:
    """Custom size names that produced no pair."""
    resolved = {pair.label for pair in scale.custom_pairs}
    return [name for name in config.custom_sizes if name not in resolved]


def _steps(multipliers: Iterable[float], config: SpaceScaleConfig, sign: int) -> List[SpaceSize]:
    return [
        calculate_space_size(config, multiplier, sign * (i + 1))
        for i, multiplier in enumerate(multipliers)
    ]


def generate_space_scale(config: SpaceScaleConfig) -> SpaceScale:
    """
    Generate a fluid space scale.

    Args:
        config: Breakpoints, base size and step multipliers

    Returns:
        SpaceScale with sizes (largest first), one-up pairs and custom pairs
    """
    positive = _steps(sort_ascending(config.positive_steps), config, 1)
    positive.reverse()

    negative = _steps(list(reversed(sort_ascending(config.negative_steps))), config, -1)

    sizes = positive + [calculate_space_size(config, 1, 0)] + negative

    scale = SpaceScale(
        sizes=sizes,
        one_up_pairs=calculate_one_up_pairs(config, sizes),
        custom_pairs=calculate_custom_pairs(config, sizes),
    )

    logger.info(
        f"Space scale: {len(scale.sizes)} sizes, {len(scale.one_up_pairs)} one-up pairs, "
        f"{len(scale.custom_pairs)} custom pairs"
    )
    return scale
