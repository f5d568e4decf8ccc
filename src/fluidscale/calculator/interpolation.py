"""
Fluid Scale Calculator - Interpolation Primitives

Pure numeric helpers shared by the clamp synthesizer, the WCAG checker and
the scale generators. Rounding follows browser (JavaScript) semantics so the
emitted CSS matches what the web tooling produces for the same input.
"""

import math
import sys
from typing import Iterable, List, Union

from .constants import ROUNDING_FACTOR

Number = Union[int, float]


def lerp(x: float, y: float, a: float) -> float:
    """Linear interpolation between x and y. `a` is not restricted to [0, 1]."""
    return x * (1 - a) + y * a


def clamp_to_range(a: float, lo: float = 0.0, hi: float = 1.0) -> float:
    """Bound a into [lo, hi]"""
    return min(hi, max(lo, a))


def inverse_lerp(x: float, y: float, a: float) -> float:
    """
    Position of a between x and y, bounded to [0, 1].

    Raises:
        ZeroDivisionError: If x == y (empty domain)
    """
    return clamp_to_range((a - x) / (y - x))


def range_map(x1: float, y1: float, x2: float, y2: float, a: float) -> float:
    """
    Remap a from the domain [x1, y1] onto [x2, y2].

    The result never leaves [x2, y2]: inverse_lerp bounds the position
    before it is interpolated.
    """
    return lerp(x2, y2, inverse_lerp(x1, y1, a))


def round_half_up(n: float) -> float:
    """Round to a whole number, halves towards +infinity (JS Math.round)"""
    if not math.isfinite(n):
        return n
    return float(math.floor(n + 0.5))


def round_to_precision(n: float) -> float:
    """
    Round to 4 decimal places.

    Machine epsilon is added before scaling so values such as 1.00005, which
    are stored as 1.0000499999..., round up the way a person would expect.
    Non-finite values are returned unchanged, as are values too large to
    scale (they have no fractional digits left to round).
    """
    if not math.isfinite(n):
        return n
    scaled = (n + sys.float_info.epsilon) * ROUNDING_FACTOR
    if not math.isfinite(scaled):
        return n
    return math.floor(scaled + 0.5) / ROUNDING_FACTOR


def sort_ascending(values: Iterable[Number]) -> List[float]:
    """Sort step multipliers numerically, smallest first"""
    return sorted((float(v) for v in values))


def format_number(n: Number) -> str:
    """
    Render a number the way a browser would print it.

    Whole numbers lose their trailing `.0` so CSS reads `1rem`, not `1.0rem`.
    """
    if isinstance(n, float):
        if math.isnan(n):
            return "NaN"
        if math.isinf(n):
            return "Infinity" if n > 0 else "-Infinity"
        if n.is_integer() and abs(n) < 1e21:
            return str(int(n))
        return repr(n)
    return str(n)
