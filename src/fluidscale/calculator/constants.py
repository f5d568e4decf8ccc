"""
Constants for fluid scale calculations.

Centralizes the numeric constants used by the calculator and validation
modules. Units are part of the constant name where they apply (_PX).

Constants are grouped by category:
- CSS units: rem base, emitted unit suffixes
- Rounding: precision of every number written into a clamp string
- WCAG 1.4.4: zoom factors for the resize-text check
- Space scale: label ladder
"""

from typing import Dict, Tuple

from ..enums import RelativeTo

# =============================================================================
# CSS units
# =============================================================================

# Browser default root font size; 1rem == 16px unless the user changes it
REM_BASE_PX: float = 16.0

UNIT_REM: str = "rem"
UNIT_PX: str = "px"

# Unit used for the fluid term, keyed by what the scale is relative to
RELATIVE_UNITS: Dict[RelativeTo, str] = {
    RelativeTo.VIEWPORT: "vi",
    RelativeTo.VIEWPORT_WIDTH: "vw",
    RelativeTo.CONTAINER: "cqi",
}

DEFAULT_RELATIVE_TO: RelativeTo = RelativeTo.VIEWPORT

# =============================================================================
# Rounding
# =============================================================================

ROUNDING_DECIMALS: int = 4
ROUNDING_FACTOR: float = 10.0 ** ROUNDING_DECIMALS

# =============================================================================
# WCAG 1.4.4 - Resize text
# =============================================================================

# Text must still reach 2x its size when the user zooms. The check evaluates
# the curve at 5x zoom, where both critical points of the piecewise function
# are easy to reason about.
WCAG_ZOOM_FACTOR: float = 5.0
WCAG_REQUIRED_RATIO: float = 2.0

# =============================================================================
# Space scale labels
# =============================================================================

SPACE_BASE_LABEL: str = "s"
SPACE_SMALL_SUFFIX: str = "xs"
SPACE_LARGE_SUFFIX: str = "xl"

# Fixed names for the first steps above the base
SPACE_POSITIVE_LABELS: Tuple[str, ...] = ("s", "m", "l", "xl")

# Separator between the two labels of a space pair ("s-l")
SPACE_PAIR_SEPARATOR: str = "-"

# =============================================================================
# Output
# =============================================================================

SCHEMA_VERSION: str = "1.0"

CSS_TYPE_PREFIX: str = "step"
CSS_SPACE_PREFIX: str = "space"
CSS_CLAMP_PREFIX: str = "clamp"
