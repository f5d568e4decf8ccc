"""
Fluid Scale Calculator - responsive type and space scales as CSS clamp().

This module provides the calculator functions for fluid scales.
All generators return Pydantic models for type safety.

Example:
    >>> from fluidscale.calculator import generate_type_scale
    >>> from fluidscale.io import TypeScaleConfig
    >>>
    >>> steps = generate_type_scale(TypeScaleConfig(
    ...     min_width=320, max_width=1240,
    ...     min_font_size=18, max_font_size=20,
    ...     min_type_scale=1.2, max_type_scale=1.25,
    ...     positive_steps=5, negative_steps=2,
    ... ))
    >>> [step.step for step in steps]
    [5, 4, 3, 2, 1, 0, -1, -2]
"""

from .interpolation import (
    # Numeric primitives
    lerp,
    clamp_to_range,
    inverse_lerp,
    range_map,
    round_half_up,
    round_to_precision,
    sort_ascending,
    format_number,
)

from .clamp import (
    # clamp() synthesis
    synthesize_clamp,
    synthesize_clamp_units,
    synthesize_clamp_batch,
)

from .wcag import check_accessibility_violation

from .type_scale import (
    calculate_type_size,
    calculate_type_step,
    generate_type_scale,
)

from .space_scale import (
    space_label,
    calculate_space_size,
    calculate_one_up_pairs,
    calculate_custom_pairs,
    generate_space_scale,
)

from .core import generate_project

from .validation import (
    # Validation
    validate_type_scale,
    validate_space_scale,
    validate_project,
    Severity,
    ValidationMessage,
    ValidationResult,
)

from ..enums import RelativeTo

from .output import (
    # Output formatters
    to_json,
    to_css,
    to_summary,
)

# Convenience imports
from ..io import (
    InterpolationSpec,
    ClampConfig,
    ClampsConfig,
    TypeScaleConfig,
    SpaceScaleConfig,
    ScaleProject,
    ClampResult,
    TypeStep,
    SpaceSize,
    SpaceScale,
    ScaleResult,
)


__all__ = [
    # Enums (type-safe)
    "RelativeTo",

    # Models
    "InterpolationSpec",
    "ClampConfig",
    "ClampsConfig",
    "TypeScaleConfig",
    "SpaceScaleConfig",
    "ScaleProject",
    "ClampResult",
    "TypeStep",
    "SpaceSize",
    "SpaceScale",
    "ScaleResult",

    # Numeric primitives
    "lerp",
    "clamp_to_range",
    "inverse_lerp",
    "range_map",
    "round_half_up",
    "round_to_precision",
    "sort_ascending",
    "format_number",

    # clamp() synthesis
    "synthesize_clamp",
    "synthesize_clamp_units",
    "synthesize_clamp_batch",
    "check_accessibility_violation",

    # Scale generators
    "calculate_type_size",
    "calculate_type_step",
    "generate_type_scale",
    "space_label",
    "calculate_space_size",
    "calculate_one_up_pairs",
    "calculate_custom_pairs",
    "generate_space_scale",
    "generate_project",

    # Validation
    "validate_type_scale",
    "validate_space_scale",
    "validate_project",
    "Severity",
    "ValidationMessage",
    "ValidationResult",

    # Output formatters
    "to_json",
    "to_css",
    "to_summary",
]
