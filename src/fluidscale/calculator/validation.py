"""
Fluid Scale Calculator - Validation Rules

Checks generated scales for accessibility and usability problems:
- WCAG 1.4.4 (Resize text) for every type step
- Scales that shrink instead of grow
- Space sizes that collapse onto each other after rounding
- Custom space pairs that could not be resolved

Validation only reports; it never changes a scale.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence

from ..io import ScaleProject, ScaleResult, SpaceScale, SpaceScaleConfig, TypeScaleConfig, TypeStep
from .interpolation import format_number
from .space_scale import unresolved_custom_sizes

logger = logging.getLogger(__name__)


class Severity(Enum):
    """Validation message severity"""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationMessage:
    """A single validation finding"""
    severity: Severity
    code: str
    message: str
    suggestion: Optional[str] = None


@dataclass
class ValidationResult:
    """Complete validation result"""
    valid: bool  # True if no errors
    messages: List[ValidationMessage] = field(default_factory=list)

    @property
    def errors(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.ERROR]

    @property
    def warnings(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.WARNING]

    @property
    def infos(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.INFO]

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        return ValidationResult(
            valid=self.valid and other.valid,
            messages=self.messages + other.messages,
        )


def _result(messages: List[ValidationMessage]) -> ValidationResult:
    has_errors = any(m.severity == Severity.ERROR for m in messages)
    return ValidationResult(valid=not has_errors, messages=messages)


def validate_type_scale(config: TypeScaleConfig, steps: Sequence[TypeStep]) -> ValidationResult:
    """
    Validate a generated type scale.

    Args:
        config: Configuration the scale was generated from
        steps: Output of generate_type_scale(config)

    Returns:
        ValidationResult with all findings
    """
    messages: List[ValidationMessage] = []
    messages.extend(_validate_wcag(steps))
    messages.extend(_validate_type_direction(config))
    return _result(messages)


def _validate_wcag(steps: Sequence[TypeStep]) -> List[ValidationMessage]:
    messages = []
    for step in steps:
        if step.wcag_violation is None:
            continue
        logger.info(f"Type step {step.step} fails WCAG 1.4.4 at {step.wcag_violation}px")
        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="WCAG_1_4_4_VIOLATION",
            message=(
                f"Step {step.step} ({format_number(step.min_font_size)}px -> "
                f"{format_number(step.max_font_size)}px) cannot be zoomed to 200% "
                f"at a {format_number(step.wcag_violation)}px viewport"
            ),
            suggestion="Reduce the difference between min and max size, or widen the viewport range",
        ))
    return messages


def _validate_type_direction(config: TypeScaleConfig) -> List[ValidationMessage]:
    messages = []
    if config.min_type_scale < 1 or config.max_type_scale < 1:
        messages.append(ValidationMessage(
            severity=Severity.INFO,
            code="TYPE_SCALE_SHRINKS",
            message=(
                f"Type scale ratio below 1 ({config.min_type_scale}, {config.max_type_scale}): "
                "positive steps get smaller than the base size"
            ),
        ))
    if config.max_font_size < config.min_font_size:
        messages.append(ValidationMessage(
            severity=Severity.INFO,
            code="FONT_SIZE_DECREASES",
            message=(
                f"Base font size shrinks from {config.min_font_size}px to "
                f"{config.max_font_size}px as the viewport grows"
            ),
        ))
    return messages


def validate_space_scale(config: SpaceScaleConfig, scale: SpaceScale) -> ValidationResult:
    """
    Validate a generated space scale.

    Args:
        config: Configuration the scale was generated from
        scale: Output of generate_space_scale(config)

    Returns:
        ValidationResult with all findings
    """
    messages: List[ValidationMessage] = []
    messages.extend(_validate_multipliers(config))
    messages.extend(_validate_collapsed_sizes(scale))
    messages.extend(_validate_custom_pairs(config, scale))
    return _result(messages)


def _validate_multipliers(config: SpaceScaleConfig) -> List[ValidationMessage]:
    messages = []
    for name, multipliers in (("positive", config.positive_steps), ("negative", config.negative_steps)):
        duplicates = sorted({m for m in multipliers if multipliers.count(m) > 1})
        for multiplier in duplicates:
            messages.append(ValidationMessage(
                severity=Severity.WARNING,
                code="DUPLICATE_MULTIPLIER",
                message=f"Multiplier {format_number(multiplier)} appears more than once in {name} steps",
                suggestion="Remove the duplicate; it produces two identical sizes",
            ))
    return messages


def _validate_collapsed_sizes(scale: SpaceScale) -> List[ValidationMessage]:
    messages = []
    for larger, smaller in zip(scale.sizes, scale.sizes[1:]):
        if larger.min_size == smaller.min_size and larger.max_size == smaller.max_size:
            messages.append(ValidationMessage(
                severity=Severity.WARNING,
                code="SPACE_SIZES_COLLAPSED",
                message=(
                    f"Sizes '{smaller.label}' and '{larger.label}' are identical "
                    f"({format_number(larger.min_size)}px -> {format_number(larger.max_size)}px) after rounding"
                ),
                suggestion="Spread the multipliers further apart or increase the base size",
            ))
    return messages


def validate_project(project: ScaleProject, result: ScaleResult) -> ValidationResult:
    """Validate every scale generated for a project."""
    validation = ValidationResult(valid=True)
    if project.type and result.type_steps is not None:
        validation = validation.merge(validate_type_scale(project.type, result.type_steps))
    if project.space and result.space_scale is not None:
        validation = validation.merge(validate_space_scale(project.space, result.space_scale))
    return validation


def _validate_custom_pairs(config: SpaceScaleConfig, scale: SpaceScale) -> List[ValidationMessage]:
    labels = ", ".join(size.label for size in scale.sizes)
    return [
        ValidationMessage(
            severity=Severity.INFO,
            code="CUSTOM_PAIR_DROPPED",
            message=f"Custom size '{name}' does not name two sizes of this scale and was skipped",
            suggestion=f"Use two of: {labels}",
        )
        for name in unresolved_custom_sizes(config, scale)
    ]
