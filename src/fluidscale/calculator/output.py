"""Output formatters for generated scales.

Converts ScaleResult models to JSON, CSS custom properties and a plain-text
summary. Every formatter returns a string; writing it anywhere is up to the
caller.

JSON uses Pydantic's model_dump(mode='json', by_alias=True) so keys come out
in the camelCase the web tooling expects (minWidth, clampPx, oneUpPairs).
"""

import json
from typing import List, Optional, TYPE_CHECKING

from ..io import ScaleResult
from .constants import CSS_CLAMP_PREFIX, CSS_SPACE_PREFIX, CSS_TYPE_PREFIX, SCHEMA_VERSION
from .interpolation import format_number

if TYPE_CHECKING:
    from .validation import ValidationResult


def _css_ident(text: str) -> str:
    """Escape characters that are not allowed in a custom property name."""
    return text.replace(".", "\\.")


def _message_dicts(messages) -> List[dict]:
    return [
        {
            'severity': msg.severity.value,
            'code': msg.code,
            'message': msg.message,
            'suggestion': msg.suggestion
        }
        for msg in messages
    ]


def to_json(
    result: ScaleResult,
    validation: Optional["ValidationResult"] = None,
    indent: int = 2,
) -> str:
    """Convert a ScaleResult to a JSON string.

    Args:
        result: Output of generate_project() (or a hand-built ScaleResult)
        validation: Optional validation results to include in output
        indent: JSON indentation level (default: 2)

    Returns:
        JSON string with schema version and every generated section
    """
    data = result.model_dump(mode='json', by_alias=True)

    # Sections that were not generated are left out rather than written as null
    data = {key: value for key, value in data.items() if value is not None}
    data['schemaVersion'] = SCHEMA_VERSION

    if validation:
        data['validation'] = {
            'valid': validation.valid,
            'errors': _message_dicts(validation.errors),
            'warnings': _message_dicts(validation.warnings),
            'infos': _message_dicts(validation.infos),
        }

    return json.dumps(data, indent=indent)


def to_css(result: ScaleResult, selector: str = ":root", use_px: bool = False) -> str:
    """Convert a ScaleResult to a block of CSS custom properties.

    Args:
        result: Generated scales
        selector: Selector the properties are declared on
        use_px: Emit the px variant of space and clamp values

    Returns:
        CSS rule, e.g.:

            :root {
              --step-1: clamp(...);
              --space-s: clamp(...);
            }
    """
    lines = []

    if result.type_steps:
        lines.append("  /* Type scale */")
        for step in result.type_steps:
            lines.append(f"  --{CSS_TYPE_PREFIX}-{step.step}: {step.clamp};")

    if result.space_scale:
        scale = result.space_scale
        groups = (
            ("Space scale", scale.sizes),
            ("One-up pairs", scale.one_up_pairs),
            ("Custom pairs", scale.custom_pairs),
        )
        for title, sizes in groups:
            if not sizes:
                continue
            if lines:
                lines.append("")
            lines.append(f"  /* {title} */")
            for size in sizes:
                value = size.clamp_px if use_px else size.clamp
                lines.append(f"  --{CSS_SPACE_PREFIX}-{_css_ident(size.label)}: {value};")

    if result.clamps:
        if lines:
            lines.append("")
        lines.append("  /* Clamps */")
        for clamp in result.clamps:
            value = clamp.clamp_px if use_px else clamp.clamp
            lines.append(f"  --{CSS_CLAMP_PREFIX}-{_css_ident(clamp.label)}: {value};")

    return f"{selector} {{\n" + "\n".join(lines) + "\n}\n"


def to_summary(result: ScaleResult) -> str:
    """Convert a ScaleResult to a formatted text summary.

    Returns:
        Multi-line formatted summary string
    """
    lines = []

    if result.type_steps:
        lines.extend([
            "═══ Type Scale ═══",
            f"  {'Step':>5}  {'Min':>9}  {'Max':>9}  WCAG",
        ])
        for step in result.type_steps:
            wcag = "ok" if step.wcag_violation is None else f"fails @ {format_number(step.wcag_violation)}px"
            lines.append(
                f"  {step.step:>5}  {step.min_font_size:>7.2f}px  {step.max_font_size:>7.2f}px  {wcag}"
            )

    if result.space_scale:
        if lines:
            lines.append("")
        lines.extend([
            "═══ Space Scale ═══",
            f"  {'Size':>5}  {'Min':>9}  {'Max':>9}",
        ])
        for size in result.space_scale.sizes:
            lines.append(f"  {size.label:>5}  {size.min_size:>7.0f}px  {size.max_size:>7.0f}px")
        pairs = list(result.space_scale.one_up_pairs) + list(result.space_scale.custom_pairs)
        if pairs:
            lines.append(f"  Pairs: {', '.join(pair.label for pair in pairs)}")

    if result.clamps:
        if lines:
            lines.append("")
        lines.append("═══ Clamps ═══")
        for clamp in result.clamps:
            lines.append(f"  {clamp.label}: {clamp.clamp}")

    return "\n".join(lines)
