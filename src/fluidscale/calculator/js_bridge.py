"""
JavaScript-Python bridge for Pyodide.

Provides a single, clean entry point for all JS->Python calculator calls.
All inputs are validated via Pydantic models before processing.

Usage from JavaScript:
    pyodide.globals.set('input_json', JSON.stringify({mode: 'type', config}));
    const result = await pyodide.runPythonAsync(`
        from fluidscale.calculator.js_bridge import calculate
        calculate(input_json)
    `);
    const output = JSON.parse(result);
"""

import json
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from typing_extensions import TypedDict

from ..io import (
    ClampConfig,
    ClampsConfig,
    InterpolationSpec,
    ScaleProject,
    SpaceScaleConfig,
    TypeScaleConfig,
)
from .clamp import synthesize_clamp
from .core import generate_project
from .output import to_css, to_json, to_summary
from .validation import validate_project
from .wcag import check_accessibility_violation


class ValidationMessageDict(TypedDict, total=False):
    """Type for validation message dictionaries sent to JavaScript."""
    severity: str  # "error", "warning", "info"
    code: str  # e.g., "WCAG_1_4_4_VIOLATION"
    message: str
    suggestion: Optional[str]


MODES = ("type", "space", "clamp", "clamps", "wcag", "project")


# ============================================================================
# Input / Output Models
# ============================================================================

class CalculatorInputs(BaseModel):
    """
    Everything JavaScript sends to Python.

    `config` is validated against the model for `mode` once the mode is known.
    """
    model_config = ConfigDict(extra='ignore')

    mode: str = "type"
    config: Dict[str, Any] = Field(default_factory=dict)
    selector: str = ":root"

    @field_validator('mode', mode='before')
    @classmethod
    def normalize_mode(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v


class CalculatorOutput(BaseModel):
    """Output from calculate() - matches what JS expects."""
    model_config = ConfigDict(extra='ignore')

    success: bool
    error: Optional[str] = None

    # Result data (JSON string for JS to parse)
    result_json: Optional[str] = None

    # Display formats
    css: Optional[str] = None
    summary: Optional[str] = None

    # Validation
    valid: bool = True
    messages: List[ValidationMessageDict] = Field(default_factory=list)


# ============================================================================
# Main Entry Point
# ============================================================================

def calculate(input_json: str) -> str:
    """
    Single entry point for all calculator operations from JavaScript.

    Args:
        input_json: JSON string with CalculatorInputs structure

    Returns:
        JSON string with CalculatorOutput structure
    """
    try:
        data = json.loads(input_json)
        inputs = CalculatorInputs.model_validate(data)

        if inputs.mode in ("clamp", "wcag"):
            return _calculate_single(inputs).model_dump_json()

        result, validation = _generate(inputs)

        output = CalculatorOutput(
            success=True,
            result_json=to_json(result),
            css=to_css(result, selector=inputs.selector),
            summary=to_summary(result),
            valid=validation.valid,
            messages=[
                {
                    'severity': m.severity.value,
                    'message': m.message,
                    'code': m.code,
                    'suggestion': m.suggestion
                }
                for m in validation.messages
            ],
        )
        return output.model_dump_json()

    except json.JSONDecodeError as e:
        return CalculatorOutput(
            success=False,
            error=f"Invalid JSON: {e}"
        ).model_dump_json()

    except ValidationError as e:
        return CalculatorOutput(
            success=False,
            error=f"Invalid input: {e}"
        ).model_dump_json()

    except Exception as e:
        return CalculatorOutput(
            success=False,
            error=str(e)
        ).model_dump_json()


def _calculate_single(inputs: CalculatorInputs) -> CalculatorOutput:
    """Modes that return a single value rather than a scale."""
    if inputs.mode == "clamp":
        clamp = synthesize_clamp(ClampConfig.model_validate(inputs.config))
        return CalculatorOutput(success=True, result_json=json.dumps({'clamp': clamp}))

    violation = check_accessibility_violation(InterpolationSpec.model_validate(inputs.config))
    return CalculatorOutput(
        success=True,
        result_json=json.dumps({'wcagViolation': violation}),
        valid=violation is None,
    )


def _generate(inputs: CalculatorInputs):
    """Run the generator for a scale mode and validate its output."""
    mode = inputs.mode

    if mode == "type":
        project = ScaleProject(type=TypeScaleConfig.model_validate(inputs.config))
    elif mode == "space":
        project = ScaleProject(space=SpaceScaleConfig.model_validate(inputs.config))
    elif mode == "clamps":
        project = ScaleProject(clamps=ClampsConfig.model_validate(inputs.config))
    elif mode == "project":
        project = ScaleProject.model_validate(inputs.config)
    else:
        raise ValueError(f"Unknown mode: {mode} (expected one of {', '.join(MODES)})")

    result = generate_project(project)
    return result, validate_project(project, result)
