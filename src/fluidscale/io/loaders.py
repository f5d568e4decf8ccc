"""
JSON input/output for fluid scale configuration.

Loads scale configuration documents (type scale, space scale, clamp pairs)
and defines the typed records returned by the calculator.

Uses Pydantic for automatic validation and enum coercion. Field names are
snake_case; the camelCase names used by the web tooling (minWidth,
maxFontSize, ...) are accepted as aliases and used for JSON output.
"""

import json
from pathlib import Path
from typing import Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from ..enums import RelativeTo


def _coerce_relative_to(v):
    """Accept enum members, case-insensitive strings, or null for the default."""
    if v is None:
        return RelativeTo.VIEWPORT
    if isinstance(v, str):
        return RelativeTo(v.strip().lower())
    return v


class ViewportRange(BaseModel):
    """Viewport breakpoints a fluid value interpolates between."""
    model_config = ConfigDict(
        frozen=True,
        extra='ignore',
        populate_by_name=True,
        alias_generator=to_camel,
    )

    min_width: float
    max_width: float

    @model_validator(mode='after')
    def check_width_order(self):
        if not self.min_width < self.max_width:
            raise ValueError(
                f"min_width ({self.min_width}) must be less than max_width ({self.max_width})"
            )
        return self


class InterpolationSpec(ViewportRange):
    """A single linear interpolation: (min_width, min_size) -> (max_width, max_size).

    min_size may exceed max_size; that describes a value which shrinks as
    the viewport grows.
    """
    min_size: float
    max_size: float


class ClampConfig(InterpolationSpec):
    """Input for a single clamp() expression."""
    use_px: bool = False
    relative_to: RelativeTo = RelativeTo.VIEWPORT

    @field_validator('relative_to', mode='before')
    @classmethod
    def coerce_relative_to(cls, v):
        return _coerce_relative_to(v)


class ClampsConfig(ViewportRange):
    """A batch of (min_size, max_size) pairs sharing one viewport range."""
    pairs: Tuple[Tuple[float, float], ...] = ()
    relative_to: RelativeTo = RelativeTo.VIEWPORT

    @field_validator('relative_to', mode='before')
    @classmethod
    def coerce_relative_to(cls, v):
        return _coerce_relative_to(v)


class TypeScaleConfig(ViewportRange):
    """Modular type scale whose base size and ratio both vary with the viewport."""
    min_font_size: float
    max_font_size: float
    min_type_scale: float = Field(gt=0)
    max_type_scale: float = Field(gt=0)
    positive_steps: int = Field(default=0, ge=0)
    negative_steps: int = Field(default=0, ge=0)
    relative_to: RelativeTo = RelativeTo.VIEWPORT

    @field_validator('positive_steps', 'negative_steps', mode='before')
    @classmethod
    def default_steps(cls, v):
        return 0 if v is None else v

    @field_validator('relative_to', mode='before')
    @classmethod
    def coerce_relative_to(cls, v):
        return _coerce_relative_to(v)


class SpaceScaleConfig(ViewportRange):
    """Space scale built from multipliers of a base size."""
    min_size: float
    max_size: float
    positive_steps: Tuple[float, ...] = ()
    negative_steps: Tuple[float, ...] = ()
    custom_sizes: Tuple[str, ...] = ()
    relative_to: RelativeTo = RelativeTo.VIEWPORT

    @field_validator('positive_steps', 'negative_steps', 'custom_sizes', mode='before')
    @classmethod
    def default_sequences(cls, v):
        return () if v is None else v

    @field_validator('relative_to', mode='before')
    @classmethod
    def coerce_relative_to(cls, v):
        return _coerce_relative_to(v)


class ScaleProject(BaseModel):
    """Configuration document: any combination of the three generators."""
    model_config = ConfigDict(frozen=True, extra='ignore', populate_by_name=True)

    type: Optional[TypeScaleConfig] = None
    space: Optional[SpaceScaleConfig] = None
    clamps: Optional[ClampsConfig] = None


# ----------------------------------------------------------------------------
# Results
# ----------------------------------------------------------------------------

_RESULT_CONFIG = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)


class ClampResult(BaseModel):
    """A labelled clamp in rem and px units."""
    model_config = _RESULT_CONFIG

    label: str
    clamp: str
    clamp_px: str


class TypeStep(BaseModel):
    """One step of a type scale."""
    model_config = _RESULT_CONFIG

    step: int
    min_font_size: float
    max_font_size: float
    wcag_violation: Optional[float] = None  # Viewport width where WCAG 1.4.4 fails
    clamp: str


class SpaceSize(BaseModel):
    """One named size (or pair of sizes) of a space scale."""
    model_config = _RESULT_CONFIG

    label: str
    min_size: float
    max_size: float
    clamp: str
    clamp_px: str


class SpaceScale(BaseModel):
    """Space scale with its derived pairs."""
    model_config = _RESULT_CONFIG

    sizes: Tuple[SpaceSize, ...] = ()
    one_up_pairs: Tuple[SpaceSize, ...] = ()
    custom_pairs: Tuple[SpaceSize, ...] = ()


class ScaleResult(BaseModel):
    """Everything generated for a ScaleProject."""
    model_config = _RESULT_CONFIG

    type_steps: Optional[Tuple[TypeStep, ...]] = None
    space_scale: Optional[SpaceScale] = None
    clamps: Optional[Tuple[ClampResult, ...]] = None


def load_config_json(filepath: Union[str, Path]) -> ScaleProject:
    """
    Load a scale configuration document.

    The document holds optional "type", "space" and "clamps" sections,
    optionally wrapped in a "config" key.

    Args:
        filepath: Path to the JSON file

    Returns:
        ScaleProject with every section present in the file

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If the JSON is malformed or has no known section
        ValidationError: If a section is missing fields or has invalid values
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"Config file not found: {filepath}")

    with open(filepath, 'r') as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError("Invalid config JSON - root must be an object")

    if 'config' in data:
        data = data['config']
        if not isinstance(data, dict):
            raise ValueError("Invalid config JSON - 'config' must be an object")

    if not any(section in data for section in ('type', 'space', 'clamps')):
        raise ValueError(
            "Invalid config JSON - must contain at least one of 'type', 'space' or 'clamps'"
        )

    return ScaleProject.model_validate(data)
