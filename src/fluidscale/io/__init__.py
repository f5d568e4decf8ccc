"""
Fluidscale IO - configuration models, loaders, and result records.

Example:
    >>> from fluidscale.io import load_config_json
    >>> from fluidscale.calculator import generate_project
    >>>
    >>> project = load_config_json("scale.json")
    >>> result = generate_project(project)
"""

from .loaders import (
    load_config_json,
    # Configuration
    ViewportRange,
    InterpolationSpec,
    ClampConfig,
    ClampsConfig,
    TypeScaleConfig,
    SpaceScaleConfig,
    ScaleProject,
    # Results
    ClampResult,
    TypeStep,
    SpaceSize,
    SpaceScale,
    ScaleResult,
)

__all__ = [
    # Loaders
    "load_config_json",

    # Configuration
    "ViewportRange",
    "InterpolationSpec",
    "ClampConfig",
    "ClampsConfig",
    "TypeScaleConfig",
    "SpaceScaleConfig",
    "ScaleProject",

    # Results
    "ClampResult",
    "TypeStep",
    "SpaceSize",
    "SpaceScale",
    "ScaleResult",
]
