"""
Fluidscale - fluid type and space scales as CSS clamp() expressions.

Example:
    >>> from fluidscale import synthesize_clamp, ClampConfig
    >>>
    >>> synthesize_clamp(ClampConfig(min_size=16, max_size=24, min_width=320, max_width=1240))
    'clamp(1rem, 0.8261rem + 0.8696vi, 1.5rem)'

Note: All imports are lazy-loaded. `import fluidscale` does not import
Pydantic until a calculator or IO name is first accessed.
"""

__version__ = "1.0.0"

# Define which names come from which submodule
# All imports are lazy to minimize startup time

_ENUMS = {"RelativeTo", "OutputFormat"}

_CALCULATOR = {
    "synthesize_clamp",
    "synthesize_clamp_batch",
    "check_accessibility_violation",
    "generate_type_scale",
    "generate_space_scale",
    "generate_project",
    "validate_type_scale",
    "validate_space_scale",
    "validate_project",
    "Severity",
    "ValidationResult",
    "to_json",
    "to_css",
    "to_summary",
}

_IO = {
    "load_config_json",
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
}

# Cache for lazy-loaded modules
_modules = {}


def __getattr__(name):
    """Lazy load submodules when their attributes are accessed."""
    global _modules

    if name in _ENUMS:
        if "enums" not in _modules:
            from . import enums
            _modules["enums"] = enums
        return getattr(_modules["enums"], name)

    if name in _CALCULATOR:
        if "calculator" not in _modules:
            from . import calculator
            _modules["calculator"] = calculator
        return getattr(_modules["calculator"], name)

    if name in _IO:
        if "io" not in _modules:
            from . import io
            _modules["io"] = io
        return getattr(_modules["io"], name)

    raise AttributeError(f"module 'fluidscale' has no attribute {name!r}")


__all__ = [
    # Version
    "__version__",

    # Enums (lazy loaded from enums)
    "RelativeTo",
    "OutputFormat",

    # Calculator (lazy loaded from calculator)
    "synthesize_clamp",
    "synthesize_clamp_batch",
    "check_accessibility_violation",
    "generate_type_scale",
    "generate_space_scale",
    "generate_project",
    "validate_type_scale",
    "validate_space_scale",
    "validate_project",
    "Severity",
    "ValidationResult",
    "to_json",
    "to_css",
    "to_summary",

    # IO (lazy loaded from io)
    "load_config_json",

    # Models (lazy loaded from io)
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
]
