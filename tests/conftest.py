"""
Pytest configuration and shared fixtures for fluidscale tests.
"""

import json
import pytest

from fluidscale.io import (
    ClampsConfig,
    ScaleProject,
    SpaceScaleConfig,
    TypeScaleConfig,
)


# ─── Raw config dicts (camelCase, as the web tooling writes them) ─────────


def _type_config_dict():
    return {
        "minWidth": 320,
        "maxWidth": 1240,
        "minFontSize": 18,
        "maxFontSize": 20,
        "minTypeScale": 1.2,
        "maxTypeScale": 1.25,
        "positiveSteps": 5,
        "negativeSteps": 2,
    }


def _space_config_dict():
    return {
        "minWidth": 320,
        "maxWidth": 1240,
        "minSize": 18,
        "maxSize": 20,
        "positiveSteps": [1.5, 2, 3, 4, 6],
        "negativeSteps": [0.75, 0.5, 0.25],
        "customSizes": ["s-l"],
    }


def _clamps_config_dict():
    return {
        "minWidth": 320,
        "maxWidth": 1240,
        "pairs": [[16, 24], [32, 12]],
    }


@pytest.fixture
def type_config_dict():
    return _type_config_dict()


@pytest.fixture
def space_config_dict():
    return _space_config_dict()


# ─── Typed configs ───────────────────────────────────────────────────────


@pytest.fixture
def type_config():
    """Fluid type scale: 18px @ 1.2 on small screens, 20px @ 1.25 on large."""
    return TypeScaleConfig.model_validate(_type_config_dict())


@pytest.fixture
def space_config():
    """Fluid space scale with five larger and three smaller sizes."""
    return SpaceScaleConfig.model_validate(_space_config_dict())


@pytest.fixture
def small_space_config():
    """16px -> 20px base with two larger sizes and one smaller size."""
    return SpaceScaleConfig(
        min_width=320,
        max_width=1240,
        min_size=16,
        max_size=20,
        positive_steps=[1.2, 1.5],
        negative_steps=[0.8],
    )


@pytest.fixture
def clamps_config():
    return ClampsConfig.model_validate(_clamps_config_dict())


@pytest.fixture
def steep_type_config():
    """Base size triples across the range - fails WCAG 1.4.4."""
    return TypeScaleConfig(
        min_width=320,
        max_width=1240,
        min_font_size=16,
        max_font_size=48,
        min_type_scale=1.0,
        max_type_scale=1.0,
    )


@pytest.fixture
def project():
    return ScaleProject.model_validate({
        "type": _type_config_dict(),
        "space": _space_config_dict(),
        "clamps": _clamps_config_dict(),
    })


# ─── Files ───────────────────────────────────────────────────────────────


@pytest.fixture
def config_file(tmp_path):
    """Config document with all three sections."""
    path = tmp_path / "scale.json"
    path.write_text(json.dumps({
        "type": _type_config_dict(),
        "space": _space_config_dict(),
        "clamps": _clamps_config_dict(),
    }))
    return path


@pytest.fixture
def steep_config_file(tmp_path):
    """Config document whose type scale fails WCAG 1.4.4."""
    path = tmp_path / "steep.json"
    path.write_text(json.dumps({
        "type": {
            "minWidth": 320,
            "maxWidth": 1240,
            "minFontSize": 16,
            "maxFontSize": 48,
            "minTypeScale": 1.0,
            "maxTypeScale": 1.0,
        }
    }))
    return path
