"""
Fluid Scale Calculator - Project Generation

Runs every generator configured in a ScaleProject and collects the results
into one ScaleResult.
"""

import logging

from ..io import ScaleProject, ScaleResult
from .clamp import synthesize_clamp_batch
from .space_scale import generate_space_scale
from .type_scale import generate_type_scale

logger = logging.getLogger(__name__)


def generate_project(project: ScaleProject) -> ScaleResult:
    """
    Generate all scales described by a project.

    Sections missing from the project stay None in the result.
    """
    type_steps = generate_type_scale(project.type) if project.type else None
    space_scale = generate_space_scale(project.space) if project.space else None
    clamps = synthesize_clamp_batch(project.clamps) if project.clamps else None

    if type_steps is None and space_scale is None and clamps is None:
        logger.warning("Project has no type, space or clamps section; nothing generated")

    return ScaleResult(
        type_steps=type_steps,
        space_scale=space_scale,
        clamps=clamps,
    )
