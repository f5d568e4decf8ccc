#!/usr/bin/env python3
"""
Generate JSON Schemas from Pydantic models.

The schemas describe the configuration documents read by the CLI and the
results returned to the web calculator, for editors and TypeScript type
generation.

Usage:
    python scripts/generate_schemas.py [output_dir]
"""

import json
import sys
from pathlib import Path

from pydantic import __version__ as PYDANTIC_VERSION

from fluidscale.calculator.constants import SCHEMA_VERSION
from fluidscale.enums import RelativeTo
from fluidscale.io.loaders import (
    ClampConfig,
    ClampsConfig,
    ScaleProject,
    ScaleResult,
    SpaceScaleConfig,
    TypeScaleConfig,
)

SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"


def get_model_schema(model_class) -> dict:
    """Get JSON schema from a Pydantic model.

    Uses by_alias=True so the schema matches the camelCase documents the
    web tooling writes and reads.
    """
    return model_class.model_json_schema(by_alias=True)


def write_schema(output_dir: Path, name: str, schema: dict) -> Path:
    schema["$schema"] = SCHEMA_DIALECT
    schema_file = output_dir / f"{name}-v{SCHEMA_VERSION}.json"
    with open(schema_file, "w") as f:
        json.dump(schema, f, indent=2)
    return schema_file


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    output_dir = Path(argv[0]) if argv else Path(__file__).parent.parent / "schemas"
    output_dir.mkdir(parents=True, exist_ok=True)

    print("Generating JSON schemas from Pydantic models...")
    print(f"  Pydantic version: {PYDANTIC_VERSION}")

    project_schema = get_model_schema(ScaleProject)
    project_schema["title"] = "ScaleProject"
    project_schema["description"] = "Fluid type scale, space scale and clamp configuration"
    print(f"  Generated: {write_schema(output_dir, 'scale-project', project_schema)}")

    result_schema = get_model_schema(ScaleResult)
    result_schema["title"] = "ScaleResult"
    result_schema["description"] = "Generated scales with CSS clamp() expressions"
    print(f"  Generated: {write_schema(output_dir, 'scale-result', result_schema)}")

    components = {
        "clamp-config": ClampConfig,
        "clamps-config": ClampsConfig,
        "type-scale-config": TypeScaleConfig,
        "space-scale-config": SpaceScaleConfig,
    }
    for name, model in components.items():
        print(f"  Generated: {write_schema(output_dir, name, get_model_schema(model))}")

    enums_schema = {
        "title": "FluidscaleEnums",
        "description": "Enum definitions for fluidscale types",
        "definitions": {
            "RelativeTo": {
                "type": "string",
                "enum": [e.value for e in RelativeTo],
                "description": "Basis of the fluid term: viewport (vi), viewport-width (vw), container (cqi)"
            }
        }
    }
    print(f"  Generated: {write_schema(output_dir, 'enums', enums_schema)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
