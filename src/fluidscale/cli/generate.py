"""
Command-line interface for fluid scale generation.
"""

import argparse
import logging
import sys

from ..calculator.core import generate_project
from ..calculator.output import to_css, to_json, to_summary
from ..calculator.validation import Severity, validate_project
from ..enums import OutputFormat
from ..io.loaders import load_config_json


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="fluidscale",
        description="Generate fluid type and space scales as CSS clamp() expressions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Config file:
  {
    "type":   {"minWidth": 320, "maxWidth": 1240, "minFontSize": 18, "maxFontSize": 20,
               "minTypeScale": 1.2, "maxTypeScale": 1.25, "positiveSteps": 5, "negativeSteps": 2},
    "space":  {"minWidth": 320, "maxWidth": 1240, "minSize": 18, "maxSize": 20,
               "positiveSteps": [1.5, 2, 3], "negativeSteps": [0.75, 0.5], "customSizes": ["s-l"]},
    "clamps": {"minWidth": 320, "maxWidth": 1240, "pairs": [[16, 24], [32, 12]]}
  }
  Every section is optional; snake_case keys work too.

Examples:
  # CSS custom properties on :root (default)
  fluidscale scale.json

  # Scope the properties to a component and use container query units in the config
  fluidscale scale.json --selector ".card"

  # JSON for design token pipelines, with WCAG and scale checks included
  fluidscale scale.json --format json --validate

  # Quick look at the numbers
  fluidscale scale.json --format summary
        """
    )

    parser.add_argument(
        'config_file',
        type=str,
        help='JSON scale configuration'
    )

    parser.add_argument(
        '-f', '--format',
        type=str,
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.CSS.value,
        help='Output format (default: css)'
    )

    parser.add_argument(
        '--selector',
        type=str,
        default=':root',
        help='Selector for CSS output (default: :root)'
    )

    parser.add_argument(
        '--px',
        action='store_true',
        help='Use px instead of rem for space and clamp values in CSS output'
    )

    parser.add_argument(
        '--validate',
        action='store_true',
        help='Check scales for WCAG 1.4.4 failures and rounding problems'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Log calculation details to stderr'
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Load config
    try:
        project = load_config_json(args.config_file)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    result = generate_project(project)
    validation = validate_project(project, result) if args.validate else None

    output_format = OutputFormat(args.format)
    if output_format == OutputFormat.JSON:
        print(to_json(result, validation=validation))
    elif output_format == OutputFormat.SUMMARY:
        print(to_summary(result))
    else:
        print(to_css(result, selector=args.selector, use_px=args.px), end="")

    if validation and output_format != OutputFormat.JSON:
        for msg in validation.messages:
            print(f"{msg.severity.value.upper()} {msg.code}: {msg.message}", file=sys.stderr)
            if msg.suggestion and msg.severity != Severity.INFO:
                print(f"  Suggestion: {msg.suggestion}", file=sys.stderr)

    if validation and not validation.valid:
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
