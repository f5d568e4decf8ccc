"""Type-safe enums for the fluid scale calculator."""

from enum import Enum


class RelativeTo(Enum):
    """Basis for the fluid term of a clamp expression"""
    VIEWPORT = "viewport"  # Viewport inline size (vi)
    VIEWPORT_WIDTH = "viewport-width"  # Viewport width (vw) - older browsers
    CONTAINER = "container"  # Container inline size (cqi) - container queries


class OutputFormat(Enum):
    """CLI / bridge output format"""
    CSS = "css"
    JSON = "json"
    SUMMARY = "summary"
