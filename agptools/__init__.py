"""2D geometry, colour, string, float-comparison, math, timing, scheduling, file, view-mapping and layout utilities."""

__version__ = "0.1.0"

__all__ = [
    "color",
    "files",
    "floatcmp",
    "geometry",
    "layout",
    "mathutils",
    "scheduler",
    "strings",
    "timing",
    "view",
]