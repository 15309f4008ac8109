"""
Centralized defaults for the figures demo.

The demo reads no environment variables; these constants are the values the
entry point uses when no command line overrides are given.
"""

from __future__ import annotations

# Demo configuration
DEFAULT_PERIMETER = 10
DEFAULT_RADIUS = 8

# Output lines written by the draw functions
RECT_FORMAT = "Drawing Rect with perimeter: {perimeter}"
CIRCLE_FORMAT = "Drawing Circle with radius: {radius}"
