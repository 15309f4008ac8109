"""
Entry point for the figures demo.

Builds one rectangle and one circle and draws both through the same call
site. With no arguments the output is:

    Drawing Rect with perimeter: 10
    Drawing Circle with radius: 8
"""

from __future__ import annotations

import argparse
import sys

from figures.config import DEFAULT_PERIMETER, DEFAULT_RADIUS
from figures.dispatch import call_draw
from figures.errors import FigureAllocationError
from figures.events import log_event
from figures.shapes import circle_new, rect_new


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Draw a rectangle and a circle through a shared dispatch table."
    )
    parser.add_argument("--perimeter", type=int, default=DEFAULT_PERIMETER)
    parser.add_argument("--radius", type=int, default=DEFAULT_RADIUS)
    parser.add_argument(
        "--verbose", action="store_true", help="Write JSON event lines to stderr."
    )
    return parser


def main(argv=None) -> int:
    """Construct both figures, draw them in order, and return the exit status."""
    args = build_parser().parse_args(argv)

    try:
        figures = [rect_new(args.perimeter), circle_new(args.radius)]
    except FigureAllocationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for figure in figures:
        if args.verbose:
            log_event("figure_constructed", kind=type(figure).__name__)
        # Same call site for every variant; the vtable picks the function.
        call_draw(figure)
        if args.verbose:
            log_event("figure_drawn", kind=type(figure).__name__)
    return 0


if __name__ == "__main__":
    sys.exit(main())
