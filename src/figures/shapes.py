"""
Rectangle and circle variants of Figure.

Each variant has one module-level vtable that every instance shares, a draw
function that reads the variant's own field, and a constructor that returns
the new instance typed as a plain Figure.
"""

from __future__ import annotations

from dataclasses import dataclass

from figures.config import CIRCLE_FORMAT, RECT_FORMAT
from figures.dispatch import Figure, FigureVTable, downcast
from figures.errors import FigureAllocationError


@dataclass(frozen=True)
class Rect(Figure):
    perimeter: int


@dataclass(frozen=True)
class Circle(Figure):
    radius: int


# -------- "Virtual" functions --------

def draw_rect(self: Figure) -> None:
    """Print the rectangle line. Raises FigureCastError for any other variant."""
    rect = downcast(self, Rect)
    print(RECT_FORMAT.format(perimeter=rect.perimeter))


def draw_circle(self: Figure) -> None:
    """Print the circle line. Raises FigureCastError for any other variant."""
    circle = downcast(self, Circle)
    print(CIRCLE_FORMAT.format(radius=circle.radius))


# -------- Vtables --------

RECT_VTABLE = FigureVTable(draw=draw_rect)
CIRCLE_VTABLE = FigureVTable(draw=draw_circle)


# -------- Constructors --------

def rect_new(perimeter: int) -> Figure:
    """Build a Rect with the shared rectangle vtable. No validation is done."""
    try:
        return Rect(vtable=RECT_VTABLE, perimeter=perimeter)
    except MemoryError as exc:
        raise FigureAllocationError("Could not allocate Rect") from exc


def circle_new(radius: int) -> Figure:
    """Build a Circle with the shared circle vtable. No validation is done."""
    try:
        return Circle(vtable=CIRCLE_VTABLE, radius=radius)
    except MemoryError as exc:
        raise FigureAllocationError("Could not allocate Circle") from exc
