"""Virtual dispatch through an explicit per-variant dispatch table."""

from figures.dispatch import Figure, FigureVTable, call_draw, downcast, vtable_of
from figures.errors import FigureAllocationError, FigureCastError, FigureError
from figures.shapes import (
    CIRCLE_VTABLE,
    RECT_VTABLE,
    Circle,
    Rect,
    circle_new,
    draw_circle,
    draw_rect,
    rect_new,
)

__all__ = [
    "CIRCLE_VTABLE",
    "RECT_VTABLE",
    "Circle",
    "Figure",
    "FigureAllocationError",
    "FigureCastError",
    "FigureError",
    "FigureVTable",
    "Rect",
    "call_draw",
    "circle_new",
    "downcast",
    "draw_circle",
    "draw_rect",
    "rect_new",
    "vtable_of",
]
