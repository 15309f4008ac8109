"""
Dispatch core for figures.

A Figure carries nothing but its dispatch table (vtable). Variants extend
Figure and add their own fields after it, so any variant can be handed around
as a plain Figure and still reach its own draw function.

Flow:
1) A constructor builds a variant and installs that variant's vtable.
2) Callers hold the result typed only as Figure.
3) call_draw() looks the function up in the instance's vtable and calls it.
4) The variant's function narrows the Figure back with downcast().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, TypeVar

from figures.errors import FigureCastError

F = TypeVar("F", bound="Figure")


@dataclass(frozen=True)
class FigureVTable:
    """Table of operations a figure supports. One shared instance per variant."""

    draw: Callable[["Figure"], None]


@dataclass(frozen=True)
class Figure:
    """Base record; only ever the leading part of a concrete variant."""

    vtable: FigureVTable

    def __post_init__(self):
        if type(self) is Figure:
            raise TypeError("Figure is a base record; construct a variant instead")

    def draw(self) -> None:
        call_draw(self)


def call_draw(figure: Figure) -> None:
    """Invoke the draw function registered in the figure's own vtable."""
    figure.vtable.draw(figure)


def vtable_of(figure: Figure) -> FigureVTable:
    return figure.vtable


def downcast(figure: Figure, cls: type[F]) -> F:
    """Narrow a Figure to the variant it was built as, or raise FigureCastError."""
    if not isinstance(figure, cls):
        raise FigureCastError(figure, cls)
    return figure
