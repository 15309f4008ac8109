"""Exceptions raised by the figures package."""


class FigureError(RuntimeError):
    """Base class for figure construction and dispatch failures."""


class FigureAllocationError(FigureError, MemoryError):
    """A figure could not be constructed because memory ran out."""


class FigureCastError(FigureError, TypeError):
    """A figure was narrowed to a variant it was not constructed as."""

    def __init__(self, figure, expected):
        self.figure = figure
        self.expected = expected
        super().__init__(
            f"Cannot downcast {type(figure).__name__} to {expected.__name__}"
        )
