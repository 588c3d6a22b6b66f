"""Exceptions raised by the hydrostatics engine."""


class InvalidGeometryError(ValueError):
    """The configuration is outside the range the carene extractor supports.

    Raised for a segment that does not cross the waterline, or a hull whose
    corners are not split two above / two below the waterline.
    """


class DegenerateConfigurationError(ValueError):
    """A denominator (submerged area, total mass) is numerically zero."""


class ConvergenceError(RuntimeError):
    """An iterative solver exhausted its iteration budget."""

    def __init__(self, message: str, iterations: int = 0,
                 last_relative_error: float = float("nan")):
        super().__init__(message)
        self.iterations = iterations
        self.last_relative_error = last_relative_error
