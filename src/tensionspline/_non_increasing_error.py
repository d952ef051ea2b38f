from ._spline_error import SplineError


class NonIncreasingError(SplineError):
    """Raised when knots are not strictly increasing or queries are unsorted."""

    pass
