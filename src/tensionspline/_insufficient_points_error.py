from ._spline_error import SplineError


class InsufficientPointsError(SplineError):
    """Raised when fewer than three knots are given."""

    pass
