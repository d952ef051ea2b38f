from ._spline_error import SplineError


class LengthMismatchError(SplineError):
    """Raised when knot positions and knot values differ in length."""

    pass
