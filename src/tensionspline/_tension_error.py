from ._spline_error import SplineError


class TensionError(SplineError):
    """Raised when the tension parameter is not strictly positive."""

    pass
