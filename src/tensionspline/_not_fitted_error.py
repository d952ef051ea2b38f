from ._spline_error import SplineError


class NotFittedError(SplineError):
    """Raised when evaluating a spline whose moments were never solved."""

    pass
