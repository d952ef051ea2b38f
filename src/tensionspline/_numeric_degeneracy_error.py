from ._spline_error import SplineError


class NumericDegeneracyError(SplineError):
    """Raised when the tension is too small or too large for the knot spacing.

    Hyperbolic terms such as ``sinh(tension * h)`` overflow or lose all
    precision, producing non-finite coefficients, moments or values.
    """

    pass
