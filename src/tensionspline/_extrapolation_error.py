from ._spline_error import SplineError


class ExtrapolationError(SplineError):
    """Raised for queries outside [knots[0], knots[-1]] when extrapolate='error'.

    Tension splines otherwise extend their first and last segments, whose
    hyperbolic terms grow like exp(tension * distance) away from the data.
    """

    pass
