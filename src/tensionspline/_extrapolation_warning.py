class ExtrapolationWarning(UserWarning):
    """Warning for query points outside the spline domain (extrapolate='warn')."""

    pass
