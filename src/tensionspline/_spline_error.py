class SplineError(ValueError):
    """Base exception for tension spline operations."""

    pass
