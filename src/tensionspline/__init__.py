"""Tension spline interpolation for PyTorch tensors.

A tension spline interpolates data with a piecewise hyperbolic curve whose
tension parameter moves continuously between a natural cubic spline (small
tension) and piecewise-linear interpolation (large tension), suppressing the
overshoot of cubic splines near sharp transitions.

Convenience Functions
---------------------
tension_spline
    Create a tension spline interpolator from data (fit + callable).

Tension Splines
---------------
tension_spline_fit
    Fit a tension spline to data points.
tension_spline_evaluate
    Evaluate a tension spline at query points.

Data Types
----------
TensionSpline
    Fitted piecewise hyperbolic interpolant.

Exceptions
----------
SplineError
    Base exception for spline operations.
LengthMismatchError
    Knot positions and values differ in length.
TensionError
    Tension is not strictly positive.
NonIncreasingError
    Knots not strictly increasing, or query points unsorted.
InsufficientPointsError
    Fewer than three knots.
NumericDegeneracyError
    Non-finite coefficients, moments or values.
NotFittedError
    Spline moments were never solved.
ExtrapolationError
    Query point outside spline domain.

Warnings
--------
ExtrapolationWarning
    Query point outside spline domain with extrapolate='warn'.
"""

# Import base exception first
from ._spline_error import SplineError

# Import exception subclasses
from ._extrapolation_error import ExtrapolationError
from ._extrapolation_warning import ExtrapolationWarning
from ._insufficient_points_error import InsufficientPointsError
from ._length_mismatch_error import LengthMismatchError
from ._non_increasing_error import NonIncreasingError
from ._not_fitted_error import NotFittedError
from ._numeric_degeneracy_error import NumericDegeneracyError
from ._tension_error import TensionError

# Import spline implementation
from ._tension_spline import (
    TensionSpline,
    tension_spline,
    tension_spline_evaluate,
    tension_spline_fit,
)

__all__ = [
    "ExtrapolationError",
    "ExtrapolationWarning",
    "InsufficientPointsError",
    "LengthMismatchError",
    "NonIncreasingError",
    "NotFittedError",
    "NumericDegeneracyError",
    "SplineError",
    "TensionError",
    "TensionSpline",
    "tension_spline",
    "tension_spline_evaluate",
    "tension_spline_fit",
]

__version__ = "0.1.0"
