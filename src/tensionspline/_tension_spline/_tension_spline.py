"""Tension spline interpolation."""

from typing import Callable, Sequence, Union

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from ._tension_spline_evaluate import tension_spline_evaluate
from ._tension_spline_fit import tension_spline_fit


@tensorclass
class TensionSpline:
    """Piecewise hyperbolic interpolant under tension.

    For segment i, with h = intervals[i] and tau = tension, the curve is:
    (z[i]*sinh(tau*(t[i+1]-x)) + z[i+1]*sinh(tau*(x-t[i]))) / (tau^2*sinh(tau*h))
    + (y[i] - z[i]/tau^2) * (t[i+1]-x)/h
    + (y[i+1] - z[i+1]/tau^2) * (x-t[i])/h
    where t = knots, y = knot_values and z = moments.

    Attributes
    ----------
    knots : Tensor
        Breakpoints, shape (n_knots,). Strictly increasing.
    knot_values : Tensor
        Data values at the knots, shape (n_knots,).
    tension : Tensor
        Tension parameter, shape (). Strictly positive.
    intervals : Tensor
        Knot spacing ``knots[1:] - knots[:-1]``, shape (n_knots - 1,).
    moments : Tensor
        Solved moments, shape (n_knots,). The first and last are zero
        (natural boundary).
    extrapolate : str
        Extrapolation mode: "extend", "warn", "clamp", "error".
    fitted : bool
        Whether the moments have been solved.

    Fields are read-only by convention: nothing in this package writes to a
    fitted spline, and tension_spline_fit copies its inputs. A new tension or
    new data needs a new fit. tension, intervals and moments are float64;
    knots and knot_values keep the input dtype, which is also the dtype of
    evaluated values.
    """

    knots: Tensor
    knot_values: Tensor
    tension: Tensor
    intervals: Tensor
    moments: Tensor
    extrapolate: str
    fitted: bool

    def evaluate(self, t: Union[Tensor, Sequence[float]]) -> Tensor:
        """Evaluate the spline at query points ``t``."""
        return tension_spline_evaluate(self, t)

    def is_fitted(self) -> bool:
        return bool(self.fitted)


def tension_spline(
    x: Union[Tensor, Sequence[float]],
    y: Union[Tensor, Sequence[float]],
    tension: Union[float, Tensor] = 1.0,
    extrapolate: str = "extend",
) -> Callable[[torch.Tensor], torch.Tensor]:
    """Create a tension spline interpolator from data.

    This is a convenience function that fits a tension spline and returns
    a callable that evaluates it.

    Parameters
    ----------
    x : Tensor or sequence of float
        Data x-coordinates. Must be strictly monotonically increasing.
    y : Tensor or sequence of float
        Data y-values, same length as x.
    tension : float or Tensor, optional
        Tension parameter. Small values approach a natural cubic spline,
        large values approach piecewise-linear interpolation. Default 1.0.
    extrapolate : str, optional
        How to handle out-of-domain queries. One of:

        - ``"extend"``: Extend the first and last segments (default).
        - ``"warn"``: Like ``"extend"``, but emit ExtrapolationWarning.
        - ``"clamp"``: Clamp to boundary values.
        - ``"error"``: Raise ExtrapolationError.

    Returns
    -------
    spline : Callable[[Tensor], Tensor]
        Function that evaluates the spline at given points.

    Examples
    --------
    >>> import torch
    >>> x = torch.linspace(0, 1, 10, dtype=torch.float64)
    >>> y = torch.sin(x * 2 * torch.pi)
    >>> f = tension_spline(x, y, tension=5.0)
    >>> f(torch.tensor([0.5], dtype=torch.float64))
    """
    fitted = tension_spline_fit(x, y, tension, extrapolate=extrapolate)
    return lambda t: tension_spline_evaluate(fitted, t)
