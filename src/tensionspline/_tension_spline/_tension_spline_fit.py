"""Tension spline fitting with natural boundary conditions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence, Union

import torch
from torch import Tensor

from .._insufficient_points_error import InsufficientPointsError
from .._length_mismatch_error import LengthMismatchError
from .._non_increasing_error import NonIncreasingError
from .._numeric_degeneracy_error import NumericDegeneracyError
from .._tension_error import TensionError

if TYPE_CHECKING:
    from ._tension_spline import TensionSpline

EXTRAPOLATE_MODES = ("extend", "warn", "clamp", "error")

WORKING_DTYPE = torch.float64

COEFFICIENT_RESOLUTION = 1e6 * torch.finfo(WORKING_DTYPE).eps


def _as_floating(value: Union[Tensor, Sequence[float]]) -> Tensor:
    if not isinstance(value, Tensor):
        return torch.as_tensor(value, dtype=torch.float64)
    if not value.is_floating_point():
        return value.to(torch.float64)
    return value


def tension_spline_fit(
    x: Union[Tensor, Sequence[float]],
    y: Union[Tensor, Sequence[float]],
    tension: Union[float, Tensor],
    extrapolate: str = "extend",
) -> TensionSpline:
    """
    Fit a tension spline to data points.

    Parameters
    ----------
    x : Tensor or sequence of float
        Knot positions, shape (n_points,). Must be strictly increasing.
    y : Tensor or sequence of float
        Values at knots, shape (n_points,).
    tension : float or Tensor
        Tension parameter, strictly positive.
    extrapolate : str
        Extrapolation mode: "extend", "warn", "clamp", "error".

    Returns
    -------
    TensionSpline
        Fitted spline.

    Raises
    ------
    LengthMismatchError
        If x and y have different lengths.
    TensionError
        If tension is not strictly positive.
    NonIncreasingError
        If x is not strictly increasing.
    InsufficientPointsError
        If fewer than 3 points are given.
    NumericDegeneracyError
        If the tension is too small or too large for the knot spacing:
        non-finite coefficients or moments, a singular system, or
        coefficients below the float64 resolution.

    Notes
    -----
    With h[i] = x[i+1] - x[i], the moments z solve the (n+1) x (n+1) system

        a[r-1]*z[r-1] + (b[r-1] + b[r])*z[r] + a[r]*z[r+1] = g[r] - g[r-1]

    for interior rows r, with z[0] = z[n] = 0, where

        a[i] = 1/h[i] - tension/sinh(tension*h[i])
        b[i] = tension*cosh(tension*h[i])/sinh(tension*h[i]) - 1/h[i]
        g[i] = tension^2 * (y[i+1] - y[i]) / h[i]

    The system is solved densely with LU and partial pivoting. Moments,
    intervals and tension are kept in float64 whatever the input dtype;
    knots and knot values keep the input dtype.
    """
    if extrapolate not in EXTRAPOLATE_MODES:
        raise ValueError(
            f"Unknown extrapolation mode: {extrapolate}, "
            f"expected one of {EXTRAPOLATE_MODES}"
        )

    x = _as_floating(x)
    y = _as_floating(y)

    if x.dim() != 1 or y.dim() != 1:
        raise ValueError(
            f"x and y must be one-dimensional, got shapes "
            f"{tuple(x.shape)} and {tuple(y.shape)}"
        )

    dtype = torch.promote_types(x.dtype, y.dtype)
    x = x.to(dtype=dtype)
    y = y.to(dtype=dtype, device=x.device)

    # The z/tension^2 terms cancel against the data at low tension, so the
    # system is built, solved and later evaluated in float64
    x_work = x.to(WORKING_DTYPE)
    y_work = y.to(WORKING_DTYPE)
    tension = torch.as_tensor(tension, dtype=WORKING_DTYPE, device=x.device)

    if tension.dim() != 0:
        raise ValueError(
            f"tension must be a scalar, got shape {tuple(tension.shape)}"
        )

    n = x.shape[0]

    # Validate inputs
    if n != y.shape[0]:
        raise LengthMismatchError(
            f"x and y must have the same length, got {n} and {y.shape[0]}"
        )
    if not bool(tension > 0):
        raise TensionError(f"tension must be positive, got {tension.item()}")
    if not torch.all(x_work[1:] > x_work[:-1]):
        raise NonIncreasingError("Knots must be strictly increasing")
    if n < 3:
        raise InsufficientPointsError(f"Need at least 3 points, got {n}")

    # Compute interval widths
    h = x_work[1:] - x_work[:-1]  # (n-1,)

    tau_h = tension * h
    sinh_tau_h = torch.sinh(tau_h)

    g = tension**2 * (y_work[1:] - y_work[:-1]) / h
    a = 1 / h - tension / sinh_tau_h
    b = tension * torch.cosh(tau_h) / sinh_tau_h - 1 / h

    if not (
        torch.all(torch.isfinite(a))
        and torch.all(torch.isfinite(b))
        and torch.all(torch.isfinite(g))
    ):
        raise NumericDegeneracyError(
            f"tension {tension.item()} is too small or too large for the "
            f"knot spacing (non-finite system coefficients)"
        )

    # Natural boundary rows are the identity: z[0] = z[n-1] = 0
    one = torch.ones(1, dtype=WORKING_DTYPE, device=x.device)
    zero = torch.zeros(1, dtype=WORKING_DTYPE, device=x.device)

    diag = torch.cat([one, b[:-1] + b[1:], one])  # (n,)
    upper = torch.cat([zero, a[1:]])  # (n-1,)
    lower = torch.cat([a[:-1], zero])  # (n-1,)

    system = torch.diag(diag) + torch.diag(upper, 1) + torch.diag(lower, -1)
    rhs = torch.cat([zero, g[1:] - g[:-1], zero])  # (n,)

    try:
        z = torch.linalg.solve(system, rhs)
    except torch.linalg.LinAlgError as error:
        raise NumericDegeneracyError(
            f"tension {tension.item()} yields a singular moment system"
        ) from error

    if not torch.all(torch.isfinite(z)):
        raise NumericDegeneracyError(
            f"tension {tension.item()} is too small or too large for the "
            f"knot spacing (non-finite moments)"
        )

    # a*h and b*h behave like (tension*h)^2 / 6 and (tension*h)^2 / 3 for
    # small tension*h; below the resolution they are rounding noise and the
    # moments solved from them are meaningless
    if not (
        torch.all(a * h > COEFFICIENT_RESOLUTION)
        and torch.all(b * h > COEFFICIENT_RESOLUTION)
    ):
        raise NumericDegeneracyError(
            f"tension {tension.item()} is too small for the knot spacing "
            f"(system coefficients lost all significance)"
        )

    # Lazy import to avoid circular dependency
    from ._tension_spline import TensionSpline

    return TensionSpline(
        knots=x.clone(),
        knot_values=y.clone(),
        tension=tension.clone(),
        intervals=h,
        moments=z,
        extrapolate=extrapolate,
        fitted=True,
        batch_size=[],
    )
