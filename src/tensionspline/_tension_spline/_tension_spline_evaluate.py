from __future__ import annotations

import warnings
from typing import TYPE_CHECKING, Sequence, Union

import torch
from torch import Tensor

from .._extrapolation_error import ExtrapolationError
from .._extrapolation_warning import ExtrapolationWarning
from .._non_increasing_error import NonIncreasingError
from .._not_fitted_error import NotFittedError
from .._numeric_degeneracy_error import NumericDegeneracyError
from ._tension_spline_fit import WORKING_DTYPE

if TYPE_CHECKING:
    from ._tension_spline import TensionSpline


def tension_spline_evaluate(
    spline: TensionSpline,
    t: Union[Tensor, Sequence[float]],
) -> Tensor:
    """
    Evaluate a tension spline at query points.

    Parameters
    ----------
    spline : TensionSpline
        Fitted tension spline from tension_spline_fit
    t : Tensor or sequence of float
        Query points, shape (*query_shape) or scalar. Must be sorted in
        non-decreasing order once flattened.

    Returns
    -------
    y : Tensor
        Interpolated values, shape (*query_shape), in the dtype of
        spline.knots. The basis is evaluated in float64.

    Raises
    ------
    NotFittedError
        If the spline moments have not been solved.
    NonIncreasingError
        If the query points are not sorted.
    ExtrapolationError
        If any query point is outside the spline domain and
        spline.extrapolate == 'error'
    NumericDegeneracyError
        If any evaluated term is non-finite.

    Warns
    -----
    ExtrapolationWarning
        If any query point is outside the spline domain and
        spline.extrapolate == 'warn'
    """
    if not bool(spline.fitted):
        raise NotFittedError("Spline has not been fitted")

    output_dtype = spline.knots.dtype
    knots = spline.knots.to(WORKING_DTYPE)
    values = spline.knot_values.to(WORKING_DTYPE)
    moments = spline.moments.to(WORKING_DTYPE)
    h = spline.intervals.to(WORKING_DTYPE)
    tau = spline.tension.to(WORKING_DTYPE)
    extrapolate = spline.extrapolate

    if not isinstance(t, Tensor):
        t = torch.as_tensor(t, dtype=WORKING_DTYPE, device=knots.device)
    else:
        t = t.to(WORKING_DTYPE)

    # Check if t is scalar (0-d tensor)
    is_scalar = t.dim() == 0
    if is_scalar:
        t = t.unsqueeze(0)

    query_shape = t.shape
    t_flat = t.flatten()

    if t_flat.numel() > 1 and torch.any(t_flat[1:] < t_flat[:-1]):
        raise NonIncreasingError("Query points must be sorted")

    # Get domain bounds
    t_min = knots[0]
    t_max = knots[-1]

    if extrapolate in ("warn", "error"):
        outside = torch.any(t_flat < t_min) or torch.any(t_flat > t_max)
        if outside and extrapolate == "error":
            raise ExtrapolationError(
                f"Query points outside spline domain [{t_min.item()}, {t_max.item()}]"
            )
        if outside:
            warnings.warn(
                f"Extrapolating outside spline domain [{t_min.item()}, {t_max.item()}]",
                ExtrapolationWarning,
                stacklevel=2,
            )
    elif extrapolate == "clamp":
        t_flat = torch.clamp(t_flat, t_min, t_max)

    # Segment i is the first with t <= knots[i+1]; a query on an interior
    # knot belongs to the segment on its left. Queries before knots[0] or
    # after knots[-1] land in the first or last segment.
    segment_idx = torch.searchsorted(knots[1:-1].contiguous(), t_flat)

    t_left = knots[segment_idx]
    t_right = knots[segment_idx + 1]
    y_left = values[segment_idx]
    y_right = values[segment_idx + 1]
    z_left = moments[segment_idx]
    z_right = moments[segment_idx + 1]
    h_seg = h[segment_idx]

    tau_sq = tau * tau
    dx_right = t_right - t_flat
    dx_left = t_flat - t_left

    sinh_tau_h = torch.sinh(tau * h_seg)
    sinh_right = torch.sinh(tau * dx_right)
    sinh_left = torch.sinh(tau * dx_left)

    term1 = (z_left * sinh_right + z_right * sinh_left) / (tau_sq * sinh_tau_h)
    term2 = (y_left - z_left / tau_sq) * dx_right / h_seg
    term3 = (y_right - z_right / tau_sq) * dx_left / h_seg

    y = term1 + term2 + term3

    if not (
        torch.all(torch.isfinite(term1))
        and torch.all(torch.isfinite(term2))
        and torch.all(torch.isfinite(term3))
        and torch.all(torch.isfinite(y))
    ):
        raise NumericDegeneracyError(
            f"tension {tau.item()} is too small or too large for the "
            f"query range (non-finite spline values)"
        )

    y = y.view(*query_shape).to(output_dtype)

    # Handle scalar input: return scalar output
    if is_scalar:
        y = y.squeeze(0)

    return y
