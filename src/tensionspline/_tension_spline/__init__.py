from ._tension_spline import (
    TensionSpline,
    tension_spline,
)
from ._tension_spline_evaluate import tension_spline_evaluate
from ._tension_spline_fit import tension_spline_fit

__all__ = [
    "TensionSpline",
    "tension_spline",
    "tension_spline_evaluate",
    "tension_spline_fit",
]
