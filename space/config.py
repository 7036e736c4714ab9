"""
config.py

Library-wide defaults for grid construction and comparison.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Optional

import numpy as np

from contracts.validation import (
    ValidationError,
    validate_finite_scalar,
    validate_float_dtype,
    validate_positive,
)


@dataclass(frozen=True)
class GridDefaults:
    """
    Default parameters shared by all grid types.

    Parameters
    ----------
    dtype : dtype-like
        Floating-point type used when a constructor receives ``dtype=None``.
    tolerance : float
        Relative tolerance used by ``isclose``. Scaled by the axis size.
    """

    dtype: Any = field(default=np.float64)
    tolerance: float = 1e-6

    def __post_init__(self) -> None:
        """Validate and normalize fields."""
        object.__setattr__(self, "dtype", validate_float_dtype(self.dtype))

        validate_finite_scalar(self.tolerance, "tolerance")
        validate_positive(self.tolerance, "tolerance")
        if self.tolerance >= 1.0:
            raise ValidationError(f"tolerance must be < 1, got {self.tolerance}")

    def resolve_dtype(self, dtype: Optional[Any]) -> np.dtype:
        """Return ``dtype`` normalized, or the default when it is None."""
        if dtype is None:
            return self.dtype
        return validate_float_dtype(dtype)

    def resolve_tolerance(self, rel_tol: Optional[float]) -> float:
        """Return ``rel_tol`` validated, or the default when it is None."""
        if rel_tol is None:
            return self.tolerance
        validate_finite_scalar(rel_tol, "rel_tol")
        validate_positive(rel_tol, "rel_tol", allow_zero=True)
        return float(rel_tol)


DEFAULTS = GridDefaults()


def axis_close(a: float, b: float, scale: float, rel_tol: float) -> bool:
    """True if ``a`` and ``b`` agree to within ``rel_tol * scale``."""
    return math.isclose(float(a), float(b), rel_tol=0.0, abs_tol=rel_tol * float(scale))
