"""
contracts/validation.py

Lightweight validation utilities for grid contract enforcement.

Provides scalar finiteness and positivity checks, cell count checks,
index bounds checks and dtype checks. All validators raise a subclass of
ValidationError (or IndexOutOfRangeError for indices) on failure.

Usage
-----
>>> from contracts.validation import validate_positive, validate_count
>>> validate_positive(2.5, "size", error=InvalidDimensionError)
>>> validate_count(10, "num_pix")
10
"""

import math
import numbers
from typing import Any, Sequence, Type

import numpy as np


class ValidationError(ValueError):
    """
    Raised when a contract validation fails.

    Subclass of ValueError for compatibility with existing error handling.
    """

    pass


class InvalidRangeError(ValidationError):
    """Raised when an edge-defined interval does not satisfy stop > start."""

    pass


class InvalidDimensionError(ValidationError):
    """Raised when a size or a cell count is not strictly positive."""

    pass


class IndexOutOfRangeError(IndexError):
    """
    Raised when a cell index falls outside [0, num_pix).

    Subclass of IndexError so that sequence-style iteration terminates on it.
    """

    pass


def validate_finite_scalar(
    value: float,
    name: str = "value",
) -> None:
    """
    Validate that a scalar value is finite.

    Parameters
    ----------
    value : float
        Value to validate.
    name : str
        Name for error messages.

    Raises
    ------
    ValidationError
        If value is inf or nan.
    TypeError
        If value is not numeric.
    """
    if isinstance(value, (bool, np.bool_, str, bytes)):
        raise TypeError(f"{name} must be numeric, got {type(value).__name__}")
    try:
        float_val = float(value)
    except (TypeError, ValueError) as e:
        raise TypeError(f"{name} must be numeric, got {type(value).__name__}") from e
    except OverflowError as e:
        raise ValidationError(
            f"{name} must be finite, got {type(value).__name__} too large for float"
        ) from e

    if not math.isfinite(float_val):
        raise ValidationError(f"{name} must be finite, got {value}")


def validate_positive(
    value: float,
    name: str = "value",
    allow_zero: bool = False,
    error: Type[ValidationError] = ValidationError,
) -> None:
    """
    Validate that a value is positive.

    Parameters
    ----------
    value : float
        Value to validate.
    name : str
        Name for error messages.
    allow_zero : bool
        If True, zero is acceptable.
    error : type
        ValidationError subclass to raise.

    Raises
    ------
    ValidationError
        If value is not positive (or non-negative if allow_zero).
    """
    if allow_zero:
        if value < 0:
            raise error(f"{name} must be non-negative, got {value}")
    else:
        if value <= 0:
            raise error(f"{name} must be positive, got {value}")


def validate_count(
    value: Any,
    name: str = "count",
) -> int:
    """
    Validate that a value is a strictly positive integer.

    Parameters
    ----------
    value : Any
        Value to validate. Python and numpy integers are accepted,
        booleans are not.
    name : str
        Name for error messages.

    Returns
    -------
    int
        The value as a Python int.

    Raises
    ------
    TypeError
        If value is not an integer.
    InvalidDimensionError
        If value is zero or negative.
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")

    count = int(value)
    validate_positive(count, name, error=InvalidDimensionError)
    return count


def validate_range_order(
    start: float,
    stop: float,
    start_name: str = "start",
    stop_name: str = "stop",
) -> None:
    """
    Validate that an interval is strictly increasing.

    Parameters
    ----------
    start, stop : float
        Interval bounds.
    start_name, stop_name : str
        Names for error messages.

    Raises
    ------
    InvalidRangeError
        If stop <= start.
    """
    if not stop > start:
        raise InvalidRangeError(
            f"{stop_name} must be greater than {start_name}, "
            f"got {start_name}={start}, {stop_name}={stop}"
        )


def validate_index(
    index: Any,
    length: int,
    name: str = "index",
) -> int:
    """
    Validate that an index lies in [0, length).

    Negative indices are rejected rather than wrapped.

    Parameters
    ----------
    index : Any
        Index to validate.
    length : int
        Number of addressable cells.
    name : str
        Name for error messages.

    Returns
    -------
    int
        The index as a Python int.

    Raises
    ------
    TypeError
        If index is not an integer.
    IndexOutOfRangeError
        If index is outside [0, length).
    """
    if isinstance(index, (bool, np.bool_)) or not isinstance(index, numbers.Integral):
        raise TypeError(f"{name} must be an integer, got {type(index).__name__}")

    idx = int(index)
    if not 0 <= idx < length:
        raise IndexOutOfRangeError(
            f"{name} {idx} out of range for {length} cells"
        )
    return idx


def validate_vector_length(
    value: Sequence[Any],
    expected_length: int,
    name: str = "vector",
) -> None:
    """
    Validate that a per-axis vector has one component per axis.

    Parameters
    ----------
    value : sequence
        Vector to validate (tuple, list or 1D ndarray).
    expected_length : int
        Required number of components.
    name : str
        Name for error messages.

    Raises
    ------
    TypeError
        If value has no length.
    ValidationError
        If the number of components differs.
    """
    try:
        length = len(value)
    except TypeError as e:
        raise TypeError(
            f"{name} must be a sequence of {expected_length} values, "
            f"got {type(value).__name__}"
        ) from e

    if length != expected_length:
        raise ValidationError(
            f"{name} must have {expected_length} components, got {length}"
        )


def validate_float_dtype(
    dtype: Any,
    name: str = "dtype",
) -> np.dtype:
    """
    Validate that dtype describes a floating-point type.

    Parameters
    ----------
    dtype : dtype-like
        Anything accepted by ``np.dtype``.
    name : str
        Name for error messages.

    Returns
    -------
    np.dtype
        The normalized dtype.

    Raises
    ------
    TypeError
        If dtype is not understood or is not floating point.

    Examples
    --------
    >>> validate_float_dtype(np.float32)
    dtype('float32')
    >>> validate_float_dtype(int)  # Raises
    """
    try:
        normalized = np.dtype(dtype)
    except TypeError as e:
        raise TypeError(f"{name} {dtype!r} is not a valid dtype") from e

    if not np.issubdtype(normalized, np.floating):
        raise TypeError(f"{name} must be a floating-point dtype, got {normalized}")
    return normalized
