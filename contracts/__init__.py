"""
contracts

Validation contracts shared by the grid types.

Every grid enforces its invariants at construction and on mutation through
the validators defined here. A failed check raises immediately and leaves
any existing instance unchanged.

Errors
------
ValidationError : Base class for contract failures (subclass of ValueError)
InvalidRangeError : Edge-defined interval with stop <= start
InvalidDimensionError : Non-positive size or cell count
IndexOutOfRangeError : Cell index outside [0, num_pix) (subclass of IndexError)
"""

from contracts.validation import (
    ValidationError,
    InvalidRangeError,
    InvalidDimensionError,
    IndexOutOfRangeError,
    validate_finite_scalar,
    validate_positive,
    validate_count,
    validate_range_order,
    validate_index,
    validate_vector_length,
    validate_float_dtype,
)

__all__ = [
    # Errors
    "ValidationError",
    "InvalidRangeError",
    "InvalidDimensionError",
    "IndexOutOfRangeError",
    # Validators
    "validate_finite_scalar",
    "validate_positive",
    "validate_count",
    "validate_range_order",
    "validate_index",
    "validate_vector_length",
    "validate_float_dtype",
]
