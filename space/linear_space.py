"""
linear_space.py

One-dimensional evenly spaced interval partitioned into equal-width cells.

A linear space is stored canonically as (center, size, num_pix) and can be
built either from that triple or from its outer edges. Cell centers and cell
edges are derived on demand and never cached.

Invariants
----------
- size > 0 and num_pix > 0 at all times
- center and size are finite scalars of the space's floating dtype
- pixel_size == size / num_pix
- Arithmetic is carried out in the space's dtype; cumulative rounding
  across many cells is expected and compared with a tolerance
"""

import logging
import math
from typing import Any, Iterator, List, NamedTuple, Optional, Tuple, Union

import numpy as np

from contracts.validation import (
    ValidationError,
    InvalidDimensionError,
    validate_count,
    validate_finite_scalar,
    validate_index,
    validate_positive,
    validate_range_order,
)
from space.config import DEFAULTS, axis_close

logger = logging.getLogger(__name__)


class CellEdges(NamedTuple):
    """
    Boundaries of a single cell.

    Attributes
    ----------
    start : float
        Lower boundary. Always less than ``end``.
    end : float
        Upper boundary.
    """
    start: float
    end: float

    @property
    def midpoint(self) -> float:
        """Center of the cell."""
        return (self.start + self.end) / 2

    @property
    def width(self) -> float:
        """Width of the cell."""
        return self.end - self.start


class LinearSpace:
    """
    1D interval of ``size`` centered on ``center``, split into ``num_pix`` cells.

    Parameters
    ----------
    center : float
        Mid-point of the interval. Must be finite.
    size : float
        Total extent of the interval. Must be finite and positive.
    num_pix : int
        Number of equal-width cells. Must be a positive integer.
    dtype : dtype-like, optional
        Floating-point type for all stored and derived values.
        Defaults to ``space.config.DEFAULTS.dtype`` (float64).

    Attributes
    ----------
    center : float
        Mid-point of the interval. Settable.
    size : float
        Total extent. Settable, re-validated on assignment.
    num_pix : int
        Number of cells. Settable, re-validated on assignment.
    pixel_size : float
        Width of one cell, ``size / num_pix``.
    start, stop : float
        Outer edges of the interval.

    Raises
    ------
    TypeError
        If values are not numeric, num_pix is not an integer, or dtype
        is not floating point.
    ValidationError
        If center or size is not finite.
    InvalidDimensionError
        If size or num_pix is not strictly positive.

    Notes
    -----
    Indexed access is checked. ``at(i)``, ``edges_at(i)`` and ``space[i]``
    raise ``IndexOutOfRangeError`` for any ``i`` outside ``[0, num_pix)``,
    negative indices included.

    Examples
    --------
    >>> space = LinearSpace.from_edges(-1.0, 1.0, 10)
    >>> float(space.center), float(space.size), len(space)
    (0.0, 2.0, 10)
    >>> float(space.at(0))
    -0.9
    """

    __slots__ = ("_dtype", "_center", "_size", "_num_pix")

    def __init__(
        self,
        center: float,
        size: float,
        num_pix: int,
        dtype: Optional[Any] = None,
    ) -> None:
        """Initialize a linear space from center, size and cell count."""
        self._dtype: np.dtype = DEFAULTS.resolve_dtype(dtype)
        self._center = self._coerce_center(center)
        self._size = self._coerce_size(size)
        self._num_pix: int = validate_count(num_pix, "num_pix")

    @classmethod
    def from_center_size(
        cls,
        center: float,
        size: float,
        num_pix: int,
        dtype: Optional[Any] = None,
    ) -> "LinearSpace":
        """
        Create a linear space from its mid-point and total extent.

        Equivalent to calling the constructor directly.

        Parameters
        ----------
        center : float
            Mid-point of the interval.
        size : float
            Total extent. Must be positive.
        num_pix : int
            Number of cells. Must be positive.
        dtype : dtype-like, optional
            Floating-point type.

        Returns
        -------
        LinearSpace
        """
        return cls(center, size, num_pix, dtype=dtype)

    @classmethod
    def from_edges(
        cls,
        start: float,
        stop: float,
        num_pix: int,
        dtype: Optional[Any] = None,
    ) -> "LinearSpace":
        """
        Create a linear space spanning ``[start, stop]``.

        The cell centers returned by ``grid()`` never include ``start`` or
        ``stop`` themselves: those are the outer boundaries of the first and
        last cell.

        Parameters
        ----------
        start : float
            Left edge. Must be less than ``stop``.
        stop : float
            Right edge. Must be greater than ``start``.
        num_pix : int
            Number of cells. Must be positive.
        dtype : dtype-like, optional
            Floating-point type.

        Returns
        -------
        LinearSpace

        Raises
        ------
        InvalidRangeError
            If ``stop <= start`` (after conversion to dtype).
        """
        resolved = DEFAULTS.resolve_dtype(dtype)
        validate_finite_scalar(start, "start")
        validate_finite_scalar(stop, "stop")

        lo = resolved.type(start)
        hi = resolved.type(stop)
        validate_range_order(lo, hi)

        logger.debug("LinearSpace from edges [%s, %s] with %s cells", lo, hi, num_pix)
        size = hi - lo
        # Midpoint without forming hi + lo, which can overflow near the dtype max
        return cls(lo + size / 2, size, num_pix, dtype=resolved)

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def _to_scalar(self, value: float, name: str) -> np.floating:
        """Convert to the space's dtype, rejecting non-finite results."""
        validate_finite_scalar(value, name)
        converted = self._dtype.type(value)
        # A finite double can still overflow a narrower dtype
        validate_finite_scalar(converted, name)
        return converted

    def _coerce_center(self, value: float) -> np.floating:
        return self._to_scalar(value, "center")

    def _coerce_size(self, value: float) -> np.floating:
        converted = self._to_scalar(value, "size")
        validate_positive(converted, "size", error=InvalidDimensionError)
        return converted

    # -------------------------------------------------------------------------
    # Stored state
    # -------------------------------------------------------------------------

    @property
    def dtype(self) -> np.dtype:
        """Floating-point type of all values produced by this space."""
        return self._dtype

    @property
    def center(self) -> np.floating:
        """Mid-point of the interval."""
        return self._center

    @center.setter
    def center(self, value: float) -> None:
        try:
            converted = self._coerce_center(value)
        except (TypeError, ValidationError) as e:
            logger.debug("Rejected center=%r: %s", value, e)
            raise
        self._center = converted

    @property
    def size(self) -> np.floating:
        """Total extent of the interval."""
        return self._size

    @size.setter
    def size(self, value: float) -> None:
        try:
            converted = self._coerce_size(value)
        except (TypeError, ValidationError) as e:
            logger.debug("Rejected size=%r: %s", value, e)
            raise
        self._size = converted

    @property
    def num_pix(self) -> int:
        """Number of cells."""
        return self._num_pix

    @num_pix.setter
    def num_pix(self, value: int) -> None:
        try:
            count = validate_count(value, "num_pix")
        except (TypeError, ValidationError) as e:
            logger.debug("Rejected num_pix=%r: %s", value, e)
            raise
        self._num_pix = count

    # -------------------------------------------------------------------------
    # Derived quantities
    # -------------------------------------------------------------------------

    @property
    def pixel_size(self) -> np.floating:
        """Width of a single cell."""
        return self._size / self._dtype.type(self._num_pix)

    @property
    def start(self) -> np.floating:
        """Lower outer edge of the interval."""
        return self._center - self._size / 2

    @property
    def stop(self) -> np.floating:
        """Upper outer edge of the interval."""
        return self._center + self._size / 2

    @property
    def bounds(self) -> Tuple[np.floating, np.floating]:
        """Outer edges ``(start, stop)``."""
        return (self.start, self.stop)

    def _first_center(self) -> np.floating:
        return self._center - self._size / 2 + self.pixel_size / 2

    def grid(self) -> np.ndarray:
        """
        Cell centers in increasing order.

        Returns
        -------
        np.ndarray
            Fresh 1D array of length ``num_pix`` with the space's dtype.
            Cell ``i`` is centered on
            ``center - size/2 + pixel_size/2 + i * pixel_size``.
        """
        idx = np.arange(self._num_pix, dtype=self._dtype)
        return self._first_center() + idx * self.pixel_size

    def boundaries(self) -> np.ndarray:
        """
        All cell boundaries in increasing order.

        Returns
        -------
        np.ndarray
            1D array of length ``num_pix + 1``. Element ``i`` is
            ``center - size/2 + i * pixel_size``.
        """
        idx = np.arange(self._num_pix + 1, dtype=self._dtype)
        return self.start + idx * self.pixel_size

    def edge_array(self) -> np.ndarray:
        """
        Cell edges as a ``(num_pix, 2)`` array of ``(start, end)`` rows.

        Consecutive cells share a boundary exactly.
        """
        bounds = self.boundaries()
        return np.column_stack((bounds[:-1], bounds[1:]))

    def edges(self) -> List[CellEdges]:
        """
        Cell edges in increasing order.

        Returns
        -------
        List[CellEdges]
            One ``(start, end)`` pair per cell, ``start < end``.
        """
        bounds = self.boundaries()
        return [CellEdges(bounds[i], bounds[i + 1]) for i in range(self._num_pix)]

    def at(self, index: int) -> np.floating:
        """
        Center of cell ``index`` without materializing the grid.

        Parameters
        ----------
        index : int
            Cell index in ``[0, num_pix)``.

        Returns
        -------
        float
            Same value as ``grid()[index]``.

        Raises
        ------
        IndexOutOfRangeError
            If index is outside ``[0, num_pix)``.
        """
        idx = validate_index(index, self._num_pix)
        return self._first_center() + self._dtype.type(idx) * self.pixel_size

    def edges_at(self, index: int) -> CellEdges:
        """
        Edges of cell ``index`` without materializing the full list.

        Raises
        ------
        IndexOutOfRangeError
            If index is outside ``[0, num_pix)``.
        """
        idx = validate_index(index, self._num_pix)
        origin = self.start
        step = self.pixel_size
        return CellEdges(
            origin + self._dtype.type(idx) * step,
            origin + self._dtype.type(idx + 1) * step,
        )

    def index_of(self, x: float) -> Optional[int]:
        """
        Index of the cell containing coordinate ``x``.

        Cells are half-open ``[start_i, end_i)``; the upper outer edge
        belongs to no cell.

        Parameters
        ----------
        x : float
            Coordinate in the space's units.

        Returns
        -------
        Optional[int]
            Cell index, or None if ``x`` lies outside ``[start, stop)``.
        """
        validate_finite_scalar(x, "x")
        value = self._dtype.type(x)
        lo, hi = self.bounds
        if not lo <= value < hi:
            return None

        idx = math.floor((value - lo) / self.pixel_size)
        return min(max(idx, 0), self._num_pix - 1)

    # -------------------------------------------------------------------------
    # Comparison and copying
    # -------------------------------------------------------------------------

    def isclose(self, other: "LinearSpace", rel_tol: Optional[float] = None) -> bool:
        """
        Approximate equality with another linear space.

        Cell counts must match exactly. Centers and sizes must agree
        to within ``rel_tol`` times the larger of the two sizes.

        Parameters
        ----------
        other : LinearSpace
            Space to compare with. May use a different dtype.
        rel_tol : float, optional
            Relative tolerance. Defaults to ``DEFAULTS.tolerance``.
        """
        if not isinstance(other, LinearSpace):
            raise TypeError(f"other must be LinearSpace, got {type(other).__name__}")

        tol = DEFAULTS.resolve_tolerance(rel_tol)
        scale = max(float(self._size), float(other._size))
        return (
            self._num_pix == other._num_pix
            and axis_close(self._center, other._center, scale, tol)
            and axis_close(self._size, other._size, scale, tol)
        )

    def copy(self) -> "LinearSpace":
        """Independent copy of this space."""
        return LinearSpace(self._center, self._size, self._num_pix, dtype=self._dtype)

    # -------------------------------------------------------------------------
    # Sequence protocol
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return self._num_pix

    def __getitem__(self, key: Union[int, slice]) -> Union[np.floating, np.ndarray]:
        """Cell center by index, or an array of centers for a slice."""
        if isinstance(key, slice):
            return self.grid()[key]
        return self.at(key)

    def __iter__(self) -> Iterator[np.floating]:
        return iter(self.grid())

    def __eq__(self, other: object) -> bool:
        """
        Exact equality.

        Two spaces are equal if they share dtype, center, size and num_pix.
        """
        if not isinstance(other, LinearSpace):
            return NotImplemented

        return bool(
            self._dtype == other._dtype
            and self._center == other._center
            and self._size == other._size
            and self._num_pix == other._num_pix
        )

    # Mutable through its setters
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        """Concise string representation."""
        return (
            f"LinearSpace(center={float(self._center)}, "
            f"size={float(self._size)}, "
            f"num_pix={self._num_pix}, "
            f"dtype={self._dtype.name})"
        )
