"""
axis_grid.py

Shared implementation for grids composed of independent linear spaces.

A grid with N axes holds one LinearSpace per axis. Axes never interact:
each may have its own center, size and cell count. Vector-valued queries
return one component per axis in axis order (x, y[, z]).
"""

import logging
import math
from typing import Any, Optional, Sequence, Tuple

import numpy as np

from contracts.validation import validate_vector_length
from space.config import DEFAULTS
from space.linear_space import CellEdges, LinearSpace

logger = logging.getLogger(__name__)


class AxisGrid:
    """
    Base class for N-dimensional grids built from per-axis linear spaces.

    Subclasses set ``AXIS_NAMES`` and expose named accessors. Construction
    delegates to ``LinearSpace`` once per axis in axis order, so the first
    failing axis raises and no grid is produced.

    Parameters
    ----------
    size : sequence of float
        Total extent along each axis.
    position : sequence of float
        Center of the grid along each axis.
    num_pix : sequence of int
        Number of cells along each axis.
    dtype : dtype-like, optional
        Floating-point type shared by every axis.
    """

    AXIS_NAMES: Tuple[str, ...] = ()

    __slots__ = ("_spaces",)

    def __init__(
        self,
        size: Sequence[float],
        position: Sequence[float],
        num_pix: Sequence[int],
        dtype: Optional[Any] = None,
    ) -> None:
        """Initialize the grid, one axis at a time."""
        ndim = len(self.AXIS_NAMES)
        validate_vector_length(size, ndim, "size")
        validate_vector_length(position, ndim, "position")
        validate_vector_length(num_pix, ndim, "num_pix")

        resolved = DEFAULTS.resolve_dtype(dtype)
        self._spaces: Tuple[LinearSpace, ...] = tuple(
            LinearSpace(position[axis], size[axis], num_pix[axis], dtype=resolved)
            for axis in range(ndim)
        )
        logger.debug("Created %r", self)

    @classmethod
    def _from_validated(cls, spaces: Tuple[LinearSpace, ...]) -> "AxisGrid":
        grid = cls.__new__(cls)
        grid._spaces = spaces
        logger.debug("Created %r", grid)
        return grid

    @classmethod
    def from_spaces(cls, *spaces: LinearSpace) -> "AxisGrid":
        """
        Build a grid from existing per-axis linear spaces.

        The spaces are copied, so later changes to the arguments do not
        affect the grid.

        Raises
        ------
        ValidationError
            If the number of spaces does not match the grid's axes.
        TypeError
            If an argument is not a LinearSpace or the dtypes differ.
        """
        validate_vector_length(spaces, len(cls.AXIS_NAMES), "spaces")
        for name, space in zip(cls.AXIS_NAMES, spaces):
            if not isinstance(space, LinearSpace):
                raise TypeError(
                    f"{name}_space must be LinearSpace, got {type(space).__name__}"
                )

        dtypes = {space.dtype for space in spaces}
        if len(dtypes) != 1:
            names = ", ".join(sorted(dt.name for dt in dtypes))
            raise TypeError(f"all axes must share one dtype, got {names}")

        return cls._from_validated(tuple(space.copy() for space in spaces))

    @classmethod
    def from_edges(
        cls,
        start: Sequence[float],
        stop: Sequence[float],
        num_pix: Sequence[int],
        dtype: Optional[Any] = None,
    ) -> "AxisGrid":
        """
        Build a grid spanning ``[start[k], stop[k]]`` along each axis k.

        Raises
        ------
        InvalidRangeError
            If ``stop[k] <= start[k]`` for some axis.
        """
        ndim = len(cls.AXIS_NAMES)
        validate_vector_length(start, ndim, "start")
        validate_vector_length(stop, ndim, "stop")
        validate_vector_length(num_pix, ndim, "num_pix")

        resolved = DEFAULTS.resolve_dtype(dtype)
        spaces = tuple(
            LinearSpace.from_edges(start[axis], stop[axis], num_pix[axis], dtype=resolved)
            for axis in range(ndim)
        )
        return cls._from_validated(spaces)

    # -------------------------------------------------------------------------
    # Per-axis vectors
    # -------------------------------------------------------------------------

    @property
    def spaces(self) -> Tuple[LinearSpace, ...]:
        """The per-axis linear spaces in axis order."""
        return self._spaces

    @property
    def ndim(self) -> int:
        """Number of axes."""
        return len(self._spaces)

    @property
    def dtype(self) -> np.dtype:
        """Floating-point type shared by every axis."""
        return self._spaces[0].dtype

    def _vector(self, values: Sequence[Any]) -> np.ndarray:
        return np.array(values, dtype=self.dtype)

    @property
    def size(self) -> np.ndarray:
        """Total extent along each axis."""
        return self._vector([space.size for space in self._spaces])

    @property
    def position(self) -> np.ndarray:
        """Center of the grid along each axis."""
        return self._vector([space.center for space in self._spaces])

    @property
    def num_pix(self) -> np.ndarray:
        """Number of cells along each axis."""
        return np.array([space.num_pix for space in self._spaces], dtype=np.int64)

    @property
    def cell_size(self) -> np.ndarray:
        """Width of one cell along each axis."""
        return self._vector([space.pixel_size for space in self._spaces])

    @property
    def shape(self) -> Tuple[int, ...]:
        """Number of cells along each axis as a tuple."""
        return tuple(space.num_pix for space in self._spaces)

    @property
    def bounds(self) -> Tuple[Tuple[np.floating, np.floating], ...]:
        """Outer edges ``(start, stop)`` of each axis."""
        return tuple(space.bounds for space in self._spaces)

    @property
    def total_cells(self) -> int:
        """Product of the per-axis cell counts."""
        return math.prod(space.num_pix for space in self._spaces)

    # -------------------------------------------------------------------------
    # Cells
    # -------------------------------------------------------------------------

    def axes(self) -> Tuple[np.ndarray, ...]:
        """Cell centers of each axis, one 1D array per axis."""
        return tuple(space.grid() for space in self._spaces)

    def meshgrid(self) -> Tuple[np.ndarray, ...]:
        """
        Coordinates of every cell center.

        Returns
        -------
        Tuple[np.ndarray, ...]
            One array per axis, each with shape ``self.shape`` and
            ``ij`` indexing.
        """
        return tuple(np.meshgrid(*self.axes(), indexing="ij"))

    def _cell_center(self, indices: Sequence[int]) -> Tuple[np.floating, ...]:
        return tuple(space.at(idx) for space, idx in zip(self._spaces, indices))

    def _cell_edges(self, indices: Sequence[int]) -> Tuple[CellEdges, ...]:
        return tuple(space.edges_at(idx) for space, idx in zip(self._spaces, indices))

    def _locate(self, coords: Sequence[float]) -> Optional[Tuple[int, ...]]:
        indices = []
        for space, value in zip(self._spaces, coords):
            idx = space.index_of(value)
            if idx is None:
                return None
            indices.append(idx)
        return tuple(indices)

    # -------------------------------------------------------------------------
    # Comparison and copying
    # -------------------------------------------------------------------------

    def isclose(self, other: "AxisGrid", rel_tol: Optional[float] = None) -> bool:
        """Approximate equality, axis by axis (see ``LinearSpace.isclose``)."""
        if not isinstance(other, type(self)):
            raise TypeError(
                f"other must be {type(self).__name__}, got {type(other).__name__}"
            )
        return all(
            mine.isclose(theirs, rel_tol)
            for mine, theirs in zip(self._spaces, other._spaces)
        )

    def copy(self) -> "AxisGrid":
        """Independent copy of this grid."""
        return self._from_validated(tuple(space.copy() for space in self._spaces))

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._spaces == other._spaces

    # Axes are mutable through their setters
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        """Concise string representation."""
        return (
            f"{type(self).__name__}("
            f"size={tuple(float(v) for v in self.size)}, "
            f"position={tuple(float(v) for v in self.position)}, "
            f"num_pix={self.shape}, "
            f"dtype={self.dtype.name})"
        )
