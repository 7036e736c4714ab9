"""
pixel_grid.py

Two-dimensional pixel grid composed of independent x and y linear spaces.

Order of all vector values is (x, y).
"""

from typing import Optional, Tuple

import numpy as np

from space.axis_grid import AxisGrid
from space.linear_space import CellEdges, LinearSpace


class PixelGrid(AxisGrid):
    """
    2D pixel grid defined by one LinearSpace per axis.

    Parameters
    ----------
    size : Sequence[float]
        Extent (x_size, y_size). Each must be positive.
    position : Sequence[float]
        Center (x, y) of the grid.
    num_pix : Sequence[int]
        Pixel counts (nx, ny). Each must be positive.
    dtype : dtype-like, optional
        Floating-point type shared by both axes.

    Raises
    ------
    ValidationError
        If a vector does not have exactly two components.
    InvalidDimensionError
        If a size or count is not positive. The x axis is checked first.

    Examples
    --------
    >>> grid = PixelGrid(size=(4.0, 2.0), position=(0.0, 1.0), num_pix=(8, 4))
    >>> grid.total_pixels
    32
    >>> grid.shape
    (8, 4)
    """

    AXIS_NAMES = ("x", "y")

    __slots__ = ()

    @property
    def x_space(self) -> LinearSpace:
        """The x-axis linear space."""
        return self._spaces[0]

    @property
    def y_space(self) -> LinearSpace:
        """The y-axis linear space."""
        return self._spaces[1]

    @property
    def pixel_size(self) -> np.ndarray:
        """Pixel width along x and y."""
        return self.cell_size

    @property
    def total_pixels(self) -> int:
        """Total number of pixels, nx * ny."""
        return self.total_cells

    def pixel_center(self, i: int, j: int) -> Tuple[np.floating, np.floating]:
        """
        Center of pixel (i, j).

        Raises
        ------
        IndexOutOfRangeError
            If either index is out of range for its axis.
        """
        return self._cell_center((i, j))

    def pixel_edges(self, i: int, j: int) -> Tuple[CellEdges, CellEdges]:
        """Edges of pixel (i, j) along x and y."""
        return self._cell_edges((i, j))

    def locate(self, x: float, y: float) -> Optional[Tuple[int, int]]:
        """
        Pixel indices containing point (x, y).

        Returns
        -------
        Optional[Tuple[int, int]]
            Indices (i, j), or None if out of bounds.
        """
        return self._locate((x, y))
