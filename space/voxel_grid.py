"""
voxel_grid.py

Three-dimensional voxel grid composed of independent x, y and z linear spaces.

Order of all vector values is (x, y, z).
"""

from typing import Optional, Tuple

import numpy as np

from space.axis_grid import AxisGrid
from space.linear_space import CellEdges, LinearSpace


class VoxelGrid(AxisGrid):
    """
    3D voxel grid defined by one LinearSpace per axis.

    Parameters
    ----------
    size : Sequence[float]
        Extent (x_size, y_size, z_size). Each must be positive.
    position : Sequence[float]
        Center (x, y, z) of the grid.
    num_pix : Sequence[int]
        Voxel counts (nx, ny, nz). Each must be positive.
    dtype : dtype-like, optional
        Floating-point type shared by all axes.

    Attributes
    ----------
    shape : Tuple[int, int, int]
        Grid shape (nx, ny, nz) in voxels.
    voxel_size : np.ndarray
        Voxel width along each axis.

    Raises
    ------
    ValidationError
        If a vector does not have exactly three components.
    InvalidDimensionError
        If a size or count is not positive. Axes are checked x, y, z.
    """

    AXIS_NAMES = ("x", "y", "z")

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
    def z_space(self) -> LinearSpace:
        """The z-axis linear space."""
        return self._spaces[2]

    @property
    def voxel_size(self) -> np.ndarray:
        """Voxel width along x, y and z."""
        return self.cell_size

    @property
    def total_voxels(self) -> int:
        """Total number of voxels, nx * ny * nz."""
        return self.total_cells

    def voxel_center(
        self, i: int, j: int, k: int
    ) -> Tuple[np.floating, np.floating, np.floating]:
        """
        Get the center of a voxel.

        Parameters
        ----------
        i, j, k : int
            Voxel indices.

        Returns
        -------
        Tuple[float, float, float]
            Coordinates (x, y, z).

        Raises
        ------
        IndexOutOfRangeError
            If any index is out of range for its axis.
        """
        return self._cell_center((i, j, k))

    def voxel_edges(self, i: int, j: int, k: int) -> Tuple[CellEdges, CellEdges, CellEdges]:
        """Edges of voxel (i, j, k) along x, y and z."""
        return self._cell_edges((i, j, k))

    def locate(self, x: float, y: float, z: float) -> Optional[Tuple[int, int, int]]:
        """
        Convert coordinates to voxel indices.

        Parameters
        ----------
        x, y, z : float
            Coordinates in the grid's units.

        Returns
        -------
        Optional[Tuple[int, int, int]]
            Voxel indices (i, j, k), or None if out of bounds.
        """
        return self._locate((x, y, z))
