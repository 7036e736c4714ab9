"""
space package

Geometric grid descriptors: evenly spaced 1D linear spaces and their
compositions into 2D pixel grids and 3D voxel grids.
"""

from space.config import GridDefaults, DEFAULTS
from space.linear_space import LinearSpace, CellEdges
from space.axis_grid import AxisGrid
from space.pixel_grid import PixelGrid
from space.voxel_grid import VoxelGrid

__all__ = [
    "GridDefaults",
    "DEFAULTS",
    "LinearSpace",
    "CellEdges",
    "AxisGrid",
    "PixelGrid",
    "VoxelGrid",
]
