"""
Model - Loaded Voxel Data
=========================

The result of loading a .vox file: the declared grid size, the voxel list
in file order, and the 256-colour palette the voxels index into.
Everything here is immutable once the loader hands it over.
"""

import numpy as np
from typing import NamedTuple, Tuple
from dataclasses import dataclass, field

from voxloader.core.palette import Colour, Palette, DEFAULT_PALETTE


class Voxel(NamedTuple):
    """One voxel: local x, y, z coordinates and a palette index c."""
    x: int
    y: int
    z: int
    c: int


@dataclass(frozen=True)
class Model:
    """
    A voxel model as stored in a .vox file.

    Attributes:
        size: Declared (x, y, z) dimensions, passed through unvalidated
        voxels: Voxels in the order the file lists them
        palette: Colour table indexed by Voxel.c
    """

    size: Tuple[int, int, int] = (0, 0, 0)
    voxels: Tuple[Voxel, ...] = ()
    palette: Palette = field(default=DEFAULT_PALETTE, repr=False)

    def __post_init__(self):
        object.__setattr__(self, 'size', tuple(self.size))
        object.__setattr__(self, 'voxels', tuple(self.voxels))

    @property
    def voxel_count(self) -> int:
        return len(self.voxels)

    def colour_of(self, voxel: Voxel) -> Colour:
        """Look up the palette colour of a voxel."""
        return self.palette[voxel.c]

    def voxel_array(self) -> np.ndarray:
        """
        Get the voxel list as a (N, 4) uint8 array.

        Columns are x, y, z, c; rows keep file order.
        """
        if not self.voxels:
            return np.zeros((0, 4), dtype=np.uint8)
        return np.array(self.voxels, dtype=np.uint8)

    def to_dense(self) -> np.ndarray:
        """
        Scatter the voxels into a grid of shape `size`.

        Cells hold palette indices, 0 meaning empty. Voxels outside the
        declared size are dropped; later voxels overwrite earlier ones.
        """
        shape = tuple(max(0, int(s)) for s in self.size)
        grid = np.zeros(shape, dtype=np.uint8)

        data = self.voxel_array()
        inside = np.all(data[:, :3] < np.array(shape), axis=1)
        data = data[inside]
        grid[data[:, 0], data[:, 1], data[:, 2]] = data[:, 3]

        return grid

    def to_point_cloud(self) -> Tuple[np.ndarray, np.ndarray]:
        """
        Build renderer-ready points, one per voxel.

        MagicaVoxel is z-up; positions are mapped to a y-up space as
        (-x, z, y).

        Returns:
            Tuple of ((N, 3) float32 positions, (N, 4) uint8 RGBA colours)
        """
        data = self.voxel_array().astype(np.float32)
        positions = np.empty((len(data), 3), dtype=np.float32)
        positions[:, 0] = -data[:, 0]
        positions[:, 1] = data[:, 2]
        positions[:, 2] = data[:, 1]

        colours = self.palette.to_array()[self.voxel_array()[:, 3]]
        return positions, colours

    def get_bounds(self) -> Tuple[Tuple[int, int, int], Tuple[int, int, int]]:
        """
        Get the bounding box of the voxels actually present.

        Returns:
            Tuple of (min_corner, max_corner), both (0, 0, 0) for no voxels
        """
        if not self.voxels:
            return ((0, 0, 0), (0, 0, 0))

        coords = self.voxel_array()[:, :3]
        min_corner = tuple(int(v) for v in coords.min(axis=0))
        max_corner = tuple(int(v) for v in coords.max(axis=0))
        return (min_corner, max_corner)
