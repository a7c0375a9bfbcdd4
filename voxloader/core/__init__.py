"""
VoxLoader Core Module
=====================

Data structures produced by the loader.
"""

from voxloader.core.voxel_model import Model, Voxel
from voxloader.core.palette import Colour, Palette, DEFAULT_PALETTE, TRANSPARENT

__all__ = ['Model', 'Voxel', 'Colour', 'Palette', 'DEFAULT_PALETTE', 'TRANSPARENT']
