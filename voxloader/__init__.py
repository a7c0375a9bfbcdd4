"""
VoxLoader - MagicaVoxel Model Loader
====================================

Loads MagicaVoxel .vox files into an immutable in-memory model:
- Declared grid size
- Voxel list in file order (x, y, z, palette index)
- 256-colour RGBA palette, index 0 transparent

Version: 1.0.0
"""

__version__ = "1.0.0"
__license__ = "MIT"

from voxloader.core.voxel_model import Model, Voxel
from voxloader.core.palette import Colour, Palette, DEFAULT_PALETTE
from voxloader.formats.vox import VoxFormat, load, loads
from voxloader.errors import VoxError, InvalidFormatError, TruncatedDataError, MissingDataError

__all__ = [
    'Model', 'Voxel', 'Colour', 'Palette', 'DEFAULT_PALETTE',
    'VoxFormat', 'load', 'loads',
    'VoxError', 'InvalidFormatError', 'TruncatedDataError', 'MissingDataError',
    '__version__',
]
