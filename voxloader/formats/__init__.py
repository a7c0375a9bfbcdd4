"""
VoxLoader Formats Module
========================

File format readers.
"""

from voxloader.formats.vox import VoxFormat, VoxReader, ChunkHeader, SectionView, load, loads

__all__ = ['VoxFormat', 'VoxReader', 'ChunkHeader', 'SectionView', 'load', 'loads']
