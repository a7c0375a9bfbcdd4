"""
VoxLoader Errors
================

Exceptions raised while loading a .vox file.

All of them derive from ValueError so code that already treats a bad
file as a ValueError keeps working.
"""

from typing import Optional


class VoxError(ValueError):
    """Base class for every failure to load a .vox file."""


class InvalidFormatError(VoxError):
    """The leading signature is not 'VOX '."""

    def __init__(self, magic: bytes):
        self.magic = magic
        super().__init__(f"Not a VOX file: expected b'VOX ', got {magic!r}")


class TruncatedDataError(VoxError):
    """A header field or section payload ran past the end of the data."""

    def __init__(self, offset: int, requested: int, available: int,
                 what: Optional[str] = None):
        self.offset = offset
        self.requested = requested
        self.available = available
        self.what = what
        where = f" reading {what}" if what else ""
        super().__init__(
            f"Truncated VOX data{where} at offset {offset}: "
            f"needed {requested} bytes, {available} available"
        )


class MissingDataError(VoxError):
    """The chunk walk finished without ever seeing an XYZI chunk."""

    def __init__(self, message: str = "VOX file contains no voxel data"):
        super().__init__(message)


__all__ = ['VoxError', 'InvalidFormatError', 'TruncatedDataError', 'MissingDataError']
