"""
Palette - Colour Table for Loaded Models
========================================

A MagicaVoxel palette is exactly 256 RGBA colours addressed by a voxel's
colour index. Index 0 is reserved: it is always fully transparent and is
never stored in a file.
"""

import numpy as np
from typing import Iterable, Iterator, Tuple, Union
from dataclasses import dataclass


PALETTE_SIZE = 256


@dataclass(frozen=True)
class Colour:
    """A single RGBA32 colour."""
    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0

    @property
    def packed(self) -> int:
        """The colour as one 32-bit value, R in the least significant byte."""
        return self.r | (self.g << 8) | (self.b << 16) | (self.a << 24)

    @classmethod
    def from_packed(cls, value: int) -> 'Colour':
        """
        Create a colour from a packed 32-bit value.

        The literal reads as 0xAABBGGRR, so 0xff0000ff is opaque red.
        """
        return cls(
            r=value & 0xFF,
            g=(value >> 8) & 0xFF,
            b=(value >> 16) & 0xFF,
            a=(value >> 24) & 0xFF,
        )

    def to_tuple(self) -> Tuple[int, int, int, int]:
        """Return colour as RGBA tuple."""
        return (self.r, self.g, self.b, self.a)

    def to_hex(self) -> str:
        """Return colour as #rrggbbaa hex string."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}{self.a:02x}"

    def to_float(self) -> Tuple[float, float, float, float]:
        """Return colour as normalized float tuple (0-1 range)."""
        return (self.r / 255.0, self.g / 255.0, self.b / 255.0, self.a / 255.0)

    @property
    def is_transparent(self) -> bool:
        return self.packed == 0


TRANSPARENT = Colour(0, 0, 0, 0)


class Palette:
    """
    Read-only table of exactly 256 colours.

    Entry 0 is forced to TRANSPARENT whatever the caller passes in.
    """

    def __init__(self, colours: Iterable[Colour]):
        colours = tuple(colours)
        if len(colours) != PALETTE_SIZE:
            raise ValueError(
                f"Palette needs exactly {PALETTE_SIZE} colours, got {len(colours)}"
            )
        self._colours: Tuple[Colour, ...] = (TRANSPARENT,) + colours[1:]

    @classmethod
    def from_records(cls, records: Iterable[Colour]) -> 'Palette':
        """
        Assemble a palette from the 255 colours stored in an RGBA chunk.

        Stored record i lands in palette slot i + 1; slot 0 is transparent.
        """
        records = tuple(records)
        if len(records) != PALETTE_SIZE - 1:
            raise ValueError(
                f"Expected {PALETTE_SIZE - 1} palette records, got {len(records)}"
            )
        return cls((TRANSPARENT,) + records)

    @classmethod
    def from_packed(cls, values: Iterable[int]) -> 'Palette':
        """Create a palette from 256 packed 0xAABBGGRR values."""
        return cls(Colour.from_packed(v) for v in values)

    @classmethod
    def default(cls) -> 'Palette':
        """The palette used when a file has no RGBA chunk."""
        return DEFAULT_PALETTE

    def __getitem__(self, index: Union[int, slice]):
        return self._colours[index]

    def __len__(self) -> int:
        return PALETTE_SIZE

    def __iter__(self) -> Iterator[Colour]:
        return iter(self._colours)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Palette):
            return NotImplemented
        return self._colours == other._colours

    def __hash__(self) -> int:
        return hash(self._colours)

    def __repr__(self) -> str:
        return f"Palette({sum(not c.is_transparent for c in self._colours)} opaque colours)"

    def get_colour(self, index: int) -> Colour:
        """Get a colour by voxel colour index (0-255)."""
        if not 0 <= index < PALETTE_SIZE:
            raise IndexError(f"Palette index out of range: {index}")
        return self._colours[index]

    def to_array(self) -> np.ndarray:
        """Get the palette as a (256, 4) uint8 array of RGBA rows."""
        return np.array([c.to_tuple() for c in self._colours], dtype=np.uint8)

    def to_packed(self) -> np.ndarray:
        """Get the palette as 256 packed uint32 values."""
        return np.array([c.packed for c in self._colours], dtype=np.uint32)


# MagicaVoxel's built-in palette, packed as 0xAABBGGRR.
DEFAULT_PALETTE_PACKED: Tuple[int, ...] = (
    0x00000000, 0xffffffff, 0xffccffff, 0xff99ffff, 0xff66ffff, 0xff33ffff, 0xff00ffff, 0xffffccff,
    0xffccccff, 0xff99ccff, 0xff66ccff, 0xff33ccff, 0xff00ccff, 0xffff99ff, 0xffcc99ff, 0xff9999ff,
    0xff6699ff, 0xff3399ff, 0xff0099ff, 0xffff66ff, 0xffcc66ff, 0xff9966ff, 0xff6666ff, 0xff3366ff,
    0xff0066ff, 0xffff33ff, 0xffcc33ff, 0xff9933ff, 0xff6633ff, 0xff3333ff, 0xff0033ff, 0xffff00ff,
    0xffcc00ff, 0xff9900ff, 0xff6600ff, 0xff3300ff, 0xff0000ff, 0xffffffcc, 0xffccffcc, 0xff99ffcc,
    0xff66ffcc, 0xff33ffcc, 0xff00ffcc, 0xffffcccc, 0xffcccccc, 0xff99cccc, 0xff66cccc, 0xff33cccc,
    0xff00cccc, 0xffff99cc, 0xffcc99cc, 0xff9999cc, 0xff6699cc, 0xff3399cc, 0xff0099cc, 0xffff66cc,
    0xffcc66cc, 0xff9966cc, 0xff6666cc, 0xff3366cc, 0xff0066cc, 0xffff33cc, 0xffcc33cc, 0xff9933cc,
    0xff6633cc, 0xff3333cc, 0xff0033cc, 0xffff00cc, 0xffcc00cc, 0xff9900cc, 0xff6600cc, 0xff3300cc,
    0xff0000cc, 0xffffff99, 0xffccff99, 0xff99ff99, 0xff66ff99, 0xff33ff99, 0xff00ff99, 0xffffcc99,
    0xffcccc99, 0xff99cc99, 0xff66cc99, 0xff33cc99, 0xff00cc99, 0xffff9999, 0xffcc9999, 0xff999999,
    0xff669999, 0xff339999, 0xff009999, 0xffff6699, 0xffcc6699, 0xff996699, 0xff666699, 0xff336699,
    0xff006699, 0xffff3399, 0xffcc3399, 0xff993399, 0xff663399, 0xff333399, 0xff003399, 0xffff0099,
    0xffcc0099, 0xff990099, 0xff660099, 0xff330099, 0xff000099, 0xffffff66, 0xffccff66, 0xff99ff66,
    0xff66ff66, 0xff33ff66, 0xff00ff66, 0xffffcc66, 0xffcccc66, 0xff99cc66, 0xff66cc66, 0xff33cc66,
    0xff00cc66, 0xffff9966, 0xffcc9966, 0xff999966, 0xff669966, 0xff339966, 0xff009966, 0xffff6666,
    0xffcc6666, 0xff996666, 0xff666666, 0xff336666, 0xff006666, 0xffff3366, 0xffcc3366, 0xff993366,
    0xff663366, 0xff333366, 0xff003366, 0xffff0066, 0xffcc0066, 0xff990066, 0xff660066, 0xff330066,
    0xff000066, 0xffffff33, 0xffccff33, 0xff99ff33, 0xff66ff33, 0xff33ff33, 0xff00ff33, 0xffffcc33,
    0xffcccc33, 0xff99cc33, 0xff66cc33, 0xff33cc33, 0xff00cc33, 0xffff9933, 0xffcc9933, 0xff999933,
    0xff669933, 0xff339933, 0xff009933, 0xffff6633, 0xffcc6633, 0xff996633, 0xff666633, 0xff336633,
    0xff006633, 0xffff3333, 0xffcc3333, 0xff993333, 0xff663333, 0xff333333, 0xff003333, 0xffff0033,
    0xffcc0033, 0xff990033, 0xff660033, 0xff330033, 0xff000033, 0xffffff00, 0xffccff00, 0xff99ff00,
    0xff66ff00, 0xff33ff00, 0xff00ff00, 0xffffcc00, 0xffcccc00, 0xff99cc00, 0xff66cc00, 0xff33cc00,
    0xff00cc00, 0xffff9900, 0xffcc9900, 0xff999900, 0xff669900, 0xff339900, 0xff009900, 0xffff6600,
    0xffcc6600, 0xff996600, 0xff666600, 0xff336600, 0xff006600, 0xffff3300, 0xffcc3300, 0xff993300,
    0xff663300, 0xff333300, 0xff003300, 0xffff0000, 0xffcc0000, 0xff990000, 0xff660000, 0xff330000,
    0xff0000ee, 0xff0000dd, 0xff0000bb, 0xff0000aa, 0xff000088, 0xff000077, 0xff000055, 0xff000044,
    0xff000022, 0xff000011, 0xff00ee00, 0xff00dd00, 0xff00bb00, 0xff00aa00, 0xff008800, 0xff007700,
    0xff005500, 0xff004400, 0xff002200, 0xff001100, 0xffee0000, 0xffdd0000, 0xffbb0000, 0xffaa0000,
    0xff880000, 0xff770000, 0xff550000, 0xff440000, 0xff220000, 0xff110000, 0xffeeeeee, 0xffdddddd,
    0xffbbbbbb, 0xffaaaaaa, 0xff888888, 0xff777777, 0xff555555, 0xff444444, 0xff222222, 0xff111111,
)

DEFAULT_PALETTE = Palette.from_packed(DEFAULT_PALETTE_PACKED)
