"""Tests for voxloader.core.palette — colours, palette assembly and the default table."""

import dataclasses

import numpy as np
import pytest
from voxloader.core.palette import (
    DEFAULT_PALETTE,
    DEFAULT_PALETTE_PACKED,
    PALETTE_SIZE,
    TRANSPARENT,
    Colour,
    Palette,
)


class TestColour:
    def test_packed_red_in_low_byte(self):
        assert Colour(0x11, 0x22, 0x33, 0x44).packed == 0x44332211

    def test_from_packed_reads_aabbggrr(self):
        assert Colour.from_packed(0xff0000ff) == Colour(255, 0, 0, 255)

    def test_from_packed_alpha_in_high_byte(self):
        c = Colour.from_packed(0x80000000)
        assert (c.r, c.g, c.b, c.a) == (0, 0, 0, 0x80)

    def test_packed_roundtrip(self):
        c = Colour(1, 2, 3, 4)
        assert Colour.from_packed(c.packed) == c

    def test_to_hex(self):
        assert Colour(255, 204, 0, 255).to_hex() == '#ffcc00ff'

    def test_to_float(self):
        assert Colour(255, 0, 0, 255).to_float() == (1.0, 0.0, 0.0, 1.0)

    def test_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            Colour().r = 1

    def test_transparent(self):
        assert TRANSPARENT.is_transparent
        assert not Colour(0, 0, 0, 255).is_transparent


class TestPalette:
    def test_requires_256_colours(self):
        with pytest.raises(ValueError):
            Palette([Colour()] * 255)

    def test_entry_zero_forced_transparent(self):
        palette = Palette([Colour(9, 9, 9, 9)] * PALETTE_SIZE)
        assert palette[0] == TRANSPARENT
        assert palette[1] == Colour(9, 9, 9, 9)

    def test_from_records_shifts_by_one(self):
        records = [Colour(i, i, i, 255) for i in range(255)]
        palette = Palette.from_records(records)
        assert len(palette) == 256
        assert palette[0] == TRANSPARENT
        for i in range(1, 256):
            assert palette[i] == records[i - 1]

    def test_from_records_requires_255(self):
        with pytest.raises(ValueError):
            Palette.from_records([Colour()] * 256)

    def test_get_colour_out_of_range(self):
        with pytest.raises(IndexError):
            DEFAULT_PALETTE.get_colour(256)

    def test_equality(self):
        assert Palette.from_packed(DEFAULT_PALETTE_PACKED) == DEFAULT_PALETTE
        assert Palette.from_records([Colour()] * 255) != DEFAULT_PALETTE

    def test_to_array(self):
        arr = DEFAULT_PALETTE.to_array()
        assert arr.shape == (256, 4)
        assert arr.dtype == np.uint8
        assert tuple(arr[1]) == (255, 255, 255, 255)

    def test_to_packed(self):
        packed = DEFAULT_PALETTE.to_packed()
        assert packed.dtype == np.uint32
        assert list(packed) == list(DEFAULT_PALETTE_PACKED)


class TestDefaultPalette:
    def test_size(self):
        assert len(DEFAULT_PALETTE_PACKED) == 256
        assert len(DEFAULT_PALETTE) == 256

    def test_entry_zero_transparent(self):
        assert DEFAULT_PALETTE[0] == Colour(0, 0, 0, 0)

    def test_first_entries(self):
        assert DEFAULT_PALETTE[1] == Colour(255, 255, 255, 255)
        assert DEFAULT_PALETTE[2] == Colour(255, 255, 204, 255)
        assert DEFAULT_PALETTE[7] == Colour(255, 204, 255, 255)

    def test_pure_red(self):
        assert DEFAULT_PALETTE[36] == Colour(255, 0, 0, 255)

    def test_grey_ramp_at_end(self):
        assert DEFAULT_PALETTE[246] == Colour(238, 238, 238, 255)
        assert DEFAULT_PALETTE[255] == Colour(17, 17, 17, 255)

    def test_all_but_zero_opaque(self):
        assert all(c.a == 255 for c in DEFAULT_PALETTE[1:])

    def test_default_classmethod(self):
        assert Palette.default() is DEFAULT_PALETTE
