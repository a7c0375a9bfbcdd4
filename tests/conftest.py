"""Shared fixtures: build .vox files in memory, chunk by chunk."""

import struct

import pytest


def chunk(chunk_id: bytes, content: bytes = b'', children: bytes = b'') -> bytes:
    return chunk_id + struct.pack('<II', len(content), len(children)) + content + children


def size_chunk(x: int, y: int, z: int) -> bytes:
    return chunk(b'SIZE', struct.pack('<iii', x, y, z))


def xyzi_chunk(voxels) -> bytes:
    content = struct.pack('<I', len(voxels))
    for voxel in voxels:
        content += struct.pack('<4B', *voxel)
    return chunk(b'XYZI', content)


def rgba_chunk(colours) -> bytes:
    content = b''.join(struct.pack('<4B', *c) for c in colours)
    # Trailing unused entry brings the chunk to 1024 bytes.
    content += b'\x00\x00\x00\x00'
    return chunk(b'RGBA', content)


def vox_file(*children: bytes, version: int = 150) -> bytes:
    return b'VOX ' + struct.pack('<I', version) + chunk(b'MAIN', children=b''.join(children))


@pytest.fixture
def vox():
    """Builders for .vox test data."""
    class Builders:
        pass

    b = Builders()
    b.chunk = chunk
    b.size = size_chunk
    b.xyzi = xyzi_chunk
    b.rgba = rgba_chunk
    b.file = vox_file
    return b


@pytest.fixture
def file_palette():
    """255 distinct colours, record i = (i, 255 - i, i // 2, 200)."""
    return [(i, 255 - i, i // 2, 200) for i in range(255)]


@pytest.fixture
def knight_bytes(vox, file_palette):
    """A small complete file: SIZE, XYZI, an unknown chunk and RGBA."""
    return vox.file(
        vox.size(3, 4, 5),
        vox.xyzi([(0, 0, 0, 1), (2, 3, 4, 7), (1, 1, 1, 255)]),
        vox.chunk(b'nTRN', b'\x01\x00\x00\x00' + b'\x00' * 8),
        vox.rgba(file_palette),
    )
