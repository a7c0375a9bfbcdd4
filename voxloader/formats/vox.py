"""
MagicaVoxel .vox File Loader
============================

Reads a MagicaVoxel .vox file into a Model in one forward pass.

VOX File Format:
- Little-endian byte order throughout
- File starts with the 'VOX ' magic number and a 32-bit version
- Then a flat run of chunks: 4-byte id, content size N, children size M,
  then N bytes of content
- Only SIZE, XYZI and RGBA are decoded; every other chunk is skipped

Chunk walking advances by the content size only, never by the children
size. The top-level MAIN chunk has no content, so this lands on its first
child; SIZE, XYZI and RGBA never carry children of their own.
"""

import io
import os
import struct
import logging
from contextlib import closing
from dataclasses import dataclass
from typing import BinaryIO, Iterator, List, Optional, Tuple, Union

from voxloader.core.palette import Colour, Palette, PALETTE_SIZE, DEFAULT_PALETTE
from voxloader.core.voxel_model import Model, Voxel
from voxloader.errors import InvalidFormatError, MissingDataError, TruncatedDataError

logger = logging.getLogger(__name__)

PathOrStream = Union[str, os.PathLike, BinaryIO]

_UINT32 = struct.Struct('<I')
_SIZE = struct.Struct('<iii')
_RECORD = struct.Struct('<4B')


@dataclass(frozen=True)
class ChunkHeader:
    """Header of one chunk, plus where its content starts in the file."""
    id: bytes
    content_size: int
    children_size: int
    content_offset: int

    @property
    def name(self) -> str:
        return self.id.decode('ascii', errors='replace')


class SectionView:
    """
    Read-only cursor over one chunk's content bytes.

    The view is bounded to the chunk's declared content size; reading past
    the bytes actually present raises TruncatedDataError.
    """

    def __init__(self, data: bytes, base_offset: int, name: str):
        self._data = memoryview(data)
        self._pos = 0
        self.base_offset = base_offset
        self.name = name

    @property
    def remaining(self) -> int:
        return len(self._data) - self._pos

    def read(self, n: int, what: str) -> bytes:
        if n > self.remaining:
            raise TruncatedDataError(self.base_offset + self._pos, n, self.remaining,
                                     f"{self.name} {what}")
        chunk = self._data[self._pos:self._pos + n].tobytes()
        self._pos += n
        return chunk

    def unpack(self, fmt: struct.Struct, what: str) -> Tuple:
        return fmt.unpack(self.read(fmt.size, what))


class VoxReader:
    """Forward-only byte cursor over a seekable binary stream."""

    def __init__(self, stream: BinaryIO):
        self._stream = stream
        start = stream.tell()
        self.length = stream.seek(0, io.SEEK_END)
        stream.seek(start)

    def tell(self) -> int:
        return self._stream.tell()

    def seek(self, position: int):
        self._stream.seek(position)

    @property
    def remaining(self) -> int:
        return max(0, self.length - self.tell())

    @property
    def at_end(self) -> bool:
        return self.tell() >= self.length

    def read(self, n: int, what: str) -> bytes:
        offset = self.tell()
        data = self._stream.read(n)
        if len(data) < n:
            raise TruncatedDataError(offset, n, len(data), what)
        return data

    def read_upto(self, n: int) -> bytes:
        """Read at most n bytes without a length check."""
        return self._stream.read(n)

    def read_uint32(self, what: str) -> int:
        return _UINT32.unpack(self.read(_UINT32.size, what))[0]

    def read_view(self, chunk: ChunkHeader) -> SectionView:
        """Read the content of a chunk, as much of it as the stream holds."""
        available = min(chunk.content_size, self.remaining)
        return SectionView(self._stream.read(available), chunk.content_offset, chunk.name)


class VoxFormat:
    """
    MagicaVoxel .vox loader.

    Decodes the SIZE, XYZI and RGBA chunks and ignores everything else
    (scene graph, materials, layers, notes).
    """

    MAGIC = b'VOX '
    CHUNK_SIZE = b'SIZE'
    CHUNK_XYZI = b'XYZI'
    CHUNK_RGBA = b'RGBA'
    PALETTE_RECORDS = PALETTE_SIZE - 1

    @classmethod
    def load(cls, source: PathOrStream) -> Model:
        """
        Load a model from a path or an open binary stream.

        A stream must be seekable and positioned at the start of the file.
        It is closed before this returns or raises.

        Raises:
            InvalidFormatError: The file does not start with 'VOX '
            TruncatedDataError: A header or section ran past the end of the data
            MissingDataError: No XYZI chunk was found
        """
        if isinstance(source, (str, os.PathLike)):
            logger.debug(f"Opening VOX file: {source}")
            with open(source, 'rb') as f:
                return cls._load_stream(f)

        with closing(source):
            return cls._load_stream(source)

    @classmethod
    def loads(cls, data: bytes) -> Model:
        """Load a model from the bytes of a .vox file."""
        return cls.load(io.BytesIO(data))

    @classmethod
    def _load_stream(cls, stream: BinaryIO) -> Model:
        reader = VoxReader(stream)
        version = cls.read_header(reader)
        logger.debug(f"VOX version {version}, {reader.length} bytes")

        size = (0, 0, 0)
        voxels: Optional[List[Voxel]] = None
        palette = DEFAULT_PALETTE

        for chunk in cls.walk_chunks(reader):
            if chunk.id == cls.CHUNK_SIZE:
                size = cls.decode_size(reader.read_view(chunk))

            elif chunk.id == cls.CHUNK_XYZI:
                if voxels is not None:
                    logger.warning("Multiple XYZI chunks; keeping the last one")
                voxels = cls.decode_voxels(reader.read_view(chunk))

            elif chunk.id == cls.CHUNK_RGBA:
                palette = cls.decode_palette(reader.read_view(chunk))

            else:
                logger.debug(f"Skipping chunk {chunk.name!r} ({chunk.content_size} bytes)")

        if voxels is None:
            raise MissingDataError()

        logger.info(
            f"Loaded VOX model: size={size}, {len(voxels)} voxels, "
            f"{'default' if palette is DEFAULT_PALETTE else 'file'} palette"
        )
        return Model(size=size, voxels=tuple(voxels), palette=palette)

    @classmethod
    def read_header(cls, reader: VoxReader) -> int:
        """
        Check the 'VOX ' signature and return the file version.

        The version is informational only; no decoding depends on it.
        """
        magic = reader.read_upto(len(cls.MAGIC))
        if magic != cls.MAGIC:
            raise InvalidFormatError(magic)
        return reader.read_uint32('version')

    @staticmethod
    def walk_chunks(reader: VoxReader) -> Iterator[ChunkHeader]:
        """
        Yield each chunk header until the stream is exhausted.

        After the consumer is done with a chunk the cursor is set to
        content_offset + content_size, whatever the consumer read. The
        children size is not added, so nested chunks are visited in the
        same flat run as their parent's siblings.
        """
        while not reader.at_end:
            chunk_id = reader.read(4, 'chunk id')
            content_size = reader.read_uint32('chunk content size')
            children_size = reader.read_uint32('chunk children size')
            chunk = ChunkHeader(
                id=chunk_id,
                content_size=content_size,
                children_size=children_size,
                content_offset=reader.tell(),
            )
            logger.debug(
                f"Chunk {chunk.name!r} at {chunk.content_offset}: "
                f"content={content_size}, children={children_size}"
            )
            if content_size and children_size:
                logger.warning(
                    f"Chunk {chunk.name!r} has both content and children; "
                    f"children size {children_size} is ignored, nested chunks "
                    f"are read as part of the flat run"
                )

            yield chunk

            reader.seek(chunk.content_offset + chunk.content_size)

    @staticmethod
    def decode_size(view: SectionView) -> Tuple[int, int, int]:
        """Decode a SIZE chunk: three int32 dimensions, passed through as-is."""
        return view.unpack(_SIZE, 'dimensions')

    @staticmethod
    def decode_voxels(view: SectionView) -> List[Voxel]:
        """Decode an XYZI chunk: a uint32 count then count x (x, y, z, c) bytes."""
        count = view.unpack(_UINT32, 'voxel count')[0]
        data = view.read(count * _RECORD.size, f'{count} voxels')
        return [Voxel._make(record) for record in _RECORD.iter_unpack(data)]

    @classmethod
    def decode_palette(cls, view: SectionView) -> Palette:
        """
        Decode an RGBA chunk.

        The chunk stores 255 colours for palette slots 1-255 (plus one unused
        trailing entry); slot 0 is always transparent.
        """
        if view.remaining != PALETTE_SIZE * _RECORD.size:
            logger.warning(
                f"RGBA chunk is {view.remaining} bytes, expected {PALETTE_SIZE * _RECORD.size}"
            )
        data = view.read(cls.PALETTE_RECORDS * _RECORD.size, 'palette')
        records = [Colour(*record) for record in _RECORD.iter_unpack(data)]
        return Palette.from_records(records)


def load(source: PathOrStream) -> Model:
    """Load a .vox model from a path or a seekable binary stream."""
    return VoxFormat.load(source)


def loads(data: bytes) -> Model:
    """Load a .vox model from bytes."""
    return VoxFormat.loads(data)
