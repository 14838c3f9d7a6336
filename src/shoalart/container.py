"""Frame container shared by charset and art files.

A container is a fixed ASCII header followed by a single LZ4 frame written in
linked block mode with per-block checksums. A damaged block is detected on
read but cannot be recovered on its own.
"""

from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator

import lz4.frame

from shoalart.errors import FormatError

CHARSET_HEADER = b"Shoalart.v0 CHR"
ART_HEADER = b"Shoalart.v0 ART"


class ContainerReader:
    """Streaming reader over a container body; decoder failures surface as FormatError."""

    def __init__(self, body: BinaryIO):
        self._body = body

    def read(self, size: int) -> bytes:
        """Read up to ``size`` bytes; fewer at the end of the stream."""
        try:
            return self._body.read(size)
        except (RuntimeError, EOFError) as e:
            raise FormatError(f"Damaged compressed body: {e}") from e

    def read_exact(self, size: int) -> bytes:
        data = self.read(size)
        if len(data) != size:
            raise FormatError(f"Unexpected end of data: wanted {size} bytes, got {len(data)}")
        return data


@contextmanager
def open_writer(path: str | Path, header: bytes) -> Iterator[BinaryIO]:
    """Create ``path``, write ``header`` and yield a compressing writer for the body."""
    with Path(path).open("wb") as f:
        f.write(header)
        with lz4.frame.LZ4FrameFile(f, mode="wb", block_linked=True, block_checksum=True) as body:
            yield body


@contextmanager
def open_reader(path: str | Path, header: bytes) -> Iterator[ContainerReader]:
    """Open ``path``, check its header and yield a reader for the decompressed body."""
    with Path(path).open("rb") as f:
        found = f.read(len(header))
        if found != header:
            raise FormatError(f"Invalid header: {found!r}")
        with lz4.frame.LZ4FrameFile(f, mode="rb") as body:
            yield ContainerReader(body)
