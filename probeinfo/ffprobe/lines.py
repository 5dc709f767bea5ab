"""Logical line reader for ffprobe output

Responsibilities:
- Read a binary stream in bounded chunks
- Reassemble lines that were split across chunks
- Separate I/O failures from end-of-stream
"""

import logging
from typing import BinaryIO, Generator, Optional

from ..config import OUTPUT_ENCODING, get_read_chunk_size
from ..exceptions import ProbeIOError

logger = logging.getLogger(__name__)

def _strip_terminator(data: bytes) -> bytes:
    if data.endswith(b"\r\n"):
        return data[:-2]
    if data.endswith(b"\n"):
        return data[:-1]
    return data

def read_lines(
    stream: BinaryIO,
    chunk_size: Optional[int] = None,
    encoding: str = OUTPUT_ENCODING
) -> Generator[str, None, None]:
    """
    Yield complete logical lines from a binary stream.

    Each read takes at most chunk_size bytes. A chunk that does not end
    with a newline is continued by the next read, so a line longer than
    chunk_size comes out exactly as if it had been read in one piece.
    Bytes are decoded only after the full line has been assembled.

    Args:
        stream: Binary stream supporting readline(size)
        chunk_size: Maximum bytes per read (default from config)
        encoding: Text encoding of the stream

    Yields:
        Lines without their trailing newline

    Raises:
        ProbeIOError: If reading from the stream fails
        ConfigurationError: If chunk_size is not a positive integer
    """
    chunk_size = get_read_chunk_size(chunk_size)

    pending = []
    while True:
        try:
            chunk = stream.readline(chunk_size)
        except OSError as e:
            raise ProbeIOError(f"Failed to read probe output: {e}", module="lines") from e

        if not chunk:
            if pending:
                yield b"".join(pending).decode(encoding, errors="replace")
            return

        pending.append(chunk)
        if not chunk.endswith(b"\n"):
            continue

        line = _strip_terminator(b"".join(pending))
        pending = []
        yield line.decode(encoding, errors="replace")
