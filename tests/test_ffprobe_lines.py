"""Unit tests for the logical line reader

Verifies line reassembly across short reads, terminator handling,
and the distinction between I/O failures and end-of-stream.
"""

import io
import unittest
from unittest.mock import patch

from probeinfo.exceptions import ConfigurationError, ProbeIOError
from probeinfo.ffprobe.lines import read_lines

class ChunkStream:
    """Stream returning preset chunks, regardless of the requested size"""
    def __init__(self, chunks):
        self.chunks = list(chunks)
        self.reads = 0

    def readline(self, size=-1):
        self.reads += 1
        if not self.chunks:
            return b""
        chunk = self.chunks.pop(0)
        if isinstance(chunk, Exception):
            raise chunk
        return chunk

class SizeRecordingStream(io.BytesIO):
    """BytesIO that records the size passed to each readline"""
    def __init__(self, data):
        super().__init__(data)
        self.sizes = []

    def readline(self, size=-1):
        self.sizes.append(size)
        return super().readline(size)

class TestReadLines(unittest.TestCase):
    def test_complete_lines(self):
        stream = io.BytesIO(b"[FORMAT]\nfilename=a.mp4\n[/FORMAT]\n")
        self.assertEqual(
            list(read_lines(stream)),
            ["[FORMAT]", "filename=a.mp4", "[/FORMAT]"]
        )

    def test_long_line_reassembled(self):
        """A line longer than the read size matches the unsplit read"""
        data = b"TAG:comment=" + b"x" * 50 + b"\nindex=0\n"
        whole = list(read_lines(io.BytesIO(data)))
        split = list(read_lines(io.BytesIO(data), chunk_size=4))
        self.assertEqual(split, whole)
        self.assertEqual(split[0], "TAG:comment=" + "x" * 50)

    def test_continued_chunks_joined(self):
        stream = ChunkStream([b"code", b"c_na", b"me=h264\n", b"index=0\n"])
        self.assertEqual(list(read_lines(stream)), ["codec_name=h264", "index=0"])

    def test_multibyte_character_split_across_chunks(self):
        encoded = "title=café\n".encode("utf-8")
        split_at = encoded.index(b"\xc3") + 1
        stream = ChunkStream([encoded[:split_at], encoded[split_at:]])
        self.assertEqual(list(read_lines(stream)), ["title=café"])

    def test_crlf_terminator_removed(self):
        stream = io.BytesIO(b"[STREAM]\r\nindex=0\r\n")
        self.assertEqual(list(read_lines(stream)), ["[STREAM]", "index=0"])

    def test_final_line_without_newline(self):
        stream = io.BytesIO(b"[STREAM]\n[/STREAM]")
        self.assertEqual(list(read_lines(stream)), ["[STREAM]", "[/STREAM]"])

    def test_empty_stream(self):
        self.assertEqual(list(read_lines(io.BytesIO(b""))), [])

    def test_empty_line_preserved(self):
        self.assertEqual(list(read_lines(io.BytesIO(b"\n"))), [""])

    def test_read_error_is_not_end_of_stream(self):
        stream = ChunkStream([b"[FORMAT]\n", OSError("broken pipe")])
        lines = read_lines(stream)
        self.assertEqual(next(lines), "[FORMAT]")
        with self.assertRaises(ProbeIOError) as ctx:
            next(lines)
        self.assertIsInstance(ctx.exception.__cause__, OSError)

    def test_lazy_reading(self):
        stream = ChunkStream([b"a=1\n", b"b=2\n"])
        lines = read_lines(stream)
        self.assertEqual(stream.reads, 0)
        next(lines)
        self.assertEqual(stream.reads, 1)

    def test_invalid_chunk_size(self):
        with self.assertRaises(ConfigurationError):
            list(read_lines(io.BytesIO(b"a=1\n"), chunk_size=0))

    @patch("probeinfo.config.READ_CHUNK_SIZE", "2")
    def test_chunk_size_from_config(self):
        stream = SizeRecordingStream(b"abcdef\n")
        self.assertEqual(list(read_lines(stream)), ["abcdef"])
        self.assertEqual(set(stream.sizes), {2})

if __name__ == "__main__":
    unittest.main()
