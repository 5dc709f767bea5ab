"""Unit tests for rich console output"""

import io
import unittest
from unittest.mock import patch

from rich.console import Console

from probeinfo.ffprobe.parser import ProbeResult
from probeinfo.formatting import options_table, print_error, print_header, print_result

RESULT = ProbeResult(
    format={"format_name": "mov,mp4,m4a,3gp,3g2,mj2", "duration": "10.500000"},
    streams=[
        {"index": "0", "codec_type": "video", "codec_name": "h264"},
        {"index": "1", "codec_type": "audio", "codec_name": "aac"},
    ]
)

class TestFormatting(unittest.TestCase):
    def setUp(self):
        self.out = io.StringIO()
        self.console = Console(file=self.out, width=120, color_system=None)
        patcher = patch("probeinfo.formatting.console", self.console)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_print_result(self):
        print_result(RESULT)
        text = self.out.getvalue()
        for expected in ("Format", "format_name", "mov,mp4,m4a,3gp,3g2,mj2", "10.500000",
                         "Stream 0", "Stream 1", "codec_name", "h264", "aac"):
            self.assertIn(expected, text)
        self.assertLess(text.index("Stream 0"), text.index("Stream 1"))

    def test_print_result_without_streams(self):
        print_result(ProbeResult())
        text = self.out.getvalue()
        self.assertIn("Format", text)
        self.assertNotIn("Stream", text)

    def test_options_table_rows(self):
        table = options_table("Stream 0", RESULT.streams[0])
        self.assertEqual(table.row_count, 3)
        self.assertEqual(table.title, "Stream 0")

    def test_print_header(self):
        print_header("clip.mkv", width=40)
        lines = self.out.getvalue().splitlines()
        self.assertEqual(lines[0].rstrip(), "=" * 40)
        self.assertEqual(lines[1].strip(), "clip.mkv")
        self.assertEqual(lines[2].rstrip(), "=" * 40)

    def test_print_error(self):
        print_error("Probe failed")
        self.assertIn("✗ Probe failed", self.out.getvalue())

if __name__ == "__main__":
    unittest.main()
