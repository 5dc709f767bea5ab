"""ffprobe invocation and output parsing

This package provides:
- Running ffprobe and supervising the child process
- Reassembling logical lines from its output pipe
- Parsing the [FORMAT]/[STREAM] section output into a ProbeResult
- Probe sessions for repeated lookups on one file
"""

from .lines import read_lines
from .parser import ProbeResult, parse_lines, parse_output, read_section
from .runner import build_probe_command, probe
from .session import ProbeSession, probe_session

__all__ = [
    'read_lines',
    'ProbeResult',
    'parse_lines',
    'parse_output',
    'read_section',
    'build_probe_command',
    'probe',
    'ProbeSession',
    'probe_session'
]
