"""
probeinfo - ffprobe output parsing

This package runs ffprobe against a media file and parses its
section-delimited text output into a ProbeResult:
- Container-level options from the [FORMAT] block
- Per-stream options from each [STREAM] block, in index order

Values are kept as the raw strings ffprobe prints.
"""

__version__ = "0.1.0"

from .exceptions import (
    ProbeError, ConfigurationError, LaunchError, ProbeIOError, ExitError, MetadataError,
    StructuralError, DuplicateOptionError, MissingSeparatorError,
    UnknownSectionError, StreamsUnorderedError, UnterminatedSectionError
)
from .ffprobe import (
    ProbeResult, ProbeSession, build_probe_command, parse_lines,
    parse_output, probe, probe_session, read_lines, read_section
)
