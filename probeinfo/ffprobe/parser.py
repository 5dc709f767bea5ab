"""Section parser for ffprobe's default output format

Responsibilities:
- Recognize [FORMAT] and [STREAM] blocks at the top level
- Decode each block's option=value lines into a mapping
- Check that stream blocks arrive in index order
- Assemble the final ProbeResult, or raise without exposing partial work

Expected input:

    [FORMAT]
    filename=a.mp4
    duration=10.5
    [/FORMAT]
    [STREAM]
    index=0
    codec_type=video
    [/STREAM]

Values are kept as the raw strings ffprobe printed.
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import BinaryIO, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from ..exceptions import (
    DuplicateOptionError, MissingSeparatorError, StreamsUnorderedError,
    UnknownSectionError, UnterminatedSectionError
)
from .lines import read_lines

logger = logging.getLogger(__name__)

FORMAT_OPEN = "[FORMAT]"
FORMAT_CLOSE = "[/FORMAT]"
STREAM_OPEN = "[STREAM]"
STREAM_CLOSE = "[/STREAM]"

@dataclass(frozen=True)
class ProbeResult:
    """Container format and per-stream options of one probed file

    Attributes:
        format: Container-level options
        streams: Per-stream options; streams[i] is the stream with index i
    """
    # Read-only mappings are unhashable, so results are too
    __hash__ = None

    format: Mapping[str, str] = field(default_factory=dict)
    streams: Tuple[Mapping[str, str], ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "format", MappingProxyType(dict(self.format)))
        object.__setattr__(
            self, "streams", tuple(MappingProxyType(dict(s)) for s in self.streams)
        )

    def to_dict(self) -> Dict[str, object]:
        """Return plain, mutable copies of the format and stream mappings"""
        return {
            "format": dict(self.format),
            "streams": [dict(s) for s in self.streams],
        }

def read_section(lines: Iterator[str], end: str) -> Dict[str, str]:
    """
    Read option=value lines up to and including the close marker.

    Args:
        lines: Line iterator positioned just after the open marker
        end: Close marker, compared by exact string equality

    Returns:
        Mapping of option name to value

    Raises:
        MissingSeparatorError: If a line has no '='
        DuplicateOptionError: If an option repeats within the section
        UnterminatedSectionError: If the lines run out before the close marker
    """
    section = {}
    for line in lines:
        if line == end:
            return section
        option, sep, value = line.partition("=")
        if not sep:
            raise MissingSeparatorError(line, module="parser")
        if option in section:
            raise DuplicateOptionError(option, module="parser")
        section[option] = value
    raise UnterminatedSectionError(end, module="parser")

def _stream_index(section: Mapping[str, str], expected: int) -> int:
    value = section.get("index")
    # ASCII digits only; int() alone would accept signs, spaces and underscores
    if value is None or not (value.isascii() and value.isdigit()):
        raise StreamsUnorderedError(expected, value, module="parser")
    return int(value)

def parse_lines(lines: Iterable[str]) -> ProbeResult:
    """
    Parse a sequence of ffprobe output lines into a ProbeResult.

    Raises:
        StructuralError: If the lines violate the section grammar
        ProbeIOError: If the underlying line source fails
    """
    lines = iter(lines)
    format_section = {}
    streams: List[Dict[str, str]] = []
    seen_format = False

    for line in lines:
        if line == FORMAT_OPEN:
            if seen_format:
                logger.debug("Repeated %s block replaces the previous one", FORMAT_OPEN)
            format_section = read_section(lines, FORMAT_CLOSE)
            seen_format = True
        elif line == STREAM_OPEN:
            section = read_section(lines, STREAM_CLOSE)
            expected = len(streams)
            if _stream_index(section, expected) != expected:
                raise StreamsUnorderedError(expected, section["index"], module="parser")
            streams.append(section)
        else:
            raise UnknownSectionError(line, module="parser")

    logger.debug("Parsed %d format options and %d streams", len(format_section), len(streams))
    return ProbeResult(format=format_section, streams=tuple(streams))

def parse_output(stream: BinaryIO, chunk_size: Optional[int] = None) -> ProbeResult:
    """Parse ffprobe's raw standard output into a ProbeResult"""
    return parse_lines(read_lines(stream, chunk_size))
