"""Probe session management

Responsibilities:
- Provide a session context for repeated lookups on one file
- Run ffprobe at most once per session and cache the result
- Look up raw option values by stream position
"""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Generator, Optional, Union

from ..exceptions import MetadataError, ProbeError
from .parser import ProbeResult
from .runner import probe

logger = logging.getLogger(__name__)

class ProbeSession:
    """Manages the probe result of a single file"""
    def __init__(self, path: Union[str, Path], executable: Optional[str] = None):
        self.path = path
        self.executable = executable
        self._result = None

    @property
    def result(self) -> ProbeResult:
        """The probe result, running ffprobe on first access"""
        if self._result is None:
            self._result = probe(self.path, self.executable)
        return self._result

    def get(self, option: str, stream_index: Optional[int] = None) -> str:
        """Get the raw value of a format option, or of a stream option when stream_index is given"""
        if stream_index is None:
            values = self.result.format
            where = "format"
        else:
            streams = self.result.streams
            if not 0 <= stream_index < len(streams):
                raise MetadataError(
                    f"No stream {stream_index} in {self.path} ({len(streams)} streams)",
                    option, module="session"
                )
            values = streams[stream_index]
            where = f"stream {stream_index}"
        try:
            return values[option]
        except KeyError:
            raise MetadataError(f"No option {option} in {where} of {self.path}", option,
                                module="session") from None

    def clear(self) -> None:
        """Drop the cached result"""
        self._result = None

@contextmanager
def probe_session(
    path: Union[str, Path], executable: Optional[str] = None
) -> Generator[ProbeSession, None, None]:
    """Context manager for probe sessions"""
    session = ProbeSession(path, executable)
    try:
        yield session
    except ProbeError as e:
        logger.error("Probe session failed: %s", e)
        raise
    finally:
        session.clear()
