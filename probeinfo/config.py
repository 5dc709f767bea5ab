"""Configuration settings for probeinfo

This module centralizes the settings used when running ffprobe and
reading its output:
- Location of the ffprobe executable
- Read size and text encoding for the output pipe
- Log directory and default log level

User-configurable settings are read from environment variables.
"""

import os
from pathlib import Path
from typing import Union

from .exceptions import ConfigurationError

# ffprobe executable, looked up on PATH unless an absolute path is given
FFPROBE_PATH = os.environ.get("PROBEINFO_FFPROBE", "ffprobe")

# Fixed flags requesting the format block and one block per stream
PROBE_ARGS = ("-show_format", "-show_streams")

# Maximum number of bytes taken from the pipe per read; longer lines are reassembled.
# Kept as given and checked by get_read_chunk_size() before each probe.
READ_CHUNK_SIZE = os.environ.get("PROBEINFO_READ_CHUNK_SIZE", "4096")

# Encoding of ffprobe's standard output
OUTPUT_ENCODING = os.environ.get("PROBEINFO_ENCODING", "utf-8")

# LOG_DIR: user definable with default of "$HOME/probeinfo_logs"
LOG_DIR = Path(os.environ.get("PROBEINFO_LOG_DIR", str(Path.home() / "probeinfo_logs")))

# Logging configuration
LOG_LEVEL = "INFO"  # Default logging level; valid values: DEBUG, INFO, WARNING, ERROR, CRITICAL

def get_read_chunk_size(value: Union[int, str, None] = None) -> int:
    """Return value, or READ_CHUNK_SIZE when value is None, as a positive int

    Raises:
        ConfigurationError: If the size is not a positive integer
    """
    raw = READ_CHUNK_SIZE if value is None else value
    try:
        if isinstance(raw, bool):
            raise TypeError("bool is not a size")
        size = int(raw)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(
            f"Read chunk size must be an integer, got {raw!r}", module="config"
        ) from e
    if size <= 0:
        raise ConfigurationError(f"Read chunk size must be positive, got {size}", module="config")
    return size
