"""ffprobe process execution

Responsibilities:
- Build the ffprobe command line
- Launch ffprobe and stream its standard output into the section parser
- Close the output pipe and reap the process on every path
- Reconcile the exit status with the parse outcome
"""

import logging
import subprocess
from pathlib import Path
from typing import List, Optional, Union

from .. import config
from ..exceptions import ExitError, LaunchError, ProbeError
from .parser import ProbeResult, parse_output

logger = logging.getLogger(__name__)

def build_probe_command(path: Union[str, Path], executable: Optional[str] = None) -> List[str]:
    """Build the ffprobe command requesting format and stream dumps for path"""
    return [executable or config.FFPROBE_PATH, *config.PROBE_ARGS, str(path)]

def probe(
    path: Union[str, Path],
    executable: Optional[str] = None,
    chunk_size: Optional[int] = None
) -> ProbeResult:
    """
    Run ffprobe on path and parse its output.

    The path is passed through unchecked; ffprobe reports missing files
    through its exit status. There is no timeout.

    Args:
        path: Media file to probe
        executable: ffprobe executable (default from config)
        chunk_size: Maximum bytes per pipe read (default from config)

    Returns:
        The parsed ProbeResult

    Raises:
        ConfigurationError: If chunk_size or the configured read size is invalid
        LaunchError: If ffprobe could not be started
        StructuralError: If the output violates the section grammar
        ProbeIOError: If reading the output failed
        ExitError: If ffprobe exited with a failure status; the error's
            result attribute holds the output parsed before that
    """
    chunk_size = config.get_read_chunk_size(chunk_size)
    cmd = build_probe_command(path, executable)
    logger.debug("Running command: %s", " ".join(cmd))
    try:
        process = subprocess.Popen(
            cmd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL
        )
    except OSError as e:
        logger.debug("Failed to launch %s: %s", cmd[0], e)
        raise LaunchError(f"Could not start {cmd[0]}: {e}", module="runner") from e

    try:
        with process.stdout as out:
            result = parse_output(out, chunk_size)
    except ProbeError as e:
        logger.debug("Failed to parse probe output for %s: %s", path, e)
        raise
    finally:
        # Reaped on every path; after a parse failure the status is discarded
        returncode = process.wait()

    if returncode != 0:
        logger.debug("%s exited with status %d for %s", cmd[0], returncode, path)
        raise ExitError(returncode, result=result, module="runner")

    logger.debug("Probed %s: %d streams", path, len(result.streams))
    return result
