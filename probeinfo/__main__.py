"""
Command-line interface for probeinfo
"""
import argparse
import json
import logging
import sys
from pathlib import Path

from . import __version__, config
from .exceptions import ExitError, ProbeError
from .ffprobe import probe
from .formatting import console, print_error, print_header, print_result
from .logging import configure_logging
from .utils import check_dependencies

def parse_args(argv=None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        prog="probeinfo",
        description="Show ffprobe format and stream information for a media file"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=config.LOG_LEVEL,
        help="Set logging level (default: %(default)s)"
    )
    parser.add_argument(
        "--log-file",
        dest="log_file",
        action="store_true",
        help="Also write a log file to the log directory"
    )
    parser.add_argument(
        "--ffprobe",
        dest="ffprobe",
        default=config.FFPROBE_PATH,
        help="ffprobe executable (default: %(default)s)"
    )
    parser.add_argument(
        "--json",
        dest="as_json",
        action="store_true",
        help="Print the result as JSON instead of tables"
    )
    parser.add_argument(
        "input",
        type=Path,
        help="Media file to probe"
    )
    return parser.parse_args(argv)

def main(argv=None):
    """Main entry point"""
    args = parse_args(argv)
    configure_logging(args.log_level, file_logging=args.log_file)

    log = logging.getLogger("probeinfo")

    if not check_dependencies([args.ffprobe]):
        print_error(f"{args.ffprobe} not found")
        return 1

    try:
        result = probe(args.input, executable=args.ffprobe)
    except KeyboardInterrupt:
        log.warning("Probe interrupted by user")
        return 130
    except ExitError as e:
        if e.result is not None:
            log.debug("Output parsed before failure: %d streams", len(e.result.streams))
        print_error(f"Probe failed: {e.message}")
        return 1
    except ProbeError as e:
        print_error(f"Probe failed: {e.message}")
        return 1

    if args.as_json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print_header(str(args.input))
        print_result(result)
        console.print(f"{len(result.streams)} streams")
    return 0

if __name__ == "__main__":
    sys.exit(main())
