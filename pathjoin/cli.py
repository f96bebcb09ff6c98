"""
Join path segments and print the full path.

Usage:
    python -m pathjoin                              # Full path: home/klundert/document.txt
    python -m pathjoin usr local bin                # join your own segments
    python -m pathjoin --style windows home/klundert document.txt
    python -m pathjoin --json
"""

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from pathjoin.joiner import join_request
from pathjoin.logging_config import configure_logging
from pathjoin.schemas import JoinRequest, PathStyle
from pathjoin.utils import default_style, log_level

logger = logging.getLogger(__name__)

DEFAULT_DIR = "home/klundert"
DEFAULT_FILE = "document.txt"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pathjoin", description="Join path segments into a full path")
    parser.add_argument(
        "segments",
        nargs="*",
        default=[DEFAULT_DIR, DEFAULT_FILE],
        help=f"Path segments to join (default: {DEFAULT_DIR} {DEFAULT_FILE})",
    )
    parser.add_argument(
        "--style",
        choices=[s.value for s in PathStyle],
        help="Separator convention (default: $PATHJOIN_STYLE or the host's)",
    )
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    return parser


def run(args: argparse.Namespace) -> int:
    """Join the requested segments and print the result."""
    try:
        configure_logging("DEBUG" if args.verbose else log_level())
        style = PathStyle(args.style) if args.style else default_style()
        request = JoinRequest(segments=args.segments, style=style)
    except (ValueError, ValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.debug("Joining %s", request.segments)
    result = join_request(request)

    if args.json:
        print(result.model_dump_json(indent=2))
    else:
        print(result.label())
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    sys.exit(run(args))


if __name__ == "__main__":
    main()
