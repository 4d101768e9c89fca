"""Command-line entry point for dbrl."""

import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence

from . import __version__
from .core.types import ImporterConfig
from .exceptions import DbrlError, UsageError
from .pipeline import ImportResult, import_image

logger = logging.getLogger("dbrl")

EXAMPLE_IMAGE = "quay.io/fedora:42"


class _Parser(argparse.ArgumentParser):
    """ArgumentParser that reports bad usage as UsageError instead of exiting 2."""

    def error(self, message):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    p = _Parser(
        prog="dbrl",
        description="Import a container image as a Bedrock Linux layer.",
        epilog=f"Example: dbrl {EXAMPLE_IMAGE}",
    )
    p.add_argument(
        "image",
        metavar="image_reference",
        help="Image to import (registry/name:tag or name@digest)",
    )
    p.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log executed commands and cleanup details",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return p


def resolve_log_level(name: str) -> int:
    """Map a level name to a number, never quieter than ERROR.

    Raises:
        ValueError: If name is not a logging level
    """
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {name}")
    return min(level, logging.ERROR)


def configure_logging(level: str) -> None:
    # Errors must always reach stderr, so the package logger gets its own handler.
    try:
        resolved = resolve_log_level(level)
        unknown = None
    except ValueError as e:
        resolved = logging.INFO
        unknown = e

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    for old in list(logger.handlers):
        logger.removeHandler(old)
    logger.addHandler(handler)
    logger.setLevel(resolved)
    logger.propagate = False

    if unknown:
        logger.warning(f"{unknown}, using INFO")


def print_success(result: ImportResult) -> None:
    name = result.layer_name
    print(f"\nSUCCESS: Image imported as layer '{name}'")
    print("You can now use it with:")
    print(f"  brl run -l {name} <command>\n")
    print("Example:")
    print(f"  brl run -l {name} bash")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the importer and return the process exit status."""
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        parser.print_usage(sys.stderr)
        print(f"{parser.prog}: error: {e}", file=sys.stderr)
        print(parser.epilog, file=sys.stderr)
        return 1
    except SystemExit as e:
        # --help and --version
        return e.code if isinstance(e.code, int) else 0

    config = ImporterConfig.from_env()
    configure_logging("DEBUG" if args.verbose else config.log_level)

    try:
        result = asyncio.run(import_image(args.image, config))
    except DbrlError as e:
        logger.error(str(e))
        return 1
    except KeyboardInterrupt:
        logger.error("Interrupted")
        return 1

    print_success(result)
    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())
