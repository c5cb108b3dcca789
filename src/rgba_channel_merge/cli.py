"""Command-line entry point for rgba-channel-merge."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .errors import (
    BadArgumentShape, ChannelMergeError, InvariantViolation,
    EXIT_OK, EXIT_ARGUMENTS, EXIT_INTERNAL
)
from .pipeline import MergePipeline

logger = logging.getLogger(__name__)


USAGE = (
    "rgba-channel-merge <image-filepath> <image-channel-mask> "
    "[(<image-filepath> <image-channel-mask>)...] <output-png-file-path>"
)

DESCRIPTION = """\
A tool to merge specific color channels of multiple images into one rgba image.

The channel masks for each image should match the regex [rgbax]{4}, with r, g,
b, and a representing the red, green, blue and alpha channel, and x meaning
that this channel should be ignored. E.g., the channel mask "rbax" would mean
that the first (red) channel of the input image will be used as the red
channel for the output image, the second (green) will be used as the blue
channel, the third (blue) will be used as alpha channel, and the fourth
(alpha) will be ignored."""

EPILOG = """\
exit codes:
  0  success
  1  invalid arguments
  2  an input image could not be loaded
  3  the output image could not be created
  4  internal error"""

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting with status 2."""

    def error(self, message):
        raise BadArgumentShape(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog='rgba-channel-merge',
        usage=USAGE,
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        'arguments',
        nargs='*',
        metavar='ARG',
        help='image paths and channel masks in pairs, then the output .png path'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='count',
        default=0,
        help='log progress (-v) or per-image details (-vv)'
    )
    parser.add_argument(
        '-q', '--quiet',
        action='store_true',
        help='only log errors'
    )
    parser.add_argument(
        '--log-file',
        type=str,
        help='also write log messages to this file'
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )
    return parser


def configure_logging(verbose: int = 0, quiet: bool = False, log_file: Optional[str] = None) -> None:
    if quiet:
        level = logging.ERROR
    elif verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers)
    logging.getLogger().setLevel(level)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the tool and return its exit code."""
    parser = build_parser()

    try:
        options = parser.parse_intermixed_args(argv)
    except BadArgumentShape as e:
        configure_logging()
        logger.error(f"{e}\nusage: {USAGE}")
        return e.exit_code

    try:
        configure_logging(options.verbose, options.quiet, options.log_file)
    except OSError as e:
        configure_logging()
        logger.error(f"cannot open log file {options.log_file}: {e.strerror or e}")
        return EXIT_ARGUMENTS

    try:
        output = MergePipeline().run(options.arguments)
    except ChannelMergeError as e:
        logger.error(str(e))
        return e.exit_code
    except InvariantViolation:
        logger.critical("Internal error, aborting", exc_info=True)
        return EXIT_INTERNAL

    logger.info(f"Done: {output}")
    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
