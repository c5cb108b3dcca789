"""Exception types for channel merging.

Every user-facing failure derives from ChannelMergeError and carries the
process exit code the command-line tool reports for it. InvariantViolation
marks a programming defect and is kept outside that hierarchy.
"""

from typing import Optional


EXIT_OK = 0
EXIT_ARGUMENTS = 1
EXIT_IMAGE_LOAD = 2
EXIT_OUTPUT = 3
EXIT_INTERNAL = 4


class ChannelMergeError(Exception):
    """Base class for errors caused by bad input or failing I/O."""
    exit_code = EXIT_ARGUMENTS


class ArgumentError(ChannelMergeError):
    """The command line could not be parsed."""
    exit_code = EXIT_ARGUMENTS


class BadArgumentShape(ArgumentError):
    """Wrong number of arguments or an unrecognised option."""


class InvalidMask(ArgumentError, ValueError):
    """A channel mask is not 4 characters out of r, g, b, a, x.

    Attributes:
        mask: The offending mask text
        pair_index: 1-based number of the (image, mask) pair, when known
    """

    def __init__(self, message: str, mask: str, pair_index: Optional[int] = None):
        super().__init__(message)
        self.mask = mask
        self.pair_index = pair_index


class UnsupportedOutputFormat(ArgumentError, ValueError):
    """The output path has an extension no encoder is registered for."""

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path


class ImageLoadError(ChannelMergeError):
    """An input image could not be loaded."""
    exit_code = EXIT_IMAGE_LOAD

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path


class ImageReadError(ImageLoadError):
    """The input file could not be opened or read."""


class DecodeError(ImageLoadError):
    """The input file was read but no decoder understood it."""


class OutputError(ChannelMergeError):
    """The output image could not be created."""
    exit_code = EXIT_OUTPUT

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path


class OutputWriteError(OutputError):
    """The output file could not be opened or written."""


class EncodeError(OutputError):
    """The encoder failed to serialize the canvas."""


class InvariantViolation(RuntimeError):
    """Internal consistency check failed; indicates a bug, not bad input."""
