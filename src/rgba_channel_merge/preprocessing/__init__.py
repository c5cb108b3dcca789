"""Input-side stages: mask parsing, argument validation and image loading."""

from .mask_parser import ChannelSymbol, ChannelMask, parse_mask
from .argument_parser import InputImage, parse_args
from .image_loader import ImageLoader, load_image

__all__ = [
    'ChannelSymbol',
    'ChannelMask',
    'parse_mask',
    'InputImage',
    'parse_args',
    'ImageLoader',
    'load_image',
]
