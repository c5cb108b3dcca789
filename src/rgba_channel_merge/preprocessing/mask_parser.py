"""Channel mask parsing.

A channel mask is a 4 character string such as ``"rbax"``. Character ``i``
names the output channel that component ``i`` of the source pixel is written
to; ``x`` drops that component.
"""

from typing import Iterator, Optional, Tuple
from dataclasses import dataclass
from enum import Enum
import logging

from ..errors import InvalidMask

logger = logging.getLogger(__name__)


MASK_LENGTH = 4


class ChannelSymbol(Enum):
    """Output channel designation within a mask."""
    RED = 'r'
    GREEN = 'g'
    BLUE = 'b'
    ALPHA = 'a'
    IGNORE = 'x'

    @property
    def destination_index(self) -> Optional[int]:
        """Component index in an RGBA pixel, or None for IGNORE."""
        return _DESTINATION_INDEX[self]


_DESTINATION_INDEX = {
    ChannelSymbol.RED: 0,
    ChannelSymbol.GREEN: 1,
    ChannelSymbol.BLUE: 2,
    ChannelSymbol.ALPHA: 3,
    ChannelSymbol.IGNORE: None,
}


@dataclass(frozen=True)
class ChannelMask:
    """Immutable sequence of exactly four ChannelSymbols.

    Attributes:
        symbols: Destination of source components 0..3, in order
    """
    symbols: Tuple[ChannelSymbol, ...]

    def __post_init__(self):
        if len(self.symbols) != MASK_LENGTH:
            raise InvalidMask(
                f"channel mask needs {MASK_LENGTH} symbols, got {len(self.symbols)}",
                mask=str(self.symbols)
            )
        for symbol in self.symbols:
            if not isinstance(symbol, ChannelSymbol):
                raise InvalidMask(f"not a channel symbol: {symbol!r}", mask=str(self.symbols))

    def __len__(self) -> int:
        return len(self.symbols)

    def __iter__(self) -> Iterator[ChannelSymbol]:
        return iter(self.symbols)

    def __getitem__(self, index: int) -> ChannelSymbol:
        return self.symbols[index]

    def __str__(self) -> str:
        return ''.join(symbol.value for symbol in self.symbols)

    @property
    def is_noop(self) -> bool:
        """True when every position is IGNORE."""
        return all(symbol is ChannelSymbol.IGNORE for symbol in self.symbols)


def parse_mask(raw: str) -> ChannelMask:
    """Parse a mask string into a ChannelMask.

    Args:
        raw: Exactly four characters from ``r``, ``g``, ``b``, ``a``, ``x``
            (lowercase only)

    Returns:
        ChannelMask positionally matching ``raw``

    Raises:
        InvalidMask: If the length is wrong or a character is not allowed

    Example:
        >>> str(parse_mask('rbax'))
        'rbax'
        >>> parse_mask('rbax')[1]
        <ChannelSymbol.BLUE: 'b'>
    """
    if len(raw) != MASK_LENGTH:
        raise InvalidMask(f'channel mask "{raw}" has wrong length', mask=raw)

    symbols = []
    for char in raw:
        try:
            symbols.append(ChannelSymbol(char))
        except ValueError:
            raise InvalidMask(
                f'illegal character "{char}" in channel mask "{raw}"', mask=raw
            ) from None

    return ChannelMask(tuple(symbols))
