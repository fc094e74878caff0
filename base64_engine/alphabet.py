"""Base64 alphabets and symbol lookup.

This module defines the 64-symbol alphabet type together with the two RFC 4648
instances. Each alphabet precomputes a 256-entry inverse table so that mapping
an encoded byte back to its 6-bit value is a single index operation.
"""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from typing import Optional, Tuple

from base64_engine.exceptions import ConfigurationError

ALPHABET_SIZE = 64

# Marks inverse table slots for bytes that are not alphabet symbols
INVALID_INDEX = 0xFF


def is_symbol_char(char: str) -> bool:
    """Return True if char is a single visible ASCII character."""
    return len(char) == 1 and 0x21 <= ord(char) <= 0x7E


@dataclass(frozen=True)
class Alphabet:
    """An ordered table of 64 distinct symbols.

    The position of a symbol in the table is the 6-bit value it encodes.

    Attributes:
        symbols: The 64 symbols, in value order.
        inverse: 256-entry table mapping a byte to its value, or INVALID_INDEX.
    """

    symbols: str
    inverse: Tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate the symbols and build the inverse table.

        Raises:
            ConfigurationError: If the table is not 64 distinct visible ASCII characters.
        """
        if len(self.symbols) != ALPHABET_SIZE:
            raise ConfigurationError(
                f"alphabet must have {ALPHABET_SIZE} symbols, got {len(self.symbols)}"
            )

        for char in self.symbols:
            if not is_symbol_char(char):
                raise ConfigurationError(f"alphabet symbol {char!r} is not visible ASCII")

        if len(set(self.symbols)) != ALPHABET_SIZE:
            raise ConfigurationError("alphabet symbols must be distinct")

        inverse = [INVALID_INDEX] * 256
        for index, char in enumerate(self.symbols):
            inverse[ord(char)] = index

        # frozen dataclass, so bypass __setattr__ for the derived field
        object.__setattr__(self, "inverse", tuple(inverse))

    def symbol_at(self, index: int) -> str:
        """Get the symbol encoding a 6-bit value."""
        return self.symbols[index]

    def index_of(self, byte: int) -> Optional[int]:
        """Get the 6-bit value of an encoded byte.

        Args:
            byte: The encoded byte value (0-255).

        Returns:
            The value in [0, 63], or None if the byte is not an alphabet symbol.
        """
        index = self.inverse[byte]
        if index == INVALID_INDEX:
            return None

        return index

    def contains(self, symbol: str) -> bool:
        return len(symbol) == 1 and symbol in self.symbols


_ALPHANUMERIC = string.ascii_uppercase + string.ascii_lowercase + string.digits

# RFC 4648 section 4
STANDARD_ALPHABET = Alphabet(_ALPHANUMERIC + "+/")

# RFC 4648 section 5
URL_SAFE_ALPHABET = Alphabet(_ALPHANUMERIC + "-_")
