"""Exception classes for base64-engine.

This module defines custom exception types used throughout the base64-engine library.
"""


class Base64EngineError(Exception):
    """Base exception class for all base64-engine errors."""

    pass


class ConfigurationError(Base64EngineError):
    """Exception raised when an alphabet, padding symbol or named configuration is invalid."""

    pass


class DecodeError(Base64EngineError):
    """Exception raised when encoded input cannot be decoded."""

    pass


class InvalidSymbolError(DecodeError):
    """Exception raised when a decode input byte is neither an alphabet symbol nor padding.

    Attributes:
        symbol: The offending byte value.
        position: Offset of the offending byte in the encoded input.
    """

    def __init__(self, symbol: int, position: int) -> None:
        self.symbol = symbol
        self.position = position
        super().__init__(f"invalid base64 byte 0x{symbol:02x} ({chr(symbol)!r}) at offset {position}")


class InvalidPaddingError(InvalidSymbolError):
    """Exception raised when the padding symbol appears outside the final group's tail."""

    def __init__(self, symbol: int, position: int) -> None:
        super().__init__(symbol, position)
        self.args = (f"misplaced padding byte {chr(symbol)!r} at offset {position}",)


class InvalidLengthError(DecodeError):
    """Exception raised when encoded input length is not a multiple of 4.

    Attributes:
        length: Length of the rejected input.
    """

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f"invalid base64 length {length}: must be a multiple of 4")


class ByteRangeError(AssertionError):
    """Internal invariant violation: a decoded value does not fit in one byte."""

    pass
