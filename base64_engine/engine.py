"""Base64 encode/decode engine.

This module provides the Base64Engine class, which packs bytes into 6-bit
groups and back using a configured alphabet and padding symbol, together with
the factory functions for the two RFC 4648 configurations.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from base64_engine.alphabet import STANDARD_ALPHABET, URL_SAFE_ALPHABET, Alphabet, is_symbol_char
from base64_engine.exceptions import (
    ByteRangeError,
    ConfigurationError,
    DecodeError,
    InvalidLengthError,
    InvalidPaddingError,
    InvalidSymbolError,
)
from base64_engine.interfaces.encoding import BytesLike, IBinaryCodec

logger = logging.getLogger(__name__)

# bitmask selecting one 6-bit group
ENCODE_MASK = 0x3F
# bitmask selecting one output byte
DECODE_MASK = 0xFF
ENCODE_SHIFTS = (18, 12, 6, 0)
DECODE_SHIFTS = (16, 8, 0)

DEFAULT_PADDING = "="


@dataclass(frozen=True)
class CodecConfig:
    """Immutable pairing of an alphabet and its padding symbol.

    Attributes:
        alphabet: The 64-symbol table.
        padding: Symbol filling incomplete trailing groups.
    """

    alphabet: Alphabet
    padding: str = DEFAULT_PADDING

    def __post_init__(self) -> None:
        """Validate the padding symbol.

        Raises:
            ConfigurationError: If padding is not a single visible ASCII character
                or collides with an alphabet symbol.
        """
        if not is_symbol_char(self.padding):
            raise ConfigurationError(f"padding {self.padding!r} must be one visible ASCII character")

        if self.alphabet.contains(self.padding):
            raise ConfigurationError(f"padding {self.padding!r} is also an alphabet symbol")


STANDARD_CONFIG = CodecConfig(STANDARD_ALPHABET)
URL_SAFE_CONFIG = CodecConfig(URL_SAFE_ALPHABET)

NAMED_CONFIGS: Mapping[str, CodecConfig] = MappingProxyType(
    {
        "standard": STANDARD_CONFIG,
        "url_safe": URL_SAFE_CONFIG,
    }
)


def _as_bytes(data: BytesLike | str) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")

    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)

    raise TypeError(f"expected bytes-like object or str, got {type(data).__name__}")


def _merge_encode_bytes(first: int, second: int, third: int) -> int:
    return (first << 16) | (second << 8) | third


def _count_trailing_padding(group: bytes, padding: int) -> int:
    count = 0
    for byte in reversed(group):
        if byte != padding:
            break
        count += 1

    return count


@dataclass(frozen=True)
class Base64Engine(IBinaryCodec):
    """Base64 codec bound to one alphabet and padding symbol.

    Engines hold no mutable state, so a single instance may be shared freely
    between threads. Two engines built from equal configurations compare equal.

    Attributes:
        config: The alphabet and padding this engine encodes with.
    """

    config: CodecConfig

    def __post_init__(self) -> None:
        logger.debug(
            "created base64 engine (alphabet tail %r, padding %r)",
            self.config.alphabet.symbols[-2:],
            self.config.padding,
        )

    def encode(self, data: BytesLike | str) -> str:
        """Encode bytes into padded Base64 text.

        Every full 3-byte group produces four symbols. A trailing group of 2
        bytes produces three symbols and one padding symbol; a trailing group
        of 1 byte produces two symbols and two padding symbols.

        Args:
            data: The bytes to encode. Strings are encoded as UTF-8 first.

        Returns:
            Text of length 4 * ceil(len(data) / 3).

        Raises:
            TypeError: If data is neither bytes-like nor str.

        Example:
            >>> standard_engine().encode(b"light w")
            'bGlnaHQgdw=='
        """
        raw = _as_bytes(data)
        symbols = self.config.alphabet.symbols
        encoded = []

        remaining = len(raw) % 3
        full_length = len(raw) - remaining

        for offset in range(0, full_length, 3):
            merged = _merge_encode_bytes(raw[offset], raw[offset + 1], raw[offset + 2])
            encoded.extend(symbols[(merged >> shift) & ENCODE_MASK] for shift in ENCODE_SHIFTS)

        if remaining:
            # missing trailing bytes count as zero
            tail = raw[full_length:] + bytes(3 - remaining)
            merged = _merge_encode_bytes(tail[0], tail[1], tail[2])
            encoded.extend(
                symbols[(merged >> shift) & ENCODE_MASK] for shift in ENCODE_SHIFTS[: remaining + 1]
            )
            encoded.append(self.config.padding * (3 - remaining))

        return "".join(encoded)

    def decode(self, text: BytesLike | str) -> bytes:
        """Decode padded Base64 text back into bytes.

        The number of bytes kept from each group is taken from the number of
        padding symbols ending that group, so decoded zero bytes are always
        preserved.

        Args:
            text: The encoded text. Its length must be a multiple of 4.

        Returns:
            The decoded bytes.

        Raises:
            InvalidLengthError: If the length is not a multiple of 4.
            InvalidPaddingError: If padding appears anywhere but as one or two
                trailing symbols of the final group.
            InvalidSymbolError: If a byte is neither an alphabet symbol nor padding.
            TypeError: If text is neither bytes-like nor str.
        """
        raw = _as_bytes(text)

        try:
            return self._decode_groups(raw)
        except DecodeError as error:
            logger.debug("rejected %d-byte base64 input: %s", len(raw), error)
            raise

    def _decode_groups(self, raw: bytes) -> bytes:
        if len(raw) % 4 != 0:
            raise InvalidLengthError(len(raw))

        alphabet = self.config.alphabet
        padding = ord(self.config.padding)
        last_offset = len(raw) - 4
        decoded = bytearray()

        for offset in range(0, len(raw), 4):
            group = raw[offset : offset + 4]
            pad_count = _count_trailing_padding(group, padding)
            data_count = 4 - pad_count
            padding_allowed = offset == last_offset and pad_count <= 2

            merged = 0
            for slot, byte in enumerate(group):
                if slot >= data_count:
                    if not padding_allowed:
                        raise InvalidPaddingError(byte, offset + slot)
                    # padding slots contribute no data
                    continue

                index = alphabet.index_of(byte)
                if index is None:
                    if byte == padding:
                        raise InvalidPaddingError(byte, offset + slot)
                    raise InvalidSymbolError(byte, offset + slot)

                merged |= index << ENCODE_SHIFTS[slot]

            for shift in DECODE_SHIFTS[: 3 - pad_count]:
                value = (merged >> shift) & DECODE_MASK
                if value > 0xFF:
                    raise ByteRangeError(f"decoded value {value} does not fit in a byte")
                decoded.append(value)

        return bytes(decoded)


_NAMED_ENGINES: Mapping[str, Base64Engine] = MappingProxyType(
    {name: Base64Engine(config) for name, config in NAMED_CONFIGS.items()}
)
_STANDARD_ENGINE = _NAMED_ENGINES["standard"]
_URL_SAFE_ENGINE = _NAMED_ENGINES["url_safe"]


def standard_engine() -> Base64Engine:
    """Get the engine for the RFC 4648 section 4 alphabet (``+`` and ``/``) with ``=`` padding."""
    return _STANDARD_ENGINE


def url_safe_engine() -> Base64Engine:
    """Get the engine for the RFC 4648 section 5 alphabet (``-`` and ``_``) with ``=`` padding."""
    return _URL_SAFE_ENGINE


def engine_for(name: str) -> Base64Engine:
    """Get the engine for a named configuration.

    Args:
        name: Either "standard" or "url_safe".

    Returns:
        The shared engine for that configuration.

    Raises:
        ConfigurationError: If the name is unknown.
    """
    try:
        return _NAMED_ENGINES[name]
    except KeyError:
        raise ConfigurationError(
            f"unknown base64 configuration {name!r}, expected one of {sorted(_NAMED_ENGINES)}"
        ) from None


class Base64:
    """Namespace for the two RFC 4648 engines.

    Example:
        >>> Base64.url_safe().encode(b"\\xfb\\xff")
        '-_8='
    """

    @staticmethod
    def standard() -> Base64Engine:
        return standard_engine()

    @staticmethod
    def url_safe() -> Base64Engine:
        return url_safe_engine()
