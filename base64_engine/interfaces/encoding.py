"""Encoding interfaces for base64-engine.

This module defines the protocol shared by binary-to-text codecs.
"""

from __future__ import annotations

from typing import Protocol, Union

BytesLike = Union[bytes, bytearray, memoryview]


class IBinaryCodec(Protocol):
    """Interface for binary-to-text encoding and decoding operations."""

    def encode(self, data: BytesLike | str) -> str:
        """Encode binary data into text.

        Args:
            data: The bytes to encode. Strings are encoded as UTF-8 first.

        Returns:
            The encoded text.
        """
        ...

    def decode(self, text: BytesLike | str) -> bytes:
        """Decode text back into binary data.

        Args:
            text: The encoded text.

        Returns:
            The decoded bytes.

        Raises:
            DecodeError: When the text is not a valid encoding.
        """
        ...
