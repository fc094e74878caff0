"""Base64-engine Python implementation.

This package provides an RFC 4648 Base64 codec with interchangeable alphabets.
A single engine implementation handles both the standard alphabet (``+`` and
``/``) and the URL-safe alphabet (``-`` and ``_``), always padding with ``=``.

Main Components:
    - Base64Engine: Encodes bytes to text and decodes text to bytes
    - standard_engine / url_safe_engine: The two RFC 4648 engines
    - Alphabet / CodecConfig: Immutable alphabet and padding configuration
    - Exceptions: Decode and configuration errors

Example:
    >>> from base64_engine import standard_engine
    >>> standard_engine().encode(b"light wor")
    'bGlnaHQgd29y'
    >>> standard_engine().decode("bGlnaHQgd29y")
    b'light wor'
"""

from base64_engine.alphabet import STANDARD_ALPHABET, URL_SAFE_ALPHABET, Alphabet
from base64_engine.engine import (
    NAMED_CONFIGS,
    STANDARD_CONFIG,
    URL_SAFE_CONFIG,
    Base64,
    Base64Engine,
    CodecConfig,
    engine_for,
    standard_engine,
    url_safe_engine,
)
from base64_engine.exceptions import (
    Base64EngineError,
    ByteRangeError,
    ConfigurationError,
    DecodeError,
    InvalidLengthError,
    InvalidPaddingError,
    InvalidSymbolError,
)
from base64_engine.interfaces import IBinaryCodec

__version__ = "0.1.0"

__all__ = [
    # Engine
    "Base64",
    "Base64Engine",
    "CodecConfig",
    "engine_for",
    "standard_engine",
    "url_safe_engine",
    "NAMED_CONFIGS",
    "STANDARD_CONFIG",
    "URL_SAFE_CONFIG",
    # Alphabet
    "Alphabet",
    "STANDARD_ALPHABET",
    "URL_SAFE_ALPHABET",
    # Interfaces
    "IBinaryCodec",
    # Exceptions
    "Base64EngineError",
    "ConfigurationError",
    "DecodeError",
    "InvalidSymbolError",
    "InvalidPaddingError",
    "InvalidLengthError",
    "ByteRangeError",
]
