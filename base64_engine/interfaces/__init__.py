"""Base64-engine interfaces package.

This package provides protocol definitions for binary-to-text codecs.
"""

from .encoding import BytesLike, IBinaryCodec

__all__ = [
    "BytesLike",
    "IBinaryCodec",
]
