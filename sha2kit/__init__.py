# SHA2Kit
"""
SHA-224, SHA-256, SHA-384 and SHA-512 implemented from scratch.

    >>> from sha2kit import sha256_preprocessing, hash256
    >>> hash256(sha256_preprocessing("abc")).hex()[:16]
    'ba7816bf8f01cfea'

This implementation has not been audited. Use hashlib for anything real.
"""

from .core import *  # noqa: F401,F403
from .core import __all__ as _core_all
from .printer import format_hex, format_blocks, format_digest

__version__ = "0.2.0"

__all__ = list(_core_all) + [
    'format_hex',
    'format_blocks',
    'format_digest',
]
