# Core SHA-2 Module
"""
From-scratch SHA-2 engine:
- Word/block conversions - conversions.py
- Message padding and block segmentation - preprocessing.py
- Round constants and initial hash values - constants.py
- Compression function - compression.py
- Variant driver and one-shot helpers - sha2.py
"""

from .conversions import (
    PreconditionError,
    words_to_block,
    block_to_words,
    split_words,
    join_words,
    digest_to_words,
)

from .constants import (
    WordFamily,
    Variant,
    FAMILY_32,
    FAMILY_64,
    SHA224,
    SHA256,
    SHA384,
    SHA512,
    get_variant,
)

from .preprocessing import (
    preprocess,
    sha256_preprocessing,
    sha512_preprocessing,
    custom_preprocessing,
    byte_padding,
    word_padding,
)

from .compression import compress, message_schedule

from .sha2 import (
    Digest,
    compute_state,
    hash_blocks,
    hash224,
    hash256,
    hash384,
    hash512,
    digest,
    sha224,
    sha256,
    sha384,
    sha512,
    sha224_hex,
    sha256_hex,
    sha384_hex,
    sha512_hex,
)

__all__ = [
    # Conversions
    'PreconditionError',
    'words_to_block',
    'block_to_words',
    'split_words',
    'join_words',
    'digest_to_words',
    # Constants
    'WordFamily',
    'Variant',
    'FAMILY_32',
    'FAMILY_64',
    'SHA224',
    'SHA256',
    'SHA384',
    'SHA512',
    'get_variant',
    # Preprocessing
    'preprocess',
    'sha256_preprocessing',
    'sha512_preprocessing',
    'custom_preprocessing',
    'byte_padding',
    'word_padding',
    # Compression
    'compress',
    'message_schedule',
    # Driver
    'Digest',
    'compute_state',
    'hash_blocks',
    'hash224',
    'hash256',
    'hash384',
    'hash512',
    'digest',
    'sha224',
    'sha256',
    'sha384',
    'sha512',
    'sha224_hex',
    'sha256_hex',
    'sha384_hex',
    'sha512_hex',
]
