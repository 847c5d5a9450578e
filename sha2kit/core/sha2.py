"""
SHA-2 Hash Implementation (From Scratch)

Implements SHA-224, SHA-256, SHA-384 and SHA-512 as defined in FIPS 180-4,
without hashlib.

Usage is two-step: preprocess the message for the right word family, then
drive the blocks through the variant:

    >>> blocks = sha256_preprocessing("abc")
    >>> hash256(blocks).hex()
    'ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad'

The one-shot helpers (sha256, sha256_hex, ...) do both steps.
"""

from dataclasses import dataclass
from typing import Iterable, List

from .compression import compress
from .constants import SHA224, SHA256, SHA384, SHA512, Variant
from .conversions import block_to_words, words_to_block
from .preprocessing import Message, preprocess, sha256_preprocessing


# ============================================================================
# Digest
# ============================================================================

@dataclass(frozen=True)
class Digest:
    """
    Final hash value.

    value holds the output words packed big-endian into one integer;
    truncated variants simply carry fewer words.
    """
    value: int
    word_bits: int
    word_count: int

    @property
    def bits(self) -> int:
        return self.word_bits * self.word_count

    def words(self) -> List[int]:
        """Output words, most significant first."""
        return block_to_words(self.value, self.bits, self.word_bits)

    def to_bytes(self) -> bytes:
        return self.value.to_bytes(self.bits // 8, byteorder='big')

    def hex(self) -> str:
        return self.to_bytes().hex()

    def __int__(self) -> int:
        return self.value


# ============================================================================
# Variant Driver
# ============================================================================

def compute_state(blocks: Iterable[int], variant: Variant) -> List[int]:
    """
    Fold every block into the variant's initial hash, in order.

    Returns the full 8-word state, regardless of how many words the variant
    eventually outputs.
    """
    mask = variant.family.mask
    state = variant.initial_hash()

    for block in blocks:
        registers = compress(state, block, variant)
        state = [(state[k] + registers[k]) & mask for k in range(8)]

    return state


def hash_blocks(blocks: Iterable[int], variant: Variant) -> Digest:
    """
    Hash preprocessed blocks with the given variant.

    Truncated variants drop the trailing state words here, after the last
    block; the internal state always runs at 8 words.
    """
    state = compute_state(blocks, variant)
    output = state[:variant.output_words]
    value = words_to_block(output, variant.digest_bits, variant.word_bits)
    return Digest(value, variant.word_bits, variant.output_words)


def hash256(blocks: Iterable[int]) -> Digest:
    """SHA-256 of 512-bit blocks (256-bit digest)."""
    return hash_blocks(blocks, SHA256)


def hash224(blocks: Iterable[int]) -> Digest:
    """SHA-224 of 512-bit blocks (7 words of 32 bits)."""
    return hash_blocks(blocks, SHA224)


def hash512(blocks: Iterable[int]) -> Digest:
    """SHA-512 of 1024-bit blocks (512-bit digest)."""
    return hash_blocks(blocks, SHA512)


def hash384(blocks: Iterable[int]) -> Digest:
    """SHA-384 of 1024-bit blocks (6 words of 64 bits)."""
    return hash_blocks(blocks, SHA384)


# ============================================================================
# One-shot Helpers
# ============================================================================

def digest(message: Message, variant: Variant) -> Digest:
    """Preprocess and hash a message in one call."""
    return hash_blocks(preprocess(message, variant.family), variant)


def sha224(data: Message) -> bytes:
    """Compute the SHA-224 hash (28 bytes)."""
    return digest(data, SHA224).to_bytes()


def sha256(data: Message) -> bytes:
    """
    Compute the SHA-256 hash of the input data.

    Args:
        data: Input bytes (or text, UTF-8 encoded) to hash

    Returns:
        256-bit (32-byte) digest as bytes

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return hash256(sha256_preprocessing(data)).to_bytes()


def sha384(data: Message) -> bytes:
    """Compute the SHA-384 hash (48 bytes)."""
    return digest(data, SHA384).to_bytes()


def sha512(data: Message) -> bytes:
    """Compute the SHA-512 hash (64 bytes)."""
    return digest(data, SHA512).to_bytes()


def sha224_hex(data: Message) -> str:
    return sha224(data).hex()


def sha256_hex(data: Message) -> str:
    """
    Compute SHA-256 hash and return as hexadecimal string.

    Returns:
        64-character hexadecimal string
    """
    return sha256(data).hex()


def sha384_hex(data: Message) -> str:
    return sha384(data).hex()


def sha512_hex(data: Message) -> str:
    return sha512(data).hex()

