"""
SHA-2 Compression Function

One engine for both word families. The word width, round count and sigma
amounts come from the variant's WordFamily; the round constants come from
the Variant itself.

Components:
- Logical functions: Ch, Maj, and the four sigma functions
- Message Schedule: expands 16 words to 64 (32-bit) or 80 (64-bit) words
- Compression: 64 or 80 rounds over the working registers a..h
"""

from typing import List, Sequence

from .constants import Variant, WordFamily
from .conversions import block_to_words


def _right_rotate(value: int, amount: int, bits: int) -> int:
    """Right rotate a bits-wide integer by the specified amount."""
    mask = (1 << bits) - 1
    return ((value >> amount) | (value << (bits - amount))) & mask


def _ch(x: int, y: int, z: int, mask: int) -> int:
    """Choice function: if x then y else z (bitwise)."""
    return (x & y) ^ ((~x & mask) & z)


def _maj(x: int, y: int, z: int) -> int:
    """Majority function: majority vote of bits."""
    return (x & y) ^ (y & z) ^ (x & z)


def _small_sigma0(x: int, family: WordFamily) -> int:
    """Lowercase sigma 0: used in message schedule."""
    r1, r2, s = family.small_sigma0
    bits = family.word_bits
    return _right_rotate(x, r1, bits) ^ _right_rotate(x, r2, bits) ^ (x >> s)


def _small_sigma1(x: int, family: WordFamily) -> int:
    """Lowercase sigma 1: used in message schedule."""
    r1, r2, s = family.small_sigma1
    bits = family.word_bits
    return _right_rotate(x, r1, bits) ^ _right_rotate(x, r2, bits) ^ (x >> s)


def _big_sigma0(x: int, family: WordFamily) -> int:
    """Uppercase Sigma 0: used in compression."""
    r1, r2, r3 = family.big_sigma0
    bits = family.word_bits
    return (
        _right_rotate(x, r1, bits)
        ^ _right_rotate(x, r2, bits)
        ^ _right_rotate(x, r3, bits)
    )


def _big_sigma1(x: int, family: WordFamily) -> int:
    """Uppercase Sigma 1: used in compression."""
    r1, r2, r3 = family.big_sigma1
    bits = family.word_bits
    return (
        _right_rotate(x, r1, bits)
        ^ _right_rotate(x, r2, bits)
        ^ _right_rotate(x, r3, bits)
    )


def message_schedule(block: int, family: WordFamily) -> List[int]:
    """
    Expand a block's 16 words into the full message schedule.

    For i from 16 to rounds - 1:
        W[i] = σ1(W[i-2]) + W[i-7] + σ0(W[i-15]) + W[i-16]
    """
    mask = family.mask
    w = block_to_words(block, family.block_bits, family.word_bits)
    for i in range(16, family.rounds):
        s0 = _small_sigma0(w[i - 15], family)
        s1 = _small_sigma1(w[i - 2], family)
        w.append((s1 + w[i - 7] + s0 + w[i - 16]) & mask)
    return w


def compress(state: Sequence[int], block: int, variant: Variant) -> List[int]:
    """
    Run all compression rounds for one block.

    The result is the final value of the working registers, not the new
    hash state: the caller adds it word-wise into the previous state.

    Args:
        state: Current hash state (8 words)
        block: One preprocessed block
        variant: Variant supplying the word family and round constants

    Returns:
        Working registers [a, b, c, d, e, f, g, h] after the last round
    """
    family = variant.family
    mask = family.mask
    k = variant.constants
    w = message_schedule(block, family)

    # Initialize working variables
    a, b, c, d, e, f, g, h = state

    for i in range(family.rounds):
        t1 = (h + _big_sigma1(e, family) + _ch(e, f, g, mask) + k[i] + w[i]) & mask
        t2 = (_big_sigma0(a, family) + _maj(a, b, c)) & mask

        h = g
        g = f
        f = e
        e = (d + t1) & mask
        d = c
        c = b
        b = a
        a = (t1 + t2) & mask

    return [a, b, c, d, e, f, g, h]
