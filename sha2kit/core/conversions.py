"""
Word/Block Conversions

Maps between a block (a fixed-width unsigned integer) and its ordered list
of words. Word order is always big-endian: the first word in the list is
the most significant word of the block.

Blocks are plain Python ints. A 512-bit block is 8 words of 64 bits or
16 words of 32 bits; a 1024-bit block is 16 words of 64 bits.
"""

from typing import List, Sequence


MASK_32 = 0xFFFFFFFF
MASK_64 = 0xFFFFFFFFFFFFFFFF


class PreconditionError(AssertionError):
    """
    Raised when a converter or the padding routine is called with a buffer
    of the wrong shape.

    This is a programming error in the caller, not bad user input, and is
    not meant to be caught and recovered from.
    """


def _arity(block_bits: int, word_bits: int) -> int:
    if block_bits % word_bits != 0:
        raise PreconditionError(
            f"Block width {block_bits} is not a multiple of word width {word_bits}"
        )
    return block_bits // word_bits


def words_to_block(words: List[int], block_bits: int, word_bits: int = 64) -> int:
    """
    Pack a list of words into a single block, most significant word first.

    The list is consumed: it is emptied before returning, so a caller that
    tries to hand the same buffer in again fails the arity check instead of
    silently re-emitting stale words.

    Args:
        words: Exactly block_bits // word_bits words, each in [0, 2**word_bits)
        block_bits: Width of the block in bits
        word_bits: Width of each word in bits

    Returns:
        The block as an integer

    Example:
        >>> buf = [0, 1]
        >>> words_to_block(buf, 128)
        1
        >>> buf
        []
    """
    arity = _arity(block_bits, word_bits)
    if len(words) != arity:
        raise PreconditionError(
            f"Expected {arity} words of {word_bits} bits, got {len(words)}"
        )

    limit = 1 << word_bits
    block = 0
    for word in words:
        if not 0 <= word < limit:
            raise PreconditionError(f"Word {word:#x} does not fit in {word_bits} bits")
        block = (block << word_bits) | word

    del words[:]
    return block


def block_to_words(block: int, block_bits: int, word_bits: int = 64) -> List[int]:
    """
    Split a block into its words, most significant word first.

    Example:
        >>> block_to_words(1, 128)
        [0, 1]
    """
    arity = _arity(block_bits, word_bits)
    if not 0 <= block < 1 << block_bits:
        raise PreconditionError(f"Block does not fit in {block_bits} bits")
    mask = (1 << word_bits) - 1
    return [
        (block >> (word_bits * (arity - 1 - i))) & mask
        for i in range(arity)
    ]


def split_words(words: Sequence[int]) -> List[int]:
    """Split 64-bit words into pairs of 32-bit halves (upper half first)."""
    halves = []
    for word in words:
        halves.append((word >> 32) & MASK_32)
        halves.append(word & MASK_32)
    return halves


def join_words(halves: Sequence[int]) -> List[int]:
    """Join pairs of 32-bit halves back into 64-bit words."""
    if len(halves) % 2 != 0:
        raise PreconditionError(
            f"Cannot pair {len(halves)} 32-bit words into 64-bit words"
        )
    return [
        ((halves[i] & MASK_32) << 32) | (halves[i + 1] & MASK_32)
        for i in range(0, len(halves), 2)
    ]


def digest_to_words(digest) -> List[int]:
    """
    Return the words of a digest in big-endian order.

    Works for both full-width and truncated digests; the word width is the
    width of the variant family that produced it.
    """
    return block_to_words(digest.value, digest.bits, digest.word_bits)
