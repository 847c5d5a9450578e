"""
Hex Printer

Renders blocks and digests as grouped hexadecimal text for display.
64-bit words are shown either as two 8-digit halves or as one 16-digit
group; 32-bit words are always one 8-digit group.
"""

from typing import Iterable, Sequence

from .core.conversions import block_to_words, split_words


def format_hex(words: Sequence[int], word_bits: int = 64, split4: bool = True) -> str:
    """
    Format words as space-separated hex groups.

    Example:
        >>> format_hex([0x0123456789abcdef])
        '01234567 89abcdef'
        >>> format_hex([0x0123456789abcdef], split4=False)
        '0123456789abcdef'
    """
    if word_bits == 32:
        return " ".join(f"{w:08x}" for w in words)
    if split4:
        return " ".join(f"{w:08x}" for w in split_words(words))
    return " ".join(f"{w:016x}" for w in words)


def format_blocks(blocks: Iterable[int], block_bits: int, split4: bool = True) -> str:
    """Hex dump of a list of blocks, as the preprocessor produced them."""
    groups = []
    for block in blocks:
        groups.append(format_hex(block_to_words(block, block_bits), 64, split4))
    return " ".join(groups)


def format_digest(digest, split4: bool = True) -> str:
    """Format a Digest using its own word width."""
    return format_hex(digest.words(), digest.word_bits, split4)
