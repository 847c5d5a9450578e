"""
SHA-2 Message Preprocessing

Turns a message into the list of blocks the compression engine consumes.

Padding rules (FIPS 180-4, section 5.1):
1. Append bit '1' to the message (0x80 byte)
2. Append zeros until only the length suffix is missing from the last block
3. Append the original message length in bits, big-endian
   (64 bits for SHA-224/256, 128 bits for SHA-384/512)

Packing happens in two stages. Bytes are first grouped into 64-bit words,
then the words are grouped into blocks with the length suffix written into
the trailing words of the final block. When the suffix does not fit into
what is left of the current block, that block is closed and a fresh
all-zero block carries the suffix.
"""

from typing import List, Sequence, Union

from .constants import FAMILY_32, FAMILY_64, WordFamily
from .conversions import MASK_64, PreconditionError, words_to_block


Message = Union[str, bytes, bytearray]


def to_bytes(message: Message, encoding: str = 'utf-8') -> bytes:
    """Encode text input; bytes pass through unchanged."""
    if isinstance(message, str):
        return message.encode(encoding)
    return bytes(message)


def bytes_to_word(chunk: Sequence[int]) -> int:
    """Merge up to 8 bytes into a big-endian 64-bit word, zero-filled on the right."""
    word = 0
    for i in range(8):
        word <<= 8
        if i < len(chunk):
            word |= chunk[i]
    return word


def byte_padding(data: bytes) -> List[int]:
    """
    Merge groups of 8 bytes into 64-bit words and append the '1' bit.

    The 0x80 marker goes into the next free byte of the last word. If the
    message is already a multiple of 8 bytes, the marker starts a new word.

    Example:
        >>> hex(byte_padding(b"\\x01\\x02\\x03")[0])
        '0x102038000000000'
        >>> byte_padding(bytes(7) + b"\\x05")
        [5, 9223372036854775808]
    """
    full = len(data) - len(data) % 8
    words = [bytes_to_word(data[i:i + 8]) for i in range(0, full, 8)]

    # Last (possibly empty) partial word plus the marker byte
    tail = bytes(data[full:]) + b'\x80'
    words.append(bytes_to_word(tail))

    return words


def word_padding(words: Sequence[int], suffix: Sequence[int], block_words: int) -> List[int]:
    """
    Pack 64-bit words into blocks and write the suffix at the end of the last one.

    Args:
        words: Message words, already carrying the '1' marker
        suffix: Words to place in the trailing slots of the final block
            (normally the message bit length)
        block_words: Block width in 64-bit words (8 or 16)

    Returns:
        List of blocks, each block_words * 64 bits wide

    Raises:
        PreconditionError: If the suffix is wider than a block
    """
    if len(suffix) > block_words:
        raise PreconditionError(
            f"Suffix of {len(suffix)} words is larger than block size {block_words}"
        )

    block_bits = block_words * 64
    blocks = []
    block = [0] * block_words
    index = 0

    for word in words:
        block[index] = word
        index += 1
        if index == block_words:
            blocks.append(words_to_block(block, block_bits))
            block = [0] * block_words
            index = 0

    # Check if the suffix fits in the remaining space
    start = block_words - len(suffix)
    if index > start:
        blocks.append(words_to_block(block, block_bits))
        block = [0] * block_words

    for offset, suffix_word in enumerate(suffix):
        block[start + offset] = suffix_word
    blocks.append(words_to_block(block, block_bits))

    return blocks


def length_suffix(bit_length: int, suffix_words: int) -> List[int]:
    """Split a bit length into suffix_words big-endian 64-bit words."""
    return [
        (bit_length >> (64 * (suffix_words - 1 - i))) & MASK_64
        for i in range(suffix_words)
    ]


def custom_preprocessing(message: Message, block_words: int, suffix_words: int) -> List[int]:
    """
    Pad and split a message into blocks of block_words 64-bit words,
    reserving suffix_words words for the bit length.
    """
    data = to_bytes(message)
    suffix = length_suffix(8 * len(data), suffix_words)
    return word_padding(byte_padding(data), suffix, block_words)


def preprocess(message: Message, family: WordFamily = FAMILY_32) -> List[int]:
    """
    Pad and split a message into blocks for the given word family.

    Args:
        message: Text (UTF-8 encoded first) or bytes
        family: FAMILY_32 (512-bit blocks) or FAMILY_64 (1024-bit blocks)

    Returns:
        Ordered list of blocks

    Example:
        >>> len(preprocess(b"abc"))
        1
        >>> len(preprocess(bytes(56)))
        2
    """
    return custom_preprocessing(message, family.block_words, family.suffix_words)


def sha256_preprocessing(message: Message) -> List[int]:
    """Preprocess for SHA-224 and SHA-256 (512-bit blocks)."""
    return preprocess(message, FAMILY_32)


def sha512_preprocessing(message: Message) -> List[int]:
    """Preprocess for SHA-384 and SHA-512 (1024-bit blocks)."""
    return preprocess(message, FAMILY_64)
