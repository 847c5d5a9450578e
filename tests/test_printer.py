"""
Unit tests for the hex printer.
"""

from sha2kit.core.constants import FAMILY_32, FAMILY_64
from sha2kit.core.preprocessing import preprocess, sha256_preprocessing, sha512_preprocessing
from sha2kit.core.sha2 import hash224, hash256, hash384
from sha2kit.printer import format_blocks, format_digest, format_hex


class TestFormatHex:
    """Unit tests for word formatting."""

    def test_split_halves(self):
        """64-bit words print as two 8-digit halves by default."""
        assert format_hex([0x0123456789abcdef]) == "01234567 89abcdef"

    def test_whole_words(self):
        """Without splitting, 64-bit words print as 16 digits."""
        assert format_hex([0x0123456789abcdef, 1], split4=False) == \
            "0123456789abcdef 0000000000000001"

    def test_32_bit_words(self):
        """32-bit words are always one group each."""
        assert format_hex([1, 0xffffffff], word_bits=32) == "00000001 ffffffff"
        assert format_hex([1], word_bits=32, split4=False) == "00000001"

    def test_empty(self):
        assert format_hex([]) == ""


class TestFormatBlocks:
    """Unit tests for block dumps."""

    def test_empty_message_block(self):
        """The empty message is the marker followed by zeros."""
        text = format_blocks(preprocess(b"", FAMILY_32), 512)
        assert text == " ".join(["80000000"] + ["00000000"] * 15)

    def test_abc_block(self):
        """'abc' shows the bytes, the marker and the length."""
        groups = format_blocks(sha256_preprocessing("abc"), 512).split()
        assert groups[0] == "61626380"
        assert groups[-1] == "00000018"
        assert len(groups) == 16

    def test_multiple_blocks(self):
        """Each 1024-bit block contributes 32 groups."""
        blocks = preprocess(bytes(112), FAMILY_64)
        assert len(format_blocks(blocks, 1024).split()) == 64
        assert len(format_blocks(blocks, 1024, split4=False).split()) == 32


class TestFormatDigest:
    """Unit tests for digest formatting."""

    def test_sha256(self):
        text = format_digest(hash256(sha256_preprocessing("abc")))
        assert text == (
            "ba7816bf 8f01cfea 414140de 5dae2223 "
            "b00361a3 96177a9c b410ff61 f20015ad"
        )

    def test_sha224_has_seven_groups(self):
        """SHA-224 prints its 7 words."""
        text = format_digest(hash224(sha256_preprocessing("abc")))
        assert text.split() == [
            "23097d22", "3405d822", "8642a477", "bda255b3",
            "2aadbce4", "bda0b3f7", "e36c9da7",
        ]

    def test_sha384_grouping(self):
        """SHA-384 prints 6 words, split into halves or whole."""
        result = hash384(sha512_preprocessing("abc"))
        assert len(format_digest(result).split()) == 12
        whole = format_digest(result, split4=False).split()
        assert len(whole) == 6
        assert whole[0] == "cb00753f45a35e8b"
