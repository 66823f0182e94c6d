"""
Block Parsing (FIPS 180-4, Section 5.2)

Splits a padded message into fixed-size blocks and reads each block as
sixteen big-endian words. The first byte of every 4- or 8-byte span is the
most significant byte of its word.
"""

from typing import Iterator, List


WORDS_PER_BLOCK = 16


def bytes_to_words(chunk: bytes, word_bytes: int) -> List[int]:
    """Convert a block into big-endian words of word_bytes bytes each."""
    words = []
    for i in range(0, len(chunk), word_bytes):
        word = int.from_bytes(chunk[i:i + word_bytes], byteorder='big')
        words.append(word)
    return words


def iter_blocks(padded: bytes, block_size: int) -> Iterator[bytes]:
    """
    Yield the blocks of a padded message in order.

    Raises:
        ValueError: If the padded length is not a multiple of block_size
    """
    if len(padded) % block_size:
        raise ValueError(
            f"Padded message length {len(padded)} is not a multiple of {block_size}"
        )
    for offset in range(0, len(padded), block_size):
        yield padded[offset:offset + block_size]


def parse_blocks(padded: bytes, block_size: int) -> List[List[int]]:
    """
    Parse a padded message into blocks of sixteen words.

    Args:
        padded: Padded message (output of pad_message)
        block_size: 64 or 128 bytes

    Returns:
        One list of 16 words per block, in message order
    """
    word_bytes = block_size // WORDS_PER_BLOCK
    return [bytes_to_words(block, word_bytes) for block in iter_blocks(padded, block_size)]
