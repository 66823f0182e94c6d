"""
Digest Formatting

Turns a final hash state into the variant's output: words are written
big-endian, the result is cut to the variant's digest size (the leading
bytes are kept) and hex-encoded in lowercase.
"""

from typing import Sequence


def state_to_bytes(state: Sequence[int], word_bytes: int) -> bytes:
    """Serialize hash state words big-endian."""
    return b''.join(word.to_bytes(word_bytes, byteorder='big') for word in state)


def truncate(raw: bytes, digest_size: int) -> bytes:
    """
    Keep the first digest_size bytes of a serialized state.

    Raises:
        ValueError: If digest_size is not between 1 and len(raw)
    """
    if not 0 < digest_size <= len(raw):
        raise ValueError(f"Digest size must be 1-{len(raw)} bytes, got {digest_size}")
    return raw[:digest_size]


def format_digest(state: Sequence[int], word_bytes: int, digest_size: int) -> bytes:
    """Serialize and truncate a final state into a digest."""
    return truncate(state_to_bytes(state, word_bytes), digest_size)


def to_hex(digest: bytes) -> str:
    """Lowercase hex encoding, two digits per byte, no separators."""
    return digest.hex()
