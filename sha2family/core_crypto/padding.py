"""
Message Padding (FIPS 180-4, Section 5.1)

Merkle-Damgard padding shared by both engine families:
1. Append the bit '1' to the message (0x80 byte)
2. Append zero bytes until the length field fits exactly at the end of a block
3. Append the original message length in bits, big-endian

The length field is 8 bytes for 64-byte blocks (SHA-224/256) and 16 bytes for
128-byte blocks (SHA-384/512 and the SHA-512/t variants). The bit length is an
unsigned 64-bit value in both cases, so the leading 8 bytes of the 16-byte
field are always zero. A length that does not fit in 64 bits is rejected.
"""

from .errors import LengthOverflowError


# Largest message length (in bytes) whose bit length fits in 64 bits
MAX_MESSAGE_BYTES = (1 << 64) // 8 - 1

PADDING_MARKER = b'\x80'


def length_field_size(block_size: int) -> int:
    """Width in bytes of the length field for a given block size."""
    return block_size // 8


def encode_length(byte_length: int, field_size: int = 8) -> bytes:
    """
    Encode a message length as its big-endian bit count.

    Args:
        byte_length: Message length in bytes
        field_size: Width of the length field in bytes (8 or 16)

    Returns:
        field_size bytes holding byte_length * 8

    Raises:
        LengthOverflowError: If the bit length needs more than 64 bits
    """
    bit_length = byte_length * 8
    if bit_length >> 64:
        raise LengthOverflowError(
            f"Message of {byte_length} bytes has a bit length that does not "
            f"fit in the 64-bit length field"
        )
    return bit_length.to_bytes(field_size, byteorder='big')


def padded_length(byte_length: int, block_size: int) -> int:
    """
    Length of the padded message in bytes.

    This is the smallest multiple of block_size that holds the message, the
    0x80 marker and the length field.
    """
    minimum = byte_length + len(PADDING_MARKER) + length_field_size(block_size)
    return -(-minimum // block_size) * block_size


def pad_message(data: bytes, block_size: int) -> bytes:
    """
    Pad the message as defined in FIPS 180-4.

    Args:
        data: The original message bytes (may contain zero bytes)
        block_size: 64 for the 32-bit family, 128 for the 64-bit family

    Returns:
        Padded message as bytes (length is a multiple of block_size)

    Raises:
        LengthOverflowError: If len(data) * 8 does not fit in 64 bits
    """
    original_length = len(data)
    field_size = length_field_size(block_size)
    length_bytes = encode_length(original_length, field_size)

    total = padded_length(original_length, block_size)
    zero_count = total - original_length - len(PADDING_MARKER) - field_size

    return b''.join((bytes(data), PADDING_MARKER, b'\x00' * zero_count, length_bytes))
