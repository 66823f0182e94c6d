"""
SHA-2 Hash Functions (From Scratch)

Public per-variant operations, as defined in FIPS 180-4:

    sha256      / sha256_hex      / sha256_string       32-byte digest
    sha224      / sha224_hex      / sha224_string       28-byte digest
    sha512      / sha512_hex      / sha512_string       64-byte digest
    sha384      / sha384_hex      / sha384_string       48-byte digest
    sha512_224  / sha512_224_hex  / sha512_224_string   28-byte digest
    sha512_256  / sha512_256_hex  / sha512_256_string   32-byte digest

The plain function returns raw digest bytes and the _hex function returns the
lowercase hex string. Both take any bytes-like message plus an optional
explicit length. The message may contain zero bytes.
"""

from typing import Optional

from .variants import SHA224, SHA256, SHA384, SHA512, SHA512_224, SHA512_256


# ============================================================================
# SHA-256 / SHA-224
# ============================================================================

def sha256(data: bytes, length: Optional[int] = None) -> bytes:
    """
    Compute the SHA-256 hash of the input data.

    Args:
        data: Input bytes to hash
        length: Number of leading bytes of data to hash (default: all)

    Returns:
        256-bit (32-byte) digest as bytes

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return SHA256.digest(data, length)


def sha256_hex(data: bytes, length: Optional[int] = None) -> str:
    """Compute SHA-256 hash and return it as a 64-character hex string."""
    return SHA256.hexdigest(data, length)


def sha256_string(text: str, encoding: str = 'utf-8') -> bytes:
    """Compute SHA-256 hash of a string."""
    return sha256(text.encode(encoding))


def sha224(data: bytes, length: Optional[int] = None) -> bytes:
    """Compute the SHA-224 hash (28 bytes) of the input data."""
    return SHA224.digest(data, length)


def sha224_hex(data: bytes, length: Optional[int] = None) -> str:
    """Compute SHA-224 hash and return it as a 56-character hex string."""
    return SHA224.hexdigest(data, length)


def sha224_string(text: str, encoding: str = 'utf-8') -> bytes:
    return sha224(text.encode(encoding))


# ============================================================================
# SHA-512 / SHA-384
# ============================================================================

def sha512(data: bytes, length: Optional[int] = None) -> bytes:
    """
    Compute the SHA-512 hash of the input data.

    Args:
        data: Input bytes to hash
        length: Number of leading bytes of data to hash (default: all)

    Returns:
        512-bit (64-byte) digest as bytes
    """
    return SHA512.digest(data, length)


def sha512_hex(data: bytes, length: Optional[int] = None) -> str:
    """Compute SHA-512 hash and return it as a 128-character hex string."""
    return SHA512.hexdigest(data, length)


def sha512_string(text: str, encoding: str = 'utf-8') -> bytes:
    return sha512(text.encode(encoding))


def sha384(data: bytes, length: Optional[int] = None) -> bytes:
    """Compute the SHA-384 hash (48 bytes) of the input data."""
    return SHA384.digest(data, length)


def sha384_hex(data: bytes, length: Optional[int] = None) -> str:
    """Compute SHA-384 hash and return it as a 96-character hex string."""
    return SHA384.hexdigest(data, length)


def sha384_string(text: str, encoding: str = 'utf-8') -> bytes:
    return sha384(text.encode(encoding))


# ============================================================================
# SHA-512/t
# ============================================================================

def sha512_224(data: bytes, length: Optional[int] = None) -> bytes:
    """Compute the SHA-512/224 hash (28 bytes) of the input data."""
    return SHA512_224.digest(data, length)


def sha512_224_hex(data: bytes, length: Optional[int] = None) -> str:
    """Compute SHA-512/224 hash and return it as a 56-character hex string."""
    return SHA512_224.hexdigest(data, length)


def sha512_224_string(text: str, encoding: str = 'utf-8') -> bytes:
    return sha512_224(text.encode(encoding))


def sha512_256(data: bytes, length: Optional[int] = None) -> bytes:
    """Compute the SHA-512/256 hash (32 bytes) of the input data."""
    return SHA512_256.digest(data, length)


def sha512_256_hex(data: bytes, length: Optional[int] = None) -> str:
    """Compute SHA-512/256 hash and return it as a 64-character hex string."""
    return SHA512_256.hexdigest(data, length)


def sha512_256_string(text: str, encoding: str = 'utf-8') -> bytes:
    return sha512_256(text.encode(encoding))
