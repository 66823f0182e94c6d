"""
sha2family - the SHA-2 hash family implemented from scratch.

Usage:
    >>> from sha2family import sha256_hex, hexdigest
    >>> sha256_hex(b"abc")
    'ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad'
    >>> hexdigest("SHA-224", b"abc")
    '23097d223405d8228642a477bda255b32aadbce4bda0b3f7e36c9da7'
"""

from .core_crypto.errors import (
    Sha2Error,
    InvalidInputError,
    LengthOverflowError,
    UnknownVariantError,
    SelfTestError,
)
from .core_crypto.sha2 import (
    sha224, sha224_hex, sha224_string,
    sha256, sha256_hex, sha256_string,
    sha384, sha384_hex, sha384_string,
    sha512, sha512_hex, sha512_string,
    sha512_224, sha512_224_hex, sha512_224_string,
    sha512_256, sha512_256_hex, sha512_256_string,
)
from .core_crypto.variants import (
    Variant,
    VARIANTS,
    available_variants,
    digest,
    get_variant,
    hexdigest,
)
from .core_crypto.selftest import cross_check, run_self_test

__version__ = "1.0.0"

__all__ = [
    'Sha2Error',
    'InvalidInputError',
    'LengthOverflowError',
    'UnknownVariantError',
    'SelfTestError',
    'sha224', 'sha224_hex', 'sha224_string',
    'sha256', 'sha256_hex', 'sha256_string',
    'sha384', 'sha384_hex', 'sha384_string',
    'sha512', 'sha512_hex', 'sha512_string',
    'sha512_224', 'sha512_224_hex', 'sha512_224_string',
    'sha512_256', 'sha512_256_hex', 'sha512_256_string',
    'Variant',
    'VARIANTS',
    'available_variants',
    'digest',
    'get_variant',
    'hexdigest',
    'cross_check',
    'run_self_test',
]
