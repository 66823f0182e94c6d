"""
SHA-2 Variant Catalog

The six SHA-2 variants as plain data records. Each one binds:
- an engine family (32-bit/64 rounds or 64-bit/80 rounds)
- its own initial hash value
- its output length in bytes

Variants share behaviour through the engine they name, not through
inheritance. Dispatch is by value: look a variant up by name, then call
its digest/hexdigest.

Example:
    >>> get_variant("sha512_256").hexdigest(b"abc")[:16]
    '53048e2681941ef9'
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .compression import EngineFamily, SHA256_ENGINE, SHA512_ENGINE, process_message
from .constants import (
    SHA224_H, SHA256_H, SHA384_H, SHA512_H, SHA512_224_H, SHA512_256_H,
)
from .digest import format_digest, to_hex
from .errors import InvalidInputError, UnknownVariantError
from .padding import encode_length


logger = logging.getLogger(__name__)


# ============================================================================
# Input Handling
# ============================================================================

def prepare_message(data, length: Optional[int] = None) -> bytes:
    """
    Validate a message buffer and its explicit length.

    Args:
        data: Any bytes-like object (bytes, bytearray, memoryview, ...).
              Zero bytes are ordinary message bytes.
        length: Number of leading bytes to hash (default: the whole buffer)

    Returns:
        The message as bytes

    Raises:
        InvalidInputError: If data is missing or not bytes-like, or length is
                           not a non-negative int within the buffer
        LengthOverflowError: If length * 8 does not fit in 64 bits
    """
    if data is None:
        raise InvalidInputError("Message buffer is required, got None")
    if isinstance(data, str):
        raise InvalidInputError("Message must be bytes-like, not str (encode it first)")

    try:
        message = bytes(memoryview(data))
    except TypeError:
        raise InvalidInputError(
            f"Message must be bytes-like, not {type(data).__name__}"
        ) from None

    if length is None:
        return message

    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidInputError(f"Length must be an int, not {type(length).__name__}")
    if length < 0:
        raise InvalidInputError(f"Length must be non-negative, got {length}")

    encode_length(length)

    if length > len(message):
        raise InvalidInputError(
            f"Length {length} exceeds buffer size {len(message)}"
        )
    return message[:length]


# ============================================================================
# Variants
# ============================================================================

@dataclass(frozen=True)
class Variant:
    """One row of the catalog: engine, initial hash value, output length."""
    name: str
    engine: EngineFamily
    iv: Tuple[int, ...]
    digest_size: int

    @property
    def hex_length(self) -> int:
        return 2 * self.digest_size

    @property
    def block_size(self) -> int:
        return self.engine.block_size

    def digest(self, data, length: Optional[int] = None) -> bytes:
        """Hash a message and return the raw digest bytes."""
        message = prepare_message(data, length)
        logger.debug("Computing %s over %d bytes", self.name, len(message))
        state = process_message(message, self.iv, self.engine)
        return format_digest(state, self.engine.word_bytes, self.digest_size)

    def hexdigest(self, data, length: Optional[int] = None) -> str:
        """Hash a message and return the lowercase hex digest."""
        return to_hex(self.digest(data, length))


SHA256 = Variant("SHA-256", SHA256_ENGINE, SHA256_H, 32)
SHA224 = Variant("SHA-224", SHA256_ENGINE, SHA224_H, 28)
SHA512 = Variant("SHA-512", SHA512_ENGINE, SHA512_H, 64)
SHA384 = Variant("SHA-384", SHA512_ENGINE, SHA384_H, 48)
SHA512_224 = Variant("SHA-512/224", SHA512_ENGINE, SHA512_224_H, 28)
SHA512_256 = Variant("SHA-512/256", SHA512_ENGINE, SHA512_256_H, 32)

VARIANTS: Dict[str, Variant] = {
    v.name: v for v in (SHA256, SHA224, SHA512, SHA384, SHA512_224, SHA512_256)
}


# ============================================================================
# Lookup and Dispatch
# ============================================================================

def _normalize_name(name: str) -> str:
    # "sha-512/224", "SHA512_224" and "sha512/224" all map to "SHA512/224"
    return name.strip().upper().replace("-", "").replace("_", "/")


_BY_KEY: Dict[str, Variant] = {_normalize_name(v.name): v for v in VARIANTS.values()}


def available_variants() -> Tuple[str, ...]:
    """Canonical names of all variants, in catalog order."""
    return tuple(VARIANTS)


def get_variant(name: str) -> Variant:
    """
    Look up a variant by name.

    Args:
        name: Canonical name ("SHA-512/224") or a common spelling
              ("sha512_224", "sha-512/224", "SHA224")

    Raises:
        UnknownVariantError: If the name matches no variant
    """
    if not isinstance(name, str):
        raise UnknownVariantError(f"Variant name must be a string, not {type(name).__name__}")

    variant = _BY_KEY.get(_normalize_name(name))
    if variant is None:
        raise UnknownVariantError(
            f"Unknown SHA-2 variant {name!r}; expected one of {', '.join(VARIANTS)}"
        )
    return variant


def digest(name: str, data, length: Optional[int] = None) -> bytes:
    """Hash a message with the named variant and return the raw digest."""
    return get_variant(name).digest(data, length)


def hexdigest(name: str, data, length: Optional[int] = None) -> str:
    """Hash a message with the named variant and return the hex digest."""
    return get_variant(name).hexdigest(data, length)
