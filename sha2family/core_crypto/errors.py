"""
Exceptions raised by the SHA-2 core.

Every exception derives from Sha2Error so callers can catch the whole
family at once, and also from the closest built-in so that code written
against plain TypeError/ValueError/KeyError keeps working.
"""


class Sha2Error(Exception):
    """Base class for all SHA-2 errors."""
    pass


class InvalidInputError(Sha2Error, TypeError):
    """Raised when the message buffer or its length is missing or unusable."""
    pass


class LengthOverflowError(Sha2Error, ValueError):
    """Raised when the message bit length does not fit the 64-bit length field."""
    pass


class UnknownVariantError(Sha2Error, KeyError):
    """Raised when a variant name is not in the catalog."""
    pass


class SelfTestError(Sha2Error):
    """Raised when a known-answer test or backend cross-check fails."""
    pass
