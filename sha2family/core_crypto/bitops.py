"""
Word-Level Bit Operations (FIPS 180-4, Section 3.2 and 4.1.2/4.1.3)

The logical functions shared by every SHA-2 variant, written once and
parameterized by word size:
- ROTR / SHR: right rotation and right shift within a w-bit word
- Ch, Maj: bitwise choice and majority
- Σ0, Σ1 ("big sigma"): used by the round function
- σ0, σ1 ("small sigma"): used by the message schedule

Two instances exist, one per engine family:
- BITOPS_32: 32-bit words (SHA-224, SHA-256)
- BITOPS_64: 64-bit words (SHA-384, SHA-512, SHA-512/224, SHA-512/256)
"""

from typing import Tuple


class BitOps:
    """
    Bit operations for one word width.

    Example:
        >>> BITOPS_32.rotr(0x00000001, 1)
        2147483648
        >>> hex(BITOPS_32.maj(0xff00ff00, 0x0ff00ff0, 0x00ff00ff))
        '0xff00ff0'
    """

    def __init__(self, word_size: int,
                 big_sigma0: Tuple[int, int, int],
                 big_sigma1: Tuple[int, int, int],
                 small_sigma0: Tuple[int, int, int],
                 small_sigma1: Tuple[int, int, int]):
        """
        Args:
            word_size: Word width in bits (32 or 64)
            big_sigma0: Three rotation amounts for Σ0
            big_sigma1: Three rotation amounts for Σ1
            small_sigma0: Two rotation amounts and one shift amount for σ0
            small_sigma1: Two rotation amounts and one shift amount for σ1
        """
        if word_size not in (32, 64):
            raise ValueError(f"Word size must be 32 or 64, got {word_size}")

        self.word_size = word_size
        self.word_bytes = word_size // 8
        self.mask = (1 << word_size) - 1

        self._big_sigma0 = big_sigma0
        self._big_sigma1 = big_sigma1
        self._small_sigma0 = small_sigma0
        self._small_sigma1 = small_sigma1

    def rotr(self, x: int, n: int) -> int:
        """Right rotate a word by n bits."""
        return ((x >> n) | (x << (self.word_size - n))) & self.mask

    @staticmethod
    def shr(x: int, n: int) -> int:
        """Right shift a word by n bits (zero fill)."""
        return x >> n

    def add(self, *values: int) -> int:
        """Add words modulo 2^w."""
        return sum(values) & self.mask

    def ch(self, x: int, y: int, z: int) -> int:
        """Choice function: if x then y else z (bitwise)."""
        return ((x & y) ^ (~x & z)) & self.mask

    @staticmethod
    def maj(x: int, y: int, z: int) -> int:
        """Majority function: majority vote of bits."""
        return (x & y) ^ (x & z) ^ (y & z)

    def big_sigma0(self, x: int) -> int:
        """Uppercase Sigma 0: used in compression."""
        r1, r2, r3 = self._big_sigma0
        return self.rotr(x, r1) ^ self.rotr(x, r2) ^ self.rotr(x, r3)

    def big_sigma1(self, x: int) -> int:
        """Uppercase Sigma 1: used in compression."""
        r1, r2, r3 = self._big_sigma1
        return self.rotr(x, r1) ^ self.rotr(x, r2) ^ self.rotr(x, r3)

    def small_sigma0(self, x: int) -> int:
        """Lowercase sigma 0: used in message schedule."""
        r1, r2, s = self._small_sigma0
        return self.rotr(x, r1) ^ self.rotr(x, r2) ^ self.shr(x, s)

    def small_sigma1(self, x: int) -> int:
        """Lowercase sigma 1: used in message schedule."""
        r1, r2, s = self._small_sigma1
        return self.rotr(x, r1) ^ self.rotr(x, r2) ^ self.shr(x, s)

    def __repr__(self) -> str:
        return f"BitOps(word_size={self.word_size})"


BITOPS_32 = BitOps(
    32,
    big_sigma0=(2, 13, 22),
    big_sigma1=(6, 11, 25),
    small_sigma0=(7, 18, 3),
    small_sigma1=(17, 19, 10),
)

BITOPS_64 = BitOps(
    64,
    big_sigma0=(28, 34, 39),
    big_sigma1=(14, 18, 41),
    small_sigma0=(1, 8, 7),
    small_sigma1=(19, 61, 6),
)
