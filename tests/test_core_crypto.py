"""
Unit tests for the SHA-2 building blocks.

Tests:
- Bit operations (32-bit and 64-bit)
- Message padding
- Block parsing
- Compression engine
- Digest formatting
"""

import pytest

from sha2family.core_crypto.bitops import BitOps, BITOPS_32, BITOPS_64
from sha2family.core_crypto.padding import (
    pad_message, padded_length, encode_length, length_field_size, MAX_MESSAGE_BYTES
)
from sha2family.core_crypto.blocks import bytes_to_words, iter_blocks, parse_blocks
from sha2family.core_crypto.compression import (
    SHA256_ENGINE, SHA512_ENGINE, create_message_schedule, compress, process_message
)
from sha2family.core_crypto.constants import SHA256_H, SHA384_H, SHA512_H
from sha2family.core_crypto.digest import state_to_bytes, truncate, format_digest, to_hex
from sha2family.core_crypto.errors import LengthOverflowError
from sha2family.core_crypto.selftest import MSG_448


class TestBitOps:
    """Unit tests for the word-level functions."""

    def test_rotr_32(self):
        """Rotation wraps low bits around to the top of a 32-bit word."""
        assert BITOPS_32.rotr(0x00000001, 1) == 0x80000000
        assert BITOPS_32.rotr(0x12345678, 8) == 0x78123456

    def test_rotr_64(self):
        """Rotation wraps low bits around to the top of a 64-bit word."""
        assert BITOPS_64.rotr(1, 1) == 0x8000000000000000
        assert BITOPS_64.rotr(0x0123456789abcdef, 16) == 0xcdef0123456789ab

    def test_shr_discards_bits(self):
        """Shift fills with zeros and drops low bits."""
        assert BITOPS_32.shr(0x80000001, 31) == 1
        assert BITOPS_64.shr(0xff, 4) == 0x0f

    def test_add_wraps(self):
        """Addition is modulo 2^w."""
        assert BITOPS_32.add(0xffffffff, 1) == 0
        assert BITOPS_64.add(0xffffffffffffffff, 2) == 1
        assert BITOPS_32.add(0xffffffff, 0xffffffff, 2) == 0

    def test_ch(self):
        """Ch picks y where x is set and z elsewhere."""
        assert BITOPS_32.ch(0xffffffff, 0x12345678, 0x9abcdef0) == 0x12345678
        assert BITOPS_32.ch(0x00000000, 0x12345678, 0x9abcdef0) == 0x9abcdef0
        assert BITOPS_32.ch(0xffff0000, 0x12345678, 0x9abcdef0) == 0x1234def0

    def test_ch_stays_in_word(self):
        """Ch never produces bits above the word size."""
        assert BITOPS_64.ch(0, 0, 0xffffffffffffffff) == 0xffffffffffffffff

    def test_maj(self):
        """Maj is a bitwise majority vote."""
        assert BITOPS_32.maj(0xff00ff00, 0x0ff00ff0, 0x00ff00ff) == 0x0ff00ff0

    def test_small_sigmas_32(self):
        """σ0 = ROTR7 ^ ROTR18 ^ SHR3, σ1 = ROTR17 ^ ROTR19 ^ SHR10."""
        assert BITOPS_32.small_sigma0(1) == (1 << 25) | (1 << 14)
        assert BITOPS_32.small_sigma1(1) == (1 << 15) | (1 << 13)
        assert BITOPS_32.small_sigma0(8) == (1 << 28) | (1 << 17) | 1

    def test_big_sigmas_32(self):
        """Σ0 = ROTR2 ^ ROTR13 ^ ROTR22, Σ1 = ROTR6 ^ ROTR11 ^ ROTR25."""
        assert BITOPS_32.big_sigma0(1) == 0x40080400
        assert BITOPS_32.big_sigma1(1) == 0x04200080

    def test_small_sigmas_64(self):
        """σ0 = ROTR1 ^ ROTR8 ^ SHR7, σ1 = ROTR19 ^ ROTR61 ^ SHR6."""
        assert BITOPS_64.small_sigma0(1) == 0x8100000000000000
        assert BITOPS_64.small_sigma1(1) == (1 << 45) | (1 << 3)
        assert BITOPS_64.small_sigma1(64) == (1 << 51) | (1 << 9) | 1

    def test_big_sigmas_64(self):
        """Σ0 = ROTR28 ^ ROTR34 ^ ROTR39, Σ1 = ROTR14 ^ ROTR18 ^ ROTR41."""
        assert BITOPS_64.big_sigma0(1) == (1 << 36) | (1 << 30) | (1 << 25)
        assert BITOPS_64.big_sigma1(1) == (1 << 50) | (1 << 46) | (1 << 23)

    def test_invalid_word_size(self):
        """Only 32 and 64 bit words are supported."""
        with pytest.raises(ValueError):
            BitOps(16, (1, 2, 3), (1, 2, 3), (1, 2, 3), (1, 2, 3))


class TestPadding:
    """Unit tests for Merkle-Damgard padding."""

    def test_abc_single_block(self):
        """'abc' pads to one 64-byte block."""
        padded = pad_message(b"abc", 64)
        assert len(padded) == 64
        assert padded[:4] == b"abc\x80"
        assert padded[4:56] == b"\x00" * 52
        assert padded[56:] == (24).to_bytes(8, 'big')

    def test_empty_message(self):
        """Empty message still gets a full block."""
        assert pad_message(b"", 64) == b"\x80" + b"\x00" * 63
        assert pad_message(b"", 128) == b"\x80" + b"\x00" * 127

    @pytest.mark.parametrize("length,expected", [
        (0, 64), (55, 64), (56, 128), (63, 128), (64, 128), (119, 128), (120, 192),
    ])
    def test_block_boundaries_32(self, length, expected):
        """Marker and 8-byte length field must both fit."""
        assert len(pad_message(b"x" * length, 64)) == expected

    @pytest.mark.parametrize("length,expected", [
        (0, 128), (111, 128), (112, 256), (118, 256), (119, 256), (128, 256), (239, 256), (240, 384),
    ])
    def test_block_boundaries_64(self, length, expected):
        """Marker and 16-byte length field must both fit."""
        assert len(pad_message(b"x" * length, 128)) == expected

    def test_padded_length_formula(self):
        """Padded length is the smallest block multiple holding L + 1 + field bytes."""
        for length in range(300):
            assert padded_length(length, 64) == -(-(length + 9) // 64) * 64
            assert padded_length(length, 128) == -(-(length + 17) // 128) * 128

    def test_length_field_64_bit_family(self):
        """The 16-byte field carries the bit length in its last 8 bytes."""
        padded = pad_message(b"a" * 200, 128)
        assert padded[-16:-8] == b"\x00" * 8
        assert padded[-8:] == (1600).to_bytes(8, 'big')

    def test_marker_follows_message(self):
        """0x80 sits directly after the message, zero bytes included."""
        padded = pad_message(b"\x00\x00\x00", 64)
        assert padded[:4] == b"\x00\x00\x00\x80"
        assert padded[-8:] == (24).to_bytes(8, 'big')

    def test_length_field_size(self):
        assert length_field_size(64) == 8
        assert length_field_size(128) == 16

    def test_encode_length(self):
        """Bit length is big-endian."""
        assert encode_length(3) == b"\x00" * 7 + b"\x18"
        assert encode_length(1, 16) == b"\x00" * 15 + b"\x08"

    def test_encode_length_maximum(self):
        """The largest representable length still encodes."""
        assert encode_length(MAX_MESSAGE_BYTES) == (2 ** 64 - 8).to_bytes(8, 'big')

    def test_encode_length_overflow(self):
        """A bit length of 2^64 or more is rejected, never wrapped."""
        with pytest.raises(LengthOverflowError):
            encode_length(MAX_MESSAGE_BYTES + 1)
        with pytest.raises(LengthOverflowError):
            encode_length(2 ** 64, 16)


class TestBlockParser:
    """Unit tests for block parsing."""

    def test_words_are_big_endian_32(self):
        assert bytes_to_words(bytes(range(8)), 4) == [0x00010203, 0x04050607]

    def test_words_are_big_endian_64(self):
        assert bytes_to_words(bytes(range(8)), 8) == [0x0001020304050607]

    def test_no_sign_extension(self):
        """High bytes stay unsigned."""
        assert bytes_to_words(b"\xff" * 4, 4) == [0xffffffff]
        assert bytes_to_words(b"\x80" + b"\x00" * 7, 8) == [1 << 63]

    def test_parse_abc(self):
        """'abc' parses to the FIPS 180-4 example words."""
        blocks = parse_blocks(pad_message(b"abc", 64), 64)
        assert len(blocks) == 1
        assert len(blocks[0]) == 16
        assert blocks[0][0] == 0x61626380
        assert blocks[0][1:15] == [0] * 14
        assert blocks[0][15] == 0x18

    def test_parse_64_bit_block(self):
        blocks = parse_blocks(pad_message(b"abc", 128), 128)
        assert len(blocks) == 1
        assert blocks[0][0] == 0x6162638000000000
        assert blocks[0][15] == 0x18

    def test_block_count(self):
        """Blocks come out in message order."""
        padded = pad_message(bytes(range(100)), 64)
        blocks = list(iter_blocks(padded, 64))
        assert len(blocks) == 2
        assert blocks[0] == bytes(range(64))

    def test_misaligned_buffer_rejected(self):
        with pytest.raises(ValueError):
            list(iter_blocks(b"\x00" * 65, 64))


class TestCompressionEngine:
    """Unit tests for schedule expansion and compression."""

    def test_engine_parameters(self):
        """Round count and sizes are fixed per family."""
        assert SHA256_ENGINE.rounds == 64
        assert len(SHA256_ENGINE.k) == 64
        assert SHA256_ENGINE.block_size == 64
        assert SHA256_ENGINE.state_size == 32
        assert SHA512_ENGINE.rounds == 80
        assert len(SHA512_ENGINE.k) == 80
        assert SHA512_ENGINE.block_size == 128
        assert SHA512_ENGINE.state_size == 64

    def test_schedule_length(self):
        words = list(range(16))
        assert len(create_message_schedule(words, SHA256_ENGINE)) == 64
        assert len(create_message_schedule(words, SHA512_ENGINE)) == 80

    def test_schedule_copies_block(self):
        """First 16 schedule words are the block words."""
        words = list(range(1, 17))
        assert create_message_schedule(words, SHA256_ENGINE)[:16] == words

    def test_schedule_abc(self):
        """W16 and W17 for 'abc' match the FIPS 180-4 example."""
        words = parse_blocks(pad_message(b"abc", 64), 64)[0]
        w = create_message_schedule(words, SHA256_ENGINE)
        assert w[16] == 0x61626380
        assert w[17] == 0x000f0000

    def test_schedule_words_fit(self):
        """Every schedule word stays within the word size."""
        w = create_message_schedule([0xffffffffffffffff] * 16, SHA512_ENGINE)
        assert all(0 <= x < 2 ** 64 for x in w)

    def test_single_block_abc(self):
        """One compression of 'abc' yields the SHA-256 digest words."""
        state = process_message(b"abc", SHA256_H, SHA256_ENGINE)
        assert state == [
            0xba7816bf, 0x8f01cfea, 0x414140de, 0x5dae2223,
            0xb00361a3, 0x96177a9c, 0xb410ff61, 0xf20015ad,
        ]

    def test_state_chains_across_blocks(self):
        """The second block starts from the first block's output state."""
        blocks = parse_blocks(pad_message(MSG_448, 64), 64)
        assert len(blocks) == 2

        state = list(SHA256_H)
        for words in blocks:
            state = compress(state, create_message_schedule(words, SHA256_ENGINE), SHA256_ENGINE)

        assert state == process_message(MSG_448, SHA256_H, SHA256_ENGINE)
        assert state_to_bytes(state, 4).hex() == (
            "248d6a61d20638b8e5c026930c3e6039a33ce45964ff2167f6ecedd419db06c1"
        )

    def test_block_order_matters(self):
        """Swapping blocks changes the result."""
        blocks = parse_blocks(pad_message(MSG_448, 64), 64)
        forward = list(SHA256_H)
        backward = list(SHA256_H)
        for words in blocks:
            forward = compress(forward, create_message_schedule(words, SHA256_ENGINE), SHA256_ENGINE)
        for words in reversed(blocks):
            backward = compress(backward, create_message_schedule(words, SHA256_ENGINE), SHA256_ENGINE)
        assert forward != backward

    def test_initial_hash_size_checked(self):
        with pytest.raises(ValueError):
            process_message(b"abc", SHA256_H[:7], SHA256_ENGINE)

    def test_initial_hash_not_modified(self):
        """The IV tables are never mutated by hashing."""
        before = tuple(SHA512_H)
        process_message(b"abc", SHA512_H, SHA512_ENGINE)
        assert SHA512_H == before


class TestDigestFormatter:
    """Unit tests for digest serialization and truncation."""

    def test_state_to_bytes_big_endian(self):
        raw = state_to_bytes([0x01020304] + [0] * 7, 4)
        assert len(raw) == 32
        assert raw[:4] == b"\x01\x02\x03\x04"

    def test_state_to_bytes_64(self):
        raw = state_to_bytes([0x0102030405060708] * 8, 8)
        assert len(raw) == 64
        assert raw[:8] == bytes(range(1, 9))

    def test_truncate_keeps_leading_bytes(self):
        assert truncate(bytes(range(32)), 28) == bytes(range(28))
        assert truncate(bytes(range(64)), 64) == bytes(range(64))

    def test_truncate_bounds(self):
        with pytest.raises(ValueError):
            truncate(bytes(32), 0)
        with pytest.raises(ValueError):
            truncate(bytes(32), 33)

    def test_truncation_after_full_state(self):
        """SHA-384 is the leading 48 bytes of the full 64-byte state."""
        state = process_message(b"abc", SHA384_H, SHA512_ENGINE)
        full = state_to_bytes(state, 8)
        assert format_digest(state, 8, 48) == full[:48]
        assert to_hex(format_digest(state, 8, 48)).startswith("cb00753f45a35e8b")

    def test_to_hex_lowercase(self):
        assert to_hex(b"\x00\xab\xff") == "00abff"
