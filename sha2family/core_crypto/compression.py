"""
Compression Engine (FIPS 180-4, Section 6.2 and 6.4)

The block-consuming state machine shared by all SHA-2 variants:
- Message Schedule: expands 16 words to 64 (32-bit family) or 80 (64-bit family)
- Compression: one round per schedule word
- State update: working variables added back into the hash state

Two engines exist, one per word width. A variant is nothing more than an
engine plus an initial hash value and an output length (see variants.py),
so the engine is exposed as a pure function of (message, initial hash).
"""

import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .bitops import BitOps, BITOPS_32, BITOPS_64
from .blocks import parse_blocks
from .constants import SHA256_K, SHA512_K
from .padding import pad_message


logger = logging.getLogger(__name__)

STATE_WORDS = 8


# ============================================================================
# Engine Families
# ============================================================================

@dataclass(frozen=True)
class EngineFamily:
    """
    Fixed parameters of one SHA-2 word-width family.

    Round count and word width never vary between variants of a family.
    """
    name: str
    ops: BitOps
    block_size: int
    rounds: int
    k: Tuple[int, ...]

    @property
    def word_size(self) -> int:
        return self.ops.word_size

    @property
    def word_bytes(self) -> int:
        return self.ops.word_bytes

    @property
    def state_size(self) -> int:
        """Size of the full serialized state in bytes."""
        return STATE_WORDS * self.ops.word_bytes


SHA256_ENGINE = EngineFamily(
    name="SHA-256",
    ops=BITOPS_32,
    block_size=64,
    rounds=64,
    k=SHA256_K,
)

SHA512_ENGINE = EngineFamily(
    name="SHA-512",
    ops=BITOPS_64,
    block_size=128,
    rounds=80,
    k=SHA512_K,
)


# ============================================================================
# Per-Block Processing
# ============================================================================

def create_message_schedule(words: Sequence[int], engine: EngineFamily) -> List[int]:
    """
    Expand 16 words into the full message schedule.

    For i from 16 to rounds - 1:
        W[i] = σ1(W[i-2]) + W[i-7] + σ0(W[i-15]) + W[i-16]
    """
    ops = engine.ops
    w = list(words)
    for i in range(16, engine.rounds):
        s0 = ops.small_sigma0(w[i - 15])
        s1 = ops.small_sigma1(w[i - 2])
        w.append((w[i - 16] + s0 + w[i - 7] + s1) & ops.mask)
    return w


def compress(state: Sequence[int], w: Sequence[int], engine: EngineFamily) -> List[int]:
    """
    Run all rounds of the compression function over one block.

    Args:
        state: Current hash state (8 words)
        w: Message schedule for the block
        engine: Family whose constants and word size to use

    Returns:
        Updated hash state
    """
    ops = engine.ops
    mask = ops.mask
    k = engine.k

    a, b, c, d, e, f, g, h = state

    for i in range(engine.rounds):
        t1 = (h + ops.big_sigma1(e) + ops.ch(e, f, g) + k[i] + w[i]) & mask
        t2 = (ops.big_sigma0(a) + ops.maj(a, b, c)) & mask

        h = g
        g = f
        f = e
        e = (d + t1) & mask
        d = c
        c = b
        b = a
        a = (t1 + t2) & mask

    # Add compressed block to current hash value
    return [(x + y) & mask for x, y in zip(state, (a, b, c, d, e, f, g, h))]


# ============================================================================
# Engine
# ============================================================================

def process_message(data: bytes, initial_hash: Sequence[int],
                    engine: EngineFamily) -> List[int]:
    """
    Hash a whole message and return the final state words.

    Blocks are processed strictly in order; each block starts from the state
    the previous block left behind.

    Args:
        data: Message bytes
        initial_hash: 8-word initial hash value of the variant
        engine: SHA256_ENGINE or SHA512_ENGINE

    Returns:
        Final hash state (8 words, untruncated)

    Raises:
        LengthOverflowError: If the message is too long to pad
    """
    if len(initial_hash) != STATE_WORDS:
        raise ValueError(f"Initial hash must have {STATE_WORDS} words, got {len(initial_hash)}")

    padded = pad_message(data, engine.block_size)
    blocks = parse_blocks(padded, engine.block_size)
    logger.debug("%s engine: %d bytes in %d block(s)", engine.name, len(data), len(blocks))

    state = list(initial_hash)
    for words in blocks:
        w = create_message_schedule(words, engine)
        state = compress(state, w, engine)

    return state
