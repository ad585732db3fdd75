"""
SHA-2 Block Compression Function (From Scratch)

Implements the compression function shared by every SHA-2 variant, as defined
in FIPS 180-4. A single routine serves both word widths; a `WordSpec` carries
everything that differs between them.

Components:
- Message Schedule: Expands 16 words to 64 (32-bit) or 80 (64-bit) words
- Compression: one round per schedule word
- Feed-forward: working variables added back into the running state
"""

from dataclasses import dataclass
from typing import List, Tuple

from .byteorder import load_words
from .constants import K256, K512


# ============================================================================
# Word Parameters
# ============================================================================

@dataclass(frozen=True)
class WordSpec:
    """
    Word-width parameters of one SHA-2 engine.
    
    Rotation tuples for the big sigmas are three right-rotations; for the
    small (schedule) sigmas the third entry is a right-shift.
    """
    bits: int
    k: Tuple[int, ...]
    big_sigma0: Tuple[int, int, int]
    big_sigma1: Tuple[int, int, int]
    small_sigma0: Tuple[int, int, int]
    small_sigma1: Tuple[int, int, int]

    @property
    def mask(self) -> int:
        return (1 << self.bits) - 1

    @property
    def word_size(self) -> int:
        """Word width in bytes."""
        return self.bits // 8

    @property
    def rounds(self) -> int:
        return len(self.k)

    @property
    def block_size(self) -> int:
        """Compression block size in bytes (16 words)."""
        return 16 * self.word_size

    @property
    def length_size(self) -> int:
        """Width of the trailing length field in bytes (two words)."""
        return 2 * self.word_size

    @property
    def length_offset(self) -> int:
        return self.block_size - self.length_size

    @property
    def length_mask(self) -> int:
        return (1 << (8 * self.length_size)) - 1

    @property
    def digest_size(self) -> int:
        """Raw (untruncated) digest size in bytes (8 words)."""
        return 8 * self.word_size


SHA256_WORDS = WordSpec(
    bits=32,
    k=K256,
    big_sigma0=(2, 13, 22),
    big_sigma1=(6, 11, 25),
    small_sigma0=(7, 18, 3),
    small_sigma1=(17, 19, 10),
)

SHA512_WORDS = WordSpec(
    bits=64,
    k=K512,
    big_sigma0=(28, 34, 39),
    big_sigma1=(14, 18, 41),
    small_sigma0=(1, 8, 7),
    small_sigma1=(19, 61, 6),
)


# ============================================================================
# Bitwise Helpers
# ============================================================================

def _right_rotate(value: int, amount: int, bits: int, mask: int) -> int:
    """Right rotate a `bits`-wide integer by the specified amount."""
    return ((value >> amount) | (value << (bits - amount))) & mask


def _ch(x: int, y: int, z: int, mask: int) -> int:
    """Choice function: if x then y else z (bitwise)."""
    return (x & y) ^ (~x & z & mask)


def _maj(x: int, y: int, z: int) -> int:
    """Majority function: majority vote of bits."""
    return (x & y) ^ (x & z) ^ (y & z)


def _big_sigma(x: int, amounts: Tuple[int, int, int], bits: int, mask: int) -> int:
    """Uppercase Sigma: three rotations, used in compression."""
    r1, r2, r3 = amounts
    return (
        _right_rotate(x, r1, bits, mask)
        ^ _right_rotate(x, r2, bits, mask)
        ^ _right_rotate(x, r3, bits, mask)
    )


def _small_sigma(x: int, amounts: Tuple[int, int, int], bits: int, mask: int) -> int:
    """Lowercase sigma: two rotations and a shift, used in the message schedule."""
    r1, r2, shift = amounts
    return _right_rotate(x, r1, bits, mask) ^ _right_rotate(x, r2, bits, mask) ^ (x >> shift)


# ============================================================================
# Compression
# ============================================================================

def _create_message_schedule(words: WordSpec, block_words: List[int]) -> List[int]:
    """
    Expand 16 words into the full message schedule.
    
    For i from 16 to rounds - 1:
        W[i] = σ1(W[i-2]) + W[i-7] + σ0(W[i-15]) + W[i-16]
    """
    bits, mask = words.bits, words.mask
    w = list(block_words)
    for i in range(16, words.rounds):
        s0 = _small_sigma(w[i - 15], words.small_sigma0, bits, mask)
        s1 = _small_sigma(w[i - 2], words.small_sigma1, bits, mask)
        w.append((s1 + w[i - 7] + s0 + w[i - 16]) & mask)
    return w


def compress(words: WordSpec, state: List[int], block, offset: int = 0) -> None:
    """
    Compress one block into the running state, in place.
    
    Args:
        words: Word-width parameters of the engine
        state: Current hash state (8 words), updated in place
        block: bytes-like object holding at least one block from `offset`
        offset: Byte offset of the block within `block`
    """
    bits, mask, k = words.bits, words.mask, words.k
    w = _create_message_schedule(words, load_words(block, offset, 16, words.word_size))

    # Initialize working variables
    a, b, c, d, e, f, g, h = state

    for i in range(words.rounds):
        t1 = (h + _big_sigma(e, words.big_sigma1, bits, mask) + _ch(e, f, g, mask)
              + k[i] + w[i]) & mask
        t2 = (_big_sigma(a, words.big_sigma0, bits, mask) + _maj(a, b, c)) & mask

        h = g
        g = f
        f = e
        e = (d + t1) & mask
        d = c
        c = b
        b = a
        a = (t1 + t2) & mask

    # Add compressed chunk to current hash value
    for i, value in enumerate((a, b, c, d, e, f, g, h)):
        state[i] = (state[i] + value) & mask
