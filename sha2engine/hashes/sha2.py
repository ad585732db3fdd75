"""
SHA-2 Variants

The six named SHA-2 hash functions. Each binds one of the two engines to its
own initialization vector and truncates the raw digest to its advertised size:

- SHA-224      SHA-256 engine, H224 IV, 28-byte digest
- SHA-256      SHA-256 engine, H256 IV, 32-byte digest
- SHA-384      SHA-512 engine, H384 IV, 48-byte digest
- SHA-512      SHA-512 engine, H512 IV, 64-byte digest
- SHA-512/224  SHA-512 engine, H512_224 IV, 28-byte digest
- SHA-512/256  SHA-512 engine, H512_256 IV, 32-byte digest

Example:
    >>> Sha256().update(b"The quick brown fox ").update(b"jumps over the lazy dog").finalize().hex()
    'd7a8fbb307d7809469ca9abcb0082e4f8d5651e46d3cdb762d02d0bf37c9e592'
"""

import logging
from typing import Dict, Tuple, Type

from ..core_crypto.byteorder import load_words
from ..core_crypto.compression import SHA256_WORDS, SHA512_WORDS, WordSpec
from ..core_crypto.constants import H224, H256, H384, H512, H512_224, H512_256
from ..core_crypto.engine import Sha2Engine


logger = logging.getLogger(__name__)


# ============================================================================
# Variant Wrapper
# ============================================================================

class _Sha2:
    """
    Common behaviour of the SHA-2 variants.
    
    `finalize()` consumes the instance: calling `update()`, `finalize()`,
    `digest()` or `copy()` afterwards raises `HashFinalizedError`.
    """
    name = ''
    BLOCK_SIZE = 0
    DIGEST_SIZE = 0
    _words: WordSpec = SHA256_WORDS
    _iv: Tuple[int, ...] = ()

    def __init__(self, data=b''):
        self._engine = Sha2Engine(self._words, self._iv)
        self._engine.update(data)

    @property
    def block_size(self) -> int:
        return self.BLOCK_SIZE

    @property
    def digest_size(self) -> int:
        return self.DIGEST_SIZE

    def update(self, data) -> '_Sha2':
        """Add input data to the hash context; returns self for chaining."""
        self._engine.update(data)
        return self

    def finalize(self) -> bytes:
        """Finalize the context and return the truncated digest."""
        return self._engine.finalize()[:self.DIGEST_SIZE]

    def digest(self) -> bytes:
        """Digest of the data so far, leaving this context usable."""
        return self.copy().finalize()

    def copy(self) -> '_Sha2':
        clone = type(self).__new__(type(self))
        clone._engine = self._engine.copy()
        return clone

    def __repr__(self) -> str:
        return f"<{self.name} hash context>"


class Sha224(_Sha2):
    """SHA-256 with the SHA-224 IV, truncated to 224 bits."""
    name = 'sha224'
    BLOCK_SIZE = SHA256_WORDS.block_size
    DIGEST_SIZE = 28
    _words = SHA256_WORDS
    _iv = H224


class Sha256(_Sha2):
    """The SHA-256 hash function."""
    name = 'sha256'
    BLOCK_SIZE = SHA256_WORDS.block_size
    DIGEST_SIZE = 32
    _words = SHA256_WORDS
    _iv = H256


class Sha384(_Sha2):
    """SHA-512 with the SHA-384 IV, truncated to 384 bits."""
    name = 'sha384'
    BLOCK_SIZE = SHA512_WORDS.block_size
    DIGEST_SIZE = 48
    _words = SHA512_WORDS
    _iv = H384


class Sha512(_Sha2):
    """The SHA-512 hash function."""
    name = 'sha512'
    BLOCK_SIZE = SHA512_WORDS.block_size
    DIGEST_SIZE = 64
    _words = SHA512_WORDS
    _iv = H512


class Sha512_224(_Sha2):
    """SHA-512 with the SHA-512/224 IV, truncated to 224 bits."""
    name = 'sha512_224'
    BLOCK_SIZE = SHA512_WORDS.block_size
    DIGEST_SIZE = 28
    _words = SHA512_WORDS
    _iv = H512_224


class Sha512_256(_Sha2):
    """SHA-512 with the SHA-512/256 IV, truncated to 256 bits."""
    name = 'sha512_256'
    BLOCK_SIZE = SHA512_WORDS.block_size
    DIGEST_SIZE = 32
    _words = SHA512_WORDS
    _iv = H512_256


# ============================================================================
# Registry
# ============================================================================

ALGORITHMS: Dict[str, Type[_Sha2]] = {
    cls.name: cls for cls in (Sha224, Sha256, Sha384, Sha512, Sha512_224, Sha512_256)
}


def _normalize_name(name: str) -> str:
    return name.lower().replace('-', '').replace('/', '_')


def new(name: str, data=b'') -> _Sha2:
    """
    Construct a hash context by algorithm name.
    
    Accepts spellings such as 'sha256', 'SHA-256', 'sha512_256' and
    'SHA-512/256'.
    
    Raises:
        ValueError: If the algorithm is not a SHA-2 variant
    """
    key = _normalize_name(name)
    try:
        cls = ALGORITHMS[key]
    except KeyError:
        raise ValueError(f"Unsupported hash algorithm: {name}") from None
    logger.debug("Resolved algorithm %r to %s", name, cls.__name__)
    return cls(data)


# ============================================================================
# One-shot Helpers
# ============================================================================

def sha224(data: bytes) -> bytes:
    """Compute the SHA-224 digest (28 bytes) of the input data."""
    return Sha224(data).finalize()


def sha256(data: bytes) -> bytes:
    """
    Compute the SHA-256 hash of the input data.
    
    Args:
        data: Input bytes to hash
        
    Returns:
        256-bit (32-byte) digest as bytes
    """
    return Sha256(data).finalize()


def sha384(data: bytes) -> bytes:
    """Compute the SHA-384 digest (48 bytes) of the input data."""
    return Sha384(data).finalize()


def sha512(data: bytes) -> bytes:
    """Compute the SHA-512 digest (64 bytes) of the input data."""
    return Sha512(data).finalize()


def sha512_224(data: bytes) -> bytes:
    return Sha512_224(data).finalize()


def sha512_256(data: bytes) -> bytes:
    return Sha512_256(data).finalize()


# ============================================================================
# SHA-512/t IV Generation
# ============================================================================

def sha512_t_iv(t: int) -> Tuple[int, ...]:
    """
    Generate the initialization vector for SHA-512/t (FIPS 180-4, 5.3.6).
    
    The IV is the SHA-512 state obtained by hashing the ASCII string
    "SHA-512/t" starting from H512 with every byte xored with 0xa5.
    
    Args:
        t: Output length in bits; a multiple of 8 below 512, other than 384
        
    Returns:
        8 64-bit words
    """
    if not 0 < t < 512 or t % 8 or t == 384:
        raise ValueError(f"Invalid SHA-512/t output length: {t}")

    iv = tuple(word ^ 0xa5a5a5a5a5a5a5a5 for word in H512)
    raw = Sha2Engine(SHA512_WORDS, iv).update(f"SHA-512/{t}".encode('ascii')).finalize()
    return tuple(load_words(raw, 0, 8, SHA512_WORDS.word_size))
