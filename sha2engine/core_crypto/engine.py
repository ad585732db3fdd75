"""
Incremental SHA-2 Engine

Owns the running state of one hash computation:
- accumulator: 8 words, initialized from the variant's IV
- buffer: one block of input not yet compressed
- bit length: total input bits, modulo the length-field width

Lifecycle: construct, update zero or more times, finalize exactly once.
`finalize()` consumes the engine; using it afterwards is a contract
violation and raises `HashFinalizedError`.
"""

import logging
from typing import List, Sequence

from .byteorder import store_int, store_words
from .compression import WordSpec, compress


logger = logging.getLogger(__name__)


class HashFinalizedError(RuntimeError):
    """Raised when a hash context is used after finalize()."""
    pass


def _as_view(data) -> memoryview:
    if isinstance(data, str):
        raise TypeError("Strings must be encoded before hashing")
    return memoryview(data).cast('B')


class Sha2Engine:
    """
    Merkle-Damgård buffering engine over one word width.
    
    Example:
        >>> from sha2engine.core_crypto.compression import SHA256_WORDS
        >>> from sha2engine.core_crypto.constants import H256
        >>> engine = Sha2Engine(SHA256_WORDS, H256)
        >>> len(engine.update(b"ab").update(b"c").finalize())
        32
    """

    def __init__(self, words: WordSpec, iv: Sequence[int]):
        if len(iv) != 8:
            raise ValueError(f"IV must be 8 words, got {len(iv)}")
        self._words = words
        self._state: List[int] = list(iv)
        self._buffer = bytearray(words.block_size)
        self._offset = 0
        self._bit_length = 0

    @property
    def block_size(self) -> int:
        return self._words.block_size

    @property
    def digest_size(self) -> int:
        return self._words.digest_size

    @property
    def bit_length(self) -> int:
        """Bits processed so far, modulo 2**(8 * length field size)."""
        return self._bit_length

    def _check_live(self) -> None:
        if self._state is None:
            raise HashFinalizedError("Hash context already finalized")

    def update(self, data) -> 'Sha2Engine':
        """
        Append input to the message.
        
        Full blocks are compressed straight from the input; only a trailing
        partial block is copied into the buffer.
        
        Args:
            data: Any bytes-like object (may be empty)
            
        Returns:
            self, for chaining
        """
        self._check_live()
        view = _as_view(data)
        n = len(view)
        words = self._words
        block_size = words.block_size
        offset = self._offset
        needed = block_size - offset

        if n < needed:
            self._buffer[offset:offset + n] = view
            self._offset = offset + n
        else:
            self._buffer[offset:] = view[:needed]
            compress(words, self._state, self._buffer)

            i = needed
            while n - i >= block_size:
                compress(words, self._state, view, i)
                i += block_size

            remain = n - i
            self._buffer[:remain] = view[i:]
            self._offset = remain

        # The length field is defined modulo 2**64 / 2**128
        self._bit_length = (self._bit_length + 8 * n) & words.length_mask
        return self

    def finalize(self) -> bytes:
        """
        Pad the message, compress the final block(s) and serialize the state.
        
        Padding rules:
        1. Append bit '1' to the message (0x80 byte)
        2. Append zeros until only the length field fits in the block
        3. Append the bit length as a big-endian integer of the field width
        
        The engine is consumed.
        
        Returns:
            Raw digest (8 words, big-endian)
        """
        self._check_live()
        words = self._words
        buffer = self._buffer
        offset = self._offset

        buffer[offset] = 0x80
        offset += 1

        if offset > words.length_offset:
            buffer[offset:] = bytes(words.block_size - offset)
            compress(words, self._state, buffer)
            offset = 0

        buffer[offset:words.length_offset] = bytes(words.length_offset - offset)
        buffer[words.length_offset:] = store_int(self._bit_length, words.length_size)
        compress(words, self._state, buffer)

        digest = store_words(self._state, words.word_size)
        logger.debug("Finalized %d-bit engine after %d bits", words.bits, self._bit_length)

        self._state = None
        self._buffer = None
        return digest

    def copy(self) -> 'Sha2Engine':
        """Clone the in-progress state; both copies evolve independently."""
        self._check_live()
        clone = Sha2Engine.__new__(Sha2Engine)
        clone._words = self._words
        clone._state = list(self._state)
        clone._buffer = bytearray(self._buffer)
        clone._offset = self._offset
        clone._bit_length = self._bit_length
        return clone
