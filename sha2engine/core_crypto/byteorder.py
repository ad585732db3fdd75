"""
Big-endian byte-order codec.

Loads and stores the big-endian words used by the SHA-2 block format.
"""

import struct
from typing import List, Sequence


# struct format codes per word size in bytes
_WORD_FORMATS = {
    4: 'I',
    8: 'Q',
}


def _word_format(word_size: int) -> str:
    try:
        return _WORD_FORMATS[word_size]
    except KeyError:
        raise ValueError(f"Unsupported word size: {word_size}") from None


def load_words(buffer, offset: int, count: int, word_size: int) -> List[int]:
    """
    Unpack big-endian words from a buffer.
    
    Args:
        buffer: bytes, bytearray or memoryview holding the encoded words
        offset: Byte offset of the first word
        count: Number of words to read
        word_size: Word width in bytes (4 or 8)
        
    Returns:
        List of unsigned integers
    """
    fmt = f">{count}{_word_format(word_size)}"
    return list(struct.unpack_from(fmt, buffer, offset))


def store_words(words: Sequence[int], word_size: int) -> bytes:
    """Pack words as big-endian bytes, in order."""
    fmt = f">{len(words)}{_word_format(word_size)}"
    return struct.pack(fmt, *words)


def store_int(value: int, size: int) -> bytes:
    """Encode an unsigned integer big-endian in exactly `size` bytes."""
    return value.to_bytes(size, byteorder='big')
