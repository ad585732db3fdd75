"""
sha2engine - SHA-2 message digests implemented from scratch (FIPS 180-4).

Incremental hashing for SHA-224, SHA-256, SHA-384, SHA-512, SHA-512/224
and SHA-512/256:

    >>> from sha2engine import Sha256
    >>> Sha256().update(b"ab").update(b"c").finalize().hex()
    'ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad'
"""

from .core_crypto.engine import HashFinalizedError, Sha2Engine
from .hashes import (
    ALGORITHMS,
    Sha224,
    Sha256,
    Sha384,
    Sha512,
    Sha512_224,
    Sha512_256,
    new,
    sha224,
    sha256,
    sha384,
    sha512,
    sha512_224,
    sha512_256,
    sha512_t_iv,
)

__version__ = "1.0.0"

__all__ = [
    'ALGORITHMS',
    'HashFinalizedError',
    'Sha2Engine',
    'Sha224',
    'Sha256',
    'Sha384',
    'Sha512',
    'Sha512_224',
    'Sha512_256',
    'new',
    'sha224',
    'sha256',
    'sha384',
    'sha512',
    'sha512_224',
    'sha512_256',
    'sha512_t_iv',
]
