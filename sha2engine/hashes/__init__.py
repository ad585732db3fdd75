# Hash Functions Module
"""
The named SHA-2 variants built on the core engine:
- SHA-224, SHA-256
- SHA-384, SHA-512
- SHA-512/224, SHA-512/256
"""

from .sha2 import (
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

__all__ = [
    'ALGORITHMS',
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
