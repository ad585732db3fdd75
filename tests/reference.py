"""Reference SHA-2 digests from `cryptography`, used to cross-check results."""

from cryptography.hazmat.primitives import hashes

from sha2engine import Sha224, Sha256, Sha384, Sha512, Sha512_224, Sha512_256


REFERENCE_ALGORITHMS = {
    'sha224': hashes.SHA224,
    'sha256': hashes.SHA256,
    'sha384': hashes.SHA384,
    'sha512': hashes.SHA512,
    'sha512_224': hashes.SHA512_224,
    'sha512_256': hashes.SHA512_256,
}

VARIANTS = [Sha224, Sha256, Sha384, Sha512, Sha512_224, Sha512_256]


def reference_digest(name: str, data: bytes) -> bytes:
    """Digest of `data` computed by OpenSSL via `cryptography`."""
    h = hashes.Hash(REFERENCE_ALGORITHMS[name]())
    h.update(data)
    return h.finalize()
