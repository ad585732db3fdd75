# Core Cryptography Module
"""
SHA-2 engine internals:
- Big-endian byte-order codec
- Round constants and initialization vectors
- Generic block compression function (32-bit and 64-bit words)
- Incremental buffering engine with padding/finalization
"""
