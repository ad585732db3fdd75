"""
Contract tests for sha2engine.

Tests specifically for misuse and boundary scenarios:
- Use after finalize
- Invalid input types
- Length-field wraparound
"""

import pytest

from sha2engine import HashFinalizedError, Sha256, Sha512, new
from sha2engine.core_crypto.compression import SHA256_WORDS, SHA512_WORDS
from sha2engine.core_crypto.constants import H256, H512
from sha2engine.core_crypto.engine import Sha2Engine


class TestOneShotFinalize:
    """finalize() consumes the context."""
    
    def test_update_after_finalize_rejected(self, variant):
        h = variant().update(b"abc")
        h.finalize()
        with pytest.raises(HashFinalizedError):
            h.update(b"more")
    
    def test_second_finalize_rejected(self, variant):
        h = variant()
        h.finalize()
        with pytest.raises(HashFinalizedError):
            h.finalize()
    
    def test_digest_and_copy_after_finalize_rejected(self):
        h = Sha256(b"abc")
        h.finalize()
        with pytest.raises(HashFinalizedError):
            h.digest()
        with pytest.raises(HashFinalizedError):
            h.copy()
    
    def test_finalized_error_is_runtime_error(self):
        engine = Sha2Engine(SHA256_WORDS, H256)
        engine.finalize()
        with pytest.raises(RuntimeError):
            engine.update(b"")
    
    def test_copy_survives_original_finalize(self):
        h = Sha512(b"abc")
        clone = h.copy()
        first = h.finalize()
        assert clone.finalize() == first


class TestInvalidInput:
    """Only bytes-like input is hashed."""
    
    def test_str_rejected(self, variant):
        with pytest.raises(TypeError):
            variant().update("abc")
    
    def test_str_rejected_by_constructor(self):
        with pytest.raises(TypeError):
            new("sha256", "abc")
    
    @pytest.mark.parametrize("value", [None, 42, 3.5])
    def test_non_buffer_rejected(self, value):
        with pytest.raises(TypeError):
            Sha256().update(value)
    
    def test_failed_update_keeps_state(self):
        """A rejected update does not disturb the context."""
        h = Sha256(b"ab")
        with pytest.raises(TypeError):
            h.update("c")
        h.update(b"c")
        assert h.finalize() == Sha256(b"abc").finalize()


class TestLengthWraparound:
    """The length field wraps modulo 2**64 / 2**128 instead of failing."""
    
    @pytest.mark.parametrize("words,iv,field_bits", [
        (SHA256_WORDS, H256, 64),
        (SHA512_WORDS, H512, 128),
    ])
    def test_counter_wraps_to_zero(self, words, iv, field_bits):
        engine = Sha2Engine(words, iv)
        engine._bit_length = (1 << field_bits) - 24
        engine.update(b"abc")
        assert engine.bit_length == 0
    
    @pytest.mark.parametrize("words,iv,field_bits", [
        (SHA256_WORDS, H256, 64),
        (SHA512_WORDS, H512, 128),
    ])
    def test_wrapped_length_is_encoded_modulo(self, words, iv, field_bits):
        """A wrapped counter pads exactly like a counter of zero."""
        wrapped = Sha2Engine(words, iv)
        wrapped._bit_length = (1 << field_bits) - 24
        wrapped.update(b"abc")
        
        zero = Sha2Engine(words, iv).update(b"abc")
        zero._bit_length = 0
        
        assert wrapped.finalize() == zero.finalize()
    
    def test_counter_wraps_past_zero(self):
        engine = Sha2Engine(SHA256_WORDS, H256)
        engine._bit_length = (1 << 64) - 8
        engine.update(b"x" * 100)
        assert engine.bit_length == 99 * 8
