"""Property-based tests for the ChaCha20 keystream.

Checks that the sequential, parallel and incremental paths agree with
each other and with the cryptography library.
"""

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms
from hypothesis import given, settings
from hypothesis import strategies as st

from ccchacha.ciphers import ChaCha20Cipher
from ccchacha.core.keystream import chacha20_xor
from ccchacha.core.parallel import parallel_chacha20_xor
from ccchacha.utils.hexdump import format_hex

keys = st.binary(min_size=32, max_size=32)
nonces = st.binary(min_size=12, max_size=12)
counters = st.integers(min_value=0, max_value=2**32 - 64)
payloads = st.binary(max_size=1024)


class TestKeystreamProperties:
    """Property-based tests for ChaCha20 encryption."""

    @given(keys, counters, nonces, payloads)
    @settings(max_examples=50, deadline=None)
    def test_xor_is_an_involution(self, key, counter, nonce, data):
        """Encrypting twice with the same parameters restores the input."""
        once = chacha20_xor(key, counter, nonce, data)
        assert len(once) == len(data)
        assert chacha20_xor(key, counter, nonce, once) == data

    @given(keys, counters, nonces, payloads)
    @settings(max_examples=50, deadline=None)
    def test_matches_cryptography(self, key, counter, nonce, data):
        """Pure Python output equals the OpenSSL ChaCha20 output."""
        full_nonce = counter.to_bytes(4, "little") + nonce
        encryptor = Cipher(algorithms.ChaCha20(key, full_nonce), mode=None).encryptor()
        assert chacha20_xor(key, counter, nonce, data) == encryptor.update(data)

    @given(
        keys,
        counters,
        nonces,
        payloads,
        st.integers(min_value=1, max_value=4),
        st.integers(min_value=1, max_value=3),
    )
    @settings(max_examples=30, deadline=None)
    def test_parallel_matches_sequential(
        self, key, counter, nonce, data, blocks_per_task, workers
    ):
        """Segmenting the work never changes the result."""
        expected = chacha20_xor(key, counter, nonce, data)
        actual = parallel_chacha20_xor(
            key, counter, nonce, data, workers=workers, blocks_per_task=blocks_per_task
        )
        assert actual == expected

    @given(keys, nonces, payloads, st.lists(st.integers(min_value=0, max_value=1024)))
    @settings(max_examples=50, deadline=None)
    def test_incremental_matches_one_shot(self, key, nonce, data, cuts):
        """Splitting a stream into arbitrary pieces keeps one keystream."""
        points = sorted({0, len(data), *(c % (len(data) + 1) for c in cuts)})
        cipher = ChaCha20Cipher(key, nonce)
        pieces = [cipher.encrypt(data[a:b]) for a, b in zip(points, points[1:])]
        assert b"".join(pieces) == chacha20_xor(key, 0, nonce, data)

    @given(st.binary(max_size=256), st.integers(min_value=1, max_value=32))
    def test_format_hex_parses_back(self, data, width):
        """Rendered hex decodes to the original bytes."""
        text = format_hex(data, width=width)
        lines = text.splitlines() if data else []
        assert all(len(line.split()) <= width for line in lines)
        assert bytes.fromhex(text.replace("\n", " ")) == data
