"""AES-256 CTR-DRBG and seed expander for deterministic known-answer testing."""

from __future__ import annotations

from typing import Optional, Tuple

from .aes import aes256_ecb_encrypt

RNG_SUCCESS = 0
RNG_BAD_MAXLEN = -1
RNG_BAD_OUTBUF = -2
RNG_BAD_REQ_LEN = -3

SEED_BYTES = 48


class RngError(ValueError):
    """Raised when the generator is asked for something it cannot give."""

    def __init__(self, message: str, code: int) -> None:
        super().__init__(message)
        self.code = code


def _increment(counter: bytes) -> bytes:
    """Increment a big-endian counter, wrapping within its width."""
    width = len(counter)
    value = (int.from_bytes(counter, "big") + 1) % (1 << (8 * width))
    return value.to_bytes(width, "big")


def aes256_ctr_drbg_update(
    provided_data: Optional[bytes], key: bytes, v: bytes
) -> Tuple[bytes, bytes]:
    """Run the CTR-DRBG update step and return the new (key, V)."""
    v = bytes(v)
    if len(v) != 16:
        raise ValueError("V must be 16 bytes")
    temp = bytearray()
    for _ in range(3):
        v = _increment(v)
        temp += aes256_ecb_encrypt(key, v)
    if provided_data is not None:
        provided_data = bytes(provided_data)
        if len(provided_data) != SEED_BYTES:
            raise ValueError("provided data must be 48 bytes")
        temp = bytearray(a ^ b for a, b in zip(temp, provided_data))
    return bytes(temp[:32]), bytes(temp[32:])


class CtrDrbg:
    """Deterministic random byte generator seeded with 48 bytes of entropy."""

    def __init__(
        self, entropy_input: bytes, personalization_string: Optional[bytes] = None
    ) -> None:
        seed_material = bytes(entropy_input)
        if len(seed_material) != SEED_BYTES:
            raise ValueError("entropy input must be 48 bytes")
        if personalization_string is not None:
            personalization_string = bytes(personalization_string)
            if len(personalization_string) != SEED_BYTES:
                raise ValueError("personalization string must be 48 bytes")
            seed_material = bytes(
                a ^ b for a, b in zip(seed_material, personalization_string)
            )
        self.key, self.v = aes256_ctr_drbg_update(seed_material, bytes(32), bytes(16))
        self.reseed_counter = 1

    def random_bytes(self, n: int) -> bytes:
        """Return n pseudo-random bytes and advance the generator state."""
        if n < 0:
            raise ValueError("number of bytes must not be negative")
        out = bytearray()
        while len(out) < n:
            self.v = _increment(self.v)
            out += aes256_ecb_encrypt(self.key, self.v)
        self.key, self.v = aes256_ctr_drbg_update(None, self.key, self.v)
        self.reseed_counter += 1
        return bytes(out[:n])

    __call__ = random_bytes


class SeedExpander:
    """AES-based expander producing a bounded stream from a seed and diversifier."""

    def __init__(self, seed: bytes, diversifier: bytes, maxlen: int) -> None:
        if maxlen >= 1 << 32 or maxlen < 0:
            raise RngError("maxlen must be below 2**32", RNG_BAD_MAXLEN)
        seed = bytes(seed)
        diversifier = bytes(diversifier)
        if len(seed) != 32:
            raise ValueError("seed must be 32 bytes")
        if len(diversifier) != 8:
            raise ValueError("diversifier must be 8 bytes")
        self.length_remaining = maxlen
        self.key = seed
        self.ctr = diversifier + maxlen.to_bytes(4, "big") + bytes(4)
        self._buffer = bytes(16)
        self._buffer_pos = 16

    def expand(self, n: int) -> bytes:
        """Return the next n bytes of the expanded stream."""
        if n < 0 or n >= self.length_remaining:
            raise RngError("requested length exceeds what remains", RNG_BAD_REQ_LEN)
        self.length_remaining -= n
        out = bytearray()
        while n > 0:
            available = 16 - self._buffer_pos
            if n <= available:
                out += self._buffer[self._buffer_pos:self._buffer_pos + n]
                self._buffer_pos += n
                break
            out += self._buffer[self._buffer_pos:]
            n -= available
            self._buffer = aes256_ecb_encrypt(self.key, self.ctr)
            self._buffer_pos = 0
            self.ctr = self.ctr[:12] + _increment(self.ctr[12:])
        return bytes(out)