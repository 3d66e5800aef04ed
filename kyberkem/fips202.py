"""SHA-3 and SHAKE functions built on the Keccak sponge."""

from __future__ import annotations

from .keccak import (
    SHA3_256_RATE,
    SHA3_512_RATE,
    SHAKE128_RATE,
    SHAKE256_RATE,
    KeccakSponge,
)

SHAKE_DOMAIN = 0x1F
SHA3_DOMAIN = 0x06

__all__ = [
    "SHAKE128_RATE",
    "SHAKE256_RATE",
    "SHA3_256_RATE",
    "SHA3_512_RATE",
    "shake128_absorb_once",
    "shake256_absorb_once",
    "shake128",
    "shake256",
    "sha3_256",
    "sha3_512",
]


def shake128_absorb_once(data: bytes) -> KeccakSponge:
    """Return a SHAKE128 sponge that has absorbed and padded data, ready to squeeze."""
    return KeccakSponge.absorb_once(SHAKE128_RATE, data, SHAKE_DOMAIN)


def shake256_absorb_once(data: bytes) -> KeccakSponge:
    """Return a SHAKE256 sponge that has absorbed and padded data, ready to squeeze."""
    return KeccakSponge.absorb_once(SHAKE256_RATE, data, SHAKE_DOMAIN)


def _xof(sponge: KeccakSponge, outlen: int) -> bytes:
    if outlen < 0:
        raise ValueError("outlen must not be negative")
    nblocks = outlen // sponge.rate
    head = sponge.squeeze_blocks(nblocks)
    return head + sponge.squeeze(outlen - nblocks * sponge.rate)


def shake128(data: bytes, outlen: int) -> bytes:
    """Return outlen bytes of SHAKE128 output for data."""
    return _xof(shake128_absorb_once(data), outlen)


def shake256(data: bytes, outlen: int) -> bytes:
    """Return outlen bytes of SHAKE256 output for data."""
    return _xof(shake256_absorb_once(data), outlen)


def sha3_256(data: bytes) -> bytes:
    """Return the 32-byte SHA3-256 digest of data."""
    return KeccakSponge.absorb_once(SHA3_256_RATE, data, SHA3_DOMAIN).squeeze(32)


def sha3_512(data: bytes) -> bytes:
    """Return the 64-byte SHA3-512 digest of data."""
    return KeccakSponge.absorb_once(SHA3_512_RATE, data, SHA3_DOMAIN).squeeze(64)