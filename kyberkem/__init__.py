"""Keccak, SHA-3/SHAKE, AES-256-CTR, CTR-DRBG and noise sampling for Kyber."""

__version__ = "0.1.0"

__all__ = [
    "aes",
    "bench",
    "cbd",
    "fips202",
    "keccak",
    "randombytes",
    "rng",
    "verify",
]