"""Centred binomial sampling of polynomial coefficients from uniform bytes."""

from __future__ import annotations

from typing import List

KYBER_N = 256


def _check_buffer(buf: bytes, eta: int) -> bytes:
    buf = bytes(buf)
    expected = eta * KYBER_N // 4
    if len(buf) != expected:
        raise ValueError(f"cbd{eta} needs exactly {expected} input bytes")
    return buf


def cbd2(buf: bytes) -> List[int]:
    """Sample 256 coefficients with a centred binomial distribution, eta = 2."""
    buf = _check_buffer(buf, 2)
    coeffs: List[int] = []
    for offset in range(0, len(buf), 4):
        t = int.from_bytes(buf[offset:offset + 4], "little")
        d = (t & 0x55555555) + ((t >> 1) & 0x55555555)
        for j in range(8):
            a = (d >> (4 * j)) & 0x3
            b = (d >> (4 * j + 2)) & 0x3
            coeffs.append(a - b)
    return coeffs


def cbd3(buf: bytes) -> List[int]:
    """Sample 256 coefficients with a centred binomial distribution, eta = 3."""
    buf = _check_buffer(buf, 3)
    coeffs: List[int] = []
    for offset in range(0, len(buf), 3):
        t = int.from_bytes(buf[offset:offset + 3], "little")
        d = (t & 0x00249249) + ((t >> 1) & 0x00249249) + ((t >> 2) & 0x00249249)
        for j in range(4):
            a = (d >> (6 * j)) & 0x7
            b = (d >> (6 * j + 3)) & 0x7
            coeffs.append(a - b)
    return coeffs


def cbd(buf: bytes, eta: int) -> List[int]:
    """Sample 256 coefficients with parameter eta, which must be 2 or 3."""
    if eta == 2:
        return cbd2(buf)
    if eta == 3:
        return cbd3(buf)
    raise ValueError("this implementation requires eta in {2,3}")