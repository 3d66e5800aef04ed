"""Constant-time comparison and conditional copy of byte strings."""

from __future__ import annotations


def verify(a: bytes, b: bytes) -> int:
    """Return 0 if the byte strings are equal and 1 otherwise."""
    if len(a) != len(b):
        raise ValueError("byte strings must have the same length")
    acc = 0
    for x, y in zip(a, b):
        acc |= x ^ y
    return ((-acc) & 0xFFFFFFFFFFFFFFFF) >> 63


def cmov(r: bytes, x: bytes, flag: int) -> bytes:
    """Return x if flag is 1 and r if flag is 0, without branching on flag."""
    if flag not in (0, 1):
        raise ValueError("flag must be 0 or 1")
    if len(r) != len(x):
        raise ValueError("byte strings must have the same length")
    mask = (-flag) & 0xFF
    return bytes(a ^ (mask & (a ^ b)) for a, b in zip(r, x))