"""Keccak-f[1600] permutation and a sponge over 64-bit lanes."""

from __future__ import annotations

from typing import Iterable, List

NROUNDS = 24
_MASK64 = (1 << 64) - 1

SHAKE128_RATE = 168
SHAKE256_RATE = 136
SHA3_256_RATE = 136
SHA3_512_RATE = 72


def _rol(value: int, offset: int) -> int:
    offset %= 64
    if offset == 0:
        return value
    return ((value << offset) | (value >> (64 - offset))) & _MASK64


def _rc_bit(t: int) -> int:
    t %= 255
    reg = 1
    for _ in range(t):
        reg <<= 1
        if reg & 0x100:
            reg ^= 0x171
    return reg & 1


def _round_constants() -> List[int]:
    return [
        sum(_rc_bit(j + 7 * rnd) << ((1 << j) - 1) for j in range(7))
        for rnd in range(NROUNDS)
    ]


def _rotation_offsets() -> List[int]:
    offsets = [0] * 25
    x, y = 1, 0
    for t in range(24):
        offsets[x + 5 * y] = ((t + 1) * (t + 2) // 2) % 64
        x, y = y, (2 * x + 3 * y) % 5
    return offsets


ROUND_CONSTANTS = tuple(_round_constants())
_ROTATIONS = tuple(_rotation_offsets())
# Destination lane of (x, y) after the pi step.
_PI_TARGET = tuple(y + 5 * ((2 * x + 3 * y) % 5) for y in range(5) for x in range(5))


def keccak_f1600(state: Iterable[int]) -> List[int]:
    """Apply the 24-round Keccak-f[1600] permutation; return the new 25 lanes."""
    lanes = [int(v) & _MASK64 for v in state]
    if len(lanes) != 25:
        raise ValueError("Keccak state must hold exactly 25 lanes")

    for rc in ROUND_CONSTANTS:
        parity = [
            lanes[x] ^ lanes[x + 5] ^ lanes[x + 10] ^ lanes[x + 15] ^ lanes[x + 20]
            for x in range(5)
        ]
        diffs = [parity[(x - 1) % 5] ^ _rol(parity[(x + 1) % 5], 1) for x in range(5)]
        lanes = [lane ^ diffs[i % 5] for i, lane in enumerate(lanes)]

        moved = [0] * 25
        for i, (lane, rot, target) in enumerate(zip(lanes, _ROTATIONS, _PI_TARGET)):
            moved[target] = _rol(lane, rot)

        lanes = [
            moved[i] ^ ((~moved[(i % 5 + 1) % 5 + 5 * (i // 5)]) & moved[(i % 5 + 2) % 5 + 5 * (i // 5)])
            for i in range(25)
        ]
        lanes[0] ^= rc

    return lanes


def _xor_bytes(state: List[int], start: int, chunk: bytes) -> None:
    for i, byte in enumerate(chunk, start):
        state[i >> 3] ^= byte << (8 * (i & 7))


def _state_bytes(state: List[int]) -> bytes:
    return b"".join(lane.to_bytes(8, "little") for lane in state)


class KeccakSponge:
    """A Keccak sponge with a given rate in bytes, absorbing and squeezing incrementally."""

    def __init__(self, rate: int) -> None:
        if rate <= 0 or rate >= 200 or rate % 8:
            raise ValueError("rate must be a positive multiple of 8 below 200")
        self.rate = rate
        self.state: List[int] = [0] * 25
        self.pos = 0

    @classmethod
    def absorb_once(cls, rate: int, data: bytes, domain: int) -> "KeccakSponge":
        """Start a fresh sponge, absorb all of data and pad with the domain byte."""
        sponge = cls(rate)
        data = bytes(data)
        full = len(data) - len(data) % rate
        for offset in range(0, full, rate):
            block = data[offset:offset + rate]
            sponge.state = [
                lane ^ int.from_bytes(block[8 * i:8 * i + 8], "little") if i < rate // 8 else lane
                for i, lane in enumerate(sponge.state)
            ]
            sponge.state = keccak_f1600(sponge.state)
        tail = data[full:]
        _xor_bytes(sponge.state, 0, tail)
        _xor_bytes(sponge.state, len(tail), bytes([domain & 0xFF]))
        sponge.state[(rate - 1) // 8] ^= 1 << 63
        sponge.pos = rate
        return sponge

    def absorb(self, data: bytes) -> None:
        """Absorb more input; may be called repeatedly before finalize."""
        data = bytes(data)
        rate = self.rate
        offset = 0
        while self.pos + (len(data) - offset) >= rate:
            take = rate - self.pos
            _xor_bytes(self.state, self.pos, data[offset:offset + take])
            offset += take
            self.state = keccak_f1600(self.state)
            self.pos = 0
        rest = data[offset:]
        _xor_bytes(self.state, self.pos, rest)
        self.pos += len(rest)

    def finalize(self, domain: int) -> None:
        """Pad the absorbed input with the domain byte and prepare for squeezing."""
        _xor_bytes(self.state, self.pos, bytes([domain & 0xFF]))
        self.state[self.rate // 8 - 1] ^= 1 << 63
        self.pos = self.rate

    def squeeze(self, outlen: int) -> bytes:
        """Squeeze outlen bytes; continues where the previous squeeze stopped."""
        if outlen < 0:
            raise ValueError("outlen must not be negative")
        out = bytearray()
        while outlen:
            if self.pos == self.rate:
                self.state = keccak_f1600(self.state)
                self.pos = 0
            take = min(self.rate - self.pos, outlen)
            out += _state_bytes(self.state)[self.pos:self.pos + take]
            self.pos += take
            outlen -= take
        return bytes(out)

    def squeeze_blocks(self, nblocks: int) -> bytes:
        """Squeeze nblocks whole blocks, permuting before each one."""
        if nblocks < 0:
            raise ValueError("nblocks must not be negative")
        out = bytearray()
        for _ in range(nblocks):
            self.state = keccak_f1600(self.state)
            out += _state_bytes(self.state)[:self.rate]
        return bytes(out)