"""AES-256 block encryption and the counter-mode stream used by the 90s variant."""

from __future__ import annotations

from typing import List, Sequence, Tuple

AES256CTR_BLOCKBYTES = 64
AES_BLOCK = 16
KEY_BYTES = 32
NONCE_BYTES = 12
_ROUNDS = 14
_MASK32 = 0xFFFFFFFF


def _xtime(a: int) -> int:
    a <<= 1
    return (a ^ 0x1B) & 0xFF if a & 0x100 else a


def _rotl8(b: int, n: int) -> int:
    return ((b << n) | (b >> (8 - n))) & 0xFF


def _build_sbox() -> Tuple[int, ...]:
    exp = [0] * 255
    log = [0] * 256
    p = 1
    for i in range(255):
        exp[i] = p
        log[p] = i
        p ^= _xtime(p)  # multiply by the generator 3
    sbox = []
    for a in range(256):
        inv = 0 if a == 0 else exp[(255 - log[a]) % 255]
        sbox.append(
            inv ^ _rotl8(inv, 1) ^ _rotl8(inv, 2) ^ _rotl8(inv, 3) ^ _rotl8(inv, 4) ^ 0x63
        )
    return tuple(sbox)


def _build_rcon(count: int) -> Tuple[int, ...]:
    values = []
    r = 1
    for _ in range(count):
        values.append(r)
        r = _xtime(r)
    return tuple(values)


SBOX = _build_sbox()
RCON = _build_rcon(10)


def _expand_key(key: bytes) -> List[List[int]]:
    """Return the 15 round keys of AES-256, each as 16 byte values."""
    nk = KEY_BYTES // 4
    words: List[List[int]] = [list(key[4 * i:4 * i + 4]) for i in range(nk)]
    for i in range(nk, 4 * (_ROUNDS + 1)):
        temp = list(words[i - 1])
        if i % nk == 0:
            temp = [SBOX[b] for b in temp[1:] + temp[:1]]
            temp[0] ^= RCON[i // nk - 1]
        elif i % nk == 4:
            temp = [SBOX[b] for b in temp]
        words.append([a ^ b for a, b in zip(words[i - nk], temp)])
    return [
        [b for word in words[4 * r:4 * r + 4] for b in word]
        for r in range(_ROUNDS + 1)
    ]


def _shift_rows(s: Sequence[int]) -> List[int]:
    return [s[(i % 4) + 4 * ((i // 4 + i % 4) % 4)] for i in range(16)]


def _mix_columns(s: Sequence[int]) -> List[int]:
    out: List[int] = []
    for c in range(4):
        a0, a1, a2, a3 = s[4 * c:4 * c + 4]
        total = a0 ^ a1 ^ a2 ^ a3
        out += [
            a0 ^ total ^ _xtime(a0 ^ a1),
            a1 ^ total ^ _xtime(a1 ^ a2),
            a2 ^ total ^ _xtime(a2 ^ a3),
            a3 ^ total ^ _xtime(a3 ^ a0),
        ]
    return out


def _encrypt_block(round_keys: List[List[int]], block: bytes) -> bytes:
    state = [b ^ k for b, k in zip(block, round_keys[0])]
    for rk in round_keys[1:_ROUNDS]:
        state = _mix_columns(_shift_rows([SBOX[b] for b in state]))
        state = [b ^ k for b, k in zip(state, rk)]
    state = _shift_rows([SBOX[b] for b in state])
    return bytes(b ^ k for b, k in zip(state, round_keys[_ROUNDS]))


def _check_key(key: bytes) -> bytes:
    key = bytes(key)
    if len(key) != KEY_BYTES:
        raise ValueError("AES-256 key must be 32 bytes")
    return key


def _check_nonce(nonce: bytes) -> bytes:
    nonce = bytes(nonce)
    if len(nonce) != NONCE_BYTES:
        raise ValueError("nonce must be 12 bytes")
    return nonce


def _keystream(round_keys: List[List[int]], nonce: bytes, counter: int, nblocks: int) -> bytes:
    return b"".join(
        _encrypt_block(round_keys, nonce + ((counter + i) & _MASK32).to_bytes(4, "big"))
        for i in range(nblocks)
    )


def aes256_ecb_encrypt(key: bytes, block: bytes) -> bytes:
    """Encrypt one 16-byte block with AES-256."""
    key = _check_key(key)
    block = bytes(block)
    if len(block) != AES_BLOCK:
        raise ValueError("AES block must be 16 bytes")
    return _encrypt_block(_expand_key(key), block)


def aes256ctr_prf(outlen: int, key: bytes, nonce: bytes) -> bytes:
    """Return outlen bytes of AES-256-CTR keystream, counter starting at zero."""
    if outlen < 0:
        raise ValueError("outlen must not be negative")
    key = _check_key(key)
    nonce = _check_nonce(nonce)
    nblocks = -(-outlen // AES_BLOCK)
    return _keystream(_expand_key(key), nonce, 0, nblocks)[:outlen]


class Aes256Ctr:
    """AES-256-CTR keystream squeezed in 64-byte blocks of four counters each."""

    def __init__(self, key: bytes, nonce: bytes) -> None:
        self._round_keys = _expand_key(_check_key(key))
        self._nonce = _check_nonce(nonce)
        self._counter = 0

    def squeeze_blocks(self, nblocks: int) -> bytes:
        """Return nblocks * 64 bytes of keystream, continuing the stream."""
        if nblocks < 0:
            raise ValueError("nblocks must not be negative")
        count = 4 * nblocks
        out = _keystream(self._round_keys, self._nonce, self._counter, count)
        self._counter = (self._counter + count) & _MASK32
        return out