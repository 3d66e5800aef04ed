import hashlib

import pytest

from kyberkem.fips202 import (
    SHAKE128_RATE,
    SHAKE256_RATE,
    sha3_256,
    sha3_512,
    shake128,
    shake128_absorb_once,
    shake256,
    shake256_absorb_once,
)

INPUT_LENGTHS = [0, 1, 33, 71, 72, 73, 135, 136, 137, 167, 168, 169, 400]


def _data(n):
    return bytes((i * 7 + 3) & 0xFF for i in range(n))


@pytest.mark.parametrize("n", INPUT_LENGTHS)
def test_sha3_256_matches_hashlib(n):
    data = _data(n)
    assert sha3_256(data) == hashlib.sha3_256(data).digest()


@pytest.mark.parametrize("n", INPUT_LENGTHS)
def test_sha3_512_matches_hashlib(n):
    data = _data(n)
    assert sha3_512(data) == hashlib.sha3_512(data).digest()


@pytest.mark.parametrize("n", INPUT_LENGTHS)
@pytest.mark.parametrize("outlen", [0, 1, 32, 167, 168, 169, 504, 600])
def test_shake128_matches_hashlib(n, outlen):
    data = _data(n)
    assert shake128(data, outlen) == hashlib.shake_128(data).digest(outlen)


@pytest.mark.parametrize("n", INPUT_LENGTHS)
@pytest.mark.parametrize("outlen", [0, 1, 32, 135, 136, 137, 408, 500])
def test_shake256_matches_hashlib(n, outlen):
    data = _data(n)
    assert shake256(data, outlen) == hashlib.shake_256(data).digest(outlen)


def test_shake128_absorb_once_squeeze_blocks():
    data = _data(34)
    sponge = shake128_absorb_once(data)
    out = sponge.squeeze_blocks(3)
    assert len(out) == 3 * SHAKE128_RATE
    assert out == hashlib.shake_128(data).digest(3 * SHAKE128_RATE)


def test_shake256_absorb_once_incremental_squeeze():
    data = _data(33)
    sponge = shake256_absorb_once(data)
    pieces = sponge.squeeze(10) + sponge.squeeze(200) + sponge.squeeze(SHAKE256_RATE)
    assert pieces == hashlib.shake_256(data).digest(210 + SHAKE256_RATE)


def test_shake_prefix_property():
    data = _data(50)
    assert shake128(data, 1000)[:300] == shake128(data, 300)
    assert shake256(data, 1000)[:300] == shake256(data, 300)


def test_digest_lengths():
    assert len(sha3_256(b"abc")) == 32
    assert len(sha3_512(b"abc")) == 64


@pytest.mark.parametrize("func", [shake128, shake256])
def test_negative_outlen_raises(func):
    with pytest.raises(ValueError):
        func(b"abc", -1)