import random

import pytest

from kyberkem.cbd import cbd, cbd2, cbd3


def _random_bytes(n, seed):
    rnd = random.Random(seed)
    return bytes(rnd.getrandbits(8) for _ in range(n))


def test_cbd2_zero_input_gives_zero_polynomial():
    assert cbd2(bytes(128)) == [0] * 256


def test_cbd2_low_bits_set_gives_positive_two():
    assert cbd2(bytes([0x03]) * 128) == [2, 0] * 128


def test_cbd2_high_pair_set_gives_negative_two():
    assert cbd2(bytes([0x0C]) * 128) == [-2, 0] * 128


def test_cbd3_first_three_bits_give_three():
    assert cbd3(bytes([0x07, 0x00, 0x00]) * 64) == [3, 0, 0, 0] * 64


def test_cbd2_all_ones_cancel():
    assert cbd2(bytes([0xFF]) * 128) == [0] * 256


@pytest.mark.parametrize("seed", range(5))
def test_cbd2_range_and_length(seed):
    coeffs = cbd2(_random_bytes(128, seed))
    assert len(coeffs) == 256
    assert all(-2 <= c <= 2 for c in coeffs)


@pytest.mark.parametrize("seed", range(5))
def test_cbd3_range_and_length(seed):
    coeffs = cbd3(_random_bytes(192, seed))
    assert len(coeffs) == 256
    assert all(-3 <= c <= 3 for c in coeffs)


def test_cbd_dispatches_on_eta():
    buf2 = _random_bytes(128, 11)
    buf3 = _random_bytes(192, 12)
    assert cbd(buf2, 2) == cbd2(buf2)
    assert cbd(buf3, 3) == cbd3(buf3)


def test_cbd_rejects_unsupported_eta():
    with pytest.raises(ValueError):
        cbd(bytes(256), 4)


@pytest.mark.parametrize("func, size", [(cbd2, 127), (cbd2, 192), (cbd3, 128), (cbd3, 193)])
def test_wrong_buffer_length_is_rejected(func, size):
    with pytest.raises(ValueError):
        func(bytes(size))