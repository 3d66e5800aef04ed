import pytest

from kyberkem.verify import cmov, verify


def test_equal_strings_verify_zero():
    assert verify(b"\x00\x01\x02", b"\x00\x01\x02") == 0
    assert verify(b"", b"") == 0


@pytest.mark.parametrize("pos", [0, 5, 31])
def test_single_difference_verifies_one(pos):
    a = bytes(32)
    b = bytearray(32)
    b[pos] = 0x80
    assert verify(a, bytes(b)) == 1


def test_verify_length_mismatch():
    with pytest.raises(ValueError):
        verify(b"ab", b"abc")


def test_cmov_flag_one_copies():
    assert cmov(b"\x00" * 4, b"\xde\xad\xbe\xef", 1) == b"\xde\xad\xbe\xef"


def test_cmov_flag_zero_keeps():
    assert cmov(b"keep", b"drop", 0) == b"keep"


def test_cmov_with_verify_result():
    r = bytes(range(16))
    z = bytes(range(16, 32))
    assert cmov(r, z, verify(r, r)) == r
    assert cmov(r, z, verify(r, z)) == z


def test_cmov_bad_flag():
    with pytest.raises(ValueError):
        cmov(b"a", b"b", 2)


def test_cmov_length_mismatch():
    with pytest.raises(ValueError):
        cmov(b"a", b"bc", 1)