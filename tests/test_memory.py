import pytest

from minishell.memory import (
    calloc,
    mem_compare,
    mem_copy,
    mem_find,
    mem_move,
    mem_set,
    zero,
)


def test_zero_clears_prefix_only():
    buf = bytearray(b"batata")
    result = zero(buf, 3)
    assert result is buf
    assert buf[:3] == bytes(3)
    assert buf[3:] == b"ata"


def test_zero_past_end_raises():
    with pytest.raises(IndexError):
        zero(bytearray(b"ab"), 3)


def test_calloc_is_zero_filled():
    buf = calloc(5, 4)
    assert len(buf) == 20
    assert not any(buf)


def test_calloc_zero_size():
    assert len(calloc(10, 0)) == 0


def test_calloc_overflow():
    with pytest.raises(OverflowError):
        calloc(18446744073709551615, 2)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 1)


def test_mem_find_first_occurrence():
    data = b"batata"
    index = mem_find(data, ord("t"), 4)
    assert data[index] == ord("t")
    assert ord("t") not in data[:index]


def test_mem_find_respects_limit():
    assert mem_find(b"batata", ord("t"), 2) is None


def test_mem_find_truncates_value_to_byte():
    data = b"batata"
    assert mem_find(data, ord("b") + 256, 6) == mem_find(data, ord("b"), 6)


def test_mem_compare_zero_length():
    assert mem_compare(b"abc", b"xyz", 0) == 0


def test_mem_compare_equal():
    assert mem_compare(b"batata", b"batata", 6) == 0


def test_mem_compare_sign_and_antisymmetry():
    a, b = b"batata", b"banana"
    assert mem_compare(a, b, 5) > 0
    assert mem_compare(a, b, 5) == -mem_compare(b, a, 5)


def test_mem_compare_unsigned_bytes():
    s2 = bytes([0, 0, 127, 0])
    s3 = bytes([0, 0, 42, 0])
    assert mem_compare(s2, s3, 4) > 0
    assert mem_compare(bytes([200]), bytes([1]), 1) > 0


def test_mem_compare_prefix_equal():
    assert mem_compare(b"banana", b"bandit", 3) == 0


def test_mem_copy_copies_prefix():
    dest = bytearray(b"batata")
    result = mem_copy(dest, b"cozinha", 4)
    assert result is dest
    assert dest[:4] == b"cozinha"[:4]
    assert dest[4:] == b"batata"[4:]


def test_mem_copy_too_long():
    with pytest.raises(IndexError):
        mem_copy(bytearray(b"abc"), b"cozinha", 5)


def test_mem_move_forward_overlap():
    buf = bytearray(b"abcdef")
    mem_move(buf, 1, 0, 4)
    assert buf == bytearray(b"aabcdf")


def test_mem_move_backward_overlap():
    buf = bytearray(b"abcdef")
    mem_move(buf, 0, 2, 4)
    assert buf == bytearray(b"cdefef")


def test_mem_move_same_offset_is_identity():
    buf = bytearray(b"Panquecas")
    mem_move(buf, 3, 3, 5)
    assert buf == bytearray(b"Panquecas")


def test_mem_move_out_of_range():
    with pytest.raises(IndexError):
        mem_move(bytearray(b"abc"), 2, 0, 2)


def test_mem_set_fills_prefix():
    buf = bytearray(b"Panquecas com chocolate")
    mem_set(buf, ord("c"), 6)
    assert buf[:6] == b"c" * 6
    assert buf[6:] == b"Panquecas com chocolate"[6:]


def test_mem_set_wraps_value():
    buf = bytearray(3)
    mem_set(buf, 256 + ord("x"), 3)
    assert buf == bytearray(b"xxx")


def test_mem_set_negative_length():
    with pytest.raises(ValueError):
        mem_set(bytearray(3), 0, -1)