import io
import os

import pytest

from minishell.fdio import put_char, put_endl, put_number, put_str
from minishell.numconv import parse_int


def test_put_char_to_stream():
    buf = io.StringIO()
    put_char("f", buf)
    assert buf.getvalue() == "f"


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_char_rejects_empty():
    with pytest.raises(ValueError):
        put_char("", io.StringIO())


def test_put_str_writes_text_unchanged():
    text = "YOYO teste 1234 abcde"
    buf = io.StringIO()
    put_str(text, buf)
    assert buf.getvalue() == text


def test_put_endl_appends_newline():
    text = "YOYO teste 1234 abcde"
    buf = io.StringIO()
    put_endl(text, buf)
    assert buf.getvalue() == text + "\n"


def test_put_number_minimum_int():
    buf = io.StringIO()
    put_number(-2147483648, buf)
    assert buf.getvalue() == "-2147483648"


@pytest.mark.parametrize("n", [0, 9, 10, -1, 147483648, 2147483647])
def test_put_number_round_trip(n):
    buf = io.StringIO()
    put_number(n, buf)
    assert parse_int(buf.getvalue()) == n


def test_sequential_writes_accumulate():
    buf = io.StringIO()
    put_str("ab", buf)
    put_char("c", buf)
    put_endl("d", buf)
    assert buf.getvalue() == "ab" + "c" + "d" + "\n"


def test_writes_to_file_descriptor():
    read_fd, write_fd = os.pipe()
    try:
        put_str("hello", write_fd)
        put_char(" ", write_fd)
        put_endl("world", write_fd)
        put_number(-2147483648, write_fd)
        os.close(write_fd)
        write_fd = None
        with os.fdopen(read_fd, "rb") as reader:
            read_fd = None
            data = reader.read()
    finally:
        if write_fd is not None:
            os.close(write_fd)
        if read_fd is not None:
            os.close(read_fd)
    assert data == b"hello world\n-2147483648"


def test_put_str_rejects_non_str():
    with pytest.raises(TypeError):
        put_str(5, io.StringIO())


def test_put_number_rejects_non_int():
    with pytest.raises(TypeError):
        put_number("5", io.StringIO())