"""Writing characters, strings and numbers to a stream or file descriptor.

A stream is either an object with a write(str) method or an integer file
descriptor, to which UTF-8 encoded bytes are written.
"""

from __future__ import annotations

import os
from typing import TextIO, Union

from minishell.numconv import int_to_str

Stream = Union[TextIO, int]


def _write(text: str, stream: Stream) -> None:
    if isinstance(stream, bool):
        raise TypeError("a stream must be a file descriptor or a writable object")
    if isinstance(stream, int):
        data = text.encode("utf-8")
        while data:
            written = os.write(stream, data)
            data = data[written:]
    else:
        stream.write(text)


def put_char(c: str, stream: Stream) -> None:
    """Write the single character c."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _write(c, stream)


def put_str(text: str, stream: Stream) -> None:
    """Write text as it is."""
    if not isinstance(text, str):
        raise TypeError(f"expected a str, got {type(text).__name__}")
    _write(text, stream)


def put_endl(text: str, stream: Stream) -> None:
    """Write text followed by a newline."""
    put_str(text, stream)
    _write("\n", stream)


def put_number(n: int, stream: Stream) -> None:
    """Write the decimal text of the integer n."""
    _write(int_to_str(n), stream)