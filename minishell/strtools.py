"""String helpers: splitting, searching, comparing, bounded copies and trimming."""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Tuple, Union

CharLike = Union[int, str]


def _char_code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return c


def _code_at(text: str, index: int) -> int:
    """Code of the character at index, or 0 past the end of text."""
    return ord(text[index]) if index < len(text) else 0


def split_words(text: str, sep: str) -> List[str]:
    """Split text on the single character sep, dropping empty words."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in text.split(sep) if word]


def find_char(text: str, c: CharLike) -> Optional[int]:
    """Return the index of the first occurrence of c in text, or None.

    The terminating NUL is never matched.
    """
    code = _char_code(c)
    if code == 0:
        return None
    index = text.find(chr(code)) if 0 <= code <= 0x10FFFF else -1
    return None if index < 0 else index


def find_last_char(text: str, c: CharLike) -> Optional[int]:
    """Return the index of the last occurrence of c in text, or None.

    Searching for the NUL character yields the position just past the end.
    Integer codes above 255 wrap around once by 256.
    """
    code = _char_code(c)
    if code > 255:
        code -= 256
    if code == 0:
        return len(text)
    if not 0 <= code <= 0x10FFFF:
        return None
    index = text.rfind(chr(code))
    return None if index < 0 else index


def compare(a: Optional[str], b: str) -> int:
    """Compare two strings character by character.

    Returns the code difference at the first mismatch, 0 when equal,
    and 1 when a is None.
    """
    if a is None:
        return 1
    for index in range(max(len(a), len(b))):
        x, y = _code_at(a, index), _code_at(b, index)
        if x != y:
            return x - y
    return 0


def compare_n(a: str, b: str, n: int) -> int:
    """Compare at most n characters of a and b.

    Returns the code difference at the first mismatch or end of either
    string, or 0 when the first n characters agree.
    """
    for index in range(max(n, 0)):
        x, y = _code_at(a, index), _code_at(b, index)
        if x != y or x == 0 or y == 0:
            return x - y
    return 0


def duplicate(text: str) -> str:
    """Return a copy of text."""
    return "".join(text)


def iter_indexed(
    chars: MutableSequence[str], func: Callable[[int, str], Optional[str]]
) -> MutableSequence[str]:
    """Call func(index, char) for each element of chars.

    A non-None return value replaces the element in place. Returns chars.
    """
    for index, char in enumerate(list(chars)):
        replacement = func(index, char)
        if replacement is not None:
            chars[index] = replacement
    return chars


def join(a: str, b: str) -> str:
    """Concatenate two strings; both must be given."""
    if a is None or b is None:
        raise TypeError("join needs two strings")
    return a + b


def bounded_concat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dst within a buffer of size characters (NUL included).

    Returns the resulting string and the length the full concatenation
    would have had; when dst already fills the buffer, the length is
    size plus the length of src and dst is returned unchanged.
    """
    dst_len = len(dst)
    if size < dst_len + 1:
        return dst, size + len(src)
    room = size - dst_len - 1
    return dst + src[:room], dst_len + len(src)


def bounded_copy(src: str, size: int) -> Tuple[str, int]:
    """Copy src into a buffer of size characters (NUL included).

    Returns the copied text and the length of src. A size of 0 copies nothing.
    """
    if size <= 0:
        return "", len(src)
    return src[:size - 1], len(src)


def length(text: str) -> int:
    """Return the number of characters in text."""
    return len(text)


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) applied to every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def find_within(haystack: str, needle: str, limit: int) -> Optional[int]:
    """Return the index of needle in the first limit characters of haystack, or None.

    An empty needle is found at index 0.
    """
    if not needle:
        return 0
    index = haystack[:max(limit, 0)].find(needle)
    return None if index < 0 else index


def trim(text: str, chars: str) -> str:
    """Remove every character found in chars from both ends of text."""
    return text.strip(chars)


def substring(text: str, start: int, length: int) -> str:
    """Return at most length characters of text starting at start.

    A start beyond the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]