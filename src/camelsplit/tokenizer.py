"""Splitting of "CamelCase" strings into words.

A string is consumed one word at a time by a small reader that walks its code
points. Each code point is classified as a digit (Unicode category ``Nd``), an
uppercase letter (``Lu``) or anything else, and a word ends where that
classification changes:

    >>> split("PDFLoader")
    ['PDF', 'Loader']
    >>> split("GL11Version")
    ['GL', '11', 'Version']

Words listed in ``no_split`` are kept together even when their casing or
digits would normally cause a split.
"""

import logging
import unicodedata
from collections.abc import Iterable

logger = logging.getLogger(__name__)


def _is_digit(char: str) -> bool:
    return unicodedata.category(char) == "Nd"


def _is_upper(char: str) -> bool:
    return unicodedata.category(char) == "Lu"


class _Reader:
    """A reader designed for reading "CamelCase" strings."""

    def __init__(self, text: str, no_split: tuple[str, ...]):
        self.text = text
        self.no_split = no_split
        self.longest_no_split = max((len(word) for word in no_split), default=0)
        self.pos = 0

    @property
    def has_next(self) -> bool:
        return self.pos < len(self.text)

    @property
    def peek(self) -> str:
        """The code point that is about to be read."""
        return self.text[self.pos]

    def read(self):
        self.pos += 1

    def unread(self):
        self.pos -= 1

    def _is_no_split_word(self, start: int) -> bool:
        """Check whether the word read so far, plus the next code point, starts a no-split word."""
        # Nothing longer than the longest no-split word can be a prefix of one.
        if self.pos + 1 - start > self.longest_no_split:
            return False

        chunk = self.text[start:self.pos + 1]
        return any(word.startswith(chunk) for word in self.no_split)

    def _is_boundary(self) -> bool:
        return _is_upper(self.peek) or _is_digit(self.peek)

    def read_part(self) -> str:
        """Read the next word and return it."""
        start = self.pos
        lead = self.peek
        self.read()

        if _is_digit(lead):
            return self._read_number(start)
        return self._read_word(start)

    def _read_number(self, start: int) -> str:
        if self.has_next and _is_digit(self.peek):
            while self.has_next and (_is_digit(self.peek) or self._is_no_split_word(start)):
                self.read()

        return self.text[start:self.pos]

    def _read_word(self, start: int) -> str:
        if self.has_next and _is_upper(self.peek):
            while self.has_next and (_is_upper(self.peek) or self._is_no_split_word(start)):
                self.read()

            # The last capital of an acronym starts the next word ("PDFLoader").
            if self.has_next and not self._is_boundary():
                self.unread()

            return self.text[start:self.pos]

        while self.has_next and (self._is_no_split_word(start) or not self._is_boundary()):
            self.read()

        return self.text[start:self.pos]


def _decode(value: str | bytes) -> str | None:
    """Return ``value`` as text, or None if it isn't well-formed UTF-8."""
    try:
        if isinstance(value, bytes):
            return value.decode("utf-8")
        value.encode("utf-8")
    except UnicodeError:
        return None
    return value


def split(value: str | bytes, no_split: Iterable[str] = ()) -> list[str] | list[bytes]:
    """Split a "CamelCase" string into the words it is made of.

    Args:
        value: The string to split. ``bytes`` are decoded as UTF-8 and the
            words are returned as ``bytes`` again.
        no_split: Words that must never be split, e.g. ``["Tls2"]``. While the
            word being read is a prefix of one of these, reading continues.
            A single ``str`` is taken as one word.

    Returns:
        The words of ``value``, in order. Joining them gives back ``value``.
        A list holding only ``value`` is returned when it is empty or isn't
        valid UTF-8.

    Examples:
        >>> split("5May2000")
        ['5', 'May', '2000']
        >>> split("UsesTls2Now", ["Tls2"])
        ['Uses', 'Tls2', 'Now']
        >>> split(b"BadUTF8\\xe2\\xe2\\xa1")
        [b'BadUTF8\\xe2\\xe2\\xa1']
    """
    text = _decode(value)
    if text is None:
        logger.debug(f"Not splitting {value!r}: not valid UTF-8")
        return [value]
    if not text:
        return [value]

    if isinstance(no_split, str):
        no_split = [no_split]

    reader = _Reader(text, tuple(no_split))
    parts = []
    while reader.has_next:
        parts.append(reader.read_part())

    if isinstance(value, bytes):
        return [part.encode("utf-8") for part in parts]
    return parts
