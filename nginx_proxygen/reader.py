"""
Character-level input reading for the interactive prompts.

InputReader wraps a text stream (standard input by default) and reads it one
character at a time, with a single character of pushback so that number
parsing can stop on a non-digit without losing it.
"""

import logging
import sys
from typing import TextIO

from .models import ReadResult
from .validation import NUM_CHAR, is_line_end

logger = logging.getLogger("proxygen.reader")


class InputReader:
    """Reads free-text tokens and integers from a text stream"""

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream
        self._pushback: str | None = None

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so a redirected sys.stdin is honoured
        return self._stream if self._stream is not None else sys.stdin

    def getchar(self) -> str:
        """Return the next character, or "" at end of stream"""
        if self._pushback is not None:
            char, self._pushback = self._pushback, None
            return char
        return self.stream.read(1)

    def ungetchar(self, char: str) -> None:
        if not char:
            return
        if self._pushback is not None:
            raise RuntimeError("Only one character of pushback is supported")
        self._pushback = char

    def read_line(self, max_len: int = NUM_CHAR) -> ReadResult:
        """
        Read one token up to the end of the line.

        Leading characters are skipped until the first alphabetic one. Input
        beyond max_len - 1 characters is discarded and counted as overflow.

        Args:
            max_len: Buffer capacity, terminator included

        Returns:
            ReadResult with the stored text, its length and the overflow count.
            A length of 0 means end of stream came before any usable character.
        """
        if max_len < 2:
            raise ValueError("max_len must leave room for at least one character")

        char = self.getchar()
        while char and not _is_alpha(char):
            char = self.getchar()

        if not char:
            logger.debug("End of stream before any alphabetic character")
            return ReadResult(text="", length=0, overflow=0)

        chars = [char]
        overflow = 0
        while True:
            char = self.getchar()
            if not char or is_line_end(char):
                break
            if len(chars) < max_len - 1:
                chars.append(char)
            else:
                overflow += 1

        text = "".join(chars)
        if overflow:
            logger.info("Truncated input to %d characters (%d discarded)", len(text), overflow)
        return ReadResult(text=text, length=len(text), overflow=overflow)

    def read_int(self) -> int | None:
        """
        Parse a signed decimal integer the way scanf("%d") does.

        Leading whitespace, newlines included, is skipped. Parsing stops at the
        first character that is not a digit, which stays in the stream.

        Returns:
            The parsed value, or None when no digits were found
        """
        char = self.getchar()
        while char and char.isspace():
            char = self.getchar()

        sign = ""
        if char in ("+", "-"):
            sign = char
            char = self.getchar()

        digits = []
        while char and "0" <= char <= "9":
            digits.append(char)
            char = self.getchar()
        self.ungetchar(char)

        if not digits:
            logger.debug("No digits found while parsing an integer")
            return None
        return int(sign + "".join(digits))


def _is_alpha(char: str) -> bool:
    """ASCII letters only, matching the C locale"""
    return char.isascii() and char.isalpha()


def use_tolerant_decoding(stream) -> None:
    """
    Make a text stream carry undecodable bytes through as lone surrogates.

    Such characters are never ASCII letters, so the reader skips them before
    a token instead of failing on them.
    """
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="surrogateescape")
