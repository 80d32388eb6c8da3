# Copyright 2026 EBNFKit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Scanner for a leading decimal integer, with ``%d`` conversion semantics.

Only a prefix of the input is consumed: scanning ``"42abc"`` yields 42 and
the trailing text is ignored.
"""

from ebnfkit.errors import FormatError

# ###############
# Public Interface
# ###############

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class ScanError(FormatError):
    """Raised when the input does not start with a decimal integer.

    Attributes:
        column: 1-based column at which scanning failed.
    """

    def __init__(self, message: str, column: int) -> None:
        super().__init__(f"Column {column}: {message}")
        self.column = column


def is_space(ch: str) -> bool:
    """Return True if *ch* is Unicode white space, excluding the \\x1c-\\x1f separators."""
    return ch.isspace() and ch not in _SEPARATORS


def trim_space(s: str) -> str:
    """Strip leading and trailing characters accepted by :func:`is_space`."""
    start, end = 0, len(s)
    while start < end and is_space(s[start]):
        start += 1
    while end > start and is_space(s[end - 1]):
        end -= 1
    return s[start:end]


def scan_int(text: str) -> int:
    """Scan a base-10 integer from the start of *text*.

    Leading white space other than newlines is skipped and a single ``+`` or
    ``-`` is accepted before the digits. Scanning stops at the first non-digit.

    Args:
        text: The input to scan.

    Returns:
        The scanned value.

    Raises:
        ScanError: If no digits follow the optional sign, a newline precedes
            the number, or the value does not fit in a signed 64-bit integer.
    """
    return _IntScanner(text).scan()


# ################
# Implementation
# ################

# str.isspace() also accepts the ASCII separators FS, GS, RS and US.
_SEPARATORS = "\x1c\x1d\x1e\x1f"


class _IntScanner:
    """Internal cursor over the scanned text."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0

    def scan(self) -> int:
        """Run the scanner and return the integer value."""
        self._skip_blanks()
        if self._at_end():
            raise ScanError("unexpected end of input", self._column())

        start = self._pos
        if self._current() in "+-":
            self._advance()

        digits_start = self._pos
        while not self._at_end() and self._current() in "0123456789":
            self._advance()
        if self._pos == digits_start:
            if self._at_end():
                raise ScanError("unexpected end of input", self._column())
            raise ScanError(f"expected integer, found {self._current()!r}", self._column())

        token = self._source[start : self._pos]
        value = int(token)
        if not INT64_MIN <= value <= INT64_MAX:
            raise ScanError(f"integer overflow on token {token}", start + 1)
        return value

    # ------------------------------------------------------------------
    # Low-level character access helpers
    # ------------------------------------------------------------------

    def _at_end(self) -> bool:
        return self._pos >= len(self._source)

    def _current(self) -> str:
        """Return the character at the current position, or '' at end of input."""
        if self._pos < len(self._source):
            return self._source[self._pos]
        return ""

    def _advance(self) -> str:
        ch = self._source[self._pos]
        self._pos += 1
        return ch

    def _column(self) -> int:
        return self._pos + 1

    def _skip_blanks(self) -> None:
        """Skip white space other than newlines; a newline is an error."""
        while not self._at_end():
            ch = self._current()
            if ch == "\n":
                raise ScanError("unexpected newline", self._column())
            if not is_space(ch):
                break
            self._advance()
