# Copyright 2026 EBNFKit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recognizers: functions deciding whether a string belongs to a lexical category.

Each recognizer mirrors one EBNF production and returns a plain boolean.
"""

import logging
import re

from ebnfkit.notation.charclass import is_digit, is_hex_digit, is_letter

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def is_boolean(s: str) -> bool:
    """Alternation: ``Boolean = "true" | "false" .``

    Case-sensitive; surrounding whitespace is not tolerated.
    """
    return s in _BOOLEAN_LITERALS


def is_digits(s: str) -> bool:
    """Repetition: ``Digits = { Digit } .``

    Zero occurrences are allowed, so the empty string matches.
    """
    return _DIGITS_PATTERN.fullmatch(s) is not None


def is_valid_identifier(s: str) -> bool:
    """Return True if *s* is an identifier.

    EBNF:
        Identifier = letter { letter | unicode_digit | "_" } .
        letter     = "a" … "z" | "A" … "Z" | "_" .

    Only ASCII digits are accepted after the first character.
    """
    if not s:
        return False

    first = s[0]
    if not is_letter(first) and first != "_":
        logger.debug(f"Identifier rejected: {s!r} starts with {first!r}")
        return False

    for c in s[1:]:
        if not is_letter(c) and not is_digit(c) and c != "_":
            logger.debug(f"Identifier rejected: {s!r} contains {c!r}")
            return False
    return True


def is_valid_integer(s: str) -> bool:
    """Return True if *s* is a decimal or hexadecimal integer literal.

    EBNF:
        IntLit     = DecimalLit | HexLit .
        DecimalLit = ( "1" … "9" ) { DecimalDigit } | "0" .
        HexLit     = "0" ( "x" | "X" ) HexDigit { HexDigit } .
    """
    return is_valid_decimal(s) or is_valid_hex(s)


def is_valid_decimal(s: str) -> bool:
    """Return True if *s* is ``"0"`` or a digit run without a leading zero."""
    if s == "0":
        return True
    if not s or not "1" <= s[0] <= "9":
        return False
    return all(is_digit(c) for c in s[1:])


def is_valid_hex(s: str) -> bool:
    """Return True if *s* is ``0x``/``0X`` followed by at least one hex digit."""
    if len(s) < 3:
        return False
    if s[0] != "0" or s[1] not in "xX":
        return False
    return all(is_hex_digit(c) for c in s[2:])


# ################
# Implementation
# ################

_BOOLEAN_LITERALS = frozenset({"true", "false"})

# ASCII only: Python's \d would also accept other Unicode decimal digits.
_DIGITS_PATTERN = re.compile(r"[0-9]*")
