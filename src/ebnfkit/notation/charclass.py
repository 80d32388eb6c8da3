# Copyright 2026 EBNFKit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Character-class predicates for the EBNF range notation.

EBNF:
    Digit  = "0" … "9" .
    Letter = "a" … "z" | "A" … "Z" .

Every predicate takes a single character. Anything that is not exactly one
character long is rejected rather than compared lexicographically.
"""

# ###############
# Public Interface
# ###############


def is_digit(c: str) -> bool:
    """Return True if *c* is in the range '0' … '9'."""
    return _in_range(c, "0", "9")


def is_letter(c: str) -> bool:
    """Return True if *c* is an ASCII letter of either case."""
    return is_lower_letter(c) or is_upper_letter(c)


def is_lower_letter(c: str) -> bool:
    """Return True if *c* is in the range 'a' … 'z'."""
    return _in_range(c, "a", "z")


def is_upper_letter(c: str) -> bool:
    """Return True if *c* is in the range 'A' … 'Z'."""
    return _in_range(c, "A", "Z")


def is_hex_digit(c: str) -> bool:
    """Return True if *c* is a hexadecimal digit (0-9, a-f, A-F)."""
    return is_digit(c) or _in_range(c, "a", "f") or _in_range(c, "A", "F")


# ################
# Implementation
# ################


def _in_range(c: str, low: str, high: str) -> bool:
    return len(c) == 1 and low <= c <= high
