# Copyright 2026 EBNFKit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Boolean recognizers for EBNF alternation, repetition and range notation."""

from ebnfkit.notation.charclass import (
    is_digit,
    is_hex_digit,
    is_letter,
    is_lower_letter,
    is_upper_letter,
)
from ebnfkit.notation.recognizers import (
    is_boolean,
    is_digits,
    is_valid_decimal,
    is_valid_hex,
    is_valid_identifier,
    is_valid_integer,
)

__all__ = [
    # Character classes
    "is_digit",
    "is_hex_digit",
    "is_letter",
    "is_lower_letter",
    "is_upper_letter",
    # Recognizers
    "is_boolean",
    "is_digits",
    "is_valid_decimal",
    "is_valid_hex",
    "is_valid_identifier",
    "is_valid_integer",
]
