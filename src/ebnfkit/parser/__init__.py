# Copyright 2026 EBNFKit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parsers decomposing strings into EBNFKit records."""

from ebnfkit.errors import FormatError
from ebnfkit.parser.parsers import (
    parse_filename,
    parse_for_statement,
    parse_function_call,
    parse_signed_number,
)
from ebnfkit.parser.scanner import ScanError, scan_int

__all__ = [
    "FormatError",
    "ScanError",
    "parse_filename",
    "parse_for_statement",
    "parse_function_call",
    "parse_signed_number",
    "scan_int",
]
