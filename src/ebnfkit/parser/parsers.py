# Copyright 2026 EBNFKit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parsers for the grouping, option and complete-example productions.

Each parser validates its input and returns a fresh record, or raises
FormatError. None of them backtrack or share state.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ebnfkit.errors import FormatError
from ebnfkit.model.records import FileName, ForKind, ForStatement, FunctionCall, Sign, SignedNumber
from ebnfkit.parser.scanner import scan_int, trim_space

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def parse_signed_number(s: str) -> SignedNumber:
    """Parse ``SignedNumber = [ Sign ] Number .``

    Surrounding whitespace is trimmed. A leading ``+`` or ``-`` becomes the
    sign (positive when absent) and the rest is read with :func:`scan_int`,
    so only a numeric prefix of the remainder has to be valid.

    Raises:
        ScanError: If the remainder does not start with an integer.
    """
    s = trim_space(s)
    sign = Sign.POSITIVE
    if s[:1] in ("+", "-"):
        sign = Sign(s[0])
        s = s[1:]

    number = scan_int(s)
    return SignedNumber(sign=sign, number=number)


def parse_filename(filename: str) -> FileName:
    """Parse ``FileExtension = [ "." identifier ] .``

    The text is split on every dot; only the first two parts are used, so
    ``"archive.tar.gz"`` has the extension ``"tar"``.
    """
    parts = filename.split(".")
    if len(parts) > 1:
        return FileName(name=parts[0], extension=parts[1])
    return FileName(name=parts[0])


def parse_for_statement(stmt: str) -> ForStatement:
    """Classify ``ForStmt = "for" [ Condition | ForClause | RangeClause ] Block .``

    The text after the keyword is matched against an ordered rule list and
    the first matching rule wins. A bare block (``for { }``) is the infinite
    loop, and a clause separator takes precedence over a leading ``range``.

    Raises:
        FormatError: If the trimmed input does not start with ``for``.
    """
    stmt = trim_space(stmt)
    if not stmt.startswith(_FOR_KEYWORD):
        raise FormatError("not a for statement")

    content = trim_space(stmt[len(_FOR_KEYWORD) :])
    kind = next(rule_kind for matches, rule_kind in _FOR_RULES if matches(content))
    logger.debug(f"For statement classified as {kind.value}: {content!r}")
    return ForStatement(kind=kind, content=content)


def parse_function_call(call: str) -> FunctionCall:
    """Parse ``FunctionCall = identifier "(" [ ArgumentList ] ")" .``

    The name is the text before the first ``(``; the arguments are the text
    up to the last ``)`` split on every comma. Nested parentheses and commas
    inside string literals are not recognized.

    Raises:
        FormatError: If either parenthesis is missing, or the last ``)``
            precedes the first ``(``.
    """
    open_idx = call.find("(")
    if open_idx == -1:
        raise FormatError("no opening parenthesis")

    name = trim_space(call[:open_idx])

    close_idx = call.rfind(")")
    if close_idx == -1:
        raise FormatError("no closing parenthesis")
    if close_idx < open_idx:
        raise FormatError("closing parenthesis before opening parenthesis")

    args_text = trim_space(call[open_idx + 1 : close_idx])
    arguments: list[str] = []
    if args_text:
        arguments = [trim_space(part) for part in args_text.split(",")]

    logger.debug(f"Function call {name!r} with {len(arguments)} argument(s)")
    return FunctionCall(name=name, arguments=arguments)


# ################
# Implementation
# ################

_FOR_KEYWORD = "for"
_BLOCK_OPEN = "{"

# Evaluated in order; the first predicate that holds selects the kind. The
# final rule always holds.
_FOR_RULES: list[tuple[Callable[[str], bool], ForKind]] = [
    (lambda content: content == "" or content.startswith(_BLOCK_OPEN), ForKind.INFINITE),
    (lambda content: ":=" in content or ";" in content, ForKind.CLAUSE),
    (lambda content: content.startswith("range"), ForKind.RANGE),
    (lambda content: True, ForKind.CONDITION),
]
