# Copyright 2026 EBNFKit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Immutable value records returned by the parsers."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class Sign(Enum):
    """The optional sign of a SignedNumber (``Sign = "+" | "-" .``)."""

    POSITIVE = "+"
    NEGATIVE = "-"


class ForKind(Enum):
    """Which alternative of ``ForStmt`` a for statement matched."""

    INFINITE = "infinite"
    CLAUSE = "clause"
    CONDITION = "condition"
    RANGE = "range"


class SignedNumber(BaseModel):
    """An integer with an explicit or defaulted sign."""

    model_config = ConfigDict(frozen=True)

    sign: Sign = Sign.POSITIVE
    number: int


class FileName(BaseModel):
    """A base name with an optional extension (empty when absent)."""

    model_config = ConfigDict(frozen=True)

    name: str
    extension: str = ""

    @property
    def filename(self) -> str:
        """Reassemble the file name, omitting the dot when there is no extension."""
        if self.extension:
            return f"{self.name}.{self.extension}"
        return self.name


class ForStatement(BaseModel):
    """A classified for statement.

    Attributes:
        kind: The matched loop alternative.
        content: The trimmed text following the ``for`` keyword.
    """

    model_config = ConfigDict(frozen=True)

    kind: ForKind
    content: str


class FunctionCall(BaseModel):
    """A callee name and its arguments in source order."""

    model_config = ConfigDict(frozen=True)

    name: str
    arguments: list[str] = _Field(default_factory=list)
