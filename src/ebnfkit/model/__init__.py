# Copyright 2026 EBNFKit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Value records produced by the EBNFKit parsers."""

from ebnfkit.model.records import (
    FileName,
    ForKind,
    ForStatement,
    FunctionCall,
    Sign,
    SignedNumber,
)

__all__ = [
    # Classification tags
    "Sign",
    "ForKind",
    # Records
    "SignedNumber",
    "FileName",
    "ForStatement",
    "FunctionCall",
]
