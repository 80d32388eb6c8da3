# Copyright 2026 EBNFKit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Exception types shared across the EBNFKit helpers."""

# ###############
# Public Interface
# ###############


class FormatError(Exception):
    """Raised when an input string cannot be classified or decomposed.

    Parsers raise this (or a subclass) instead of returning a partially
    filled record; the caller decides whether the failure matters.
    """
