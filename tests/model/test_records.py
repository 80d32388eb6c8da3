# Copyright 2026 EBNFKit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the parser result records."""

import pytest
from pydantic import ValidationError

from ebnfkit.model import FileName, ForKind, ForStatement, FunctionCall, Sign, SignedNumber


class TestSignedNumber:
    def test_sign_defaults_to_positive(self) -> None:
        assert SignedNumber(number=3).sign == Sign.POSITIVE

    def test_sign_accepts_symbol_value(self) -> None:
        assert SignedNumber(sign="-", number=3).sign == Sign.NEGATIVE

    def test_unknown_sign_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SignedNumber(sign="*", number=3)

    def test_records_are_frozen(self) -> None:
        record = SignedNumber(number=1)
        with pytest.raises(ValidationError):
            record.number = 2


class TestFileName:
    def test_extension_defaults_to_empty(self) -> None:
        assert FileName(name="README").extension == ""

    def test_filename_with_extension(self) -> None:
        assert FileName(name="document", extension="txt").filename == "document.txt"

    def test_filename_without_extension_has_no_dot(self) -> None:
        assert FileName(name="README").filename == "README"


class TestForStatement:
    @pytest.mark.parametrize("tag", ["infinite", "clause", "condition", "range"])
    def test_all_tags_are_valid_kinds(self, tag: str) -> None:
        assert ForStatement(kind=tag, content="").kind == ForKind(tag)

    def test_unknown_kind_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ForStatement(kind="while", content="")


class TestFunctionCall:
    def test_arguments_default_to_empty_list(self) -> None:
        assert FunctionCall(name="f").arguments == []

    def test_dump_preserves_argument_order(self) -> None:
        call = FunctionCall(name="add", arguments=["2", "3"])
        assert call.model_dump(mode="json") == {"name": "add", "arguments": ["2", "3"]}
