# Copyright 2026 EBNFKit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Registry of the notation examples and the demonstration renderer.

Every example pairs an EBNF notation with the helper functions that
implement it and a set of sample inputs. The renderer calls each helper on
each sample and formats one line per call.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from pydantic import BaseModel

from ebnfkit.demo.config import DemoConfig
from ebnfkit.errors import FormatError
from ebnfkit.notation import (
    is_boolean,
    is_digit,
    is_digits,
    is_letter,
    is_valid_identifier,
    is_valid_integer,
)
from ebnfkit.parser import (
    parse_filename,
    parse_for_statement,
    parse_function_call,
    parse_signed_number,
)

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class Example:
    """One demonstrated notation.

    Attributes:
        key: Identifier used by the CLI and the config file.
        heading: Section heading printed by the demonstration.
        helpers: The functions exercised for every sample, in print order.
        samples: The built-in sample inputs.
    """

    key: str
    heading: str
    helpers: tuple[Callable[[str], object], ...]
    samples: tuple[str, ...]

    @property
    def checkable(self) -> bool:
        """Return True if the example has exactly one helper and can be run on its own."""
        return len(self.helpers) == 1


EXAMPLES: dict[str, Example] = {
    example.key: example
    for example in (
        Example(
            "boolean",
            "ALTERNATION (|) - Choose ONE option",
            (is_boolean,),
            ("true", "false", "maybe"),
        ),
        Example(
            "signed-number",
            "GROUPING () - Group expressions",
            (parse_signed_number,),
            ("+42", "-15", "99"),
        ),
        Example(
            "filename",
            "OPTION [] - Zero or one occurrence",
            (parse_filename,),
            ("document.txt", "README"),
        ),
        Example(
            "digits",
            "REPETITION {} - Zero or more occurrences",
            (is_digits,),
            ("", "12345", "12a45"),
        ),
        Example(
            "range",
            "RANGE … - Set of characters",
            (is_digit, is_letter),
            ("5", "A", "1"),
        ),
        Example(
            "identifier",
            "COMPLETE EXAMPLE - Identifier",
            (is_valid_identifier,),
            ("name", "_private", "var123", "123var", "my-var"),
        ),
        Example(
            "integer",
            "COMPLETE EXAMPLE - Integer Literal",
            (is_valid_integer,),
            ("0", "123", "0xFF", "0xDEADBEEF"),
        ),
        Example(
            "for-statement",
            "COMPLETE EXAMPLE - For Statement",
            (parse_for_statement,),
            ("for x < 10 { }", "for i := 0; i < 10; i++ { }", "for { }"),
        ),
        Example(
            "function-call",
            "PRACTICAL EXAMPLE - Function Call",
            (parse_function_call,),
            ("fmt.Println()", "add(2, 3)"),
        ),
    )
}


def run_example(key: str, text: str) -> object:
    """Run the single helper of a checkable example on *text*.

    Returns:
        The recognizer's boolean or the parser's record.

    Raises:
        KeyError: If *key* does not name a checkable example.
        FormatError: If the parser rejects *text*.
    """
    example = EXAMPLES[key]
    if not example.checkable:
        raise KeyError(key)
    return example.helpers[0](text)


def describe(result: object) -> str:
    """Format a helper result for console output."""
    if isinstance(result, BaseModel):
        return str(result.model_dump(mode="json"))
    return str(result)


def render_demo(config: DemoConfig | None = None) -> list[str]:
    """Render the full demonstration as a list of output lines.

    Parser failures are reported inline as ``error: ...`` and do not stop
    the demonstration.
    """
    config = config or DemoConfig()
    banner = "=" * config.width

    lines = [banner, config.title, banner]
    for number, example in enumerate(EXAMPLES.values(), start=1):
        samples = config.samples.get(example.key, list(example.samples))
        lines.append("")
        lines.append(f"{number}. {example.heading}")
        for sample in samples:
            for helper in example.helpers:
                lines.append(f"   {helper.__name__}({sample!r}): {_call(helper, sample)}")

    lines.append("")
    lines.append(banner)
    return lines


# ################
# Implementation
# ################


def _call(helper: Callable[[str], object], sample: str) -> str:
    try:
        return describe(helper(sample))
    except FormatError as exc:
        logger.debug(f"{helper.__name__}({sample!r}) failed: {exc}")
        return f"error: {exc}"
