# Copyright 2026 EBNFKit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the demonstration configuration file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".ebnfkit.yaml"

DEFAULT_TITLE = "EBNF NOTATION EXAMPLES"
DEFAULT_WIDTH = 70

# Keys of the demonstrated examples, in presentation order.
EXAMPLE_KEYS: tuple[str, ...] = (
    "boolean",
    "signed-number",
    "filename",
    "digits",
    "range",
    "identifier",
    "integer",
    "for-statement",
    "function-call",
)

# Examples whose samples are fed to character predicates.
SINGLE_CHARACTER_KEYS = frozenset({"range"})


class DemoConfigError(Exception):
    """Raised when a demo configuration file is invalid or cannot be loaded."""


@dataclass
class DemoConfig:
    """The parsed demonstration configuration.

    Attributes:
        title: Banner title printed above the examples.
        width: Width of the ``=`` banner lines.
        samples: Sample inputs overriding the built-in ones, keyed by example.
    """

    title: str = DEFAULT_TITLE
    width: int = DEFAULT_WIDTH
    samples: dict[str, list[str]] = field(default_factory=dict)


def load_demo_config(path: Path) -> DemoConfig:
    """Load and parse a demonstration configuration file.

    Args:
        path: Path to the YAML file, usually `.ebnfkit.yaml`.

    Returns:
        A DemoConfig instance populated from the file.

    Raises:
        DemoConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise DemoConfigError(f"Demo config file not found: {path}") from None
    except OSError as exc:
        raise DemoConfigError(f"Cannot read demo config file: {exc}") from exc

    return _parse_demo_config(text, source_label=str(path))


# ################
# Implementation
# ################


def _parse_demo_config(text: str, source_label: str = "<string>") -> DemoConfig:
    """Parse demo config YAML text into a DemoConfig.

    An empty document yields the defaults.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DemoConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return DemoConfig()
    if not isinstance(data, dict):
        raise DemoConfigError(f"{source_label}: demo config must be a YAML mapping")

    config = DemoConfig()
    if "title" in data:
        config.title = _require_string(data, "title", source_label)
    if "width" in data:
        config.width = _require_positive_int(data, "width", source_label)
    if "samples" in data:
        raw_samples = data["samples"]
        if not isinstance(raw_samples, dict):
            raise DemoConfigError(f"{source_label}: 'samples' must be a mapping")
        for key, entry in raw_samples.items():
            config.samples[key] = _parse_samples(key, entry, source_label)
    return config


def _require_string(mapping: dict[str, object], key: str, source_label: str) -> str:
    """Extract a string field from a mapping, raising DemoConfigError if it has another type."""
    value = mapping[key]
    if not isinstance(value, str):
        raise DemoConfigError(f"{source_label}: '{key}' must be a string")
    return value


def _require_positive_int(mapping: dict[str, object], key: str, source_label: str) -> int:
    value = mapping[key]
    # bool is a subclass of int
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise DemoConfigError(f"{source_label}: '{key}' must be a positive integer")
    return value


def _parse_samples(key: object, entry: object, source_label: str) -> list[str]:
    """Parse the sample list of a single example."""
    location = f"{source_label}: samples[{key!r}]"

    if key not in EXAMPLE_KEYS:
        known = ", ".join(EXAMPLE_KEYS)
        raise DemoConfigError(f"{location}: unknown example (expected one of: {known})")

    if not isinstance(entry, list):
        raise DemoConfigError(f"{location} must be a list")

    samples: list[str] = []
    for index, sample in enumerate(entry):
        if not isinstance(sample, str):
            raise DemoConfigError(
                f"{location}[{index}] must be a string; quote YAML scalars such as true or 42"
            )
        if key in SINGLE_CHARACTER_KEYS and len(sample) != 1:
            raise DemoConfigError(f"{location}[{index}] must be a single character")
        samples.append(sample)
    return samples
