# Copyright 2026 EBNFKit Contributors
# SPDX-License-Identifier: Apache-2.0

"""The notation demonstration and its configuration."""

from ebnfkit.demo.config import (
    CONFIG_FILE_NAME,
    EXAMPLE_KEYS,
    DemoConfig,
    DemoConfigError,
    load_demo_config,
)
from ebnfkit.demo.driver import EXAMPLES, Example, describe, render_demo, run_example

__all__ = [
    "CONFIG_FILE_NAME",
    "EXAMPLES",
    "EXAMPLE_KEYS",
    "DemoConfig",
    "DemoConfigError",
    "Example",
    "describe",
    "load_demo_config",
    "render_demo",
    "run_example",
]
