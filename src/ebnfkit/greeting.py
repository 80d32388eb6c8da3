# Copyright 2026 EBNFKit Contributors
# SPDX-License-Identifier: Apache-2.0

"""The hello-world greeting."""

# ###############
# Public Interface
# ###############

ENGLISH_HELLO_PREFIX = "Hello, "


def hello(name: str = "") -> str:
    """Greet *name*, or the world when no name is given."""
    if not name:
        name = "World"
    return ENGLISH_HELLO_PREFIX + name
