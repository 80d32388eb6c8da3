# Copyright 2026 EBNFKit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for EBNFKit documentation."""

project = "EBNFKit"
author = "EBNFKit Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]

html_theme = "alabaster"
