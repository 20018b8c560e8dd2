# SPDX-License-Identifier: MIT
"""Command line interface for versiontheca."""

__version__ = "0.1.0"
