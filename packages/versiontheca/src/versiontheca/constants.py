# SPDX-License-Identifier: MIT
"""Limits and sentinels shared by every dialect."""

from __future__ import annotations

# Maximum number of parts a single version can hold
MAX_PARTS = 25

# Parts are unsigned 32 bit integers
MAX_INTEGER = 2**32 - 1

# Largest value a Roman numeral can represent
MAX_ROMAN = 3999

# Part kinds
KIND_EPOCH = ":"
KIND_REVISION = "-"
KIND_ROMAN = "R"

# Lowest and highest letters of a string part
STRING_FLOOR = "A"
STRING_CEILING = "z"
