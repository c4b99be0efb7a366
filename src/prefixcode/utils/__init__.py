"""Utility functions for prefixcode.

This module provides code size calculation and bit/plain text file helpers.
"""

from __future__ import annotations

from .sizing import code_lengths, encoded_bits, is_prefix_free
from .textio import read_bits, read_text, write_bits, write_text

__all__ = [
    # Sizing functions
    "code_lengths",
    "encoded_bits",
    "is_prefix_free",
    # File helpers
    "read_bits",
    "write_bits",
    "read_text",
    "write_text",
]
