"""Pydantic codebook models for prefixcode.

This module provides the codebook models and the JSON codebook loader that
produce populated SymbolCodeMap instances.
"""

from __future__ import annotations

from .base import BaseCodebookModel
from .codebook import Codebook, CodebookEntry, dump_codebook, load_codebook

__all__ = [
    "BaseCodebookModel",
    "Codebook",
    "CodebookEntry",
    "load_codebook",
    "dump_codebook",
]
