"""Prefix code lookup structures for prefixcode.

This module provides the bit sequence value type, the symbol to codeword map
used for encoding, and the decode trie used for decoding.
"""

from __future__ import annotations

from .bitseq import BitSequence
from .codemap import LookupNode, SymbolCodeMap
from .trie import DecodeTrie, TrieNode

__all__ = [
    "BitSequence",
    "SymbolCodeMap",
    "LookupNode",
    "DecodeTrie",
    "TrieNode",
]
