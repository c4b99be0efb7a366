"""prefixcode: Prefix Code Text Compression

A Python library for encoding text with a prebuilt variable-length prefix code
(such as a Huffman code) and decoding it back.

Key Features:
- SymbolCodeMap: binary search tree mapping symbols to codewords, used for encoding
- DecodeTrie: binary trie mapping codewords back to symbols, used for decoding
- Structural validity check for decode tries
- Pydantic-validated JSON codebooks

Quick Start:
    >>> from prefixcode import DecodeTrie, SymbolCodeMap
    >>>
    >>> code_map = SymbolCodeMap()
    >>> code_map.insert("b", "10")
    >>> code_map.insert("a", "0")
    >>> code_map.insert("c", "11")
    >>>
    >>> bits = code_map.encode("abc")
    >>> trie = DecodeTrie.from_code_map(code_map)
    >>> trie.is_valid()
    True
    >>> trie.decode(bits)
    'abc'
"""

from __future__ import annotations

from .codec import BitSequence, DecodeTrie, LookupNode, SymbolCodeMap, TrieNode
from .config import CodecConfig
from .exceptions import (
    CodebookError,
    MalformedCodewordError,
    PrefixCodeError,
    SymbolNotFoundError,
)
from .models import Codebook, CodebookEntry, dump_codebook, load_codebook
from .utils import (
    code_lengths,
    encoded_bits,
    is_prefix_free,
    read_bits,
    read_text,
    write_bits,
    write_text,
)

__version__ = "0.1.0"

__all__ = [
    # Core API
    "BitSequence",
    "SymbolCodeMap",
    "LookupNode",
    "DecodeTrie",
    "TrieNode",
    # Configuration
    "CodecConfig",
    # Exceptions
    "PrefixCodeError",
    "SymbolNotFoundError",
    "MalformedCodewordError",
    "CodebookError",
    # Codebooks
    "Codebook",
    "CodebookEntry",
    "load_codebook",
    "dump_codebook",
    # Sizing
    "code_lengths",
    "encoded_bits",
    "is_prefix_free",
    # File helpers
    "read_bits",
    "write_bits",
    "read_text",
    "write_text",
    # Version
    "__version__",
]
