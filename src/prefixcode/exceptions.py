"""Exception hierarchy for prefixcode.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from PrefixCodeError for easy catching of any prefixcode-specific error.

Lookup-style queries (``SymbolCodeMap.contains``, ``SymbolCodeMap.lookup``) never raise;
absence is reported as ``False`` or ``None``. A structurally invalid decode trie is not an
exception either: ``DecodeTrie.is_valid()`` reports it as a boolean.
"""

from __future__ import annotations

from typing import Any


class PrefixCodeError(Exception):
    """Base exception for all prefixcode errors."""

    pass


class SymbolNotFoundError(PrefixCodeError, LookupError):
    """Raised when encoding text that contains a symbol missing from the code map.

    Attributes:
        symbol: The symbol that has no codeword
        position: Index of the symbol in the text being encoded
    """

    def __init__(self, symbol: Any, position: int) -> None:
        self.symbol = symbol
        self.position = position
        super().__init__(f"Symbol {symbol!r} at position {position} has no codeword")


class MalformedCodewordError(PrefixCodeError, ValueError):
    """Raised when a bit sequence cannot be decoded by a decode trie.

    Examples:
        - A bit leads to a child that does not exist
        - Input ends part-way through a codeword

    Attributes:
        position: Index of the bit at which decoding failed (equal to the
            input length when the input ended mid-codeword)
        decoded: Text successfully decoded before the failure
    """

    def __init__(self, message: str, position: int, decoded: str = "") -> None:
        self.position = position
        self.decoded = decoded
        super().__init__(message)


class CodebookError(PrefixCodeError):
    """Raised when a codebook file or mapping is invalid.

    Examples:
        - File is not valid JSON
        - Symbol is not exactly one character
        - Codeword contains characters other than '0' and '1'
    """

    pass
