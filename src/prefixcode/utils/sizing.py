"""Code size calculation utilities.

This module provides functions to measure codes and encoded texts without
building the encoded bit sequence.
"""

from __future__ import annotations

from typing import Iterable

from ..codec.bitseq import BitSequence
from ..codec.codemap import SymbolCodeMap
from ..exceptions import SymbolNotFoundError


def code_lengths(code_map: SymbolCodeMap) -> dict[str, int]:
    """Get the codeword length of each symbol in a code map.

    Args:
        code_map: Code map to analyze

    Returns:
        Dictionary mapping symbols, in ascending order, to codeword lengths in bits

    Example:
        >>> code_lengths(SymbolCodeMap.from_pairs([("b", "001"), ("a", "01"), ("c", "1")]))
        {'a': 2, 'b': 3, 'c': 1}
    """
    return {symbol: len(codeword) for symbol, codeword in code_map.items()}


def encoded_bits(code_map: SymbolCodeMap, text: Iterable[str]) -> int:
    """Calculate the number of bits ``code_map.encode(text)`` would produce.

    Args:
        code_map: Code map used for encoding
        text: Sequence of symbols

    Returns:
        Encoded size in bits

    Raises:
        SymbolNotFoundError: If a symbol has no codeword
    """
    lengths = code_lengths(code_map)
    total = 0
    for position, symbol in enumerate(text):
        if symbol not in lengths:
            raise SymbolNotFoundError(symbol, position)
        total += lengths[symbol]
    return total


def is_prefix_free(code_map: SymbolCodeMap) -> bool:
    """Check that no codeword in the map is a prefix of another.

    Only the codeword returned by ``lookup`` is considered for each symbol.
    Two symbols sharing an identical codeword also make the code ambiguous
    and are reported as not prefix-free.

    Args:
        code_map: Code map to check

    Returns:
        True if the code is prefix-free
    """
    # Sorted bit text puts any prefix directly before some word it prefixes
    words = sorted(codeword.to_text() for codeword in _unique_codewords(code_map))
    for shorter, longer in zip(words, words[1:]):
        if longer.startswith(shorter):
            return False
    return True


def _unique_codewords(code_map: SymbolCodeMap) -> list[BitSequence]:
    seen: dict[str, BitSequence] = {}
    for symbol, codeword in code_map.items():
        seen.setdefault(symbol, codeword)
    return list(seen.values())
