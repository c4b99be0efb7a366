"""Codebook analysis CLI command."""

from __future__ import annotations

from ..codec.codemap import SymbolCodeMap
from ..codec.trie import DecodeTrie
from ..utils.sizing import code_lengths, is_prefix_free


def analyze_code_map(code_map: SymbolCodeMap, name: str = "codebook") -> None:
    """Print a breakdown of a code map and the decode trie built from it.

    Args:
        code_map: Code map to analyze
        name: Label shown in the report header
    """
    lengths = code_lengths(code_map)
    trie = DecodeTrie.from_code_map(code_map)

    # Header
    print("|" * 7, "prefixcode: Prefix Code Text Compression", "|" * 7)
    print(f"{len(lengths)} symbol{'s' if len(lengths) != 1 else ''} loaded from {name}.")
    print("Codeword lengths are in bits.")
    print()

    # Entries
    print(f"{'-' * 27} Entries {'-' * 26}")
    # Duplicate insertions collapse to the codeword lookup returns
    entries = dict(code_map.items())
    for i, (symbol, codeword) in enumerate(entries.items(), 1):
        label = f"{i}. {symbol!r}"
        text = codeword.to_text() or "(empty)"
        dots = "." * max(1, 54 - len(label) - len(text) - len(f" {len(codeword)} bits"))
        print(f"        {label}{dots}{text} {len(codeword)} bits")
    print()

    # Summary section
    print(f"{'=' * 24} Summary {'=' * 24}")
    if lengths:
        shortest = min(lengths.values())
        longest = max(lengths.values())
        mean = sum(lengths.values()) / len(lengths)
        print(f"Codeword length: min {shortest}, max {longest}, mean {mean:.2f} bits")
    print(f"Prefix-free: {'yes' if is_prefix_free(code_map) else 'no'}")
    print(f"Decode trie depth: {trie.depth()}")
    print(f"Decode trie valid: {'yes' if trie.is_valid() else 'no'}")
    print()
