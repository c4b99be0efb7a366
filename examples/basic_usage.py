#!/usr/bin/env python3
"""Basic usage example for prefixcode.

This example demonstrates:
1. Building a code map from a prebuilt codebook
2. Encoding text to bits
3. Building and validating a decode trie
4. Decoding bits back to text
5. Handling malformed input
"""

from __future__ import annotations

from prefixcode import (
    Codebook,
    DecodeTrie,
    MalformedCodewordError,
    SymbolNotFoundError,
    code_lengths,
    encoded_bits,
    is_prefix_free,
)

# Huffman code for "this is an example of a huffman tree"
CODEBOOK = {
    " ": "111",
    "a": "010",
    "e": "000",
    "f": "1101",
    "h": "1010",
    "i": "1000",
    "m": "0111",
    "n": "0010",
    "s": "1011",
    "t": "0110",
    "l": "11001",
    "o": "00110",
    "p": "10011",
    "r": "11000",
    "u": "00111",
    "x": "10010",
}


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("prefixcode Basic Usage Example")
    print("=" * 60)
    print()

    # Build the code map
    print("1. Loading the codebook...")
    code_map = Codebook.from_mapping(CODEBOOK).to_code_map()
    for symbol, length in code_lengths(code_map).items():
        print(f"   {symbol!r}: {code_map.lookup(symbol)} ({length} bits)")
    print(f"   Prefix-free: {is_prefix_free(code_map)}")
    print()

    # Encode
    text = "this is an example of a huffman tree"
    print("2. Encoding text...")
    bits = code_map.encode(text)
    print(f"   Text: {text!r} ({len(text)} symbols, {len(text) * 8} bits as 8-bit text)")
    print(f"   Bits: {bits}")
    print(f"   Encoded size: {encoded_bits(code_map, text)} bits")
    print()

    # Decode
    print("3. Building the decode trie...")
    trie = DecodeTrie.from_code_map(code_map)
    print(f"   {trie!r}")
    if not trie.is_valid():
        print("   Codebook is not a complete prefix code, stopping.")
        return
    print()

    print("4. Decoding...")
    decoded = trie.decode(bits)
    print(f"   Decoded: {decoded!r}")
    print(f"   Round trip OK: {decoded == text}")
    print()

    # Errors
    print("5. Error handling...")
    try:
        code_map.encode("zebra")
    except SymbolNotFoundError as e:
        print(f"   Encode failed: {e}")

    try:
        trie.decode(bits.append("01"))
    except MalformedCodewordError as e:
        print(f"   Decode failed: {e} (decoded so far: {e.decoded!r})")
    print()


if __name__ == "__main__":
    main()
