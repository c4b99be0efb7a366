"""Codeword to symbol lookup used for decoding.

This module provides DecodeTrie, a binary trie walked one bit at a time.
Symbols live on the nodes where their codewords end.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..exceptions import MalformedCodewordError
from .bitseq import BitsLike, BitSequence
from .codemap import SymbolCodeMap

logger = logging.getLogger(__name__)


class TrieNode:
    """A node of a DecodeTrie.

    A valid node is either a leaf (holds a symbol, no children) or an internal
    node (no symbol, both children present).

    Attributes:
        symbol: Symbol whose codeword ends at this node, if any
        zero: Child reached by a 0 bit
        one: Child reached by a 1 bit
    """

    __slots__ = ("symbol", "zero", "one")

    def __init__(
        self,
        symbol: Optional[str] = None,
        zero: Optional[TrieNode] = None,
        one: Optional[TrieNode] = None,
    ) -> None:
        self.symbol = symbol
        self.zero = zero
        self.one = one

    def child(self, bit: int) -> Optional[TrieNode]:
        """Return the child for ``bit``, or None if it does not exist."""
        return self.one if bit else self.zero

    def is_leaf(self) -> bool:
        """Return True if a codeword ends at this node."""
        return self.symbol is not None

    def is_valid(self) -> bool:
        """Check this node and all of its descendants.

        Returns:
            True if every node in the subtree is a proper leaf or internal node
        """
        stack = [self]
        while stack:
            node = stack.pop()
            if node.zero is None and node.one is None:
                if node.symbol is None:
                    return False
            elif node.zero is not None and node.one is not None:
                if node.symbol is not None:
                    return False
                stack.append(node.zero)
                stack.append(node.one)
            else:
                return False
        return True

    def __repr__(self) -> str:
        if self.symbol is not None:
            return f"TrieNode({self.symbol!r})"
        return "TrieNode()"


class DecodeTrie:
    """Decodes bit sequences back into text.

    A trie is usually built from a SymbolCodeMap and should be checked with
    ``is_valid()`` before it is used for decoding. A trie built from a
    complete prefix-free code is always valid.

    A zero-length codeword puts its symbol on the root, which is never emitted
    while decoding. A one-symbol code with codeword "" is therefore valid but
    decodes every input to "".

    Example:
        >>> code_map = SymbolCodeMap.from_pairs([("b", "10"), ("a", "0"), ("c", "11")])
        >>> trie = DecodeTrie.from_code_map(code_map)
        >>> trie.is_valid()
        True
        >>> trie.decode("01011")
        'abc'
    """

    def __init__(self, root: Optional[TrieNode] = None) -> None:
        """Initialize a trie.

        Args:
            root: Existing root node; an empty root is created if omitted
        """
        self.root = root if root is not None else TrieNode()

    @classmethod
    def from_code_map(cls, code_map: SymbolCodeMap) -> DecodeTrie:
        """Build a trie holding every symbol of ``code_map``.

        Symbols are inserted in ascending order using the codeword returned by
        ``code_map.lookup``, as listed by ``code_map.items()``. The map must not
        be modified during the build.

        Args:
            code_map: Populated code map

        Returns:
            New DecodeTrie
        """
        trie = cls()
        count = 0
        for symbol, codeword in code_map.items():
            trie.insert(codeword, symbol)
            count += 1
        logger.debug("Built decode trie from %d code map entries", count)
        return trie

    def insert(self, codeword: BitsLike, symbol: str) -> None:
        """Store ``symbol`` at the node reached by walking ``codeword``.

        Missing nodes along the path are created empty. A symbol already stored
        at the final node is replaced.

        Args:
            codeword: Path from the root (BitSequence or bit text)
            symbol: Symbol to store
        """
        current = self.root
        for bit in BitSequence.coerce(codeword):
            if bit:
                if current.one is None:
                    current.one = TrieNode()
                current = current.one
            else:
                if current.zero is None:
                    current.zero = TrieNode()
                current = current.zero
        if current.symbol is not None and current.symbol != symbol:
            logger.debug(
                "Codeword %s reassigned from %r to %r", codeword, current.symbol, symbol
            )
        current.symbol = symbol

    def is_valid(self) -> bool:
        """Return True if every node, including the root, is a leaf or internal node.

        An empty trie is not valid: its root has neither a symbol nor children.
        """
        return self.root.is_valid()

    def decode(self, codeword: BitsLike) -> str:
        """Decode a bit sequence into text.

        Bits are consumed one at a time starting from the root. Reaching a node
        that holds a symbol emits the symbol and returns to the root.

        Args:
            codeword: Encoded bits (BitSequence, bit text, or iterable of bits)

        Returns:
            Decoded text

        Raises:
            MalformedCodewordError: If a bit leads to a missing child, or the
                input ends part-way through a codeword
        """
        output: list[str] = []
        current = self.root
        bits = BitSequence.coerce(codeword)
        for position, bit in enumerate(bits):
            child = current.child(bit)
            if child is None:
                raise MalformedCodewordError(
                    f"No codeword continues with bit {bit} at position {position}",
                    position=position,
                    decoded="".join(output),
                )
            if child.is_leaf():
                output.append(child.symbol)  # type: ignore[arg-type]
                current = self.root
            else:
                current = child

        if current is not self.root:
            raise MalformedCodewordError(
                f"Input ended in the middle of a codeword after {len(bits)} bits",
                position=len(bits),
                decoded="".join(output),
            )
        return "".join(output)

    def depth(self) -> int:
        """Return the length of the longest path from the root."""
        deepest = 0
        stack = [(self.root, 0)]
        while stack:
            node, level = stack.pop()
            deepest = max(deepest, level)
            for child in (node.zero, node.one):
                if child is not None:
                    stack.append((child, level + 1))
        return deepest

    def __repr__(self) -> str:
        return f"DecodeTrie(depth={self.depth()}, valid={self.is_valid()})"
