"""Symbol to codeword lookup used for encoding.

This module provides SymbolCodeMap, an unbalanced binary search tree keyed by
symbol. Each node stores one symbol and its codeword.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from ..exceptions import SymbolNotFoundError
from .bitseq import BitsLike, BitSequence


class LookupNode:
    """A node of the SymbolCodeMap search tree.

    Attributes:
        symbol: Symbol stored at the node
        codeword: Codeword associated with the symbol
        left: Subtree of symbols ordered before ``symbol``
        right: Subtree of symbols ordered at or after ``symbol``
    """

    __slots__ = ("symbol", "codeword", "left", "right")

    def __init__(self, symbol: str, codeword: BitSequence) -> None:
        self.symbol = symbol
        self.codeword = codeword
        self.left: Optional[LookupNode] = None
        self.right: Optional[LookupNode] = None

    def __repr__(self) -> str:
        return f"{self.symbol}:{self.codeword}"


class SymbolCodeMap:
    """Maps symbols to codewords.

    Symbols less than a node's symbol are stored in its left subtree; symbols
    greater than or equal to it are stored in its right subtree. The tree is
    never rebalanced and entries cannot be removed.

    Inserting a symbol that is already present does not replace the existing
    codeword. The new node is attached deeper in the right subtree where no
    lookup ever reaches it, so the first mapping inserted for a symbol is the
    one returned by ``lookup`` and used by ``encode``.

    Example:
        >>> code_map = SymbolCodeMap()
        >>> code_map.insert("b", "001")
        >>> code_map.insert("a", "01")
        >>> code_map.insert("c", "1")
        >>> list(code_map)
        ['a', 'b', 'c']
        >>> str(code_map.encode("abc"))
        '010011'
    """

    def __init__(self) -> None:
        """Initialize an empty code map."""
        self._root: Optional[LookupNode] = None

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, BitsLike]]) -> SymbolCodeMap:
        """Build a code map by inserting ``(symbol, codeword)`` pairs in order.

        Args:
            pairs: Iterable of symbol/codeword pairs

        Returns:
            Populated SymbolCodeMap
        """
        code_map = cls()
        for symbol, codeword in pairs:
            code_map.insert(symbol, codeword)
        return code_map

    def insert(self, symbol: str, codeword: BitsLike) -> None:
        """Add a symbol/codeword pair.

        Args:
            symbol: Symbol to store
            codeword: Codeword for the symbol (BitSequence or bit text)
        """
        node = LookupNode(symbol, BitSequence.coerce(codeword))
        if self._root is None:
            self._root = node
            return

        current = self._root
        while True:
            if symbol < current.symbol:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                # Equal symbols go right as well
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def _find(self, symbol: str) -> Optional[LookupNode]:
        """Return the shallowest node holding ``symbol``, or None."""
        current = self._root
        while current is not None:
            if symbol == current.symbol:
                return current
            if symbol < current.symbol:
                current = current.left
            else:
                current = current.right
        return None

    def contains(self, symbol: str) -> bool:
        """Return True if ``symbol`` has a codeword in the map."""
        return self._find(symbol) is not None

    def __contains__(self, symbol: object) -> bool:
        if not isinstance(symbol, str):
            return False
        return self.contains(symbol)

    def contains_all(self, symbols: Iterable[str]) -> bool:
        """Return True if every symbol in ``symbols`` is in the map.

        Stops at the first missing symbol.

        Args:
            symbols: Symbols to check (a string checks each of its characters)
        """
        return all(self.contains(symbol) for symbol in symbols)

    def lookup(self, symbol: str) -> Optional[BitSequence]:
        """Get the codeword stored for ``symbol``.

        Args:
            symbol: Symbol to look up

        Returns:
            A copy of the codeword, or None if the symbol is not in the map
        """
        node = self._find(symbol)
        if node is None:
            return None
        return node.codeword.clone()

    def encode(self, text: Iterable[str]) -> BitSequence:
        """Encode text by concatenating the codeword of each symbol in order.

        Args:
            text: Sequence of symbols, typically a ``str``

        Returns:
            Encoded bit sequence

        Raises:
            SymbolNotFoundError: If a symbol has no codeword
        """
        bits: list[int] = []
        for position, symbol in enumerate(text):
            node = self._find(symbol)
            if node is None:
                raise SymbolNotFoundError(symbol, position)
            bits.extend(node.codeword)
        return BitSequence(bits)

    def _walk(self) -> Iterator[LookupNode]:
        """Yield every stored node in ascending symbol order."""
        stack: list[LookupNode] = []
        current = self._root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            node = stack.pop()
            yield node
            current = node.right

    def iterate(self) -> Iterator[str]:
        """Yield the stored symbols in ascending order.

        The walk is lazy and starts over on every call. Every stored node is
        visited, so a symbol inserted more than once is yielded once per
        insertion, with the repeats adjacent to each other.

        Yields:
            Symbols in ascending order
        """
        for node in self._walk():
            yield node.symbol

    def __iter__(self) -> Iterator[str]:
        return self.iterate()

    def items(self) -> Iterator[tuple[str, BitSequence]]:
        """Yield ``(symbol, codeword)`` pairs in ascending symbol order.

        The codeword for each symbol is the one returned by ``lookup``.
        """
        # The first node of each run of equal symbols is the shallowest match
        first: Optional[LookupNode] = None
        for node in self._walk():
            if first is None or node.symbol != first.symbol:
                first = node
            yield node.symbol, first.codeword.clone()

    def __repr__(self) -> str:
        entries = ", ".join(f"{symbol!r}: '{codeword}'" for symbol, codeword in self.items())
        return f"SymbolCodeMap({{{entries}}})"
