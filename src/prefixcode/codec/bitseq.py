"""Bit sequence value type.

This module provides the BitSequence type used both for individual codewords and
for whole encoded texts. Sequences behave as immutable values: operations that
combine sequences return new instances and never modify their operands.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Union

BitsLike = Union["BitSequence", str, Iterable[int]]


class BitSequence:
    """An ordered, finite sequence of bits.

    Bits are stored as ``0``/``1`` integers. Iteration is lazy and restartable:
    every call to ``iter()`` starts again from the first bit.

    Example:
        >>> seq = BitSequence.from_text("01")
        >>> seq = seq.append(BitSequence([0, 0, 1]))
        >>> str(seq)
        '01001'
        >>> list(seq)
        [0, 1, 0, 0, 1]
    """

    __slots__ = ("_bits",)

    def __init__(self, bits: Iterable[int | bool] = ()) -> None:
        """Initialize a bit sequence.

        Args:
            bits: Iterable of bits (0/1 integers or booleans)

        Raises:
            ValueError: If any element is not 0, 1, True or False
        """
        values = []
        for index, bit in enumerate(bits):
            if bit not in (0, 1):
                raise ValueError(f"Bit at index {index} must be 0 or 1, got {bit!r}")
            values.append(1 if bit else 0)
        self._bits: tuple[int, ...] = tuple(values)

    @classmethod
    def from_text(cls, text: str, ignore_whitespace: bool = True) -> BitSequence:
        """Build a sequence from a string of '0' and '1' characters.

        Args:
            text: Bit text such as ``"010011"``
            ignore_whitespace: If True, spaces and line breaks are skipped

        Returns:
            New BitSequence

        Raises:
            ValueError: If the text contains any other character
        """
        bits = []
        for index, char in enumerate(text):
            if char == "0":
                bits.append(0)
            elif char == "1":
                bits.append(1)
            elif ignore_whitespace and char.isspace():
                continue
            else:
                raise ValueError(f"Invalid bit character {char!r} at index {index}")
        return cls(bits)

    @classmethod
    def coerce(cls, value: BitsLike) -> BitSequence:
        """Return ``value`` as a BitSequence.

        Args:
            value: A BitSequence (returned unchanged), bit text, or iterable of bits

        Returns:
            BitSequence instance
        """
        if isinstance(value, BitSequence):
            return value
        if isinstance(value, str):
            return cls.from_text(value)
        return cls(value)

    def append(self, other: BitsLike) -> BitSequence:
        """Return the concatenation of this sequence followed by ``other``.

        Args:
            other: Sequence to append

        Returns:
            New BitSequence; neither operand is modified
        """
        other = BitSequence.coerce(other)
        result = BitSequence.__new__(BitSequence)
        result._bits = self._bits + other._bits
        return result

    def clone(self) -> BitSequence:
        """Return an independent copy of this sequence."""
        result = BitSequence.__new__(BitSequence)
        result._bits = tuple(self._bits)
        return result

    def to_text(self) -> str:
        """Render the sequence as a string of '0' and '1' characters."""
        return "".join("1" if bit else "0" for bit in self._bits)

    def __iter__(self) -> Iterator[int]:
        return iter(self._bits)

    def __len__(self) -> int:
        return len(self._bits)

    def __getitem__(self, index: int | slice) -> int | BitSequence:
        """Return one bit, or a new BitSequence when ``index`` is a slice."""
        if isinstance(index, slice):
            result = BitSequence.__new__(BitSequence)
            result._bits = self._bits[index]
            return result
        return self._bits[index]

    def __add__(self, other: BitsLike) -> BitSequence:
        return self.append(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitSequence):
            return NotImplemented
        return self._bits == other._bits

    def __hash__(self) -> int:
        return hash(self._bits)

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"BitSequence('{self.to_text()}')"
