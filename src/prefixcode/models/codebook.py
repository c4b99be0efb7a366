"""Codebook models and JSON loading.

A codebook is a prebuilt table of symbol/codeword pairs. This module validates
codebook data with Pydantic and turns it into a SymbolCodeMap.

Two JSON layouts are accepted::

    {"a": "01", "b": "001", "c": "1"}

    {"entries": [{"symbol": "a", "codeword": "01"}, ...]}

Entries are inserted into the code map in the order they appear.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Union

from pydantic import Field, ValidationError

from ..codec.codemap import SymbolCodeMap
from ..exceptions import CodebookError
from .base import BaseCodebookModel

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class CodebookEntry(BaseCodebookModel):
    """A single symbol and its codeword."""

    symbol: str = Field(min_length=1, max_length=1, description="Single character symbol")
    codeword: str = Field(pattern=r"^[01]*$", description="Codeword as '0'/'1' text")


class Codebook(BaseCodebookModel):
    """An ordered list of codebook entries.

    Example:
        >>> book = Codebook.from_mapping({"b": "001", "a": "01", "c": "1"})
        >>> code_map = book.to_code_map()
        >>> list(code_map)
        ['a', 'b', 'c']
    """

    entries: list[CodebookEntry] = Field(default_factory=list)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> Codebook:
        """Create a codebook from a ``{symbol: codeword}`` mapping.

        Args:
            mapping: Symbols mapped to codeword text

        Returns:
            Validated Codebook

        Raises:
            CodebookError: If a symbol or codeword is invalid
        """
        return cls.from_data(dict(mapping))

    @classmethod
    def from_data(cls, data: Any) -> Codebook:
        """Create a codebook from decoded JSON data in either accepted layout.

        Args:
            data: A ``{symbol: codeword}`` object or an ``{"entries": [...]}`` object

        Returns:
            Validated Codebook

        Raises:
            CodebookError: If the data does not describe a valid codebook
        """
        if not isinstance(data, dict):
            raise CodebookError(f"Codebook must be a JSON object, got {type(data).__name__}")

        if "entries" not in data:
            data = {"entries": [{"symbol": s, "codeword": c} for s, c in data.items()]}

        try:
            return cls.model_validate(data)
        except ValidationError as err:
            raise CodebookError(f"Invalid codebook: {err}") from err

    @classmethod
    def from_code_map(cls, code_map: SymbolCodeMap) -> Codebook:
        """Create a codebook listing the entries of ``code_map`` in symbol order."""
        entries = []
        for symbol, codeword in code_map.items():
            entries.append(CodebookEntry(symbol=symbol, codeword=codeword.to_text()))
        return cls(entries=entries)

    def to_code_map(self) -> SymbolCodeMap:
        """Insert every entry, in order, into a new SymbolCodeMap."""
        return SymbolCodeMap.from_pairs((entry.symbol, entry.codeword) for entry in self.entries)

    def to_mapping(self) -> dict[str, str]:
        """Return the entries as a ``{symbol: codeword}`` dict.

        When a symbol appears more than once the first entry is kept, matching
        the lookup behaviour of SymbolCodeMap.
        """
        mapping: dict[str, str] = {}
        for entry in self.entries:
            mapping.setdefault(entry.symbol, entry.codeword)
        return mapping


def load_codebook(path: PathLike) -> SymbolCodeMap:
    """Load a JSON codebook file into a SymbolCodeMap.

    Args:
        path: Path to the codebook file

    Returns:
        Populated SymbolCodeMap

    Raises:
        CodebookError: If the file cannot be read, is not JSON, or is not a valid codebook
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as err:
        raise CodebookError(f"Cannot read codebook {path}: {err}") from err
    except (json.JSONDecodeError, UnicodeDecodeError) as err:
        raise CodebookError(f"Codebook {path} is not valid JSON: {err}") from err

    book = Codebook.from_data(data)
    logger.debug("Loaded %d codebook entries from %s", len(book.entries), path)
    return book.to_code_map()


def dump_codebook(code_map: SymbolCodeMap, path: PathLike) -> None:
    """Write ``code_map`` to ``path`` as a ``{symbol: codeword}`` JSON object.

    Args:
        code_map: Code map to save
        path: Destination file
    """
    mapping = Codebook.from_code_map(code_map).to_mapping()
    text = json.dumps(mapping, indent=2, ensure_ascii=False)
    Path(path).write_text(text + "\n", encoding="utf-8")
