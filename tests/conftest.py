"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from prefixcode import DecodeTrie, SymbolCodeMap


@pytest.fixture
def abc_code_map() -> SymbolCodeMap:
    """Code map with b=001, a=01, c=1, inserted out of order."""
    code_map = SymbolCodeMap()
    code_map.insert("b", "001")
    code_map.insert("a", "01")
    code_map.insert("c", "1")
    return code_map


@pytest.fixture
def abc_trie(abc_code_map: SymbolCodeMap) -> DecodeTrie:
    """Decode trie built from the abc code map."""
    return DecodeTrie.from_code_map(abc_code_map)


@pytest.fixture
def complete_code() -> dict[str, str]:
    """A complete prefix-free code over five symbols."""
    return {"e": "00", "t": "01", " ": "10", "a": "110", "s": "111"}


@pytest.fixture
def codebook_file(tmp_path: Path, complete_code: dict[str, str]) -> Path:
    """JSON codebook file holding the complete code."""
    path = tmp_path / "book.json"
    path.write_text(json.dumps(complete_code), encoding="utf-8")
    return path
