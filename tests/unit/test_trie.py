"""Unit tests for DecodeTrie and TrieNode."""

from __future__ import annotations

import pytest

from prefixcode import BitSequence, DecodeTrie, MalformedCodewordError, SymbolCodeMap, TrieNode


class TestTrieNode:
    """Test the per-node validity rule."""

    def test_leaf_is_valid(self) -> None:
        """Test a leaf holding a symbol."""
        assert TrieNode("a").is_valid()
        assert TrieNode("a").is_leaf()

    def test_empty_node_is_invalid(self) -> None:
        """Test a node with neither symbol nor children."""
        assert not TrieNode().is_valid()
        assert not TrieNode().is_leaf()

    def test_internal_node_is_valid(self) -> None:
        """Test an internal node with two leaves."""
        assert TrieNode(zero=TrieNode("a"), one=TrieNode("b")).is_valid()

    def test_single_child_is_invalid(self) -> None:
        """Test nodes with only one child."""
        assert not TrieNode(zero=TrieNode("a")).is_valid()
        assert not TrieNode(one=TrieNode("a")).is_valid()

    def test_symbol_with_children_is_invalid(self) -> None:
        """Test a node holding a symbol and children."""
        assert not TrieNode("x", zero=TrieNode("a"), one=TrieNode("b")).is_valid()
        assert not TrieNode("x", zero=TrieNode("a")).is_valid()

    def test_invalid_descendant(self) -> None:
        """Test an invalid node deeper in the subtree."""
        node = TrieNode(zero=TrieNode("a"), one=TrieNode(zero=TrieNode("b"), one=TrieNode()))
        assert not node.is_valid()

    def test_child(self) -> None:
        """Test child selection by bit."""
        zero, one = TrieNode("a"), TrieNode("b")
        node = TrieNode(zero=zero, one=one)
        assert node.child(0) is zero
        assert node.child(1) is one


class TestInsert:
    """Test building tries by codeword."""

    def test_insert_creates_path(self) -> None:
        """Test insert creates placeholder nodes along the path."""
        trie = DecodeTrie()
        trie.insert("01", "a")

        assert trie.root.symbol is None
        assert trie.root.one is None
        assert trie.root.zero is not None
        assert trie.root.zero.symbol is None
        assert trie.root.zero.one is not None
        assert trie.root.zero.one.symbol == "a"

    def test_insert_overwrites(self) -> None:
        """Test the last symbol inserted at a node wins."""
        trie = DecodeTrie()
        trie.insert("0", "a")
        trie.insert("1", "b")
        trie.insert("0", "c")

        assert trie.decode("01") == "cb"

    def test_insert_bit_sequence(self) -> None:
        """Test inserting with a BitSequence codeword."""
        trie = DecodeTrie()
        trie.insert(BitSequence([1]), "b")
        trie.insert(BitSequence([0]), "a")
        assert trie.is_valid()
        assert trie.decode(BitSequence([1, 0])) == "ba"

    def test_insert_empty_codeword_sets_root(self) -> None:
        """Test a zero-length codeword lands on the root."""
        trie = DecodeTrie()
        trie.insert("", "a")
        assert trie.root.symbol == "a"
        assert trie.is_valid()
        assert trie.decode("") == ""


class TestFromCodeMap:
    """Test building tries from code maps."""

    def test_scenario(self, abc_trie: DecodeTrie) -> None:
        """Test the trie built from b=001, a=01, c=1."""
        root = abc_trie.root
        assert root.one is not None and root.one.symbol == "c"
        assert root.zero is not None and root.zero.one is not None
        assert root.zero.one.symbol == "a"
        assert root.zero.zero is not None and root.zero.zero.one is not None
        assert root.zero.zero.one.symbol == "b"
        assert abc_trie.depth() == 3

    def test_empty_map(self) -> None:
        """Test a trie built from an empty map."""
        trie = DecodeTrie.from_code_map(SymbolCodeMap())
        assert not trie.is_valid()
        assert trie.decode("") == ""

    def test_complete_code_is_valid(self, complete_code: dict[str, str]) -> None:
        """Test a complete prefix-free code gives a valid trie."""
        trie = DecodeTrie.from_code_map(SymbolCodeMap.from_pairs(complete_code.items()))
        assert trie.is_valid()

    def test_incomplete_code_is_invalid(self, abc_trie: DecodeTrie) -> None:
        """Test a prefix-free code with an unused branch is invalid."""
        # The node for "00" has a one-child (b) but no zero-child
        assert not abc_trie.is_valid()

    def test_prefix_code_is_invalid(self) -> None:
        """Test a codeword that prefixes another makes the trie invalid."""
        trie = DecodeTrie()
        trie.insert("0", "a")
        trie.insert("01", "b")
        assert not trie.is_valid()

        code_map = SymbolCodeMap.from_pairs([("a", "0"), ("b", "01"), ("c", "1")])
        trie = DecodeTrie.from_code_map(code_map)
        assert not trie.is_valid()

    def test_duplicate_symbol_uses_first_codeword(self) -> None:
        """Test unreachable duplicates in the map do not leak into the trie."""
        code_map = SymbolCodeMap.from_pairs([("a", "0"), ("b", "1"), ("a", "11")])
        trie = DecodeTrie.from_code_map(code_map)
        assert trie.is_valid()
        assert trie.decode("01") == "ab"

    def test_deep_complete_code_is_valid(self) -> None:
        """Test validity of a trie far deeper than the interpreter's recursion limit."""
        pairs = [(chr(0x4E00 + i), "1" * i + "0") for i in range(1500)]
        pairs.append((chr(0x4E00 + 1500), "1" * 1500))
        trie = DecodeTrie.from_code_map(SymbolCodeMap.from_pairs(pairs))

        assert trie.depth() == 1500
        assert trie.is_valid()
        expected = chr(0x4E00) + chr(0x4E02) + chr(0x4E00 + 1500)
        assert trie.decode("0" + "110" + "1" * 1500) == expected

    def test_empty_codeword_symbol_never_decodes(self) -> None:
        """Test a one-symbol code with a zero-length codeword."""
        code_map = SymbolCodeMap.from_pairs([("a", "")])
        trie = DecodeTrie.from_code_map(code_map)

        assert trie.is_valid()
        assert code_map.encode("aa") == BitSequence()
        assert trie.decode(code_map.encode("aa")) == ""


class TestDecode:
    """Test decoding."""

    def test_scenario(self, abc_trie: DecodeTrie) -> None:
        """Test decoding the encoded scenario text."""
        assert abc_trie.decode("010011") == "abc"
        assert abc_trie.decode(BitSequence.from_text("010011")) == "abc"
        assert abc_trie.decode([1, 1, 0, 1]) == "cca"

    def test_empty_input(self, abc_trie: DecodeTrie) -> None:
        """Test decoding nothing."""
        assert abc_trie.decode("") == ""

    def test_truncated_input(self, abc_trie: DecodeTrie) -> None:
        """Test input ending inside a codeword."""
        with pytest.raises(MalformedCodewordError) as exc_info:
            abc_trie.decode("00")

        assert exc_info.value.position == 2
        assert exc_info.value.decoded == ""

    def test_truncated_after_symbols(self, abc_trie: DecodeTrie) -> None:
        """Test partial output is reported on truncation."""
        with pytest.raises(MalformedCodewordError, match="after 3 bits") as exc_info:
            abc_trie.decode("010")

        assert exc_info.value.decoded == "a"

    def test_missing_child(self, abc_trie: DecodeTrie) -> None:
        """Test a bit that leads nowhere."""
        with pytest.raises(MalformedCodewordError, match="position 3") as exc_info:
            abc_trie.decode("1000")

        assert exc_info.value.position == 3
        assert exc_info.value.decoded == "c"
        assert isinstance(exc_info.value, ValueError)

    def test_decode_empty_trie(self) -> None:
        """Test decoding with no codes at all."""
        with pytest.raises(MalformedCodewordError):
            DecodeTrie().decode("0")

    def test_repr(self, complete_code: dict[str, str]) -> None:
        """Test diagnostic rendering."""
        trie = DecodeTrie.from_code_map(SymbolCodeMap.from_pairs(complete_code.items()))
        assert repr(trie) == "DecodeTrie(depth=3, valid=True)"
