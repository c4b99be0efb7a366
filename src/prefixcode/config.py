"""Configuration for file-based encoding and decoding.

This module provides the configuration dataclass shared by the text file helpers
and the command line interface.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass


@dataclass
class CodecConfig:
    """Configuration for reading and writing encoded and decoded files.

    Attributes:
        encoding: Text encoding used for plaintext files (default "utf-8")
        validate_trie: Refuse to decode with a trie that fails ``is_valid()``
            (default True)
        ignore_whitespace: Skip spaces and line breaks when reading bit text
            files (default True)

    Examples:
        ```python
        from prefixcode.config import CodecConfig
        from prefixcode.utils.textio import read_bits

        config = CodecConfig(encoding="latin-1", validate_trie=False)
        bits = read_bits("message.bits", config)
        ```
    """

    encoding: str = "utf-8"
    validate_trie: bool = True
    ignore_whitespace: bool = True

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        try:
            codecs.lookup(self.encoding)
        except LookupError as err:
            raise ValueError(f"Unknown text encoding: {self.encoding}") from err
