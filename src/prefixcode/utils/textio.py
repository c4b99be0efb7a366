"""Text file helpers for encoded and decoded content.

Encoded content is stored as bit text: a file of '0' and '1' characters.
Plaintext is read and written with the encoding from CodecConfig.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from ..codec.bitseq import BitSequence
from ..config import CodecConfig

PathLike = Union[str, Path]


def read_bits(path: PathLike, config: Optional[CodecConfig] = None) -> BitSequence:
    """Read a bit text file into a BitSequence.

    Args:
        path: File containing '0'/'1' characters
        config: Codec configuration (defaults to CodecConfig())

    Returns:
        Bits read from the file

    Raises:
        ValueError: If the file contains characters other than bits
            (and whitespace, when ``config.ignore_whitespace`` is set)
        OSError: If the file cannot be read
    """
    config = config or CodecConfig()
    text = Path(path).read_text(encoding="ascii")
    return BitSequence.from_text(text, ignore_whitespace=config.ignore_whitespace)


def write_bits(path: PathLike, bits: BitSequence) -> None:
    """Write a BitSequence to ``path`` as bit text followed by a newline."""
    Path(path).write_text(bits.to_text() + "\n", encoding="ascii")


def read_text(path: PathLike, config: Optional[CodecConfig] = None) -> str:
    """Read a plaintext file using the configured encoding."""
    config = config or CodecConfig()
    with open(path, encoding=config.encoding, newline="") as handle:
        return handle.read()


def write_text(path: PathLike, text: str, config: Optional[CodecConfig] = None) -> None:
    """Write plaintext to ``path`` using the configured encoding."""
    config = config or CodecConfig()
    # newline="" keeps decoded line endings byte-for-byte
    with open(path, "w", encoding=config.encoding, newline="") as handle:
        handle.write(text)
