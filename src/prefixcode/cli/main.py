"""Main CLI entry point for prefixcode."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .. import __version__
from ..cli.analyze import analyze_code_map
from ..codec.bitseq import BitSequence
from ..codec.codemap import SymbolCodeMap
from ..codec.trie import DecodeTrie
from ..config import CodecConfig
from ..exceptions import PrefixCodeError
from ..models.codebook import load_codebook
from ..utils.textio import read_bits, read_text, write_bits, write_text

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the prefixcode CLI."""
    parser = argparse.ArgumentParser(
        prog="prefixcode",
        description="prefixcode: Prefix Code Text Compression",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  prefixcode encode --codebook book.json --text "abc"          Encode text to bits
  prefixcode decode --codebook book.json --bits 010011         Decode bits to text
  prefixcode decode --codebook book.json --input msg.bits      Decode a bit text file
  prefixcode inspect --codebook book.json                      Analyze a codebook
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"prefixcode {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--encoding",
        default="utf-8",
        help="Text encoding for plaintext files (default: utf-8)",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    encode_parser = subparsers.add_parser("encode", help="Encode text into bit text")
    _add_codebook_argument(encode_parser)
    source = encode_parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--text", help="Text to encode")
    source.add_argument("--input", metavar="FILE", help="Plaintext file to encode")
    encode_parser.add_argument("--output", metavar="FILE", help="Write bit text to FILE")

    decode_parser = subparsers.add_parser("decode", help="Decode bit text into text")
    _add_codebook_argument(decode_parser)
    source = decode_parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--bits", help="Bit text to decode, e.g. 010011")
    source.add_argument("--input", metavar="FILE", help="Bit text file to decode")
    decode_parser.add_argument("--output", metavar="FILE", help="Write decoded text to FILE")
    decode_parser.add_argument(
        "--no-validate",
        action="store_true",
        help="Decode even if the decode trie is not valid",
    )

    inspect_parser = subparsers.add_parser("inspect", help="Show codebook details")
    _add_codebook_argument(inspect_parser)

    return parser


def _add_codebook_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--codebook",
        metavar="FILE",
        required=True,
        help="JSON codebook mapping symbols to codewords",
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the prefixcode CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # If no command specified, show help
    if args.command is None:
        parser.print_help()
        return 0

    codebook_path = Path(args.codebook)
    if not codebook_path.exists():
        print(f"Error: File not found: {codebook_path}", file=sys.stderr)
        return 1

    try:
        config = CodecConfig(
            encoding=args.encoding,
            validate_trie=not getattr(args, "no_validate", False),
        )
        code_map = load_codebook(codebook_path)

        if args.command == "encode":
            return _run_encode(args, code_map, config)
        if args.command == "decode":
            return _run_decode(args, code_map, config)

        analyze_code_map(code_map, name=codebook_path.name)
        return 0
    except (PrefixCodeError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def _run_encode(args: argparse.Namespace, code_map: SymbolCodeMap, config: CodecConfig) -> int:
    text = args.text if args.text is not None else read_text(args.input, config)
    bits = code_map.encode(text)
    logger.debug("Encoded %d symbols into %d bits", len(text), len(bits))

    if args.output:
        write_bits(args.output, bits)
    else:
        print(bits.to_text())
    return 0


def _run_decode(args: argparse.Namespace, code_map: SymbolCodeMap, config: CodecConfig) -> int:
    if args.bits is not None:
        bits = BitSequence.from_text(args.bits, ignore_whitespace=config.ignore_whitespace)
    else:
        bits = read_bits(args.input, config)

    trie = DecodeTrie.from_code_map(code_map)
    if config.validate_trie and not trie.is_valid():
        print(
            "Error: Codebook does not form a valid decode trie "
            "(use --no-validate to decode anyway)",
            file=sys.stderr,
        )
        return 1

    text = trie.decode(bits)
    logger.debug("Decoded %d bits into %d symbols", len(bits), len(text))

    if args.output:
        write_text(args.output, text, config)
    else:
        print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
