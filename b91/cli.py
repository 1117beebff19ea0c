"""Simple CLI for basE91 encoding and decoding.

Usage examples:
  # Encode a file; output is wrapped at 76 columns
  b91 encode picture.png > picture.b91

  # Encode stdin without wrapping
  printf 'test' | b91 encode --wrap 0

  # Decode back to raw bytes
  b91 decode picture.b91 > picture.png

  # Use a custom charset of 91 unique symbols
  b91 encode data.bin --charset "<91 symbols>"
"""
from __future__ import annotations

import sys
import logging
import argparse

from . import codec
from .alphabet import Alphabet, DEFAULT_ALPHABET
from .errors import B91Error
from .utils import wrap

logger = logging.getLogger(__name__)


def _read_input(path: str | None) -> bytes:
    if path is None or path == "-":
        return sys.stdin.buffer.read()
    with open(path, "rb") as f:
        return f.read()


def _get_alphabet(args: argparse.Namespace) -> Alphabet:
    if getattr(args, "charset", None):
        return Alphabet(args.charset)
    return DEFAULT_ALPHABET


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="b91", description="basE91 encoder/decoder")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("file", nargs="?", default=None, help="Input file; stdin when omitted or '-'")
    common.add_argument("--charset", type=str, help="Custom charset of 91 unique symbols")

    enc = sub.add_parser("encode", parents=[common], help="Encode raw bytes to basE91 text")
    enc.add_argument("--wrap", type=int, default=76, help="Wrap output at N columns; 0 disables (default 76)")

    sub.add_parser("decode", parents=[common], help="Decode basE91 text to raw bytes")

    return p


def cmd_encode(args: argparse.Namespace) -> int:
    alphabet = _get_alphabet(args)
    data = _read_input(args.file)
    text = codec.encode(data, alphabet)
    sys.stdout.write(wrap(text, args.wrap))
    sys.stdout.write("\n")
    sys.stdout.flush()
    return 0


def cmd_decode(args: argparse.Namespace) -> int:
    alphabet = _get_alphabet(args)
    data = _read_input(args.file)
    out = codec.decode(data, alphabet)
    sys.stdout.buffer.write(out)
    sys.stdout.buffer.flush()
    return 0


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    try:
        if args.cmd == "encode":
            code = cmd_encode(args)
        elif args.cmd == "decode":
            code = cmd_decode(args)
        else:
            code = 2
    except (B91Error, OSError, ValueError) as e:
        logger.debug("command '%s' failed", args.cmd, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        code = 2
    raise SystemExit(code)


if __name__ == "__main__":
    main()
