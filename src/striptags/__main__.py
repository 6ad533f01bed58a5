"""Command line entry point: strip tags from files or standard input."""

from __future__ import annotations

import argparse
import codecs
import sys
from pathlib import Path

from .stripper import strip_tags


def _read_text(path: Path, encoding: str) -> str:
    # Undecodable bytes become U+FFFD instead of failing the whole file.
    return path.read_bytes().decode(encoding, errors="replace")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="striptags",
        description="Strip HTML/XML tags and comments, keeping only the text",
    )
    parser.add_argument("files", nargs="*", type=Path, help="Files to strip (default: read standard input)")
    parser.add_argument("--encoding", default="utf-8", help="Encoding of input and output files (default: utf-8)")
    parser.add_argument("--output", "-o", type=Path, help="Write the result to this file instead of standard output")
    args = parser.parse_args(argv)

    try:
        codecs.lookup(args.encoding)
    except LookupError:
        print(f"ERROR: Unknown encoding: {args.encoding}", file=sys.stderr)
        return 1

    if args.files:
        chunks = []
        for path in args.files:
            try:
                html = _read_text(path, args.encoding)
            except OSError as e:
                print(f"ERROR: Cannot read {path}: {e}", file=sys.stderr)
                return 1
            chunks.append(strip_tags(html))
    else:
        chunks = [strip_tags(sys.stdin.read())]

    text = "".join(chunks)
    if args.output is None:
        sys.stdout.write(text)
        return 0
    try:
        args.output.write_text(text, encoding=args.encoding, errors="replace")
    except OSError as e:
        print(f"ERROR: Cannot write {args.output}: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
