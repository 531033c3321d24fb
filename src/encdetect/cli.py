"""Command-line interface for encdetect."""

from __future__ import annotations

import argparse
import logging
import sys

import encdetect


def main(argv: list[str] | None = None) -> None:
    """Run the ``encdetect`` command-line tool.

    Exits with status 1 if any of the given files could not be read.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    parser = argparse.ArgumentParser(description="Detect character encoding of files.")
    parser.add_argument("files", nargs="*", help="Files to detect encoding of")
    parser.add_argument(
        "--minimal", action="store_true", help="Output only the encoding name"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log detection stages to stderr"
    )
    parser.add_argument(
        "--version", action="version", version=f"encdetect {encdetect.__version__}"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    failed = False
    if args.files:
        for filepath in args.files:
            try:
                result = encdetect.detect_file(filepath)
            except OSError as e:
                print(f"encdetect: {filepath}: {e}", file=sys.stderr)
                failed = True
                continue
            if args.minimal:
                print(result.codec)
            else:
                print(f"{filepath}: {result.codec}")
    else:
        result = encdetect.detect(sys.stdin.buffer.read())
        if args.minimal:
            print(result.codec)
        else:
            print(f"stdin: {result.codec}")

    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
