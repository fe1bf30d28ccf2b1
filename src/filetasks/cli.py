"""CLI entry point for filetasks."""

import argparse
import logging
import sys
from pathlib import Path

from filetasks.tasks import analyze_file, capture_lines, copy_file, count_character, filter_keyword
from filetasks.tasks import char_counter, duplicator, keyword_filter, numbers

logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
)
logger = logging.getLogger(__name__)


def _require_file(path: Path) -> None:
    """Exit with an error if an input file is missing."""
    if not path.is_file():
        logger.error(f"File not found: {path}")
        sys.exit(1)


def copy(source: str, destination: str) -> None:
    """Copy a file, overwriting the destination.

    Args:
        source: Path of the file to copy
        destination: Path of the copy
    """
    source_path = Path(source)
    _require_file(source_path)
    copy_file(source_path, destination)


def numbers_cmd(file: str, sentinel: str = numbers.SENTINEL) -> None:
    """Capture numbers from stdin into a file, then report on them.

    Args:
        file: File the captured lines are written to and read back from
        sentinel: Line that ends console input
    """
    path = Path(file)
    logger.info(f"Enter numbers, finish with '{sentinel}'")
    capture_lines(path, sys.stdin, sentinel)

    report = analyze_file(path)
    buckets = report.buckets

    print(f"integers: {buckets.integers}")
    print(f"bytes: {buckets.byte_range}")
    print(f"floats: {buckets.floats}")
    print(f"average: {report.average}")
    print(f"int count: {report.integer_count}")
    print(f"average 3/4: {report.three_quarters_average}")


def filter_cmd(source: str, output: str, keyword: str, limit: int) -> None:
    """Copy text until the keyword has appeared `limit` times.

    Args:
        source: Text file to read
        output: Text file to write
        keyword: Substring to count in words
        limit: Occurrence count at which copying stops
    """
    source_path = Path(source)
    _require_file(source_path)
    result = filter_keyword(source_path, output, keyword, limit)

    print(f"Output: {result.output}")
    print(f"  '{keyword}' words: {result.occurrences}")
    print(f"  Chars written: {result.chars_written}")
    print(f"  Stopped at limit: {result.stopped}")


def count(character: str, source: str) -> None:
    """Print how often a character occurs in a file.

    Args:
        character: Character to count, only the first one is used
        source: Text file to read
    """
    source_path = Path(source)
    _require_file(source_path)
    with open(source_path, encoding="utf-8", errors="replace") as stream:
        print(count_character(character, stream))


def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="filetasks",
        description="filetasks - single-pass file utilities",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # copy command
    copy_parser = subparsers.add_parser(
        "copy",
        help="Copy a file, replacing the destination",
    )
    copy_parser.add_argument(
        "--source",
        default=str(duplicator.DEFAULT_SOURCE),
        help="File to copy (default: the duplicator's own source)",
    )
    copy_parser.add_argument(
        "--destination",
        default=str(duplicator.DEFAULT_DESTINATION),
        help=f"Copy path (default: {duplicator.DEFAULT_DESTINATION})",
    )

    # numbers command
    numbers_parser = subparsers.add_parser(
        "numbers",
        help="Capture numbers from stdin and report statistics",
    )
    numbers_parser.add_argument(
        "--file",
        default=str(numbers.DEFAULT_FILE),
        help=f"File to write and analyze (default: {numbers.DEFAULT_FILE})",
    )
    numbers_parser.add_argument(
        "--sentinel",
        default=numbers.SENTINEL,
        help=f"Line that ends input (default: {numbers.SENTINEL})",
    )

    # filter command
    filter_parser = subparsers.add_parser(
        "filter",
        help="Copy text until a keyword has been seen several times",
    )
    filter_parser.add_argument(
        "--input",
        default=str(keyword_filter.DEFAULT_INPUT),
        help=f"Text file to read (default: {keyword_filter.DEFAULT_INPUT})",
    )
    filter_parser.add_argument(
        "--output",
        default=str(keyword_filter.DEFAULT_OUTPUT),
        help=f"Text file to write (default: {keyword_filter.DEFAULT_OUTPUT})",
    )
    filter_parser.add_argument(
        "--keyword",
        default=keyword_filter.DEFAULT_KEYWORD,
        help=f"Substring to count (default: {keyword_filter.DEFAULT_KEYWORD})",
    )
    filter_parser.add_argument(
        "--limit",
        type=int,
        default=keyword_filter.DEFAULT_LIMIT,
        help=f"Stop after this many matches (default: {keyword_filter.DEFAULT_LIMIT})",
    )

    # count command
    count_parser = subparsers.add_parser(
        "count",
        help="Count a character in a file",
    )
    count_parser.add_argument("character", help="Character to count (first one is used)")
    count_parser.add_argument(
        "--input",
        default=str(char_counter.DEFAULT_INPUT),
        help=f"Text file to read (default: {char_counter.DEFAULT_INPUT})",
    )

    args = parser.parse_args()

    if args.command == "copy":
        copy(args.source, args.destination)
    elif args.command == "numbers":
        numbers_cmd(args.file, args.sentinel)
    elif args.command == "filter":
        filter_cmd(args.input, args.output, args.keyword, args.limit)
    elif args.command == "count":
        count(args.character, args.input)


if __name__ == "__main__":
    main()
