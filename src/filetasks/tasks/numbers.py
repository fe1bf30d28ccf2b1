"""Capture numbers from the console and report statistics over them."""

import logging
import re
import sys
from pathlib import Path
from typing import TextIO

from filetasks.models import NumberBuckets, NumberReport
from filetasks.utils.text import split_tokens

logger = logging.getLogger(__name__)

DEFAULT_FILE = Path("numbers.txt")
SENTINEL = "exit"

# Inclusive on both ends: 128 and -127 are byte-range values
BYTE_MIN = -127
BYTE_MAX = 128

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def capture_lines(
    path: Path | str = DEFAULT_FILE,
    stream: TextIO | None = None,
    sentinel: str = SENTINEL,
) -> int:
    """Write lines read from a stream to a file, up to a sentinel line.

    The sentinel line itself is not written. End of stream also ends the
    capture. Any existing file content is replaced.

    Args:
        path: File to write
        stream: Line source, defaults to stdin
        sentinel: Line that terminates the capture

    Returns:
        Number of lines written
    """
    stream = stream or sys.stdin
    lines: list[str] = []

    for raw in stream:
        line = raw.rstrip("\r\n")
        if line == sentinel:
            break
        lines.append(line + "\n")

    Path(path).write_bytes("".join(lines).encode("utf-8"))
    logger.debug(f"Captured {len(lines)} lines -> {path}")
    return len(lines)


def classify_token(token: str) -> tuple[str, int | float]:
    """Classify a token as 'byte', 'integer' or 'float'.

    Raises:
        ValueError: If the token is not a number
    """
    if "." in token:
        if not FLOAT_PATTERN.fullmatch(token):
            raise ValueError(f"Not a decimal number: {token!r}")
        return "float", float(token)

    if not INTEGER_PATTERN.fullmatch(token):
        raise ValueError(f"Not an integer: {token!r}")
    value = int(token)
    if BYTE_MIN <= value <= BYTE_MAX:
        return "byte", value
    return "integer", value


def classify_tokens(tokens: list[str]) -> NumberBuckets:
    """Sort tokens into buckets, keeping encounter order within each."""
    buckets = NumberBuckets()
    for token in tokens:
        kind, value = classify_token(token)
        if kind == "float":
            buckets.floats.append(value)
        elif kind == "byte":
            buckets.byte_range.append(value)
        else:
            buckets.integers.append(value)
    return buckets


def three_quarters_average(tokens: list[str]) -> float:
    """Average of the first half of the second half of the tokens.

    Drops the first n // 2 tokens, then drops everything from the middle
    of what remains. The input list is left untouched.
    """
    remaining = list(tokens)
    del remaining[: len(remaining) // 2]
    del remaining[len(remaining) // 2 :]
    return classify_tokens(remaining).average


def read_tokens(path: Path | str) -> list[str]:
    """Read a file and return its whitespace-separated tokens in order."""
    tokens: list[str] = []
    reader = open(path, encoding="utf-8")
    try:
        for line in reader:
            tokens.extend(split_tokens(line))
    finally:
        try:
            reader.close()
        except OSError as e:
            logger.warning(f"Ignoring error while closing {path}: {e}")
    return tokens


def analyze_file(path: Path | str = DEFAULT_FILE) -> NumberReport:
    """Classify the numbers in a file and compute their averages.

    Args:
        path: File of whitespace-separated numbers

    Returns:
        NumberReport with the buckets, the overall average, the count of
        out-of-range integers and the three-quarters average

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If any token is not a number
    """
    tokens = read_tokens(path)
    buckets = classify_tokens(tokens)

    return NumberReport(
        tokens=tokens,
        buckets=buckets,
        average=buckets.average,
        integer_count=buckets.integer_count,
        three_quarters_average=three_quarters_average(tokens),
    )
