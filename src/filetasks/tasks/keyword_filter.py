"""Copy text until a keyword has been seen a given number of times."""

import logging
from pathlib import Path

from filetasks.models import FilterResult
from filetasks.utils.text import iter_chars

logger = logging.getLogger(__name__)

DEFAULT_INPUT = Path("javaDoc.txt")
DEFAULT_OUTPUT = Path("text.txt")
DEFAULT_KEYWORD = "java"
DEFAULT_LIMIT = 3


def filter_keyword(
    source: Path | str = DEFAULT_INPUT,
    destination: Path | str = DEFAULT_OUTPUT,
    keyword: str = DEFAULT_KEYWORD,
    limit: int = DEFAULT_LIMIT,
) -> FilterResult:
    """Copy source to destination, stopping after `limit` keyword words.

    Words are delimited by single spaces only. A word counts when its
    lowercased text contains the lowercased keyword. The check runs when
    the space after the word is copied, so a final word with no trailing
    space is never counted.

    Args:
        source: Text file to read
        destination: Text file to write, replaced if present
        keyword: Substring to look for in each word
        limit: Occurrence count at which copying stops

    Returns:
        FilterResult describing the written output
    """
    if limit < 1:
        raise ValueError(f"limit must be positive, got {limit}")

    needle = keyword.lower()
    output = Path(destination)
    count = 0
    written = 0
    word: list[str] = []

    with open(source, encoding="utf-8", errors="replace", newline="") as reader, open(
        output, "w", encoding="utf-8", errors="replace", newline=""
    ) as writer:
        for char in iter_chars(reader):
            writer.write(char)
            written += 1

            if char != " ":
                word.append(char)
                continue

            if needle in "".join(word).lower():
                count += 1
                if count == limit:
                    break
            word = []

    logger.debug(f"Found {count} '{keyword}' words, wrote {written} chars -> {output}")
    return FilterResult(
        output=output,
        occurrences=count,
        stopped=count == limit,
        chars_written=written,
    )
