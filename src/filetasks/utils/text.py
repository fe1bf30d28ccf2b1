"""Text helpers shared by the file tasks."""

from typing import Iterator, TextIO


def split_tokens(text: str) -> list[str]:
    """Split text on runs of whitespace into an ordered token list."""
    return text.split()


def iter_chars(stream: TextIO) -> Iterator[str]:
    """Yield a stream one character at a time until end of stream."""
    while True:
        char = stream.read(1)
        if not char:
            return
        yield char
