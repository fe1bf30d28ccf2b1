"""Count occurrences of one character in a text stream."""

import logging
from pathlib import Path
from typing import TextIO

logger = logging.getLogger(__name__)

DEFAULT_INPUT = Path("javaDoc.txt")
CHUNK_SIZE = 8192


def count_character(character: str, stream: TextIO) -> int:
    """Count how often a character occurs in a stream.

    Only the first character of `character` is used. Read errors are
    logged and the count accumulated so far is returned.

    Args:
        character: Character to count
        stream: Open text stream, read to its end

    Returns:
        Number of occurrences, 0 for an empty stream
    """
    if not character:
        raise ValueError("character must not be empty")

    target = character[0]
    count = 0
    try:
        while chunk := stream.read(CHUNK_SIZE):
            count += chunk.count(target)
    except OSError:
        logger.exception(f"Read failed, returning partial count {count}")
    return count
