"""Copy a file byte for byte."""

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)

# By default the duplicator copies its own source file
DEFAULT_SOURCE = Path(__file__)
DEFAULT_DESTINATION = Path("copied_file.py")


def copy_file(
    source: Path | str = DEFAULT_SOURCE,
    destination: Path | str = DEFAULT_DESTINATION,
) -> Path:
    """Copy source to destination, replacing any existing destination.

    Args:
        source: File to copy
        destination: Target path, created or overwritten

    Returns:
        The destination path

    Raises:
        FileNotFoundError: If source does not exist
        OSError: If destination cannot be written
    """
    source_path = Path(source)
    destination_path = Path(destination)

    shutil.copyfile(source_path, destination_path)
    logger.info(f"Copied {source_path} -> {destination_path}")
    return destination_path
