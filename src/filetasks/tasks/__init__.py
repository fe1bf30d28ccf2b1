"""Single-pass file tasks."""

from filetasks.tasks.char_counter import count_character
from filetasks.tasks.duplicator import copy_file
from filetasks.tasks.keyword_filter import filter_keyword
from filetasks.tasks.numbers import (
    analyze_file,
    capture_lines,
    classify_token,
    classify_tokens,
    three_quarters_average,
)

__all__ = [
    "copy_file",
    "capture_lines",
    "classify_token",
    "classify_tokens",
    "analyze_file",
    "three_quarters_average",
    "filter_keyword",
    "count_character",
]
