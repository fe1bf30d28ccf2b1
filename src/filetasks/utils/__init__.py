"""Utility functions for filetasks."""

from filetasks.utils.text import iter_chars, split_tokens

__all__ = ["iter_chars", "split_tokens"]
