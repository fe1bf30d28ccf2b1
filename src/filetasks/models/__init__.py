"""Data models for filetasks."""

from filetasks.models.results import FilterResult, NumberBuckets, NumberReport

__all__ = ["NumberBuckets", "NumberReport", "FilterResult"]
