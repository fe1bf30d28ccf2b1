"""filetasks - small single-pass file utilities."""

__version__ = "0.1.0"
