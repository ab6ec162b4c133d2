"""A small printf-style formatter with C-like 32-bit integer semantics."""

__version__ = "0.1.0"
__all__ = ["writers", "printf", "flags", "exam"]