"""Paging arithmetic, ELF parsing, a heap allocator and small Unix-style tools."""

__version__ = "0.1.0"