"""Helpers for ASCII characters, byte buffers, bounded strings, text parsing,
printf-style formatting, chunked line reading and singly linked lists."""

__version__ = "0.1.0"

__all__ = ["chars", "memory", "strings", "text", "formatting", "linereader", "linked_list"]