"""Accelerator descriptor and completion record layouts, kernel-version test bookkeeping, a doubly linked list, and byte-order and string helpers."""

__version__ = "0.1.0"
__all__ = ["attempts", "descriptor", "dlist", "endian", "strutil"]