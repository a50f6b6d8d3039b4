"""
PositronicDB Operations
=======================

Server-side counterpart of the ``window.PositronicDB`` browser namespace.
"""

from .positronic_db import PositronicDB, get_positronic_db

__all__ = ["PositronicDB", "get_positronic_db"]
