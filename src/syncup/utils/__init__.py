"""
Cross-cutting utilities for SyncUp.

Contains:
- parsers: Shell command and argument parsing
"""

from .parsers import join_words, parse_command, parse_int_arg

__all__ = [
    "join_words",
    "parse_command",
    "parse_int_arg",
]
