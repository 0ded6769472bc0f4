"""
Argument and command parsing utilities for the interactive shell.
"""

import shlex
from typing import List, Optional


def parse_command(user_input: str) -> tuple[str, List[str]]:
    """
    Split a shell line into a lowercase command and its arguments.

    Quoted arguments stay together, so titles with spaces can be passed:

        add "Love Story" "Taylor Swift" Pop
        -> ("add", ["Love Story", "Taylor Swift", "Pop"])

    An unbalanced quote falls back to plain whitespace splitting.
    """
    try:
        parts = shlex.split(user_input)
    except ValueError:
        parts = user_input.split()

    if not parts:
        return "", []
    return parts[0].lower(), parts[1:]


def parse_int_arg(value: Optional[str], name: str, default: int) -> int:
    """
    Parse an optional numeric argument.

    Raises:
        ValueError: If the value is present but not a non-negative integer
    """
    if value is None or value == "":
        return default
    try:
        number = int(value)
    except ValueError:
        raise ValueError(f"{name} must be a whole number, got {value!r}") from None
    if number < 0:
        raise ValueError(f"{name} must not be negative, got {number}")
    return number


def join_words(args: List[str]) -> str:
    """Join unquoted arguments back into one phrase (e.g. a title)."""
    return " ".join(args).strip()
