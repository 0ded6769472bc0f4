"""
String helpers shared by the library indexes.

All index lookups compare ASCII-lowercased text. Non-ASCII letters are left as
they are: "Ñandú" folds to "Ñandú", "ROCK" folds to "rock".
"""

import string
from typing import Optional

_ASCII_FOLD = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def fold_case(text: Optional[str]) -> str:
    """ASCII-lowercase a string; None becomes ""."""
    if not text:
        return ""
    return text.translate(_ASCII_FOLD)


def same_title(a: Optional[str], b: Optional[str]) -> bool:
    """Case-insensitive title comparison used by lookup and deletion."""
    if a is None or b is None:
        return False
    return fold_case(a) == fold_case(b)


def fuzzy_key(title: Optional[str], artist: Optional[str], genre: Optional[str]) -> str:
    """Compose the BK-tree key for a song.

    Examples:
        >>> fuzzy_key("Lover", "Taylor Swift", "Pop")
        'lover taylor swift pop'
    """
    return fold_case(f"{title or ''} {artist or ''} {genre or ''}")


def clean_csv_field(value: Optional[str]) -> str:
    """Make a value safe for the comma-separated catalog file.

    Commas are dropped and line breaks become spaces, since the file format
    supports neither inside a field.
    """
    if not value:
        return ""
    value = value.replace(",", "")
    value = value.replace("\r\n", " ").replace("\n", " ").replace("\r", " ")
    return value
