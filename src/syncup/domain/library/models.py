"""
Music library domain models.

Contains data structures for representing songs in the catalog.
"""

from dataclasses import dataclass
from typing import Optional

from .normalize import fold_case


def derive_song_id(title: str) -> str:
    """Build a song id from its title: lowercase, spaces become underscores."""
    return fold_case(title).replace(" ", "_")


@dataclass(eq=False)
class Song:
    """A song in the catalog.

    The title is the functional key of the catalog: lookup and deletion match
    it case-insensitively. Two songs are equal when their ids are equal; the id
    is derived from the title when not given.

    Songs are mutable, but the catalog indexes them on insertion. Changing the
    title, artist or genre of a song that is already in a catalog requires
    removing it and adding it again.
    """

    title: str
    artist: str = ""
    genre: str = ""
    year: int = 0
    duration_seconds: int = 0
    id: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.title or not self.title.strip():
            raise ValueError("Song title must not be empty")
        if self.year < 0:
            raise ValueError(f"Song year must not be negative, got {self.year}")
        if self.duration_seconds < 0:
            raise ValueError(
                f"Song duration must not be negative, got {self.duration_seconds}"
            )
        if self.artist is None:
            self.artist = ""
        if self.genre is None:
            self.genre = ""
        if not self.id:
            self.id = derive_song_id(self.title)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Song):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return f"{self.title} - {self.artist}"

    def as_row(self) -> tuple[str, str, str]:
        """The (title, artist, genre) triple persisted to CSV."""
        return (self.title, self.artist, self.genre)
