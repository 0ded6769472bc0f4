"""
CSV persistence for the song catalog.

File format (UTF-8, LF line endings):

    titulo,artista,genero
    Shape of You,Ed Sheeran,Pop

The first line is a header. Each row is split on its first two commas only,
so commas belong to the genre if a hand-edited file has more than two. The
writer strips commas and line breaks from every field; quoting is not
supported.

These functions raise OSError/UnicodeDecodeError; the catalog decides how to
handle them.
"""

from pathlib import Path
from typing import Iterable, Iterator, Optional

from loguru import logger

from .models import Song
from .normalize import clean_csv_field

CSV_HEADER = "titulo,artista,genero"

SEED_SONGS: tuple[tuple[str, str, str], ...] = (
    ("Shape of You", "Ed Sheeran", "Pop"),
    ("Blinding Lights", "The Weeknd", "Synthwave"),
    ("Bohemian Rhapsody", "Queen", "Rock"),
    ("Someone Like You", "Adele", "Soul"),
    ("Smells Like Teen Spirit", "Nirvana", "Grunge"),
)


def parse_row(line: str) -> Optional[Song]:
    """Parse one data row into a Song.

    Returns:
        The song, or None when the row has fewer than three fields or an
        empty title
    """
    parts = line.rstrip("\r\n").split(",", 2)
    if len(parts) < 3:
        return None

    title, artist, genre = (part.strip() for part in parts)
    if not title:
        return None
    return Song(title=title, artist=artist, genre=genre)


def format_row(song: Song) -> str:
    """Render a song as one CSV line, without the line terminator."""
    return ",".join(clean_csv_field(value) for value in song.as_row())


def iter_songs(csv_path: Path) -> Iterator[Song]:
    """Yield the songs stored in `csv_path`, skipping the header.

    Blank lines are ignored; malformed rows are logged and skipped.
    """
    with open(csv_path, "r", encoding="utf-8", newline="") as f:
        f.readline()  # header
        for line_number, line in enumerate(f, start=2):
            if not line.strip():
                continue
            song = parse_row(line)
            if song is None:
                logger.warning(
                    f"Skipping malformed row {line_number} in {csv_path}: {line.rstrip()!r}"
                )
                continue
            yield song


def write_songs(csv_path: Path, songs: Iterable[Song]) -> int:
    """Truncate `csv_path` and write the header plus one row per song.

    Returns:
        Number of rows written
    """
    count = 0
    with open(csv_path, "w", encoding="utf-8", newline="\n") as f:
        f.write(CSV_HEADER + "\n")
        for song in songs:
            f.write(format_row(song) + "\n")
            count += 1
    return count


def create_seed_file(csv_path: Path) -> None:
    """Create `csv_path` (and its parent directories) with the seed songs."""
    csv_path.parent.mkdir(parents=True, exist_ok=True)
    write_songs(csv_path, (Song(*row) for row in SEED_SONGS))
