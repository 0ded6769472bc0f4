"""Rich console shared by the CLI and the interactive shell.

Also renders song listings as tables, which is how `list`, `fuzzy` and
`similar` present their results.
"""

from typing import Iterable, Protocol

from rich.console import Console
from rich.table import Table

_console: Console | None = None


class SongLike(Protocol):
    title: str
    artist: str
    genre: str
    year: int


def get_console() -> Console:
    """Get or create the global Rich Console instance."""
    global _console
    if _console is None:
        _console = Console()
    return _console


def build_song_table(songs: Iterable[SongLike], title: str | None = None) -> Table:
    """Build a numbered table of songs.

    Args:
        songs: Songs to render, in display order
        title: Optional table caption

    Returns:
        Table with #, Title, Artist, Genre and Year columns
    """
    table = Table(title=title, show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Title", style="bold")
    table.add_column("Artist")
    table.add_column("Genre", style="cyan")
    table.add_column("Year", justify="right")

    for position, song in enumerate(songs, start=1):
        year = str(song.year) if song.year else ""
        table.add_row(str(position), song.title, song.artist, song.genre, year)

    return table


def print_songs(songs: Iterable[SongLike], title: str | None = None) -> None:
    """Print songs as a table on the shared console."""
    get_console().print(build_song_table(songs, title=title))
