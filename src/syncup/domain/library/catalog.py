"""
The song catalog and its indexes.

MusicLibrary owns the ordered list of songs and keeps three indexes in step
with it:

- Trie: title, artist and genre -> title, for autocomplete
- BKTree: "title artist genre" -> title, for typo-tolerant search
- TaxonomyTree: genre -> artist -> songs, for "similar songs"

Every mutation updates the list, then the indexes, then rewrites the CSV file.
I/O failures are logged and never raised; the in-memory catalog is not rolled
back when a save fails.
"""

from pathlib import Path
from typing import Any, Optional, Union

from loguru import logger

from . import storage
from .bktree import BKTree
from .models import Song
from .normalize import fold_case, fuzzy_key, same_title
from .taxonomy import TaxonomyTree
from .trie import Trie


class MusicLibrary:
    """CSV-backed song catalog with prefix, fuzzy and taxonomy indexes."""

    def __init__(self, csv_path: Union[str, Path]) -> None:
        self.csv_path = Path(csv_path)
        self._songs: list[Song] = []
        self._trie = Trie()
        self._bktree = BKTree()
        self._taxonomy = TaxonomyTree()
        self._load()

    def __len__(self) -> int:
        return len(self._songs)

    # ------------------------------------------------------------------
    # Loading and saving
    # ------------------------------------------------------------------

    def _load(self) -> None:
        if not self.csv_path.exists():
            try:
                storage.create_seed_file(self.csv_path)
                logger.info(f"Created {self.csv_path} with seed songs")
            except OSError as e:
                logger.error(f"Could not create seed catalog at {self.csv_path}: {e}")
                return

        try:
            for song in storage.iter_songs(self.csv_path):
                self._songs.append(song)
                self._index(song)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Could not load catalog from {self.csv_path}: {e}")

        logger.info(f"Catalog loaded from {self.csv_path}: {len(self._songs)} songs")

    def save(self) -> bool:
        """Rewrite the CSV file from the in-memory catalog.

        Returns:
            True if the file was written
        """
        try:
            count = storage.write_songs(self.csv_path, self._songs)
        except OSError as e:
            logger.error(f"Error saving catalog to {self.csv_path}: {e}")
            return False
        logger.debug(f"Saved {count} songs to {self.csv_path}")
        return True

    # ------------------------------------------------------------------
    # Index maintenance
    # ------------------------------------------------------------------

    def _index_references(self, song: Song) -> None:
        """Trie and BK-tree entries, which are keyed by the title string."""
        for word in (song.title, song.artist, song.genre):
            if word:
                self._trie.insert(word, song.title)
        self._bktree.insert(fuzzy_key(song.title, song.artist, song.genre), song.title)

    def _index(self, song: Song) -> None:
        self._index_references(song)
        self._taxonomy.insert(song)

    def _unindex(self, song: Song) -> None:
        for word in (song.title, song.artist, song.genre):
            if word:
                self._trie.remove(word, song.title)
        self._bktree.remove(fuzzy_key(song.title, song.artist, song.genre), song.title)
        self._taxonomy.remove(song)

        # A remaining song with the same title shares the references just dropped
        for other in self._songs:
            if other.title == song.title:
                self._index_references(other)

    def rebuild_prefix_index(self) -> None:
        """Clear the trie and re-index every song's title, artist and genre."""
        self._trie.clear()
        for song in self._songs:
            for word in (song.title, song.artist, song.genre):
                if word:
                    self._trie.insert(word, song.title)

    def rebuild_indexes(self) -> None:
        """Clear and repopulate all three indexes from the catalog.

        Use after songs were edited in place.
        """
        self._trie.clear()
        self._bktree.clear()
        self._taxonomy.clear()
        for song in self._songs:
            self._index(song)
        logger.debug(f"Rebuilt indexes for {len(self._songs)} songs")

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add(self, song: Optional[Song]) -> None:
        """Append a song, index it and save the catalog. None is ignored."""
        if song is None:
            return

        self._songs.append(song)
        self._index(song)
        self.save()
        logger.info(f"Added song: {song}")

    def remove(self, title_or_song: Union[str, Song, None]) -> Optional[Song]:
        """Remove the first song whose title matches, case-insensitively.

        Args:
            title_or_song: A title, or a Song whose title is used

        Returns:
            The removed song, or None if nothing matched
        """
        if isinstance(title_or_song, Song):
            title = title_or_song.title
        else:
            title = title_or_song
        if not title:
            return None

        for position, song in enumerate(self._songs):
            if same_title(song.title, title):
                break
        else:
            logger.debug(f"Remove ignored, no song titled {title!r}")
            return None

        del self._songs[position]
        self._unindex(song)
        self.save()
        logger.info(f"Removed song: {song}")
        return song

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_by_title(self, title: Optional[str]) -> Optional[Song]:
        """First song whose title matches case-insensitively, or None."""
        if not title:
            return None
        for song in self._songs:
            if same_title(song.title, title):
                return song
        return None

    def all(self) -> list[Song]:
        """All songs in catalog order (a copy of the list)."""
        return list(self._songs)

    def autocomplete(self, prefix: Optional[str]) -> list[str]:
        """Titles of songs whose title, artist or genre starts with `prefix`."""
        return self._trie.search_by_prefix(prefix)

    def fuzzy_search(self, query: Optional[str], max_distance: int = 2) -> list[Song]:
        """Songs whose "title artist genre" key is within `max_distance` edits.

        The query is compared against the whole composed key, so it should
        look like one ("bohemian rapsody queen rock").
        """
        results: list[Song] = []
        seen: set[str] = set()
        for title in self._bktree.search_similar(query, max_distance):
            if title in seen:
                continue
            seen.add(title)
            song = next((s for s in self._songs if s.title == title), None)
            if song is not None:
                results.append(song)
        return results

    def recommend_similar(
        self,
        seed: Optional[Song],
        limit: int = 5,
        max_distance: Optional[int] = None,
    ) -> list[Song]:
        """Up to `limit` songs similar to `seed`: same artist first, then same genre.

        `max_distance` is accepted for callers written against the fuzzy
        index but is not used; similarity comes from the genre/artist tree.
        """
        if seed is None:
            return []

        results = []
        for song in self._taxonomy.recommend(seed, limit):
            if same_title(song.title, seed.title):
                continue
            results.append(song)
            if len(results) >= limit:
                break
        return results

    def stats(self) -> dict[str, Any]:
        """Summary counts for the catalog."""
        # Genre and artist buckets are case-insensitive and keep their first spelling
        songs_per_genre: dict[str, int] = {}
        artists: set[str] = set()
        for genre in self._taxonomy.genres():
            songs_per_genre[genre or "(none)"] = self._taxonomy.count(genre)
            artists.update(fold_case(name) for name in self._taxonomy.artists(genre) if name)

        return {
            "total_songs": len(self._songs),
            "artists": len(artists),
            "genres": len(songs_per_genre),
            "songs_per_genre": songs_per_genre,
            "total_duration_seconds": sum(s.duration_seconds for s in self._songs),
        }
