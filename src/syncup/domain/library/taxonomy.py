"""
Genre -> artist -> songs grouping used for "similar songs" recommendations.

    rock
    ├─ queen:       Bohemian Rhapsody, We Will Rock You
    └─ pink floyd:  Comfortably Numb, Time

Recommendations take songs by the same artist first, then songs by the other
artists of the same genre. Buckets are plain dicts, so both levels iterate in
insertion order.
"""

from typing import Optional

from .models import Song
from .normalize import fold_case, same_title


class _ArtistNode:
    __slots__ = ("name", "songs")

    def __init__(self, name: str) -> None:
        self.name = name
        self.songs: list[Song] = []


class _GenreNode:
    __slots__ = ("name", "artists")

    def __init__(self, name: str) -> None:
        self.name = name
        self.artists: dict[str, _ArtistNode] = {}


class TaxonomyTree:
    """Two-level index of songs by folded genre and folded artist."""

    def __init__(self) -> None:
        self._genres: dict[str, _GenreNode] = {}

    def insert(self, song: Optional[Song]) -> None:
        """File `song` under its genre and artist."""
        if song is None:
            return

        genre_key = fold_case(song.genre)
        artist_key = fold_case(song.artist)

        genre_node = self._genres.get(genre_key)
        if genre_node is None:
            genre_node = self._genres[genre_key] = _GenreNode(song.genre)

        artist_node = genre_node.artists.get(artist_key)
        if artist_node is None:
            artist_node = genre_node.artists[artist_key] = _ArtistNode(song.artist)

        artist_node.songs.append(song)

    def remove(self, song: Optional[Song]) -> bool:
        """Remove `song` from its bucket, dropping buckets that become empty.

        The exact object is preferred; otherwise the first equal song (same id)
        in the bucket is removed.

        Returns:
            True if a song was removed
        """
        if song is None:
            return False

        genre_key = fold_case(song.genre)
        artist_key = fold_case(song.artist)

        genre_node = self._genres.get(genre_key)
        if genre_node is None:
            return False
        artist_node = genre_node.artists.get(artist_key)
        if artist_node is None:
            return False

        index = next(
            (i for i, s in enumerate(artist_node.songs) if s is song),
            None,
        )
        if index is None:
            index = next(
                (i for i, s in enumerate(artist_node.songs) if s == song),
                None,
            )
        if index is None:
            return False

        del artist_node.songs[index]
        if not artist_node.songs:
            del genre_node.artists[artist_key]
        if not genre_node.artists:
            del self._genres[genre_key]
        return True

    def recommend(self, seed: Optional[Song], limit: int) -> list[Song]:
        """Up to `limit` songs similar to `seed`, never the seed itself.

        Stage 1 takes songs by the seed's artist within its genre; stage 2
        fills up with the genre's other artists in bucket order.
        """
        results: list[Song] = []
        if seed is None or limit <= 0:
            return results

        genre_node = self._genres.get(fold_case(seed.genre))
        if genre_node is None:
            return results

        artist_key = fold_case(seed.artist)

        own_bucket = genre_node.artists.get(artist_key)
        if own_bucket is not None:
            for song in own_bucket.songs:
                if same_title(song.title, seed.title):
                    continue
                results.append(song)
                if len(results) >= limit:
                    return results

        for key, bucket in genre_node.artists.items():
            if key == artist_key:
                continue
            for song in bucket.songs:
                if same_title(song.title, seed.title):
                    continue
                results.append(song)
                if len(results) >= limit:
                    return results

        return results

    def genres(self) -> list[str]:
        """Genre names as first seen, in insertion order."""
        return [node.name for node in self._genres.values()]

    def artists(self, genre: str) -> list[str]:
        """Artist names filed under `genre` (case-insensitive)."""
        genre_node = self._genres.get(fold_case(genre))
        if genre_node is None:
            return []
        return [node.name for node in genre_node.artists.values()]

    def count(self, genre: str) -> int:
        """Number of songs filed under `genre` (case-insensitive)."""
        genre_node = self._genres.get(fold_case(genre))
        if genre_node is None:
            return 0
        return sum(len(node.songs) for node in genre_node.artists.values())

    def clear(self) -> None:
        """Drop every bucket."""
        self._genres = {}
