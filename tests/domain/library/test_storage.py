"""
Tests for CSV persistence.
"""

from syncup.domain.library.models import Song
from syncup.domain.library.storage import (
    CSV_HEADER,
    SEED_SONGS,
    create_seed_file,
    format_row,
    iter_songs,
    parse_row,
    write_songs,
)


class TestParseRow:
    """Test row parsing."""

    def test_three_fields(self):
        song = parse_row("Lover,Taylor Swift,Pop\n")
        assert song.as_row() == ("Lover", "Taylor Swift", "Pop")

    def test_fields_are_trimmed(self):
        song = parse_row("  Lover ,  Taylor Swift,Pop  \r\n")
        assert song.as_row() == ("Lover", "Taylor Swift", "Pop")

    def test_extra_commas_belong_to_genre(self):
        song = parse_row("Title,Artist,Rock,Pop")
        assert song.genre == "Rock,Pop"

    def test_too_few_fields(self):
        assert parse_row("Only Title,Artist") is None
        assert parse_row("no commas") is None

    def test_empty_title(self):
        assert parse_row(" ,Artist,Pop") is None

    def test_empty_artist_and_genre_allowed(self):
        assert parse_row("Title,,").as_row() == ("Title", "", "")


class TestFormatRow:
    def test_commas_and_newlines_stripped(self):
        song = Song("Hello, World", "A\nB", "Pop\r\nRock")
        assert format_row(song) == "Hello World,A B,Pop Rock"


class TestFiles:
    """Test reading and writing whole files."""

    def test_seed_file(self, tmp_path):
        path = tmp_path / "nested" / "data" / "canciones.csv"
        create_seed_file(path)

        lines = path.read_text(encoding="utf-8").splitlines()
        assert lines[0] == CSV_HEADER
        assert [tuple(line.split(",")) for line in lines[1:]] == list(SEED_SONGS)

    def test_write_uses_lf_and_header(self, tmp_path):
        path = tmp_path / "songs.csv"
        count = write_songs(path, [Song("A", "B", "C"), Song("D", "E", "F")])

        assert count == 2
        assert path.read_bytes() == b"titulo,artista,genero\nA,B,C\nD,E,F\n"

    def test_iter_skips_blank_and_malformed_rows(self, tmp_path):
        path = tmp_path / "songs.csv"
        path.write_text(
            "titulo,artista,genero\n"
            "A,B,C\n"
            "\n"
            "broken row\n"
            ",NoTitle,Pop\n"
            "D,E,F\n",
            encoding="utf-8",
        )
        assert [s.as_row() for s in iter_songs(path)] == [("A", "B", "C"), ("D", "E", "F")]

    def test_iter_header_only(self, tmp_path):
        path = tmp_path / "songs.csv"
        path.write_text(CSV_HEADER + "\n", encoding="utf-8")
        assert list(iter_songs(path)) == []

    def test_utf8_round_trip(self, tmp_path):
        path = tmp_path / "songs.csv"
        write_songs(path, [Song("Canción", "Niño", "Música")])
        assert [s.as_row() for s in iter_songs(path)] == [("Canción", "Niño", "Música")]
