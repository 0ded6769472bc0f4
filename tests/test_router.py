"""Tests for command routing and the library command handlers."""

from syncup import router
from syncup.domain.library import MusicLibrary


class TestHandleCommand:
    """Test shell-level routing."""

    def test_quit_and_exit_stop_the_loop(self, ctx):
        assert router.handle_command(ctx, "quit", []) == (ctx, False)
        assert router.handle_command(ctx, "exit", []) == (ctx, False)

    def test_empty_command_continues(self, ctx):
        assert router.handle_command(ctx, "", []) == (ctx, True)

    def test_help(self, ctx, capsys):
        _, should_continue = router.handle_command(ctx, "help", [])
        assert should_continue is True
        assert "fuzzy" in capsys.readouterr().out

    def test_unknown_command_continues(self, ctx, capsys):
        _, should_continue = router.handle_command(ctx, "dance", [])
        assert should_continue is True
        assert "Unknown command" in capsys.readouterr().out


class TestDispatch:
    """Test each catalog command through dispatch()."""

    def test_list(self, ctx, capsys):
        assert router.dispatch(ctx, "list", []) is True
        out = capsys.readouterr().out
        assert "Shape of You" in out
        assert "Smells Like Teen Spirit" in out

    def test_add_persists(self, ctx):
        assert router.dispatch(ctx, "add", ["Lover", "Taylor Swift", "Pop", "2019", "221"]) is True

        reloaded = MusicLibrary(ctx.library.csv_path)
        assert reloaded.find_by_title("lover").artist == "Taylor Swift"
        assert ctx.library.find_by_title("Lover").year == 2019

    def test_add_rejects_bad_input(self, ctx):
        assert router.dispatch(ctx, "add", ["Only Title"]) is False
        assert router.dispatch(ctx, "add", ["T", "A", "G", "not-a-year"]) is False
        assert router.dispatch(ctx, "add", [" ", "A", "G"]) is False
        assert len(ctx.library) == 5

    def test_add_rejects_duplicate_title(self, ctx):
        assert router.dispatch(ctx, "add", ["shape of you", "Someone", "Pop"]) is False
        assert len(ctx.library) == 5

    def test_remove(self, ctx):
        assert router.dispatch(ctx, "remove", ["Bohemian", "Rhapsody"]) is True
        assert ctx.library.find_by_title("Bohemian Rhapsody") is None
        assert router.dispatch(ctx, "remove", ["Bohemian Rhapsody"]) is False
        assert router.dispatch(ctx, "remove", []) is False

    def test_find(self, ctx, capsys):
        assert router.dispatch(ctx, "find", ["blinding lights"]) is True
        assert "The Weeknd" in capsys.readouterr().out
        assert router.dispatch(ctx, "find", ["Nope"]) is False

    def test_complete(self, ctx, capsys):
        assert router.dispatch(ctx, "complete", ["s"]) is True
        out = capsys.readouterr().out
        assert "Shape of You" in out
        assert "Someone Like You" in out
        assert router.dispatch(ctx, "complete", []) is False

    def test_complete_truncates_to_limit(self, ctx, capsys):
        ctx.config.search.autocomplete_limit = 1
        router.dispatch(ctx, "complete", ["s"])
        assert "more" in capsys.readouterr().out

    def test_fuzzy_with_distance(self, ctx, capsys):
        assert router.dispatch(ctx, "fuzzy", ["bohemian", "rapsody", "queen", "rock", "1"]) is True
        assert "Bohemian Rhapsody" in capsys.readouterr().out

    def test_fuzzy_default_distance(self, ctx, capsys):
        assert router.dispatch(ctx, "fuzzy", ["shape of yuo ed sheeran pop"]) is True
        assert "Shape of You" in capsys.readouterr().out

    def test_fuzzy_without_query(self, ctx):
        assert router.dispatch(ctx, "fuzzy", []) is False

    def test_similar(self, ctx, capsys):
        router.dispatch(ctx, "add", ["We Will Rock You", "Queen", "Rock"])
        capsys.readouterr()

        assert router.dispatch(ctx, "similar", ["Bohemian", "Rhapsody", "3"]) is True
        assert "We Will Rock You" in capsys.readouterr().out

    def test_similar_unknown_seed(self, ctx):
        assert router.dispatch(ctx, "similar", ["Nope"]) is False

    def test_stats(self, ctx, capsys):
        assert router.dispatch(ctx, "stats", []) is True
        out = capsys.readouterr().out
        assert "Songs:   5" in out
        assert "Grunge: 1" in out

    def test_rebuild(self, ctx):
        assert router.dispatch(ctx, "rebuild", []) is True
        assert ctx.library.autocomplete("nirvana") == ["Smells Like Teen Spirit"]


class TestTrailingNumbers:
    """A trailing number in the shell is a limit or distance, not part of the text."""

    def test_negative_limit_rejected(self, ctx, capsys):
        assert router.dispatch(ctx, "similar", ["Shape", "of", "You", "-1"]) is False
        assert "limit must not be negative" in capsys.readouterr().out

    def test_negative_distance_rejected(self, ctx):
        assert router.dispatch(ctx, "fuzzy", ["lover", "-3"]) is False

    def test_known_title_ending_in_number(self, ctx, capsys):
        router.dispatch(ctx, "add", ["Blink 182", "Band", "Grunge"])
        capsys.readouterr()

        assert router.dispatch(ctx, "similar", ["Blink", "182"]) is True
        assert "Smells Like Teen Spirit" in capsys.readouterr().out

    def test_quoted_title_with_limit(self, ctx, capsys):
        router.dispatch(ctx, "add", ["Blink 182", "Band", "Grunge"])
        capsys.readouterr()

        assert router.dispatch(ctx, "similar", ["Blink 182", "1"]) is True
        assert "Smells Like Teen Spirit" in capsys.readouterr().out

    def test_help_mentions_quoting(self, ctx, capsys):
        router.print_help()
        assert 'similar "Blink 182"' in capsys.readouterr().out
