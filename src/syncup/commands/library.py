"""
Library command handlers for SyncUp.

Handles: list, add, remove, find, complete, fuzzy, similar, stats, rebuild

Every handler takes the application context and the command's arguments and
returns True when the command succeeded. User mistakes are reported through
log() and never raised.
"""

import re
from typing import List, Optional

from syncup.context import AppContext
from syncup.core.console import print_songs
from syncup.core.output import log
from syncup.domain.library import Song
from syncup.utils.parsers import join_words, parse_int_arg

_INTEGER = re.compile(r"-?\d+")


def _split_trailing_number(args: List[str]) -> tuple[List[str], str | None]:
    """Separate an optional trailing integer from a free-text phrase.

    ["bohemian", "rapsody", "3"] -> (["bohemian", "rapsody"], "3")

    Negative numbers are split off too, so they get rejected as arguments
    instead of ending up in the phrase.
    """
    if len(args) > 1 and _INTEGER.fullmatch(args[-1]):
        return args[:-1], args[-1]
    return args, None


def handle_list_command(ctx: AppContext, args: List[str]) -> bool:
    """Show every song in catalog order."""
    songs = ctx.library.all()
    if not songs:
        log("The catalog is empty.", level="warning")
        return True

    print_songs(songs, title=f"Catalog ({len(songs)} songs)")
    return True


def handle_add_command(ctx: AppContext, args: List[str]) -> bool:
    """Add a song: add TITLE ARTIST GENRE [YEAR] [DURATION]."""
    if len(args) < 3:
        log('Usage: add "<title>" "<artist>" "<genre>" [year] [duration]', level="error")
        return False

    title, artist, genre = args[0], args[1], args[2]
    try:
        year = parse_int_arg(args[3] if len(args) > 3 else None, "year", 0)
        duration = parse_int_arg(args[4] if len(args) > 4 else None, "duration", 0)
        song = Song(
            title=title.strip(),
            artist=artist.strip(),
            genre=genre.strip(),
            year=year,
            duration_seconds=duration,
        )
    except ValueError as e:
        log(f"❌ {e}", level="error")
        return False

    existing = ctx.library.find_by_title(song.title)
    if existing is not None:
        log(f"❌ A song titled '{existing.title}' is already in the catalog", level="error")
        return False

    ctx.library.add(song)
    log(f"✅ Added: {song}", level="success")
    return True


def handle_remove_command(ctx: AppContext, args: List[str]) -> bool:
    """Remove a song by title."""
    title = join_words(args)
    if not title:
        log('Usage: remove "<title>"', level="error")
        return False

    removed = ctx.library.remove(title)
    if removed is None:
        log(f"❌ No song titled '{title}'", level="warning")
        return False

    log(f"🗑️  Removed: {removed}", level="success")
    return True


def handle_find_command(ctx: AppContext, args: List[str]) -> bool:
    """Look a song up by exact (case-insensitive) title."""
    title = join_words(args)
    if not title:
        log('Usage: find "<title>"', level="error")
        return False

    song = ctx.library.find_by_title(title)
    if song is None:
        log(f"❌ No song titled '{title}'", level="warning")
        return False

    print_songs([song])
    return True


def handle_complete_command(ctx: AppContext, args: List[str]) -> bool:
    """List titles whose title, artist or genre starts with a prefix."""
    prefix = " ".join(args)
    if not prefix:
        log("Usage: complete <prefix>", level="error")
        return False

    limit = ctx.config.search.autocomplete_limit
    titles = ctx.library.autocomplete(prefix)
    if not titles:
        log(f"No matches for '{prefix}'", level="info")
        return True

    for title in titles[:limit]:
        ctx.console.print(f"  {title}", markup=False)
    if len(titles) > limit:
        ctx.console.print(f"  … and {len(titles) - limit} more", style="dim")
    return True


def run_fuzzy(ctx: AppContext, query: str, max_distance_arg: Optional[str] = None) -> bool:
    """Show songs within an edit distance of a "title artist genre" query."""
    query = query.strip()
    if not query:
        log("Usage: fuzzy <title artist genre> [max_distance]", level="error")
        return False

    try:
        max_distance = parse_int_arg(
            max_distance_arg, "max_distance", ctx.config.search.fuzzy_max_distance
        )
    except ValueError as e:
        log(f"❌ {e}", level="error")
        return False

    songs = ctx.library.fuzzy_search(query, max_distance)
    if not songs:
        log(f"No songs within {max_distance} edits of '{query}'", level="info")
        return True

    print_songs(songs, title=f"Within {max_distance} edits of '{query}'")
    return True


def handle_fuzzy_command(ctx: AppContext, args: List[str]) -> bool:
    """Typo-tolerant search: fuzzy <title artist genre> [max_distance]."""
    words, distance_arg = _split_trailing_number(args)
    return run_fuzzy(ctx, join_words(words), distance_arg)


def run_similar(ctx: AppContext, title: str, limit_arg: Optional[str] = None) -> bool:
    """Show recommendations for the song titled `title`."""
    title = title.strip()
    if not title:
        log('Usage: similar "<title>" [limit]', level="error")
        return False

    try:
        limit = parse_int_arg(limit_arg, "limit", ctx.config.search.similar_limit)
    except ValueError as e:
        log(f"❌ {e}", level="error")
        return False

    seed = ctx.library.find_by_title(title)
    if seed is None:
        log(f"❌ No song titled '{title}'", level="warning")
        return False

    songs = ctx.library.recommend_similar(seed, limit)
    if not songs:
        log(f"No similar songs for '{seed.title}'", level="info")
        return True

    print_songs(songs, title=f"Similar to {seed}")
    return True


def handle_similar_command(ctx: AppContext, args: List[str]) -> bool:
    """Recommend songs similar to one in the catalog: similar <title> [limit].

    A trailing number is the limit unless the whole phrase is a known title
    ("similar Blink 182").
    """
    words, limit_arg = _split_trailing_number(args)
    if limit_arg is not None and ctx.library.find_by_title(join_words(args)) is not None:
        words, limit_arg = args, None
    return run_similar(ctx, join_words(words), limit_arg)


def handle_stats_command(ctx: AppContext, args: List[str]) -> bool:
    """Show catalog totals and songs per genre."""
    stats = ctx.library.stats()
    console = ctx.console

    console.print("\n📊 Catalog Statistics", style="bold")
    console.print(f"  Songs:   {stats['total_songs']}")
    console.print(f"  Artists: {stats['artists']}")
    console.print(f"  Genres:  {stats['genres']}")

    total_seconds = stats["total_duration_seconds"]
    if total_seconds:
        minutes, seconds = divmod(total_seconds, 60)
        console.print(f"  Length:  {minutes}m {seconds:02d}s")

    if stats["songs_per_genre"]:
        console.print("\n  By genre:", style="bold")
        ranked = sorted(stats["songs_per_genre"].items(), key=lambda kv: (-kv[1], kv[0]))
        for genre, count in ranked:
            console.print(f"    {genre}: {count}", markup=False)
    return True


def handle_rebuild_command(ctx: AppContext, args: List[str]) -> bool:
    """Rebuild all three indexes from the catalog."""
    ctx.library.rebuild_indexes()
    log(f"🔄 Rebuilt indexes for {len(ctx.library)} songs", level="success")
    return True
