"""
prompt_toolkit completers for SyncUp
Provides autocomplete for shell commands and song titles
"""

from typing import Iterable

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from .context import AppContext


class SyncUpCompleter(Completer):
    """
    Command completer with descriptions.

    The first word completes against the command list. After a command that
    takes a title, the rest of the line is looked up in the catalog's prefix
    index, so typing an artist or genre also suggests their songs.
    """

    # Format: 'command': ('icon', 'description')
    COMMANDS = {
        'list': ('📋', 'Show every song'),
        'add': ('➕', 'Add a song'),
        'remove': ('➖', 'Remove a song by title'),
        'find': ('🔎', 'Look up a song by title'),
        'complete': ('⌨', 'Titles matching a prefix'),
        'fuzzy': ('🔍', 'Typo-tolerant search'),
        'similar': ('🎧', 'Recommend similar songs'),
        'stats': ('📊', 'Show catalog statistics'),
        'rebuild': ('🔄', 'Rebuild search indexes'),
        'help': ('❓', 'Show help'),
        'quit': ('👋', 'Exit SyncUp'),
        'exit': ('👋', 'Exit SyncUp'),
    }

    TITLE_COMMANDS = {'find', 'remove', 'similar'}

    def __init__(self, ctx: AppContext):
        self.ctx = ctx

    def get_completions(self, document: Document, complete_event) -> Iterable[Completion]:
        text = document.text_before_cursor.lstrip()

        if ' ' not in text:
            yield from self._complete_command(text)
            return

        command, _, rest = text.partition(' ')
        if command.lower() in self.TITLE_COMMANDS:
            yield from self._complete_title(rest.lstrip())

    def _complete_command(self, text: str) -> Iterable[Completion]:
        word = text.lower()
        matches = sorted(
            (command, icon, description)
            for command, (icon, description) in self.COMMANDS.items()
            if command.startswith(word)
        )
        for command, icon, description in matches:
            yield Completion(
                command,
                start_position=-len(text),
                display=command,
                display_meta=f"{icon}\t{description}",
            )

    def _complete_title(self, prefix: str) -> Iterable[Completion]:
        if not prefix:
            return

        library = self.ctx.library
        limit = self.ctx.config.search.autocomplete_limit
        for title in library.autocomplete(prefix)[:limit]:
            song = library.find_by_title(title)
            meta = f"{song.artist} · {song.genre}" if song else ""
            yield Completion(
                title,
                start_position=-len(prefix),
                display=title,
                display_meta=meta,
            )
