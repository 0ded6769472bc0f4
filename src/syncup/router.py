"""
Command routing for SyncUp.

Routes user commands to the appropriate handler functions.
"""

from typing import Callable, Dict, List, Tuple

from syncup.commands import library
from syncup.context import AppContext
from syncup.core.console import get_console
from syncup.core.output import log

CommandHandler = Callable[[AppContext, List[str]], bool]

COMMAND_HANDLERS: Dict[str, CommandHandler] = {
    "list": library.handle_list_command,
    "add": library.handle_add_command,
    "remove": library.handle_remove_command,
    "find": library.handle_find_command,
    "complete": library.handle_complete_command,
    "fuzzy": library.handle_fuzzy_command,
    "similar": library.handle_similar_command,
    "stats": library.handle_stats_command,
    "rebuild": library.handle_rebuild_command,
}

QUIT_COMMANDS = {"quit", "exit"}


def print_help() -> None:
    """Display help information for available commands."""
    help_text = """
SyncUp - Indexed Music Library

Available commands:
  list                                   Show every song in the catalog
  add "<title>" "<artist>" "<genre>" [year] [duration]
                                         Add a song
  remove <title>                         Remove a song by title
  find <title>                           Look up a song by title
  complete <prefix>                      Titles whose title, artist or genre starts with prefix
  fuzzy <title artist genre> [distance]  Typo-tolerant search (default distance from config)
  similar <title> [limit]                Songs by the same artist, then the same genre
  stats                                  Catalog statistics
  rebuild                                Rebuild the search indexes
  help                                   Show this help
  quit / exit                            Leave the shell

Tip: press Tab after find, remove or similar to autocomplete song titles.
Quote titles that end in a number, e.g. similar "Blink 182" 3.
"""
    get_console().print(help_text.strip(), markup=False)


def dispatch(ctx: AppContext, command: str, args: List[str]) -> bool:
    """
    Run one catalog command.

    Returns:
        True if the command succeeded
    """
    handler = COMMAND_HANDLERS.get(command)
    if handler is None:
        log(f"Unknown command: {command}. Type 'help' for available commands.", level="warning")
        return False
    return handler(ctx, args)


def handle_command(
    ctx: AppContext, command: str, args: List[str]
) -> Tuple[AppContext, bool]:
    """
    Handle a shell command.

    Args:
        ctx: Application context
        command: Command name
        args: Command arguments

    Returns:
        (updated_context, should_continue)
    """
    if not command:
        return ctx, True

    if command in QUIT_COMMANDS:
        return ctx, False

    if command == "help":
        print_help()
        return ctx, True

    dispatch(ctx, command, args)
    return ctx, True
