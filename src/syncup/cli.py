"""
SyncUp CLI - Entry point

Runs a single catalog command and exits, or drops into the interactive shell
when no command is given.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger

from syncup import __version__, router
from syncup.commands import library
from syncup.context import AppContext
from syncup.core.config import ensure_directories, get_log_file_path, load_config
from syncup.core.output import setup_loguru


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per catalog operation."""
    parser = argparse.ArgumentParser(
        prog='syncup',
        description='SyncUp - Indexed music library with autocomplete, fuzzy search and recommendations',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--config', type=Path, help='Path to config.toml')
    parser.add_argument('--csv', help='Catalog CSV file (overrides config)')
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Debug logging, also echoed to stderr',
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands (default: interactive shell)')

    subparsers.add_parser('list', help='Show every song')

    add_parser = subparsers.add_parser('add', help='Add a song')
    add_parser.add_argument('title')
    add_parser.add_argument('artist')
    add_parser.add_argument('genre')
    add_parser.add_argument('year', nargs='?')
    add_parser.add_argument('duration', nargs='?', help='Length in seconds')

    remove_parser = subparsers.add_parser('remove', help='Remove a song by title')
    remove_parser.add_argument('title')

    find_parser = subparsers.add_parser('find', help='Look up a song by title')
    find_parser.add_argument('title')

    complete_parser = subparsers.add_parser(
        'complete', help='Titles whose title, artist or genre starts with a prefix'
    )
    complete_parser.add_argument('prefix')

    fuzzy_parser = subparsers.add_parser('fuzzy', help='Typo-tolerant search')
    fuzzy_parser.add_argument('query', help='"title artist genre" text')
    fuzzy_parser.add_argument('max_distance', nargs='?')

    similar_parser = subparsers.add_parser('similar', help='Recommend similar songs')
    similar_parser.add_argument('title')
    similar_parser.add_argument('limit', nargs='?')

    subparsers.add_parser('stats', help='Show catalog statistics')
    subparsers.add_parser('rebuild', help='Rebuild search indexes')
    subparsers.add_parser('shell', help='Interactive shell with autocomplete')

    return parser


def _command_args(args: argparse.Namespace) -> List[str]:
    """Flatten parsed positionals back into the handler argument list."""
    names = {
        'add': ('title', 'artist', 'genre', 'year', 'duration'),
        'remove': ('title',),
        'find': ('title',),
        'complete': ('prefix',),
    }.get(args.command, ())
    return [getattr(args, name) for name in names if getattr(args, name) is not None]


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    ensure_directories()
    config = load_config(args.config)
    if args.csv:
        config.library.csv_path = str(Path(args.csv).expanduser())
    if args.verbose:
        config.logging.level = 'DEBUG'
        config.logging.console_output = True

    setup_loguru(
        get_log_file_path(config),
        level=config.logging.level,
        max_file_size_mb=config.logging.max_file_size_mb,
        backup_count=config.logging.backup_count,
        console_output=config.logging.console_output,
    )

    ctx = AppContext.create(config)
    logger.debug(f"Loaded {len(ctx.library)} songs from {ctx.library.csv_path}")

    if args.command is None or args.command == 'shell':
        from .main import interactive_mode
        sys.exit(interactive_mode(ctx))

    if args.command == 'fuzzy':
        ok = library.run_fuzzy(ctx, args.query, args.max_distance)
    elif args.command == 'similar':
        ok = library.run_similar(ctx, args.title, args.limit)
    else:
        ok = router.dispatch(ctx, args.command, _command_args(args))
    sys.exit(0 if ok else 1)


if __name__ == '__main__':
    main()
