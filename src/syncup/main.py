"""
Interactive shell for SyncUp.
"""

from loguru import logger
from prompt_toolkit import PromptSession
from prompt_toolkit.styles import Style

from . import router
from .completers import SyncUpCompleter
from .context import AppContext
from .utils import parsers

PROMPT_STYLE = Style.from_dict({
    'prompt': '#00aa00 bold',
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'completion-menu.meta.completion': '#888888',
    'completion-menu.meta.completion.current': 'bg:#00aaaa #ffffff',
})


def interactive_mode(ctx: AppContext) -> int:
    """Run the interactive command loop until quit, exit or EOF.

    Returns:
        Exit code (always 0; command failures are reported, not fatal)
    """
    console = ctx.console
    session = PromptSession(
        completer=SyncUpCompleter(ctx),
        style=PROMPT_STYLE,
        complete_while_typing=True,
    )

    console.print("[bold green]Welcome to SyncUp![/bold green]")
    console.print(f"{len(ctx.library)} songs loaded from {ctx.library.csv_path}")
    console.print("Type 'help' for available commands, or 'quit' to exit.")
    console.print()
    logger.info(f"Shell started with {len(ctx.library)} songs")

    should_continue = True
    while should_continue:
        try:
            user_input = session.prompt("syncup> ").strip()
        except KeyboardInterrupt:
            console.print("\n[yellow]Use 'quit' or 'exit' to leave gracefully.[/yellow]")
            continue
        except EOFError:
            break

        command, args = parsers.parse_command(user_input)
        ctx, should_continue = router.handle_command(ctx, command, args)

    console.print("[green]Goodbye![/green]")
    logger.info("Shell closed")
    return 0
