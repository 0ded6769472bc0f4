"""Application context for explicit state passing.

The catalog is built once per process and handed to every command handler
through this context instead of living in a module-level singleton.
"""

from dataclasses import dataclass
from typing import Optional

from rich.console import Console

from syncup.core.config import Config
from syncup.core.console import get_console
from syncup.domain.library import MusicLibrary


@dataclass
class AppContext:
    """State shared by the CLI and the interactive shell.

    Attributes:
        config: Application configuration
        library: The loaded song catalog
        console: Rich Console for formatted output
    """

    config: Config
    library: MusicLibrary
    console: Console

    @classmethod
    def create(
        cls,
        config: Config,
        library: Optional[MusicLibrary] = None,
        console: Optional[Console] = None,
    ) -> "AppContext":
        """Create the application context, loading the catalog if not given.

        Args:
            config: Application configuration
            library: Pre-built catalog (tests pass one in)
            console: Optional Rich Console instance
        """
        if library is None:
            library = MusicLibrary(config.library.csv_path)
        return cls(
            config=config,
            library=library,
            console=console or get_console(),
        )
