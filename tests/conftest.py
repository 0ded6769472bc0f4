"""Shared fixtures: an isolated catalog and a plain-text console."""

import pytest
from rich.console import Console

from syncup.context import AppContext
from syncup.core import console as console_module
from syncup.core.config import Config
from syncup.domain.library import MusicLibrary


@pytest.fixture
def plain_console(monkeypatch):
    """Wide, colorless console so output can be matched with capsys."""
    console = Console(width=200, color_system=None, highlight=False)
    monkeypatch.setattr(console_module, "_console", console)
    return console


@pytest.fixture
def ctx(tmp_path, plain_console):
    """Application context over a freshly seeded catalog."""
    config = Config()
    config.library.csv_path = str(tmp_path / "canciones.csv")
    library = MusicLibrary(config.library.csv_path)
    return AppContext.create(config, library=library, console=plain_console)
