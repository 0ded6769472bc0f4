"""Core infrastructure layer - no business logic dependencies.

This module provides foundation-level services:
- Configuration management (TOML)
- Logging and user-facing output (Loguru)
- Console management (Rich)
"""

# Configuration
from .config import (
    Config,
    LibraryConfig,
    LoggingConfig,
    SearchConfig,
    create_default_config,
    ensure_directories,
    get_config_dir,
    get_config_path,
    get_data_dir,
    get_log_file_path,
    load_config,
)

# Console
from .console import build_song_table, get_console, print_songs

# Output
from .output import log, setup_loguru

__all__ = [
    # Config
    "Config",
    "LibraryConfig",
    "LoggingConfig",
    "SearchConfig",
    "create_default_config",
    "ensure_directories",
    "get_config_dir",
    "get_config_path",
    "get_data_dir",
    "get_log_file_path",
    "load_config",
    # Console
    "build_song_table",
    "get_console",
    "print_songs",
    # Output
    "log",
    "setup_loguru",
]
