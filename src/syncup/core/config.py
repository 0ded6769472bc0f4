"""
Configuration management for SyncUp
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from loguru import logger


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / "syncup"
    return Path.home() / ".config" / "syncup"


def get_data_dir() -> Path:
    """Get the data directory path."""
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home) / "syncup"
    return Path.home() / ".local" / "share" / "syncup"


@dataclass
class LibraryConfig:
    """Configuration for the song catalog."""

    csv_path: str = field(
        default_factory=lambda: str(get_data_dir() / "data" / "canciones.csv")
    )


LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


def _is_int(value: object) -> bool:
    # TOML booleans are ints to Python
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class SearchConfig:
    """Configuration for autocomplete, fuzzy search and recommendations."""

    autocomplete_limit: int = 10  # Max suggestions shown by `complete` and the shell
    fuzzy_max_distance: int = 2  # Default edit distance for `fuzzy`
    similar_limit: int = 5  # Default number of recommendations for `similar`

    def validate(self) -> None:
        """Validate search configuration values.

        Raises:
            ValueError: If configuration values are invalid
        """
        for name in ("autocomplete_limit", "fuzzy_max_distance", "similar_limit"):
            value = getattr(self, name)
            if not _is_int(value):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        if self.autocomplete_limit < 1:
            raise ValueError(
                f"autocomplete_limit must be at least 1, got {self.autocomplete_limit}"
            )
        if self.fuzzy_max_distance < 0:
            raise ValueError(
                f"fuzzy_max_distance must not be negative, got {self.fuzzy_max_distance}"
            )
        if self.similar_limit < 0:
            raise ValueError(
                f"similar_limit must not be negative, got {self.similar_limit}"
            )


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_file: Optional[str] = (
        None  # Custom log file path (default: ~/.local/share/syncup/syncup.log)
    )
    max_file_size_mb: int = 10  # Maximum log file size before rotation
    backup_count: int = 5  # Number of backup files to keep
    console_output: bool = False  # Also output to console (for debugging)

    def validate(self) -> None:
        """Validate logging configuration values.

        Raises:
            ValueError: If configuration values are invalid
        """
        if self.level not in LOG_LEVELS:
            raise ValueError(
                f"level must be one of {', '.join(LOG_LEVELS)}, got {self.level!r}"
            )
        if self.log_file is not None and not isinstance(self.log_file, str):
            raise ValueError(f"log_file must be a path string, got {self.log_file!r}")
        if not _is_int(self.max_file_size_mb) or self.max_file_size_mb < 1:
            raise ValueError(
                f"max_file_size_mb must be a positive integer, got {self.max_file_size_mb!r}"
            )
        if not _is_int(self.backup_count) or self.backup_count < 0:
            raise ValueError(
                f"backup_count must be a non-negative integer, got {self.backup_count!r}"
            )
        if not isinstance(self.console_output, bool):
            raise ValueError(
                f"console_output must be true or false, got {self.console_output!r}"
            )


@dataclass
class Config:
    """Main configuration object."""

    library: LibraryConfig = field(default_factory=LibraryConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _find_project_config() -> Optional[Path]:
    """Find config.toml in the project root by looking for pyproject.toml.

    Returns:
        Path to config.toml in project root, or None if not found
    """
    current = Path(__file__).resolve().parent
    for parent in [current] + list(current.parents):
        if (parent / "pyproject.toml").exists():
            config_path = parent / "config.toml"
            return config_path if config_path.exists() else None
    return None


def get_config_path() -> Path:
    """Get the main configuration file path.

    Checks for config.toml in the following order:
    1. Project root (detected via pyproject.toml) - for development
    2. Current working directory
    3. XDG_CONFIG_HOME/syncup (or ~/.config/syncup)
    """
    project_config = _find_project_config()
    if project_config:
        return project_config

    local_config = Path.cwd() / "config.toml"
    if local_config.exists():
        return local_config

    return get_config_dir() / "config.toml"


def get_log_file_path(config: Config) -> Path:
    """Resolve the log file path from configuration."""
    if config.logging.log_file:
        return Path(config.logging.log_file)
    return get_data_dir() / "syncup.log"


def create_default_config() -> str:
    """Create a default configuration TOML content."""
    return """
# SyncUp Configuration

[library]
# CSV file holding the catalog (created with a few seed songs if missing)
# csv_path = "~/.local/share/syncup/data/canciones.csv"

[search]
# Maximum number of autocomplete suggestions
autocomplete_limit = 10

# Default maximum edit distance for fuzzy search
fuzzy_max_distance = 2

# Default number of similar songs to recommend
similar_limit = 5

[logging]
# Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
level = "INFO"

# Custom log file path (default: ~/.local/share/syncup/syncup.log)
# log_file = "/path/to/custom/syncup.log"

# Maximum log file size in MB before rotation
max_file_size_mb = 10

# Number of backup log files to keep
backup_count = 5

# Also output logs to console (useful for debugging)
console_output = false
""".strip()


def _apply_env_overrides(config: Config) -> Config:
    """Environment variables beat TOML values."""
    csv_path = os.environ.get("SYNCUP_CSV_PATH")
    if csv_path:
        config.library.csv_path = str(Path(csv_path).expanduser())

    log_level = os.environ.get("SYNCUP_LOG_LEVEL")
    if log_level:
        if log_level.upper() in LOG_LEVELS:
            config.logging.level = log_level.upper()
        else:
            logger.warning(
                f"Ignoring SYNCUP_LOG_LEVEL={log_level!r}; expected one of {', '.join(LOG_LEVELS)}"
            )

    return config


def _section(toml_data: dict, name: str) -> dict:
    """A TOML table by name; anything that is not a table counts as absent."""
    data = toml_data.get(name, {})
    if not isinstance(data, dict):
        logger.warning(f"Ignoring [{name}] configuration: expected a table, got {data!r}")
        return {}
    return data


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file or create default.

    Environment variables override TOML values:
    - SYNCUP_CSV_PATH
    - SYNCUP_LOG_LEVEL

    Args:
        config_path: Explicit config file; defaults to get_config_path()
    """
    from dotenv import load_dotenv

    env_path = get_config_dir() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    config_path = config_path or get_config_path()

    if not config_path.exists():
        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(config_path, "w", encoding="utf-8") as f:
                f.write(create_default_config())
            logger.info(f"Created default configuration at: {config_path}")
        except OSError as e:
            logger.warning(f"Could not write default configuration to {config_path}: {e}")
        return _apply_env_overrides(Config())

    try:
        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.error(f"Error loading configuration from {config_path}: {e}")
        logger.info("Using default configuration.")
        return _apply_env_overrides(Config())

    config = Config()

    library_data = _section(toml_data, "library")
    csv_path = library_data.get("csv_path")
    if isinstance(csv_path, str) and csv_path:
        config.library = LibraryConfig(csv_path=str(Path(csv_path).expanduser()))
    elif csv_path:
        logger.warning(f"Invalid library configuration: csv_path must be a string, got {csv_path!r}")

    search_data = _section(toml_data, "search")
    if search_data:
        config.search = SearchConfig(
            autocomplete_limit=search_data.get(
                "autocomplete_limit", config.search.autocomplete_limit
            ),
            fuzzy_max_distance=search_data.get(
                "fuzzy_max_distance", config.search.fuzzy_max_distance
            ),
            similar_limit=search_data.get("similar_limit", config.search.similar_limit),
        )
        try:
            config.search.validate()
        except ValueError as e:
            logger.warning(f"Invalid search configuration: {e}")
            logger.warning("Using default search configuration.")
            config.search = SearchConfig()

    logging_data = _section(toml_data, "logging")
    if logging_data:
        level = logging_data.get("level", config.logging.level)
        log_file = logging_data.get("log_file")
        if isinstance(log_file, str) and log_file:
            log_file = str(Path(log_file).expanduser())
        config.logging = LoggingConfig(
            level=level.upper() if isinstance(level, str) else level,
            log_file=log_file or None,
            max_file_size_mb=logging_data.get(
                "max_file_size_mb", config.logging.max_file_size_mb
            ),
            backup_count=logging_data.get("backup_count", config.logging.backup_count),
            console_output=logging_data.get(
                "console_output", config.logging.console_output
            ),
        )
        try:
            config.logging.validate()
        except ValueError as e:
            logger.warning(f"Invalid logging configuration: {e}")
            logger.warning("Using default logging configuration.")
            config.logging = LoggingConfig()

    return _apply_env_overrides(config)


def ensure_directories() -> None:
    """Ensure all necessary directories exist."""
    get_config_dir().mkdir(parents=True, exist_ok=True)
    get_data_dir().mkdir(parents=True, exist_ok=True)
