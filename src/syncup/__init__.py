"""SyncUp - an indexed music library for the terminal."""

__version__ = "0.1.0"
