"""Command handlers for the CLI and the interactive shell."""
