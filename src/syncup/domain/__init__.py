"""Domain layer for SyncUp."""
