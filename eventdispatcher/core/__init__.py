"""Core listener bookkeeping, protocols, configuration and logging."""
