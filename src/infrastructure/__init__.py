"""Adapters to the outside world: judge APIs, storage, configuration and logging."""
