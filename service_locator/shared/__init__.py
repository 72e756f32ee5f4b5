"""Shared building blocks: di engine, exceptions and logging."""
