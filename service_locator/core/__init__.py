"""Core entities and interfaces."""
