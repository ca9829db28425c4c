"""Core infrastructure: configuration, Result types and logging wiring."""
