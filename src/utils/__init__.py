"""Shared helpers: logging, validation and paths."""
