"""Textual terminal UI host for the palace game."""
