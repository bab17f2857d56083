"""Hosts that drive an AdventureGame.

- transcript: in-memory context and session, used by tests and other hosts
- console: line-based terminal REPL
"""
