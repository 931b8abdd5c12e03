"""Trie-based HTTP routing, middleware chains and server utilities."""

__version__ = "0.1.0"