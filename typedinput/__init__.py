"""Typed console prompts and small example programs built on them."""

__version__ = "1.0.0"