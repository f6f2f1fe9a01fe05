"""Command modules for gview."""

from . import account, find

__all__ = ["account", "find"]
