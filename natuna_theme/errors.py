"""Exceptions raised while mapping pages and building navigation."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when a theme option is malformed or violates its contract."""


class NotFoundError(FileNotFoundError):
    """Raised when a configured markdown file does not exist on disk."""


__all__ = ["ConfigurationError", "NotFoundError"]
