"""A documentation theme with static markdown pages and custom navigation.

This package plugs into the documentation host in :mod:`natuna_theme.host`.
It maps each project to its output pages, publishes configured markdown files
as standalone pages, rewrites markdown with configured regex rules, and builds
the sidebar from custom links, the module tree and the current page's members.

Exports
-------
- ``load``: Plugin hook registering the theme and its options.
- ``app``: Cyclopts application behind the ``natuna`` console script.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from natuna_theme import load
>>> from natuna_theme.host import Application
>>> application = Application()
>>> application.load_plugin(load)
>>> application.options.get_value("removePrimaryNavigation")
False
"""

from __future__ import annotations

from .cli import app, main
from .plugin import load

__all__ = ["app", "load", "main"]
