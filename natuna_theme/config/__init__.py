"""Load, validate and snapshot the natuna theme options.

Options reach the theme as loosely typed values (lists of mappings read from
an options file). This subpackage converts them into dataclasses
(:class:`ThemeConfig`, :class:`StaticMarkdownDoc`, :class:`CustomNavigation`,
:class:`ContentReplacement`) so the page mapper and navigation builder work
with checked structures. The entry points are :func:`load_options_file` and
:func:`read_theme_config`.

Examples
--------
>>> from pathlib import Path
>>> from natuna_theme.config import load_options_file
>>> values = load_options_file(Path("natuna.yaml"))  # doctest: +SKIP
>>> sorted(values)  # doctest: +SKIP
['customNavigations', 'staticMarkdownDocs']
"""

from .loader import load_options_file, read_theme_config
from .models import (
    ContentReplacement,
    CustomNavigation,
    NavigationLink,
    StaticMarkdownDoc,
    ThemeConfig,
)

__all__ = [
    "ContentReplacement",
    "CustomNavigation",
    "NavigationLink",
    "StaticMarkdownDoc",
    "ThemeConfig",
    "load_options_file",
    "read_theme_config",
]
