"""Load options files and snapshot the theme's options."""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML

from natuna_theme import _constants

from .helpers import (
    _parse_custom_navigations,
    _parse_max_passes,
    _parse_replacements,
    _parse_static_docs,
)
from .models import ThemeConfig

if typ.TYPE_CHECKING:
    from pathlib import Path

    from natuna_theme.host.options import Options


def load_options_file(path: Path) -> dict[str, typ.Any]:
    """Read option values from a YAML or JSON options file.

    Parameters
    ----------
    path : Path
        Filesystem path to the options file (for example ``natuna.yaml`` or
        ``typedoc.json``). Keys are option names such as
        ``staticMarkdownDocs``.

    Returns
    -------
    dict[str, Any]
        Raw option values keyed by option name, ready for
        :meth:`~natuna_theme.host.options.Options.set_values`.

    Raises
    ------
    FileNotFoundError
        If the options file does not exist at ``path``.
    TypeError
        If the top-level structure is not a mapping.

    Examples
    --------
    >>> from pathlib import Path
    >>> values = load_options_file(Path("natuna.yaml"))  # doctest: +SKIP
    >>> values["customNavigations"][0]["title"]  # doctest: +SKIP
    'Links'
    """
    if not path.exists():
        msg = f"Options file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level options structure must be a mapping."
        raise TypeError(msg)
    return dict(loaded)


def read_theme_config(options: Options) -> ThemeConfig:
    """Validate the theme's option values and return them as a ThemeConfig.

    Raises
    ------
    ConfigurationError
        If any list-valued option or one of its entries has the wrong shape.
    """
    return ThemeConfig(
        readme=options.get_value(_constants.README),
        out=options.get_value(_constants.OUT),
        static_markdown_docs=_parse_static_docs(
            options.get_value(_constants.STATIC_MARKDOWN_DOCS)
        ),
        custom_navigations=_parse_custom_navigations(
            options.get_value(_constants.CUSTOM_NAVIGATIONS)
        ),
        remove_primary_navigation=options.get_value(
            _constants.REMOVE_PRIMARY_NAVIGATION
        ),
        remove_secondary_navigation=options.get_value(
            _constants.REMOVE_SECONDARY_NAVIGATION
        ),
        content_replacements=_parse_replacements(
            options.get_value(_constants.MARKDOWN_FILES_CONTENT_REPLACEMENT)
        ),
        replacement_max_passes=_parse_max_passes(
            options.get_value(
                _constants.MARKDOWN_FILES_CONTENT_REPLACEMENT_MAX_PASSES
            )
        ),
    )


__all__ = ["load_options_file", "read_theme_config"]
