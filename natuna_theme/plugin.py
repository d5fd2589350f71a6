"""Register the natuna theme and its options with a host application."""

from __future__ import annotations

import typing as typ

from markupsafe import Markup

from natuna_theme import _constants
from natuna_theme.host.options import OptionDeclaration, ParameterType
from natuna_theme.theme import NatunaTheme

if typ.TYPE_CHECKING:
    from natuna_theme.host.application import Application

THEME_OPTIONS = (
    OptionDeclaration(
        _constants.STATIC_MARKDOWN_DOCS,
        "A list of {pageUrl, filePath} markdown files to publish as pages.",
        ParameterType.MIXED,
        [],
    ),
    OptionDeclaration(
        _constants.CUSTOM_NAVIGATIONS,
        "A list of {title, links: [{label, href}]} navigation sections.",
        ParameterType.MIXED,
        [],
    ),
    OptionDeclaration(
        _constants.REMOVE_PRIMARY_NAVIGATION,
        "Hide the module tree in the sidebar.",
        ParameterType.BOOLEAN,
        False,
    ),
    OptionDeclaration(
        _constants.REMOVE_SECONDARY_NAVIGATION,
        "Hide the current page's members in the sidebar.",
        ParameterType.BOOLEAN,
        False,
    ),
    OptionDeclaration(
        _constants.MARKDOWN_FILES_CONTENT_REPLACEMENT,
        "A list of {content, replacement} regex rules applied to markdown.",
        ParameterType.MIXED,
        [],
    ),
    OptionDeclaration(
        _constants.MARKDOWN_FILES_CONTENT_REPLACEMENT_MAX_PASSES,
        "Fail when one replacement rule still matches after this many passes.",
        ParameterType.NUMBER,
        None,
    ),
)

GENERATING_SCRIPT = Markup(
    "<script>console.log(`[Natuna] Generating: ${location.href}`)</script>"
)


def announce_page(_context: object) -> Markup:
    """Return the script logging each generated page to the browser console."""
    return GENERATING_SCRIPT


def load(app: Application) -> None:
    """Declare the six theme options and define the ``natuna`` theme on ``app``."""
    app.renderer.on(_constants.BODY_BEGIN_HOOK, announce_page)
    app.renderer.define_theme(_constants.THEME_NAME, NatunaTheme)
    for declaration in THEME_OPTIONS:
        app.options.add_declaration(declaration)


__all__ = ["THEME_OPTIONS", "announce_page", "load"]
