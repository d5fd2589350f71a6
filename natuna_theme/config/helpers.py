"""Shape validation for the free-form theme option payloads.

Option values arrive as plain lists and mappings from an options file. The
helpers here check their structure and convert them into the dataclasses in
:mod:`natuna_theme.config.models`, raising
:class:`~natuna_theme.errors.ConfigurationError` on the first entry that
does not fit.
"""

from __future__ import annotations

import re
import typing as typ

from natuna_theme import _constants
from natuna_theme.errors import ConfigurationError

from .models import (
    ContentReplacement,
    CustomNavigation,
    NavigationLink,
    StaticMarkdownDoc,
)


def _require_sequence(value: object, name: str) -> list[typ.Any]:
    """Return ``value`` as a list, treating ``None`` as empty."""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    msg = f"Option '{name}' must be a list, got {type(value).__name__}."
    raise ConfigurationError(msg)


def _parse_static_docs(value: object) -> list[StaticMarkdownDoc]:
    """Convert ``staticMarkdownDocs`` entries into :class:`StaticMarkdownDoc`."""
    name = _constants.STATIC_MARKDOWN_DOCS
    docs: list[StaticMarkdownDoc] = []
    for index, entry in enumerate(_require_sequence(value, name)):
        match entry:
            case {"pageUrl": str() as page_url, "filePath": str() as file_path}:
                docs.append(StaticMarkdownDoc(page_url=page_url, file_path=file_path))
            case _:
                msg = (
                    f"{name}[{index}] must be a mapping with string 'pageUrl' "
                    "and 'filePath' entries."
                )
                raise ConfigurationError(msg)
    return docs


def _parse_custom_navigations(value: object) -> list[CustomNavigation]:
    """Convert ``customNavigations`` entries into :class:`CustomNavigation`."""
    name = _constants.CUSTOM_NAVIGATIONS
    navigations: list[CustomNavigation] = []
    for index, entry in enumerate(_require_sequence(value, name)):
        match entry:
            case {"title": str() as title, "links": list() | tuple() as links}:
                pass
            case {"title": str()}:
                msg = f"{name}[{index}].links must be a list of links."
                raise ConfigurationError(msg)
            case _:
                msg = f"{name}[{index}] must be a mapping with a string 'title'."
                raise ConfigurationError(msg)
        navigation = CustomNavigation(title=title)
        for link_index, link in enumerate(links):
            match link:
                case {"label": str() as label, "href": str() as href}:
                    navigation.links.append(NavigationLink(label=label, href=href))
                case _:
                    msg = (
                        f"{name}[{index}].links[{link_index}] must be a mapping "
                        "with string 'label' and 'href' entries."
                    )
                    raise ConfigurationError(msg)
        navigations.append(navigation)
    return navigations


def _parse_replacements(value: object) -> list[ContentReplacement]:
    """Compile ``markdownFilesContentReplacement`` rules in declared order."""
    name = _constants.MARKDOWN_FILES_CONTENT_REPLACEMENT
    rules: list[ContentReplacement] = []
    for index, entry in enumerate(_require_sequence(value, name)):
        match entry:
            case {"content": str() as content, "replacement": str() as replacement}:
                try:
                    pattern = re.compile(content)
                except re.error as exc:
                    msg = f"{name}[{index}].content is not a valid pattern: {exc}"
                    raise ConfigurationError(msg) from exc
                rules.append(ContentReplacement(content=pattern, replacement=replacement))
            case _:
                msg = (
                    f"{name}[{index}] must be a mapping with string 'content' "
                    "and 'replacement' entries."
                )
                raise ConfigurationError(msg)
    return rules


def _parse_max_passes(value: object) -> int | None:
    """Return the replacement pass limit, or ``None`` when unbounded."""
    name = _constants.MARKDOWN_FILES_CONTENT_REPLACEMENT_MAX_PASSES
    match value:
        case None:
            return None
        case bool():
            pass
        case int() as passes if passes > 0:
            return passes
    msg = f"Option '{name}' must be a positive integer, got {value!r}."
    raise ConfigurationError(msg)


__all__ = [
    "_parse_custom_navigations",
    "_parse_max_passes",
    "_parse_replacements",
    "_parse_static_docs",
    "_require_sequence",
]
