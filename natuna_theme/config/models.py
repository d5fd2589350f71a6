"""Typed dataclasses describing the natuna theme options."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from natuna_theme import _constants

if typ.TYPE_CHECKING:
    import re


@dc.dataclass(slots=True)
class StaticMarkdownDoc:
    """A markdown file published as its own page.

    Attributes
    ----------
    page_url : str
        Site-absolute page URL without suffix, e.g. ``"/guide"``.
    file_path : str
        Markdown file location, absolute or relative to the working directory.
    """

    page_url: str
    file_path: str


@dc.dataclass(slots=True)
class NavigationLink:
    """Label and site-absolute ``href`` of a custom navigation link."""

    label: str
    href: str


@dc.dataclass(slots=True)
class CustomNavigation:
    """Titled group of links rendered above the generated navigation."""

    title: str
    links: list[NavigationLink] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class ContentReplacement:
    """Regex rule applied to markdown before it is rendered."""

    content: re.Pattern[str]
    replacement: str


@dc.dataclass(slots=True)
class ThemeConfig:
    """Snapshot of every option the theme reads during a run."""

    readme: str = ""
    out: str = "docs"
    static_markdown_docs: list[StaticMarkdownDoc] = dc.field(default_factory=list)
    custom_navigations: list[CustomNavigation] = dc.field(default_factory=list)
    remove_primary_navigation: bool = False
    remove_secondary_navigation: bool = False
    content_replacements: list[ContentReplacement] = dc.field(default_factory=list)
    replacement_max_passes: int | None = None

    @property
    def skips_readme(self) -> bool:
        """Return whether the readme option disables the landing page."""
        return self.readme.endswith(_constants.README_NONE_SUFFIX)


__all__ = [
    "ContentReplacement",
    "CustomNavigation",
    "NavigationLink",
    "StaticMarkdownDoc",
    "ThemeConfig",
]
