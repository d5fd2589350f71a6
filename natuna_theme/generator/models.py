"""Shared dataclasses passed to the navigation templates."""

from __future__ import annotations

import dataclasses as dc


@dc.dataclass(slots=True)
class NavItem:
    """A navigation entry rendered as ``<li><a>``.

    Attributes
    ----------
    name : str
        Display name; templates pass it through the ``wbr`` filter.
    href : str or None
        Link relative to the page being rendered.
    css_class : str
        Space-separated classes for the ``<li>``.
    children : list[NavItem]
        Nested entries rendered as a sub-list.
    """

    name: str
    href: str | None
    css_class: str = ""
    children: list[NavItem] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class NavSection:
    """A custom navigation section with pre-rendered markdown fragments."""

    title_html: str
    links_html: list[str] = dc.field(default_factory=list)


__all__ = ["NavItem", "NavSection"]
