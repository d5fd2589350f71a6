"""Build the sidebar navigation for every rendered page.

The sidebar is made of three independent fragments rendered in a fixed
order:

* custom navigation: titled link groups declared in ``customNavigations``,
  with site-absolute hrefs rewritten relative to the page being rendered;
* primary navigation: the project's module tree, split into internal and
  external modules, expanded along the path to the current page;
* secondary navigation: the non-module members of the current page.

Either generated fragment can be switched off with
``removePrimaryNavigation``/``removeSecondaryNavigation``.
"""

from __future__ import annotations

import os
import posixpath
import re
import typing as typ
from pathlib import Path

from markupsafe import Markup

from natuna_theme.errors import ConfigurationError
from natuna_theme.generator.models import NavItem, NavSection
from natuna_theme.host.models import SOME_MODULE, ReflectionKind
from natuna_theme.utils import class_names, in_path, partition

if typ.TYPE_CHECKING:
    from natuna_theme.config.models import ThemeConfig
    from natuna_theme.host.models import PageEvent, Reflection

LABEL_ESCAPE_PATTERN = re.compile(r"[\\\[\]]")


class NavigationContext(typ.Protocol):
    """Render-context capabilities the navigation builder relies on."""

    def url_to(self, reflection: Reflection, page: PageEvent) -> str | None: ...

    def markdown(self, text: str | None) -> Markup: ...

    def render_partial(self, template_name: str, **context: object) -> Markup: ...


def _join_classes(*names: str) -> str:
    return " ".join(name for name in names if name)


def _markdown_link(label: str, href: str) -> str:
    """Return a markdown list item linking ``label`` to ``href``.

    Brackets in the label are escaped and the href is wrapped in ``<>`` so
    spaces and parentheses survive.
    """
    escaped = LABEL_ESCAPE_PATTERN.sub(r"\\\g<0>", label)
    return f"- [{escaped}](<{href}>)"


class NavigationBuilder:
    """Render the custom, primary and secondary navigation fragments."""

    def __init__(self, context: NavigationContext, config: ThemeConfig) -> None:
        self.context = context
        self.config = config

    def navigation(self, page: PageEvent) -> Markup:
        """Return the full sidebar for ``page``."""
        fragments = [self.custom_navigation(page)]
        if not self.config.remove_primary_navigation:
            fragments.append(self.primary_navigation(page))
        if not self.config.remove_secondary_navigation:
            fragments.append(self.secondary_navigation(page))
        return Markup("").join(fragments)

    def custom_navigation(self, page: PageEvent) -> Markup:
        """Render the configured link groups for ``page``.

        Raises
        ------
        ConfigurationError
            If a link's href does not start with ``/``.
        """
        if not self.config.custom_navigations:
            return Markup("")
        sections = [
            NavSection(
                title_html=self.context.markdown(f"## {navigation.title}"),
                links_html=[
                    self.context.markdown(
                        _markdown_link(
                            link.label, self.root_relative_href(link.href, page)
                        )
                    )
                    for link in navigation.links
                ],
            )
            for navigation in self.config.custom_navigations
        ]
        return self.context.render_partial(
            "partials/custom_navigation.jinja", sections=sections
        )

    def root_relative_href(self, href: str, page: PageEvent) -> str:
        """Resolve a site-absolute ``href`` against the directory of ``page``.

        Examples
        --------
        A page at ``a/b/page.html`` reaches ``/x`` through ``../../x``.
        """
        if not href.startswith("/"):
            msg = f"Custom navigation href '{href}' must start with '/'."
            raise ConfigurationError(msg)
        out_root = Path(self.config.out).resolve()
        page_dir = (out_root / page.url).parent
        to_root = Path(os.path.relpath(out_root, page_dir)).as_posix()
        return posixpath.normpath(posixpath.join(to_root, href[1:]))

    def primary_navigation(self, page: PageEvent) -> Markup:
        """Render the module tree, separating internal and external modules."""
        project = page.project
        modules = project.get_children_by_kind(SOME_MODULE)
        external, internal = partition(modules, lambda module: module.is_external)
        has_modules = bool(project.get_children_by_kind(ReflectionKind.MODULE))
        root = NavItem(
            name="Modules" if has_modules else "Exports",
            href=self.context.url_to(project, page),
            css_class=class_names({"current": page.model.is_project()}),
        )
        return self.context.render_partial(
            "partials/primary_navigation.jinja",
            root=root,
            internal=[self._module_item(module, page) for module in internal],
            external=[self._module_item(module, page) for module in external],
        )

    def _module_item(self, module: Reflection, page: PageEvent) -> NavItem:
        current = in_path(module, page.model)
        children: list[NavItem] = []
        if current:
            children = [
                self._module_item(child, page)
                for child in module.get_children_by_kind(SOME_MODULE)
            ]
        return NavItem(
            name=module.name,
            href=self.context.url_to(module, page),
            css_class=_join_classes(
                class_names({"current": current}), *module.css_classes
            ),
            children=children,
        )

    def secondary_navigation(self, page: PageEvent) -> Markup:
        """Render the members of the current page.

        The project page of a multi-module project shows nothing here, since
        the primary navigation already lists its modules.
        """
        model = page.model
        if model.is_project() and model.get_children_by_kind(ReflectionKind.MODULE):
            return Markup("")
        members = [
            NavItem(
                name=child.name,
                href=self.context.url_to(child, page),
                css_class=_join_classes(*child.css_classes),
            )
            for child in model.children
            if not child.kind_of(SOME_MODULE)
        ]
        current = None
        if not model.kind_of(SOME_MODULE | ReflectionKind.PROJECT):
            current = NavItem(
                name=model.name,
                href=self.context.url_to(model, page),
                css_class=_join_classes("current", *model.css_classes),
                children=members,
            )
        return self.context.render_partial(
            "partials/secondary_navigation.jinja", members=members, current=current
        )


__all__ = ["NavigationBuilder", "NavigationContext"]
