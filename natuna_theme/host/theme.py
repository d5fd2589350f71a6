"""Default theme and render context provided by the host.

The default theme assigns URLs to every declaration that gets a page of its
own (modules, namespaces, classes, interfaces, enums), anchors everything
else inside its nearest page, and renders pages through the Jinja templates
shipped in ``natuna_theme/templates``. Themes supplied by plugins hold an
instance of :class:`DefaultTheme` and reuse its templates and URL scheme.
"""

from __future__ import annotations

import functools
import posixpath
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from natuna_theme import _constants
from natuna_theme.generator.renderer import HtmlContentRenderer
from natuna_theme.utils import wbr_html

from .models import DeclarationReflection, ReflectionKind, UrlMapping

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import PageEvent, ProjectReflection, Reflection
    from .options import Options
    from .renderer import Renderer

TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"

PAGE_DIRECTORIES: dict[ReflectionKind, str] = {
    ReflectionKind.CLASS: "classes",
    ReflectionKind.INTERFACE: "interfaces",
    ReflectionKind.ENUM: "enums",
    ReflectionKind.NAMESPACE: "modules",
    ReflectionKind.MODULE: "modules",
}


def _page_directory(reflection: Reflection) -> str | None:
    for kind, directory in PAGE_DIRECTORIES.items():
        if reflection.kind_of(kind):
            return directory
    return None


def _reflection_path(
    reflection: Reflection, relative: Reflection | None = None, separator: str = "."
) -> str:
    """Join the aliases from the top-level declaration down to ``reflection``."""
    path = reflection.alias
    parent = reflection.parent
    if parent is not None and parent is not relative and not parent.is_project():
        path = _reflection_path(parent, relative, separator) + separator + path
    return path


def build_environment(templates_dir: Path | None = None) -> Environment:
    """Return the Jinja environment used by every theme template."""
    env = Environment(
        loader=FileSystemLoader(str(templates_dir or TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml", "jinja"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["wbr"] = wbr_html
    return env


class DefaultThemeRenderContext:
    """Template helpers bound to a theme and the run's options."""

    def __init__(self, theme: DefaultTheme, options: Options) -> None:
        self.theme = theme
        self.options = options
        self._renderer = HtmlContentRenderer()

    def relative_url(self, page: PageEvent, url: str | None) -> str | None:
        """Return ``url`` relative to the directory of ``page``."""
        if not url:
            return None
        if "://" in url:
            return url
        path, _, anchor = url.partition("#")
        base = posixpath.dirname(page.url) or "."
        relative = posixpath.relpath(path, base) if path else ""
        return f"{relative}#{anchor}" if anchor else relative

    def url_to(self, reflection: Reflection, page: PageEvent) -> str | None:
        return self.relative_url(page, reflection.url)

    def markdown(self, text: str | None) -> Markup:
        """Render ``text`` to HTML; blank input renders to an empty string."""
        return Markup(self._renderer.markdown(text or ""))

    def render_partial(self, template_name: str, **context: object) -> Markup:
        template = self.theme.env.get_template(template_name)
        return Markup(template.render(**context))

    def hook(self, name: str) -> Markup:
        """Concatenate the fragments registered for hook ``name``."""
        return Markup("").join(self.theme.renderer.emit(name, self))

    def reflection_template(self, page: PageEvent) -> str:
        """Render the listing page for ``page.model`` and its children."""
        model = page.model
        children = [
            {
                "name": child.name,
                "href": self.url_to(child, page),
                "css_class": " ".join(child.css_classes),
            }
            for child in model.children
        ]
        return self.render_partial("reflection.jinja", model=model, children=children)

    def index_template(self, page: PageEvent, readme: str | None = None) -> str:
        """Render the landing page from the README markdown in ``readme``."""
        return self.render_partial(
            "index.jinja", project=page.project, readme_html=self.markdown(readme)
        )

    def navigation(self, page: PageEvent) -> Markup:
        """Render a flat list of the project's top-level declarations."""
        entries = [
            {"name": child.name, "href": self.url_to(child, page)}
            for child in page.project.children
        ]
        return self.render_partial("partials/navigation.jinja", entries=entries)

    def default_layout(self, page: PageEvent, contents: str, navigation: Markup) -> str:
        """Wrap rendered page ``contents`` in the site layout."""
        title = self.options.get_value(_constants.NAME) or page.project.name
        return self.theme.env.get_template("layout.jinja").render(
            title=title,
            page=page,
            home_href=self.url_to(page.project, page),
            contents=Markup(contents),
            navigation=navigation,
            body_begin=self.hook(_constants.BODY_BEGIN_HOOK),
            pygments_css=Markup(self._renderer.stylesheet),
        )


class DefaultTheme:
    """URL scheme and page templates used when no plugin theme is selected."""

    def __init__(self, renderer: Renderer, *, templates_dir: Path | None = None) -> None:
        self.renderer = renderer
        self.application = renderer.application
        self.env = build_environment(templates_dir)

    def get_render_context(self) -> DefaultThemeRenderContext:
        return DefaultThemeRenderContext(self, self.application.options)

    def reflection_template(self, page: PageEvent) -> str:
        return self.get_render_context().reflection_template(page)

    def get_urls(self, project: ProjectReflection) -> list[UrlMapping]:
        """Map the project to ``index.html`` and every declaration below it."""
        context = self.get_render_context()
        project.url = _constants.INDEX_PAGE
        urls = [
            UrlMapping(
                _constants.INDEX_PAGE,
                project,
                functools.partial(context.index_template, readme=project.readme),
            )
        ]
        for child in project.children:
            self.build_urls(child, urls)
        return urls

    def build_urls(
        self,
        reflection: DeclarationReflection,
        urls: list[UrlMapping],
        *,
        template: cabc.Callable[[PageEvent], str] | None = None,
    ) -> list[UrlMapping]:
        """Assign URLs to ``reflection`` and its descendants, appending pages.

        Declarations with a page directory get ``<dir>/<path>.html`` and a
        :class:`UrlMapping`; other declarations become anchors within the
        page of their closest ancestor.
        """
        template = template or self.reflection_template
        directory = _page_directory(reflection)
        if directory is not None:
            url = f"{directory}/{_reflection_path(reflection)}{_constants.PAGE_SUFFIX}"
            reflection.url = url
            reflection.has_own_document = True
            urls.append(UrlMapping(url, reflection, template))
            for child in reflection.children:
                self.build_urls(child, urls, template=template)
        elif reflection.parent is not None:
            self._apply_anchor_url(reflection, reflection.parent)
        return urls

    def _apply_anchor_url(self, reflection: Reflection, container: Reflection) -> None:
        anchor = _reflection_path(reflection, container)
        reflection.url = f"{container.url}#{anchor}"
        reflection.anchor = anchor
        reflection.has_own_document = False
        for child in reflection.children:
            self._apply_anchor_url(child, container)

    def render(self, page: PageEvent, template: cabc.Callable[[PageEvent], str]) -> str:
        context = self.get_render_context()
        return context.default_layout(page, template(page), context.navigation(page))


__all__ = [
    "PAGE_DIRECTORIES",
    "TEMPLATES_DIR",
    "DefaultTheme",
    "DefaultThemeRenderContext",
    "build_environment",
]
