"""The ``natuna`` theme: static markdown pages and a richer sidebar.

:class:`NatunaTheme` wraps the host's :class:`DefaultTheme` rather than
subclassing it. It replaces URL mapping (adding the landing page split,
static markdown pages and content rewriting) and the navigation fragment,
and hands everything else to the wrapped theme.

Example
-------
>>> from natuna_theme.host.application import Application
>>> from natuna_theme.plugin import load
>>> app = Application()
>>> app.load_plugin(load)
>>> app.bootstrap({"theme": "natuna", "readme": "none"})
>>> app.generate(project)  # doctest: +SKIP
[PosixPath('docs/index.html'), ...]
"""

from __future__ import annotations

import typing as typ

from natuna_theme.config.loader import read_theme_config
from natuna_theme.host.theme import DefaultTheme, DefaultThemeRenderContext
from natuna_theme.navigation import NavigationBuilder
from natuna_theme.urls import map_project_urls

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from markupsafe import Markup

    from natuna_theme.config.models import ThemeConfig
    from natuna_theme.host.models import (
        DeclarationReflection,
        PageEvent,
        ProjectReflection,
        Reflection,
        UrlMapping,
    )
    from natuna_theme.host.options import Options
    from natuna_theme.host.renderer import Renderer


class NatunaThemeContext:
    """Render context adding markdown pages and the natuna sidebar."""

    def __init__(self, theme: NatunaTheme, options: Options) -> None:
        self.theme = theme
        self.options = options
        self.base = DefaultThemeRenderContext(theme.default, options)
        self.navigation_builder = NavigationBuilder(self, theme.config)

    def url_to(self, reflection: Reflection, page: PageEvent) -> str | None:
        return self.base.url_to(reflection, page)

    def markdown(self, text: str | None) -> Markup:
        return self.base.markdown(text)

    def render_partial(self, template_name: str, **context: object) -> Markup:
        return self.base.render_partial(template_name, **context)

    def reflection_template(self, page: PageEvent) -> str:
        return self.base.reflection_template(page)

    def index_template(self, page: PageEvent, readme: str | None = None) -> str:
        return self.base.index_template(page, readme=readme)

    def default_layout(self, page: PageEvent, contents: str, navigation: Markup) -> str:
        return self.base.default_layout(page, contents, navigation)

    def markdown_template(self, content: str) -> str:
        """Render markdown ``content`` inside a typography panel."""
        return self.render_partial(
            "markdown_page.jinja", content_html=self.markdown(content)
        )

    def navigation(self, page: PageEvent) -> Markup:
        return self.navigation_builder.navigation(page)


class NatunaTheme:
    """Theme registered as ``natuna``; composes the host's default theme."""

    def __init__(self, renderer: Renderer) -> None:
        self.renderer = renderer
        self.application = renderer.application
        self.default = DefaultTheme(renderer)
        self._config: ThemeConfig | None = None
        self._context_cache: NatunaThemeContext | None = None

    @property
    def config(self) -> ThemeConfig:
        """Return the validated theme options, reading them on first access."""
        if self._config is None:
            self._config = read_theme_config(self.application.options)
        return self._config

    def get_render_context(self) -> NatunaThemeContext:
        """Return the render context, creating it once per theme instance."""
        if self._context_cache is None:
            self._context_cache = NatunaThemeContext(self, self.application.options)
        return self._context_cache

    def get_urls(self, project: ProjectReflection) -> list[UrlMapping]:
        return map_project_urls(
            project,
            config=self.config,
            context=self.get_render_context(),
            build_urls=self.build_urls,
        )

    def build_urls(
        self,
        reflection: DeclarationReflection,
        urls: list[UrlMapping],
        *,
        template: cabc.Callable[[PageEvent], str] | None = None,
    ) -> list[UrlMapping]:
        return self.default.build_urls(reflection, urls, template=template)

    def render(self, page: PageEvent, template: cabc.Callable[[PageEvent], str]) -> str:
        context = self.get_render_context()
        return context.default_layout(page, template(page), context.navigation(page))


__all__ = ["NatunaTheme", "NatunaThemeContext"]
