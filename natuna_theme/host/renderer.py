"""Render every mapped page of a project to disk."""

from __future__ import annotations

import collections
import typing as typ

from natuna_theme import _constants
from natuna_theme.errors import ConfigurationError

from .models import PageEvent
from .theme import DefaultTheme

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from markupsafe import Markup

    from .application import Application
    from .models import ProjectReflection

HookCallback = typ.Callable[[typ.Any], "Markup | str"]


class Renderer:
    """Own the registered themes and hooks and drive the page loop."""

    def __init__(self, application: Application) -> None:
        self.application = application
        self.themes: dict[str, cabc.Callable[[Renderer], typ.Any]] = {
            "default": DefaultTheme
        }
        self.theme: typ.Any = None
        self._hooks: dict[str, list[HookCallback]] = collections.defaultdict(list)

    def define_theme(
        self, name: str, theme: cabc.Callable[[Renderer], typ.Any]
    ) -> None:
        if name in self.themes:
            msg = f"Theme '{name}' is already defined."
            raise ConfigurationError(msg)
        self.themes[name] = theme

    def on(self, name: str, callback: HookCallback) -> None:
        """Register ``callback`` to contribute markup to hook ``name``."""
        self._hooks[name].append(callback)

    def emit(self, name: str, context: object) -> list[Markup | str]:
        return [callback(context) for callback in self._hooks.get(name, [])]

    def render(self, project: ProjectReflection, out_dir: Path) -> list[Path]:
        """Render all pages of ``project`` below ``out_dir``.

        Returns
        -------
        list[Path]
            Written files in the order the theme mapped them.

        Raises
        ------
        ConfigurationError
            When the configured theme name is not defined.
        """
        theme_name = self.application.options.get_value(_constants.THEME)
        try:
            theme_factory = self.themes[theme_name]
        except KeyError as exc:
            known = ", ".join(sorted(self.themes))
            msg = f"Unknown theme '{theme_name}'. Known themes: {known}"
            raise ConfigurationError(msg) from exc
        self.theme = theme_factory(self)

        written: list[Path] = []
        for mapping in self.theme.get_urls(project):
            page = PageEvent(
                project=project,
                model=mapping.model,
                url=mapping.url,
                filename=out_dir / mapping.url,
            )
            page.contents = self.theme.render(page, mapping.template)
            page.filename.parent.mkdir(parents=True, exist_ok=True)
            page.filename.write_text(page.contents, encoding="utf-8")
            written.append(page.filename)
        return written


__all__ = ["Renderer"]
