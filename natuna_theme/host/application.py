"""Host application tying options, plugins and the renderer together.

Examples
--------
>>> from natuna_theme.host.application import Application
>>> from natuna_theme.host.models import ProjectReflection
>>> app = Application()
>>> app.bootstrap({"out": "site"})
>>> app.generate(ProjectReflection("demo"))  # doctest: +SKIP
[PosixPath('site/index.html')]
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from natuna_theme import _constants
from natuna_theme.errors import ConfigurationError

from .options import OptionDeclaration, Options, ParameterType
from .renderer import Renderer

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import ProjectReflection

HOST_OPTIONS = (
    OptionDeclaration(
        _constants.README,
        "Path to the readme file, or 'none' to skip the landing page.",
        ParameterType.STRING,
        "",
    ),
    OptionDeclaration(
        _constants.OUT, "Directory the site is written to.", ParameterType.STRING, "docs"
    ),
    OptionDeclaration(
        _constants.THEME, "Name of the theme to render with.", ParameterType.STRING, "default"
    ),
    OptionDeclaration(
        _constants.NAME, "Project name shown in page titles.", ParameterType.STRING, ""
    ),
)


class Application:
    """Entry point for plugins and a single documentation run."""

    def __init__(self) -> None:
        self.options = Options()
        for declaration in HOST_OPTIONS:
            self.options.add_declaration(declaration)
        self.renderer = Renderer(self)

    def load_plugin(self, load: cabc.Callable[[Application], None]) -> None:
        """Invoke a plugin's ``load`` hook so it can declare options and themes."""
        load(self)

    def bootstrap(self, values: cabc.Mapping[str, object] | None = None) -> None:
        """Apply option ``values`` and freeze the registry for the run."""
        if values:
            self.options.set_values(values)
        self.options.freeze()

    def generate(
        self, project: ProjectReflection, out_dir: Path | None = None
    ) -> list[Path]:
        """Render ``project`` into ``out_dir`` (defaults to the ``out`` option).

        Raises
        ------
        ConfigurationError
            When options were not frozen by :meth:`bootstrap` first.
        """
        if not self.options.frozen:
            msg = "Call bootstrap() before generating so options stay fixed."
            raise ConfigurationError(msg)
        target = out_dir or Path(self.options.get_value(_constants.OUT))
        return self.renderer.render(project, target)


__all__ = ["HOST_OPTIONS", "Application"]
