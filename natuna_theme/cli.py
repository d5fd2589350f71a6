"""Cyclopts CLI entrypoint for generating a natuna-themed documentation site.

The ``natuna`` console script reads a project description and an optional
options file (YAML or JSON), renders every page with the ``natuna`` theme,
and prints each written path.

Examples
--------
Generate a site into the default ``docs`` directory:

>>> from natuna_theme.cli import app
>>> app.run(
...     ["generate", "--project", "project.yaml", "--options", "natuna.yaml"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from . import _constants
from .config import load_options_file
from .host.application import Application
from .host.loader import load_project
from .plugin import load

app = App(name="natuna", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Generate the documentation site for a project description.")
def generate(
    *,
    project: typ.Annotated[
        Path, Parameter(help="Path to the project description", env_var="INPUT_PROJECT")
    ],
    options: typ.Annotated[
        Path | None,
        Parameter(help="Path to a YAML/JSON options file", env_var="INPUT_OPTIONS"),
    ] = None,
    out: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUT"),
    ] = None,
) -> None:
    """Render every page of ``project`` with the natuna theme.

    Parameters
    ----------
    project : Path
        Project description file read by
        :func:`~natuna_theme.host.loader.load_project`.
    options : Path or None, optional
        Options file whose keys are option names (``staticMarkdownDocs``,
        ``customNavigations``, ...). The theme defaults to ``natuna``.
    out : Path or None, optional
        Output directory; overrides the ``out`` option.

    Raises
    ------
    ConfigurationError
        If an option value is malformed.
    NotFoundError
        If a configured static markdown file is missing.
    """
    values: dict[str, typ.Any] = {_constants.THEME: _constants.THEME_NAME}
    if options:
        values.update(load_options_file(options))
    if out:
        values[_constants.OUT] = str(out)

    application = Application()
    application.load_plugin(load)
    application.bootstrap(values)
    for path in application.generate(load_project(project)):
        print(f"wrote {_format_path(path)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``natuna`` console command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
