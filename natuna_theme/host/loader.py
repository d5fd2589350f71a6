"""Load a project description file into a reflection tree.

The description is YAML (or JSON) of the form::

    name: my-lib
    readme: README.md        # optional; read relative to the file
    children:
      - name: core
        kind: module
        external: false
        classes: [beta]
        children:
          - {name: Parser, kind: class}
"""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML

from natuna_theme.errors import ConfigurationError

from .models import DeclarationReflection, ProjectReflection, ReflectionKind

if typ.TYPE_CHECKING:
    from pathlib import Path


def load_project(path: Path) -> ProjectReflection:
    """Build a :class:`ProjectReflection` from the description at ``path``.

    Raises
    ------
    FileNotFoundError
        If ``path`` or the referenced readme file does not exist.
    TypeError
        If the top-level structure is not a mapping.
    ConfigurationError
        If a node has no name or an unknown kind.
    """
    if not path.exists():
        msg = f"Project description '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level project description must be a mapping."
        raise TypeError(msg)

    readme = loaded.get("readme")
    readme_text: str | None = None
    if readme:
        readme_path = path.parent / str(readme)
        if not readme_path.exists():
            msg = f"Readme file '{readme_path}' not found."
            raise FileNotFoundError(msg)
        readme_text = readme_path.read_text(encoding="utf-8")

    project = ProjectReflection(
        str(loaded.get("name") or path.stem), readme=readme_text
    )
    for payload in loaded.get("children") or []:
        project.add_child(_build_declaration(payload))
    return project


def _build_declaration(payload: typ.Any) -> DeclarationReflection:  # noqa: ANN401
    match payload:
        case {"name": str() as name}:
            pass
        case _:
            msg = f"Declaration entries need a string 'name', got {payload!r}."
            raise ConfigurationError(msg)

    declaration = DeclarationReflection(
        name,
        _parse_kind(payload.get("kind", "variable"), name),
        classes=[str(value) for value in payload.get("classes") or []],
        is_external=bool(payload.get("external", False)),
    )
    for child in payload.get("children") or []:
        declaration.add_child(_build_declaration(child))
    return declaration


def _parse_kind(value: object, name: str) -> ReflectionKind:
    key = str(value).strip().upper().replace("-", "_").replace(" ", "_")
    try:
        return ReflectionKind[key]
    except KeyError as exc:
        msg = f"Declaration '{name}' has unknown kind '{value}'."
        raise ConfigurationError(msg) from exc


__all__ = ["load_project"]
