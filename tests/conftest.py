"""Shared fixtures building reflection trees and configured applications."""

from __future__ import annotations

import typing as typ

import pytest

from natuna_theme.host.application import Application
from natuna_theme.host.models import (
    DeclarationReflection,
    PageEvent,
    ProjectReflection,
    ReflectionKind,
)
from natuna_theme.plugin import load
from natuna_theme.theme import NatunaTheme

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path


def _declaration(
    name: str,
    kind: ReflectionKind,
    *children: DeclarationReflection,
    **kwargs: typ.Any,
) -> DeclarationReflection:
    return DeclarationReflection(name, kind, children=list(children), **kwargs)


def build_project(
    *, with_external: bool = True, readme: str | None = "# Demo\n"
) -> ProjectReflection:
    """Return a three-module project tree.

    ``core`` holds a ``parsers`` namespace (with ``TokenStream``), the
    ``HttpClient`` class and a ``load_config`` function; ``utils`` holds a
    function; ``vendor`` is an external module.
    """
    core = _declaration(
        "core",
        ReflectionKind.MODULE,
        _declaration(
            "parsers",
            ReflectionKind.NAMESPACE,
            _declaration("TokenStream", ReflectionKind.CLASS),
        ),
        _declaration(
            "HttpClient",
            ReflectionKind.CLASS,
            _declaration("sendRequest", ReflectionKind.METHOD),
        ),
        _declaration("load_config", ReflectionKind.FUNCTION),
        classes=["beta"],
    )
    utils = _declaration(
        "utils",
        ReflectionKind.MODULE,
        _declaration("formatName", ReflectionKind.FUNCTION),
    )
    children = [core, utils]
    if with_external:
        children.append(
            _declaration(
                "vendor",
                ReflectionKind.MODULE,
                _declaration("left_pad", ReflectionKind.FUNCTION),
                is_external=True,
            )
        )
    return ProjectReflection("demo", readme=readme, children=children)


def find(project: ProjectReflection, *names: str) -> DeclarationReflection:
    """Return the declaration reached by following ``names`` from the root."""
    node: typ.Any = project
    for name in names:
        node = next(child for child in node.children if child.name == name)
    return node


def page_for(project: ProjectReflection, model: typ.Any, url: str | None = None) -> PageEvent:
    return PageEvent(project=project, model=model, url=url or model.url)


@pytest.fixture
def project() -> ProjectReflection:
    return build_project()


@pytest.fixture
def project_factory() -> cabc.Callable[..., ProjectReflection]:
    """Return the project builder so tests can vary the readme and externals."""
    return build_project


@pytest.fixture(name="find")
def find_fixture() -> cabc.Callable[..., DeclarationReflection]:
    return find


@pytest.fixture(name="page_for")
def page_for_fixture() -> cabc.Callable[..., PageEvent]:
    return page_for


@pytest.fixture
def out_dir(tmp_path: Path) -> Path:
    return tmp_path / "site"


@pytest.fixture
def make_app(out_dir: Path) -> cabc.Callable[..., Application]:
    """Return a factory for bootstrapped applications using the natuna theme."""

    def _make(**values: typ.Any) -> Application:
        application = Application()
        application.load_plugin(load)
        application.bootstrap({"theme": "natuna", "out": str(out_dir), **values})
        return application

    return _make


@pytest.fixture
def make_theme(
    make_app: cabc.Callable[..., Application],
) -> cabc.Callable[..., NatunaTheme]:
    """Return a factory building a NatunaTheme over a fresh application."""

    def _make(**values: typ.Any) -> NatunaTheme:
        return NatunaTheme(make_app(**values).renderer)

    return _make
