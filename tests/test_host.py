"""Tests for the documentation host: options, project loading and rendering."""

from __future__ import annotations

import typing as typ

import pytest
from bs4 import BeautifulSoup
from markupsafe import Markup

from natuna_theme.errors import ConfigurationError
from natuna_theme.host.application import Application
from natuna_theme.host.loader import load_project
from natuna_theme.host.models import ReflectionKind
from natuna_theme.host.options import OptionDeclaration, Options, ParameterType
from natuna_theme.plugin import THEME_OPTIONS, load

if typ.TYPE_CHECKING:
    from pathlib import Path

    from natuna_theme.host.models import ProjectReflection


@pytest.fixture
def options() -> Options:
    registry = Options()
    registry.add_declaration(OptionDeclaration("out", "Output.", default_value="docs"))
    registry.add_declaration(
        OptionDeclaration("flag", "Flag.", ParameterType.BOOLEAN, default_value=False)
    )
    registry.add_declaration(
        OptionDeclaration("items", "Items.", ParameterType.MIXED, default_value=[])
    )
    registry.add_declaration(
        OptionDeclaration("limit", "Limit.", ParameterType.NUMBER, default_value=None)
    )
    return registry


def test_options_return_defaults_until_set(options: Options) -> None:
    assert options.get_value("out") == "docs"
    assert not options.is_set("out")
    options.set_value("out", "site")
    assert options.get_value("out") == "site"
    assert options.is_set("out")


def test_option_defaults_are_copied(options: Options) -> None:
    options.get_value("items").append("leak")
    assert options.get_value("items") == []


def test_duplicate_declaration_is_rejected(options: Options) -> None:
    with pytest.raises(ConfigurationError, match="already declared"):
        options.add_declaration(OptionDeclaration("out", "Again."))


def test_unknown_option_is_rejected(options: Options) -> None:
    with pytest.raises(ConfigurationError, match="Unknown option 'missing'"):
        options.get_value("missing")


@pytest.mark.parametrize(
    ("name", "value"),
    [("out", 3), ("flag", "yes"), ("limit", "3"), ("limit", True)],
)
def test_scalar_options_check_value_type(
    options: Options, name: str, value: object
) -> None:
    with pytest.raises(ConfigurationError, match="expects a"):
        options.set_value(name, value)


def test_number_options_accept_integers_and_none(options: Options) -> None:
    options.set_value("limit", 4)
    assert options.get_value("limit") == 4
    options.set_value("limit", None)
    assert options.get_value("limit") is None


def test_mixed_options_accept_any_value(options: Options) -> None:
    options.set_value("items", {"anything": 1})
    assert options.get_value("items") == {"anything": 1}


def test_frozen_options_reject_writes(options: Options) -> None:
    options.freeze()
    assert options.frozen
    with pytest.raises(ConfigurationError, match="frozen"):
        options.set_value("out", "site")


def test_plugin_declares_theme_options() -> None:
    application = Application()
    application.load_plugin(load)

    for declaration in THEME_OPTIONS:
        assert application.options.get_declaration(declaration.name) == declaration
    assert "natuna" in application.renderer.themes


def test_plugin_cannot_load_twice() -> None:
    application = Application()
    application.load_plugin(load)
    with pytest.raises(ConfigurationError, match="already defined"):
        application.load_plugin(load)


def test_bootstrap_freezes_options() -> None:
    application = Application()
    application.bootstrap({"out": "site"})
    assert application.options.frozen
    with pytest.raises(ConfigurationError):
        application.options.set_value("out", "other")


def test_generate_requires_bootstrap(project: ProjectReflection, out_dir: Path) -> None:
    application = Application()
    assert not application.options.frozen
    with pytest.raises(ConfigurationError, match="bootstrap"):
        application.generate(project, out_dir)
    assert not out_dir.exists()


def test_unknown_theme_is_reported(project: ProjectReflection, out_dir: Path) -> None:
    application = Application()
    application.bootstrap({"theme": "natuna"})
    with pytest.raises(ConfigurationError, match="Unknown theme 'natuna'"):
        application.generate(project, out_dir)


def test_default_theme_renders_flat_site(
    project: ProjectReflection, out_dir: Path
) -> None:
    application = Application()
    application.bootstrap({"out": str(out_dir)})

    written = application.generate(project)

    assert written[0] == out_dir / "index.html"
    assert (out_dir / "classes" / "core.httpclient.html").is_file()
    index = BeautifulSoup((out_dir / "index.html").read_text(encoding="utf-8"), "html.parser")
    assert index.select_one(".tsd-typography h1").get_text() == "Demo"
    names = [link.get_text() for link in index.select("nav.tsd-navigation li a")]
    assert names == ["core", "utils", "vendor"]
    assert index.find("script") is None


def test_hooks_contribute_markup(project: ProjectReflection, out_dir: Path) -> None:
    application = Application()
    application.renderer.on("body.begin", lambda _context: Markup("<i>hi</i>"))
    application.bootstrap({"out": str(out_dir)})

    application.generate(project)

    assert "<i>hi</i>" in (out_dir / "index.html").read_text(encoding="utf-8")


def test_load_project_builds_tree(tmp_path: Path) -> None:
    (tmp_path / "README.md").write_text("# Lib\n", encoding="utf-8")
    description = tmp_path / "project.yaml"
    description.write_text(
        "name: lib\n"
        "readme: README.md\n"
        "children:\n"
        "  - name: core\n"
        "    kind: module\n"
        "    classes: [beta]\n"
        "    children:\n"
        "      - {name: Parser, kind: class}\n"
        "      - {name: parse}\n"
        "  - name: vendor\n"
        "    kind: module\n"
        "    external: true\n",
        encoding="utf-8",
    )

    project = load_project(description)

    assert project.name == "lib"
    assert project.readme == "# Lib\n"
    core, vendor = project.children
    assert core.kind is ReflectionKind.MODULE
    assert core.classes == ["beta"]
    assert core.parent is project
    parser, parse = core.children
    assert parser.kind is ReflectionKind.CLASS
    assert parser.parent is core
    assert parse.kind is ReflectionKind.VARIABLE
    assert vendor.is_external


def test_load_project_defaults_name_to_file_stem(tmp_path: Path) -> None:
    description = tmp_path / "widgets.yaml"
    description.write_text("children: []\n", encoding="utf-8")
    project = load_project(description)
    assert project.name == "widgets"
    assert project.readme is None


def test_load_project_rejects_unknown_kind(tmp_path: Path) -> None:
    description = tmp_path / "project.yaml"
    description.write_text(
        "children:\n  - {name: thing, kind: gadget}\n", encoding="utf-8"
    )
    with pytest.raises(ConfigurationError, match="unknown kind 'gadget'"):
        load_project(description)


def test_load_project_requires_names(tmp_path: Path) -> None:
    description = tmp_path / "project.yaml"
    description.write_text("children:\n  - {kind: module}\n", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="string 'name'"):
        load_project(description)


def test_load_project_reports_missing_files(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_project(tmp_path / "missing.yaml")

    description = tmp_path / "project.yaml"
    description.write_text("readme: NOPE.md\n", encoding="utf-8")
    with pytest.raises(FileNotFoundError, match="NOPE.md"):
        load_project(description)
