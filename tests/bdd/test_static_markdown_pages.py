"""Behaviour tests for publishing static markdown pages.

The scenarios in ``static_markdown_pages.feature`` render the shared demo
project with a guide configured through ``staticMarkdownDocs`` and check the
written page, including links rewritten by
``markdownFilesContentReplacement`` rules and the rejection of page URLs that
do not start with ``/``.

Usage
-----
Run ``pytest tests/bdd/test_static_markdown_pages.py -v`` after installing
the ``test`` extra.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, parsers, scenarios, then, when

from natuna_theme.errors import ConfigurationError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from natuna_theme.host.application import Application
    from natuna_theme.host.models import ProjectReflection

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "static_markdown_pages.feature"
)
scenarios(FEATURE_FILE)


@pytest.fixture
def scenario_state() -> dict[str, typ.Any]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {"values": {}}


@given("a project with a guide markdown file")
def given_guide(tmp_path: Path, scenario_state: dict[str, typ.Any]) -> None:
    """Write the guide markdown used by the scenarios."""
    guide = tmp_path / "intro.md"
    guide.write_text(
        "# Getting started\n\nRead [setup](setup.md) first.\n", encoding="utf-8"
    )
    scenario_state["guide"] = guide


@given(parsers.parse('the guide is published at "{page_url}"'))
def given_published(scenario_state: dict[str, typ.Any], page_url: str) -> None:
    """Configure the guide as a static markdown page."""
    guide = typ.cast("Path", scenario_state["guide"])
    scenario_state["values"]["staticMarkdownDocs"] = [
        {"pageUrl": page_url, "filePath": str(guide)}
    ]


@given(
    parsers.parse('markdown links ending in "{suffix}" are rewritten to "{target}"')
)
def given_replacement(
    scenario_state: dict[str, typ.Any], suffix: str, target: str
) -> None:
    """Add a content replacement rule turning ``suffix)`` into ``target)``."""
    scenario_state["values"]["markdownFilesContentReplacement"] = [
        {"content": rf"\{suffix}\)", "replacement": f"{target})"}
    ]


@when("I generate the site")
def when_generate(
    make_app: cabc.Callable[..., Application],
    project: ProjectReflection,
    scenario_state: dict[str, typ.Any],
) -> None:
    """Render the demo project with the configured options."""
    make_app(**scenario_state["values"]).generate(project)


@when("I try to generate the site")
def when_try_generate(
    make_app: cabc.Callable[..., Application],
    project: ProjectReflection,
    scenario_state: dict[str, typ.Any],
) -> None:
    """Render the demo project, keeping any raised error for later steps."""
    try:
        make_app(**scenario_state["values"]).generate(project)
    except ConfigurationError as exc:
        scenario_state["error"] = exc


@then(parsers.parse('the page "{url}" shows the heading "{heading}"'))
def then_heading(out_dir: Path, url: str, heading: str) -> None:
    """Verify the page renders the markdown heading in its typography panel."""
    soup = BeautifulSoup((out_dir / url).read_text(encoding="utf-8"), "html.parser")
    panel = soup.select_one(".tsd-typography")
    assert panel is not None, f"expected a typography panel in {url}"
    assert panel.h1.get_text() == heading


@then(parsers.parse('the page "{url}" links to "{href}"'))
def then_link(out_dir: Path, url: str, href: str) -> None:
    """Verify the rewritten markdown link appears in the page body."""
    soup = BeautifulSoup((out_dir / url).read_text(encoding="utf-8"), "html.parser")
    hrefs = [link["href"] for link in soup.select(".tsd-typography a")]
    assert hrefs == [href]


@then("generation fails with a configuration error")
def then_configuration_error(scenario_state: dict[str, typ.Any]) -> None:
    """Verify the malformed page URL was reported."""
    error = scenario_state.get("error")
    assert isinstance(error, ConfigurationError)
    assert "must start with '/'" in str(error)
