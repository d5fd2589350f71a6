"""Publish configured markdown files as standalone pages.

Each :class:`~natuna_theme.config.StaticMarkdownDoc` becomes one page whose
URL is the configured ``pageUrl`` without its leading slash plus ``.html``.
The markdown is read once while URLs are mapped, passed through the
:class:`~natuna_theme.generator.content_rewriter.ContentRewriter`, and
rendered inside a typography panel when the page itself is rendered.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from natuna_theme import _constants
from natuna_theme.errors import ConfigurationError, NotFoundError
from natuna_theme.host.models import UrlMapping

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from natuna_theme.config.models import StaticMarkdownDoc
    from natuna_theme.host.models import PageEvent, ProjectReflection

    from .content_rewriter import ContentRewriter


class MarkdownPageContext(typ.Protocol):
    """Render-context capability needed to render a static page."""

    def markdown_template(self, content: str) -> str: ...


@dc.dataclass(slots=True)
class StaticPage:
    """A loaded markdown page ready to be mapped.

    Attributes
    ----------
    url : str
        Output-relative URL, e.g. ``"guide.html"``.
    source : Path
        Absolute path of the markdown file that was read.
    content : str
        Rewritten markdown text.
    """

    url: str
    source: Path
    content: str


def static_page_url(page_url: str) -> str:
    """Return the output path for ``page_url``.

    Raises
    ------
    ConfigurationError
        If ``page_url`` does not start with ``/``.
    """
    if not page_url.startswith("/"):
        msg = f"Static markdown page URL '{page_url}' must start with '/'."
        raise ConfigurationError(msg)
    return f"{page_url[1:]}{_constants.PAGE_SUFFIX}"


def load_static_pages(
    docs: cabc.Iterable[StaticMarkdownDoc],
    rewriter: ContentRewriter,
    *,
    cwd: Path | None = None,
) -> list[StaticPage]:
    """Validate, read and rewrite each configured markdown file in order.

    Parameters
    ----------
    docs : Iterable[StaticMarkdownDoc]
        Configured static pages.
    rewriter : ContentRewriter
        Rules applied to the raw markdown.
    cwd : Path, optional
        Base directory for relative file paths; defaults to the process
        working directory.

    Raises
    ------
    ConfigurationError
        If a page URL does not start with ``/``.
    NotFoundError
        If a markdown file does not exist.
    """
    base = cwd or Path.cwd()
    pages: list[StaticPage] = []
    for doc in docs:
        url = static_page_url(doc.page_url)
        source = Path(doc.file_path)
        if not source.is_absolute():
            source = base / source
        if not source.is_file():
            msg = f"Could not find markdown file for '{doc.page_url}' at {source}"
            raise NotFoundError(msg)
        content = rewriter.apply(source.read_text(encoding="utf-8"))
        pages.append(StaticPage(url=url, source=source, content=content))
    return pages


def build_static_urls(
    pages: cabc.Iterable[StaticPage],
    project: ProjectReflection,
    context: MarkdownPageContext,
) -> list[UrlMapping]:
    """Return one :class:`UrlMapping` per page, bound to the project model."""
    return [
        UrlMapping(page.url, project, _markdown_page(context, page.content))
        for page in pages
    ]


def _markdown_page(
    context: MarkdownPageContext, content: str
) -> cabc.Callable[[PageEvent], str]:
    def template(page: PageEvent) -> str:  # noqa: ARG001 - page template signature
        return context.markdown_template(content)

    return template


__all__ = [
    "StaticPage",
    "build_static_urls",
    "load_static_pages",
    "static_page_url",
]
