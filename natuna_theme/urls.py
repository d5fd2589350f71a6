"""Decide which pages a project produces.

:func:`map_project_urls` emits, in order:

1. the root pages: ``index.html`` listing the project when the ``readme``
   option ends with ``"none"``, otherwise ``modules.html`` for the listing
   plus an ``index.html`` landing page rendered from the rewritten README;
2. one page per configured static markdown doc;
3. the declaration pages assigned by the host's URL scheme, depth first.

Declaration URLs are unique because the host suffixes colliding aliases;
only a static page can land on a URL another page already uses.

The README is rewritten into a new value bound to the landing page; the
project's own ``readme`` is left untouched.
"""

from __future__ import annotations

import collections
import functools
import typing as typ

from natuna_theme import _constants
from natuna_theme.errors import ConfigurationError
from natuna_theme.generator.content_rewriter import ContentRewriter
from natuna_theme.generator.static_pages import build_static_urls, load_static_pages
from natuna_theme.host.models import DeclarationReflection, UrlMapping

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from natuna_theme.config.models import ThemeConfig
    from natuna_theme.host.models import PageEvent, ProjectReflection

    from .theme import NatunaThemeContext


class UrlBuilder(typ.Protocol):
    """Host capability assigning URLs below a top-level declaration."""

    def __call__(
        self,
        reflection: DeclarationReflection,
        urls: list[UrlMapping],
        *,
        template: cabc.Callable[[PageEvent], str] | None = None,
    ) -> list[UrlMapping]: ...


def map_project_urls(
    project: ProjectReflection,
    *,
    config: ThemeConfig,
    context: NatunaThemeContext,
    build_urls: UrlBuilder,
) -> list[UrlMapping]:
    """Return every page of ``project`` in a stable order.

    Parameters
    ----------
    project : ProjectReflection
        Root of the reflection tree; its ``url`` is set to ``index.html``.
    config : ThemeConfig
        Theme options for the run.
    context : NatunaThemeContext
        Render context whose templates the mappings are bound to.
    build_urls : UrlBuilder
        Host URL assignment applied to each top-level declaration.

    Raises
    ------
    ConfigurationError
        If a static page URL is malformed or collides with another page, or
        a replacement rule exceeds its pass limit.
    NotFoundError
        If a static markdown file is missing.
    """
    rewriter = ContentRewriter(
        config.content_replacements, max_passes=config.replacement_max_passes
    )
    urls: list[UrlMapping] = []
    project.url = _constants.INDEX_PAGE

    if config.skips_readme:
        urls.append(
            UrlMapping(_constants.INDEX_PAGE, project, context.reflection_template)
        )
    else:
        readme = rewriter.apply(project.readme) if project.readme else project.readme
        urls.append(
            UrlMapping(_constants.MODULES_PAGE, project, context.reflection_template)
        )
        urls.append(
            UrlMapping(
                _constants.INDEX_PAGE,
                project,
                functools.partial(context.index_template, readme=readme),
            )
        )

    pages = load_static_pages(config.static_markdown_docs, rewriter)
    static_urls = build_static_urls(pages, project, context)
    urls.extend(static_urls)

    for child in project.children:
        if isinstance(child, DeclarationReflection):
            build_urls(child, urls, template=context.reflection_template)

    _ensure_static_urls_unique(static_urls, urls)
    return urls


def _ensure_static_urls_unique(
    static_urls: list[UrlMapping], urls: list[UrlMapping]
) -> None:
    counts = collections.Counter(mapping.url for mapping in urls)
    duplicates = sorted(
        {mapping.url for mapping in static_urls if counts[mapping.url] > 1}
    )
    if duplicates:
        msg = f"Multiple pages map to the same URL: {', '.join(duplicates)}"
        raise ConfigurationError(msg)


__all__ = ["map_project_urls"]
