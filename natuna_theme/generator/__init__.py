"""Markdown rendering, content rewriting and static page loading."""

from .content_rewriter import ContentRewriter
from .renderer import HtmlContentRenderer
from .static_pages import StaticPage, build_static_urls, load_static_pages

__all__ = [
    "ContentRewriter",
    "HtmlContentRenderer",
    "StaticPage",
    "build_static_urls",
    "load_static_pages",
]
