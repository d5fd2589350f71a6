"""Markdown to HTML conversion for README, static pages and navigation.

Fenced code blocks are highlighted by Pygments through the ``codehilite``
extension; :attr:`HtmlContentRenderer.stylesheet` returns the matching CSS
that the page layout inlines.

Examples
--------
>>> renderer = HtmlContentRenderer()
>>> renderer.markdown("# Title")
'<h1>Title</h1>'
>>> renderer.markdown("   ")
''
"""

from __future__ import annotations

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

MARKDOWN_EXTENSIONS = ("fenced_code", "codehilite", "tables", "sane_lists")
HIGHLIGHT_CLASS = "codehilite"


class HtmlContentRenderer:
    """Convert markdown with a fixed extension set and Pygments style."""

    def __init__(self, pygments_style: str = "default") -> None:
        self.pygments_style = pygments_style

    @property
    def stylesheet(self) -> str:
        """Return the CSS rules for highlighted blocks."""
        formatter = HtmlFormatter(style=self.pygments_style, cssclass=HIGHLIGHT_CLASS)
        return formatter.get_style_defs(f".{HIGHLIGHT_CLASS}")

    def markdown(self, text: str) -> str:
        """Return the HTML for ``text``; blank input yields ``""``."""
        if not text.strip():
            return ""
        converter = Markdown(
            extensions=list(MARKDOWN_EXTENSIONS),
            extension_configs={
                "codehilite": {
                    "css_class": HIGHLIGHT_CLASS,
                    "guess_lang": False,
                    "pygments_style": self.pygments_style,
                }
            },
        )
        return converter.convert(text)


__all__ = ["HtmlContentRenderer"]
