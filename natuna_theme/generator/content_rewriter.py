"""Rewrite markdown text with user-configured regex rules before rendering.

Each rule keeps replacing the first match of its pattern until the pattern no
longer matches, so a rule whose replacement exposes a new match (for example
collapsing ``"---"`` runs two characters at a time) is applied until the text
is stable. Rules run in the order they are declared.

Example
-------
>>> import re
>>> from natuna_theme.config import ContentReplacement
>>> rewriter = ContentRewriter([ContentReplacement(re.compile(r"\\.md\\)"), ".html)")])
>>> rewriter.apply("[a](a.md) and [b](b.md)")
'[a](a.html) and [b](b.html)'
"""

from __future__ import annotations

import typing as typ

from natuna_theme.errors import ConfigurationError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from natuna_theme.config.models import ContentReplacement


class ContentRewriter:
    """Apply ordered replacement rules to markdown until none match.

    A rule whose pattern matches the empty string, or whose replacement
    re-creates a match of its own pattern, never stops matching. With the
    default ``max_passes=None`` such a rule loops forever. A cap, set from the
    ``markdownFilesContentReplacementMaxPasses`` option during page mapping,
    turns that into a :class:`~natuna_theme.errors.ConfigurationError`.
    """

    def __init__(
        self,
        replacements: cabc.Sequence[ContentReplacement] | None = None,
        *,
        max_passes: int | None = None,
    ) -> None:
        self.replacements = list(replacements or [])
        self.max_passes = max_passes

    def apply(self, text: str) -> str:
        """Return ``text`` with every rule applied until it stops matching."""
        for rule in self.replacements:
            passes = 0
            while rule.content.search(text):
                if self.max_passes is not None and passes >= self.max_passes:
                    msg = (
                        f"Replacement for pattern {rule.content.pattern!r} still "
                        f"matches after {self.max_passes} passes."
                    )
                    raise ConfigurationError(msg)
                text = rule.content.sub(rule.replacement, text, count=1)
                passes += 1
        return text


__all__ = ["ContentRewriter"]
