r"""Small helpers shared by the navigation and page templates.

``wbr`` splits long identifiers into fragments separated by word-break
markers so browsers can wrap ``snake_case`` and ``camelCase`` names inside
narrow sidebars. ``in_path``, ``class_names`` and ``partition`` support the
navigation builder.

Examples
--------
>>> from natuna_theme.utils import class_names, partition, wbr_html
>>> str(wbr_html("fooBar"))
'foo<wbr>Bar'
>>> class_names({"current": True, "external": False})
'current'
>>> partition([1, 2, 3, 4], lambda n: n % 2 == 0)
([2, 4], [1, 3])
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ

from markupsafe import Markup

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from natuna_theme.host.models import Reflection

T = typ.TypeVar("T")

WORD_BREAK_PATTERN = re.compile(
    r"[\s\S]*?(?:([^_-][_-])(?=[^_-])|([^A-Z])(?=[A-Z][^A-Z]))"
)


@dc.dataclass(frozen=True, slots=True)
class WordBreak:
    """Marker emitted between fragments where a line may wrap."""

    def __html__(self) -> str:
        return "<wbr>"


WORD_BREAK = WordBreak()


def wbr(text: str) -> cabc.Iterator[str | WordBreak]:
    """Yield ``text`` as spans interleaved with :data:`WORD_BREAK` markers.

    A break follows a character that precedes a ``_``/``-`` separator (the
    separator stays on the left) and a lowercase character that precedes a
    capitalised word. Joining the ``str`` fragments gives back ``text``.

    Parameters
    ----------
    text : str
        Display name to segment.

    Yields
    ------
    str | WordBreak
        Text spans and break markers in document order. The final fragment
        is always a text span, empty when ``text`` is empty.
    """
    cursor = 0
    for match in WORD_BREAK_PATTERN.finditer(text):
        yield match.group(0)
        yield WORD_BREAK
        cursor = match.end()
    yield text[cursor:]


def wbr_html(text: str) -> Markup:
    """Return escaped HTML for ``text`` with ``<wbr>`` at each break point."""
    return Markup("").join(wbr(text))


def in_path(target: Reflection, start: Reflection | None) -> bool:
    """Return whether ``target`` is ``start`` or one of its ancestors.

    The walk stops at the project node, which never counts as containing
    anything.
    """
    node = start
    while node is not None:
        if node.is_project():
            return False
        if node is target:
            return True
        node = node.parent
    return False


def class_names(flags: cabc.Mapping[str, bool | None]) -> str:
    """Join the names whose flag is truthy, preserving mapping order."""
    return " ".join(name for name, enabled in flags.items() if enabled)


def partition(
    items: cabc.Iterable[T], predicate: cabc.Callable[[T], bool]
) -> tuple[list[T], list[T]]:
    """Split ``items`` into ``(matching, non_matching)`` keeping input order."""
    matching: list[T] = []
    rest: list[T] = []
    for item in items:
        (matching if predicate(item) else rest).append(item)
    return matching, rest


__all__ = [
    "WORD_BREAK",
    "WORD_BREAK_PATTERN",
    "WordBreak",
    "class_names",
    "in_path",
    "partition",
    "wbr",
    "wbr_html",
]
