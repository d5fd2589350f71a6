"""Reflection tree consumed by themes.

The host describes a documented project as a tree of reflections: a single
:class:`ProjectReflection` root holding :class:`DeclarationReflection`
children (modules, namespaces, classes, functions, ...). Parents are held
through weak references so the tree is owned top-down only; the upward link
exists purely for ancestor walks.
"""

from __future__ import annotations

import dataclasses as dc
import enum
import re
import typing as typ
import weakref

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path


class ReflectionKind(enum.IntFlag):
    """Kind tags carried by reflections."""

    PROJECT = enum.auto()
    MODULE = enum.auto()
    NAMESPACE = enum.auto()
    ENUM = enum.auto()
    ENUM_MEMBER = enum.auto()
    VARIABLE = enum.auto()
    FUNCTION = enum.auto()
    CLASS = enum.auto()
    INTERFACE = enum.auto()
    CONSTRUCTOR = enum.auto()
    PROPERTY = enum.auto()
    METHOD = enum.auto()
    ACCESSOR = enum.auto()
    TYPE_ALIAS = enum.auto()

    @property
    def slug(self) -> str:
        """Return the hyphenated kind name used in CSS classes."""
        return (self.name or "unknown").lower().replace("_", "-")


SOME_MODULE = ReflectionKind.MODULE | ReflectionKind.NAMESPACE

_ALIAS_PATTERN = re.compile(r"\W")


@dc.dataclass(eq=False)
class Reflection:
    """Base node of the reflection tree.

    Attributes
    ----------
    name : str
        Display name of the node.
    kind : ReflectionKind
        Kind tag; module-like nodes carry a :data:`SOME_MODULE` bit.
    classes : list[str]
        Extra CSS classes declared for the node.
    is_external : bool
        Whether the node was declared outside the documented sources.
    children : list[DeclarationReflection]
        Child declarations in source order.
    url : str or None
        Output-relative URL, assigned while mapping pages.
    anchor : str or None
        Fragment identifier for nodes rendered inside a parent page.
    has_own_document : bool
        Whether the node is rendered to its own page.
    """

    name: str
    kind: ReflectionKind
    classes: list[str] = dc.field(default_factory=list)
    is_external: bool = False
    children: list[DeclarationReflection] = dc.field(default_factory=list)
    url: str | None = None
    anchor: str | None = None
    has_own_document: bool = False
    _parent: weakref.ReferenceType[Reflection] | None = dc.field(
        default=None, init=False, repr=False
    )
    _alias: str | None = dc.field(default=None, init=False, repr=False)
    _alias_counts: dict[str, int] = dc.field(
        default_factory=dict, init=False, repr=False
    )

    def __post_init__(self) -> None:
        for child in self.children:
            child.parent = self

    @property
    def parent(self) -> Reflection | None:
        """Return the parent node, or ``None`` for roots and detached nodes."""
        return self._parent() if self._parent is not None else None

    @parent.setter
    def parent(self, value: Reflection | None) -> None:
        self._parent = weakref.ref(value) if value is not None else None

    @property
    def alias(self) -> str:
        """Return the filesystem-safe, lowercase name, unique within its owner.

        Names that reduce to an alias already taken under the same owner get
        a counter suffix in encounter order: ``a-b`` then ``a_b`` become
        ``a_b`` and ``a_b-1``. The alias is fixed on first access.
        """
        if self._alias is None:
            alias = _ALIAS_PATTERN.sub("_", self.name).lower() or "reflection"
            owner = self.owner
            if owner is not None:
                count = owner._alias_counts.get(alias, 0)
                owner._alias_counts[alias] = count + 1
                if count:
                    alias = f"{alias}-{count}"
            self._alias = alias
        return self._alias

    @property
    def owner(self) -> Reflection | None:
        """Return the closest ancestor rendered to its own page, or the project."""
        node = self.parent
        while node is not None and not node.is_project() and not node.has_own_document:
            node = node.parent
        return node

    @property
    def css_classes(self) -> list[str]:
        """Return the kind class followed by the declared classes."""
        classes = [f"tsd-kind-{self.kind.slug}"]
        parent = self.parent
        if parent is not None and not parent.is_project():
            classes.append(f"tsd-parent-kind-{parent.kind.slug}")
        if self.is_external:
            classes.append("tsd-is-external")
        classes.extend(self.classes)
        return classes

    def is_project(self) -> bool:
        return False

    def kind_of(self, kind: ReflectionKind) -> bool:
        """Return whether this node carries any bit of ``kind``."""
        return bool(self.kind & kind)

    def add_child(self, child: DeclarationReflection) -> DeclarationReflection:
        """Append ``child`` and point its parent link at this node."""
        child.parent = self
        self.children.append(child)
        return child

    def get_children_by_kind(
        self, kind: ReflectionKind
    ) -> list[DeclarationReflection]:
        return [child for child in self.children if child.kind_of(kind)]


@dc.dataclass(eq=False)
class DeclarationReflection(Reflection):
    """A documented declaration below the project root."""


@dc.dataclass(eq=False)
class ProjectReflection(Reflection):
    """Root of the reflection tree, optionally carrying README text."""

    kind: ReflectionKind = ReflectionKind.PROJECT
    readme: str | None = None

    def is_project(self) -> bool:
        return True


@dc.dataclass(slots=True)
class PageEvent:
    """State for a single page while it is being rendered."""

    project: ProjectReflection
    model: Reflection
    url: str
    filename: Path | None = None
    contents: str | None = None


@dc.dataclass(slots=True)
class UrlMapping:
    """A page to emit: output URL, source node, and the template rendering it."""

    url: str
    model: Reflection
    template: cabc.Callable[[PageEvent], str]


__all__ = [
    "SOME_MODULE",
    "DeclarationReflection",
    "PageEvent",
    "ProjectReflection",
    "Reflection",
    "ReflectionKind",
    "UrlMapping",
]
