"""Declarative option registry shared by the host and its plugins.

Plugins declare the options they understand with :class:`OptionDeclaration`
before values are applied. After :meth:`Options.freeze` the registry is
read-only for the remainder of the generation run.

Examples
--------
>>> from natuna_theme.host.options import OptionDeclaration, Options, ParameterType
>>> options = Options()
>>> options.add_declaration(
...     OptionDeclaration("out", "Output directory.", ParameterType.STRING, "docs")
... )
>>> options.get_value("out")
'docs'
"""

from __future__ import annotations

import copy
import dataclasses as dc
import enum
import typing as typ

from natuna_theme.errors import ConfigurationError

if typ.TYPE_CHECKING:
    import collections.abc as cabc


class ParameterType(enum.Enum):
    """Value kinds an option may hold."""

    STRING = "string"
    BOOLEAN = "boolean"
    NUMBER = "number"
    MIXED = "mixed"


@dc.dataclass(frozen=True, slots=True)
class OptionDeclaration:
    """Name, help text, value kind and default of a single option."""

    name: str
    help: str
    type: ParameterType = ParameterType.STRING
    default_value: object = None


class Options:
    """Registry of declared options and the values applied to them."""

    def __init__(self) -> None:
        self._declarations: dict[str, OptionDeclaration] = {}
        self._values: dict[str, object] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def add_declaration(self, declaration: OptionDeclaration) -> None:
        """Register ``declaration``; names must be unique."""
        if declaration.name in self._declarations:
            msg = f"Option '{declaration.name}' is already declared."
            raise ConfigurationError(msg)
        self._declarations[declaration.name] = declaration

    def get_declaration(self, name: str) -> OptionDeclaration:
        try:
            return self._declarations[name]
        except KeyError as exc:
            known = ", ".join(sorted(self._declarations))
            msg = f"Unknown option '{name}'. Known options: {known}"
            raise ConfigurationError(msg) from exc

    def is_set(self, name: str) -> bool:
        """Return whether a value other than the default was applied."""
        self.get_declaration(name)
        return name in self._values

    def get_value(self, name: str) -> typ.Any:  # noqa: ANN401 - option values are user data
        """Return the applied value for ``name`` or a copy of its default."""
        declaration = self.get_declaration(name)
        if name in self._values:
            return self._values[name]
        return copy.deepcopy(declaration.default_value)

    def set_value(self, name: str, value: object) -> None:
        """Apply ``value`` to option ``name`` after checking its kind.

        Raises
        ------
        ConfigurationError
            When the registry is frozen, the option is unknown, or the value
            does not match a ``STRING``/``BOOLEAN``/``NUMBER`` declaration.
        """
        if self._frozen:
            msg = f"Cannot set option '{name}' after options were frozen."
            raise ConfigurationError(msg)
        declaration = self.get_declaration(name)
        match declaration.type:
            case ParameterType.STRING if not isinstance(value, str):
                msg = f"Option '{name}' expects a string, got {type(value).__name__}."
                raise ConfigurationError(msg)
            case ParameterType.BOOLEAN if not isinstance(value, bool):
                msg = f"Option '{name}' expects a boolean, got {type(value).__name__}."
                raise ConfigurationError(msg)
            case ParameterType.NUMBER if value is not None and (
                isinstance(value, bool) or not isinstance(value, int)
            ):
                msg = f"Option '{name}' expects an integer, got {type(value).__name__}."
                raise ConfigurationError(msg)
            case _:
                pass
        self._values[name] = value

    def set_values(self, values: cabc.Mapping[str, object]) -> None:
        for name, value in values.items():
            self.set_value(name, value)

    def freeze(self) -> None:
        """Reject further writes for the rest of the run."""
        self._frozen = True


__all__ = ["OptionDeclaration", "Options", "ParameterType"]
