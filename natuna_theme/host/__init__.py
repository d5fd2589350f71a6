"""Minimal documentation host: reflection tree, options, themes, renderer."""

from .application import Application
from .loader import load_project
from .models import (
    SOME_MODULE,
    DeclarationReflection,
    PageEvent,
    ProjectReflection,
    Reflection,
    ReflectionKind,
    UrlMapping,
)
from .options import OptionDeclaration, Options, ParameterType
from .renderer import Renderer
from .theme import DefaultTheme, DefaultThemeRenderContext

__all__ = [
    "SOME_MODULE",
    "Application",
    "DeclarationReflection",
    "DefaultTheme",
    "DefaultThemeRenderContext",
    "OptionDeclaration",
    "Options",
    "PageEvent",
    "ParameterType",
    "ProjectReflection",
    "Reflection",
    "ReflectionKind",
    "Renderer",
    "UrlMapping",
    "load_project",
]
