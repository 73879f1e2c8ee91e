"""Ambient theme injection point.

Host presentation code installs a theme once at a root and descendant code
reads it back without threading it through every call::

    with install_theme(my_theme):
        render_screen()          # current_theme() is my_theme in here

Nesting is supported and the previous theme is restored on exit, including
when the block raises. The ambient value lives in a `ContextVar`, so threads
and asyncio tasks each see their own installation. Outside any block,
`current_theme()` is `Theme.default()`.

The resolver functions never read this module; they take the spec and
context explicitly. This is only a convenience for presentation bindings.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional, Union

from gentle.config import settings
from gentle.design.facade import DesignRuntime
from gentle.design.roles import ColorScheme, coerce_role
from gentle.design.spec import DesignSpec
from gentle.design.theme import Theme

__all__ = ["install_theme", "current_theme", "current_runtime"]

_DEFAULT_THEME = Theme.default()
_ambient: ContextVar[Optional[Theme]] = ContextVar("gentle_ambient_theme", default=None)


def _as_theme(value: Union[Theme, DesignSpec]) -> Theme:
    if isinstance(value, Theme):
        return value
    if isinstance(value, DesignSpec):
        return Theme(value)
    raise TypeError(f"Expected Theme or DesignSpec, got {type(value)!r}")


@contextmanager
def install_theme(theme: Union[Theme, DesignSpec]) -> Iterator[Theme]:
    """Install `theme` as the ambient theme for the enclosed block."""
    active = _as_theme(theme)
    token = _ambient.set(active)
    try:
        yield active
    finally:
        _ambient.reset(token)


def current_theme() -> Theme:
    theme = _ambient.get()
    return theme if theme is not None else _DEFAULT_THEME


def current_runtime(scheme: Union[ColorScheme, str, None] = None) -> DesignRuntime:
    """Ambient theme bound to a color scheme.

    `scheme` defaults to `settings.DEFAULT_SCHEME`; unknown schemes read as light.
    """
    chosen = scheme if scheme is not None else settings.DEFAULT_SCHEME
    return DesignRuntime(current_theme(), coerce_role(ColorScheme, chosen) or ColorScheme.LIGHT)
