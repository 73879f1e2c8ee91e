"""Theme services: ambient injection point and the host-facing theme holder."""

from .theme_root import install_theme, current_theme, current_runtime  # noqa: F401
from .theme_service import ThemeService, ThemeDiff, flatten_spec  # noqa: F401

__all__ = [
    "install_theme",
    "current_theme",
    "current_runtime",
    "ThemeService",
    "ThemeDiff",
    "flatten_spec",
]
