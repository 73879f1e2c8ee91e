"""Theme service.

Host-facing holder of the active theme. The service never mutates a spec; it
swaps the whole `Theme` and reports what changed:

 - `set_spec` / `set_theme` replace the active theme and return a `ThemeDiff`
   (flattened token path -> (old, new)); subscribers receive the same diff.
 - Replacing a theme with an equal one (same tokens, same scaler) is a no-op
   and notifies nobody.
 - `load_or_default` loads a stored spec and, when the file is missing,
   unreadable or malformed, logs the failure and keeps the bundled default.
   This is the only place where a decode error is turned into a fallback;
   callers that want to handle it themselves use `gentle.design.load_spec`
   directly.

A failing subscriber is logged and does not stop delivery to the others.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, List, Mapping, Tuple
import logging

from gentle.config import settings
from gentle.design.serialization import SpecDecodeError, load_spec, spec_to_dict
from gentle.design.spec import DesignSpec
from gentle.design.theme import Theme

from .theme_root import install_theme

_logger = logging.getLogger(__name__)

__all__ = ["ThemeDiff", "ThemeService", "ThemeListener", "flatten_spec"]


@dataclass
class ThemeDiff:
    """Changes between two themes.

    Attributes
    ----------
    changed : dict[str, tuple[Any, Any]]
        Flattened token path -> (old_value, new_value). A side is None when
        the path exists on one side only.
    """

    changed: Dict[str, Tuple[Any, Any]]

    @property
    def no_changes(self) -> bool:  # noqa: D401 - trivial
        return not self.changed

    def keys(self) -> List[str]:
        return sorted(self.changed)


ThemeListener = Callable[[Theme, ThemeDiff], None]


def flatten_spec(spec: DesignSpec) -> Dict[str, Any]:
    """Dotted path -> leaf value view of a spec (serialized key names)."""
    flat: Dict[str, Any] = {}

    def _walk(prefix: str, node: Any) -> None:
        if isinstance(node, Mapping):
            for k, v in node.items():
                _walk(f"{prefix}.{k}" if prefix else str(k), v)
        else:
            flat[prefix] = node

    _walk("", spec_to_dict(spec))
    return flat


def _diff(old: Mapping[str, Any], new: Mapping[str, Any]) -> ThemeDiff:
    changed: Dict[str, Tuple[Any, Any]] = {}
    for k in set(old) | set(new):
        ov = old.get(k)
        nv = new.get(k)
        if ov != nv:
            changed[k] = (ov, nv)
    return ThemeDiff(changed)


@dataclass
class ThemeService:
    theme: Theme = field(default_factory=Theme.default)
    _listeners: List[ThemeListener] = field(default_factory=list)

    @classmethod
    def create_default(cls) -> "ThemeService":
        """Service seeded from `settings.SPEC_PATH` when set, else the bundled spec."""
        svc = cls()
        if settings.SPEC_PATH:
            svc.load_or_default(settings.SPEC_PATH)
        return svc

    # Accessors -------------------------------------------------------------
    @property
    def spec(self) -> DesignSpec:
        return self.theme.spec

    # Mutation --------------------------------------------------------------
    def set_theme(self, theme: Theme) -> ThemeDiff:
        """Replace the active theme.

        A new scaler alone counts as a change: the theme is swapped and
        listeners are notified with an empty token diff.
        """
        if theme == self.theme and theme.scaler is self.theme.scaler:
            return ThemeDiff({})
        diff = _diff(flatten_spec(self.theme.spec), flatten_spec(theme.spec))
        self.theme = theme
        _logger.debug("Theme replaced (%d token changes)", len(diff.changed))
        self._notify(diff)
        return diff

    def set_spec(self, spec: DesignSpec) -> ThemeDiff:
        return self.set_theme(Theme(spec, scaler=self.theme.scaler))

    def reset_to_default(self) -> ThemeDiff:
        return self.set_spec(DesignSpec.default())

    def load_or_default(self, path: str | Path) -> bool:
        """Install the spec stored at `path`; on failure keep the bundled default.

        Returns True when the stored spec was installed.
        """
        try:
            spec = load_spec(path)
        except (OSError, SpecDecodeError) as e:
            _logger.warning("Falling back to default design spec: %s", e)
            self.reset_to_default()
            return False
        self.set_spec(spec)
        return True

    # Subscription ----------------------------------------------------------
    def subscribe(self, listener: ThemeListener) -> Callable[[], None]:
        """Register a change listener; returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self, diff: ThemeDiff) -> None:
        for listener in list(self._listeners):
            try:
                listener(self.theme, diff)
            except Exception:
                _logger.exception("Theme listener %r failed", listener)

    # Ambient ---------------------------------------------------------------
    @contextmanager
    def activate(self) -> Iterator[Theme]:
        """Install the current theme as the ambient theme for a block."""
        with install_theme(self.theme) as theme:
            yield theme

