"""Intent facades for call-site ergonomics.

Read-only projections over the layout tokens. They rename, nothing more::

    layout = LayoutFacade(theme.layout)
    layout.stack.regular      # == scale.m
    layout.grid.value(GapIntent.MICRO)
    layout.gap.l              # raw scale access for fine tuning

`DesignRuntime` binds a theme to one color scheme so a view can ask for
``runtime.surface`` instead of ``theme.color(ColorRole.SURFACE, scheme)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Union

from .color import Color
from .roles import ColorRole, ColorScheme, GapIntent, SpacingToken, coerce_role
from .spec import InsetTokens, LayoutTokens, RadiusTokens, ShadowTokens, SpacingScale, VisualTokens
from .theme import Theme

__all__ = ["GAP_INTENT_MAP", "GapScaleFacade", "LayoutFacade", "DesignRuntime"]

# None maps to a literal zero; every other intent names a scale step.
GAP_INTENT_MAP: Dict[GapIntent, Union[SpacingToken, None]] = {
    GapIntent.NONE: None,
    GapIntent.MICRO: SpacingToken.XS,
    GapIntent.TIGHT: SpacingToken.S,
    GapIntent.REGULAR: SpacingToken.M,
    GapIntent.AMPLE: SpacingToken.L,
    GapIntent.LOOSE: SpacingToken.XL,
    GapIntent.EXPANSIVE: SpacingToken.XXL,
}


class GapScaleFacade:
    __slots__ = ("_scale",)

    def __init__(self, scale: SpacingScale) -> None:
        self._scale = scale

    def __eq__(self, other: object) -> bool:
        return isinstance(other, GapScaleFacade) and other._scale == self._scale

    def __repr__(self) -> str:
        return f"GapScaleFacade({self._scale!r})"

    # Raw values ------------------------------------------------------------
    @property
    def xs(self) -> float:
        return float(self._scale.xs)

    @property
    def s(self) -> float:
        return float(self._scale.s)

    @property
    def m(self) -> float:
        return float(self._scale.m)

    @property
    def l(self) -> float:  # noqa: E743
        return float(self._scale.l)

    @property
    def xl(self) -> float:
        return float(self._scale.xl)

    @property
    def xxl(self) -> float:
        return float(self._scale.xxl)

    def value(self, key: Union[GapIntent, SpacingToken, str]) -> float:
        """Magnitude for a gap intent or a raw spacing token.

        Strings are matched as intents first, then as tokens.
        """
        if isinstance(key, SpacingToken):
            return float(self._scale.value(key))
        intent = coerce_role(GapIntent, key)
        if intent is not None:
            token = GAP_INTENT_MAP[intent]
            return 0.0 if token is None else float(self._scale.value(token))
        return float(self._scale.value(key))

    # Intent values ---------------------------------------------------------
    @property
    def none(self) -> float:
        return self.value(GapIntent.NONE)

    @property
    def micro(self) -> float:
        return self.value(GapIntent.MICRO)

    @property
    def tight(self) -> float:
        return self.value(GapIntent.TIGHT)

    @property
    def regular(self) -> float:
        return self.value(GapIntent.REGULAR)

    @property
    def ample(self) -> float:
        return self.value(GapIntent.AMPLE)

    @property
    def loose(self) -> float:
        return self.value(GapIntent.LOOSE)

    @property
    def expansive(self) -> float:
        return self.value(GapIntent.EXPANSIVE)


@dataclass(frozen=True)
class LayoutFacade:
    tokens: LayoutTokens

    @property
    def gap(self) -> GapScaleFacade:
        return GapScaleFacade(self.tokens.gap)

    @property
    def stack(self) -> GapScaleFacade:
        return GapScaleFacade(self.tokens.gap)

    @property
    def list(self) -> GapScaleFacade:
        return GapScaleFacade(self.tokens.gap)

    @property
    def grid(self) -> GapScaleFacade:
        return GapScaleFacade(self.tokens.grid)

    @property
    def touch(self) -> GapScaleFacade:
        return GapScaleFacade(self.tokens.touch)

    @property
    def inset(self) -> InsetTokens:
        # Resolved to numbers via Theme.inset_value
        return self.tokens.inset


@dataclass(frozen=True)
class DesignRuntime:
    theme: Theme
    scheme: ColorScheme = ColorScheme.LIGHT

    @property
    def layout(self) -> LayoutFacade:
        return LayoutFacade(self.theme.layout)

    @property
    def visual(self) -> VisualTokens:
        return self.theme.visual

    @property
    def radii(self) -> RadiusTokens:
        return self.theme.radii

    @property
    def shadows(self) -> ShadowTokens:
        return self.theme.shadows

    def color(self, role: Union[ColorRole, str]) -> Color:
        return self.theme.color(role, self.scheme)

    @property
    def surface(self) -> Color:
        return self.color(ColorRole.SURFACE)

    @property
    def background(self) -> Color:
        return self.color(ColorRole.BACKGROUND)

    @property
    def border_subtle(self) -> Color:
        return self.color(ColorRole.BORDER_SUBTLE)

    @property
    def text_primary(self) -> Color:
        return self.color(ColorRole.TEXT_PRIMARY)

    @property
    def theme_primary(self) -> Color:
        return self.color(ColorRole.THEME_PRIMARY)
