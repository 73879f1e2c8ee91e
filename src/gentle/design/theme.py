"""Theme resolution: (spec, role, context) -> concrete rendering values.

All resolvers are pure functions of their arguments. They never raise for a
missing role, an unknown role string or malformed color data; each category
has a documented fallback:

 - color: missing role -> neutral foreground (black on light, white on dark);
   undecodable hex -> opaque black
 - typography: unknown role -> body role -> hard-coded 17pt body default
 - inset: unknown role -> screen role -> (xl, l); a token outside the scale
   takes that axis of (xl, l)

`Theme` binds a spec (and optionally a custom text scaler) so presentation
code can call ``theme.color(role, scheme)`` without threading the spec
through every call site.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Flag, auto
from typing import Optional, Union

from .color import BLACK, WHITE, Color, decode_color
from .roles import (
    ColorRole,
    ColorScheme,
    ContentSizeCategory,
    FontDesign,
    FontTextStyle,
    FontWeight,
    FontWidth,
    InsetRole,
    SpacingToken,
    TextRole,
    coerce_role,
)
from .scaling import TextScaler, normalize_size_category, table_scaler
from .spec import (
    FALLBACK_AXIS_INSET,
    DesignSpec,
    InsetTokens,
    LayoutTokens,
    RadiusTokens,
    ShadowTokens,
    SpacingScale,
    VisualTokens,
)

__all__ = [
    "EdgeSet",
    "FontDescriptor",
    "ResolvedTextStyle",
    "ResolvedInset",
    "Theme",
    "default_foreground",
    "resolve_color",
    "resolve_text_style",
    "resolve_inset",
]


class EdgeSet(Flag):
    TOP = auto()
    LEADING = auto()
    BOTTOM = auto()
    TRAILING = auto()
    HORIZONTAL = LEADING | TRAILING
    VERTICAL = TOP | BOTTOM
    ALL = TOP | LEADING | BOTTOM | TRAILING


@dataclass(frozen=True)
class FontDescriptor:
    point_size: float
    weight: FontWeight
    design: FontDesign
    width: Optional[FontWidth] = None


@dataclass(frozen=True)
class ResolvedTextStyle:
    font: FontDescriptor
    color_role: ColorRole
    line_spacing: float
    letter_spacing: float
    is_uppercased: bool
    anchor: FontTextStyle = FontTextStyle.BODY


@dataclass(frozen=True)
class ResolvedInset:
    """Per-axis padding; None means "not requested", distinct from 0."""

    horizontal: Optional[float]
    vertical: Optional[float]


def default_foreground(scheme: Union[ColorScheme, str, None]) -> Color:
    return WHITE if coerce_role(ColorScheme, scheme) is ColorScheme.DARK else BLACK


def resolve_color(
    spec: DesignSpec,
    role: Union[ColorRole, str],
    scheme: Union[ColorScheme, str, None] = ColorScheme.LIGHT,
) -> Color:
    pair = spec.colors.pair(role)
    if pair is None:
        return default_foreground(scheme)
    return decode_color(pair.hex_for(scheme))


def resolve_text_style(
    spec: DesignSpec,
    role: Union[TextRole, str],
    size_category: Union[ContentSizeCategory, str, None] = None,
    scaler: TextScaler = table_scaler,
) -> ResolvedTextStyle:
    role_spec = spec.typography.role_spec(role)
    category = normalize_size_category(size_category)
    size = scaler(role_spec.point_size, role_spec.relative_to, category)
    return ResolvedTextStyle(
        font=FontDescriptor(
            point_size=size,
            weight=role_spec.weight,
            design=role_spec.design,
            width=role_spec.width,
        ),
        color_role=role_spec.color_role,
        line_spacing=float(role_spec.line_spacing),
        letter_spacing=float(role_spec.letter_spacing),
        is_uppercased=role_spec.is_uppercased,
        anchor=role_spec.relative_to,
    )


def resolve_inset(
    spec: DesignSpec,
    role: Union[InsetRole, str],
    edges: EdgeSet = EdgeSet.ALL,
) -> ResolvedInset:
    axis = spec.layout.inset.axis_tokens(role)
    scale = spec.layout.scale
    # Tokens outside the scale fall back per axis
    h_token = coerce_role(SpacingToken, axis.horizontal) or FALLBACK_AXIS_INSET.horizontal
    v_token = coerce_role(SpacingToken, axis.vertical) or FALLBACK_AXIS_INSET.vertical
    horizontal = scale.value(h_token) if edges & EdgeSet.HORIZONTAL else None
    vertical = scale.value(v_token) if edges & EdgeSet.VERTICAL else None
    return ResolvedInset(horizontal=horizontal, vertical=vertical)


@dataclass(frozen=True)
class Theme:
    spec: DesignSpec = field(default_factory=DesignSpec.default)
    scaler: TextScaler = field(default=table_scaler, compare=False)

    @classmethod
    def default(cls) -> "Theme":
        return cls(DesignSpec.default())

    # Category accessors -------------------------------------------------
    @property
    def layout(self) -> LayoutTokens:
        return self.spec.layout

    @property
    def visual(self) -> VisualTokens:
        return self.spec.visual

    @property
    def gap(self) -> SpacingScale:
        return self.spec.layout.gap

    @property
    def grid(self) -> SpacingScale:
        return self.spec.layout.grid

    @property
    def touch(self) -> SpacingScale:
        return self.spec.layout.touch

    @property
    def inset(self) -> InsetTokens:
        return self.spec.layout.inset

    @property
    def radii(self) -> RadiusTokens:
        return self.spec.visual.radii

    @property
    def shadows(self) -> ShadowTokens:
        return self.spec.visual.shadows

    # Resolution ---------------------------------------------------------
    def color(
        self, role: Union[ColorRole, str], scheme: Union[ColorScheme, str] = ColorScheme.LIGHT
    ) -> Color:
        return resolve_color(self.spec, role, scheme)

    def text_style(
        self,
        role: Union[TextRole, str],
        size_category: Union[ContentSizeCategory, str, None] = None,
    ) -> ResolvedTextStyle:
        return resolve_text_style(self.spec, role, size_category, scaler=self.scaler)

    def inset_value(
        self, role: Union[InsetRole, str], edges: EdgeSet = EdgeSet.ALL
    ) -> ResolvedInset:
        return resolve_inset(self.spec, role, edges)
