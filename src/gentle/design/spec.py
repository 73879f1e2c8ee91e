"""Design system spec: the complete, serializable set of design tokens.

The spec is a plain value. It is built once (from the bundled defaults or by
decoding stored JSON) and then only ever replaced wholesale; nothing mutates
it in place. Role-indexed maps are keyed by the role's string value and are
exposed as read-only mappings.

Categories are independently swappable::

    spec = DesignSpec.default().with_colors(my_colors)

Lookups that can miss (`ColorTokens.pair`, `TypographyTokens.role_spec`,
`InsetTokens.axis_tokens`) follow the documented fallback chain and never
raise; resolution of concrete values lives in `gentle.design.theme`.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

from .roles import (
    ColorRole,
    ColorScheme,
    FontDesign,
    FontTextStyle,
    FontWeight,
    FontWidth,
    InsetRole,
    SpacingToken,
    TextRole,
    coerce_role,
    role_name,
)

__all__ = [
    "SPEC_VERSION",
    "ColorPair",
    "ColorTokens",
    "TypographyRoleSpec",
    "TypographyTokens",
    "SpacingScale",
    "AxisInset",
    "InsetTokens",
    "LayoutTokens",
    "RadiusTokens",
    "ShadowTokens",
    "VisualTokens",
    "DesignSpec",
    "FALLBACK_TYPOGRAPHY",
    "FALLBACK_AXIS_INSET",
]

# 0.2.1 adds gap intents and the layout facades
SPEC_VERSION = "0.2.1"

RoleKey = Union[str, Enum]


def _freeze(mapping: Mapping[Any, Any]) -> Mapping[str, Any]:
    return MappingProxyType({role_name(k): v for k, v in mapping.items()})


# --- Colors -------------------------------------------------------------------


@dataclass(frozen=True)
class ColorPair:
    light_hex: str
    dark_hex: str

    def hex_for(self, scheme: Union[ColorScheme, str, None]) -> str:
        # Only "dark" selects the dark variant; everything else is light.
        return self.dark_hex if coerce_role(ColorScheme, scheme) is ColorScheme.DARK else self.light_hex


@dataclass(frozen=True)
class ColorTokens:
    pair_by_role: Mapping[str, ColorPair] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "pair_by_role", _freeze(self.pair_by_role))

    def pair(self, role: RoleKey) -> Optional[ColorPair]:
        return self.pair_by_role.get(role_name(role))

    def without(self, *roles: RoleKey) -> "ColorTokens":
        drop = {role_name(r) for r in roles}
        return ColorTokens({k: v for k, v in self.pair_by_role.items() if k not in drop})

    def with_pairs(self, pairs: Mapping[RoleKey, ColorPair]) -> "ColorTokens":
        merged = dict(self.pair_by_role)
        merged.update({role_name(k): v for k, v in pairs.items()})
        return ColorTokens(merged)

    @classmethod
    def default(cls) -> "ColorTokens":
        R = ColorRole
        return cls(
            {
                # Text
                R.TEXT_PRIMARY: ColorPair("#1F2933", "#F5F7FA"),
                R.TEXT_SECONDARY: ColorPair("#4B5563", "#C7CDD4"),
                R.TEXT_TERTIARY: ColorPair("#6B7280", "#9AA0A6"),
                # Surfaces
                R.BACKGROUND: ColorPair("#FFFFFF", "#0B0F19"),
                R.SURFACE: ColorPair("#FAFAFE", "#111827"),
                R.SURFACE_OVERLAY: ColorPair("#111827CC", "#020617CC"),
                R.ON_SURFACE_OVERLAY_PRIMARY: ColorPair("#F9FAFB", "#F9FAFB"),
                R.ON_SURFACE_OVERLAY_SECONDARY: ColorPair("#D1D5DB", "#D1D5DB"),
                R.SURFACE_ELEVATED: ColorPair("#FFFFFF", "#1F2937"),
                R.BORDER_SUBTLE: ColorPair("#E5E7EB", "#374151"),
                # Actions / status
                R.PRIMARY_CTA: ColorPair("#4A6EF5", "#3B82F6"),
                R.ON_PRIMARY_CTA: ColorPair("#FFFFFF", "#FFFFFF"),
                R.DESTRUCTIVE: ColorPair("#E35D5B", "#F87171"),
                # Theme
                R.THEME_PRIMARY: ColorPair("#4A6EF5", "#3B82F6"),
                R.THEME_SECONDARY: ColorPair("#8FA2FF", "#93C5FD"),
            }
        )


# --- Typography ---------------------------------------------------------------


@dataclass(frozen=True)
class TypographyRoleSpec:
    """Per text role typography record.

    `relative_to` is the accessibility anchor: it selects the scaling curve
    applied to `point_size`, so roles sharing an anchor scale identically.
    """

    point_size: float
    weight: FontWeight
    design: FontDesign
    relative_to: FontTextStyle
    width: Optional[FontWidth] = None
    line_spacing: float = 0.0
    letter_spacing: float = 0.0
    is_uppercased: bool = False
    color_role: ColorRole = ColorRole.TEXT_PRIMARY


FALLBACK_TYPOGRAPHY = TypographyRoleSpec(
    point_size=17.0,
    weight=FontWeight.REGULAR,
    design=FontDesign.DEFAULT,
    relative_to=FontTextStyle.BODY,
    line_spacing=2.0,
    color_role=ColorRole.TEXT_PRIMARY,
)


@dataclass(frozen=True)
class TypographyTokens:
    roles: Mapping[str, TypographyRoleSpec] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "roles", _freeze(self.roles))

    def role_spec(self, role: RoleKey) -> TypographyRoleSpec:
        """Role spec, else the body role's spec, else a hard-coded body default."""
        found = self.roles.get(role_name(role))
        if found is not None:
            return found
        body = self.roles.get(TextRole.BODY_M.value)
        if body is not None:
            return body
        return FALLBACK_TYPOGRAPHY

    def with_roles(self, roles: Mapping[RoleKey, TypographyRoleSpec]) -> "TypographyTokens":
        merged = dict(self.roles)
        merged.update({role_name(k): v for k, v in roles.items()})
        return TypographyTokens(merged)

    @classmethod
    def default(cls) -> "TypographyTokens":
        T, W, D, A, C = TextRole, FontWeight, FontDesign, FontTextStyle, ColorRole
        return cls(
            {
                T.LARGE_TITLE_XXL: TypographyRoleSpec(
                    34, W.BOLD, D.ROUNDED, A.LARGE_TITLE, line_spacing=6
                ),
                T.TITLE_XL: TypographyRoleSpec(28, W.BOLD, D.ROUNDED, A.TITLE, line_spacing=4),
                T.TITLE2_L: TypographyRoleSpec(
                    22, W.SEMIBOLD, D.ROUNDED, A.TITLE2, line_spacing=3
                ),
                T.TITLE3_ML: TypographyRoleSpec(
                    20, W.SEMIBOLD, D.ROUNDED, A.TITLE3, line_spacing=3
                ),
                T.HEADLINE_M: TypographyRoleSpec(17, W.SEMIBOLD, D.DEFAULT, A.HEADLINE),
                T.BODY_M: TypographyRoleSpec(17, W.REGULAR, D.DEFAULT, A.BODY, line_spacing=2),
                T.BODY_SECONDARY_M: TypographyRoleSpec(
                    17, W.REGULAR, D.DEFAULT, A.BODY, line_spacing=2, color_role=C.TEXT_SECONDARY
                ),
                T.MONO_CODE_M: TypographyRoleSpec(
                    17,
                    W.REGULAR,
                    D.MONOSPACED,
                    A.BODY,
                    width=FontWidth.CONDENSED,
                    letter_spacing=0.3,
                ),
                T.CALLOUT_MS: TypographyRoleSpec(
                    16, W.REGULAR, D.DEFAULT, A.CALLOUT, color_role=C.TEXT_SECONDARY
                ),
                T.SUBHEADLINE_MS: TypographyRoleSpec(
                    15, W.REGULAR, D.DEFAULT, A.SUBHEADLINE, color_role=C.TEXT_SECONDARY
                ),
                T.FOOTNOTE_S: TypographyRoleSpec(
                    13, W.REGULAR, D.DEFAULT, A.FOOTNOTE, color_role=C.TEXT_TERTIARY
                ),
                T.CAPTION_S: TypographyRoleSpec(
                    12, W.REGULAR, D.DEFAULT, A.CAPTION, color_role=C.TEXT_TERTIARY
                ),
                T.CAPTION2_S: TypographyRoleSpec(
                    11, W.REGULAR, D.DEFAULT, A.CAPTION2, color_role=C.TEXT_TERTIARY
                ),
            }
        )


# --- Layout -------------------------------------------------------------------


@dataclass(frozen=True)
class SpacingScale:
    """Six named magnitudes, xs .. xxl.

    Backs the sibling gap, grid gap and touch target scales. Ordering is
    expected but not enforced; see `is_monotonic`.
    """

    xs: float = 4
    s: float = 8
    m: float = 12
    l: float = 16  # noqa: E741
    xl: float = 24
    xxl: float = 32

    def value(self, token: Union[SpacingToken, str]) -> float:
        tok = coerce_role(SpacingToken, token)
        if tok is None:
            raise KeyError(f"Unknown spacing token: {token}")
        return getattr(self, tok.value)

    def values(self) -> Tuple[float, ...]:
        return tuple(getattr(self, t.value) for t in SpacingToken)

    def is_monotonic(self) -> bool:
        vals = self.values()
        return all(a <= b for a, b in zip(vals, vals[1:]))

    @classmethod
    def default(cls) -> "SpacingScale":
        return cls()


@dataclass(frozen=True)
class AxisInset:
    """Scale token references for one container role, one per axis."""

    horizontal: SpacingToken
    vertical: SpacingToken


FALLBACK_AXIS_INSET = AxisInset(SpacingToken.XL, SpacingToken.L)


@dataclass(frozen=True)
class InsetTokens:
    tokens_by_role: Mapping[str, AxisInset] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "tokens_by_role", _freeze(self.tokens_by_role))

    def axis_tokens(self, role: RoleKey) -> AxisInset:
        """Role tokens, else the screen role's tokens, else (xl, l)."""
        found = self.tokens_by_role.get(role_name(role))
        if found is not None:
            return found
        screen = self.tokens_by_role.get(InsetRole.SCREEN.value)
        if screen is not None:
            return screen
        return FALLBACK_AXIS_INSET

    @classmethod
    def default(cls) -> "InsetTokens":
        S = SpacingToken
        return cls(
            {
                InsetRole.SCREEN: AxisInset(S.XL, S.L),
                InsetRole.CARD: AxisInset(S.M, S.M),
                InsetRole.CONTROL: AxisInset(S.L, S.S),
                InsetRole.LIST_ROW: AxisInset(S.L, S.S),
            }
        )


@dataclass(frozen=True)
class LayoutTokens:
    # Canonical scale referenced by inset roles
    scale: SpacingScale = field(default_factory=SpacingScale.default)
    gap: SpacingScale = field(default_factory=SpacingScale.default)
    grid: SpacingScale = field(default_factory=SpacingScale.default)
    touch: SpacingScale = field(default_factory=SpacingScale.default)
    inset: InsetTokens = field(default_factory=InsetTokens.default)

    def scales(self) -> Dict[str, SpacingScale]:
        return {"scale": self.scale, "gap": self.gap, "grid": self.grid, "touch": self.touch}

    @classmethod
    def default(cls) -> "LayoutTokens":
        return cls()


# --- Visual -------------------------------------------------------------------


@dataclass(frozen=True)
class RadiusTokens:
    small: float = 8
    medium: float = 12
    large: float = 20
    pill: float = 999


@dataclass(frozen=True)
class ShadowTokens:
    none: float = 0
    small: float = 2
    medium: float = 6


@dataclass(frozen=True)
class VisualTokens:
    radii: RadiusTokens = field(default_factory=RadiusTokens)
    shadows: ShadowTokens = field(default_factory=ShadowTokens)

    @classmethod
    def default(cls) -> "VisualTokens":
        return cls()


# --- Aggregate ----------------------------------------------------------------


@dataclass(frozen=True)
class DesignSpec:
    colors: ColorTokens = field(default_factory=ColorTokens.default)
    typography: TypographyTokens = field(default_factory=TypographyTokens.default)
    layout: LayoutTokens = field(default_factory=LayoutTokens.default)
    visual: VisualTokens = field(default_factory=VisualTokens.default)
    spec_version: str = SPEC_VERSION

    @classmethod
    def default(cls) -> "DesignSpec":
        return cls()

    def with_colors(self, colors: ColorTokens) -> "DesignSpec":
        return replace(self, colors=colors)

    def with_typography(self, typography: TypographyTokens) -> "DesignSpec":
        return replace(self, typography=typography)

    def with_layout(self, layout: LayoutTokens) -> "DesignSpec":
        return replace(self, layout=layout)

    def with_visual(self, visual: VisualTokens) -> "DesignSpec":
        return replace(self, visual=visual)

    def unknown_role_keys(self) -> Dict[str, Iterable[str]]:
        """Map keys that are not members of the current role enumerations.

        Such keys come from specs written by a newer schema; they are kept
        (and re-encoded) but are never selected by typed lookups.
        """
        return {
            "colors": sorted(k for k in self.colors.pair_by_role if coerce_role(ColorRole, k) is None),
            "typography": sorted(k for k in self.typography.roles if coerce_role(TextRole, k) is None),
            "inset": sorted(
                k for k in self.layout.inset.tokens_by_role if coerce_role(InsetRole, k) is None
            ),
        }
