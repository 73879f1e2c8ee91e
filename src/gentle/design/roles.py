"""Semantic role enumerations.

Every token category is indexed by a closed set of string-valued roles. The
serialized form of a role is always its string value (never an ordinal), so
stored specs remain readable when roles are added later.

Naming guide for text roles (conventions, not strict rules):
 - Base role: largeTitle, title, headline, body, callout, caption, ...
 - Numeric suffixes (2, 3) mirror the platform semantic styles (title2, caption2).
 - Order suffixes (Secondary) reduce emphasis via color without changing the font.
 - Ramp suffix (_xxl .. _s) is the relative position in the typography scale,
   not a fixed point size.

`coerce_role` turns a member or raw string into a member, returning None for
strings outside the enumeration. Resolvers treat None as "absent role" and
fall back instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Type, TypeVar, Union

__all__ = [
    "TextRole",
    "TextRamp",
    "ColorRole",
    "ButtonRole",
    "ButtonShape",
    "TextFieldShape",
    "TextChrome",
    "SurfaceRole",
    "GapIntent",
    "FontTextStyle",
    "FontDesign",
    "FontWidth",
    "FontWeight",
    "SpacingToken",
    "InsetRole",
    "ColorScheme",
    "ContentSizeCategory",
    "coerce_role",
    "role_name",
]

E = TypeVar("E", bound=Enum)


class TextRamp(str, Enum):
    XXL = "xxl"
    XL = "xl"
    L = "l"
    ML = "ml"
    M = "m"
    MS = "ms"
    S = "s"


class TextRole(str, Enum):
    # Ramp legend: xxl > xl > l > ml > m > ms > s
    LARGE_TITLE_XXL = "largeTitle_xxl"
    TITLE_XL = "title_xl"
    TITLE2_L = "title2_l"
    TITLE3_ML = "title3_ml"  # medium leaning large

    HEADLINE_M = "headline_m"
    BODY_M = "body_m"
    BODY_SECONDARY_M = "bodySecondary_m"
    MONO_CODE_M = "monoCode_m"

    CALLOUT_MS = "callout_ms"  # medium leaning small
    SUBHEADLINE_MS = "subheadline_ms"

    FOOTNOTE_S = "footnote_s"
    CAPTION_S = "caption_s"
    CAPTION2_S = "caption2_s"

    @property
    def ramp(self) -> TextRamp:
        return _RAMP_BY_ROLE[self]


_RAMP_BY_ROLE = {
    TextRole.LARGE_TITLE_XXL: TextRamp.XXL,
    TextRole.TITLE_XL: TextRamp.XL,
    TextRole.TITLE2_L: TextRamp.L,
    TextRole.TITLE3_ML: TextRamp.ML,
    TextRole.HEADLINE_M: TextRamp.M,
    TextRole.BODY_M: TextRamp.M,
    TextRole.BODY_SECONDARY_M: TextRamp.M,
    TextRole.MONO_CODE_M: TextRamp.M,
    TextRole.CALLOUT_MS: TextRamp.MS,
    TextRole.SUBHEADLINE_MS: TextRamp.MS,
    TextRole.FOOTNOTE_S: TextRamp.S,
    TextRole.CAPTION_S: TextRamp.S,
    TextRole.CAPTION2_S: TextRamp.S,
}


class ColorRole(str, Enum):
    TEXT_PRIMARY = "textPrimary"
    TEXT_SECONDARY = "textSecondary"
    TEXT_TERTIARY = "textTertiary"
    ON_PRIMARY_CTA = "onPrimaryCTA"
    BACKGROUND = "background"
    SURFACE = "surface"
    SURFACE_ELEVATED = "surfaceElevated"
    SURFACE_OVERLAY = "surfaceOverlay"
    ON_SURFACE_OVERLAY_PRIMARY = "onSurfaceOverlayPrimary"
    ON_SURFACE_OVERLAY_SECONDARY = "onSurfaceOverlaySecondary"
    BORDER_SUBTLE = "borderSubtle"
    DESTRUCTIVE = "destructive"
    PRIMARY_CTA = "primaryCTA"
    THEME_PRIMARY = "themePrimary"
    THEME_SECONDARY = "themeSecondary"


class ButtonRole(str, Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    TERTIARY = "tertiary"
    DESTRUCTIVE = "destructive"


class ButtonShape(str, Enum):
    """Geometry of a button, independent of its intent."""

    ROUNDED = "rounded"
    PILL = "pill"


class TextFieldShape(str, Enum):
    """Container shape of a standalone text input."""

    ROUNDED = "rounded"
    PILL = "pill"


@dataclass(frozen=True)
class TextChrome:
    """Ownership of text input affordances.

    - standalone: the field draws its own container (fill, border, shape)
    - formRow: the surrounding form row provides the chrome
    - borderless: no container at all
    """

    kind: str = "standalone"
    shape: TextFieldShape = TextFieldShape.ROUNDED

    @classmethod
    def standalone(cls, shape: TextFieldShape = TextFieldShape.ROUNDED) -> "TextChrome":
        return cls("standalone", shape)

    @classmethod
    def form_row(cls) -> "TextChrome":
        return cls("formRow")

    @classmethod
    def borderless(cls) -> "TextChrome":
        return cls("borderless")


class SurfaceRole(str, Enum):
    APP_BACKGROUND = "appBackground"
    CARD = "card"
    CARD_CHROME = "cardChrome"  # card look without padding
    CARD_ELEVATED = "cardElevated"
    SURFACE_OVERLAY = "surfaceOverlay"


class GapIntent(str, Enum):
    """Spacing intent between siblings (stacks, lists, grids)."""

    NONE = "none"
    MICRO = "micro"
    TIGHT = "tight"
    REGULAR = "regular"
    AMPLE = "ample"
    LOOSE = "loose"
    EXPANSIVE = "expansive"


class FontTextStyle(str, Enum):
    """Accessibility anchor: the semantic text category a role scales with."""

    LARGE_TITLE = "largeTitle"
    TITLE = "title"
    TITLE2 = "title2"
    TITLE3 = "title3"
    HEADLINE = "headline"
    BODY = "body"
    CALLOUT = "callout"
    SUBHEADLINE = "subheadline"
    FOOTNOTE = "footnote"
    CAPTION = "caption"
    CAPTION2 = "caption2"


class FontDesign(str, Enum):
    DEFAULT = "default"
    SERIF = "serif"
    ROUNDED = "rounded"
    MONOSPACED = "monospaced"


class FontWidth(str, Enum):
    COMPRESSED = "compressed"
    CONDENSED = "condensed"
    STANDARD = "standard"
    EXPANDED = "expanded"


class FontWeight(str, Enum):
    ULTRA_LIGHT = "ultraLight"
    THIN = "thin"
    LIGHT = "light"
    REGULAR = "regular"
    MEDIUM = "medium"
    SEMIBOLD = "semibold"
    BOLD = "bold"
    HEAVY = "heavy"
    BLACK = "black"


class SpacingToken(str, Enum):
    XS = "xs"
    S = "s"
    M = "m"
    L = "l"
    XL = "xl"
    XXL = "xxl"


class InsetRole(str, Enum):
    SCREEN = "screen"
    CARD = "card"
    CONTROL = "control"
    LIST_ROW = "listRow"


class ColorScheme(str, Enum):
    LIGHT = "light"
    DARK = "dark"


class ContentSizeCategory(str, Enum):
    """User preferred text size, ordered from smallest to largest."""

    EXTRA_SMALL = "extraSmall"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"  # system default
    EXTRA_LARGE = "extraLarge"
    EXTRA_EXTRA_LARGE = "extraExtraLarge"
    EXTRA_EXTRA_EXTRA_LARGE = "extraExtraExtraLarge"
    ACCESSIBILITY_MEDIUM = "accessibilityMedium"
    ACCESSIBILITY_LARGE = "accessibilityLarge"
    ACCESSIBILITY_EXTRA_LARGE = "accessibilityExtraLarge"
    ACCESSIBILITY_EXTRA_EXTRA_LARGE = "accessibilityExtraExtraLarge"
    ACCESSIBILITY_EXTRA_EXTRA_EXTRA_LARGE = "accessibilityExtraExtraExtraLarge"

    @property
    def is_accessibility(self) -> bool:
        return self.value.startswith("accessibility")


def coerce_role(enum_cls: Type[E], value: Union[E, str, None]) -> Optional[E]:
    """Return the enum member for `value` or None when it is not a member."""
    if value is None:
        return None
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        return None


def role_name(value: Union[Enum, str]) -> str:
    """Stable string key for a role (its value, never its ordinal)."""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)
