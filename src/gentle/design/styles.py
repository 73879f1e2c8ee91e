"""Component style resolution (text, buttons, surfaces, text fields).

Maps component roles onto the token categories and returns fully concrete
values, so a presentation binding only has to apply them. Each function is a
thin composition over `gentle.design.theme`; no fallback logic of its own.

Button role table:

============  ============  ============  ============  ==========
role          background    label         border        text role
============  ============  ============  ============  ==========
primary       primaryCTA    onPrimaryCTA  -             headline_m
secondary     surface       primaryCTA    primaryCTA    headline_m
tertiary      background    primaryCTA    -             body_m
destructive   destructive   onPrimaryCTA  -             headline_m
============  ============  ============  ============  ==========
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple, Union

from .color import Color
from .roles import (
    ButtonRole,
    ButtonShape,
    ColorRole,
    ColorScheme,
    ContentSizeCategory,
    InsetRole,
    SurfaceRole,
    TextChrome,
    TextFieldShape,
    TextRole,
    coerce_role,
)
from .theme import ResolvedInset, ResolvedTextStyle, Theme

__all__ = [
    "TextAppearance",
    "ButtonStyle",
    "SurfaceStyle",
    "TextFieldStyle",
    "BUTTON_ROLE_MAP",
    "resolve_text_appearance",
    "resolve_button_style",
    "resolve_surface_style",
    "resolve_text_field_style",
]

PRESSED_SCALE = 0.97
PRESSED_OPACITY = 0.9

# role -> (background, label, border, text role)
BUTTON_ROLE_MAP: Dict[ButtonRole, Tuple[ColorRole, ColorRole, Optional[ColorRole], TextRole]] = {
    ButtonRole.PRIMARY: (ColorRole.PRIMARY_CTA, ColorRole.ON_PRIMARY_CTA, None, TextRole.HEADLINE_M),
    ButtonRole.SECONDARY: (
        ColorRole.SURFACE,
        ColorRole.PRIMARY_CTA,
        ColorRole.PRIMARY_CTA,
        TextRole.HEADLINE_M,
    ),
    ButtonRole.TERTIARY: (ColorRole.BACKGROUND, ColorRole.PRIMARY_CTA, None, TextRole.BODY_M),
    ButtonRole.DESTRUCTIVE: (
        ColorRole.DESTRUCTIVE,
        ColorRole.ON_PRIMARY_CTA,
        None,
        TextRole.HEADLINE_M,
    ),
}


@dataclass(frozen=True)
class TextAppearance:
    style: ResolvedTextStyle
    color_role: ColorRole
    color: Color


@dataclass(frozen=True)
class ButtonStyle:
    text: TextAppearance
    background: Color
    border: Optional[Color]
    corner_radius: float
    padding_horizontal: float
    padding_vertical: float
    pressed_scale: float = PRESSED_SCALE
    pressed_opacity: float = PRESSED_OPACITY


@dataclass(frozen=True)
class SurfaceStyle:
    background: Color
    inset: Optional[ResolvedInset]
    corner_radius: float
    border: Optional[Color]
    shadow_radius: float
    ignores_safe_area: bool = False


@dataclass(frozen=True)
class TextFieldStyle:
    text: TextAppearance
    tint: Color
    fill: Optional[Color]
    border: Optional[Color]
    corner_radius: Optional[float]
    padding_horizontal: float
    padding_vertical: float


def resolve_text_appearance(
    theme: Theme,
    role: Union[TextRole, str],
    scheme: Union[ColorScheme, str] = ColorScheme.LIGHT,
    size_category: Union[ContentSizeCategory, str, None] = None,
    color_role: Union[ColorRole, str, None] = None,
) -> TextAppearance:
    """Text style plus its foreground color; `color_role` overrides the style's own."""
    style = theme.text_style(role, size_category)
    resolved_role = coerce_role(ColorRole, color_role) or style.color_role
    return TextAppearance(style=style, color_role=resolved_role, color=theme.color(resolved_role, scheme))


def resolve_button_style(
    theme: Theme,
    role: Union[ButtonRole, str],
    scheme: Union[ColorScheme, str] = ColorScheme.LIGHT,
    size_category: Union[ContentSizeCategory, str, None] = None,
    shape: Union[ButtonShape, str] = ButtonShape.ROUNDED,
) -> ButtonStyle:
    button_role = coerce_role(ButtonRole, role) or ButtonRole.PRIMARY
    background_role, label_role, border_role, text_role = BUTTON_ROLE_MAP[button_role]
    gap = theme.gap
    radii = theme.radii
    pill = coerce_role(ButtonShape, shape) is ButtonShape.PILL
    return ButtonStyle(
        text=resolve_text_appearance(theme, text_role, scheme, size_category, label_role),
        background=theme.color(background_role, scheme),
        border=theme.color(border_role, scheme) if border_role is not None else None,
        corner_radius=float(radii.pill if pill else radii.medium),
        padding_horizontal=float(gap.xxl),
        padding_vertical=float(gap.l),
    )


def resolve_surface_style(
    theme: Theme,
    role: Union[SurfaceRole, str],
    scheme: Union[ColorScheme, str] = ColorScheme.LIGHT,
) -> SurfaceStyle:
    surface_role = coerce_role(SurfaceRole, role) or SurfaceRole.CARD
    radii = theme.radii
    shadows = theme.shadows
    if surface_role is SurfaceRole.APP_BACKGROUND:
        return SurfaceStyle(
            background=theme.color(ColorRole.BACKGROUND, scheme),
            inset=None,
            corner_radius=0.0,
            border=None,
            shadow_radius=float(shadows.none),
            ignores_safe_area=True,
        )
    if surface_role is SurfaceRole.SURFACE_OVERLAY:
        return SurfaceStyle(
            background=theme.color(ColorRole.SURFACE_OVERLAY, scheme),
            inset=None,
            corner_radius=0.0,
            border=None,
            shadow_radius=float(shadows.none),
        )
    if surface_role is SurfaceRole.CARD_ELEVATED:
        return SurfaceStyle(
            background=theme.color(ColorRole.SURFACE_ELEVATED, scheme),
            inset=theme.inset_value(InsetRole.CARD),
            corner_radius=float(radii.large),
            border=None,
            shadow_radius=float(shadows.medium),
        )
    # card / cardChrome share the bordered look; only card pads its content
    return SurfaceStyle(
        background=theme.color(ColorRole.SURFACE, scheme),
        inset=theme.inset_value(InsetRole.CARD) if surface_role is SurfaceRole.CARD else None,
        corner_radius=float(radii.large),
        border=theme.color(ColorRole.BORDER_SUBTLE, scheme),
        shadow_radius=float(shadows.none),
    )


def resolve_text_field_style(
    theme: Theme,
    role: Union[TextRole, str],
    scheme: Union[ColorScheme, str] = ColorScheme.LIGHT,
    size_category: Union[ContentSizeCategory, str, None] = None,
    chrome: Optional[TextChrome] = None,
    color_role: Union[ColorRole, str, None] = None,
) -> TextFieldStyle:
    chrome = chrome or TextChrome.standalone()
    text = resolve_text_appearance(theme, role, scheme, size_category, color_role)
    tint = theme.color(ColorRole.PRIMARY_CTA, scheme)
    gap = theme.gap
    if chrome.kind == "formRow":
        return TextFieldStyle(text, tint, None, None, None, 0.0, float(gap.s))
    if chrome.kind == "borderless":
        return TextFieldStyle(text, tint, None, None, None, 0.0, 0.0)
    radii = theme.radii
    radius = radii.pill if chrome.shape is TextFieldShape.PILL else radii.medium
    return TextFieldStyle(
        text=text,
        tint=tint,
        fill=theme.color(ColorRole.SURFACE, scheme),
        border=theme.color(ColorRole.BORDER_SUBTLE, scheme),
        corner_radius=float(radius),
        padding_horizontal=float(gap.l),
        padding_vertical=float(gap.m),
    )
