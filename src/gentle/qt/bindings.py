"""PyQt6 presentation bindings.

Applies resolved values to Qt objects. Everything numeric is decided by the
resolver; this module only translates descriptors into `QFont` / `QColor` /
margins. Line spacing has no QWidget-level equivalent and is left to the
caller (rich text or a custom paint path).

Point sizes are applied with `setPointSizeF`, so the accessibility scaling of
the resolver survives intact.
"""

from __future__ import annotations

from typing import Dict, Optional, Union

from PyQt6.QtGui import QColor, QFont, QPalette

from gentle.config import settings
from gentle.design.color import Color
from gentle.design.roles import (
    ColorRole,
    ColorScheme,
    ContentSizeCategory,
    FontDesign,
    FontWeight,
    FontWidth,
    InsetRole,
    TextRole,
)
from gentle.design.styles import TextAppearance, resolve_text_appearance
from gentle.design.theme import EdgeSet, ResolvedInset, ResolvedTextStyle, Theme
from gentle.services.theme_root import current_theme

__all__ = [
    "to_qcolor",
    "font_for_text_style",
    "apply_text_role",
    "apply_background",
    "apply_inset",
    "margins_for_inset",
]

_WEIGHT_MAP: Dict[FontWeight, QFont.Weight] = {
    FontWeight.ULTRA_LIGHT: QFont.Weight.ExtraLight,
    FontWeight.THIN: QFont.Weight.Thin,
    FontWeight.LIGHT: QFont.Weight.Light,
    FontWeight.REGULAR: QFont.Weight.Normal,
    FontWeight.MEDIUM: QFont.Weight.Medium,
    FontWeight.SEMIBOLD: QFont.Weight.DemiBold,
    FontWeight.BOLD: QFont.Weight.Bold,
    FontWeight.HEAVY: QFont.Weight.ExtraBold,
    FontWeight.BLACK: QFont.Weight.Black,
}

_STYLE_HINT_MAP: Dict[FontDesign, QFont.StyleHint] = {
    FontDesign.DEFAULT: QFont.StyleHint.SansSerif,
    FontDesign.SERIF: QFont.StyleHint.Serif,
    # Qt has no rounded family hint; sans serif is the closest generic
    FontDesign.ROUNDED: QFont.StyleHint.SansSerif,
    FontDesign.MONOSPACED: QFont.StyleHint.Monospace,
}

# Percent stretch values (QFont.Stretch)
_STRETCH_MAP: Dict[FontWidth, int] = {
    FontWidth.COMPRESSED: 62,
    FontWidth.CONDENSED: 75,
    FontWidth.STANDARD: 100,
    FontWidth.EXPANDED: 125,
}


def to_qcolor(color: Color) -> QColor:
    return QColor.fromRgbF(color.red, color.green, color.blue, color.alpha)


def font_for_text_style(style: ResolvedTextStyle, family: Optional[str] = None) -> QFont:
    desc = style.font
    f = QFont(family) if family else QFont()
    f.setStyleHint(_STYLE_HINT_MAP.get(desc.design, QFont.StyleHint.SansSerif))
    if desc.design is FontDesign.MONOSPACED:
        f.setFixedPitch(True)
    f.setPointSizeF(max(1.0, float(desc.point_size)))
    f.setWeight(_WEIGHT_MAP.get(desc.weight, QFont.Weight.Normal))
    if desc.width is not None:
        f.setStretch(_STRETCH_MAP[desc.width])
    if style.letter_spacing:
        f.setLetterSpacing(QFont.SpacingType.AbsoluteSpacing, float(style.letter_spacing))
    if style.is_uppercased:
        f.setCapitalization(QFont.Capitalization.AllUppercase)
    return f


def apply_text_role(
    widget,
    role: Union[TextRole, str],
    scheme: Union[ColorScheme, str, None] = None,
    size_category: Union[ContentSizeCategory, str, None] = None,
    color_role: Union[ColorRole, str, None] = None,
    theme: Optional[Theme] = None,
) -> TextAppearance:
    """Set font and foreground color of `widget` for a text role.

    Uses the ambient theme when `theme` is omitted and the configured default
    scheme and size category when those are omitted. Returns the resolved
    appearance so callers can apply line spacing themselves.
    """
    active = theme or current_theme()
    if scheme is None:
        scheme = settings.DEFAULT_SCHEME
    if size_category is None:
        size_category = settings.DEFAULT_SIZE_CATEGORY
    appearance = resolve_text_appearance(active, role, scheme, size_category, color_role)
    widget.setFont(font_for_text_style(appearance.style))
    qcolor = to_qcolor(appearance.color)
    palette = widget.palette()
    palette.setColor(QPalette.ColorRole.WindowText, qcolor)
    palette.setColor(QPalette.ColorRole.Text, qcolor)
    widget.setPalette(palette)
    return appearance


def apply_background(
    widget,
    color_role: Union[ColorRole, str] = ColorRole.BACKGROUND,
    scheme: Union[ColorScheme, str, None] = None,
    theme: Optional[Theme] = None,
) -> Color:
    """Fill the widget background with a color role; returns the resolved color."""
    active = theme or current_theme()
    if scheme is None:
        scheme = settings.DEFAULT_SCHEME
    color = active.color(color_role, scheme)
    palette = widget.palette()
    palette.setColor(QPalette.ColorRole.Window, to_qcolor(color))
    widget.setPalette(palette)
    widget.setAutoFillBackground(True)
    return color


def margins_for_inset(
    inset: ResolvedInset, edges: EdgeSet = EdgeSet.ALL
) -> tuple[int, int, int, int]:
    """(left, top, right, bottom); absent axes and unrequested edges become 0."""
    h = int(round(inset.horizontal)) if inset.horizontal is not None else 0
    v = int(round(inset.vertical)) if inset.vertical is not None else 0

    def _edge(flag: EdgeSet, value: int) -> int:
        return value if edges & flag else 0

    return (
        _edge(EdgeSet.LEADING, h),
        _edge(EdgeSet.TOP, v),
        _edge(EdgeSet.TRAILING, h),
        _edge(EdgeSet.BOTTOM, v),
    )


def apply_inset(
    target,
    role: Union[InsetRole, str],
    edges: EdgeSet = EdgeSet.ALL,
    theme: Optional[Theme] = None,
) -> ResolvedInset:
    """Set content margins on a QWidget or QLayout from an inset role."""
    active = theme or current_theme()
    inset = active.inset_value(role, edges)
    target.setContentsMargins(*margins_for_inset(inset, edges))
    return inset
