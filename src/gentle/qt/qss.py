"""QSS generation for resolved component styles.

Qt style sheets have no custom properties, so resolved values are written
straight into rule blocks. Output is plain text and needs no QApplication,
which keeps it testable headless.

Usage:
    style = resolve_button_style(theme, ButtonRole.PRIMARY, ColorScheme.DARK)
    button.setStyleSheet(button_qss(style))
"""

from __future__ import annotations

from typing import List, Optional

from gentle.design.color import Color
from gentle.design.styles import ButtonStyle, SurfaceStyle, TextFieldStyle

__all__ = ["qss_color", "button_qss", "surface_qss", "text_field_qss"]


def qss_color(color: Color) -> str:
    r, g, b, a = color.to_rgba8()
    if a == 255:
        return f"#{r:02X}{g:02X}{b:02X}"
    return f"rgba({r}, {g}, {b}, {a})"


def _px(value: Optional[float]) -> str:
    return f"{int(round(value or 0))}px"


def _block(selector: str, lines: List[str]) -> str:
    body = "\n".join(f"    {line}" for line in lines)
    return f"{selector} {{\n{body}\n}}\n"


def button_qss(style: ButtonStyle, selector: str = "QPushButton") -> str:
    text = style.text
    lines = [
        f"background-color: {qss_color(style.background)};",
        f"color: {qss_color(text.color)};",
        f"border-radius: {_px(style.corner_radius)};",
        f"padding: {_px(style.padding_vertical)} {_px(style.padding_horizontal)};",
        f"font-size: {text.style.font.point_size:g}pt;",
    ]
    if style.border is not None:
        lines.append(f"border: 1px solid {qss_color(style.border)};")
    else:
        lines.append("border: none;")
    return _block(selector, lines)


def surface_qss(style: SurfaceStyle, selector: str = "QFrame") -> str:
    lines = [
        f"background-color: {qss_color(style.background)};",
        f"border-radius: {_px(style.corner_radius)};",
    ]
    if style.border is not None:
        lines.append(f"border: 1px solid {qss_color(style.border)};")
    if style.inset is not None:
        lines.append(f"padding: {_px(style.inset.vertical)} {_px(style.inset.horizontal)};")
    return _block(selector, lines)


def text_field_qss(style: TextFieldStyle, selector: str = "QLineEdit") -> str:
    lines = [
        f"color: {qss_color(style.text.color)};",
        f"selection-background-color: {qss_color(style.tint)};",
        f"padding: {_px(style.padding_vertical)} {_px(style.padding_horizontal)};",
    ]
    if style.fill is not None:
        lines.append(f"background-color: {qss_color(style.fill)};")
    else:
        lines.append("background: transparent;")
    if style.border is not None:
        lines.append(f"border: 1px solid {qss_color(style.border)};")
    else:
        lines.append("border: none;")
    if style.corner_radius is not None:
        lines.append(f"border-radius: {_px(style.corner_radius)};")
    return _block(selector, lines)
