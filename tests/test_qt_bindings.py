from dataclasses import replace

import pytest

pytest.importorskip("PyQt6")

from PyQt6.QtGui import QFont, QPalette  # noqa: E402
from PyQt6.QtWidgets import QLabel, QWidget  # noqa: E402

from gentle.design import (  # noqa: E402
    ColorRole,
    ContentSizeCategory,
    DesignSpec,
    EdgeSet,
    InsetRole,
    ResolvedInset,
    TextRole,
    Theme,
    decode_color,
)
from gentle.qt.bindings import (  # noqa: E402
    apply_background,
    apply_inset,
    apply_text_role,
    font_for_text_style,
    margins_for_inset,
    to_qcolor,
)
from gentle.services import install_theme  # noqa: E402

THEME = Theme.default()


def test_to_qcolor_channels():
    c = to_qcolor(decode_color("#4A6EF5"))
    assert (c.red(), c.green(), c.blue(), c.alpha()) == (74, 110, 245, 255)
    assert to_qcolor(decode_color("#111827CC")).alpha() == 204


def test_font_descriptor_translation(qapp):
    headline = font_for_text_style(THEME.text_style(TextRole.HEADLINE_M))
    assert headline.pointSizeF() == pytest.approx(17.0)
    assert headline.bold()
    body = font_for_text_style(THEME.text_style(TextRole.BODY_M))
    assert not body.bold()
    mono = font_for_text_style(THEME.text_style(TextRole.MONO_CODE_M))
    assert mono.fixedPitch()
    assert mono.stretch() == 75


def test_font_keeps_scaled_size(qapp):
    style = THEME.text_style(TextRole.FOOTNOTE_S, ContentSizeCategory.ACCESSIBILITY_LARGE)
    assert font_for_text_style(style).pointSizeF() == pytest.approx(27.0)


def test_uppercase_role(qapp):
    base = DesignSpec.default()
    caption = base.typography.role_spec(TextRole.CAPTION_S)
    spec = base.with_typography(
        base.typography.with_roles({TextRole.CAPTION_S: replace(caption, is_uppercased=True)})
    )
    font = font_for_text_style(Theme(spec).text_style(TextRole.CAPTION_S))
    assert font.capitalization() == QFont.Capitalization.AllUppercase


def test_apply_text_role_uses_ambient_theme(qapp):
    label = QLabel("Hello")
    appearance = apply_text_role(label, TextRole.TITLE_XL, "dark")
    assert label.font().pointSizeF() == pytest.approx(28.0)
    assert label.palette().color(QPalette.ColorRole.WindowText).name() == "#f5f7fa"
    assert appearance.style.line_spacing == 4

    base = DesignSpec.default()
    spec = base.with_colors(base.colors.without("textPrimary"))
    with install_theme(spec):
        apply_text_role(label, TextRole.BODY_M, "light")
    assert label.palette().color(QPalette.ColorRole.WindowText).name() == "#000000"


def test_margins_for_inset():
    inset = ResolvedInset(horizontal=24, vertical=16)
    assert margins_for_inset(inset) == (24, 16, 24, 16)
    assert margins_for_inset(inset, EdgeSet.TOP | EdgeSet.LEADING) == (24, 16, 0, 0)
    assert margins_for_inset(ResolvedInset(horizontal=12, vertical=None)) == (12, 0, 12, 0)


def test_apply_inset_sets_widget_margins(qapp):
    widget = QWidget()
    inset = apply_inset(widget, InsetRole.SCREEN, EdgeSet.HORIZONTAL, theme=THEME)
    assert inset.vertical is None
    m = widget.contentsMargins()
    assert (m.left(), m.top(), m.right(), m.bottom()) == (24, 0, 24, 0)


def test_apply_background_fills_with_role_color(qapp):
    widget = QWidget()
    color = apply_background(widget, ColorRole.SURFACE, "dark", theme=THEME)
    assert color == decode_color("#111827")
    assert widget.autoFillBackground()
    assert widget.palette().color(QPalette.ColorRole.Window).name() == "#111827"

    with install_theme(THEME):
        apply_background(widget, "unknownRole", "light")
    assert widget.palette().color(QPalette.ColorRole.Window).name() == "#000000"
