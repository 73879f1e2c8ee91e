from gentle.design import (
    ButtonRole,
    ButtonShape,
    ColorScheme,
    SurfaceRole,
    TextChrome,
    TextRole,
    Theme,
    decode_color,
    resolve_button_style,
    resolve_surface_style,
    resolve_text_field_style,
)
from gentle.qt.qss import button_qss, qss_color, surface_qss, text_field_qss

THEME = Theme.default()


def test_qss_color_forms():
    assert qss_color(decode_color("#4a6ef5")) == "#4A6EF5"
    assert qss_color(decode_color("#111827CC")) == "rgba(17, 24, 39, 204)"


def test_primary_button_block():
    css = button_qss(resolve_button_style(THEME, ButtonRole.PRIMARY))
    assert css.startswith("QPushButton {\n")
    assert css.endswith("}\n")
    assert "background-color: #4A6EF5;" in css
    assert "color: #FFFFFF;" in css
    assert "border-radius: 12px;" in css
    assert "padding: 16px 32px;" in css
    assert "font-size: 17pt;" in css
    assert "border: none;" in css


def test_secondary_pill_button_block():
    style = resolve_button_style(THEME, ButtonRole.SECONDARY, ColorScheme.DARK, shape=ButtonShape.PILL)
    css = button_qss(style, selector="QPushButton#save")
    assert css.startswith("QPushButton#save {")
    assert "border: 1px solid #3B82F6;" in css
    assert "border-radius: 999px;" in css


def test_surface_blocks():
    card = surface_qss(resolve_surface_style(THEME, SurfaceRole.CARD))
    assert "padding: 12px 12px;" in card
    assert "border: 1px solid #E5E7EB;" in card
    overlay = surface_qss(resolve_surface_style(THEME, SurfaceRole.SURFACE_OVERLAY))
    assert "background-color: rgba(17, 24, 39, 204);" in overlay
    assert "padding" not in overlay


def test_text_field_blocks():
    standalone = text_field_qss(resolve_text_field_style(THEME, TextRole.BODY_M))
    assert "background-color: #FAFAFE;" in standalone
    assert "selection-background-color: #4A6EF5;" in standalone
    assert "padding: 12px 16px;" in standalone
    row = text_field_qss(resolve_text_field_style(THEME, TextRole.BODY_M, chrome=TextChrome.form_row()))
    assert "background: transparent;" in row
    assert "border: none;" in row
    assert "border-radius" not in row
