from gentle.design import (
    AxisInset,
    ColorPair,
    ColorRole,
    ColorScheme,
    ColorTokens,
    ContentSizeCategory,
    DesignSpec,
    EdgeSet,
    FontTextStyle,
    InsetRole,
    InsetTokens,
    LayoutTokens,
    SpacingScale,
    SpacingToken,
    TextRole,
    Theme,
    TypographyRoleSpec,
    TypographyTokens,
    decode_color,
    resolve_color,
    resolve_inset,
    resolve_text_style,
)
from gentle.design.color import BLACK, WHITE
from gentle.design.roles import FontDesign, FontWeight

SPEC = DesignSpec.default()


def test_color_resolution_per_scheme():
    assert resolve_color(SPEC, ColorRole.PRIMARY_CTA, ColorScheme.LIGHT).to_rgba8() == (74, 110, 245, 255)
    assert resolve_color(SPEC, ColorRole.PRIMARY_CTA, ColorScheme.DARK) == decode_color("#3B82F6")


def test_missing_color_role_falls_back_without_error():
    spec = SPEC.with_colors(SPEC.colors.without(ColorRole.DESTRUCTIVE))
    assert resolve_color(spec, ColorRole.DESTRUCTIVE, ColorScheme.LIGHT) == BLACK
    assert resolve_color(spec, ColorRole.DESTRUCTIVE, ColorScheme.DARK) == WHITE
    assert resolve_color(spec, "notARole") == BLACK


def test_malformed_hex_in_spec_resolves_black():
    colors = ColorTokens({ColorRole.SURFACE: ColorPair("not-a-color", "#12")})
    spec = SPEC.with_colors(colors)
    assert resolve_color(spec, ColorRole.SURFACE, ColorScheme.LIGHT) == BLACK
    assert resolve_color(spec, ColorRole.SURFACE, ColorScheme.DARK) == BLACK


def test_text_style_default_body():
    style = resolve_text_style(SPEC, TextRole.BODY_M)
    assert style.font.point_size == 17
    assert style.font.weight is FontWeight.REGULAR
    assert style.color_role is ColorRole.TEXT_PRIMARY
    assert style.line_spacing == 2
    assert style.anchor is FontTextStyle.BODY


def test_unknown_text_role_equals_body():
    assert resolve_text_style(SPEC, "brandNewRole") == resolve_text_style(SPEC, TextRole.BODY_M)


def test_missing_body_uses_builtin_fallback():
    spec = SPEC.with_typography(TypographyTokens({}))
    style = resolve_text_style(spec, TextRole.TITLE_XL)
    assert style.font.point_size == 17
    assert style.line_spacing == 2
    assert style.font.design is FontDesign.DEFAULT


def test_headline_grows_at_largest_accessibility_size():
    large = resolve_text_style(SPEC, TextRole.HEADLINE_M, ContentSizeCategory.LARGE)
    ax5 = resolve_text_style(
        SPEC, TextRole.HEADLINE_M, ContentSizeCategory.ACCESSIBILITY_EXTRA_EXTRA_EXTRA_LARGE
    )
    assert ax5.font.point_size > large.font.point_size
    assert ax5.font.weight is large.font.weight


def test_same_anchor_and_size_scale_identically():
    for category in ContentSizeCategory:
        a = resolve_text_style(SPEC, TextRole.BODY_M, category)
        b = resolve_text_style(SPEC, TextRole.BODY_SECONDARY_M, category)
        assert a.font.point_size == b.font.point_size


def test_monospaced_role_keeps_width():
    style = resolve_text_style(SPEC, TextRole.MONO_CODE_M)
    assert style.font.design is FontDesign.MONOSPACED
    assert style.font.width is not None
    assert style.letter_spacing == 0.3


def test_custom_scaler_is_used():
    calls = []

    def fixed(point_size, anchor, category):
        calls.append((point_size, anchor, category))
        return 99.0

    theme = Theme(SPEC, scaler=fixed)
    assert theme.text_style(TextRole.CAPTION_S, "hugeUnknown").font.point_size == 99.0
    assert calls == [(12, FontTextStyle.CAPTION, ContentSizeCategory.LARGE)]


def test_inset_all_edges():
    inset = resolve_inset(SPEC, InsetRole.SCREEN)
    assert (inset.horizontal, inset.vertical) == (24, 16)
    card = resolve_inset(SPEC, InsetRole.CARD)
    assert (card.horizontal, card.vertical) == (12, 12)


def test_inset_horizontal_only():
    full = resolve_inset(SPEC, InsetRole.CONTROL, EdgeSet.ALL)
    horizontal = resolve_inset(SPEC, InsetRole.CONTROL, EdgeSet.HORIZONTAL)
    assert horizontal.vertical is None
    assert horizontal.horizontal == full.horizontal
    vertical = resolve_inset(SPEC, InsetRole.CONTROL, EdgeSet.TOP)
    assert vertical.horizontal is None
    assert vertical.vertical == full.vertical


def test_unknown_inset_role_equals_screen():
    assert resolve_inset(SPEC, "sidebar") == resolve_inset(SPEC, InsetRole.SCREEN)


def test_inset_uses_layout_scale():
    layout = LayoutTokens(
        scale=SpacingScale(xs=1, s=2, m=3, l=5, xl=7, xxl=11),
        inset=InsetTokens({InsetRole.CARD: AxisInset(SpacingToken.XXL, SpacingToken.XS)}),
    )
    spec = SPEC.with_layout(layout)
    card = resolve_inset(spec, InsetRole.CARD)
    assert (card.horizontal, card.vertical) == (11, 1)
    # screen role missing -> (xl, l) of this scale
    screen = resolve_inset(spec, InsetRole.SCREEN)
    assert (screen.horizontal, screen.vertical) == (7, 5)


def test_theme_mirrors_free_functions():
    role_spec = TypographyRoleSpec(40, FontWeight.HEAVY, FontDesign.SERIF, FontTextStyle.TITLE)
    spec = SPEC.with_typography(SPEC.typography.with_roles({TextRole.TITLE_XL: role_spec}))
    theme = Theme(spec)
    assert theme.text_style(TextRole.TITLE_XL) == resolve_text_style(spec, TextRole.TITLE_XL)
    assert theme.color(ColorRole.SURFACE, "dark") == resolve_color(spec, ColorRole.SURFACE, "dark")
    assert theme.inset_value(InsetRole.LIST_ROW) == resolve_inset(spec, InsetRole.LIST_ROW)
    assert theme.radii == spec.visual.radii
    assert Theme.default() == Theme(DesignSpec.default())


def test_inset_token_outside_scale_falls_back_per_axis():
    layout = LayoutTokens(inset=InsetTokens({InsetRole.CARD: AxisInset("huge", SpacingToken.S)}))
    card = resolve_inset(SPEC.with_layout(layout), InsetRole.CARD)
    # xl for the bad horizontal token, the declared s for vertical
    assert (card.horizontal, card.vertical) == (24, 8)
