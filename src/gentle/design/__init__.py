"""Design system package.

Contains the token spec model, role enumerations, the theme resolver,
component style helpers, intent facades and JSON serialization.
"""

from .roles import (  # noqa: F401
    TextRole,
    TextRamp,
    ColorRole,
    ButtonRole,
    ButtonShape,
    TextFieldShape,
    TextChrome,
    SurfaceRole,
    GapIntent,
    FontTextStyle,
    FontDesign,
    FontWidth,
    FontWeight,
    SpacingToken,
    InsetRole,
    ColorScheme,
    ContentSizeCategory,
)
from .color import Color, decode_color  # noqa: F401
from .spec import (  # noqa: F401
    SPEC_VERSION,
    ColorPair,
    ColorTokens,
    TypographyRoleSpec,
    TypographyTokens,
    SpacingScale,
    AxisInset,
    InsetTokens,
    LayoutTokens,
    RadiusTokens,
    ShadowTokens,
    VisualTokens,
    DesignSpec,
)
from .scaling import TextScaler, scaled_point_size, table_scaler  # noqa: F401
from .theme import (  # noqa: F401
    EdgeSet,
    FontDescriptor,
    ResolvedTextStyle,
    ResolvedInset,
    Theme,
    resolve_color,
    resolve_text_style,
    resolve_inset,
)
from .styles import (  # noqa: F401
    TextAppearance,
    ButtonStyle,
    SurfaceStyle,
    TextFieldStyle,
    resolve_text_appearance,
    resolve_button_style,
    resolve_surface_style,
    resolve_text_field_style,
)
from .facade import GapScaleFacade, LayoutFacade, DesignRuntime  # noqa: F401
from .serialization import (  # noqa: F401
    SpecDecodeError,
    SpecEncodeError,
    encode_spec,
    decode_spec,
    load_spec,
    save_spec,
    content_hash,
)

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
    "Color",
    "decode_color",
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
    "TextScaler",
    "scaled_point_size",
    "table_scaler",
    "EdgeSet",
    "FontDescriptor",
    "ResolvedTextStyle",
    "ResolvedInset",
    "Theme",
    "resolve_color",
    "resolve_text_style",
    "resolve_inset",
    "TextAppearance",
    "ButtonStyle",
    "SurfaceStyle",
    "TextFieldStyle",
    "resolve_text_appearance",
    "resolve_button_style",
    "resolve_surface_style",
    "resolve_text_field_style",
    "GapScaleFacade",
    "LayoutFacade",
    "DesignRuntime",
    "SpecDecodeError",
    "SpecEncodeError",
    "encode_spec",
    "decode_spec",
    "load_spec",
    "save_spec",
    "content_hash",
]
