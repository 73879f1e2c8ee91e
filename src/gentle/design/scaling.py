"""Accessibility text scaling.

Typographic sizes scale with the user's preferred content size category. The
curve is selected by the role's *anchor* (its semantic text style), not by the
role itself: two roles sharing an anchor and a nominal size always resolve to
the same scaled size.

The default scaler interpolates against a per-anchor reference table (point
sizes of each semantic style at every category, with ``large`` as the system
default). A nominal size is multiplied by ``table[category] / table[large]``,
which gives:

 - identity at the default category
 - monotonic non-decreasing growth across categories (every table row is)
 - determinism (pure arithmetic, no platform query)

Hosts that own a platform font-metrics facility can plug their own callable
with the `TextScaler` signature into the resolver instead.

Categories outside the enumeration (values written by a newer host) resolve
against `DEFAULT_SIZE_CATEGORY`.
"""

from __future__ import annotations

from typing import Dict, Mapping, Protocol, Tuple, Union

from .roles import ContentSizeCategory, FontTextStyle, coerce_role

__all__ = [
    "TextScaler",
    "DEFAULT_SIZE_CATEGORY",
    "REFERENCE_SIZES",
    "normalize_size_category",
    "scale_factor",
    "scaled_point_size",
    "table_scaler",
]

DEFAULT_SIZE_CATEGORY = ContentSizeCategory.LARGE

_C = ContentSizeCategory
_CATEGORY_ORDER: Tuple[ContentSizeCategory, ...] = tuple(ContentSizeCategory)

# Reference point sizes per anchor, one column per category in enum order:
# xS  S   M   L   xL  xxL xxxL AX1 AX2 AX3 AX4 AX5
_ROWS: Dict[FontTextStyle, Tuple[float, ...]] = {
    FontTextStyle.LARGE_TITLE: (31, 32, 33, 34, 36, 38, 40, 44, 48, 52, 56, 60),
    FontTextStyle.TITLE: (25, 26, 27, 28, 30, 32, 34, 38, 43, 48, 53, 58),
    FontTextStyle.TITLE2: (19, 20, 21, 22, 24, 26, 28, 34, 39, 44, 50, 56),
    FontTextStyle.TITLE3: (17, 18, 19, 20, 22, 24, 26, 31, 37, 43, 49, 55),
    FontTextStyle.HEADLINE: (14, 15, 16, 17, 19, 21, 23, 28, 33, 40, 47, 53),
    FontTextStyle.BODY: (14, 15, 16, 17, 19, 21, 23, 28, 33, 40, 47, 53),
    FontTextStyle.CALLOUT: (13, 14, 15, 16, 18, 20, 22, 26, 32, 38, 44, 51),
    FontTextStyle.SUBHEADLINE: (12, 13, 14, 15, 17, 19, 21, 25, 30, 36, 42, 49),
    FontTextStyle.FOOTNOTE: (12, 12, 12, 13, 15, 17, 19, 23, 27, 33, 38, 44),
    FontTextStyle.CAPTION: (11, 11, 11, 12, 14, 16, 18, 22, 26, 32, 37, 43),
    FontTextStyle.CAPTION2: (11, 11, 11, 11, 13, 15, 17, 20, 24, 29, 34, 40),
}

REFERENCE_SIZES: Mapping[FontTextStyle, Mapping[ContentSizeCategory, float]] = {
    anchor: dict(zip(_CATEGORY_ORDER, row)) for anchor, row in _ROWS.items()
}


class TextScaler(Protocol):
    def __call__(
        self, point_size: float, anchor: FontTextStyle, category: ContentSizeCategory
    ) -> float: ...  # pragma: no cover - structural


def normalize_size_category(
    category: Union[ContentSizeCategory, str, None],
) -> ContentSizeCategory:
    """Return a known category; unknown or missing values map to the default."""
    found = coerce_role(ContentSizeCategory, category)
    return found if found is not None else DEFAULT_SIZE_CATEGORY


def scale_factor(
    anchor: Union[FontTextStyle, str], category: Union[ContentSizeCategory, str, None]
) -> float:
    anchor_member = coerce_role(FontTextStyle, anchor) or FontTextStyle.BODY
    row = REFERENCE_SIZES[anchor_member]
    return row[normalize_size_category(category)] / row[DEFAULT_SIZE_CATEGORY]


def scaled_point_size(
    point_size: float,
    anchor: Union[FontTextStyle, str],
    category: Union[ContentSizeCategory, str, None],
) -> float:
    return float(point_size) * scale_factor(anchor, category)


def table_scaler(
    point_size: float, anchor: FontTextStyle, category: ContentSizeCategory
) -> float:
    """Default `TextScaler` backed by `REFERENCE_SIZES`."""
    return scaled_point_size(point_size, anchor, category)
