"""Hex color decoding.

Colors are stored as portable hex text (``RRGGBB`` or ``RRGGBBAA``, optional
leading ``#``). Decoding never raises: anything that is not exactly 6 or 8 hex
digits decodes to opaque black so a broken theme cannot break rendering.

Components are normalized to 0..1 by dividing each byte by 255.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Tuple

__all__ = ["Color", "decode_color", "BLACK", "WHITE"]

_HEX_RE = re.compile(r"[0-9A-Fa-f]{6}(?:[0-9A-Fa-f]{2})?")


def _to_byte(component: float) -> int:
    return max(0, min(255, int(round(component * 255.0))))


@dataclass(frozen=True)
class Color:
    red: float
    green: float
    blue: float
    alpha: float = 1.0

    @classmethod
    def from_rgba8(cls, r: int, g: int, b: int, a: int = 255) -> "Color":
        return cls(r / 255.0, g / 255.0, b / 255.0, a / 255.0)

    def to_rgba8(self) -> Tuple[int, int, int, int]:
        return (
            _to_byte(self.red),
            _to_byte(self.green),
            _to_byte(self.blue),
            _to_byte(self.alpha),
        )

    def to_hex(self, include_alpha: bool | None = None) -> str:
        """Encode as ``#RRGGBB`` (opaque) or ``#RRGGBBAA``.

        By default alpha is only written when the color is not fully opaque.
        """
        r, g, b, a = self.to_rgba8()
        if include_alpha is None:
            include_alpha = a != 255
        if include_alpha:
            return f"#{r:02X}{g:02X}{b:02X}{a:02X}"
        return f"#{r:02X}{g:02X}{b:02X}"


BLACK = Color(0.0, 0.0, 0.0, 1.0)
WHITE = Color(1.0, 1.0, 1.0, 1.0)


def decode_color(value: Any) -> Color:
    """Decode a hex string into a Color; malformed input yields opaque black."""
    if not isinstance(value, str):
        return BLACK
    text = value[1:] if value.startswith("#") else value
    if not _HEX_RE.fullmatch(text):
        return BLACK
    r = int(text[0:2], 16)
    g = int(text[2:4], 16)
    b = int(text[4:6], 16)
    a = int(text[6:8], 16) if len(text) == 8 else 255
    return Color.from_rgba8(r, g, b, a)
