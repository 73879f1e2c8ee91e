"""Spec serialization (JSON).

Responsibilities:
- Encode a `DesignSpec` to deterministic JSON text (sorted keys, fixed indent,
  integral numbers written without a fractional part) so equal specs always
  produce byte-identical output, suitable for diffing and content hashing.
- Decode JSON text back into a `DesignSpec`, rejecting malformed input with a
  `SpecDecodeError` that names the offending key path. Decoding is
  all-or-nothing: no partially populated spec is ever returned.
- Load/save spec files.

Usage:
    from gentle.design import encode_spec, decode_spec
    text = encode_spec(DesignSpec.default())
    spec = decode_spec(text)

The schema version lives under ``_specVersion``, apart from the category
keys. A version other than `SPEC_VERSION` is accepted and logged; migration
between schema versions is not performed here.

Role-indexed maps accept any string key so specs written by a newer schema
(with roles this code does not know yet) still load; those entries survive a
round trip and are simply never selected by typed lookups.
"""

from __future__ import annotations

import hashlib
import json
import logging
import math
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Mapping, Type, TypeVar

from ..config import settings
from .roles import ColorRole, FontDesign, FontTextStyle, FontWeight, FontWidth, SpacingToken
from .spec import (
    SPEC_VERSION,
    AxisInset,
    ColorPair,
    ColorTokens,
    DesignSpec,
    InsetTokens,
    LayoutTokens,
    RadiusTokens,
    ShadowTokens,
    SpacingScale,
    TypographyRoleSpec,
    TypographyTokens,
    VisualTokens,
)

_logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

VERSION_KEY = "_specVersion"

__all__ = [
    "SpecDecodeError",
    "SpecEncodeError",
    "VERSION_KEY",
    "spec_to_dict",
    "spec_from_dict",
    "encode_spec",
    "decode_spec",
    "load_spec",
    "save_spec",
    "content_hash",
]


class SpecDecodeError(ValueError):
    """Raised when serialized spec text is structurally invalid."""

    def __init__(self, path: str, expected: str, found: str) -> None:
        self.path = path
        self.expected = expected
        self.found = found
        super().__init__(f"{path}: expected {expected}, found {found}")


class SpecEncodeError(RuntimeError):
    """Raised when a spec cannot be written as JSON text (e.g. NaN sizes)."""


# --- Encoding -----------------------------------------------------------------


def _num(value: float) -> float | int:
    f = float(value)
    return int(f) if f.is_integer() else f


def _scale_to_dict(scale: SpacingScale) -> Dict[str, Any]:
    return {t.value: _num(scale.value(t)) for t in SpacingToken}


def _typography_to_dict(spec: TypographyRoleSpec) -> Dict[str, Any]:
    out: Dict[str, Any] = {
        "pointSize": _num(spec.point_size),
        "weight": spec.weight.value,
        "design": spec.design.value,
        "relativeTo": spec.relative_to.value,
        "lineSpacing": _num(spec.line_spacing),
        "letterSpacing": _num(spec.letter_spacing),
        "isUppercased": bool(spec.is_uppercased),
        "colorRole": spec.color_role.value,
    }
    if spec.width is not None:
        out["width"] = spec.width.value
    return out


def spec_to_dict(spec: DesignSpec) -> Dict[str, Any]:
    """Plain JSON-ready structure for a spec."""
    layout = spec.layout
    visual = spec.visual
    return {
        VERSION_KEY: spec.spec_version,
        "colors": {
            "pairByRole": {
                role: {"lightHex": pair.light_hex, "darkHex": pair.dark_hex}
                for role, pair in spec.colors.pair_by_role.items()
            }
        },
        "typography": {
            "roles": {role: _typography_to_dict(rs) for role, rs in spec.typography.roles.items()}
        },
        "layout": {
            "scale": _scale_to_dict(layout.scale),
            "gap": _scale_to_dict(layout.gap),
            "grid": _scale_to_dict(layout.grid),
            "touch": _scale_to_dict(layout.touch),
            "inset": {
                "tokensByRole": {
                    role: {"horizontal": axis.horizontal.value, "vertical": axis.vertical.value}
                    for role, axis in layout.inset.tokens_by_role.items()
                }
            },
        },
        "visual": {
            "radii": {
                "small": _num(visual.radii.small),
                "medium": _num(visual.radii.medium),
                "large": _num(visual.radii.large),
                "pill": _num(visual.radii.pill),
            },
            "shadows": {
                "none": _num(visual.shadows.none),
                "small": _num(visual.shadows.small),
                "medium": _num(visual.shadows.medium),
            },
        },
    }


def encode_spec(spec: DesignSpec) -> str:
    try:
        text = json.dumps(
            spec_to_dict(spec),
            sort_keys=True,
            indent=settings.JSON_INDENT,
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError, AttributeError) as e:
        raise SpecEncodeError(f"Spec could not be encoded: {e}") from e
    return text + "\n"


def content_hash(spec: DesignSpec) -> str:
    """SHA-256 hex digest of the encoded spec."""
    return hashlib.sha256(encode_spec(spec).encode("utf-8")).hexdigest()


# --- Decoding -----------------------------------------------------------------


def _describe(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return f"string {value!r}"
    if isinstance(value, list):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def _mapping(value: Any, path: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise SpecDecodeError(path or "<root>", "object", _describe(value))
    return value


def _field(obj: Mapping[str, Any], key: str, path: str) -> Any:
    if key not in obj:
        raise SpecDecodeError(_join(path, key), "a value", "missing key")
    return obj[key]


def _number(obj: Mapping[str, Any], key: str, path: str) -> float:
    value = _field(obj, key, path)
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SpecDecodeError(_join(path, key), "number", _describe(value))
    try:
        number = float(value)
    except OverflowError:
        number = math.inf
    if not math.isfinite(number):
        raise SpecDecodeError(_join(path, key), "finite number", repr(value))
    return number


def _string(obj: Mapping[str, Any], key: str, path: str) -> str:
    value = _field(obj, key, path)
    if not isinstance(value, str):
        raise SpecDecodeError(_join(path, key), "string", _describe(value))
    return value


def _boolean(obj: Mapping[str, Any], key: str, path: str) -> bool:
    value = _field(obj, key, path)
    if not isinstance(value, bool):
        raise SpecDecodeError(_join(path, key), "boolean", _describe(value))
    return value


def _enum(enum_cls: Type[E], obj: Mapping[str, Any], key: str, path: str) -> E:
    raw = _string(obj, key, path)
    try:
        return enum_cls(raw)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise SpecDecodeError(_join(path, key), f"one of [{allowed}]", _describe(raw)) from None


def _scale(obj: Mapping[str, Any], key: str, path: str) -> SpacingScale:
    p = _join(path, key)
    raw = _mapping(_field(obj, key, path), p)
    scale = SpacingScale(**{t.value: _number(raw, t.value, p) for t in SpacingToken})
    if not scale.is_monotonic():
        _logger.warning("Spacing scale %s is not ascending: %s", p, scale.values())
    return scale


def _colors(raw: Mapping[str, Any], path: str) -> ColorTokens:
    p = _join(path, "pairByRole")
    pairs_raw = _mapping(_field(raw, "pairByRole", path), p)
    pairs: Dict[str, ColorPair] = {}
    for role, entry in pairs_raw.items():
        ep = _join(p, role)
        entry = _mapping(entry, ep)
        # Hex text is stored verbatim; bad hex degrades at resolution time.
        pairs[role] = ColorPair(_string(entry, "lightHex", ep), _string(entry, "darkHex", ep))
    return ColorTokens(pairs)


def _typography_role(entry: Mapping[str, Any], path: str) -> TypographyRoleSpec:
    width = None
    if entry.get("width") is not None:
        width = _enum(FontWidth, entry, "width", path)
    return TypographyRoleSpec(
        point_size=_number(entry, "pointSize", path),
        weight=_enum(FontWeight, entry, "weight", path),
        design=_enum(FontDesign, entry, "design", path),
        relative_to=_enum(FontTextStyle, entry, "relativeTo", path),
        width=width,
        line_spacing=_number(entry, "lineSpacing", path),
        letter_spacing=_number(entry, "letterSpacing", path),
        is_uppercased=_boolean(entry, "isUppercased", path),
        color_role=_enum(ColorRole, entry, "colorRole", path),
    )


def _typography(raw: Mapping[str, Any], path: str) -> TypographyTokens:
    p = _join(path, "roles")
    roles_raw = _mapping(_field(raw, "roles", path), p)
    roles = {
        role: _typography_role(_mapping(entry, _join(p, role)), _join(p, role))
        for role, entry in roles_raw.items()
    }
    return TypographyTokens(roles)


def _layout(raw: Mapping[str, Any], path: str) -> LayoutTokens:
    inset_path = _join(path, "inset")
    inset_raw = _mapping(_field(raw, "inset", path), inset_path)
    by_role_path = _join(inset_path, "tokensByRole")
    by_role_raw = _mapping(_field(inset_raw, "tokensByRole", inset_path), by_role_path)
    tokens: Dict[str, AxisInset] = {}
    for role, entry in by_role_raw.items():
        ep = _join(by_role_path, role)
        entry = _mapping(entry, ep)
        tokens[role] = AxisInset(
            horizontal=_enum(SpacingToken, entry, "horizontal", ep),
            vertical=_enum(SpacingToken, entry, "vertical", ep),
        )
    return LayoutTokens(
        scale=_scale(raw, "scale", path),
        gap=_scale(raw, "gap", path),
        grid=_scale(raw, "grid", path),
        touch=_scale(raw, "touch", path),
        inset=InsetTokens(tokens),
    )


def _visual(raw: Mapping[str, Any], path: str) -> VisualTokens:
    rp = _join(path, "radii")
    radii = _mapping(_field(raw, "radii", path), rp)
    sp = _join(path, "shadows")
    shadows = _mapping(_field(raw, "shadows", path), sp)
    return VisualTokens(
        radii=RadiusTokens(
            small=_number(radii, "small", rp),
            medium=_number(radii, "medium", rp),
            large=_number(radii, "large", rp),
            pill=_number(radii, "pill", rp),
        ),
        shadows=ShadowTokens(
            none=_number(shadows, "none", sp),
            small=_number(shadows, "small", sp),
            medium=_number(shadows, "medium", sp),
        ),
    )


def spec_from_dict(data: Any) -> DesignSpec:
    root = _mapping(data, "")
    version = _string(root, VERSION_KEY, "")
    if version != SPEC_VERSION:
        _logger.warning(
            "Decoding spec with schema version %s (current %s); no migration applied",
            version,
            SPEC_VERSION,
        )
    return DesignSpec(
        colors=_colors(_mapping(_field(root, "colors", ""), "colors"), "colors"),
        typography=_typography(_mapping(_field(root, "typography", ""), "typography"), "typography"),
        layout=_layout(_mapping(_field(root, "layout", ""), "layout"), "layout"),
        visual=_visual(_mapping(_field(root, "visual", ""), "visual"), "visual"),
        spec_version=version,
    )


def decode_spec(text: str | bytes) -> DesignSpec:
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise SpecDecodeError("<root>", "JSON document", f"invalid JSON ({e})") from e
    return spec_from_dict(data)


# --- Files --------------------------------------------------------------------


def load_spec(path: str | Path) -> DesignSpec:
    """Load a spec from a JSON file.

    Raises FileNotFoundError when the file is missing and SpecDecodeError
    when its content is malformed or not valid text.
    """
    spec_path = Path(path)
    if not spec_path.exists():
        raise FileNotFoundError(f"Design spec file not found: {spec_path}")
    return decode_spec(spec_path.read_bytes())


def save_spec(spec: DesignSpec, path: str | Path) -> Path:
    spec_path = Path(path)
    spec_path.parent.mkdir(parents=True, exist_ok=True)
    spec_path.write_text(encode_spec(spec), encoding="utf-8")
    return spec_path
