"""Property-name and value formatting for CSS declarations."""

from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import Any, Iterable

from stylegen.errors import InvalidStyleError

_VENDOR_PREFIXES = ("Webkit", "Moz", "ms", "O")

# Properties whose numeric values are dimensionless.
_UNITLESS_BASE = frozenset(
    {
        "animationIterationCount",
        "borderImageOutset",
        "borderImageSlice",
        "borderImageWidth",
        "boxFlex",
        "boxFlexGroup",
        "boxOrdinalGroup",
        "columnCount",
        "flex",
        "flexGrow",
        "flexPositive",
        "flexShrink",
        "flexNegative",
        "flexOrder",
        "gridRow",
        "gridColumn",
        "fontWeight",
        "lineClamp",
        "lineHeight",
        "opacity",
        "order",
        "orphans",
        "tabSize",
        "widows",
        "zIndex",
        "zoom",
        # SVG-related properties
        "fillOpacity",
        "floodOpacity",
        "stopOpacity",
        "strokeDasharray",
        "strokeDashoffset",
        "strokeMiterlimit",
        "strokeOpacity",
        "strokeWidth",
    }
)


def _with_prefixes(names: Iterable[str]) -> frozenset[str]:
    result = set(names)
    for name in names:
        capitalized = name[0].upper() + name[1:]
        result.update(prefix + capitalized for prefix in _VENDOR_PREFIXES)
    return frozenset(result)


UNITLESS_PROPERTIES = _with_prefixes(_UNITLESS_BASE)

_UPPERCASE_RE = re.compile(r"([A-Z])")
_KEBAB_PART_RE = re.compile(r"-([a-z])")


def kebabify_style_name(name: str) -> str:
    """Convert a camel-case property name to CSS syntax.

    >>> kebabify_style_name("backgroundColor")
    'background-color'
    >>> kebabify_style_name("msTransition")
    '-ms-transition'
    """
    kebab = _UPPERCASE_RE.sub(r"-\1", name).lower()
    if kebab.startswith("ms-"):
        return "-" + kebab
    return kebab


def camelize_style_name(name: str) -> str:
    """Convert a kebab-case property name back to its camel-case spelling."""
    if name.startswith("-ms-"):
        name = name[1:]
    elif name.startswith("-"):
        name = name[1:]
        name = name[0].upper() + name[1:] if name else name
    return _KEBAB_PART_RE.sub(lambda m: m.group(1).upper(), name)


def is_unitless(key: str, unitless_properties: frozenset[str] = UNITLESS_PROPERTIES) -> bool:
    """Return True if numeric values of *key* take no unit suffix."""
    if key in unitless_properties:
        return True
    return "-" in key and camelize_style_name(key) in unitless_properties


def _format_number(value: int | float) -> str:
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        # Shortest round-trip digits, never in exponent notation.
        return format(Decimal(repr(value)), "f")
    return str(value)


def stringify_value(
    key: str,
    value: Any,
    default_unit: str = "px",
    unitless_properties: frozenset[str] = UNITLESS_PROPERTIES,
) -> str:
    """Render a single declaration value as CSS text.

    Numbers get *default_unit* appended unless *key* is a unitless property.
    Strings pass through unchanged.
    """
    if isinstance(value, bool):
        raise InvalidStyleError(f"Boolean is not a valid value for {key!r}", (key,))
    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            raise InvalidStyleError(f"Non-finite number is not a valid value for {key!r}", (key,))
        text = _format_number(value)
        if is_unitless(key, unitless_properties):
            return text
        return text + default_unit
    if isinstance(value, str):
        return value
    raise InvalidStyleError(
        f"Unsupported value of type {type(value).__name__} for {key!r}", (key,)
    )


def importantify(declaration: str) -> str:
    """Mark a ``prop:value;`` declaration as ``!important``.

    >>> importantify("color:red;")
    'color:red !important;'
    """
    body = declaration[:-1] if declaration.endswith(";") else declaration
    if body.rstrip().endswith("!important"):
        return body + ";"
    return body + " !important;"
