"""Vendor-prefix expansion for flat declaration maps.

A prefixer maps ``{property: value}`` to a new dict that may contain extra
vendor-prefixed properties and may replace a value with an ordered list of
fallbacks. The compiler calls it once per ruleset and never looks inside.
"""

from __future__ import annotations

import re
from typing import Any, Protocol

WEBKIT = "Webkit"
MOZ = "Moz"
MS = "ms"

# Standard property -> vendor prefixes that still need a prefixed copy.
PREFIXED_PROPERTIES: dict[str, tuple[str, ...]] = {
    "animation": (WEBKIT,),
    "animationDelay": (WEBKIT,),
    "animationDirection": (WEBKIT,),
    "animationDuration": (WEBKIT,),
    "animationFillMode": (WEBKIT,),
    "animationIterationCount": (WEBKIT,),
    "animationName": (WEBKIT,),
    "animationPlayState": (WEBKIT,),
    "animationTimingFunction": (WEBKIT,),
    "appearance": (WEBKIT, MOZ),
    "backfaceVisibility": (WEBKIT,),
    "backgroundClip": (WEBKIT,),
    "boxDecorationBreak": (WEBKIT,),
    "boxSizing": (WEBKIT, MOZ),
    "columnCount": (WEBKIT, MOZ),
    "columnGap": (WEBKIT, MOZ),
    "columns": (WEBKIT, MOZ),
    "filter": (WEBKIT,),
    "flex": (WEBKIT, MS),
    "flexBasis": (WEBKIT,),
    "flexDirection": (WEBKIT, MS),
    "flexFlow": (WEBKIT, MS),
    "flexGrow": (WEBKIT,),
    "flexShrink": (WEBKIT,),
    "flexWrap": (WEBKIT, MS),
    "alignItems": (WEBKIT,),
    "alignContent": (WEBKIT,),
    "alignSelf": (WEBKIT,),
    "justifyContent": (WEBKIT,),
    "order": (WEBKIT,),
    "fontKerning": (WEBKIT,),
    "hyphens": (WEBKIT, MOZ, MS),
    "maskImage": (WEBKIT,),
    "perspective": (WEBKIT,),
    "perspectiveOrigin": (WEBKIT,),
    "textSizeAdjust": (WEBKIT, MS),
    "transform": (WEBKIT, MS),
    "transformOrigin": (WEBKIT, MS),
    "transformStyle": (WEBKIT,),
    "transition": (WEBKIT,),
    "transitionDelay": (WEBKIT,),
    "transitionDuration": (WEBKIT,),
    "transitionProperty": (WEBKIT,),
    "transitionTimingFunction": (WEBKIT,),
    "userSelect": (WEBKIT, MOZ, MS),
}

# (property, value) -> ordered fallbacks, most specific vendor first.
_VALUE_FALLBACKS: dict[tuple[str, str], list[str]] = {
    ("display", "flex"): ["-webkit-box", "-moz-box", "-ms-flexbox", "-webkit-flex", "flex"],
    ("display", "inline-flex"): [
        "-webkit-inline-box",
        "-moz-inline-box",
        "-ms-inline-flexbox",
        "-webkit-inline-flex",
        "inline-flex",
    ],
    ("position", "sticky"): ["-webkit-sticky", "sticky"],
    ("cursor", "grab"): ["-webkit-grab", "-moz-grab", "grab"],
    ("cursor", "grabbing"): ["-webkit-grabbing", "-moz-grabbing", "grabbing"],
    ("cursor", "zoom-in"): ["-webkit-zoom-in", "-moz-zoom-in", "zoom-in"],
    ("cursor", "zoom-out"): ["-webkit-zoom-out", "-moz-zoom-out", "zoom-out"],
}

_CALC_RE = re.compile(r"(?<![-\w])calc\(")


class Prefixer(Protocol):
    """A pure ``declarations -> declarations`` transform."""

    def __call__(self, declarations: dict[str, Any]) -> dict[str, Any]: ...


def _prefix_value(prop: str, value: Any) -> Any:
    if not isinstance(value, str):
        return value
    fallbacks = _VALUE_FALLBACKS.get((prop, value))
    if fallbacks is not None:
        return list(fallbacks)
    if _CALC_RE.search(value):
        return [
            _CALC_RE.sub("-webkit-calc(", value),
            _CALC_RE.sub("-moz-calc(", value),
            value,
        ]
    return value


def prefix_all(declarations: dict[str, Any]) -> dict[str, Any]:
    """Add every vendor-prefixed variant the static tables know about.

    Output order is stable: prefixed copies of a property come right before
    the standard property, and properties keep their input order otherwise.
    """
    result: dict[str, Any] = {}
    for prop, value in declarations.items():
        if isinstance(value, (list, tuple)):
            prefixed_value: Any = list(value)
        else:
            prefixed_value = _prefix_value(prop, value)
        for vendor in PREFIXED_PROPERTIES.get(prop, ()):
            result[vendor + prop[0].upper() + prop[1:]] = prefixed_value
        result[prop] = prefixed_value
    return result


def no_prefix(declarations: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of *declarations* without any vendor prefixes."""
    return dict(declarations)
