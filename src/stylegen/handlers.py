"""Built-in string handlers for properties whose values need custom rendering."""

from __future__ import annotations

from typing import Any, Mapping

from stylegen.errors import InvalidStyleError


def _family_name(item: Any) -> str:
    if isinstance(item, Mapping):
        family = item.get("fontFamily", item.get("font-family"))
        if not isinstance(family, str):
            raise InvalidStyleError("Font face definition has no fontFamily", ("fontFamily",))
        return family
    return str(item)


def font_family(value: Any) -> Any:
    """Render a ``fontFamily`` value given as a string, font face, or list of either."""
    if isinstance(value, (list, tuple)):
        return ",".join(_family_name(item) for item in value)
    if isinstance(value, Mapping):
        return _family_name(value)
    return value


DEFAULT_STRING_HANDLERS = {
    "fontFamily": font_family,
}
