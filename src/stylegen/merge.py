"""Merge style fragments and collect the class names of descendant blocks."""

from __future__ import annotations

from functools import reduce
from typing import Any, Mapping, Sequence

from stylegen.errors import InvalidStyleError
from stylegen.model import (
    NAMES_KEY,
    DescendantNameMap,
    KeyKind,
    StyleNode,
    classify_key,
    name_list,
    names_of,
)

__all__ = ["recursive_merge", "merge_styles", "find_names_for_descendants"]


def _copy_tree(node: Mapping[str, Any]) -> StyleNode:
    return {k: _copy_tree(v) if isinstance(v, Mapping) else v for k, v in node.items()}


def recursive_merge(base: Mapping[str, Any], overrides: Mapping[str, Any]) -> StyleNode:
    """Deep-merge *overrides* into a copy of *base*.

    Mappings found under the same key in both are merged recursively; any
    other value in *overrides* replaces the one in *base* outright, except
    ``_names`` lists and sets, which are unioned in order.
    """
    merged = _copy_tree(base)
    for key, value in overrides.items():
        current = merged.get(key)
        if key == NAMES_KEY and current is not None and not (
            isinstance(current, Mapping) and isinstance(value, Mapping)
        ):
            merged[key] = list(dict.fromkeys(name_list(current) + name_list(value)))
        elif isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = recursive_merge(current, value)
        elif isinstance(value, Mapping):
            merged[key] = _copy_tree(value)
        else:
            merged[key] = value
    return merged


def merge_styles(fragments: Sequence[Mapping[str, Any]]) -> StyleNode:
    """Fold *fragments* left to right into one style tree. Later fragments win."""
    if not fragments:
        raise InvalidStyleError("At least one style fragment is required")
    for index, fragment in enumerate(fragments):
        if not isinstance(fragment, Mapping):
            raise InvalidStyleError(
                f"Style fragment {index} is a {type(fragment).__name__}, expected a mapping"
            )
    return reduce(recursive_merge, fragments[1:], _copy_tree(fragments[0]))


def find_names_for_descendants(
    styles: Mapping[str, Any], names: DescendantNameMap | None = None
) -> DescendantNameMap:
    """Map every descendant key in *styles* to the class names it can render under.

    Pseudo and media scopes are searched without recording anything for
    themselves. Deeper descendant levels are visited before the current one,
    so a key's list is in discovery order.
    """
    if names is None:
        names = {}
    for key, value in styles.items():
        kind = classify_key(key)
        if kind in (KeyKind.PSEUDO, KeyKind.MEDIA):
            if isinstance(value, Mapping):
                find_names_for_descendants(value, names)
        elif kind is KeyKind.DESCENDANT:
            if not isinstance(value, Mapping):
                continue
            find_names_for_descendants(value, names)
            for name in names_of(value):
                names.setdefault(key, []).append(name)
    return names
