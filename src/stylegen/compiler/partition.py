"""Split a style node into declarations, pseudo, media, and descendant buckets."""

from __future__ import annotations

from typing import Any, Mapping

from stylegen.errors import InvalidStyleError
from stylegen.model import DescendantBlock, DescendantNameMap, KeyKind, Partition, classify_key

__all__ = ["partition_styles"]


def _nested(key: str, value: Any, path: tuple[str, ...]) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise InvalidStyleError(
            f"Expected nested styles under {key!r}, got {type(value).__name__}",
            path + (key,),
        )
    return value


def partition_styles(
    style: Mapping[str, Any],
    name_map: DescendantNameMap | None = None,
    path: tuple[str, ...] = (),
) -> Partition:
    """Classify every key of *style* into exactly one bucket.

    Descendant nodes are copied without their ``_names`` field. A descendant
    key missing from *name_map* gets an empty name list and so produces no
    rulesets.
    """
    if not isinstance(style, Mapping):
        raise InvalidStyleError(f"Expected a style mapping, got {type(style).__name__}", path)
    name_map = name_map or {}
    partition = Partition()
    for key, value in style.items():
        kind = classify_key(key)
        if kind is KeyKind.PSEUDO:
            partition.pseudo_styles[key] = _nested(key, value, path)
        elif kind is KeyKind.MEDIA:
            partition.media_queries[key] = _nested(key, value, path)
        elif kind is KeyKind.DESCENDANT:
            node = _nested(key, value, path)
            partition.descendants.append(
                DescendantBlock.from_node(key, node, name_map.get(key, []))
            )
        elif kind is KeyKind.DECLARATION:
            partition.declarations[key] = value
        # METADATA keys are dropped.
    return partition
