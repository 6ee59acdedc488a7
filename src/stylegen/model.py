"""Style tree model: key classification, descendant blocks, and partitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Mapping

from stylegen.errors import InvalidStyleError

StyleNode = dict[str, Any]
DescendantNameMap = dict[str, list[str]]
StringHandlerMap = Mapping[str, Callable[[Any], Any]]

# Reserved key carrying the class names a descendant block is reachable through.
NAMES_KEY = "_names"
DESCENDANT_MARKER = ">>"


class KeyKind(Enum):
    """What a key of a style node stands for."""

    DECLARATION = "declaration"
    PSEUDO = "pseudo"
    MEDIA = "media"
    DESCENDANT = "descendant"
    METADATA = "metadata"


def classify_key(key: str) -> KeyKind:
    """Return the :class:`KeyKind` for *key* based on its prefix."""
    if not isinstance(key, str):
        raise InvalidStyleError(f"Style keys must be strings, got {key!r}")
    if key == NAMES_KEY:
        return KeyKind.METADATA
    if key.startswith(":"):
        return KeyKind.PSEUDO
    if key.startswith("@"):
        return KeyKind.MEDIA
    if key.startswith(DESCENDANT_MARKER):
        return KeyKind.DESCENDANT
    return KeyKind.DECLARATION


def name_list(names: Any) -> list[str]:
    """Return the class names held in a raw ``_names`` value.

    ``_names`` may be a dict keyed by name, a set, a list, a tuple, or a
    single string.
    """
    if not names:
        return []
    if isinstance(names, str):
        return [names]
    return list(names)


def names_of(node: Mapping[str, Any]) -> list[str]:
    """Return the class names advertised by a descendant node's ``_names``."""
    return name_list(node.get(NAMES_KEY))


@dataclass(frozen=True)
class DescendantBlock:
    """A descendant style block with its metadata split off.

    Attributes:
        key: The ``>>`` key the block was found under.
        styles: A copy of the nested node without ``_names``.
        names: Class names the block is rendered under, one ruleset each.
    """

    key: str
    styles: StyleNode
    names: tuple[str, ...] = ()

    @classmethod
    def from_node(cls, key: str, node: Mapping[str, Any], names: list[str]) -> DescendantBlock:
        styles = {k: v for k, v in node.items() if k != NAMES_KEY}
        # A name reached at several depths still renders once per block.
        return cls(key=key, styles=styles, names=tuple(dict.fromkeys(names)))


@dataclass
class Partition:
    """One style node split into the four buckets the compiler emits in order."""

    declarations: StyleNode = field(default_factory=dict)
    pseudo_styles: dict[str, StyleNode] = field(default_factory=dict)
    media_queries: dict[str, StyleNode] = field(default_factory=dict)
    descendants: list[DescendantBlock] = field(default_factory=list)

    def expanded_descendants(self) -> list[tuple[str, StyleNode]]:
        """Return ``(class_name, styles)`` pairs, one per resolved name."""
        return [(name, block.styles) for block in self.descendants for name in block.names]
