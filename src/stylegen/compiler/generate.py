"""Recursive compiler from a merged style tree to CSS text."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from stylegen.compiler.partition import partition_styles
from stylegen.compiler.ruleset import generate_css_ruleset
from stylegen.config import DEFAULT_CONFIG, CompileConfig
from stylegen.merge import find_names_for_descendants, merge_styles
from stylegen.model import DescendantNameMap, StringHandlerMap
from stylegen.prefixer import Prefixer, prefix_all

__all__ = ["generate_css", "generate_css_inner"]

logger = logging.getLogger(__name__)


def generate_css(
    selector: str,
    style_types: Sequence[Mapping[str, Any]],
    string_handlers: StringHandlerMap | None = None,
    use_important: bool | None = None,
    *,
    prefixer: Prefixer = prefix_all,
    config: CompileConfig | None = None,
) -> str:
    """Merge *style_types* and compile the result under *selector*.

    The descendant name map is rebuilt from the merged tree on every call.
    """
    merged = merge_styles(style_types)
    names = find_names_for_descendants(merged)
    logger.debug(
        "Compiling %s: %d fragment(s), %d descendant key(s)",
        selector,
        len(style_types),
        len(names),
    )
    css = generate_css_inner(
        selector,
        merged,
        string_handlers,
        use_important,
        names,
        prefixer=prefixer,
        config=config,
    )
    logger.debug("Compiled %s to %d character(s)", selector, len(css))
    return css


def generate_css_inner(
    selector: str,
    style: Mapping[str, Any],
    string_handlers: StringHandlerMap | None = None,
    use_important: bool | None = None,
    name_map: DescendantNameMap | None = None,
    *,
    prefixer: Prefixer = prefix_all,
    config: CompileConfig | None = None,
    _path: tuple[str, ...] = (),
) -> str:
    """Compile one style node and everything nested under it.

    Output is the concatenation of, in order: the node's own declarations,
    each pseudo scope, each media scope wrapped in its query, and one ruleset
    per resolved descendant class name.
    """
    config = config or DEFAULT_CONFIG
    name_map = name_map or {}
    partition = partition_styles(style, name_map, _path)

    def inner(sub_selector: str, sub_style: Mapping[str, Any], key: str) -> str:
        return generate_css_inner(
            sub_selector,
            sub_style,
            string_handlers,
            use_important,
            name_map,
            prefixer=prefixer,
            config=config,
            _path=_path + (key,),
        )

    parts = [
        generate_css_ruleset(
            selector,
            partition.declarations,
            string_handlers,
            use_important,
            prefixer=prefixer,
            config=config,
        )
    ]

    for pseudo, sub_style in partition.pseudo_styles.items():
        parts.append(inner(selector + pseudo, sub_style, pseudo))

    for query, sub_style in partition.media_queries.items():
        ruleset = inner(selector, sub_style, query)
        if ruleset:
            parts.append(f"{query}{{{ruleset}}}")

    for block in partition.descendants:
        for name in block.names:
            parts.append(inner(f"{selector} .{name}", block.styles, block.key))

    return "".join(parts)
