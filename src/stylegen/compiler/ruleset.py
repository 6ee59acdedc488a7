"""Render one selector's flat declarations as a CSS ruleset."""

from __future__ import annotations

from typing import Any, Mapping

from stylegen.config import DEFAULT_CONFIG, CompileConfig
from stylegen.formatting import importantify, kebabify_style_name, stringify_value
from stylegen.model import StringHandlerMap
from stylegen.prefixer import Prefixer, prefix_all

__all__ = ["run_string_handlers", "generate_css_ruleset"]


def run_string_handlers(
    declarations: Mapping[str, Any], string_handlers: StringHandlerMap | None
) -> dict[str, Any]:
    """Pass each value through its handler, if one is registered for the key."""
    if not string_handlers:
        return dict(declarations)
    result: dict[str, Any] = {}
    for key, value in declarations.items():
        handler = string_handlers.get(key)
        result[key] = handler(value) if handler is not None else value
    return result


def _declarations_for(key: str, value: Any, config: CompileConfig) -> list[tuple[str, str]]:
    prop = kebabify_style_name(key)
    values = value if isinstance(value, (list, tuple)) else [value]
    return [
        (prop, stringify_value(key, v, config.default_unit, config.unitless_properties))
        for v in values
    ]


def generate_css_ruleset(
    selector: str,
    declarations: Mapping[str, Any],
    string_handlers: StringHandlerMap | None = None,
    use_important: bool | None = None,
    *,
    prefixer: Prefixer = prefix_all,
    config: CompileConfig | None = None,
) -> str:
    """Return ``selector{prop:value;...}``, or ``""`` when there is nothing to emit.

    Steps run in a fixed order: string handlers, vendor prefixing, then
    kebab-casing and value stringification. A list value (a fallback
    sequence from the prefixer) becomes one declaration per entry under the
    same property. Every declaration is marked ``!important`` unless
    *use_important* is ``False``.
    """
    config = config or DEFAULT_CONFIG
    if not declarations:
        return ""

    handled = run_string_handlers(declarations, string_handlers)
    prefixed = prefixer(handled)

    pairs: list[tuple[str, str]] = []
    for key, value in prefixed.items():
        pairs.extend(_declarations_for(key, value, config))
    if config.sort_declarations:
        # Stable sort keeps fallback values of one property in order.
        pairs.sort(key=lambda pair: pair[0])

    important = config.important_enabled(use_important)
    rules = []
    for prop, text in pairs:
        rule = f"{prop}:{text};"
        rules.append(importantify(rule) if important else rule)

    body = "".join(rules)
    if not body:
        return ""
    return f"{selector}{{{body}}}"
