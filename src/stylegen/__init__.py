"""stylegen -- compile nested style objects into class-scoped CSS."""

from stylegen.compiler import (
    generate_css,
    generate_css_inner,
    generate_css_ruleset,
    partition_styles,
    run_string_handlers,
)
from stylegen.config import CompileConfig
from stylegen.errors import InvalidStyleError, StyleError
from stylegen.formatting import (
    UNITLESS_PROPERTIES,
    importantify,
    kebabify_style_name,
    stringify_value,
)
from stylegen.handlers import DEFAULT_STRING_HANDLERS, font_family
from stylegen.merge import find_names_for_descendants, merge_styles, recursive_merge
from stylegen.model import DescendantBlock, KeyKind, Partition, classify_key
from stylegen.prefixer import Prefixer, no_prefix, prefix_all

__version__ = "0.1.0"

__all__ = [
    # compiler
    "generate_css",
    "generate_css_inner",
    "generate_css_ruleset",
    "partition_styles",
    "run_string_handlers",
    # merge
    "recursive_merge",
    "merge_styles",
    "find_names_for_descendants",
    # model
    "KeyKind",
    "classify_key",
    "DescendantBlock",
    "Partition",
    # formatting
    "UNITLESS_PROPERTIES",
    "kebabify_style_name",
    "stringify_value",
    "importantify",
    # prefixing
    "Prefixer",
    "prefix_all",
    "no_prefix",
    # string handlers
    "font_family",
    "DEFAULT_STRING_HANDLERS",
    # config / errors
    "CompileConfig",
    "StyleError",
    "InvalidStyleError",
]
