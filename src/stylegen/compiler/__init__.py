from stylegen.compiler.generate import generate_css, generate_css_inner
from stylegen.compiler.partition import partition_styles
from stylegen.compiler.ruleset import generate_css_ruleset, run_string_handlers

__all__ = [
    "generate_css",
    "generate_css_inner",
    "partition_styles",
    "generate_css_ruleset",
    "run_string_handlers",
]
