from __future__ import annotations

from dataclasses import dataclass

from stylegen.formatting import UNITLESS_PROPERTIES


@dataclass(frozen=True)
class CompileConfig:
    use_important: bool | None = None  # only False disables !important
    default_unit: str = "px"
    unitless_properties: frozenset[str] = UNITLESS_PROPERTIES
    sort_declarations: bool = False

    def important_enabled(self, use_important: bool | None = None) -> bool:
        """Resolve the tri-state flag; an explicit argument wins over the config."""
        flag = self.use_important if use_important is None else use_important
        return flag is not False


DEFAULT_CONFIG = CompileConfig()
