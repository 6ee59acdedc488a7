"""Read style fragments from a JSON file for the CLI commands."""

from __future__ import annotations

import json
from typing import IO, Any

from stylegen.errors import InvalidStyleError


def load_fragments(stream: IO[str]) -> list[dict[str, Any]]:
    """Parse a JSON document holding one style object or a list of them."""
    data = json.load(stream)
    if isinstance(data, dict):
        return [data]
    if isinstance(data, list):
        return data
    raise InvalidStyleError(
        f"Expected a style object or a list of them, got {type(data).__name__}"
    )
