"""Text serialization of JSON trees."""

from __future__ import annotations

import json
from dataclasses import dataclass

from .nodes import JsonNode


@dataclass(frozen=True)
class JsonFormatter:
    indent: int | str = 2
    ensure_ascii: bool = False
    sort_keys: bool = False

    def format_compact(self, node: JsonNode) -> str:
        return json.dumps(
            node,
            separators=(",", ":"),
            ensure_ascii=self.ensure_ascii,
            sort_keys=self.sort_keys,
            allow_nan=False,
        )

    def format_pretty(self, node: JsonNode) -> str:
        return json.dumps(
            node,
            indent=self.indent,
            ensure_ascii=self.ensure_ascii,
            sort_keys=self.sort_keys,
            allow_nan=False,
        )


DEFAULT_FORMATTER = JsonFormatter()

__all__ = ["JsonFormatter", "DEFAULT_FORMATTER"]
