from __future__ import annotations

import json
from typing import NotRequired, TypedDict

from json_ez.errors import ParseError
from json_ez.logger import Logger
from json_ez.nodes import JsonObject, node_kind
from json_ez.utils import resolve_config


class ParserConfig(TypedDict):
    enable_logger: NotRequired[bool]


class ParserConfigRequired(TypedDict):
    enable_logger: bool


DEFAULT_CONFIG: ParserConfigRequired = {"enable_logger": False}


class JsonParser:
    def __init__(self, config: ParserConfig | None = None):
        self.config = resolve_config(config or {}, DEFAULT_CONFIG)
        self.logger = Logger(config={"name": "json_ez.parser", "is_enabled": self.config["enable_logger"]}).logger

    def parse_document(self, text: str | bytes) -> JsonObject:
        """Parse *text* into the object node at the root of a document."""
        try:
            root = json.loads(text, parse_constant=self._reject_constant)
        except json.JSONDecodeError as exc:
            self.logger.warning(f"Malformed JSON text: {exc}")
            raise ParseError(exc.msg, exc.lineno, exc.colno) from exc
        except UnicodeDecodeError as exc:
            self.logger.warning(f"Undecodable JSON bytes: {exc}")
            raise ParseError(f"Invalid {exc.encoding} byte at offset {exc.start}") from exc
        except RecursionError as exc:
            self.logger.warning("JSON text nested too deeply")
            raise ParseError("Nesting is too deep to parse") from exc
        if not isinstance(root, dict):
            raise ParseError(f"Expected an object at the document root, found {node_kind(root)}")
        self.logger.debug(f"Parsed document with {len(root)} key(s)")
        return root

    def _reject_constant(self, name: str):
        raise ParseError(f"Non-finite number {name} is not valid JSON")


DEFAULT_PARSER = JsonParser()

__all__ = ["JsonParser", "ParserConfig", "DEFAULT_PARSER"]
