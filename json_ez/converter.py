"""Conversion between Python values and JSON tree nodes.

``to_node`` dumps any value pydantic knows how to serialize into a tree;
``from_node`` validates a tree into whatever target type the caller asks
for. Documents take part in both directions through their pydantic core
schema, so containers of documents need no special casing here.
"""

from __future__ import annotations

import json
from typing import Any, NotRequired, TypedDict, TypeVar

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_jsonable_python

from json_ez.errors import TypeMismatch
from json_ez.logger import Logger
from json_ez.nodes import JsonNode, copy_node, node_kind
from json_ez.utils import resolve_config

T = TypeVar("T")


class ConverterConfig(TypedDict):
    strict: NotRequired[bool]
    enable_logger: NotRequired[bool]


class ConverterConfigRequired(TypedDict):
    strict: bool
    enable_logger: bool


DEFAULT_CONFIG: ConverterConfigRequired = {"strict": True, "enable_logger": False}


class Converter:
    def __init__(self, config: ConverterConfig | None = None):
        self.config = resolve_config(config or {}, DEFAULT_CONFIG)
        self.logger = Logger(config={"name": "json_ez.converter", "is_enabled": self.config["enable_logger"]}).logger

    @property
    def strict(self) -> bool:
        return self.config["strict"]

    def to_node(self, value: Any) -> JsonNode:
        from json_ez.document import Document

        if isinstance(value, Document):
            return value.to_dict()
        try:
            dumped = to_jsonable_python(value, fallback=self._fallback)
        except PydanticSerializationError as exc:
            self.logger.warning(f"Cannot convert {type(value).__name__} to a tree node: {exc}")
            raise TypeMismatch(value, "a JSON node", str(exc)) from exc
        # copy_node also detaches the tree from value
        node = copy_node(dumped)
        self.logger.debug(f"Converted {type(value).__name__} to {node_kind(node)} node")
        return node

    def from_node(self, node: JsonNode, target: type[T]) -> T:
        adapter = TypeAdapter(target)
        try:
            value = adapter.validate_json(
                json.dumps(node, allow_nan=False),
                strict=self.strict,
                context={"converter": self},
            )
        except ValidationError as exc:
            self.logger.warning(f"Cannot convert {node_kind(node)} node to {target!r}")
            raise TypeMismatch(node, target, _first_error(exc)) from exc
        self.logger.debug(f"Converted {node_kind(node)} node to {target!r}")
        return value

    def _fallback(self, value: Any) -> Any:
        from json_ez.document import Document

        if isinstance(value, Document):
            return value.to_dict()
        raise TypeMismatch(value, "a JSON node", f"{type(value).__name__} is not JSON serializable")


def _first_error(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    error = errors[0]
    location = ".".join(str(part) for part in error["loc"])
    return f"{location}: {error['msg']}" if location else error["msg"]


DEFAULT_CONVERTER = Converter()

__all__ = ["Converter", "ConverterConfig", "DEFAULT_CONFIG", "DEFAULT_CONVERTER"]
