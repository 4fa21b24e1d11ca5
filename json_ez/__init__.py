"""Typed accessors and one-expression builders for JSON object documents."""

from .nodes import JsonArray, JsonNode, JsonObject, JsonScalar, NodeKind, copy_node, node_kind, nodes_equal
from .errors import JsonEzError, KeyNotFound, ParseError, TypeMismatch
from .converter import DEFAULT_CONVERTER, Converter, ConverterConfig
from .parser import JsonParser, ParserConfig
from .formatter import JsonFormatter
from .document import Document
from .builder import inline

__all__ = [
    "JsonArray",
    "JsonNode",
    "JsonObject",
    "JsonScalar",
    "NodeKind",
    "copy_node",
    "node_kind",
    "nodes_equal",
    "JsonEzError",
    "KeyNotFound",
    "ParseError",
    "TypeMismatch",
    "DEFAULT_CONVERTER",
    "Converter",
    "ConverterConfig",
    "JsonParser",
    "ParserConfig",
    "JsonFormatter",
    "Document",
    "inline",
]
