"""Tree node definitions for JSON documents.

A node is exactly what ``json.loads`` produces; no wrapper classes are
involved. The variant set is closed: null, bool, number, string, array and
object.
"""

from __future__ import annotations

import math
from typing import Literal

JsonScalar = None | bool | int | float | str
JsonArray = list["JsonNode"]
JsonObject = dict[str, "JsonNode"]
JsonNode = JsonScalar | JsonArray | JsonObject

NodeKind = Literal["null", "bool", "number", "string", "array", "object"]


def node_kind(node: JsonNode) -> NodeKind:
    if node is None:
        return "null"
    # bool is a subclass of int, so it must be tested first
    if isinstance(node, bool):
        return "bool"
    if isinstance(node, (int, float)):
        return "number"
    if isinstance(node, str):
        return "string"
    if isinstance(node, list):
        return "array"
    if isinstance(node, dict):
        return "object"
    raise TypeError(f"{type(node).__name__} is not a JSON tree node")


def copy_node(node: JsonNode) -> JsonNode:
    """Deep copy *node*, replacing non-finite floats with ``None``."""
    if isinstance(node, dict):
        return {key: copy_node(value) for key, value in node.items()}
    if isinstance(node, list):
        return [copy_node(item) for item in node]
    if isinstance(node, float) and not math.isfinite(node):
        return None
    return node


def nodes_equal(left: JsonNode, right: JsonNode) -> bool:
    """Compare two trees variant by variant, so `true` never equals `1`."""
    if node_kind(left) != node_kind(right):
        return False
    if isinstance(left, dict):
        return left.keys() == right.keys() and all(nodes_equal(value, right[key]) for key, value in left.items())
    if isinstance(left, list):
        return len(left) == len(right) and all(map(nodes_equal, left, right))
    return left == right


__all__ = ["JsonScalar", "JsonArray", "JsonObject", "JsonNode", "NodeKind", "node_kind", "copy_node", "nodes_equal"]
