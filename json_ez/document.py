"""Document: a JSON object with typed accessors."""

from __future__ import annotations

from typing import Any, Iterator, Mapping, TypeVar

from pydantic import GetCoreSchemaHandler, ValidationInfo
from pydantic_core import core_schema

from .converter import DEFAULT_CONVERTER, Converter
from .errors import KeyNotFound
from .formatter import DEFAULT_FORMATTER, JsonFormatter
from .nodes import JsonNode, JsonObject, copy_node, nodes_equal
from .parser import DEFAULT_PARSER, JsonParser

T = TypeVar("T")


class Document:
    """Owns one JSON object node.

    Values go in through :meth:`add`, which converts them to tree nodes, and
    come back out through :meth:`get`, which converts the stored node to the
    requested type::

        doc = Document()
        doc.add("name", "Arthur")
        doc.add("age", 42)
        doc.get("age", int)  # 42

    Adding an existing key replaces its value.
    """

    __slots__ = ("_data", "_converter")

    def __init__(self, *, converter: Converter | None = None):
        self._data: JsonObject = {}
        self._converter = converter or DEFAULT_CONVERTER

    # -- Construction ----------------------------------------------------

    @classmethod
    def from_dict(cls, mapping: Mapping[str, Any], *, converter: Converter | None = None) -> Document:
        document = cls(converter=converter)
        for key, value in mapping.items():
            document.add(key, value)
        return document

    @classmethod
    def from_text(
        cls,
        text: str | bytes,
        *,
        converter: Converter | None = None,
        parser: JsonParser | None = None,
    ) -> Document:
        """Parse JSON text whose root is an object.

        Raises ``ParseError`` for malformed text or a non-object root.
        """
        document = cls(converter=converter)
        document._data = (parser or DEFAULT_PARSER).parse_document(text)
        return document

    # -- Typed access ----------------------------------------------------

    def add(self, key: str, value: Any) -> None:
        """Store *value* under *key*, replacing any previous value."""
        if not isinstance(key, str):
            raise TypeError(f"Document keys must be str, not {type(key).__name__}")
        self._data[key] = self._converter.to_node(value)

    def get(self, key: str, target: type[T]) -> T:
        """Return the value under *key* converted to *target*.

        Raises ``KeyNotFound`` when *key* is absent and ``TypeMismatch`` when
        the stored node cannot be converted.
        """
        return self._converter.from_node(self._lookup(key), target)

    def get_node(self, key: str) -> JsonNode:
        return copy_node(self._lookup(key))

    def _lookup(self, key: str) -> JsonNode:
        try:
            return self._data[key]
        except KeyError:
            raise KeyNotFound(key, self.to_text()) from None

    # -- Serialization ---------------------------------------------------

    def to_dict(self) -> JsonObject:
        return copy_node(self._data)

    def to_text(self) -> str:
        return DEFAULT_FORMATTER.format_compact(self._data)

    def to_pretty_text(self, formatter: JsonFormatter | None = None) -> str:
        return (formatter or DEFAULT_FORMATTER).format_pretty(self._data)

    def copy(self) -> Document:
        duplicate = type(self)(converter=self._converter)
        duplicate._data = self.to_dict()
        return duplicate

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> Document:
        return self.copy()

    # -- Mapping conveniences --------------------------------------------

    def keys(self) -> list[str]:
        return list(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._data))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return nodes_equal(self._data, other._data)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Document({self.to_text()})"

    def __str__(self) -> str:
        return self.to_text()

    # -- pydantic integration --------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        from_object = core_schema.with_info_after_validator_function(
            cls._validate,
            core_schema.dict_schema(keys_schema=core_schema.str_schema(), values_schema=core_schema.any_schema()),
        )
        return core_schema.json_or_python_schema(
            json_schema=from_object,
            python_schema=core_schema.union_schema([core_schema.is_instance_schema(cls), from_object]),
            serialization=core_schema.plain_serializer_function_ser_schema(cls.to_dict),
        )

    @classmethod
    def _validate(cls, value: dict[str, Any], info: ValidationInfo) -> Document:
        # Nested documents inherit the converter that validated them.
        context = info.context if isinstance(info.context, dict) else {}
        converter = context.get("converter") or DEFAULT_CONVERTER
        document = cls(converter=converter)
        document._data = converter.to_node(value)
        return document


__all__ = ["Document"]
