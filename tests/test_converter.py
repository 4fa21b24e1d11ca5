"""Tests for value/node conversion."""

import logging
from enum import Enum

import pytest

from json_ez import Converter, Document, TypeMismatch, inline


class Color(Enum):
    RED = "red"


@pytest.fixture
def converter():
    return Converter()


class TestToNode:
    @pytest.mark.parametrize(
        "value, node",
        [
            (None, None),
            (True, True),
            (42, 42),
            (0.5, 0.5),
            ("text", "text"),
            ([1, "two", None], [1, "two", None]),
            ((1, 2), [1, 2]),
            ({"a": {"b": [1]}}, {"a": {"b": [1]}}),
            (Color.RED, "red"),
        ],
    )
    def test_values(self, converter, value, node):
        assert converter.to_node(value) == node

    def test_document(self, converter):
        assert converter.to_node(inline(a=1)) == {"a": 1}

    def test_documents_inside_containers(self, converter):
        assert converter.to_node([inline(a=1), {"b": inline(c=2)}]) == [{"a": 1}, {"b": {"c": 2}}]

    def test_unknown_type(self, converter):
        with pytest.raises(TypeMismatch):
            converter.to_node(object())

    def test_non_finite(self, converter):
        assert converter.to_node({"x": float("-inf")}) == {"x": None}


class TestFromNode:
    def test_strict_by_default(self, converter):
        assert converter.strict is True
        with pytest.raises(TypeMismatch):
            converter.from_node("42", int)

    def test_lax(self):
        assert Converter({"strict": False}).from_node("42", int) == 42

    def test_document(self, converter):
        document = converter.from_node({"a": 1}, Document)
        assert document == inline(a=1)

    def test_document_from_array(self, converter):
        with pytest.raises(TypeMismatch):
            converter.from_node([1, 2], Document)

    def test_list_of_documents(self, converter):
        documents = converter.from_node([{"n": 1}, {"n": 2}], list[Document])
        assert [d.get("n", int) for d in documents] == [1, 2]

    def test_mapping_of_documents(self, converter):
        documents = converter.from_node({"x": {"n": 1}}, dict[str, Document])
        assert documents["x"].get("n", int) == 1

    def test_enum(self, converter):
        assert converter.from_node("red", Color) is Color.RED

    def test_mismatch_reason(self, converter):
        with pytest.raises(TypeMismatch) as excinfo:
            converter.from_node("Arthur", int)
        assert excinfo.value.reason
        assert "Cannot convert value 'Arthur' to int" in str(excinfo.value)


def test_unknown_config_keys_ignored():
    converter = Converter({"strict": False, "unknown": 1})
    assert converter.config == {"strict": False, "enable_logger": False}


def test_logging(caplog):
    converter = Converter({"enable_logger": True})
    with caplog.at_level(logging.DEBUG, logger="json_ez.converter"):
        converter.to_node([1, 2])
        with pytest.raises(TypeMismatch):
            converter.from_node("x", int)
    messages = [record.getMessage() for record in caplog.records if record.name == "json_ez.converter"]
    assert "Converted list to array node" in messages
    assert any(record.levelno == logging.WARNING for record in caplog.records)


def test_default_converter_keeps_logging_enabled(caplog):
    converter = Converter({"enable_logger": True})
    Converter()
    with caplog.at_level(logging.DEBUG, logger="json_ez.converter"):
        converter.to_node("x")
    assert any(record.name == "json_ez.converter" for record in caplog.records)
