"""Exceptions raised by json_ez."""

from __future__ import annotations

from typing import Any


class JsonEzError(Exception):
    """Base class for every error raised by json_ez."""


class KeyNotFound(JsonEzError, LookupError):
    """Raised when a key is absent from a document."""

    def __init__(self, key: str, document_text: str):
        self.key = key
        self.document_text = document_text
        super().__init__(f"Cannot find key {key!r} in {document_text}")


class TypeMismatch(JsonEzError, TypeError):
    """Raised when a value cannot be converted to or from a tree node."""

    def __init__(self, value: Any, target: Any, reason: str | None = None):
        self.value = value
        self.target = target
        self.reason = reason
        message = f"Cannot convert value {value!r} to {_type_name(target)}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ParseError(JsonEzError, ValueError):
    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        self.message = message
        self.line = line
        self.column = column
        if line is not None:
            message = f"{message} at line {line}, column {column}"
        super().__init__(message)


def _type_name(target: Any) -> str:
    if isinstance(target, str):
        return target
    if isinstance(target, type) and not getattr(target, "__args__", None):
        return target.__qualname__
    return repr(target)


__all__ = ["JsonEzError", "KeyNotFound", "TypeMismatch", "ParseError"]
