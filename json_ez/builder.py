"""Declarative construction of documents in a single expression."""

from __future__ import annotations

from typing import Any

from .document import Document


def inline(*pairs: tuple[str, Any], **entries: Any) -> Document:
    """Build a populated :class:`Document` from key/value pairs.

    Positional ``(key, value)`` pairs are added first, left to right, then
    keyword entries in call order. The result is the same as calling
    :meth:`Document.add` once per entry, so a repeated key keeps its last
    value::

        inline(
            ("title", "The Hitchhiker's Guide to the Galaxy"),
            novels=[inline(title="Mostly Harmless", read=False)],
            movie=inline(title="The Hitchhiker's Guide to the Galaxy", release_date=2005),
        )
    """
    document = Document()
    for key, value in pairs:
        document.add(key, value)
    for key, value in entries.items():
        document.add(key, value)
    return document


__all__ = ["inline"]
