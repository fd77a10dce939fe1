"""Conversion between N3.js-style term strings and rdflib terms.

Drivers emit triples as plain strings the way N3.js expects them:

* IRIs are bare: ``http://example.org/thing``
* blank nodes are ``_:label``
* literals are quoted, optionally followed by ``@lang`` or ``^^datatype``:
  ``"Jakarta"``, ``"Jakarta"@id``, ``"42"^^http://www.w3.org/2001/XMLSchema#integer``
"""

from __future__ import annotations

from typing import Any

from rdflib import BNode, Literal, URIRef
from rdflib.term import Node

from benangmerah_driver.rdf.namespaces import XSD


def literal(value: Any, lang: str | None = None, datatype: str | None = None) -> str:
    """Build an N3.js literal string for *value*.

    Python bools, ints and floats get an XSD datatype unless one is given.
    """
    if isinstance(value, bool):
        lexical = "true" if value else "false"
        datatype = datatype or str(XSD.boolean)
    elif isinstance(value, int):
        lexical = str(value)
        datatype = datatype or str(XSD.integer)
    elif isinstance(value, float):
        lexical = repr(value)
        datatype = datatype or str(XSD.double)
    else:
        lexical = str(value)

    if lang:
        return f'"{lexical}"@{lang}'
    if datatype:
        return f'"{lexical}"^^{datatype}'
    return f'"{lexical}"'


def to_term(value: Any) -> Node:
    """Convert an N3.js-style term string to an rdflib term."""
    if isinstance(value, Node):
        return value
    if not isinstance(value, str):
        return Literal(value)
    if value.startswith('"'):
        return _parse_literal(value)
    if value.startswith("_:"):
        return BNode(value[2:])
    return URIRef(value)


def _parse_literal(value: str) -> Literal:
    end = value.rfind('"')
    if end <= 0:
        raise ValueError(f"Unterminated literal: {value!r}")
    lexical = value[1:end]
    suffix = value[end + 1 :]
    if suffix.startswith("@"):
        return Literal(lexical, lang=suffix[1:])
    if suffix.startswith("^^"):
        datatype = suffix[2:]
        if datatype.startswith("<") and datatype.endswith(">"):
            datatype = datatype[1:-1]
        return Literal(lexical, datatype=URIRef(datatype))
    if suffix:
        raise ValueError(f"Unexpected text after literal: {value!r}")
    return Literal(lexical)
