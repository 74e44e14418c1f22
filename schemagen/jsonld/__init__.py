"""JSON-LD value decoding and document loading."""

from schemagen.jsonld.values import (
    IdRef,
    LocalizedText,
    NodeID,
    RefShape,
    StringSet,
)

__all__ = [
    "IdRef",
    "LocalizedText",
    "NodeID",
    "RefShape",
    "StringSet",
]
