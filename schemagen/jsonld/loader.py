"""Load a JSON-LD vocabulary dump into a resolved ontology graph."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import IO, Any, Union

from pydantic import ValidationError

from schemagen.errors import DecodeError, SchemaGenError, ShapeError
from schemagen.graph.manager import OntologyGraph
from schemagen.graph.models import OntologyDocument
from schemagen.graph.resolver import RelationResolver, ResolutionStats

logger = logging.getLogger("schemagen.jsonld.loader")


@dataclass
class ParsedOntology:
    """A resolved graph together with its resolution counters."""

    graph: OntologyGraph
    stats: ResolutionStats


def _unwrap_validation_error(exc: ValidationError) -> SchemaGenError:
    """Recover the shape error a field validator raised, if any."""
    for error in exc.errors():
        cause = (error.get("ctx") or {}).get("error")
        if isinstance(cause, ShapeError):
            location = ".".join(str(part) for part in error.get("loc", ()))
            logger.error("Invalid value at %s: %s", location, cause)
            return cause
    return DecodeError(f"invalid ontology document: {exc}")


def decode_document(data: Any) -> OntologyDocument:
    """Validate an already parsed JSON value as an ontology document.

    Raises:
        ShapeError: A polymorphic field matched none of its shapes.
        DecodeError: The document structure is invalid.
    """
    try:
        return OntologyDocument.model_validate(data)
    except ValidationError as exc:
        raise _unwrap_validation_error(exc) from exc


def load_document(stream: IO[Any]) -> OntologyDocument:
    """Read and decode one JSON-LD document from a text or binary stream.

    Raises:
        DecodeError: The stream is not valid JSON or not an ontology document.
    """
    try:
        data = json.load(stream)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DecodeError(f"failed to decode JSON: {exc}") from exc

    document = decode_document(data)
    logger.info(
        "Decoded document: %d graph nodes, %d context prefixes",
        len(document.graph),
        len(document.context),
    )
    return document


def parse(
    stream: Union[IO[str], IO[bytes]],
    strict_duplicates: bool = False,
    exclude_superseded: bool = False,
) -> ParsedOntology:
    """Decode, index and resolve an ontology in one go.

    Args:
        stream: Input JSON-LD stream.
        strict_duplicates: Reject repeated ``@id`` values.
        exclude_superseded: Keep superseded nodes out of other nodes' fields.

    Returns:
        ParsedOntology: The resolved graph and resolution counters.
    """
    document = load_document(stream)
    graph = OntologyGraph.from_document(document, strict_duplicates=strict_duplicates)
    stats = RelationResolver(graph, exclude_superseded=exclude_superseded).resolve()
    return ParsedOntology(graph=graph, stats=stats)
