"""Tests for loading and resolving JSON-LD documents."""

from __future__ import annotations

import io
import json

import pytest

from schemagen.errors import DecodeError, DuplicateNodeError, InvalidReferenceShape, InvalidStringShape
from schemagen.jsonld.loader import decode_document, load_document, parse

PERSON_DOCUMENT = {
    "@context": {"schema": "https://schema.org/", "rdfs": "http://www.w3.org/2000/01/rdf-schema#"},
    "@graph": [
        {"@id": "schema:Person", "@type": "rdfs:Class", "rdfs:comment": "A person."},
        {
            "@id": "schema:name",
            "@type": "rdf:Property",
            "schema:domainIncludes": {"@id": "schema:Person"},
            "schema:rangeIncludes": {"@id": "schema:Text"},
        },
        {"@id": "schema:Text", "@type": ["schema:DataType", "rdfs:Class"]},
    ],
}


def _stream(document) -> io.BytesIO:
    return io.BytesIO(json.dumps(document).encode("utf-8"))


def test_parse_resolves_person_document() -> None:
    parsed = parse(_stream(PERSON_DOCUMENT))

    graph = parsed.graph
    assert graph.get("schema:Person").childs == ["schema:name"]
    assert graph.get("schema:name").childs == ["schema:Text"]
    assert graph.get("schema:Text").type.values == ("schema:DataType", "rdfs:Class")
    assert parsed.stats.members_attached == 1
    assert parsed.stats.ranges_attached == 1


def test_parse_accepts_text_streams() -> None:
    parsed = parse(io.StringIO(json.dumps(PERSON_DOCUMENT)))

    assert len(parsed.graph) == 3


def test_load_document_rejects_malformed_json() -> None:
    with pytest.raises(DecodeError, match="failed to decode JSON"):
        load_document(io.BytesIO(b'{"@graph": ['))


def test_load_document_rejects_invalid_utf8() -> None:
    with pytest.raises(DecodeError):
        load_document(io.BytesIO(b"\xff\xfe\x00{"))


@pytest.mark.parametrize(
    "data",
    [
        [],
        {"@context": {}},
        {"@graph": {"@id": "schema:Thing"}},
        {"@graph": [{"@type": "rdfs:Class"}]},
    ],
)
def test_decode_document_rejects_wrong_structure(data) -> None:
    with pytest.raises(DecodeError, match="invalid ontology document"):
        decode_document(data)


def test_parse_ignores_non_json_ld_node_keys() -> None:
    document = {"@graph": [{"@id": "ex:Thing", "@type": "rdfs:Class", "comment": {"note": 1}}]}

    parsed = parse(_stream(document))

    assert str(parsed.graph.get("ex:Thing").comment) == ""


def test_parse_rejects_node_without_json_ld_identifier() -> None:
    document = {"@graph": [{"id": "ex:Thing", "type": "rdfs:Class"}]}

    with pytest.raises(DecodeError, match="invalid ontology document"):
        parse(_stream(document))


def test_decode_document_surfaces_shape_errors() -> None:
    data = {"@graph": [{"@id": "schema:Thing", "@type": {"@id": "rdfs:Class"}}]}

    with pytest.raises(InvalidStringShape) as excinfo:
        decode_document(data)
    assert excinfo.value.raw == {"@id": "rdfs:Class"}


def test_parse_aborts_on_invalid_reference() -> None:
    document = {
        "@graph": [
            {"@id": "schema:Person", "@type": "rdfs:Class"},
            {"@id": "schema:name", "@type": "rdf:Property", "schema:domainIncludes": 7},
        ]
    }

    with pytest.raises(InvalidReferenceShape):
        parse(_stream(document))


def test_parse_strict_duplicates() -> None:
    document = {
        "@graph": [
            {"@id": "schema:Thing", "@type": "rdfs:Class"},
            {"@id": "schema:Thing", "@type": "rdfs:Class"},
        ]
    }

    assert parse(_stream(document)).graph.duplicates == ["schema:Thing"]
    with pytest.raises(DuplicateNodeError):
        parse(_stream(document), strict_duplicates=True)


def test_parse_empty_graph() -> None:
    parsed = parse(_stream({"@graph": []}))

    assert len(parsed.graph) == 0
    assert parsed.stats.total_children == 0
