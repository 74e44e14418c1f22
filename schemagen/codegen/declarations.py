"""Project resolved graph nodes into structured-type declarations.

A declaration is language neutral: a name, an ordered field list and an
optional doc comment. Every declaration starts with the two JSON-LD
header fields (``@context`` and ``@type``) followed by one field per
resolved child. Child fields hold a list of references to the child's own
declaration, which keeps self- and mutually recursive types finite.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List

from schemagen.graph.manager import OntologyGraph
from schemagen.graph.models import GraphNode
from schemagen.graph.naming import type_name

logger = logging.getLogger("schemagen.codegen.declarations")

STRING_TYPE = "string"


@dataclass(frozen=True)
class FieldDecl:
    """One field of a generated declaration.

    Attributes:
        name: Field name.
        type_name: Scalar type, or the referenced declaration name.
        tag: Serialization key, the raw JSON-LD key or identifier.
        reference: Field holds a list of references to ``type_name``.
    """

    name: str
    type_name: str
    tag: str
    reference: bool = False


HEADER_FIELDS = (
    FieldDecl("Context", STRING_TYPE, "@context"),
    FieldDecl("Type", STRING_TYPE, "@type"),
)


@dataclass
class Declaration:
    """A named structured type generated from one graph node."""

    name: str
    source_id: str
    fields: List[FieldDecl] = field(default_factory=list)
    doc: List[str] = field(default_factory=list)

    @property
    def child_fields(self) -> List[FieldDecl]:
        return [f for f in self.fields if f.reference]


def _doc_lines(node: GraphNode) -> List[str]:
    return [line.rstrip() for line in str(node.comment).splitlines()]


def generate_declaration(node: GraphNode, keep_vocab_prefix: bool = False) -> Declaration:
    """Build the declaration for one resolved node."""
    declaration = Declaration(
        name=type_name(node.id, keep_vocab_prefix=keep_vocab_prefix),
        source_id=node.id,
        fields=list(HEADER_FIELDS),
        doc=_doc_lines(node),
    )
    for child in node.childs:
        child_name = type_name(child, keep_vocab_prefix=keep_vocab_prefix)
        declaration.fields.append(
            FieldDecl(name=child_name, type_name=child_name, tag=child, reference=True)
        )

    collisions = [
        name for name, count in Counter(f.name for f in declaration.fields).items()
        if count > 1
    ]
    if collisions:
        logger.warning(
            "Declaration %s (%s) has colliding field names: %s",
            declaration.name,
            node.id,
            ", ".join(sorted(collisions)),
        )
    return declaration


def generate_declarations(
    graph: OntologyGraph, keep_vocab_prefix: bool = False
) -> List[Declaration]:
    """Build one declaration per indexed node.

    Declarations follow index order; callers must not rely on it.
    """
    declarations: List[Declaration] = []
    seen: Dict[str, str] = {}
    for node in graph.unique_nodes():
        declaration = generate_declaration(node, keep_vocab_prefix=keep_vocab_prefix)
        if declaration.name in seen:
            logger.warning(
                "Identifiers %s and %s both map to type name %s",
                seen[declaration.name],
                node.id,
                declaration.name,
            )
        seen.setdefault(declaration.name, node.id)
        declarations.append(declaration)

    logger.info(
        "Generated %d declarations with %d child fields",
        len(declarations),
        sum(len(d.child_fields) for d in declarations),
    )
    return declarations
