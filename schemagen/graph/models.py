"""Ontology node and document models.

The models mirror the JSON-LD vocabulary dump: every ``@graph`` entry
becomes a :class:`GraphNode`. Polymorphic fields are decoded by the value
types in :mod:`schemagen.jsonld.values`; keys the generator does not use
(``owl:equivalentClass``, ``schema:sameAs``, ``skos:exactMatch``...) are
ignored.
"""

from __future__ import annotations

from typing import Annotated, Any, Dict, List, Optional, Set

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    InstanceOf,
    PrivateAttr,
    StrictStr,
    field_serializer,
    field_validator,
)

from schemagen.jsonld.values import (
    IdRef,
    LocalizedText,
    NodeID,
    StringSet,
    decode_optional_ref,
)

# Relation fields that produce children during resolution.
CHILD_RELATIONS = (
    "sub_property_of",
    "domain_includes",
    "range_includes",
    "sub_class_of",
)
# Relation fields that are only ever consulted as filters.
FILTER_RELATIONS = ("inverse_of", "superseded_by")

RDFS_CLASS = "rdfs:Class"
RDF_PROPERTY = "rdf:Property"


class GraphNode(BaseModel):
    """One ``@graph`` entry: a class, a property, or an enumeration member.

    ``childs`` is not part of the source document. It starts empty and is
    filled by the resolver with the identifiers that become fields of this
    node's generated declaration.
    """

    model_config = ConfigDict(extra="ignore")

    id: Annotated[StrictStr, Field(..., alias="@id")]
    type: Annotated[InstanceOf[StringSet], Field(..., alias="@type")]
    comment: Annotated[
        InstanceOf[LocalizedText],
        Field(default_factory=LocalizedText, alias="rdfs:comment"),
    ]
    label: Annotated[
        InstanceOf[LocalizedText],
        Field(default_factory=LocalizedText, alias="rdfs:label"),
    ]

    # Filters only
    inverse_of: Annotated[
        Optional[InstanceOf[IdRef]], Field(default=None, alias="schema:inverseOf")
    ]
    superseded_by: Annotated[
        Optional[InstanceOf[IdRef]], Field(default=None, alias="schema:supersededBy")
    ]

    # Child relations
    sub_property_of: Annotated[
        Optional[InstanceOf[IdRef]], Field(default=None, alias="rdfs:subPropertyOf")
    ]
    domain_includes: Annotated[
        Optional[InstanceOf[IdRef]], Field(default=None, alias="schema:domainIncludes")
    ]
    range_includes: Annotated[
        Optional[InstanceOf[IdRef]], Field(default=None, alias="schema:rangeIncludes")
    ]
    sub_class_of: Annotated[
        Optional[InstanceOf[IdRef]], Field(default=None, alias="rdfs:subClassOf")
    ]

    _childs: List[NodeID] = PrivateAttr(default_factory=list)
    _child_set: Set[NodeID] = PrivateAttr(default_factory=set)

    @field_validator("type", mode="before")
    @classmethod
    def _decode_type(cls, value: Any) -> StringSet:
        if isinstance(value, StringSet):
            return value
        return StringSet.decode(value)

    @field_validator("comment", "label", mode="before")
    @classmethod
    def _decode_text(cls, value: Any) -> LocalizedText:
        if isinstance(value, LocalizedText):
            return value
        return LocalizedText.decode(value)

    @field_validator(*CHILD_RELATIONS, *FILTER_RELATIONS, mode="before")
    @classmethod
    def _wrap_ref(cls, value: Any) -> Optional[IdRef]:
        return decode_optional_ref(value)

    @field_serializer("type", "comment", "label")
    def _encode_value(self, value: Any) -> Any:
        return value.encode()

    @field_serializer(*CHILD_RELATIONS, *FILTER_RELATIONS)
    def _encode_ref(self, value: Optional[IdRef]) -> Any:
        return value.encode() if value is not None else None

    @property
    def childs(self) -> List[NodeID]:
        """Resolved child identifiers, in insertion order."""
        return self._childs

    @property
    def is_superseded(self) -> bool:
        return self.superseded_by is not None

    @property
    def is_class(self) -> bool:
        return RDFS_CLASS in self.type

    @property
    def is_property(self) -> bool:
        return RDF_PROPERTY in self.type

    def add_child(self, child_id: NodeID) -> bool:
        """Append ``child_id`` unless already present.

        Returns:
            bool: True if the child was added.
        """
        if child_id in self._child_set:
            return False
        self._child_set.add(child_id)
        self._childs.append(child_id)
        return True

    def to_jsonld(self, include_childs: bool = False) -> Dict[str, Any]:
        """Serialize back to the JSON-LD node shape.

        Args:
            include_childs: Also emit the resolved ``Childs`` list.
        """
        payload = self.model_dump(by_alias=True, exclude_none=True)
        if include_childs:
            payload["Childs"] = list(self._childs)
        return payload


class OntologyDocument(BaseModel):
    """Top-level JSON-LD document: ``@context`` plus ``@graph``."""

    model_config = ConfigDict(extra="ignore")

    context: Annotated[Dict[str, Any], Field(default_factory=dict, alias="@context")]
    graph: Annotated[List[GraphNode], Field(..., alias="@graph")]
