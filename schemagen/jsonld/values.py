"""Polymorphic JSON-LD value types.

JSON-LD lets the same field appear in several shapes: a bare string, a
single object, or an array of either. Each category below is decoded by
trying its shapes in a fixed order and accepting the first one that
validates; encoding picks the most compact shape that preserves the value.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterator, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictStr, TypeAdapter, ValidationError

from schemagen.errors import (
    InvalidLocalizedTextShape,
    InvalidReferenceShape,
    InvalidStringShape,
)

NodeID = str


class _IdObject(BaseModel):
    """``{"@id": ...}`` node reference; sibling keys are ignored."""

    model_config = ConfigDict(extra="ignore")

    id: StrictStr = Field(alias="@id")


class _LangObject(BaseModel):
    """``{"@value": ..., "@language": ...}`` value object; null reads as empty."""

    model_config = ConfigDict(extra="ignore")

    value: Optional[StrictStr] = Field(alias="@value")
    language: Optional[StrictStr] = Field(default=None, alias="@language")


_ID_OBJECT = TypeAdapter(_IdObject)
_ID_OBJECT_LIST = TypeAdapter(List[_IdObject])
_STRING = TypeAdapter(StrictStr)
_STRING_LIST = TypeAdapter(List[StrictStr])
_LANG_OBJECT = TypeAdapter(_LangObject)


# =============================================================================
# Identifier references
# =============================================================================


class RefShape(str, Enum):
    """Shapes accepted for an identifier reference, in decoding order."""

    OBJECT = "object"
    OBJECT_LIST = "object_list"
    ID_LIST = "id_list"


_REF_ATTEMPTS: Tuple[Tuple[RefShape, Callable[[Any], List[NodeID]]], ...] = (
    (RefShape.OBJECT, lambda raw: [_ID_OBJECT.validate_python(raw).id]),
    (
        RefShape.OBJECT_LIST,
        lambda raw: [obj.id for obj in _ID_OBJECT_LIST.validate_python(raw)],
    ),
    (RefShape.ID_LIST, lambda raw: list(_STRING_LIST.validate_python(raw))),
)


@dataclass
class IdRef:
    """Raw, not yet interpreted reference to one or more graph nodes.

    The value is kept exactly as it appeared in the document; identifiers
    are only extracted when :meth:`get_ids` is called.
    """

    raw: Any

    def _classify(self) -> Tuple[RefShape, List[NodeID]]:
        for shape, extract in _REF_ATTEMPTS:
            try:
                return shape, extract(self.raw)
            except ValidationError:
                continue
        raise InvalidReferenceShape(self.raw)

    @property
    def shape(self) -> RefShape:
        """Shape the raw value was recognized as."""
        return self._classify()[0]

    def get_ids(self) -> List[NodeID]:
        """Return the referenced identifiers in document order.

        Raises:
            InvalidReferenceShape: If the raw value matches no known shape.
        """
        return self._classify()[1]

    def encode(self) -> Any:
        return self.raw


# =============================================================================
# String sets
# =============================================================================


@dataclass(frozen=True)
class StringSet:
    """One or more strings, written as a bare string when there is one."""

    values: Tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.values:
            raise InvalidStringShape(list(self.values))

    @classmethod
    def decode(cls, raw: Any) -> "StringSet":
        try:
            return cls((_STRING.validate_python(raw),))
        except ValidationError:
            pass
        try:
            return cls(tuple(_STRING_LIST.validate_python(raw)))
        except ValidationError:
            pass
        raise InvalidStringShape(raw)

    def encode(self) -> Any:
        if len(self.values) == 1:
            return self.values[0]
        return list(self.values)

    def first(self) -> str:
        return self.values[0]

    def __contains__(self, value: object) -> bool:
        return value in self.values

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)


# =============================================================================
# Localized text
# =============================================================================


@dataclass(frozen=True)
class LocalizedText:
    """A string optionally tagged with a language code."""

    value: str = ""
    language: str = ""

    @classmethod
    def decode(cls, raw: Any) -> "LocalizedText":
        """Decode a bare string or a value object; ``null`` is empty text."""
        if raw is None:
            return cls()
        try:
            return cls(_STRING.validate_python(raw))
        except ValidationError:
            pass
        try:
            obj = _LANG_OBJECT.validate_python(raw)
            return cls(obj.value or "", obj.language or "")
        except ValidationError:
            pass
        raise InvalidLocalizedTextShape(raw)

    def encode(self) -> Any:
        if not self.language:
            return self.value
        return {"@value": self.value, "@language": self.language}

    def __str__(self) -> str:
        return self.value


def decode_optional_ref(raw: Optional[Any]) -> Optional[IdRef]:
    """Wrap a relation value; JSON ``null`` means the relation is absent."""
    if raw is None or isinstance(raw, IdRef):
        return raw
    return IdRef(raw)
