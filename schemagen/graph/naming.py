"""Identifier to type/field name normalization.

Schema vocabularies name classes with an uppercase initial (``Person``)
and properties with a lowercase one (``name``). Generated names keep the
two apart by prefixing property-like parts with ``Prop``, so
``schema:name`` becomes ``PropName`` while ``schema:Person`` stays
``Person``.

The same function names a declaration and every field that refers to
it, which keeps field types and declaration names in agreement.
"""

import re
from typing import List

from schemagen.jsonld.values import NodeID

DEFAULT_VOCAB_PREFIX = "schema"
PROPERTY_PREFIX = "Prop"

_SEPARATOR_RE = re.compile(r"[^0-9A-Za-z]+")
_LOWER_UPPER_RE = re.compile(r"([a-z0-9])([A-Z])")
_ACRONYM_RE = re.compile(r"([A-Z]+)([A-Z][a-z])")


def split_words(text: str) -> List[str]:
    """Split text on separators and case boundaries.

    ``isPartOf`` -> ``is Part Of``; ``HTTPServer`` -> ``HTTP Server``;
    digits stay attached to the word before them.
    """
    words: List[str] = []
    for chunk in _SEPARATOR_RE.split(text):
        if not chunk:
            continue
        chunk = _LOWER_UPPER_RE.sub(r"\1 \2", chunk)
        chunk = _ACRONYM_RE.sub(r"\1 \2", chunk)
        words.extend(chunk.split())
    return words


def pascal_case(text: str) -> str:
    return "".join(word[:1].upper() + word[1:].lower() for word in split_words(text))


def _is_property_part(part: str) -> bool:
    # A part counts as lowercase when lowercasing its first character is a
    # no-op, so digit-led parts are prefixed too and stay valid identifiers.
    return part[:1].lower() == part[:1]


def type_name(node_id: NodeID, keep_vocab_prefix: bool = False) -> str:
    """Derive the declaration/field name for an identifier.

    Takes the last ``/`` segment, splits it on ``:``, Pascal-cases each
    part, and prefixes lowercase-initial parts with ``Prop``. The default
    vocabulary prefix ``schema`` is never prefixed; it is dropped unless
    ``keep_vocab_prefix`` is set.

    Args:
        node_id: Node identifier, compact (``schema:name``) or full IRI.
        keep_vocab_prefix: Emit ``Schema`` for the default vocabulary
            prefix instead of dropping it.

    Returns:
        str: The generated name.
    """
    segment = node_id.rstrip("/").rsplit("/", 1)[-1]
    parts: List[str] = []
    for part in segment.split(":"):
        if part == DEFAULT_VOCAB_PREFIX:
            if keep_vocab_prefix:
                parts.append(pascal_case(part))
            continue
        if _is_property_part(part):
            parts.append(PROPERTY_PREFIX + pascal_case(part))
        else:
            parts.append(pascal_case(part))
    return "".join(parts)
