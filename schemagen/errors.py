"""Exception hierarchy for schemagen.

Every failure is fatal for a run: the generated unit is a single
cohesive source file, so there is no per-node recovery.
"""

from typing import Any


class SchemaGenError(Exception):
    """Base class for all schemagen errors."""
    pass


class DecodeError(SchemaGenError):
    """The input document is not valid JSON or has the wrong structure."""
    pass


class ShapeError(DecodeError, ValueError):
    """A field value matched none of its supported polymorphic shapes.

    Also a ValueError so that pydantic treats it as a validation failure
    when raised from a field validator.
    """

    kind: str = "value"

    def __init__(self, raw: Any) -> None:
        self.raw = raw
        super().__init__(f"cannot decode {self.kind}: {raw!r}")


class InvalidReferenceShape(ShapeError):
    """Identifier reference was not an object, object list, or id list."""

    kind = "identifier reference"


class InvalidStringShape(ShapeError):
    """Value was neither a string nor a list of strings."""

    kind = "string or string list"


class InvalidLocalizedTextShape(ShapeError):
    """Value was neither a string nor an @value/@language object."""

    kind = "localized text"


class DuplicateNodeError(SchemaGenError):
    """Two graph nodes share the same @id (strict mode only)."""

    def __init__(self, node_id: str) -> None:
        self.node_id = node_id
        super().__init__(f"duplicate node identifier: {node_id}")


class ConfigError(SchemaGenError):
    """Configuration could not be read or failed validation."""
    pass


class FormatError(SchemaGenError):
    """Post-processing the generated source with gofmt failed."""
    pass
