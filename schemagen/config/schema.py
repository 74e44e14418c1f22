"""Configuration schema for a generator run, validated with Pydantic."""

import re
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

DEFAULT_INPUT = "schemaorg-current-https.jsonld"
DEFAULT_OUTPUT = "structschema.go"
DEFAULT_PACKAGE = "structschema"

_GO_PACKAGE_RE = re.compile(r"^[a-z_][a-z0-9_]*$")


class GeneratorConfig(BaseModel):
    """Settings for one generator run.

    Attributes:
        input_path: JSON-LD vocabulary dump to read.
        output_path: Go source file to write.
        package_name: Go package clause of the generated file.
        dump_path: Optional resolved-graph JSON dump.
        node_link_path: Optional node-link JSON dump of the child graph.
        strict_duplicates: Fail on repeated ``@id`` values.
        exclude_superseded: Keep superseded nodes out of other declarations.
        keep_vocab_prefix: Keep ``Schema`` in generated names.
        gofmt: Post-process the output with gofmt when available.
    """

    input_path: Path = Path(DEFAULT_INPUT)
    output_path: Path = Path(DEFAULT_OUTPUT)
    package_name: str = DEFAULT_PACKAGE
    dump_path: Optional[Path] = None
    node_link_path: Optional[Path] = None
    strict_duplicates: bool = False
    exclude_superseded: bool = False
    keep_vocab_prefix: bool = False
    gofmt: bool = Field(default=False)

    model_config = {"extra": "forbid"}

    @field_validator("package_name")
    @classmethod
    def validate_package_name(cls, v: str) -> str:
        """Validate that the package name is a lowercase Go identifier."""
        if not _GO_PACKAGE_RE.match(v):
            raise ValueError(f"Invalid Go package name '{v}'")
        return v
