"""Declaration generation and Go source rendering."""

from schemagen.codegen.declarations import (
    HEADER_FIELDS,
    Declaration,
    FieldDecl,
    generate_declaration,
    generate_declarations,
)
from schemagen.codegen.golang import format_go_source, render_go_file

__all__ = [
    "HEADER_FIELDS",
    "Declaration",
    "FieldDecl",
    "format_go_source",
    "generate_declaration",
    "generate_declarations",
    "render_go_file",
]
