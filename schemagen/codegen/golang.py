"""Go source emitter.

Renders declarations as Go struct types with ``json`` struct tags. Field
columns are aligned the way gofmt aligns them, so the output is already
formatted; running gofmt afterwards is optional.
"""

from __future__ import annotations

import json
import logging
import re
import shutil
import subprocess
from typing import Any, Dict, List, Sequence

from jinja2 import Environment, PackageLoader

from schemagen.codegen.declarations import Declaration, FieldDecl
from schemagen.errors import FormatError

logger = logging.getLogger("schemagen.codegen.golang")

GO_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

_env = Environment(
    loader=PackageLoader("schemagen.codegen", "templates"),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
    autoescape=False,
)


def go_type(field: FieldDecl) -> str:
    """Go type expression for a field: ``[]*Name`` for child references."""
    if field.reference:
        return f"[]*{field.type_name}"
    return field.type_name


def go_tag(field: FieldDecl) -> str:
    return f"`json:{json.dumps(field.tag)}`"


def struct_rows(fields: Sequence[FieldDecl]) -> List[str]:
    """Render field lines with name and type columns padded to a common width."""
    if not fields:
        return []
    types = [go_type(f) for f in fields]
    name_width = max(len(f.name) for f in fields)
    type_width = max(len(t) for t in types)
    return [
        f"{f.name.ljust(name_width)} {t.ljust(type_width)} {go_tag(f)}"
        for f, t in zip(fields, types)
    ]


def _declaration_view(declaration: Declaration) -> Dict[str, Any]:
    if not GO_IDENTIFIER_RE.match(declaration.name):
        logger.warning(
            "Type name %r for %s is not a valid Go identifier",
            declaration.name,
            declaration.source_id,
        )
    return {
        "name": declaration.name,
        "doc": declaration.doc,
        "rows": struct_rows(declaration.fields),
    }


def render_go_file(declarations: Sequence[Declaration], package: str) -> str:
    """Render a complete Go source file.

    Args:
        declarations: Declarations to emit, in output order.
        package: Go package name.

    Returns:
        str: Go source text.
    """
    template = _env.get_template("go_file.go.j2")
    source = template.render(
        package=package,
        declarations=[_declaration_view(d) for d in declarations],
    )
    logger.info("Rendered %d Go declarations (%d bytes)", len(declarations), len(source))
    return source


def format_go_source(source: str, gofmt: str = "gofmt") -> str:
    """Pipe source through gofmt when it is installed.

    Returns the input unchanged when the binary cannot be found.

    Raises:
        FormatError: If gofmt rejects the source.
    """
    binary = shutil.which(gofmt)
    if binary is None:
        logger.warning("%s not found on PATH, writing unformatted source", gofmt)
        return source

    try:
        result = subprocess.run(
            [binary],
            input=source,
            capture_output=True,
            text=True,
            check=True,
            timeout=300,
        )
    except subprocess.CalledProcessError as exc:
        raise FormatError(f"gofmt failed: {exc.stderr.strip()}") from exc
    except subprocess.TimeoutExpired as exc:
        raise FormatError("gofmt timed out") from exc
    return result.stdout
