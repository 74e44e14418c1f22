"""Main CLI entry point for schemagen.

Running ``schemagen`` with no arguments reads
``schemaorg-current-https.jsonld`` from the working directory and writes
``structschema.go``.
"""

import argparse
import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from schemagen.cli.generate import generate_command

logger = logging.getLogger("schemagen.cli")


def setup_logging(verbose: bool = False, console: Optional[Console] = None) -> None:
    """Setup logging configuration with Rich integration.

    Args:
        verbose: Enable verbose logging.
        console: Rich Console instance for coordinated output (optional).
    """
    level = logging.DEBUG if verbose else logging.WARNING

    handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        log_time_format="[%H:%M:%S]",
    )

    logging.basicConfig(
        level=level,
        format="[%(name)s] [%(levelname)s] %(message)s",
        handlers=[handler],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="schemagen",
        description="schemagen - generate Go structs from a JSON-LD ontology",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "-c",
        "--config",
        help=(
            "Optional generator configuration. Can be a path to a TOML/JSON "
            "file or an inline TOML/JSON string. Command-line flags override it."
        ),
    )
    parser.add_argument(
        "-i",
        "--input",
        help="Input JSON-LD file (default: schemaorg-current-https.jsonld)",
    )
    parser.add_argument(
        "-o",
        "--output",
        help="Output Go file (default: structschema.go)",
    )
    parser.add_argument(
        "-p",
        "--package",
        help="Go package name of the generated file (default: structschema)",
    )
    parser.add_argument(
        "--dump-json",
        help="Also write the resolved graph as indented JSON to this path",
    )
    parser.add_argument(
        "--dump-node-link",
        help="Also write the child graph in networkx node-link JSON to this path",
    )
    parser.add_argument(
        "--strict-duplicates",
        action="store_true",
        default=None,
        help="Fail when two graph nodes share the same @id",
    )
    parser.add_argument(
        "--exclude-superseded",
        action="store_true",
        default=None,
        help="Do not add superseded properties as fields of other types",
    )
    parser.add_argument(
        "--keep-vocab-prefix",
        action="store_true",
        default=None,
        help="Keep the 'Schema' vocabulary prefix in generated names",
    )
    parser.add_argument(
        "--gofmt",
        action="store_true",
        default=None,
        help="Run gofmt on the generated source when it is installed",
    )
    return parser


def main() -> int:
    """Main CLI entry point.

    Returns:
        int: Exit code.
    """
    args = build_parser().parse_args()
    setup_logging(args.verbose)
    return generate_command(args)


if __name__ == "__main__":
    sys.exit(main())
