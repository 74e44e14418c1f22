"""Generate command implementation."""

from __future__ import annotations

import logging
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from schemagen.codegen import format_go_source, generate_declarations, render_go_file
from schemagen.codegen.declarations import Declaration
from schemagen.config import GeneratorConfig, apply_overrides, load_generator_config
from schemagen.errors import SchemaGenError
from schemagen.export import export_node_link, export_resolved_graph
from schemagen.jsonld.loader import ParsedOntology, parse

logger = logging.getLogger("schemagen.cli.generate")


def resolve_config(args) -> GeneratorConfig:
    """Merge the optional config source with command-line overrides."""
    config = load_generator_config(getattr(args, "config", None))
    return apply_overrides(
        config,
        input_path=getattr(args, "input", None),
        output_path=getattr(args, "output", None),
        package_name=getattr(args, "package", None),
        dump_path=getattr(args, "dump_json", None),
        node_link_path=getattr(args, "dump_node_link", None),
        strict_duplicates=getattr(args, "strict_duplicates", None),
        exclude_superseded=getattr(args, "exclude_superseded", None),
        keep_vocab_prefix=getattr(args, "keep_vocab_prefix", None),
        gofmt=getattr(args, "gofmt", None),
    )


def run(config: GeneratorConfig) -> tuple[ParsedOntology, List[Declaration]]:
    """Run the whole pipeline for ``config`` and write its outputs.

    The Go file is only written once every step has succeeded.

    Raises:
        SchemaGenError: On decode, resolution or formatting failures.
        OSError: If the input cannot be read or an output cannot be written.
    """
    logger.info("Reading ontology: %s", config.input_path)
    with open(config.input_path, "rb") as stream:
        parsed = parse(
            stream,
            strict_duplicates=config.strict_duplicates,
            exclude_superseded=config.exclude_superseded,
        )

    declarations = generate_declarations(
        parsed.graph, keep_vocab_prefix=config.keep_vocab_prefix
    )
    source = render_go_file(declarations, config.package_name)
    if config.gofmt:
        source = format_go_source(source)

    if config.dump_path:
        export_resolved_graph(parsed.graph, config.dump_path)
    if config.node_link_path:
        export_node_link(parsed.graph, config.node_link_path)

    config.output_path.parent.mkdir(parents=True, exist_ok=True)
    config.output_path.write_text(source, encoding="utf-8")
    logger.info("Wrote %s", config.output_path)

    return parsed, declarations


def print_summary(
    console: Console,
    config: GeneratorConfig,
    parsed: ParsedOntology,
    declarations: List[Declaration],
) -> None:
    table = Table(title="schemagen", show_header=False)
    table.add_column("metric", style="cyan")
    table.add_column("value", justify="right")
    table.add_row("Graph nodes", str(len(parsed.graph.nodes)))
    unique = list(parsed.graph.unique_nodes())
    table.add_row("Classes", str(sum(1 for node in unique if node.is_class)))
    table.add_row("Properties", str(sum(1 for node in unique if node.is_property)))
    table.add_row("Duplicate identifiers", str(len(parsed.graph.duplicates)))
    table.add_row("Declarations", str(len(declarations)))
    table.add_row("Child fields", str(sum(len(d.child_fields) for d in declarations)))
    table.add_row("Inherited fields", str(parsed.stats.inherited))
    table.add_row("Dangling references", str(parsed.stats.dangling))
    if config.exclude_superseded:
        table.add_row("Superseded skipped", str(parsed.stats.superseded_skipped))
    table.add_row("Recursive type groups", str(len(parsed.graph.recursive_groups())))
    table.add_row("Output", str(config.output_path))
    console.print(table)


def generate_command(args, console: Optional[Console] = None) -> int:
    """Execute the generate command.

    Args:
        args: Parsed command-line arguments.
        console: Rich console for the summary table (optional).

    Returns:
        int: Exit code (0 for success, non-zero for failure).
    """
    logger.info("=== schemagen ===")

    try:
        config = resolve_config(args)
        parsed, declarations = run(config)
    except (SchemaGenError, OSError) as err:
        logger.error("Generation failed: %s", err)
        return 1

    print_summary(console or Console(stderr=True), config, parsed, declarations)
    return 0
