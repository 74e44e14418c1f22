"""Tests for the schemagen command-line entry point."""

from __future__ import annotations

import io
import json
import sys
from pathlib import Path
from types import SimpleNamespace

import pytest
from rich.console import Console

import schemagen.main as main
from schemagen.cli.generate import generate_command, resolve_config

DOCUMENT = {
    "@context": {"schema": "https://schema.org/"},
    "@graph": [
        {"@id": "schema:Thing", "@type": "rdfs:Class", "rdfs:comment": "The most generic type of item."},
        {"@id": "schema:Person", "@type": "rdfs:Class", "rdfs:subClassOf": {"@id": "schema:Thing"}},
        {
            "@id": "schema:name",
            "@type": "rdf:Property",
            "schema:domainIncludes": {"@id": "schema:Thing"},
            "schema:rangeIncludes": {"@id": "schema:Text"},
        },
        {"@id": "schema:Text", "@type": ["schema:DataType", "rdfs:Class"]},
    ],
}


def _write_document(path: Path, document=DOCUMENT) -> Path:
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


def _quiet_console() -> Console:
    return Console(file=io.StringIO(), width=120)


def test_main_without_arguments_uses_conventional_paths(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    """A bare run reads the default dump and writes structschema.go."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(main, "setup_logging", lambda *a, **k: None)
    monkeypatch.setattr(sys, "argv", ["schemagen"])
    _write_document(tmp_path / "schemaorg-current-https.jsonld")

    exit_code = main.main()

    assert exit_code == 0
    source = (tmp_path / "structschema.go").read_text(encoding="utf-8")
    assert "\npackage structschema\n" in source
    assert "// The most generic type of item.\ntype Thing struct {" in source
    assert "\tPropName []*PropName `json:\"schema:name\"`" in source
    assert "type Person struct {" in source
    assert "type Text struct {" in source


def test_main_passes_flags_to_generate(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(main, "setup_logging", lambda *a, **k: None)
    captured = {}

    def fake_generate_command(args) -> int:
        captured["args"] = args
        return 0

    monkeypatch.setattr(main, "generate_command", fake_generate_command)
    monkeypatch.setattr(
        sys,
        "argv",
        ["schemagen", "-i", "in.jsonld", "-o", "out.go", "-p", "vocab", "--exclude-superseded"],
    )

    assert main.main() == 0
    args = captured["args"]
    assert args.input == "in.jsonld"
    assert args.output == "out.go"
    assert args.package == "vocab"
    assert args.exclude_superseded is True
    assert args.strict_duplicates is None


def test_generate_command_writes_dumps(tmp_path: Path) -> None:
    args = SimpleNamespace(
        input=str(_write_document(tmp_path / "vocab.jsonld")),
        output=str(tmp_path / "gen" / "vocab.go"),
        package="vocab",
        dump_json=str(tmp_path / "resolved.json"),
        dump_node_link=str(tmp_path / "graph.json"),
    )

    exit_code = generate_command(args, console=_quiet_console())

    assert exit_code == 0
    assert "\npackage vocab\n" in (tmp_path / "gen" / "vocab.go").read_text(encoding="utf-8")
    resolved = json.loads((tmp_path / "resolved.json").read_text(encoding="utf-8"))
    person = next(node for node in resolved["@graph"] if node["@id"] == "schema:Person")
    assert person["Childs"] == ["schema:name"]
    assert (tmp_path / "graph.json").exists()


def test_missing_input_fails_without_output(tmp_path: Path) -> None:
    args = SimpleNamespace(
        input=str(tmp_path / "missing.jsonld"),
        output=str(tmp_path / "out.go"),
    )

    assert generate_command(args, console=_quiet_console()) == 1
    assert not (tmp_path / "out.go").exists()


def test_invalid_document_fails_without_output(tmp_path: Path) -> None:
    document = {"@graph": [{"@id": "schema:name", "@type": "rdf:Property", "schema:domainIncludes": "x"}]}
    args = SimpleNamespace(
        input=str(_write_document(tmp_path / "bad.jsonld", document)),
        output=str(tmp_path / "out.go"),
    )

    assert generate_command(args, console=_quiet_console()) == 1
    assert not (tmp_path / "out.go").exists()


def test_failed_dump_leaves_no_go_output(tmp_path: Path) -> None:
    """A dump path that cannot be written fails the run before the Go file exists."""
    dump_dir = tmp_path / "resolved.json"
    dump_dir.mkdir()
    args = SimpleNamespace(
        input=str(_write_document(tmp_path / "vocab.jsonld")),
        output=str(tmp_path / "out.go"),
        dump_json=str(dump_dir),
    )

    assert generate_command(args, console=_quiet_console()) == 1
    assert not (tmp_path / "out.go").exists()


def test_summary_counts_classes_and_properties(tmp_path: Path) -> None:
    console = _quiet_console()
    args = SimpleNamespace(
        input=str(_write_document(tmp_path / "vocab.jsonld")),
        output=str(tmp_path / "out.go"),
    )

    assert generate_command(args, console=console) == 0
    summary = console.file.getvalue()
    assert "Classes" in summary
    assert "Properties" in summary


def test_invalid_config_fails() -> None:
    args = SimpleNamespace(config='{"package_name": "Not-Go"}')

    assert generate_command(args, console=_quiet_console()) == 1


def test_flags_override_config_file(tmp_path: Path) -> None:
    config_path = tmp_path / "schemagen.toml"
    config_path.write_text('package_name = "fromfile"\ngofmt = true\n', encoding="utf-8")
    args = SimpleNamespace(config=str(config_path), package="fromflag", gofmt=None)

    config = resolve_config(args)

    assert config.package_name == "fromflag"
    assert config.gofmt is True
