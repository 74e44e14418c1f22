"""Tests for generator configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from schemagen.config import ConfigError, GeneratorConfig, apply_overrides, load_generator_config


def test_defaults_match_conventional_file_names() -> None:
    config = load_generator_config(None)

    assert config.input_path == Path("schemaorg-current-https.jsonld")
    assert config.output_path == Path("structschema.go")
    assert config.package_name == "structschema"
    assert not config.strict_duplicates
    assert not config.gofmt


def test_load_from_toml_file(tmp_path: Path) -> None:
    path = tmp_path / "schemagen.toml"
    path.write_text(
        'input_path = "vocab.jsonld"\npackage_name = "vocab"\nexclude_superseded = true\n',
        encoding="utf-8",
    )

    config = load_generator_config(path)

    assert config.input_path == Path("vocab.jsonld")
    assert config.package_name == "vocab"
    assert config.exclude_superseded


def test_load_from_json_file(tmp_path: Path) -> None:
    path = tmp_path / "schemagen.json"
    path.write_text('{"keep_vocab_prefix": true}', encoding="utf-8")

    assert load_generator_config(str(path)).keep_vocab_prefix


def test_load_from_inline_strings() -> None:
    assert load_generator_config('{"gofmt": true}').gofmt
    assert load_generator_config('output_path = "out/types.go"').output_path == Path("out/types.go")


def test_load_from_mapping() -> None:
    assert load_generator_config({"strict_duplicates": True}).strict_duplicates


@pytest.mark.parametrize(
    "source",
    [
        "[1, 2]",
        "not = valid = toml",
        {"unknown_option": 1},
        {"package_name": "Bad-Name"},
    ],
)
def test_invalid_configuration_raises_config_error(source) -> None:
    with pytest.raises(ConfigError):
        load_generator_config(source)


def test_apply_overrides_ignores_none_and_revalidates() -> None:
    config = GeneratorConfig(package_name="vocab")

    updated = apply_overrides(config, package_name=None, output_path="gen/types.go")

    assert updated.package_name == "vocab"
    assert updated.output_path == Path("gen/types.go")
    assert apply_overrides(config) is config
    with pytest.raises(ConfigError):
        apply_overrides(config, package_name="9lives")
