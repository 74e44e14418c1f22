"""Helpers for loading generator configuration from TOML/JSON sources.

``load_generator_config`` accepts:

* None -> default GeneratorConfig
* dict -> validated as-is
* Path / path-like string -> load .toml/.json from filesystem
* Inline JSON/TOML strings
"""

from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from schemagen.config.schema import GeneratorConfig
from schemagen.errors import ConfigError

logger = logging.getLogger("schemagen.config.loader")

ConfigSource = Union[str, Path, Dict[str, Any], None]


def _parse_text(text: str, fmt: str) -> Dict[str, Any]:
    try:
        data = json.loads(text) if fmt == "json" else tomllib.loads(text)
    except (json.JSONDecodeError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Invalid {fmt.upper()} configuration: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError("Top-level configuration must be a mapping/dict")
    return data


def _guess_format(text: str) -> str:
    return "json" if text.lstrip().startswith(("{", "[")) else "toml"


def load_generator_config(source: ConfigSource) -> GeneratorConfig:
    """Load GeneratorConfig from various configuration sources.

    Args:
        source: None, a mapping, a path to a .toml/.json file, or an
            inline TOML/JSON string (auto-detected).

    Returns:
        GeneratorConfig instance.

    Raises:
        ConfigError: If the source cannot be parsed or validated.
    """
    if source is None:
        logger.debug("No config source provided; using defaults")
        return GeneratorConfig()

    data: Optional[Dict[str, Any]] = None
    if isinstance(source, dict):
        data = source
    elif isinstance(source, (str, Path)):
        path = Path(source)
        if path.is_file():
            text = path.read_text(encoding="utf-8")
            suffix = path.suffix.lower()
            if suffix in {".toml", ".tml"}:
                fmt = "toml"
            elif suffix == ".json":
                fmt = "json"
            else:
                fmt = _guess_format(text)
            logger.info("Loading configuration from file: %s (fmt=%s)", path, fmt)
        else:
            text = str(source)
            fmt = _guess_format(text)
            logger.info("Loading configuration from inline %s string", fmt)
        data = _parse_text(text, fmt)
    else:
        raise TypeError(f"Unsupported config source type: {type(source)!r}")

    try:
        return GeneratorConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc


def apply_overrides(config: GeneratorConfig, **overrides: Any) -> GeneratorConfig:
    """Return a copy of ``config`` with non-None overrides applied and validated."""
    updates = {key: value for key, value in overrides.items() if value is not None}
    if not updates:
        return config
    try:
        return GeneratorConfig.model_validate({**config.model_dump(), **updates})
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc


__all__ = ["ConfigError", "apply_overrides", "load_generator_config"]
