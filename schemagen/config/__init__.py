"""Configuration schema and loading for schemagen."""

from .loader import ConfigError, apply_overrides, load_generator_config
from .schema import GeneratorConfig

__all__ = [
    "ConfigError",
    "GeneratorConfig",
    "apply_overrides",
    "load_generator_config",
]
