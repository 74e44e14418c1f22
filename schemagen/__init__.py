"""schemagen: generate Go struct declarations from a JSON-LD ontology."""

__version__ = "0.1.0"
