"""
Thesaurus - concurrent synonym registry with a console front-end.

Exports:
- registry: SynonymRegistry and its errors
- config: settings and YAML seed loader
- cli: interactive console
"""

from thesaurus.registry import (
    SynonymRegistry,
    ThesaurusError,
    NullInputError,
    InvalidInputError,
)
from thesaurus.config import Settings, load_settings, SynonymLoader, seed_registry
from thesaurus.cli import ThesaurusCLI

__version__ = "1.0.0"

__all__ = [
    # Registry
    "SynonymRegistry",
    "ThesaurusError",
    "NullInputError",
    "InvalidInputError",
    # Config
    "Settings",
    "load_settings",
    "SynonymLoader",
    "seed_registry",
    # CLI
    "ThesaurusCLI",
]
