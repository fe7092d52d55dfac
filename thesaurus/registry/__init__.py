"""
Synonym registry - thread-safe in-memory word -> synonyms mapping.

Usage:
    from thesaurus.registry import SynonymRegistry

    registry = SynonymRegistry()
    registry.add_synonyms(["cat", "feline", "kitty"])
    registry.get_synonyms("cat")   # ["feline", "kitty"]
"""

from thesaurus.registry.exceptions import (
    ThesaurusError,
    NullInputError,
    InvalidInputError,
)
from thesaurus.registry.store import SynonymRegistry, DEFAULT_SHARDS

__all__ = [
    "SynonymRegistry",
    "DEFAULT_SHARDS",
    "ThesaurusError",
    "NullInputError",
    "InvalidInputError",
]
