"""
Configuration: runtime settings and seed synonym groups.
"""

from thesaurus.config.settings import Settings, load_settings
from thesaurus.config.synonym_loader import SynonymLoader, seed_registry

__all__ = [
    # Settings
    "Settings",
    "load_settings",
    # Seed loader
    "SynonymLoader",
    "seed_registry",
]
