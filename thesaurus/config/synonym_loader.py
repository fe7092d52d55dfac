"""
Synonym Loader - reads seed synonym groups from YAML.

File layout:

    meta:
      version: "1.0"
    groups:
      - [cat, feline, kitty]
      - [big, large, huge]

Every group is submitted to the registry as-is; the registry decides
whether it is valid.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional
import yaml

import structlog

from thesaurus.registry import SynonymRegistry, ThesaurusError

logger = structlog.get_logger("config")

# Relative to the working directory, like the logs directory
DEFAULT_SEED_PATH = Path("config") / "synonyms.yaml"


class SynonymLoader:
    """
    Loader for seed synonym groups stored in a YAML file.

    The file is read lazily on first access and cached until reload().
    """

    def __init__(self, path: Optional[Path] = None):
        """
        Args:
            path: Path to the YAML seed file.
                  If None - config/synonyms.yaml in the working directory.
        """
        self.path = Path(path) if path is not None else DEFAULT_SEED_PATH

        self._cache: Optional[Dict[str, Any]] = None
        self._loaded = False

    def _load_yaml(self, path: Path) -> Dict[str, Any]:
        """Load a single YAML file."""
        if not path.exists():
            logger.debug("YAML file not found", path=str(path))
            return {}

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.error("Failed to load YAML", path=str(path), error=str(e))
            return {}

        if not isinstance(data, dict):
            logger.error("Seed file root must be a mapping", path=str(path), got=type(data).__name__)
            return {}
        return data

    def _load(self) -> Dict[str, Any]:
        """Load the seed file with caching."""
        if self._cache is not None:
            return self._cache

        self._cache = self._load_yaml(self.path)
        self._loaded = bool(self._cache)

        logger.info(
            "Seed synonyms loaded",
            path=str(self.path),
            groups=len(self._cache.get("groups") or []),
            version=(self._cache.get("meta") or {}).get("version", "unknown"),
        )
        return self._cache

    def get_groups(self) -> List[List[Optional[str]]]:
        """
        Get the seed groups.

        Scalars become words via str(); null elements are kept
        so that the registry rejects the group.
        """
        data = self._load()
        groups: List[List[Optional[str]]] = []

        for i, raw in enumerate(data.get("groups") or []):
            if not isinstance(raw, list):
                logger.warning("Skipping seed group that is not a list", index=i, value=repr(raw))
                continue
            groups.append([None if w is None else str(w) for w in raw])

        return groups

    def get_meta(self) -> Dict[str, Any]:
        """Get seed file metadata."""
        data = self._load()
        return data.get("meta") or {}

    def reload(self):
        """Drop the cache and read the file again."""
        self._cache = None
        self._loaded = False
        self._load()

    @property
    def is_loaded(self) -> bool:
        """True when data was actually read from the file."""
        return self._loaded


def seed_registry(registry: SynonymRegistry, loader: SynonymLoader) -> int:
    """
    Submit every seed group to the registry.

    Groups the registry rejects are logged and skipped.

    Returns:
        Number of groups applied.
    """
    applied = 0
    for i, group in enumerate(loader.get_groups()):
        try:
            registry.add_synonyms(group)
        except ThesaurusError as e:
            logger.warning("Skipping invalid seed group", index=i, group=group, error=str(e))
            continue
        applied += 1

    logger.info("Registry seeded", path=str(loader.path), applied=applied, words=len(registry))
    return applied
