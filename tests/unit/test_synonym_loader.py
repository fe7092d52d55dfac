"""
Tests for thesaurus/config/synonym_loader.py

SynonymLoader file handling and seeding a registry from YAML.
"""

import pytest
from pathlib import Path

from thesaurus.config.synonym_loader import (
    SynonymLoader,
    seed_registry,
    DEFAULT_SEED_PATH,
)
from thesaurus.registry import SynonymRegistry

PROJECT_DIR = Path(__file__).resolve().parents[2]


# ============================================================================
# 1. TestSynonymLoaderInit
# ============================================================================

class TestSynonymLoaderInit:
    """Tests for SynonymLoader initialization."""

    def test_init_default_path(self):
        """Default path is config/synonyms.yaml, relative to the working directory."""
        loader = SynonymLoader()
        assert loader.path == DEFAULT_SEED_PATH
        assert loader.path.name == "synonyms.yaml"
        assert loader.path.parent.name == "config"
        assert not loader.path.is_absolute()

    def test_init_custom_path(self, tmp_path):
        """Custom path is used as-is, strings are converted to Path."""
        loader = SynonymLoader(str(tmp_path / "seed.yaml"))
        assert loader.path == tmp_path / "seed.yaml"

    def test_not_loaded_before_access(self, tmp_path):
        loader = SynonymLoader(tmp_path / "seed.yaml")
        assert loader.is_loaded is False

    def test_default_path_follows_working_directory(self, write_yaml, tmp_path, monkeypatch):
        """The default seed file is looked up under the current directory."""
        write_yaml("config/synonyms.yaml", {"groups": [["big", "large"]]})
        monkeypatch.chdir(tmp_path)

        loader = SynonymLoader()
        assert loader.get_groups() == [["big", "large"]]
        assert loader.is_loaded is True

    def test_bundled_sample_file_loads(self):
        """The sample seed file shipped in config/ is valid."""
        loader = SynonymLoader(PROJECT_DIR / DEFAULT_SEED_PATH)
        groups = loader.get_groups()
        assert loader.is_loaded is True
        assert ["cat", "feline", "kitty"] in groups


# ============================================================================
# 2. TestSynonymLoaderLoad
# ============================================================================

class TestSynonymLoaderLoad:
    """Tests for reading and caching the seed file."""

    def test_load_groups_and_meta(self, write_yaml):
        path = write_yaml("seed.yaml", {
            "meta": {"version": "2.1"},
            "groups": [["cat", "feline"], ["big", "large", "huge"]],
        })
        loader = SynonymLoader(path)

        assert loader.get_groups() == [["cat", "feline"], ["big", "large", "huge"]]
        assert loader.get_meta() == {"version": "2.1"}
        assert loader.is_loaded is True

    def test_missing_file_gives_empty_data(self, tmp_path):
        loader = SynonymLoader(tmp_path / "missing.yaml")
        assert loader.get_groups() == []
        assert loader.get_meta() == {}
        assert loader.is_loaded is False

    def test_malformed_yaml_gives_empty_data(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("groups: [cat, feline\n", encoding="utf-8")

        loader = SynonymLoader(path)
        assert loader.get_groups() == []
        assert loader.is_loaded is False

    def test_non_mapping_root_gives_empty_data(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- [cat, feline]\n", encoding="utf-8")

        loader = SynonymLoader(path)
        assert loader.get_groups() == []

    def test_scalars_become_words(self, write_yaml):
        """Numbers in YAML are turned into strings."""
        path = write_yaml("seed.yaml", {"groups": [[1, "one", 1.5]]})
        assert SynonymLoader(path).get_groups() == [["1", "one", "1.5"]]

    def test_nulls_are_kept(self, write_yaml):
        """null elements survive so the registry can reject the group."""
        path = write_yaml("seed.yaml", {"groups": [["a", None]]})
        assert SynonymLoader(path).get_groups() == [["a", None]]

    def test_non_list_groups_are_skipped(self, write_yaml):
        path = write_yaml("seed.yaml", {"groups": ["just a string", ["a", "b"], {"x": 1}]})
        assert SynonymLoader(path).get_groups() == [["a", "b"]]

    def test_caching(self, write_yaml):
        """Second access returns cached data without re-reading the file."""
        path = write_yaml("seed.yaml", {"groups": [["a", "b"]]})
        loader = SynonymLoader(path)
        assert loader.get_groups() == [["a", "b"]]

        write_yaml("seed.yaml", {"groups": [["c", "d"]]})
        assert loader.get_groups() == [["a", "b"]]

    def test_reload_reads_file_again(self, write_yaml):
        path = write_yaml("seed.yaml", {"groups": [["a", "b"]]})
        loader = SynonymLoader(path)
        loader.get_groups()

        write_yaml("seed.yaml", {"groups": [["c", "d"]]})
        loader.reload()
        assert loader.get_groups() == [["c", "d"]]


# ============================================================================
# 3. TestSeedRegistry
# ============================================================================

class TestSeedRegistry:
    """Tests for seed_registry."""

    def test_seed_applies_all_groups(self, write_yaml):
        path = write_yaml("seed.yaml", {"groups": [["a", "b"], ["a", "c"]]})
        registry = SynonymRegistry()

        applied = seed_registry(registry, SynonymLoader(path))

        assert applied == 2
        assert set(registry.get_synonyms("a")) == {"b", "c"}

    def test_invalid_groups_are_skipped(self, write_yaml):
        """Groups the registry rejects do not stop seeding."""
        path = write_yaml("seed.yaml", {
            "groups": [["solo"], ["a", None], ["x", "y"]],
        })
        registry = SynonymRegistry()

        applied = seed_registry(registry, SynonymLoader(path))

        assert applied == 1
        assert set(registry.get_words()) == {"x", "y"}

    def test_seed_missing_file_applies_nothing(self, tmp_path):
        registry = SynonymRegistry()
        assert seed_registry(registry, SynonymLoader(tmp_path / "none.yaml")) == 0
        assert len(registry) == 0
