"""
Shared fixtures for thesaurus tests
"""

import pytest
import sys
import os
from io import StringIO
from pathlib import Path
from typing import Callable, Iterable, List

import yaml
from rich.console import Console

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from thesaurus.registry import SynonymRegistry


# ============ REGISTRY FIXTURES ============

@pytest.fixture
def registry():
    """An empty registry with default sharding."""
    return SynonymRegistry()


@pytest.fixture
def coarse_registry():
    """An empty registry with a single lock."""
    return SynonymRegistry(shards=1)


@pytest.fixture
def animal_registry():
    """A registry holding two overlapping groups."""
    reg = SynonymRegistry()
    reg.add_synonyms(["cat", "feline", "kitty"])
    reg.add_synonyms(["cat", "moggy"])
    return reg


# ============ FILE FIXTURES ============

@pytest.fixture
def write_yaml(tmp_path) -> Callable[[str, dict], Path]:
    """Write a dictionary to a YAML file under tmp_path and return its path."""
    def _write(name: str, data: dict) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(data, f, allow_unicode=True, default_flow_style=False)
        return path
    return _write


# ============ CLI FIXTURES ============

@pytest.fixture
def recording_console():
    """rich Console that writes plain text into a StringIO."""
    return Console(file=StringIO(), force_terminal=False, color_system=None, width=100)


@pytest.fixture
def scripted_input() -> Callable[[Iterable[str]], Callable[[str], str]]:
    """
    Build an input() replacement that replays the given lines,
    then raises EOFError like a closed stdin.
    """
    def _make(lines: Iterable[str]) -> Callable[[str], str]:
        remaining: List[str] = list(lines)

        def _input(prompt: str = "") -> str:
            if not remaining:
                raise EOFError
            return remaining.pop(0)

        return _input
    return _make
