"""
SynonymRegistry - concurrent in-memory thesaurus.

Maps every known word to the set of words it was submitted together with.
Only direct co-membership in a submitted group makes two words synonyms;
there is no transitive closure across groups.

Keys are spread over a fixed number of shards, each a plain dict guarded by
its own threading.Lock. A single key is only ever touched under its shard
lock, so readers never see a half-merged set, and writers on different
shards do not block each other. Locks are never nested.
"""

import threading
from typing import Dict, Iterable, List, Optional, Set

import structlog

from thesaurus.registry.exceptions import InvalidInputError, NullInputError

DEFAULT_SHARDS = 16


class SynonymRegistry:
    """
    Thread-safe registry of synonym groups.

    Args:
        shards: Number of lock stripes. 1 means a single coarse lock.
        logger: Optional structlog logger; defaults to the "registry" category.
    """

    def __init__(self, shards: int = DEFAULT_SHARDS, logger: Optional[structlog.BoundLogger] = None):
        if shards < 1:
            raise ValueError(f"shards must be >= 1, got {shards}")

        self._log = logger if logger is not None else structlog.get_logger("registry")
        self._shards: List[Dict[str, Set[str]]] = [{} for _ in range(shards)]
        self._locks: List[threading.Lock] = [threading.Lock() for _ in range(shards)]

    @property
    def shard_count(self) -> int:
        return len(self._shards)

    def _index(self, word: str) -> int:
        return hash(word) % len(self._shards)

    def add_synonyms(self, group: Iterable[str]) -> None:
        """
        Declare every word in ``group`` synonymous with every other one.

        Args:
            group: Two or more words.

        Raises:
            NullInputError: group is None.
            InvalidInputError: group is a bare string, contains None
                or has fewer than two elements.
        """
        self._log.debug("add_synonyms_started")

        if group is None:
            self._log.error("add_synonyms_failed", reason="input was None")
            raise NullInputError("group cannot be None")

        if isinstance(group, str):
            self._log.error("add_synonyms_failed", reason="input was a single string")
            raise InvalidInputError("group must be a collection of words, not a single string")

        words = list(group)

        if any(word is None for word in words):
            self._log.error("add_synonyms_failed", reason="input contained None values")
            raise InvalidInputError("group contains null values")

        # Counted on the raw input: ["a", "a"] passes and adds nothing.
        if len(words) < 2:
            self._log.error("add_synonyms_failed", reason="fewer than two elements", count=len(words))
            raise InvalidInputError("group contains fewer than two elements")

        distinct = set(words)
        for word in distinct:
            others = distinct - {word}
            idx = self._index(word)

            with self._locks[idx]:
                shard = self._shards[idx]
                existing = shard.get(word)
                if existing is None:
                    # Published fully built, never empty
                    shard[word] = set(others)
                else:
                    existing.update(others)

            self._log.debug("synonyms_merged", word=word, added=len(others))

        self._log.debug("add_synonyms_finished", words=len(distinct))

    def get_synonyms(self, word: str) -> List[str]:
        """
        Return the synonyms of ``word``.

        Unknown words have no synonyms: an empty list is returned.

        Raises:
            NullInputError: word is None.
        """
        if word is None:
            self._log.error("get_synonyms_failed", reason="input was None")
            raise NullInputError("word cannot be None")

        idx = self._index(word)
        with self._locks[idx]:
            synonyms = self._shards[idx].get(word)
            if synonyms is not None:
                return list(synonyms)

        self._log.info("unknown_word_requested", word=word)
        return []

    def get_words(self) -> List[str]:
        """Return every word known to the registry, in no particular order."""
        words: List[str] = []
        for lock, shard in zip(self._locks, self._shards):
            with lock:
                words.extend(shard.keys())
        return words

    def __contains__(self, word: object) -> bool:
        if word is None:
            return False
        idx = self._index(word)
        with self._locks[idx]:
            return word in self._shards[idx]

    def __len__(self) -> int:
        total = 0
        for lock, shard in zip(self._locks, self._shards):
            with lock:
                total += len(shard)
        return total

    def __repr__(self) -> str:
        return f"SynonymRegistry(words={len(self)}, shards={self.shard_count})"
