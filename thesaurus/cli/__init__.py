"""CLI module - interactive console for the thesaurus."""

from thesaurus.cli.interface import ThesaurusCLI, parse_word_list

__all__ = [
    "ThesaurusCLI",
    "parse_word_list",
]
