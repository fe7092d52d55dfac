"""
Custom exceptions for the synonym registry.
"""


class ThesaurusError(ValueError):
    """Base class for rejected registry input."""
    pass


class NullInputError(ThesaurusError):
    """
    Raised when the argument itself is missing.

    Example:
        >>> registry.get_synonyms(None)
        NullInputError: word cannot be None
    """
    pass


class InvalidInputError(ThesaurusError):
    """
    Raised when a synonym group is present but malformed:
    it contains None values or fewer than two elements.
    """
    pass
