"""
Edit distance and "did you mean" suggestions for misspelled identifiers.

This package provides:
- levenshtein: distance engine and suggestion selector
- resolver: exact name lookup with suggestion-bearing errors
- errors: exception types
- config: environment-driven settings
- cli: the ``field-suggest`` command
"""

from field_suggest.errors import FieldSuggestError, UnknownNameError
from field_suggest.levenshtein import (
    RankedSuggestion,
    distance,
    find_best_suggestion,
    levenshtein_distance,
    rank_suggestions,
    suggest,
    suggestion_threshold,
)
from field_suggest.resolver import did_you_mean, format_unknown_name_message, resolve_name


__all__ = [
    "FieldSuggestError",
    "RankedSuggestion",
    "UnknownNameError",
    "did_you_mean",
    "distance",
    "find_best_suggestion",
    "format_unknown_name_message",
    "levenshtein_distance",
    "rank_suggestions",
    "resolve_name",
    "suggest",
    "suggestion_threshold",
]
