"""Edit distance and "did you mean" suggestion lookup.

This module provides Levenshtein distance calculation and best-match
selection for misspelled identifiers (field names, column names, options).

Fixed rules (not configurable):
- Every insertion, deletion and substitution costs exactly 1
- Comparison is case-sensitive, per code point
- A candidate qualifies when its distance is at most len(input) // 3
- Ties go to the candidate that appears first
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RankedSuggestion:
    """A qualifying candidate together with its distance and list position."""

    candidate: str
    distance: int
    position: int


def levenshtein_distance(a: str, b: str) -> int:
    """Calculate the Levenshtein (edit) distance between two strings.

    Uses dynamic programming with two rolling rows that are swapped after
    each outer iteration, so auxiliary space is O(min(len(a), len(b))).

    Args:
        a: First string.
        b: Second string.

    Returns:
        The minimum number of single-character edits (insertions,
        deletions, substitutions) needed to change a into b.

    Examples:
        >>> levenshtein_distance("kitten", "sitting")
        3
        >>> levenshtein_distance("hello", "hello")
        0
        >>> levenshtein_distance("", "abc")
        3
    """
    if not a:
        return len(b)
    if not b:
        return len(a)

    # Use shorter string as columns for space efficiency
    if len(a) < len(b):
        a, b = b, a

    n = len(b)
    prev_row = list(range(n + 1))
    curr_row = [0] * (n + 1)

    for i, a_char in enumerate(a, start=1):
        curr_row[0] = i
        for j, b_char in enumerate(b, start=1):
            cost = 0 if a_char == b_char else 1
            curr_row[j] = min(
                prev_row[j] + 1,  # deletion
                curr_row[j - 1] + 1,  # insertion
                prev_row[j - 1] + cost,  # substitution
            )
        prev_row, curr_row = curr_row, prev_row

    return prev_row[n]


def suggestion_threshold(input_length: int) -> int:
    """Get the maximum edit distance a suggestion may have.

    - 0-2 chars: exact matches only
    - 3-5 chars: 1 edit
    - 6-8 chars: 2 edits, and so on
    """
    if input_length <= 0:
        return 0
    return input_length // 3


def find_best_suggestion(input_name: str, candidates: Iterable[str]) -> str | None:
    """Find the candidate closest to input_name, if it is close enough.

    Args:
        input_name: The (possibly misspelled) name supplied by the user.
        candidates: Known-good names, scanned in order.

    Returns:
        The candidate object with the smallest distance not exceeding
        ``len(input_name) // 3``, or None. On equal distances the first
        candidate wins.

    Examples:
        >>> find_best_suggestion("vacter", ["vector", "id", "name"])
        'vector'
        >>> find_best_suggestion("hello", ["vector", "id", "name"]) is None
        True
    """
    if not input_name:
        return None

    threshold = suggestion_threshold(len(input_name))
    best: str | None = None
    best_distance = threshold + 1

    for candidate in candidates:
        distance = levenshtein_distance(input_name, candidate)
        # Strict comparison keeps the first candidate on ties
        if distance < best_distance:
            best = candidate
            best_distance = distance
            if distance == 0:
                break

    return best


def rank_suggestions(
    input_name: str,
    candidates: Iterable[str],
    limit: int | None = None,
) -> list[RankedSuggestion]:
    """Return every qualifying candidate, closest first.

    Uses the same threshold as :func:`find_best_suggestion`. Results are
    sorted by (distance, position), so the first entry is always the
    candidate ``find_best_suggestion`` would return.

    Args:
        input_name: The (possibly misspelled) name supplied by the user.
        candidates: Known-good names, scanned in order.
        limit: Maximum number of results. None means no limit.
    """
    if not input_name or (limit is not None and limit <= 0):
        return []

    threshold = suggestion_threshold(len(input_name))
    ranked: list[RankedSuggestion] = []

    for position, candidate in enumerate(candidates):
        distance = levenshtein_distance(input_name, candidate)
        if distance <= threshold:
            ranked.append(RankedSuggestion(candidate, distance, position))

    ranked.sort(key=lambda item: (item.distance, item.position))

    if limit is not None:
        return ranked[:limit]
    return ranked


# Short aliases for callers that only need the two core operations
distance = levenshtein_distance
suggest = find_best_suggestion
