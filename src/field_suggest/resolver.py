"""Name lookup with "did you mean" error messages.

Callers hand in the name a user typed and the names they know about; on a
miss they get an :class:`UnknownNameError` whose message already carries the
closest suggestion.
"""

from __future__ import annotations

from collections.abc import Sequence
import logging

from field_suggest.errors import UnknownNameError, not_found_message
from field_suggest.levenshtein import find_best_suggestion


logger = logging.getLogger(__name__)

DEFAULT_MAX_LISTED = 10

_UNSET = object()


def did_you_mean(name: str, candidates: Sequence[str]) -> str:
    """Return " Did you mean '<x>'?" for the closest candidate, or ""."""
    suggestion = find_best_suggestion(name, candidates)
    if suggestion is None:
        return ""
    return f" Did you mean '{suggestion}'?"


def format_unknown_name_message(
    name: str,
    candidates: Sequence[str],
    *,
    kind: str = "field",
    suggestion: str | None | object = _UNSET,
    max_listed: int = DEFAULT_MAX_LISTED,
) -> str:
    """Build the message for a name that is not among candidates.

    Args:
        name: The name that failed to resolve.
        candidates: Known names.
        kind: Noun used in the message ("field", "column", "option").
        suggestion: Precomputed suggestion. Looked up when omitted.
        max_listed: How many known names to list when there is no suggestion.

    Returns:
        ``"Field 'x' not found, did you mean 'y'?"`` when a suggestion exists,
        otherwise ``"Field 'x' not found. Available fields: a, b"``.
    """
    if suggestion is _UNSET:
        suggestion = find_best_suggestion(name, candidates)

    message = not_found_message(name, suggestion, kind)
    if suggestion is not None or not candidates:
        return message

    # Always list at least one name
    max_listed = max(1, max_listed)
    listed = ", ".join(candidates[:max_listed])
    if len(candidates) > max_listed:
        listed += f", ... ({len(candidates) - max_listed} more)"
    return f"{message}. Available {kind}s: {listed}"


def resolve_name(
    name: str,
    candidates: Sequence[str],
    *,
    kind: str = "field",
    max_listed: int = DEFAULT_MAX_LISTED,
) -> str:
    """Return the candidate equal to name, or raise UnknownNameError.

    Matching is exact and case-sensitive; near misses are only ever
    suggested, never substituted.
    """
    for candidate in candidates:
        if candidate == name:
            return candidate

    suggestion = find_best_suggestion(name, candidates)
    logger.debug(
        "Unknown %s %r (suggestion=%r, candidates=%d)",
        kind,
        name,
        suggestion,
        len(candidates),
    )
    message = format_unknown_name_message(
        name,
        candidates,
        kind=kind,
        suggestion=suggestion,
        max_listed=max_listed,
    )
    raise UnknownNameError(name, candidates, suggestion=suggestion, kind=kind, message=message)
