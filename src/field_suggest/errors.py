"""Exceptions raised by the name-resolution helpers."""

from __future__ import annotations

from collections.abc import Sequence


class FieldSuggestError(Exception):
    """Base class for errors raised by field_suggest."""


class UnknownNameError(FieldSuggestError, KeyError):
    """A name was looked up that is not among the known names.

    Subclasses KeyError so callers that already guard lookups with
    ``except KeyError`` keep working.
    """

    def __init__(
        self,
        name: str,
        candidates: Sequence[str] = (),
        *,
        suggestion: str | None = None,
        kind: str = "field",
        message: str | None = None,
    ) -> None:
        self.name = name
        self.candidates = tuple(candidates)
        self.suggestion = suggestion
        self.kind = kind
        self.message = message or not_found_message(name, suggestion, kind)
        super().__init__(self.message)

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.message

    def __reduce__(self):
        # args only holds the message, so rebuild from the attributes
        return (
            _rebuild_unknown_name_error,
            (self.name, self.candidates, self.suggestion, self.kind, self.message),
        )


def not_found_message(name: str, suggestion: str | None, kind: str = "field") -> str:
    """Render "<Kind> 'name' not found", plus the suggestion when there is one."""
    message = f"{kind.capitalize()} '{name}' not found"
    if suggestion is not None:
        return f"{message}, did you mean '{suggestion}'?"
    return message


def _rebuild_unknown_name_error(
    name: str,
    candidates: tuple[str, ...],
    suggestion: str | None,
    kind: str,
    message: str,
) -> UnknownNameError:
    return UnknownNameError(name, candidates, suggestion=suggestion, kind=kind, message=message)
