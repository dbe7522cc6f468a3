"""Observability helpers: structured logging."""

from field_suggest.observability.logging import JsonFormatter, configure_logging


__all__ = [
    "JsonFormatter",
    "configure_logging",
]
