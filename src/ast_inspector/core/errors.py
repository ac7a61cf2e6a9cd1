"""Error kinds raised at the core boundary.

Every failure is local to a single request: nothing is retried and nothing is
persisted, so callers only need to report the error.
"""

from __future__ import annotations


class InspectorError(Exception):
    """Base class for request-level failures."""


class ParseFailure(InspectorError):
    """Raised when the grammar engine cannot produce a tree."""


class QueryFailure(InspectorError):
    """Raised when the grammar engine rejects a pattern query."""


class BadAddress(InspectorError):
    """Raised when a node address is malformed or resolves to no node."""


class UnsupportedLanguage(InspectorError, ValueError):
    """Raised for a language name with no known grammar."""


class TreeTooDeep(InspectorError):
    """Raised when a tree nests deeper than the projection depth limit."""
