"""Utilities for working with PropelAuth identifiers."""

from __future__ import annotations

import uuid

__all__ = ["is_valid_id"]

_CANONICAL_LENGTH = 36


def is_valid_id(candidate: str) -> bool:
    """Return ``True`` when ``candidate`` could name a PropelAuth record.

    User and organization identifiers are UUIDs in their canonical hyphenated
    form. Anything else (braces, ``urn:uuid:`` prefixes, bare hex, stray
    whitespace) cannot match a stored record, so callers may skip the network
    round trip entirely. Whether the record exists is not checked here.

    Args:
        candidate: Identifier supplied by the caller.

    Returns:
        Whether the identifier is syntactically valid.
    """

    if not isinstance(candidate, str) or len(candidate) != _CANONICAL_LENGTH:
        return False
    try:
        parsed = uuid.UUID(candidate)
    except ValueError:
        return False
    # uuid.UUID tolerates braces and misplaced hyphens
    return str(parsed) == candidate.lower()
