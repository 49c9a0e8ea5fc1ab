"""Identifier format names.

Each name is registered in the Security Event Identifier Formats registry.
Leaf formats identify a subject directly; ``aliases`` is the only composite
format and is never a leaf.
"""

from __future__ import annotations

from enum import StrEnum


class IdentifierFormat(StrEnum):
    """Canonical value of the ``format`` member of a Subject Identifier."""

    ACCOUNT = "account"
    EMAIL = "email"
    ISSUER_SUBJECT = "iss_sub"
    OPAQUE = "opaque"
    PHONE_NUMBER = "phone_number"
    DID = "did"
    URI = "uri"
    ALIASES = "aliases"


LEAF_FORMATS: frozenset[IdentifierFormat] = frozenset(
    fmt for fmt in IdentifierFormat if fmt is not IdentifierFormat.ALIASES
)


def is_leaf_format(name: str) -> bool:
    """Check whether *name* is a registered leaf format."""
    return name in LEAF_FORMATS
