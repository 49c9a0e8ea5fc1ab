"""subjectid: Subject Identifier formats with non-nesting aliases."""

from subjectid.domain.formats import IdentifierFormat
from subjectid.domain.identifiers import (
    Account,
    Aliases,
    Did,
    Email,
    IssuerSubject,
    LeafIdentifier,
    Opaque,
    PhoneNumber,
    Single,
    SubjectIdentifier,
    Uri,
)

__version__ = "0.1.0"

__all__ = [
    "Account",
    "Aliases",
    "Did",
    "Email",
    "IdentifierFormat",
    "IssuerSubject",
    "LeafIdentifier",
    "Opaque",
    "PhoneNumber",
    "Single",
    "SubjectIdentifier",
    "Uri",
    "__version__",
]
