"""Subject Identifier models.

A Subject Identifier is a JSON object that identifies a subject within some
context. It conforms to exactly one Identifier Format and carries a
``format`` member naming it. Two tiers:

- Leaf identifiers (:data:`LeafIdentifier`): one subject, one format.
  Closed set of frozen models discriminated on ``format``.
- Subject identifiers (:data:`SubjectIdentifier`): either a :class:`Single`
  leaf or an :class:`Aliases` set of leaves for the same subject.

INVARIANT: ``Aliases.identifiers`` admits only leaf identifiers. Neither
``Single`` nor ``Aliases`` is a member of the element type, so nested
aliases cannot be constructed (type checkers reject them statically and
pydantic rejects them at validation).

Payload strings are opaque here; URI and email syntax is not checked.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, RootModel, Tag

from subjectid.domain.e164 import normalize_e164
from subjectid.domain.formats import IdentifierFormat
from subjectid.errors import EmptyAliasesError, InvalidAccessError


class EmptyAliasesPolicy(StrEnum):
    """What :func:`aliases` does with an empty sequence."""

    ALLOW = "allow"
    REJECT = "reject"


# ---------------------------------------------------------------------------
# Leaf identifiers
# ---------------------------------------------------------------------------


class BaseLeaf(BaseModel):
    """Common behaviour of every leaf identifier format."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    format: IdentifierFormat

    @property
    def is_aliases(self) -> bool:
        return False

    def member(self, name: str) -> str:
        """Return the payload member *name*.

        Raises:
            InvalidAccessError: This format has no member called *name*.
        """
        if name == "format" or name not in type(self).model_fields:
            raise InvalidAccessError(self.format, name)
        value: str = getattr(self, name)
        return value

    def members(self) -> dict[str, str]:
        """Payload members keyed by name, without ``format``."""
        return self.model_dump(exclude={"format"})


class Account(BaseLeaf):
    """Subject identified by an account at a service provider.

    ``uri`` is the ``acct`` URI of the account (RFC 7565). The account holder
    need not be human: bots, role accounts and shared accounts qualify.
    """

    format: Literal[IdentifierFormat.ACCOUNT] = IdentifierFormat.ACCOUNT
    uri: str


class Email(BaseLeaf):
    """Subject identified by an email address (RFC 5322 addr-spec).

    Email canonicalization is not standardized; recipients apply their own.
    """

    format: Literal[IdentifierFormat.EMAIL] = IdentifierFormat.EMAIL
    email: str


class IssuerSubject(BaseLeaf):
    """Subject identified by an issuer and subject pair, as in ID tokens."""

    format: Literal[IdentifierFormat.ISSUER_SUBJECT] = IdentifierFormat.ISSUER_SUBJECT
    iss: str
    sub: str


class Opaque(BaseLeaf):
    """Subject identified by a string with no semantics beyond identity."""

    format: Literal[IdentifierFormat.OPAQUE] = IdentifierFormat.OPAQUE
    id: str


class PhoneNumber(BaseLeaf):
    """Subject identified by a telephone number, international prefix included."""

    format: Literal[IdentifierFormat.PHONE_NUMBER] = IdentifierFormat.PHONE_NUMBER
    phone_number: str

    @classmethod
    def from_e164(cls, value: str) -> PhoneNumber:
        """Build from an E.164 number, normalizing it to ``+<digits>``."""
        return cls(phone_number=normalize_e164(value))


class Did(BaseLeaf):
    """Subject identified by a DID URL (a bare DID is allowed)."""

    format: Literal[IdentifierFormat.DID] = IdentifierFormat.DID
    url: str


class Uri(BaseLeaf):
    """Subject identified by a URI, with no assumption about its scheme."""

    format: Literal[IdentifierFormat.URI] = IdentifierFormat.URI
    uri: str


LeafIdentifier = Annotated[
    Union[Account, Email, IssuerSubject, Opaque, PhoneNumber, Did, Uri],  # noqa: UP007
    Field(discriminator="format"),
]


# ---------------------------------------------------------------------------
# Subject identifiers
# ---------------------------------------------------------------------------


class Single(RootModel[LeafIdentifier]):
    """Exactly one leaf identifier.

    Serializes as the bare leaf object.
    """

    model_config = ConfigDict(frozen=True)

    @property
    def leaf(self) -> LeafIdentifier:
        return self.root

    @property
    def format(self) -> IdentifierFormat:
        return self.root.format

    @property
    def identifiers(self) -> tuple[LeafIdentifier, ...]:
        return (self.root,)

    @property
    def is_aliases(self) -> bool:
        return False


class Aliases(BaseModel):
    """Ordered set of leaf identifiers that all denote the same subject.

    The ``format`` is always ``aliases``, whatever the leaves are, so consumers
    can branch before descending into ``identifiers``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    format: Literal[IdentifierFormat.ALIASES] = IdentifierFormat.ALIASES
    identifiers: tuple[LeafIdentifier, ...] = ()

    @property
    def is_aliases(self) -> bool:
        return True


def _subject_kind(value: Any) -> str:
    if isinstance(value, dict):
        fmt = value.get("format")
    else:
        fmt = getattr(value, "format", None)
    return "aliases" if fmt == IdentifierFormat.ALIASES else "single"


SubjectIdentifier = Annotated[
    Union[Annotated[Single, Tag("single")], Annotated[Aliases, Tag("aliases")]],  # noqa: UP007
    Discriminator(_subject_kind),
]


# ---------------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------------


def account(uri: str) -> Account:
    return Account(uri=uri)


def email(address: str) -> Email:
    return Email(email=address)


def issuer_subject(iss: str, sub: str) -> IssuerSubject:
    return IssuerSubject(iss=iss, sub=sub)


def opaque(identifier: str) -> Opaque:
    return Opaque(id=identifier)


def phone_number(number: str) -> PhoneNumber:
    return PhoneNumber(phone_number=number)


def did(url: str) -> Did:
    return Did(url=url)


def uri(value: str) -> Uri:
    return Uri(uri=value)


def single(leaf: LeafIdentifier) -> Single:
    """Wrap one leaf identifier."""
    return Single(leaf)


def aliases(
    leaves: Iterable[LeafIdentifier],
    *,
    policy: EmptyAliasesPolicy = EmptyAliasesPolicy.ALLOW,
) -> Aliases:
    """Wrap leaf identifiers for one subject, keeping their order.

    An empty *leaves* yields an empty set under ``ALLOW`` and raises
    :class:`EmptyAliasesError` under ``REJECT``.
    """
    items = tuple(leaves)
    if not items and policy == EmptyAliasesPolicy.REJECT:
        raise EmptyAliasesError()
    return Aliases(identifiers=items)


def format_of(value: BaseLeaf | Single | Aliases) -> IdentifierFormat:
    """Format name of any leaf or subject identifier."""
    return value.format
