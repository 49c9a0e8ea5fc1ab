"""E.164 telephone number normalization.

A number may begin with ``+`` and holds at most 15 digits: a country code
prefix followed by the subscriber part. Normalized numbers always carry the
leading ``+``.
"""

from __future__ import annotations

import re

from subjectid.errors import InvalidPhoneNumberError

E164_PATTERN = re.compile(r"\+?(\d{1,15})")


def normalize_e164(value: str) -> str:
    """Return *value* as ``+<digits>`` or raise :class:`InvalidPhoneNumberError`."""
    match = E164_PATTERN.fullmatch(value)
    if match is None:
        raise InvalidPhoneNumberError(value)
    return f"+{match.group(1)}"


def is_e164(value: str) -> bool:
    """Check whether *value* is an E.164 formatted number."""
    return E164_PATTERN.fullmatch(value) is not None
