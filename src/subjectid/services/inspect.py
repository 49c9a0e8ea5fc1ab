"""InspectService: load Subject Identifier JSON and describe it.

``load_subject``/``dump_subject`` map between JSON objects and the domain
models. A Single identifier is the bare leaf object; an Aliases identifier is
``{"format": "aliases", "identifiers": [...]}`` whose elements must be leaf
objects.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pydantic import TypeAdapter, ValidationError

from subjectid.domain.identifiers import Aliases, Single, SubjectIdentifier, aliases
from subjectid.errors import EmptyAliasesError
from subjectid.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from subjectid.config.settings import Settings

logger = logging.getLogger(__name__)

_SUBJECT_ADAPTER: TypeAdapter[Single | Aliases] = TypeAdapter(SubjectIdentifier)


def load_subject(data: str | bytes | Mapping[str, Any]) -> Single | Aliases:
    """Validate JSON text or an already-decoded mapping into a subject identifier.

    Raises:
        pydantic.ValidationError: The input is not a valid Subject Identifier,
            including an aliases set that contains another aliases set.
    """
    if isinstance(data, (str, bytes)):
        return _SUBJECT_ADAPTER.validate_json(data)
    return _SUBJECT_ADAPTER.validate_python(dict(data))


def dump_subject(value: Single | Aliases) -> dict[str, Any]:
    """Return the JSON-compatible object for *value*."""
    dumped: dict[str, Any] = value.model_dump(mode="json")
    return dumped


class InspectService:
    """Describe Subject Identifier documents."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    def describe(self, raw: str) -> ServiceResult:
        """Parse *raw* JSON and report its format and leaf identifiers."""
        op = "describe"
        try:
            decoded = json.loads(raw)
        except json.JSONDecodeError as exc:
            logger.debug("Rejected non-JSON input: %s", exc)
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="invalid_json",
                    message=f"Input is not valid JSON: {exc.msg}",
                    detail={"line": exc.lineno, "column": exc.colno},
                ),
            )

        if not isinstance(decoded, dict):
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="invalid_identifier",
                    message="Subject Identifier must be a JSON object",
                ),
            )

        try:
            subject = load_subject(decoded)
            if isinstance(subject, Aliases):
                subject = aliases(subject.identifiers, policy=self._settings.empty_aliases)
        except ValidationError as exc:
            logger.debug("Rejected subject identifier with %d error(s)", exc.error_count())
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="invalid_identifier",
                    message=f"Invalid Subject Identifier ({exc.error_count()} error(s))",
                    detail={
                        "errors": exc.errors(include_url=False, include_input=False),
                    },
                ),
            )
        except EmptyAliasesError as exc:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(code="empty_aliases", message=str(exc)),
            )

        warnings: list[str] = []
        seen: set[Any] = set()
        for index, leaf in enumerate(subject.identifiers):
            if leaf in seen:
                warnings.append(f"Duplicate identifier at index {index}")
            seen.add(leaf)

        logger.debug("Described %s identifier", subject.format)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "format": str(subject.format),
                "count": len(subject.identifiers),
                "formats": [str(leaf.format) for leaf in subject.identifiers],
                "identifier": dump_subject(subject),
            },
            warnings=warnings,
        )
