"""Command: describe a Subject Identifier JSON document."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

import click

from subjectid.commands._base import SubjectIdCommand

if TYPE_CHECKING:
    from subjectid.commands._context import AppContext


@click.command(
    cls=SubjectIdCommand,
    examples="""\
  subjectid inspect subject.json
  echo '{"format": "email", "email": "user@example.com"}' | subjectid inspect
  subjectid --json inspect aliases.json""",
)
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.pass_obj
def inspect(app: AppContext, source: TextIO) -> None:
    """Validate a Subject Identifier and list its leaf identifiers.

    SOURCE is a JSON file, or '-' (default) for stdin.
    """
    from subjectid.services.inspect import InspectService

    app.emit(InspectService(app.settings).describe(source.read()))
