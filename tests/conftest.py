"""Shared pytest fixtures for subjectid tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from subjectid.domain.identifiers import Account, Email, account, email


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep config discovery away from the developer's environment."""
    for name in (
        "SUBJECTID_CONFIG",
        "SUBJECTID_EMPTY_ALIASES",
        "SUBJECTID_JSON_OUTPUT",
        "SUBJECTID_QUIET",
        "SUBJECTID_VERBOSE",
        "SUBJECTID_LOG_JSON",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def account_id() -> Account:
    return account("acct:a@example.com")


@pytest.fixture
def email_id() -> Email:
    return email("b@example.com")
