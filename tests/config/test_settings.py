"""Tests for Settings: unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from subjectid.config.settings import Settings
from subjectid.domain.identifiers import EmptyAliasesPolicy


class TestSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        """With no TOML and no env vars, all fields use code defaults."""
        settings = Settings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.log_json is False
        assert settings.empty_aliases == EmptyAliasesPolicy.ALLOW

    def test_frozen(self, tmp_path: Path) -> None:
        settings = Settings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "subjectid.toml"
        toml.write_text('empty_aliases = "reject"\n')
        settings = Settings.from_cli(start=tmp_path)
        assert settings.empty_aliases == EmptyAliasesPolicy.REJECT
        assert settings.config_path == toml

    def test_discovered_from_subdirectory(self, tmp_path: Path) -> None:
        (tmp_path / "subjectid.toml").write_text('empty_aliases = "reject"\n')
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        settings = Settings.from_cli(start=nested)
        assert settings.empty_aliases == EmptyAliasesPolicy.REJECT

    def test_empty_toml_uses_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "subjectid.toml").write_text("")
        settings = Settings.from_cli(start=tmp_path)
        assert settings.empty_aliases == EmptyAliasesPolicy.ALLOW

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('empty_aliases = "reject"\n')
        settings = Settings.from_cli(config_path=str(custom))
        assert settings.empty_aliases == EmptyAliasesPolicy.REJECT
        assert settings.config_path == custom

    def test_missing_explicit_path_ignored(self, tmp_path: Path) -> None:
        settings = Settings.from_cli(config_path=str(tmp_path / "nope.toml"))
        assert settings.config_path is None

    def test_invalid_toml_raises_click_exception(self, tmp_path: Path) -> None:
        (tmp_path / "subjectid.toml").write_text("empty_aliases = \n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            Settings.from_cli(start=tmp_path)

    def test_invalid_policy_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "subjectid.toml").write_text('empty_aliases = "sometimes"\n')
        with pytest.raises(Exception):
            Settings.from_cli(start=tmp_path)


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "subjectid.toml").write_text('empty_aliases = "reject"\n')
        monkeypatch.setenv("SUBJECTID_EMPTY_ALIASES", "allow")
        settings = Settings.from_cli(start=tmp_path)
        assert settings.empty_aliases == EmptyAliasesPolicy.ALLOW

    def test_cli_flags_override(self, tmp_path: Path) -> None:
        settings = Settings.from_cli(start=tmp_path, json_output=True, quiet=True, verbose=True)
        assert settings.json_output is True
        assert settings.quiet is True
        assert settings.verbose is True

    def test_cli_flags_override_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SUBJECTID_QUIET", "true")
        settings = Settings.from_cli(start=tmp_path, quiet=False)
        assert settings.quiet is False
