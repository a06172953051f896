"""Tests for environment-driven settings."""

from pathlib import Path

import pytest

from career_details.settings import AppSettings, ContentSettings, Settings


class TestAppSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("ENV_MODE", "LOG_LEVEL", "LOG_VERBOSITY", "HOST", "PORT"):
            monkeypatch.delenv(name, raising=False)

        app = AppSettings(_env_file=None)

        assert app.ENV_MODE == "LOCAL"
        assert app.LOG_LEVEL == "INFO"
        assert app.LOG_VERBOSITY == "verbose"
        assert app.PORT == 8000

    def test_case_normalization(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENV_MODE", " production ")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_VERBOSITY", "QUIET")

        app = AppSettings(_env_file=None)

        assert app.ENV_MODE == "PRODUCTION"
        assert app.LOG_LEVEL == "DEBUG"
        assert app.LOG_VERBOSITY == "quiet"


class TestContentSettings:
    def test_defaults_to_packaged_assets(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("CAREER_DETAILS_CONTENT_PATH", raising=False)
        monkeypatch.delenv("CAREER_PROGRESSIONS_CONTENT_PATH", raising=False)

        content = ContentSettings(_env_file=None)

        assert content.CAREER_DETAILS_CONTENT_PATH is None
        assert content.CAREER_PROGRESSIONS_CONTENT_PATH is None

    def test_reads_env_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("CAREER_DETAILS_CONTENT_PATH", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text(f"CAREER_DETAILS_CONTENT_PATH={tmp_path / 'careers.json'}\n")

        content = ContentSettings(_env_file=env_file)

        assert content.CAREER_DETAILS_CONTENT_PATH == str(tmp_path / "careers.json")

    def test_relative_paths_are_made_absolute(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("CAREER_DETAILS_CONTENT_PATH", "content/careers.json")
        monkeypatch.setenv("CAREER_PROGRESSIONS_CONTENT_PATH", "progressions.json")

        content = ContentSettings(_env_file=None)

        assert content.CAREER_DETAILS_CONTENT_PATH == str(tmp_path / "content" / "careers.json")
        assert content.CAREER_PROGRESSIONS_CONTENT_PATH == str(tmp_path / "progressions.json")


def test_reload_picks_up_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PORT", raising=False)
    settings = Settings()
    assert settings.app.PORT == 8000

    monkeypatch.setenv("PORT", "9100")
    settings.reload()

    assert settings.app.PORT == 9100
