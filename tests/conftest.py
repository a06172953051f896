"""Global pytest configuration and fixtures

This file contains shared fixtures and configuration that are available
to all tests across the test suite.
"""

import json
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner
from fastapi.testclient import TestClient

from career_details.data import clear_content_cache
from career_details.settings import settings


def make_detail(label: str, **overrides: Any) -> dict[str, Any]:
    """Build a valid career detail payload (camelCase, as stored on disk)."""
    detail: dict[str, Any] = {
        "typicalDay": {
            "morning": [f"{label} morning task"],
            "midday": [f"{label} midday task"],
            "afternoon": [f"{label} afternoon task"],
        },
        "whatYouActuallyDo": [f"{label} work"],
        "whoThisIsGoodFor": [f"{label} people"],
        "topSkills": [f"{label} skill"],
        "entryPaths": [f"{label} path"],
    }
    detail.update(overrides)
    return detail


@pytest.fixture(autouse=True)
def reset_content_cache() -> Generator[None, None, None]:
    """Make every test start from a cold content cache."""
    clear_content_cache()
    yield
    clear_content_cache()


@pytest.fixture
def custom_content_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the process-wide store at a small hand-written content asset."""
    content = {
        "default": make_detail("Default"),
        "careers": {
            "night-owl": make_detail(
                "Night owl",
                realityCheck="Sleeps during the day.",
            ),
            "Mixed Case": make_detail("Mixed case"),
        },
    }
    path = tmp_path / "career_details.json"
    path.write_text(json.dumps(content), encoding="utf-8")
    monkeypatch.setattr(settings.content, "CAREER_DETAILS_CONTENT_PATH", str(path))
    return path


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Test client for the career details app (lifespan included)."""
    from career_details.main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def detail_factory() -> Any:
    """Factory for valid career detail payloads."""
    return make_detail
