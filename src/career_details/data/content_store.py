"""Loading of the career content assets.

Content ships as JSON next to this module. Each asset is parsed and
validated once per path, then kept for the lifetime of the process behind
read-only mappings.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType

from pydantic import ValidationError

from career_details.models import (
    CareerContent,
    CareerDetail,
    CareerProgression,
    ContentStoreError,
    ProgressionContent,
)
from career_details.settings import settings

DATA_DIR = Path(__file__).resolve().parent
CAREER_DETAILS_PATH = DATA_DIR / "career_details.json"
CAREER_PROGRESSIONS_PATH = DATA_DIR / "career_progressions.json"


@dataclass(frozen=True)
class ContentStore:
    """Career details keyed by career id, plus the fallback record."""

    careers: Mapping[str, CareerDetail]
    default: CareerDetail

    def __len__(self) -> int:
        return len(self.careers)

    def __contains__(self, career_id: object) -> bool:
        return career_id in self.careers


def _read_asset(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise ContentStoreError(path, e.strerror or str(e)) from e


def _describe(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "<root>"
    return f"{error.error_count()} validation error(s), first at {location}: {first['msg']}"


@lru_cache(maxsize=None)
def _load_content_store(path: Path) -> ContentStore:
    raw = _read_asset(path)
    try:
        content = CareerContent.model_validate_json(raw)
    except ValidationError as e:
        raise ContentStoreError(path, _describe(e)) from e

    return ContentStore(
        careers=MappingProxyType(dict(content.careers)),
        default=content.default,
    )


@lru_cache(maxsize=None)
def _load_progression_store(path: Path) -> Mapping[str, CareerProgression]:
    raw = _read_asset(path)
    try:
        content = ProgressionContent.model_validate_json(raw)
    except ValidationError as e:
        raise ContentStoreError(path, _describe(e)) from e

    progressions: dict[str, CareerProgression] = {}
    for progression in content.progressions:
        if progression.career_id in progressions:
            raise ContentStoreError(
                path, f"duplicate progression for career '{progression.career_id}'"
            )
        progressions[progression.career_id] = progression
    return MappingProxyType(progressions)


def load_content_store(path: str | Path | None = None) -> ContentStore:
    """Load the career details asset at ``path`` (packaged asset by default).

    Raises:
        ContentStoreError: the file is missing, is not JSON, or does not match
            the content schema.
    """
    target = Path(path).resolve() if path else CAREER_DETAILS_PATH
    return _load_content_store(target)


def load_progression_store(path: str | Path | None = None) -> Mapping[str, CareerProgression]:
    """Load the career progressions asset at ``path`` (packaged asset by default)."""
    target = Path(path).resolve() if path else CAREER_PROGRESSIONS_PATH
    return _load_progression_store(target)


def get_content_store() -> ContentStore:
    """Return the process-wide career details store.

    ``ContentSettings`` keeps the configured path absolute, so after the first
    load this is a cache hit that never touches the filesystem.
    """
    configured = settings.content.CAREER_DETAILS_CONTENT_PATH
    return _load_content_store(Path(configured) if configured else CAREER_DETAILS_PATH)


def get_progression_store() -> Mapping[str, CareerProgression]:
    """Return the process-wide career progressions store."""
    configured = settings.content.CAREER_PROGRESSIONS_CONTENT_PATH
    return _load_progression_store(Path(configured) if configured else CAREER_PROGRESSIONS_PATH)


def clear_content_cache() -> None:
    """Forget every loaded asset so the next access reads from disk again."""
    _load_content_store.cache_clear()
    _load_progression_store.cache_clear()
