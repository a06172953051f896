"""Career details data package."""

from .career_details import (
    get_career_details,
    get_career_progression,
    get_default_career_details,
    has_detailed_content,
    list_career_ids,
    normalize_career_id,
)
from .content_store import (
    ContentStore,
    clear_content_cache,
    get_content_store,
    get_progression_store,
    load_content_store,
    load_progression_store,
)

__all__ = [
    "ContentStore",
    "clear_content_cache",
    "get_career_details",
    "get_career_progression",
    "get_content_store",
    "get_default_career_details",
    "get_progression_store",
    "has_detailed_content",
    "list_career_ids",
    "load_content_store",
    "load_progression_store",
    "normalize_career_id",
]
