"""Career details content and lookup."""

from career_details.data import (
    get_career_details,
    get_career_progression,
    get_default_career_details,
    has_detailed_content,
    list_career_ids,
    normalize_career_id,
)
from career_details.models import (
    CareerDetail,
    CareerDetailsError,
    CareerLevel,
    CareerProgression,
    ContentStoreError,
    TypicalDay,
)

__version__ = "0.1.0"

__all__ = [
    "CareerDetail",
    "CareerDetailsError",
    "CareerLevel",
    "CareerProgression",
    "ContentStoreError",
    "TypicalDay",
    "__version__",
    "get_career_details",
    "get_career_progression",
    "get_default_career_details",
    "has_detailed_content",
    "list_career_ids",
    "normalize_career_id",
]
