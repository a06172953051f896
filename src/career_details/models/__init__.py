"""Career content Pydantic models"""

from career_details.models.career_details import (
    CareerContent,
    CareerDetail,
    CareerLevel,
    CareerProgression,
    ProgressionContent,
    TypicalDay,
)
from career_details.models.errors import CareerDetailsError, ContentStoreError

__all__ = [
    # Content
    "CareerContent",
    "CareerDetail",
    "CareerLevel",
    "CareerProgression",
    "ProgressionContent",
    "TypicalDay",
    # Errors
    "CareerDetailsError",
    "ContentStoreError",
]
