"""Career details API endpoints.

Provides endpoints for:
- GET /career-details - List career ids that have specific content
- GET /career-details/{career_id} - Get the details for a career, falling back to generic content
"""

from typing import Any

import structlog
from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, SerializationInfo, field_serializer
from pydantic.alias_generators import to_camel

from career_details.data import (
    get_career_details,
    get_career_progression,
    has_detailed_content,
    list_career_ids,
)
from career_details.models import CareerDetail, CareerProgression

router = APIRouter()
logger = structlog.getLogger(__name__)


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CareerDetailsResponse(CamelModel):
    """Response model for a single career lookup."""

    details: CareerDetail
    progression: CareerProgression | None = None
    has_details: bool

    @field_serializer("details")
    def _drop_unset_optionals(self, details: CareerDetail, info: SerializationInfo) -> dict[str, Any]:
        # Unset optional fields are omitted instead of sent as null.
        return details.model_dump(mode=info.mode, by_alias=info.by_alias, exclude_none=True)


class CareerIdListResponse(CamelModel):
    """Response model for listing career ids."""

    career_ids: list[str]
    total: int


@router.get("/career-details", response_model=CareerIdListResponse)
async def list_careers() -> CareerIdListResponse:
    """List every career id that has specific content."""
    career_ids = list_career_ids()
    return CareerIdListResponse(career_ids=career_ids, total=len(career_ids))


@router.get("/career-details/{career_id}", response_model=CareerDetailsResponse)
async def read_career_details(career_id: str) -> CareerDetailsResponse:
    """Get the details for a career.

    Unknown careers are not an error: they get the generic default content
    with ``hasDetails`` set to false, so the UI always has something to show.
    """
    has_details = has_detailed_content(career_id)
    if not has_details:
        logger.debug("No specific content for career, using default", career_id=career_id)

    return CareerDetailsResponse(
        details=get_career_details(career_id),
        progression=get_career_progression(career_id),
        has_details=has_details,
    )
