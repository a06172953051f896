"""Career content Pydantic models.

Every model is frozen and holds tuples instead of lists, so records handed
out by the content store are shared and read-only. Attributes are snake_case;
the JSON form (content assets and API payloads) uses camelCase keys.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel

NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]
TextList = Annotated[tuple[NonEmptyStr, ...], Field(min_length=1)]


class ContentModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class TypicalDay(ContentModel):
    """What a working day looks like, in chronological order."""

    morning: TextList
    midday: TextList
    afternoon: TextList
    tools: tuple[NonEmptyStr, ...] | None = None
    environment: NonEmptyStr | None = None


class CareerDetail(ContentModel):
    """Descriptive content for one career."""

    typical_day: TypicalDay
    what_you_actually_do: TextList
    who_this_is_good_for: TextList
    top_skills: TextList
    entry_paths: TextList
    reality_check: NonEmptyStr | None = None


class CareerContent(ContentModel):
    """Top-level layout of the career details asset."""

    default: CareerDetail
    careers: dict[NonEmptyStr, CareerDetail]


class CareerLevel(ContentModel):
    level: Literal["entry", "mid", "senior", "lead"]
    title: NonEmptyStr
    years_experience: NonEmptyStr
    salary_range: NonEmptyStr


class CareerProgression(ContentModel):
    """Seniority ladder for a career, from entry level to lead."""

    career_id: NonEmptyStr
    levels: Annotated[tuple[CareerLevel, ...], Field(min_length=1)]


class ProgressionContent(ContentModel):
    """Top-level layout of the career progressions asset."""

    progressions: tuple[CareerProgression, ...]
