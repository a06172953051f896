"""Career details lookup.

Callers pass whatever career identifier they have (``"software-developer"``,
``"Software Developer"``, ``"  nurse "``). The lookup tries the id as given,
then its normalized form, and otherwise answers with the generic default
record. There is no "not found" result: use :func:`has_detailed_content` to
tell specific content apart from the default.
"""

import re

from career_details.data.content_store import get_content_store, get_progression_store
from career_details.models import CareerDetail, CareerProgression

_WHITESPACE_RUN = re.compile(r"\s+")


def normalize_career_id(career_id: str) -> str:
    """Turn a display name into the stored key form.

    Trims the ends, lowercases, and replaces each whitespace run with a single
    hyphen: ``"  Software   Developer "`` -> ``"software-developer"``.
    """
    return _WHITESPACE_RUN.sub("-", career_id.strip().lower())


def get_career_details(career_id: str) -> CareerDetail:
    """Get the career details for a career id.

    Args:
        career_id: Stored key or a case/whitespace variant of it

    Returns:
        The matching record, or the default record when nothing matches.
        Records are shared and frozen.
    """
    store = get_content_store()

    details = store.careers.get(career_id)
    if details is not None:
        return details

    details = store.careers.get(normalize_career_id(career_id))
    if details is not None:
        return details

    return store.default


def has_detailed_content(career_id: str) -> bool:
    """Check whether a career id resolves to specific (non-default) content."""
    careers = get_content_store().careers
    return career_id in careers or normalize_career_id(career_id) in careers


def get_default_career_details() -> CareerDetail:
    """Get the generic record used for careers without specific content."""
    return get_content_store().default


def list_career_ids() -> list[str]:
    """Get all career ids with specific content, sorted."""
    return sorted(get_content_store().careers)


def get_career_progression(career_id: str) -> CareerProgression | None:
    """Get the seniority ladder for a career.

    Uses the same id matching as :func:`get_career_details`, but there is no
    default progression.

    Returns:
        The progression if found, None otherwise
    """
    progressions = get_progression_store()
    progression = progressions.get(career_id)
    # Display names match the same way as in get_career_details.
    if progression is None:
        progression = progressions.get(normalize_career_id(career_id))
    return progression
