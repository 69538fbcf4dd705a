"""Doctor directory: filter, search and sort over the static doctor table."""
from typing import Optional

from medpredict.config import settings
from medpredict.models import Doctor
from medpredict.reference import DOCTORS

GENERAL_PRACTICE = "General Practice"

_SORT_KEYS = {
    "rating": (lambda d: d.rating, True),
    "experience": (lambda d: d.experience, True),
    "name": (lambda d: d.name.lower(), False),
}


def search_doctors(
    city: Optional[str] = None,
    specialization: Optional[str] = None,
    query: Optional[str] = None,
    sort_by: str = "rating",
    doctors: Optional[list[Doctor]] = None,
) -> list[Doctor]:
    """
    Filter by exact city / specialization, then by a free-text query over
    name, hospital and specialization. Ratings and experience sort highest
    first, names alphabetically.
    """
    if sort_by not in _SORT_KEYS:
        raise ValueError(f"Unknown sort key '{sort_by}'. Use one of: {', '.join(_SORT_KEYS)}.")

    result = list(doctors if doctors is not None else DOCTORS)
    if city:
        result = [d for d in result if d.city == city]
    if specialization:
        result = [d for d in result if d.specialization == specialization]
    if query:
        q = query.lower()
        result = [
            d for d in result
            if q in d.name.lower() or q in d.hospital.lower() or q in d.specialization.lower()
        ]

    key, reverse = _SORT_KEYS[sort_by]
    return sorted(result, key=key, reverse=reverse)


def specializations(doctors: Optional[list[Doctor]] = None) -> list[str]:
    """Unique specializations in table order."""
    seen: dict[str, None] = {}
    for d in doctors if doctors is not None else DOCTORS:
        seen.setdefault(d.specialization, None)
    return list(seen)


def relevant_doctors(specialization: str, doctors: Optional[list[Doctor]] = None) -> list[Doctor]:
    """Doctors to suggest next to a prediction; any doctor fits General Practice."""
    doctors = doctors if doctors is not None else DOCTORS
    matches = [
        d for d in doctors
        if d.specialization == specialization or specialization == GENERAL_PRACTICE
    ]
    return matches[: settings.max_relevant_doctors]
