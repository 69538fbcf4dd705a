"""Autocomplete lookup over the reference symptom table."""
from typing import Optional

from medpredict.config import settings
from medpredict.models import Symptom
from medpredict.reference import SYMPTOMS


def suggest_symptoms(query: Optional[str], symptoms: Optional[list[Symptom]] = None) -> list[str]:
    """Names containing `query` (case-insensitive), in table order, capped at max_suggestions."""
    if not query or len(query) < settings.min_query_length:
        return []
    symptoms = symptoms if symptoms is not None else SYMPTOMS
    q = query.lower()
    return [s.name for s in symptoms if q in s.name.lower()][: settings.max_suggestions]
