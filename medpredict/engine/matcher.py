"""Symptom-to-condition matcher: bidirectional substring scoring + top-N ranking."""
import logging
import math
from typing import Iterable, Optional, Protocol

import numpy as np

from medpredict.config import settings
from medpredict.models import Disease, PredictionResult
from medpredict.reference import DISEASES

logger = logging.getLogger(__name__)

FALLBACK_DISEASE = "General Consultation Recommended"


class RandomSource(Protocol):
    def uniform(self, low: float, high: float) -> float: ...


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Build the jitter generator; falls back to settings.random_seed."""
    return np.random.default_rng(seed if seed is not None else settings.random_seed)


def _normalize(symptoms: Iterable[str]) -> list[str]:
    """Lowercase, strip and de-duplicate, keeping first-seen order."""
    seen: dict[str, None] = {}
    for s in symptoms:
        s = s.strip().lower()
        if s:
            seen.setdefault(s, None)
    return list(seen)


def matching_symptoms(disease: Disease, selected: list[str]) -> list[str]:
    """Canonical symptoms of `disease` that contain, or are contained in, a selected one.

    `selected` must already be lowercased.
    """
    matched = []
    for canonical in disease.symptoms:
        c = canonical.lower()
        if any(s in c or c in s for s in selected):
            matched.append(canonical)
    return matched


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def score(matched: int, total: int, jitter: float) -> int:
    """confidence = min(cap, matched/total * 100 + jitter), rounded."""
    raw = min(float(settings.max_confidence), matched / total * 100 + jitter)
    return _round_half_up(raw)


def fallback_prediction() -> PredictionResult:
    return PredictionResult(
        disease=FALLBACK_DISEASE,
        confidence=settings.fallback_confidence,
        description="Your symptoms require professional medical evaluation",
        prevention=[
            "Consult with a healthcare provider",
            "Monitor symptoms",
            "Rest and hydration",
        ],
        severity="medium",
        specialization="General Practice",
    )


def rank_conditions(
    symptoms: Iterable[str],
    rng: Optional[RandomSource] = None,
    diseases: Optional[list[Disease]] = None,
    top_n: Optional[int] = None,
) -> list[PredictionResult]:
    """
    Score every condition against the selected symptoms and return the top results.

    Args:
        symptoms: user-selected symptom names; duplicates and case are ignored
        rng: jitter source exposing uniform(low, high); defaults to make_rng()
        diseases: reference table to score against (defaults to DISEASES)
        top_n: max results (defaults to settings.top_n_predictions)

    Returns:
        Between 1 and top_n PredictionResults, most confident first. When no
        condition matches, a single generic consultation entry is returned.
    """
    selected = _normalize(symptoms)
    if not selected:
        raise ValueError("At least one symptom is required.")

    rng = rng if rng is not None else make_rng()
    diseases = diseases if diseases is not None else DISEASES
    if top_n is None:
        top_n = settings.top_n_predictions
    if top_n < 1:
        raise ValueError("top_n must be at least 1.")

    predictions: list[PredictionResult] = []
    for disease in diseases:
        matched = matching_symptoms(disease, selected)
        if not matched:
            continue
        jitter = float(rng.uniform(0.0, settings.confidence_jitter))
        confidence = score(len(matched), len(disease.symptoms), jitter)
        logger.debug(
            f"{disease.name}: {len(matched)}/{len(disease.symptoms)} matched "
            f"(jitter={jitter:.2f}) → {confidence}"
        )
        predictions.append(PredictionResult(
            disease=disease.name,
            confidence=confidence,
            description=disease.description,
            prevention=list(disease.prevention),
            severity=disease.severity,
            specialization=disease.specialization,
        ))

    if not predictions:
        logger.info(f"No condition matched {selected}; returning fallback.")
        return [fallback_prediction()]

    # sorted() is stable, so equal confidences keep table order
    ranked = sorted(predictions, key=lambda p: p.confidence, reverse=True)[:top_n]
    logger.info(f"Ranked {len(predictions)} matching conditions, returning top {len(ranked)}.")
    return ranked
