"""Orchestrates: simulated latency → rank → wrap as HealthCheck → persist."""
import asyncio
import logging
from typing import Iterable, Optional

from medpredict.config import settings
from medpredict.models import HealthCheck, PredictionResult
from medpredict.engine.matcher import RandomSource, make_rng, rank_conditions
from medpredict.engine.store import RecordStore

logger = logging.getLogger(__name__)


class AnalysisPipeline:
    """Runs one symptom analysis and records it in the store."""

    def __init__(
        self,
        store: RecordStore,
        rng: Optional[RandomSource] = None,
        delay: Optional[float] = None,
    ):
        self.store = store
        self.rng = rng if rng is not None else make_rng()
        self._delay = delay

    @property
    def delay(self) -> float:
        return self._delay if self._delay is not None else settings.analysis_delay

    def predict(self, symptoms: Iterable[str]) -> list[PredictionResult]:
        """Rank without persisting."""
        return rank_conditions(symptoms, rng=self.rng)

    async def analyze(self, symptoms: list[str], notes: Optional[str] = None) -> HealthCheck:
        """Main analysis method. Raises ValueError when no usable symptom is given."""
        # repeats of the same entry count once, first occurrence wins
        entered = list(dict.fromkeys(s for s in symptoms if s and s.strip()))
        if not entered:
            raise ValueError("At least one symptom is required.")

        if self.delay > 0:
            await asyncio.sleep(self.delay)

        predictions = self.predict(entered)
        check = HealthCheck(symptoms=entered, predictions=predictions, notes=notes)
        self.store.append_health_check(check)
        logger.info(
            f"Analysis {check.id}: {len(entered)} symptom(s) → "
            f"{', '.join(f'{p.disease} ({p.confidence}%)' for p in predictions)}"
        )
        return check
