import asyncio
import time

import pytest

from medpredict.config import settings
from medpredict.engine.trends import common_symptoms, insights
from medpredict.engine.pipeline import AnalysisPipeline
from medpredict.engine.store import MemoryBackend, RecordStore


class ZeroJitter:
    def uniform(self, low: float, high: float) -> float:
        return low


def _pipeline() -> AnalysisPipeline:
    return AnalysisPipeline(RecordStore(MemoryBackend()), rng=ZeroJitter(), delay=0)


def test_analyze_records_health_check() -> None:
    pipeline = _pipeline()
    check = asyncio.run(pipeline.analyze(["fever", "cough"], notes="since Monday"))

    assert check.symptoms == ["fever", "cough"]
    assert check.predictions[0].disease == "Influenza"
    assert check.notes == "since Monday"
    assert pipeline.store.get_health_checks() == [check]


def test_analyze_newest_first() -> None:
    pipeline = _pipeline()
    first = asyncio.run(pipeline.analyze(["fever"]))
    second = asyncio.run(pipeline.analyze(["nausea"]))
    assert [c.id for c in pipeline.store.get_health_checks()] == [second.id, first.id]


def test_analyze_keeps_fallback_non_empty() -> None:
    check = asyncio.run(_pipeline().analyze(["insomnia"]))
    assert len(check.predictions) == 1
    assert check.predictions[0].confidence == 65


def test_analyze_rejects_blank_input() -> None:
    pipeline = _pipeline()
    with pytest.raises(ValueError):
        asyncio.run(pipeline.analyze(["", "   "]))
    assert pipeline.store.get_health_checks() == []


def test_predict_does_not_persist() -> None:
    pipeline = _pipeline()
    assert pipeline.predict(["fever"])
    assert pipeline.store.get_health_checks() == []


def test_analyze_stores_repeated_symptoms_once() -> None:
    pipeline = _pipeline()
    check = asyncio.run(pipeline.analyze(["Fever", "Fever", "Cough"]))
    assert check.symptoms == ["Fever", "Cough"]

    history = pipeline.store.get_health_checks()
    assert common_symptoms(history).values == [1, 1]
    assert insights(history)[2].startswith("Diverse")


def test_analyze_waits_for_configured_delay(monkeypatch) -> None:
    waited: list[float] = []

    async def fake_sleep(seconds: float) -> None:
        waited.append(seconds)

    monkeypatch.setattr(asyncio, "sleep", fake_sleep)
    store = RecordStore(MemoryBackend())

    asyncio.run(AnalysisPipeline(store, rng=ZeroJitter(), delay=0.05).analyze(["fever"]))
    assert waited == [0.05]

    monkeypatch.setattr(settings, "analysis_delay", 0.25)
    asyncio.run(AnalysisPipeline(store, rng=ZeroJitter()).analyze(["cough"]))
    assert waited == [0.05, 0.25]


def test_analyze_real_delay_elapses() -> None:
    pipeline = AnalysisPipeline(RecordStore(MemoryBackend()), rng=ZeroJitter(), delay=0.05)
    started = time.monotonic()
    asyncio.run(pipeline.analyze(["fever"]))
    assert time.monotonic() - started >= 0.04
