from medpredict.engine.suggestions import suggest_symptoms
from medpredict.models import Symptom
from medpredict.reference import SYMPTOMS


def test_short_queries_return_nothing() -> None:
    assert suggest_symptoms("") == []
    assert suggest_symptoms(None) == []
    assert suggest_symptoms("p") == []


def test_case_insensitive_substring_in_table_order() -> None:
    expected = ["Chest pain", "Joint pain", "Abdominal pain", "Back pain"]
    assert suggest_symptoms("pain") == expected
    assert suggest_symptoms("PAIN") == expected


def test_every_result_contains_query() -> None:
    names = [s.name for s in SYMPTOMS]
    results = suggest_symptoms("in")
    assert results
    assert all("in" in r.lower() for r in results)
    assert results == [n for n in names if n in results]


def test_no_match() -> None:
    assert suggest_symptoms("xq") == []


def test_caps_at_ten() -> None:
    table = [
        Symptom(id=str(i), name=f"Ache {i}", category="general", severity="mild")
        for i in range(15)
    ]
    results = suggest_symptoms("ache", symptoms=table)
    assert results == [f"Ache {i}" for i in range(10)]
