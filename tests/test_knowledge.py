"""
Tests for schemas and the knowledge module

Run: pytest tests/test_knowledge.py -v
"""

import pytest
from pydantic import ValidationError as PydanticValidationError


def test_default_catalog_and_kb():
    from medinfer.knowledge import SymptomCatalog, KnowledgeBase

    catalog = SymptomCatalog.default()
    kb = KnowledgeBase.default()

    assert len(catalog) == 51
    assert len(kb) == 16
    assert kb.diseases[0].id == "common_cold"
    assert kb.diseases[-1].id == "stroke"

    # every disease symptom is in the catalog
    assert kb.unknown_symptoms(catalog) == []

    print(f"✓ {len(catalog)} symptoms, {len(kb)} diseases")


def test_disease_invariants():
    from medinfer.schemas import Disease, Urgency

    disease = Disease(
        id="test",
        name="Test",
        common_symptoms=["a", "b"],
        rare_symptoms=["c"],
        urgency="high",
        specialist_type="Tester",
    )
    assert disease.common_symptoms == frozenset({"a", "b"})
    assert disease.all_symptoms == frozenset({"a", "b", "c"})
    assert disease.urgency is Urgency.HIGH
    assert disease.urgency.triage_label == "HIGH"

    with pytest.raises(PydanticValidationError):
        Disease(
            id="overlap", name="Overlap",
            common_symptoms=["a"], rare_symptoms=["a"],
            urgency="low", specialist_type="X",
        )

    with pytest.raises(PydanticValidationError):
        Disease(id="empty", name="Empty", urgency="low", specialist_type="X")


def test_disease_is_frozen():
    from medinfer.knowledge import KnowledgeBase

    disease = KnowledgeBase.default().get("common_cold")
    with pytest.raises(PydanticValidationError):
        disease.name = "Something else"


def test_duplicate_ids_rejected():
    from medinfer.knowledge import SymptomCatalog, KnowledgeBase

    catalog = SymptomCatalog.default()
    with pytest.raises(ValueError):
        SymptomCatalog(list(catalog) + [catalog.get("fever")])

    kb = KnowledgeBase.default()
    with pytest.raises(ValueError):
        KnowledgeBase(list(kb) + [kb.get("stroke")])


def test_catalog_lookup_and_search():
    from medinfer.knowledge import SymptomCatalog
    from medinfer.schemas import SymptomCategory

    catalog = SymptomCatalog.default()

    assert catalog.get("shortness_breath").name == "Shortness of Breath"
    assert catalog.get("nope") is None
    assert "fever" in catalog
    assert not catalog.has("nope")

    results = catalog.search("HEAD")
    assert {s.id for s in results} == {"headache", "severe_headache"}

    assert len(catalog.search("pain", limit=2)) == 2
    assert len(catalog.search("")) == len(catalog)

    respiratory = catalog.by_category(SymptomCategory.RESPIRATORY)
    assert "cough" in {s.id for s in respiratory}
    assert all(s.category == SymptomCategory.RESPIRATORY for s in respiratory)


def test_catalog_pagination():
    from medinfer.knowledge import SymptomCatalog

    catalog = SymptomCatalog.default()

    assert catalog.total_pages(20) == 3
    assert len(catalog.get_page(1, 20)) == 20
    assert len(catalog.get_page(3, 20)) == 11
    assert catalog.get_page(4, 20) == []
    assert catalog.get_page(0, 20) == []

    pages = [s.id for p in range(1, 4) for s in catalog.get_page(p, 20)]
    assert pages == catalog.ids

    with pytest.raises(ValueError):
        catalog.total_pages(0)


def test_knowledge_base_lookups():
    from medinfer.knowledge import KnowledgeBase

    kb = KnowledgeBase.default()

    assert kb.get("influenza").name == "Influenza (Flu)"
    assert kb.get_by_name("Influenza (Flu)").id == "influenza"
    assert kb.get("nope") is None
    assert "stroke" in kb

    with_chest_pain = [d.id for d in kb.diseases_with_symptom("chest_pain")]
    assert with_chest_pain == ["pneumonia", "bronchitis", "asthma", "heart_attack"]

    assert kb.diseases_with_symptom("nope") == []


def test_knowledge_base_from_json(tmp_path):
    import json
    from medinfer.knowledge import KnowledgeBase

    path = tmp_path / "diseases.json"
    path.write_text(json.dumps([{
        "id": "only",
        "name": "Only Disease",
        "common_symptoms": ["fever"],
        "rare_symptoms": [],
        "urgency": "low",
        "specialist_type": "General Practitioner",
    }]), encoding="utf-8")

    kb = KnowledgeBase.from_json(str(path))

    assert kb.disease_names == ["Only Disease"]
