"""
MedInfer — Knowledge base

Static registry of diseases with common/rare symptom sets, urgency and
specialist. Loaded once, read-only afterwards.

JSON layout (for from_json):
[
  {
    "id": "common_cold",
    "name": "Common Cold",
    "description": "...",
    "common_symptoms": ["runny_nose", ...],
    "rare_symptoms": ["fever", ...],
    "urgency": "low",
    "specialist_type": "General Practitioner"
  },
  ...
]
"""

import json
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from medinfer.schemas import Disease
from .data import DISEASES
from .symptom_catalog import SymptomCatalog


class KnowledgeBase:
    """
    Ordered disease registry.

    Iteration order is declaration order; the rule scorer relies on it for
    tie-breaking.

    Example:
        kb = KnowledgeBase.default()

        kb.get("common_cold").specialist_type      # "General Practitioner"
        kb.diseases_with_symptom("fever")          # [Common Cold, Influenza, ...]
    """

    def __init__(self, diseases: Iterable[Disease]):
        self._diseases: Tuple[Disease, ...] = tuple(diseases)
        self._by_id: Dict[str, Disease] = {}
        self._symptom_to_diseases: Dict[str, List[Disease]] = {}

        for disease in self._diseases:
            if disease.id in self._by_id:
                raise ValueError(f"Duplicate disease id: {disease.id}")
            self._by_id[disease.id] = disease

            for symptom in sorted(disease.all_symptoms):
                self._symptom_to_diseases.setdefault(symptom, []).append(disease)

    @classmethod
    def default(cls) -> "KnowledgeBase":
        """Knowledge base from the built-in table"""
        return cls(Disease(**record) for record in DISEASES)

    @classmethod
    def from_json(cls, path: str) -> "KnowledgeBase":
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Knowledge base not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            records = json.load(f)

        return cls(Disease(**record) for record in records)

    @property
    def diseases(self) -> Tuple[Disease, ...]:
        return self._diseases

    @property
    def disease_names(self) -> List[str]:
        return [d.name for d in self._diseases]

    @property
    def all_symptoms(self) -> List[str]:
        """Sorted ids of every symptom referenced by a disease"""
        return sorted(self._symptom_to_diseases.keys())

    def get(self, disease_id: str) -> Optional[Disease]:
        return self._by_id.get(disease_id)

    def get_by_name(self, name: str) -> Optional[Disease]:
        name = name.strip().lower()
        for disease in self._diseases:
            if disease.name.lower() == name:
                return disease
        return None

    def diseases_with_symptom(self, symptom_id: str) -> List[Disease]:
        return list(self._symptom_to_diseases.get(symptom_id, []))

    def unknown_symptoms(self, catalog: SymptomCatalog) -> List[str]:
        """Symptoms referenced by diseases but missing from the catalog"""
        return [s for s in self.all_symptoms if s not in catalog]

    def __len__(self) -> int:
        return len(self._diseases)

    def __iter__(self) -> Iterator[Disease]:
        return iter(self._diseases)

    def __contains__(self, disease_id: str) -> bool:
        return disease_id in self._by_id

    def __repr__(self) -> str:
        return f"KnowledgeBase(diseases={len(self)}, symptoms={len(self._symptom_to_diseases)})"
