"""
MedInfer — Symptom catalog

Registry of selectable symptoms: id -> display name and category.
Source of truth for valid inputs of the rule strategy.
"""

import json
import math
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional

from medinfer.schemas import Symptom, SymptomCategory
from .data import SYMPTOMS


class SymptomCatalog:
    """
    Immutable symptom registry, in declaration order.

    Example:
        catalog = SymptomCatalog.default()

        catalog.get("runny_nose").name      # "Runny Nose"
        catalog.search("pain")              # chest pain, back pain, ...
        catalog.get_page(1, per_page=50)    # first 50 symptoms
    """

    def __init__(self, symptoms: Iterable[Symptom]):
        self._symptoms: Dict[str, Symptom] = {}

        for symptom in symptoms:
            if symptom.id in self._symptoms:
                raise ValueError(f"Duplicate symptom id: {symptom.id}")
            self._symptoms[symptom.id] = symptom

    @classmethod
    def default(cls) -> "SymptomCatalog":
        """Catalog from the built-in table"""
        return cls(
            Symptom(id=sid, name=name, category=category, severity=severity)
            for sid, name, category, severity in SYMPTOMS
        )

    @classmethod
    def from_json(cls, path: str) -> "SymptomCatalog":
        """
        Load from a JSON list of {"id", "name", "category", "severity"} objects.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Symptom catalog not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            records = json.load(f)

        return cls(Symptom(**record) for record in records)

    def get(self, symptom_id: str) -> Optional[Symptom]:
        return self._symptoms.get(symptom_id)

    def has(self, symptom_id: str) -> bool:
        return symptom_id in self._symptoms

    @property
    def ids(self) -> List[str]:
        return list(self._symptoms.keys())

    @property
    def symptoms(self) -> List[Symptom]:
        return list(self._symptoms.values())

    def by_category(self, category: SymptomCategory) -> List[Symptom]:
        return [s for s in self._symptoms.values() if s.category == category]

    def search(self, term: str, limit: Optional[int] = None) -> List[Symptom]:
        """
        Case-insensitive substring search over display names and ids.

        An empty term returns the whole catalog.
        """
        term = term.strip().lower()
        if not term:
            results = self.symptoms
        else:
            results = [
                s for s in self._symptoms.values()
                if term in s.name.lower() or term in s.id
            ]
        return results[:limit] if limit is not None else results

    def get_page(self, page: int, per_page: int = 50) -> List[Symptom]:
        """1-based page of the catalog"""
        if page < 1 or per_page < 1:
            return []
        start = (page - 1) * per_page
        return self.symptoms[start:start + per_page]

    def total_pages(self, per_page: int = 50) -> int:
        if per_page < 1:
            raise ValueError("per_page must be positive")
        return math.ceil(len(self) / per_page)

    def __len__(self) -> int:
        return len(self._symptoms)

    def __contains__(self, symptom_id: str) -> bool:
        return self.has(symptom_id)

    def __iter__(self) -> Iterator[Symptom]:
        return iter(self._symptoms.values())

    def __repr__(self) -> str:
        return f"SymptomCatalog(size={len(self)})"
