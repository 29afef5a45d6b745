"""
MedInfer — Knowledge module

Static registries used by the rule strategy.

Components:
- SymptomCatalog: symptom id -> display name, category, severity
- KnowledgeBase: diseases with common/rare symptoms, urgency, specialist

Example:
    from medinfer.knowledge import SymptomCatalog, KnowledgeBase

    catalog = SymptomCatalog.default()
    kb = KnowledgeBase.default()

    print(len(catalog), len(kb))
    print(kb.unknown_symptoms(catalog))  # []
"""

from .symptom_catalog import SymptomCatalog
from .knowledge_base import KnowledgeBase


__all__ = [
    "SymptomCatalog",
    "KnowledgeBase",
]
