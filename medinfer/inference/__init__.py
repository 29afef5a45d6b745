"""
MedInfer — Inference module

Components:
- selection.py: SymptomSelection (validated, deduplicated input)
- engine.py: InferenceEngine (model / rule / remote strategies)
- health_utils.py: risk score and summary helpers

Example:
    from medinfer.config import Strategy
    from medinfer.inference import InferenceEngine, generate_health_summary

    engine = InferenceEngine.from_config()
    ranking = engine.infer(["fever", "headache"], Strategy.RULE)

    print(generate_health_summary(ranking))
"""

from .selection import SymptomSelection
from .engine import InferenceEngine
from .health_utils import (
    format_symptom_name,
    calculate_risk_score,
    generate_health_summary,
)


__all__ = [
    "SymptomSelection",
    "InferenceEngine",
    "format_symptom_name",
    "calculate_risk_score",
    "generate_health_summary",
]
