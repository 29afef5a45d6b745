"""
MedInfer — Data schemas

Pydantic models for validation and serialization.

Components:
- knowledge.py: Symptom, Disease, SymptomCategory, SymptomSeverity, Urgency
- prediction.py: Prediction, Ranking
- remote.py: wire models of the remote prediction API

Example:
    from medinfer.schemas import Disease, Urgency

    disease = Disease(
        id="common_cold",
        name="Common Cold",
        common_symptoms=["runny_nose", "cough"],
        rare_symptoms=["fever"],
        urgency=Urgency.LOW,
        specialist_type="General Practitioner",
    )
"""

from .knowledge import (
    SymptomCategory,
    SymptomSeverity,
    Urgency,
    Symptom,
    Disease,
)
from .prediction import Prediction, Ranking
from .remote import (
    PredictRequest,
    PredictResponse,
    HealthCheckResponse,
    SymptomsInfoResponse,
)


__all__ = [
    "SymptomCategory",
    "SymptomSeverity",
    "Urgency",
    "Symptom",
    "Disease",
    "Prediction",
    "Ranking",
    "PredictRequest",
    "PredictResponse",
    "HealthCheckResponse",
    "SymptomsInfoResponse",
]
