"""
MedInfer — Knowledge schemas

Pydantic models for:
- Symptom: catalog entry (id, display name, category, severity)
- Disease: knowledge base entry with common/rare symptom sets
"""

from typing import FrozenSet
from enum import Enum
from pydantic import BaseModel, Field, field_validator, model_validator


class SymptomCategory(str, Enum):
    GENERAL = "general"
    RESPIRATORY = "respiratory"
    DIGESTIVE = "digestive"
    NEUROLOGICAL = "neurological"
    CARDIOVASCULAR = "cardiovascular"
    MUSCULOSKELETAL = "musculoskeletal"
    DERMATOLOGICAL = "dermatological"
    PSYCHOLOGICAL = "psychological"


class SymptomSeverity(str, Enum):
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"


class Urgency(str, Enum):
    """Triage urgency, ordered from least to most urgent"""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    EMERGENCY = "emergency"

    @property
    def triage_label(self) -> str:
        """Label used in rankings: LOW, MEDIUM, HIGH, EMERGENCY"""
        return self.value.upper()


class Symptom(BaseModel):
    """
    Catalog symptom.

    Example:
        symptom = Symptom(
            id="runny_nose",
            name="Runny Nose",
            category=SymptomCategory.RESPIRATORY,
            severity=SymptomSeverity.MILD
        )
    """
    id: str = Field(..., min_length=1, description="Unique symptom id")
    name: str = Field(..., min_length=1, description="Display name")
    category: SymptomCategory = Field(default=SymptomCategory.GENERAL)
    severity: SymptomSeverity = Field(default=SymptomSeverity.MILD)

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "id": "runny_nose",
                "name": "Runny Nose",
                "category": "respiratory",
                "severity": "mild"
            }
        }


class Disease(BaseModel):
    """
    Knowledge base disease.

    Invariants (checked on construction):
    - common_symptoms and rare_symptoms are disjoint
    - at least one symptom in total, so the score denominator is > 0
    """
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    description: str = Field(default="")
    common_symptoms: FrozenSet[str] = Field(default_factory=frozenset)
    rare_symptoms: FrozenSet[str] = Field(default_factory=frozenset)
    urgency: Urgency
    specialist_type: str = Field(..., min_length=1)

    @field_validator("common_symptoms", "rare_symptoms", mode="before")
    @classmethod
    def to_frozenset(cls, v):
        return frozenset(v)

    @model_validator(mode="after")
    def check_symptom_sets(self) -> "Disease":
        overlap = self.common_symptoms & self.rare_symptoms
        if overlap:
            raise ValueError(
                f"Disease '{self.id}': symptoms both common and rare: {sorted(overlap)}"
            )
        if not self.common_symptoms and not self.rare_symptoms:
            raise ValueError(f"Disease '{self.id}' has no symptoms")
        return self

    @property
    def all_symptoms(self) -> FrozenSet[str]:
        return self.common_symptoms | self.rare_symptoms

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "id": "common_cold",
                "name": "Common Cold",
                "description": "A viral infection of the upper respiratory tract.",
                "common_symptoms": ["runny_nose", "cough"],
                "rare_symptoms": ["fever"],
                "urgency": "low",
                "specialist_type": "General Practitioner"
            }
        }
