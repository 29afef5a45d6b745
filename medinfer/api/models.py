"""
MedInfer — API Models

Pydantic models for API requests and responses. The remote prediction
wire format (/predict, /health, /symptoms-info) lives in medinfer.schemas.
"""

from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional

from medinfer.config import Strategy
from medinfer.schemas import (
    Disease,
    HealthCheckResponse,
    Prediction,
    Ranking,
    Symptom,
)


# ============================================================
# Inference Models
# ============================================================

class InferRequest(BaseModel):
    """Inference request"""
    symptoms: List[str] = Field(..., description="Symptom ids")
    strategy: Optional[Strategy] = Field(default=None, description="Default: engine setting")

    class Config:
        json_schema_extra = {
            "example": {
                "symptoms": ["runny_nose", "cough", "sneezing"],
                "strategy": "rule"
            }
        }


class InferResponse(BaseModel):
    """Ranked predictions for one selection"""
    strategy: Strategy
    disease: str
    specialist: str
    triage: str
    confidence: float = Field(..., ge=0, le=1)
    top_predictions: List[Prediction]
    selected_symptoms: List[str]
    dropped_symptoms: List[str] = []
    total_candidates: int
    summary: str
    processing_time_ms: float

    @classmethod
    def from_ranking(cls, ranking: Ranking, summary: str, processing_time_ms: float) -> "InferResponse":
        primary = ranking.primary
        return cls(
            strategy=ranking.strategy,
            disease=primary.disease_name,
            specialist=primary.specialist,
            triage=primary.triage,
            confidence=primary.probability,
            top_predictions=ranking.top_predictions,
            selected_symptoms=ranking.selected_symptoms,
            dropped_symptoms=ranking.dropped_symptoms,
            total_candidates=ranking.total_candidates,
            summary=summary,
            processing_time_ms=processing_time_ms,
        )


# ============================================================
# Catalog Models
# ============================================================

class SymptomListResponse(BaseModel):
    symptoms: List[Symptom]
    total: int
    page: int
    per_page: int
    total_pages: int


class SymptomSearchResponse(BaseModel):
    """Symptom search results"""
    query: str
    results: List[Symptom]
    total: int


class DiseaseInfo(BaseModel):
    id: str
    name: str
    description: str
    common_symptoms: List[str]
    rare_symptoms: List[str]
    urgency: str
    specialist_type: str

    @classmethod
    def from_disease(cls, disease: Disease) -> "DiseaseInfo":
        return cls(
            id=disease.id,
            name=disease.name,
            description=disease.description,
            common_symptoms=sorted(disease.common_symptoms),
            rare_symptoms=sorted(disease.rare_symptoms),
            urgency=disease.urgency.value,
            specialist_type=disease.specialist_type,
        )


class DiseaseListResponse(BaseModel):
    diseases: List[DiseaseInfo]
    total: int
    limit: int
    offset: int


# ============================================================
# Health & Error Models
# ============================================================

class HealthResponse(HealthCheckResponse):
    """Health check: remote API fields plus engine details"""
    version: str
    classifier_state: str
    stats: Dict[str, Any] = {}
    error: Optional[str] = None


class ErrorResponse(BaseModel):
    """Error body"""
    status: str = "error"
    error: str
    type: str
    errors: List[str] = []
