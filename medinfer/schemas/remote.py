"""
MedInfer — Remote prediction API schemas

Wire format of the simple prediction service:

    POST /predict   {"symptoms": ["symptom_1", ...]}
                 -> {"prediction", "confidence", "selected_symptoms_count",
                     "symptoms_processed", "status", "error"?}
    GET  /health -> {"status", "model_loaded", "encoder_loaded"}
"""

from typing import List, Literal, Optional
from pydantic import BaseModel, Field


class PredictRequest(BaseModel):
    symptoms: List[str] = Field(..., description="Symptom ids, symptom_<n> convention")

    class Config:
        json_schema_extra = {
            "example": {"symptoms": ["symptom_1", "symptom_17", "symptom_42"]}
        }


class PredictResponse(BaseModel):
    prediction: str = Field(default="")
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    selected_symptoms_count: int = Field(default=0, ge=0)
    symptoms_processed: int = Field(default=0, ge=0)
    status: Literal["success", "error"] = "success"
    error: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "prediction": "Influenza",
                "confidence": 0.82,
                "selected_symptoms_count": 3,
                "symptoms_processed": 3,
                "status": "success"
            }
        }


class HealthCheckResponse(BaseModel):
    status: str
    model_loaded: bool
    encoder_loaded: bool


class SymptomsInfoResponse(BaseModel):
    total_symptoms: int
    format: str
    example: List[str]
    index_version: str
