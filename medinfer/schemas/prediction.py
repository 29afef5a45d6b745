"""
MedInfer — Prediction schemas

Pydantic models for:
- Prediction: one candidate disease with specialist, triage and probability
- Ranking: ordered output of one inference call (both strategies)
"""

from typing import List, Optional
from pydantic import BaseModel, Field

from medinfer.config import Strategy


class Prediction(BaseModel):
    """
    One ranked candidate.

    probability is always in [0, 1], whichever strategy produced it.
    """
    disease_name: str = Field(..., description="Disease name")
    specialist: str = Field(..., description="Recommended specialist")
    triage: str = Field(..., description="Triage label")
    probability: float = Field(..., ge=0.0, le=1.0)

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "disease_name": "Common Cold",
                "specialist": "General Practitioner",
                "triage": "LOW",
                "probability": 0.3
            }
        }


class Ranking(BaseModel):
    """
    Result of one inference call.

    predictions holds the top-K candidates sorted by descending probability;
    predictions[0] is the primary diagnosis.

    Example:
        ranking = engine.infer(["runny_nose", "cough"], Strategy.RULE)
        print(ranking.primary.disease_name, ranking.confidence)
    """
    predictions: List[Prediction] = Field(..., min_length=1)
    strategy: Strategy

    selected_symptoms: List[str] = Field(
        default_factory=list,
        description="Deduplicated, sorted selection"
    )
    dropped_symptoms: List[str] = Field(
        default_factory=list,
        description="Ids without a slot in the index table (model strategy)"
    )
    total_candidates: int = Field(
        default=0,
        ge=0,
        description="Number of diseases scored before top-K truncation"
    )

    # Full softmax output, model strategy only
    full_distribution: Optional[List[float]] = Field(default=None, exclude=True)

    @property
    def primary(self) -> Prediction:
        return self.predictions[0]

    @property
    def top_predictions(self) -> List[Prediction]:
        return self.predictions

    @property
    def confidence(self) -> float:
        return self.primary.probability

    def get_rank(self, disease_name: str) -> int:
        """1-based rank, -1 if the disease is not in the top-K"""
        for i, prediction in enumerate(self.predictions):
            if prediction.disease_name == disease_name:
                return i + 1
        return -1

    class Config:
        frozen = True
