"""
MedInfer — Prediction Route

POST /predict: the remote prediction API served by the local model.
"""

from fastapi import APIRouter, Depends

from medinfer.config import Strategy
from medinfer.exceptions import ValidationError
from medinfer.schemas import PredictRequest, PredictResponse

from ..dependencies import EngineManager, get_engine_manager

router = APIRouter(tags=["Prediction"])


@router.post("/predict", response_model=PredictResponse)
async def predict(
    request: PredictRequest,
    manager: EngineManager = Depends(get_engine_manager)
) -> PredictResponse:
    """
    Predict the most likely disease for symptom_<n> ids.

    Example:
    ```json
    {"symptoms": ["symptom_1", "symptom_17", "symptom_42"]}
    ```
    """
    engine = manager.engine

    errors = []
    for symptom_id in request.symptoms:
        try:
            engine.encoder.index.validate_convention(symptom_id)
        except ValidationError as e:
            errors.append(str(e))
    if errors:
        raise ValidationError("; ".join(errors), errors)

    ranking = engine.infer(request.symptoms, Strategy.MODEL)

    return PredictResponse(
        prediction=ranking.primary.disease_name,
        confidence=ranking.confidence,
        selected_symptoms_count=len(request.symptoms),
        symptoms_processed=len(ranking.selected_symptoms) - len(ranking.dropped_symptoms),
        status="success",
    )
