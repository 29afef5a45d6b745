"""
MedInfer — Inference Routes

Ranked diagnosis with any strategy.
"""

import time
from fastapi import APIRouter, Depends

from medinfer.inference import InferenceEngine, generate_health_summary

from ..dependencies import get_engine
from ..models import InferRequest, InferResponse, ErrorResponse

router = APIRouter(prefix="/infer", tags=["Inference"])


@router.post(
    "",
    response_model=InferResponse,
    responses={400: {"model": ErrorResponse}, 422: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
)
async def infer(
    request: InferRequest,
    engine: InferenceEngine = Depends(get_engine)
) -> InferResponse:
    """
    Rank candidate diseases.

    - **symptoms**: catalog ids (rule) or symptom_<n> ids (model)
    - **strategy**: "model", "rule" or "remote"
    """
    start_time = time.time()

    ranking = engine.infer(request.symptoms, request.strategy)

    return InferResponse.from_ranking(
        ranking,
        summary=generate_health_summary(ranking),
        processing_time_ms=(time.time() - start_time) * 1000,
    )
