"""
MedInfer — Health Routes

Health check and service information.
"""

from fastapi import APIRouter, Depends

from medinfer import __version__
from medinfer.schemas import SymptomsInfoResponse

from ..dependencies import EngineManager, get_engine_manager
from ..models import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    manager: EngineManager = Depends(get_engine_manager)
) -> HealthResponse:
    """
    Server status.

    "healthy" once the model is loaded, "degraded" while only the rule
    strategy is available.
    """
    engine = manager.engine
    return HealthResponse(
        status="healthy" if manager.model_loaded else "degraded",
        model_loaded=manager.model_loaded,
        encoder_loaded=manager.encoder_loaded,
        version=__version__,
        classifier_state=engine.classifier.state.value,
        stats=engine.stats,
        error=manager.error,
    )


@router.get("/symptoms-info", response_model=SymptomsInfoResponse)
async def symptoms_info(
    manager: EngineManager = Depends(get_engine_manager)
) -> SymptomsInfoResponse:
    """Shape of the symptom vector expected by /predict"""
    index = manager.engine.encoder.index
    return SymptomsInfoResponse(
        total_symptoms=index.size,
        format=f"{index.prefix}1 to {index.prefix}{index.size}",
        example=index.symptom_ids[:3],
        index_version=index.version,
    )


@router.get("/")
async def root():
    """API root"""
    return {
        "name": "MedInfer API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }
