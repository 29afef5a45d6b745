"""
MedInfer — Disease Routes

Read-only view of the knowledge base.
"""

from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query

from medinfer.inference import InferenceEngine

from ..dependencies import get_engine
from ..models import DiseaseInfo, DiseaseListResponse

router = APIRouter(prefix="/diseases", tags=["Database"])


@router.get("", response_model=DiseaseListResponse)
async def list_diseases(
    limit: int = Query(default=100, ge=1, le=1000),
    offset: int = Query(default=0, ge=0),
    symptom: Optional[str] = None,
    engine: InferenceEngine = Depends(get_engine)
) -> DiseaseListResponse:
    """List diseases, optionally only those involving one symptom"""
    kb = engine.knowledge_base
    diseases = kb.diseases_with_symptom(symptom) if symptom else list(kb.diseases)

    return DiseaseListResponse(
        diseases=[DiseaseInfo.from_disease(d) for d in diseases[offset:offset + limit]],
        total=len(diseases),
        limit=limit,
        offset=offset,
    )


@router.get("/{disease_id}", response_model=DiseaseInfo)
async def get_disease(
    disease_id: str,
    engine: InferenceEngine = Depends(get_engine)
) -> DiseaseInfo:
    disease = engine.knowledge_base.get(disease_id)
    if disease is None:
        raise HTTPException(status_code=404, detail=f"Disease '{disease_id}' not found")
    return DiseaseInfo.from_disease(disease)
