"""
MedInfer — Symptoms Routes

Catalog listing with pagination and search.
"""

import math
from typing import Optional
from fastapi import APIRouter, Depends, Query

from medinfer.inference import InferenceEngine
from medinfer.schemas import SymptomCategory

from ..dependencies import get_engine
from ..models import SymptomListResponse, SymptomSearchResponse

router = APIRouter(prefix="/symptoms", tags=["Symptoms"])


@router.get("", response_model=SymptomListResponse)
async def list_symptoms(
    page: int = Query(default=1, ge=1),
    per_page: int = Query(default=50, ge=1, le=500),
    category: Optional[SymptomCategory] = None,
    engine: InferenceEngine = Depends(get_engine)
) -> SymptomListResponse:
    """
    Paged symptom catalog.

    - **page**: 1-based page number
    - **per_page**: Page size (1-500)
    - **category**: Optional category filter
    """
    catalog = engine.catalog

    if category is not None:
        symptoms = catalog.by_category(category)
        start = (page - 1) * per_page
        return SymptomListResponse(
            symptoms=symptoms[start:start + per_page],
            total=len(symptoms),
            page=page,
            per_page=per_page,
            total_pages=math.ceil(len(symptoms) / per_page),
        )

    return SymptomListResponse(
        symptoms=catalog.get_page(page, per_page),
        total=len(catalog),
        page=page,
        per_page=per_page,
        total_pages=catalog.total_pages(per_page),
    )


@router.get("/search", response_model=SymptomSearchResponse)
async def search_symptoms(
    q: str = Query(..., min_length=1, max_length=100),
    limit: int = Query(default=20, ge=1, le=100),
    engine: InferenceEngine = Depends(get_engine)
) -> SymptomSearchResponse:
    """Search symptoms by name or id (case-insensitive substring)"""
    results = engine.catalog.search(q, limit=limit)
    return SymptomSearchResponse(query=q, results=results, total=len(results))
