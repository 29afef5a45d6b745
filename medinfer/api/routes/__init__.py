"""
MedInfer — API Routes

Export of all routers.
"""

from .health import router as health_router
from .predict import router as predict_router
from .infer import router as infer_router
from .symptoms import router as symptoms_router
from .diseases import router as diseases_router

__all__ = [
    "health_router",
    "predict_router",
    "infer_router",
    "symptoms_router",
    "diseases_router",
]
