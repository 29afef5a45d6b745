"""
MedInfer — REST API module

FastAPI service over the inference engine. Also serves the remote prediction
API that medinfer.remote.PredictionClient talks to.

Components:
- app.py: application factory and default app
- routes/: API endpoints
- models.py: Pydantic models
- dependencies.py: engine lifecycle
- config.py: server settings

Run:
    uvicorn medinfer.api.app:app --port 5000

Endpoints:
    GET  /                      - Root info
    GET  /health                - Health check
    GET  /symptoms-info         - Symptom vector format
    POST /predict               - Remote prediction API (model strategy)

    POST /api/infer             - Ranked diagnosis, any strategy
    GET  /api/symptoms          - Paged symptom catalog
    GET  /api/symptoms/search   - Symptom search
    GET  /api/diseases          - Knowledge base
    GET  /api/diseases/{id}     - One disease
"""

from .config import APIConfig
from .dependencies import EngineManager, get_engine, get_engine_manager
from .app import create_app


__all__ = [
    "APIConfig",
    "EngineManager",
    "get_engine",
    "get_engine_manager",
    "create_app",
]
