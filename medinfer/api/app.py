"""
MedInfer — FastAPI Application

Run:
    uvicorn medinfer.api.app:app --host 0.0.0.0 --port 5000

    or:

    python scripts/run_api.py
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from medinfer import __version__
from medinfer.exceptions import (
    MedInferError,
    ModelUnavailableError,
    NoMatchingDiseaseError,
    NotReadyError,
    RemotePredictionError,
    ValidationError,
)
from medinfer.logging_config import setup_logging

from .config import APIConfig
from .dependencies import EngineManager
from .routes import (
    health_router,
    predict_router,
    infer_router,
    symptoms_router,
    diseases_router,
)


logger = logging.getLogger(__name__)


# Checked in order; first match wins
ERROR_STATUS_CODES = [
    (ValidationError, 400),
    (NoMatchingDiseaseError, 422),
    (ModelUnavailableError, 503),
    (NotReadyError, 503),
    (RemotePredictionError, 502),
]


def status_code_for(exc: MedInferError) -> int:
    for error_type, status_code in ERROR_STATUS_CODES:
        if isinstance(exc, error_type):
            return status_code
    return 500


def error_body(message: str, error_type: str, errors=None) -> dict:
    return {
        "status": "error",
        "error": message,
        "type": error_type,
        "errors": errors or [],
    }


def create_app(
    config: Optional[APIConfig] = None,
    engine_manager: Optional[EngineManager] = None
) -> FastAPI:
    """
    Build the application.

    Args:
        config: Server settings; default from environment
        engine_manager: Prebuilt engine (tests); default from config
    """
    config = config or APIConfig.from_env()
    manager = engine_manager or EngineManager.from_api_config(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Load the model at startup"""
        setup_logging(manager.engine.config.logging)
        logger.info("MedInfer API %s starting", __version__)

        if config.load_on_startup:
            if manager.load():
                logger.info("API ready: %s", manager.engine)
            else:
                logger.warning("API starting in limited mode: %s", manager.error)

        logger.info("Swagger UI: http://%s:%s/docs", config.host, config.port)

        yield

        logger.info("MedInfer API stopping")

    app = FastAPI(
        title=config.api_title,
        description=config.api_description,
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    app.state.engine_manager = manager
    app.state.config = config

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=config.cors_allow_credentials,
        allow_methods=config.cors_allow_methods,
        allow_headers=config.cors_allow_headers,
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()

        response = await call_next(request)

        process_time = time.time() - start_time
        logger.info(
            "%s %s -> %d (%.1fms)",
            request.method, request.url.path, response.status_code, process_time * 1000
        )
        return response

    @app.exception_handler(MedInferError)
    async def medinfer_exception_handler(request: Request, exc: MedInferError):
        status_code = status_code_for(exc)
        if status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=status_code,
            content=error_body(str(exc), type(exc).__name__, getattr(exc, "errors", None)),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = [
            f"{'.'.join(str(part) for part in e.get('loc', ()))}: {e.get('msg', '')}"
            for e in exc.errors()
        ]
        return JSONResponse(
            status_code=400,
            content=error_body("Invalid request", "ValidationError", errors),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content=error_body(
                str(exc) if config.debug else "Internal server error",
                "InternalError",
            ),
        )

    app.include_router(health_router)
    app.include_router(predict_router)
    app.include_router(infer_router, prefix=config.api_prefix)
    app.include_router(symptoms_router, prefix=config.api_prefix)
    app.include_router(diseases_router, prefix=config.api_prefix)

    return app


app = create_app()
