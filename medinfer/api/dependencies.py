"""
MedInfer — API Dependencies

The engine is built once per application and kept on app.state; routes get it
through Depends(get_engine_manager).
"""

import logging
from typing import Any, Optional

from fastapi import Request

from medinfer.config import get_default_config, load_config
from medinfer.exceptions import LoadError
from medinfer.inference import InferenceEngine
from medinfer.neural_network import ClassifierState, HTTPAssetLoader

from .config import APIConfig


logger = logging.getLogger(__name__)


class EngineManager:
    """
    Owns the InferenceEngine and its model loading.

    A failed load leaves the API in limited mode: the rule strategy keeps
    working, the model strategy answers 503.
    """

    def __init__(
        self,
        engine: InferenceEngine,
        source: Any = None,
        load_timeout: Optional[float] = None
    ):
        self.engine = engine
        self.source = source
        self.load_timeout = load_timeout
        self.error: Optional[str] = None

    @classmethod
    def from_api_config(cls, api_config: APIConfig) -> "EngineManager":
        if api_config.config_path:
            engine_config = load_config(api_config.config_path)
        else:
            engine_config = get_default_config()

        if api_config.assets_dir:
            engine_config.classifier.assets_dir = api_config.assets_dir

        source = None
        if api_config.assets_url:
            source = HTTPAssetLoader(api_config.assets_url, engine_config.classifier)

        return cls(
            InferenceEngine.from_config(engine_config),
            source=source,
            load_timeout=api_config.load_timeout,
        )

    def load(self) -> bool:
        """Load the classifier once; True if the model strategy is available"""
        classifier = self.engine.classifier
        if classifier.state != ClassifierState.UNLOADED:
            return classifier.is_ready

        try:
            self.engine.load_model(self.source, timeout=self.load_timeout)
        except LoadError as e:
            self.error = str(e)
            logger.warning("Model not loaded, running in limited mode: %s", e)
            return False

        return True

    @property
    def model_loaded(self) -> bool:
        return self.engine.classifier.is_ready

    @property
    def encoder_loaded(self) -> bool:
        return self.engine.encoder is not None


def get_engine_manager(request: Request) -> EngineManager:
    return request.app.state.engine_manager


def get_engine(request: Request) -> InferenceEngine:
    return request.app.state.engine_manager.engine
