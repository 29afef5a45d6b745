"""
MedInfer — Remote prediction client

Thin adapter over the remote prediction API (see schemas/remote.py).
Requests are validated before anything is sent; any non-2xx response or a
body with status "error" is raised as RemotePredictionError.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import requests

from medinfer.config import RemoteConfig
from medinfer.encoding import SymptomIndex, VectorEncoder
from medinfer.exceptions import (
    EmptySelectionError,
    RemotePredictionError,
    ValidationError,
)
from medinfer.schemas import HealthCheckResponse, PredictResponse


logger = logging.getLogger(__name__)


class PredictionClient:
    """
    Client for the remote prediction service.

    Example:
        client = PredictionClient(RemoteConfig(base_url="http://localhost:5000"))

        client.health_check().model_loaded          # True
        result = client.predict_disease(["symptom_1", "symptom_17"])
        print(result.prediction, result.confidence)
    """

    def __init__(
        self,
        config: Optional[RemoteConfig] = None,
        n_symptoms: int = 377,
        session: Optional[requests.Session] = None
    ):
        self.config = config or RemoteConfig()
        self.base_url = self.config.base_url.rstrip("/")
        self.index = SymptomIndex.from_convention(n_symptoms)
        self.session = session or requests.Session()

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def validate_symptoms(self, selected_symptoms: Any) -> Tuple[bool, List[str]]:
        """
        Check that the request is sendable.

        Returns:
            (valid, errors)
        """
        if not isinstance(selected_symptoms, (list, tuple)):
            return False, ["Symptoms must be an array"]

        if len(selected_symptoms) == 0:
            return False, ["At least one symptom must be selected"]

        errors = []
        for symptom_id in selected_symptoms:
            try:
                self.index.validate_convention(symptom_id)
            except ValidationError as e:
                errors.append(str(e))

        return len(errors) == 0, errors

    def create_symptoms_array(self, selected_symptoms: List[str]) -> np.ndarray:
        """Binary vector the server will build, for debugging"""
        return VectorEncoder(self.index).encode(
            s for s in selected_symptoms if isinstance(s, str)
        )

    # -------------------------------------------------------------------------
    # Requests
    # -------------------------------------------------------------------------

    def _request(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, timeout=self.config.timeout, **kwargs)
        except requests.RequestException as e:
            logger.error("Prediction service unreachable: %s", e)
            raise RemotePredictionError(f"Unable to connect to prediction service: {e}") from e

        try:
            body = response.json()
        except ValueError:
            body = {}

        if not response.ok:
            message = body.get("error") if isinstance(body, dict) else None
            raise RemotePredictionError(
                message or f"{method} {path} failed: {response.status_code}",
                status_code=response.status_code,
            )

        if not isinstance(body, dict):
            raise RemotePredictionError(f"{method} {path}: unexpected response body")

        return body

    def health_check(self) -> HealthCheckResponse:
        body = self._request("GET", "/health")
        try:
            return HealthCheckResponse(**body)
        except Exception as e:
            raise RemotePredictionError(f"Malformed health response: {e}") from e

    def get_symptoms_info(self) -> Dict[str, Any]:
        return self._request("GET", "/symptoms-info")

    def predict_disease(self, selected_symptoms: List[str]) -> PredictResponse:
        """
        Send one prediction request.

        Raises:
            EmptySelectionError, ValidationError: request rejected locally, nothing sent
            RemotePredictionError: transport failure, non-2xx, or status "error"
        """
        if isinstance(selected_symptoms, (list, tuple)) and len(selected_symptoms) == 0:
            raise EmptySelectionError()

        valid, errors = self.validate_symptoms(selected_symptoms)
        if not valid:
            raise ValidationError("; ".join(errors), errors)

        body = self._request("POST", "/predict", json={"symptoms": list(selected_symptoms)})

        if body.get("status") == "error":
            raise RemotePredictionError(body.get("error") or "Prediction failed")

        try:
            result = PredictResponse(**body)
        except Exception as e:
            raise RemotePredictionError(f"Malformed prediction response: {e}") from e

        logger.info(
            "Remote prediction: %s (%.3f) for %d symptom(s)",
            result.prediction, result.confidence, len(selected_symptoms)
        )
        return result

    def __repr__(self) -> str:
        return f"PredictionClient({self.base_url!r})"


__all__ = ["PredictionClient"]
