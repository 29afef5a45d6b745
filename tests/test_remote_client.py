"""
Tests for the remote prediction client

Run: pytest tests/test_remote_client.py -v
"""

import numpy as np
import pytest
import requests

from medinfer.config import RemoteConfig
from medinfer.exceptions import (
    EmptySelectionError,
    RemotePredictionError,
    ValidationError,
)
from medinfer.remote import PredictionClient


class FakeResponse:
    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self.ok = 200 <= status_code < 300
        self._payload = payload

    def json(self):
        if self._payload is None:
            raise ValueError("no json body")
        return self._payload


class FakeSession:
    """Records requests and replays canned responses"""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def request(self, method, url, timeout=None, **kwargs):
        self.calls.append((method, url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response


def make_client(session, n_symptoms=377):
    config = RemoteConfig(base_url="http://predict.local:5000/", timeout=2.0)
    return PredictionClient(config, n_symptoms=n_symptoms, session=session)


def test_validate_symptoms():
    client = make_client(FakeSession())

    assert client.validate_symptoms(["symptom_1", "symptom_377"]) == (True, [])

    valid, errors = client.validate_symptoms(["symptom_1", "fever", "symptom_400", 5])
    assert not valid
    assert len(errors) == 3
    assert "fever" in errors[0]
    assert "symptom_400" in errors[1]

    assert client.validate_symptoms([]) == (False, ["At least one symptom must be selected"])
    assert client.validate_symptoms("symptom_1") == (False, ["Symptoms must be an array"])


def test_predict_disease():
    session = FakeSession(FakeResponse(200, {
        "prediction": "Influenza",
        "confidence": 0.82,
        "selected_symptoms_count": 2,
        "symptoms_processed": 2,
        "status": "success",
    }))
    client = make_client(session)

    result = client.predict_disease(["symptom_1", "symptom_17"])

    assert result.prediction == "Influenza"
    assert result.confidence == pytest.approx(0.82)
    assert result.status == "success"

    method, url, kwargs = session.calls[0]
    assert method == "POST"
    assert url == "http://predict.local:5000/predict"
    assert kwargs["json"] == {"symptoms": ["symptom_1", "symptom_17"]}

    print(f"✓ Remote prediction: {result.prediction} ({result.confidence:.0%})")


def test_invalid_input_not_sent():
    session = FakeSession(FakeResponse(200, {}))
    client = make_client(session)

    with pytest.raises(EmptySelectionError):
        client.predict_disease([])

    with pytest.raises(ValidationError) as exc_info:
        client.predict_disease(["symptom_0", "symptom_2"])

    assert len(exc_info.value.errors) == 1
    assert session.calls == []


def test_http_error_raises():
    session = FakeSession(FakeResponse(500, {"error": "Model not loaded", "status": "error"}))

    with pytest.raises(RemotePredictionError) as exc_info:
        make_client(session).predict_disease(["symptom_1"])

    assert exc_info.value.status_code == 500
    assert "Model not loaded" in str(exc_info.value)


def test_error_status_raises():
    session = FakeSession(FakeResponse(200, {"status": "error", "error": "Encoder failed"}))

    with pytest.raises(RemotePredictionError, match="Encoder failed"):
        make_client(session).predict_disease(["symptom_1"])


def test_transport_error_raises():
    session = FakeSession(error=requests.ConnectionError("refused"))

    with pytest.raises(RemotePredictionError):
        make_client(session).predict_disease(["symptom_1"])


def test_malformed_response_raises():
    session = FakeSession(FakeResponse(200, {"prediction": "X", "confidence": 7.0}))

    with pytest.raises(RemotePredictionError):
        make_client(session).predict_disease(["symptom_1"])


def test_health_check():
    session = FakeSession(FakeResponse(200, {"status": "healthy", "model_loaded": True, "encoder_loaded": True}))

    health = make_client(session).health_check()

    assert health.model_loaded
    assert session.calls[0][:2] == ("GET", "http://predict.local:5000/health")


def test_symptoms_info():
    session = FakeSession(FakeResponse(200, {"total_symptoms": 377, "format": "symptom_1 to symptom_377"}))

    info = make_client(session).get_symptoms_info()

    assert info["total_symptoms"] == 377


def test_create_symptoms_array():
    client = make_client(FakeSession(), n_symptoms=10)

    vector = client.create_symptoms_array(["symptom_1", "symptom_10", "symptom_11", "fever"])

    assert vector.shape == (10,)
    assert vector.dtype == np.float32
    assert vector[0] == vector[9] == 1.0
    assert vector.sum() == 2.0
