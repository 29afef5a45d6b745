"""
Shared fixtures: a tiny hand-wired network (6 symptoms -> 3 diseases) whose
output is predictable, plus engines built around it.

    symptom_1, symptom_2 -> Common Cold
    symptom_3, symptom_4 -> Influenza
    symptom_5            -> Mystery Fever   (no specialist/triage mapping)
    symptom_6            -> nothing (all logits stay 0)
"""

import numpy as np
import pytest

from medinfer.config import ClassifierConfig, MedInferConfig
from medinfer.inference import InferenceEngine
from medinfer.neural_network import ClassifierWeights, Classifier, ModelAssets


LAYER_DIMS = [6, 4, 4, 3]

LABELS = ["Common Cold", "Influenza", "Mystery Fever"]

MAPPINGS = {
    "disease_to_specialist": {
        "Common Cold": "General Practitioner",
        "Influenza": "Internal Medicine",
    },
    "disease_to_triage": {
        "Common Cold": "LOW",
        "Influenza": "MEDIUM",
    },
}

SYMPTOM_NAMES = ["Runny Nose", "Sneezing", "Fever", "Body Aches", "Chills", "Fatigue"]


def make_tiny_weights() -> ClassifierWeights:
    k1 = np.zeros((6, 4), dtype=np.float32)
    k1[0, 0] = k1[1, 0] = 1.0
    k1[2, 1] = k1[3, 1] = 1.0
    k1[4, 2] = 1.0
    k1[5, 3] = 1.0

    k2 = np.eye(4, dtype=np.float32)

    k3 = np.zeros((4, 3), dtype=np.float32)
    k3[0, 0] = k3[1, 1] = k3[2, 2] = 2.0

    return ClassifierWeights.from_arrays([
        k1, np.zeros(4, dtype=np.float32),
        k2, np.zeros(4, dtype=np.float32),
        k3, np.zeros(3, dtype=np.float32),
    ])


def make_tiny_config() -> MedInferConfig:
    config = MedInferConfig.for_dimensions(n_symptoms=6, n_diseases=3, hidden_dims=[4, 4])
    config.classifier.load_timeout = 5.0
    config.classifier.ready_wait_timeout = 5.0
    return config


@pytest.fixture
def tiny_weights() -> ClassifierWeights:
    return make_tiny_weights()


@pytest.fixture
def tiny_assets(tiny_weights) -> ModelAssets:
    return ModelAssets.from_weights(tiny_weights, LABELS, MAPPINGS, SYMPTOM_NAMES)


@pytest.fixture
def tiny_config() -> MedInferConfig:
    return make_tiny_config()


@pytest.fixture
def classifier_config(tiny_config) -> ClassifierConfig:
    return tiny_config.classifier


@pytest.fixture
def loaded_classifier(classifier_config, tiny_assets) -> Classifier:
    classifier = Classifier(classifier_config)
    classifier.load(tiny_assets)
    return classifier


@pytest.fixture
def engine(tiny_config) -> InferenceEngine:
    """Engine with the classifier still UNLOADED (rule strategy only)"""
    return InferenceEngine.from_config(tiny_config)


@pytest.fixture
def loaded_engine(engine, tiny_assets) -> InferenceEngine:
    engine.load_model(tiny_assets)
    return engine
