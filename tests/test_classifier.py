"""
Tests for the Classifier lifecycle and predictions

Run: pytest tests/test_classifier.py -v
"""

import threading
import time

import numpy as np
import pytest

from medinfer.config import ClassifierConfig, Strategy
from medinfer.exceptions import (
    ClassifierStateError,
    LoadError,
    LoadTimeoutError,
    MissingAssetError,
    NotReadyError,
    NumericalInstabilityError,
    ShapeMismatchError,
    ValidationError,
)
from medinfer.neural_network import (
    Classifier,
    ClassifierState,
    ClassifierWeights,
    ModelAssets,
    build_topology,
    softmax,
    UNKNOWN_DISEASE,
)

from conftest import LABELS, LAYER_DIMS, MAPPINGS, SYMPTOM_NAMES


def one_hot(*slots, size=6):
    vector = np.zeros(size, dtype=np.float32)
    vector[list(slots)] = 1.0
    return vector


# ============================================================
# Softmax
# ============================================================

def test_softmax_stable():
    probabilities = softmax(np.array([1000.0, 1000.0, -1000.0]))

    assert np.all(np.isfinite(probabilities))
    assert probabilities.sum() == pytest.approx(1.0)
    assert probabilities[0] == pytest.approx(0.5)


# ============================================================
# Lifecycle
# ============================================================

def test_load_transitions(classifier_config, tiny_assets):
    classifier = Classifier(classifier_config)
    assert classifier.state == ClassifierState.UNLOADED
    assert not classifier.is_ready
    assert classifier.info() is None

    assert classifier.load(tiny_assets) == ClassifierState.READY
    assert classifier.is_ready
    assert classifier.labels == LABELS
    assert classifier.symptom_index.size == 6
    assert classifier.symptom_index.name_of("symptom_1") == "Runny Nose"

    info = classifier.info()
    assert info["input_dim"] == 6
    assert info["output_dim"] == 3
    assert info["num_diseases"] == 3
    assert info["layer_dims"] == [6, 4, 4, 3]

    print(f"✓ Classifier: {classifier}")


def test_load_twice_rejected(loaded_classifier, tiny_assets):
    with pytest.raises(ClassifierStateError):
        loaded_classifier.load(tiny_assets)

    assert loaded_classifier.is_ready


def test_predict_before_load(classifier_config):
    classifier = Classifier(classifier_config)

    with pytest.raises(NotReadyError):
        classifier.predict(one_hot(0))


def test_failed_load_is_final(classifier_config, tiny_assets):
    classifier = Classifier(classifier_config)
    broken = ModelAssets(weights=tiny_assets.weights, labels=LABELS[:2], mappings=MAPPINGS)

    with pytest.raises(ShapeMismatchError):
        classifier.load(broken)

    assert classifier.state == ClassifierState.FAILED
    assert isinstance(classifier.error, ShapeMismatchError)

    with pytest.raises(NotReadyError):
        classifier.predict(one_hot(0))

    # no retry from FAILED
    with pytest.raises(ClassifierStateError):
        classifier.load(tiny_assets)


def test_missing_assets(classifier_config, tiny_assets):
    with pytest.raises(MissingAssetError):
        Classifier(classifier_config).load(ModelAssets(labels=LABELS, mappings=MAPPINGS))

    with pytest.raises(MissingAssetError):
        Classifier(classifier_config).load(ModelAssets(weights=tiny_assets.weights, labels=LABELS))

    with pytest.raises(MissingAssetError):
        Classifier(classifier_config).load(ModelAssets(
            weights=tiny_assets.weights, labels=LABELS, mappings={"disease_to_triage": {}},
        ))


def test_shape_validation(classifier_config, tiny_assets):
    # weights blob for other dims
    with pytest.raises(ShapeMismatchError):
        Classifier(ClassifierConfig(input_dim=7, hidden_dims=[4, 4], output_dim=3)).load(tiny_assets)

    # topology disagrees with the configured layers
    wrong_topology = ModelAssets(
        weights=tiny_assets.weights,
        labels=LABELS,
        mappings=MAPPINGS,
        topology=build_topology([6, 5, 4, 3]),
    )
    with pytest.raises(ShapeMismatchError):
        Classifier(classifier_config).load(wrong_topology)

    # symptom names of the wrong length
    wrong_names = ModelAssets(
        weights=tiny_assets.weights,
        labels=LABELS,
        mappings=MAPPINGS,
        symptom_names=SYMPTOM_NAMES[:5],
    )
    with pytest.raises(ShapeMismatchError):
        Classifier(classifier_config).load(wrong_names)


def test_unsupported_source(classifier_config):
    classifier = Classifier(classifier_config)

    with pytest.raises(LoadError):
        classifier.load("not a loader")

    assert classifier.state == ClassifierState.FAILED


class SlowLoader:
    def __init__(self, assets, delay):
        self.assets = assets
        self.delay = delay

    def fetch(self):
        time.sleep(self.delay)
        return self.assets


class ExplodingLoader:
    def fetch(self):
        raise RuntimeError("disk on fire")


def test_load_timeout(classifier_config, tiny_assets):
    classifier = Classifier(classifier_config)

    with pytest.raises(LoadTimeoutError):
        classifier.load(SlowLoader(tiny_assets, delay=1.0), timeout=0.05)

    assert classifier.state == ClassifierState.FAILED


def test_loader_error_wrapped(classifier_config):
    classifier = Classifier(classifier_config)

    with pytest.raises(LoadError) as exc_info:
        classifier.load(ExplodingLoader())

    assert isinstance(exc_info.value.__cause__, RuntimeError)


def test_predict_waits_for_load(classifier_config, tiny_assets):
    """predict() during LOADING blocks until the load finishes"""
    classifier = Classifier(classifier_config)

    loader = threading.Thread(
        target=classifier.load,
        args=(SlowLoader(tiny_assets, delay=0.2),),
        kwargs={"timeout": 5.0},
    )
    loader.start()
    while classifier.state == ClassifierState.UNLOADED:
        time.sleep(0.005)

    ranking = classifier.predict(one_hot(0))
    loader.join()

    assert ranking.primary.disease_name == "Common Cold"


def test_reload(loaded_classifier, tiny_weights):
    swapped = ModelAssets.from_weights(tiny_weights, ["A", "B", "C"], MAPPINGS)

    assert loaded_classifier.reload(swapped) == ClassifierState.READY
    assert loaded_classifier.labels == ["A", "B", "C"]


def test_reload_failure_keeps_model(loaded_classifier, tiny_assets):
    broken = ModelAssets(weights=tiny_assets.weights[:-4], labels=LABELS, mappings=MAPPINGS)

    with pytest.raises(ShapeMismatchError):
        loaded_classifier.reload(broken)

    assert loaded_classifier.is_ready
    assert loaded_classifier.predict(one_hot(0)).primary.disease_name == "Common Cold"


def test_reload_requires_ready(classifier_config, tiny_assets):
    with pytest.raises(ClassifierStateError):
        Classifier(classifier_config).reload(tiny_assets)


def test_reload_malformed_payload_wrapped(loaded_classifier, tiny_weights):
    """Mappings that are not a dict surface as LoadError, model stays live"""
    malformed = ModelAssets.from_weights(tiny_weights, LABELS, ["not", "a", "dict"])

    with pytest.raises(LoadError) as exc_info:
        loaded_classifier.reload(malformed)

    assert exc_info.value.__cause__ is not None
    assert loaded_classifier.state == ClassifierState.READY
    assert loaded_classifier.predict(one_hot(0)).primary.disease_name == "Common Cold"

    print(f"✓ reload error: {exc_info.value}")


# ============================================================
# Predictions
# ============================================================

def test_predict_ranking(loaded_classifier):
    ranking = loaded_classifier.predict(one_hot(0))

    assert ranking.strategy == Strategy.MODEL
    assert ranking.total_candidates == 3
    assert [p.disease_name for p in ranking.predictions] == ["Common Cold", "Influenza", "Mystery Fever"]

    primary = ranking.primary
    assert primary.specialist == "General Practitioner"
    assert primary.triage == "LOW"
    expected = np.exp(2.0) / (np.exp(2.0) + 2.0)
    assert primary.probability == pytest.approx(expected, rel=1e-5)
    assert ranking.confidence == primary.probability

    print(f"✓ {primary.disease_name}: {primary.probability:.3f}")


def test_probabilities_sum_to_one(loaded_classifier):
    rng = np.random.default_rng(7)
    for _ in range(20):
        vector = rng.integers(0, 2, size=6).astype(np.float32)
        distribution = loaded_classifier.predict_distribution(vector)

        assert distribution.shape == (3,)
        assert abs(distribution.sum() - 1.0) <= 1e-5
        assert np.all(distribution >= 0.0)


def test_zero_vector_is_valid(loaded_classifier):
    """All logits equal: uniform distribution, label order kept"""
    ranking = loaded_classifier.predict(np.zeros(6, dtype=np.float32))

    assert [p.disease_name for p in ranking.predictions] == LABELS
    for p in ranking.predictions:
        assert p.probability == pytest.approx(1 / 3, rel=1e-5)


def test_ties_keep_label_order(loaded_classifier):
    ranking = loaded_classifier.predict(one_hot(0, 2))

    assert [p.disease_name for p in ranking.predictions][:2] == ["Common Cold", "Influenza"]
    assert ranking.predictions[0].probability == pytest.approx(ranking.predictions[1].probability)


def test_unmapped_label_degrades(loaded_classifier):
    ranking = loaded_classifier.predict(one_hot(4))

    assert ranking.primary.disease_name == "Mystery Fever"
    assert ranking.primary.specialist == "Unknown Specialist"
    assert ranking.primary.triage == "Unknown Triage"


def test_top_k(loaded_classifier):
    ranking = loaded_classifier.predict(one_hot(2), top_k=1)

    assert len(ranking.predictions) == 1
    assert ranking.primary.disease_name == "Influenza"
    assert len(ranking.full_distribution) == 3


def test_top_k_must_be_positive(loaded_classifier):
    with pytest.raises(ValidationError):
        loaded_classifier.predict(one_hot(0), top_k=0)

    config = ClassifierConfig(input_dim=6, hidden_dims=[4, 4], output_dim=3, top_k=0)
    with pytest.raises(ValueError):
        Classifier(config)


def test_non_finite_output_rejected(classifier_config):
    """Overflowing weights give inf/nan logits instead of a distribution"""
    huge = ClassifierWeights.from_arrays([
        np.full((6, 4), 1e30, dtype=np.float32), np.zeros(4, dtype=np.float32),
        np.full((4, 4), 1e30, dtype=np.float32), np.zeros(4, dtype=np.float32),
        np.full((4, 3), 1e30, dtype=np.float32), np.zeros(3, dtype=np.float32),
    ])
    classifier = Classifier(classifier_config)
    classifier.load(ModelAssets.from_weights(huge, LABELS, MAPPINGS))

    with pytest.raises(NumericalInstabilityError):
        classifier.predict(np.ones(LAYER_DIMS[0], dtype=np.float32))
    with pytest.raises(NumericalInstabilityError):
        classifier.predict_distribution(np.ones(LAYER_DIMS[0], dtype=np.float32))


def test_predict_shape_mismatch(loaded_classifier):
    with pytest.raises(ShapeMismatchError):
        loaded_classifier.predict(np.zeros(7, dtype=np.float32))
    with pytest.raises(ShapeMismatchError):
        loaded_classifier.predict(np.zeros((1, 6), dtype=np.float32))


def test_predict_pure(loaded_classifier):
    vector = one_hot(1, 3)

    first = loaded_classifier.predict_distribution(vector)
    second = loaded_classifier.predict_distribution(vector.copy())

    assert np.array_equal(first, second)
    assert vector.tolist() == one_hot(1, 3).tolist()


def test_concurrent_predictions(loaded_classifier):
    results = []

    def worker(slot):
        for _ in range(20):
            results.append((slot, loaded_classifier.predict(one_hot(slot)).primary.disease_name))

    threads = [threading.Thread(target=worker, args=(slot,)) for slot in (0, 2, 4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    expected = {0: "Common Cold", 2: "Influenza", 4: "Mystery Fever"}
    assert len(results) == 60
    assert all(name == expected[slot] for slot, name in results)


def test_label_out_of_range_fallback(loaded_classifier):
    model = loaded_classifier._snapshot()

    assert model.label_at(0) == "Common Cold"
    assert model.label_at(3) == UNKNOWN_DISEASE
    assert model.label_at(-1) == UNKNOWN_DISEASE
