"""
MedInfer — Classifier

Loads the network once and turns feature vectors into ranked predictions.

Lifecycle:
    UNLOADED -> LOADING -> READY     load() succeeded
                        -> FAILED    load() raised; no automatic retry

predict() is lock-free: it reads one immutable snapshot of the loaded model
and allocates its own tensors, so any number of threads may call it once the
classifier is READY. Callers arriving while a load is in progress wait on the
ready gate.
"""

import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeoutError
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

import numpy as np
import torch

from medinfer.config import ClassifierConfig, Strategy
from medinfer.encoding import SymptomIndex
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
from medinfer.schemas import Prediction, Ranking
from .assets import ModelAssets, parse_topology
from .label_mapper import LabelMapper, UNKNOWN_DISEASE
from .model import TriageNN
from .weights import ClassifierWeights


logger = logging.getLogger(__name__)


class ClassifierState(str, Enum):
    UNLOADED = "unloaded"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class LoadedModel:
    """Everything predict() needs; replaced as a whole on reload"""
    network: TriageNN
    labels: List[str]
    label_mapper: LabelMapper
    symptom_index: SymptomIndex

    def label_at(self, index: int) -> str:
        if 0 <= index < len(self.labels):
            return self.labels[index]
        return UNKNOWN_DISEASE


def softmax(logits: np.ndarray) -> np.ndarray:
    """Numerically stable softmax: exp(z - max z) / sum"""
    logits = np.asarray(logits, dtype=np.float64)
    shifted = logits - np.max(logits)
    exp = np.exp(shifted)
    return exp / exp.sum()


class Classifier:
    """
    Neural disease classifier.

    Example:
        classifier = Classifier(ClassifierConfig())
        classifier.load(DirectoryAssetLoader("models"), timeout=30)

        ranking = classifier.predict(encoder.encode({"symptom_12", "symptom_40"}))
        print(ranking.primary.disease_name, ranking.confidence)
    """

    def __init__(self, config: Optional[ClassifierConfig] = None):
        self.config = config or ClassifierConfig()

        if self.config.top_k < 1:
            raise ValueError(f"top_k must be at least 1, got {self.config.top_k}")

        self._state = ClassifierState.UNLOADED
        self._model: Optional[LoadedModel] = None
        self._error: Optional[Exception] = None

        self._load_lock = threading.Lock()
        self._ready = threading.Event()

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def state(self) -> ClassifierState:
        return self._state

    @property
    def is_ready(self) -> bool:
        return self._state == ClassifierState.READY

    @property
    def error(self) -> Optional[Exception]:
        """Load failure, if state is FAILED"""
        return self._error

    @property
    def symptom_index(self) -> Optional[SymptomIndex]:
        model = self._model
        return model.symptom_index if model else None

    @property
    def label_mapper(self) -> Optional[LabelMapper]:
        model = self._model
        return model.label_mapper if model else None

    @property
    def labels(self) -> List[str]:
        model = self._model
        return list(model.labels) if model else []

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    def load(self, source: Any, timeout: Optional[float] = None) -> ClassifierState:
        """
        Load weights and label tables. Valid only from UNLOADED.

        Args:
            source: ModelAssets, or a loader with fetch() -> ModelAssets
            timeout: Deadline in seconds for fetching; defaults to config.load_timeout

        Returns:
            ClassifierState.READY

        Raises:
            ClassifierStateError: not UNLOADED (including losing a concurrent load race)
            LoadError: ShapeMismatchError, MissingAssetError, LoadTimeoutError
        """
        with self._load_lock:
            if self._state != ClassifierState.UNLOADED:
                raise ClassifierStateError(f"load() called in state {self._state.value}")

            self._state = ClassifierState.LOADING
            started = time.time()

            try:
                model = self._build(self._fetch(source, timeout))
            except LoadError as e:
                self._fail(e)
                raise
            except Exception as e:
                error = LoadError(f"Load failed: {e}")
                self._fail(error)
                raise error from e

            self._model = model
            self._state = ClassifierState.READY
            self._ready.set()

            logger.info(
                "Classifier ready: layers=%s, labels=%d, params=%s (%.1f ms)",
                model.network.layer_dims, len(model.labels),
                f"{model.network.count_parameters():,}", (time.time() - started) * 1000
            )
            return self._state

    def _fail(self, error: LoadError) -> None:
        self._state = ClassifierState.FAILED
        self._error = error
        self._ready.set()
        logger.error("Classifier load failed: %s", error)

    def reload(self, source: Any, timeout: Optional[float] = None) -> ClassifierState:
        """
        Replace the loaded model. Valid only from READY.

        The new model is built completely before being swapped in; if anything
        fails the current model stays live and a LoadError is raised.
        """
        with self._load_lock:
            if self._state != ClassifierState.READY:
                raise ClassifierStateError(f"reload() called in state {self._state.value}")

            try:
                model = self._build(self._fetch(source, timeout))
            except LoadError as e:
                logger.error("Classifier reload failed, keeping current model: %s", e)
                raise
            except Exception as e:
                error = LoadError(f"Reload failed: {e}")
                logger.error("Classifier reload failed, keeping current model: %s", error)
                raise error from e

            self._model = model

            logger.info("Classifier reloaded: layers=%s", model.network.layer_dims)
            return self._state

    def _fetch(self, source: Any, timeout: Optional[float]) -> ModelAssets:
        if isinstance(source, ModelAssets):
            return source

        if not hasattr(source, "fetch"):
            raise LoadError(f"Unsupported asset source: {type(source).__name__}")

        timeout = timeout if timeout is not None else self.config.load_timeout
        if timeout is None:
            return source.fetch()

        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="medinfer-load")
        try:
            return executor.submit(source.fetch).result(timeout=timeout)
        except FutureTimeoutError as e:
            raise LoadTimeoutError(f"Asset fetch exceeded {timeout:.1f}s deadline ({source!r})") from e
        finally:
            executor.shutdown(wait=False)

    def _build(self, assets: ModelAssets) -> LoadedModel:
        """Validate payloads and build the network"""
        if assets.weights is None:
            raise MissingAssetError(self.config.weights_file)
        if assets.labels is None:
            raise MissingAssetError(self.config.labels_file)
        if assets.mappings is None:
            raise MissingAssetError(self.config.mappings_file)

        layer_dims = self.config.layer_dims
        if assets.topology is not None:
            topology_dims = parse_topology(assets.topology)
            if topology_dims is not None and topology_dims != layer_dims:
                raise ShapeMismatchError(
                    f"Topology {topology_dims} does not match configured layers {layer_dims}"
                )

        weights = ClassifierWeights.from_buffer(assets.weights, layer_dims)

        labels = [str(label) for label in assets.labels]
        if len(labels) != weights.output_dim:
            raise ShapeMismatchError(
                f"Label table has {len(labels)} entries, output layer has {weights.output_dim}"
            )

        names = assets.symptom_names
        if names is not None and len(names) != weights.input_dim:
            raise ShapeMismatchError(
                f"Symptom name table has {len(names)} entries, input layer has {weights.input_dim}"
            )

        symptom_index = SymptomIndex.from_convention(
            weights.input_dim,
            names=[str(n) for n in names] if names is not None else None,
        )

        return LoadedModel(
            network=TriageNN.from_weights(weights),
            labels=labels,
            label_mapper=LabelMapper.from_mappings(assets.mappings),
            symptom_index=symptom_index,
        )

    # -------------------------------------------------------------------------
    # Inference
    # -------------------------------------------------------------------------

    def _snapshot(self) -> LoadedModel:
        if self._state == ClassifierState.LOADING:
            self._ready.wait(timeout=self.config.ready_wait_timeout)

        model = self._model
        if self._state != ClassifierState.READY or model is None:
            raise NotReadyError(f"Classifier is {self._state.value}; call load() first")
        return model

    def predict_distribution(self, vector: np.ndarray) -> np.ndarray:
        """
        Full probability distribution over the M labels.

        Raises:
            NotReadyError, ShapeMismatchError, NumericalInstabilityError
        """
        return self._distribution(self._snapshot(), vector)

    def _distribution(self, model: LoadedModel, vector: np.ndarray) -> np.ndarray:
        vector = np.asarray(vector, dtype=np.float32)
        if vector.ndim != 1 or vector.shape[0] != model.network.input_dim:
            raise ShapeMismatchError(
                f"Feature vector shape {vector.shape}, expected ({model.network.input_dim},)"
            )

        with torch.no_grad():
            logits = model.network(torch.from_numpy(vector.copy()).unsqueeze(0))[0]

        probabilities = softmax(logits.numpy())

        total = float(probabilities.sum())
        if not np.all(np.isfinite(probabilities)) or abs(total - 1.0) > self.config.probability_tolerance:
            raise NumericalInstabilityError(f"Softmax output sums to {total}")

        return probabilities

    def predict(self, vector: np.ndarray, top_k: Optional[int] = None) -> Ranking:
        """
        Rank all labels for one feature vector.

        An all-zero vector is a valid input; empty selections are rejected
        upstream, not here.

        Returns:
            Ranking with the top-K predictions and the full distribution
        """
        if top_k is None:
            top_k = self.config.top_k
        if top_k < 1:
            raise ValidationError(f"top_k must be at least 1, got {top_k}")

        model = self._snapshot()
        probabilities = self._distribution(model, vector)

        # stable: equal probabilities keep label order
        order = np.argsort(-probabilities, kind="stable")[:top_k]

        predictions = []
        for idx in order:
            disease = model.label_at(int(idx))
            labels = model.label_mapper.map(disease)
            predictions.append(Prediction(
                disease_name=disease,
                specialist=labels.specialist,
                triage=labels.triage,
                probability=min(float(probabilities[idx]), 1.0),
            ))

        return Ranking(
            predictions=predictions,
            strategy=Strategy.MODEL,
            total_candidates=len(probabilities),
            full_distribution=probabilities.tolist(),
        )

    def info(self) -> Optional[Dict[str, Any]]:
        """Model summary, None before a successful load"""
        model = self._model
        if model is None:
            return None
        return {
            "state": self._state.value,
            "input_dim": model.network.input_dim,
            "output_dim": model.network.output_dim,
            "layer_dims": model.network.layer_dims,
            "total_params": model.network.count_parameters(),
            "num_diseases": len(model.labels),
            "symptom_index_version": model.symptom_index.version,
        }

    def __repr__(self) -> str:
        return f"Classifier(state={self._state.value}, layers={self.config.layer_dims})"
