"""
MedInfer — Inference engine

InferenceEngine ties the components together:
1. SymptomSelection — validation and deduplication
2. RuleScorer — weighted overlap over the knowledge base (RULE)
3. VectorEncoder + Classifier — neural ranking (MODEL)
4. PredictionClient — remote prediction API (REMOTE)

Every call either returns a complete Ranking or raises one MedInferError.
There is no automatic fallback between strategies.
"""

import logging
import threading
from collections import Counter
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Union

from medinfer.config import MedInferConfig, Strategy, get_default_config
from medinfer.encoding import SymptomIndex, VectorEncoder
from medinfer.exceptions import (
    ModelUnavailableError,
    NoMatchingDiseaseError,
    NotReadyError,
    ValidationError,
)
from medinfer.knowledge import KnowledgeBase, SymptomCatalog
from medinfer.neural_network import (
    Classifier,
    ClassifierState,
    DirectoryAssetLoader,
    UNKNOWN_DISEASE,
    UNKNOWN_SPECIALIST,
    UNKNOWN_TRIAGE,
)
from medinfer.remote import PredictionClient
from medinfer.rule_scorer import RuleScorer
from medinfer.schemas import Prediction, Ranking

from .selection import SymptomSelection


logger = logging.getLogger(__name__)


class InferenceEngine:
    """
    Symptom-to-diagnosis inference.

    Example:
        engine = InferenceEngine.from_config()
        engine.load_model()                          # models/ directory

        ranking = engine.infer(["runny_nose", "cough"], Strategy.RULE)
        print(ranking.primary.disease_name)          # Common Cold

        ranking = engine.infer(["symptom_12", "symptom_40"])
        for p in ranking.top_predictions:
            print(f"  {p.disease_name}: {p.probability:.1%} ({p.triage})")
    """

    def __init__(
        self,
        catalog: SymptomCatalog,
        knowledge_base: KnowledgeBase,
        rule_scorer: RuleScorer,
        encoder: VectorEncoder,
        classifier: Classifier,
        remote_client: Optional[PredictionClient] = None,
        config: Optional[MedInferConfig] = None
    ):
        """
        Args:
            catalog: Symptom registry
            knowledge_base: Disease registry for the rule strategy
            rule_scorer: Scorer over knowledge_base
            encoder: Vector encoder for the model strategy
            classifier: Neural classifier (may still be UNLOADED)
            remote_client: Client for the remote strategy, optional
            config: Engine configuration
        """
        self.config = config or get_default_config()

        if encoder.vector_dim != classifier.config.input_dim:
            raise ValueError(
                f"Encoder produces {encoder.vector_dim}-dim vectors, "
                f"classifier expects {classifier.config.input_dim}"
            )
        if self.config.inference.top_k < 1:
            raise ValueError(f"top_k must be at least 1, got {self.config.inference.top_k}")

        self.catalog = catalog
        self.knowledge_base = knowledge_base
        self.rule_scorer = rule_scorer
        self.encoder = encoder
        self.classifier = classifier
        self.remote_client = remote_client

        self._stats_lock = threading.Lock()
        self._requests: Counter = Counter()
        self._dropped_total = 0

    @classmethod
    def from_config(
        cls,
        config: Optional[MedInferConfig] = None,
        remote_client: Optional[PredictionClient] = None
    ) -> "InferenceEngine":
        """
        Build every collaborator from configuration.

        The classifier starts UNLOADED; call load_model().
        """
        config = config or get_default_config()

        catalog = SymptomCatalog.default()
        knowledge_base = KnowledgeBase.default()

        if config.encoder.index_path:
            index = SymptomIndex.load(config.encoder.index_path)
        else:
            index = SymptomIndex.from_convention(
                config.encoder.n_symptoms,
                prefix=config.encoder.id_prefix,
                version=config.encoder.index_version,
            )

        if remote_client is None and config.remote.enabled:
            remote_client = PredictionClient(config.remote, n_symptoms=config.encoder.n_symptoms)

        return cls(
            catalog=catalog,
            knowledge_base=knowledge_base,
            rule_scorer=RuleScorer(knowledge_base, config.rule_scorer),
            encoder=VectorEncoder(index),
            classifier=Classifier(config.classifier),
            remote_client=remote_client,
            config=config,
        )

    def load_model(self, source: Any = None, timeout: Optional[float] = None) -> ClassifierState:
        """
        Load classifier assets.

        Args:
            source: ModelAssets, an asset loader, or a directory path;
                default is the configured assets_dir
            timeout: Fetch deadline in seconds
        """
        if source is None:
            source = self.config.classifier.assets_dir
        if isinstance(source, (str, Path)):
            source = DirectoryAssetLoader(str(source), self.config.classifier)
        return self.classifier.load(source, timeout=timeout)

    # -------------------------------------------------------------------------
    # Inference
    # -------------------------------------------------------------------------

    def infer(
        self,
        symptoms: Iterable[str],
        strategy: Optional[Union[Strategy, str]] = None
    ) -> Ranking:
        """
        Rank candidate diseases for a symptom selection.

        Args:
            symptoms: Symptom ids; duplicates are ignored
            strategy: Strategy.MODEL, RULE or REMOTE; default from config

        Raises:
            ValidationError: empty selection, non-string id, unknown strategy,
                out-of-range symptom_<n> (model)
            ModelUnavailableError: model strategy before a successful load
            NoMatchingDiseaseError: rule strategy, no disease shares a symptom
            RemotePredictionError: remote strategy failure
        """
        selection = SymptomSelection.from_iterable(symptoms)
        strategy = self._resolve_strategy(strategy)

        if strategy == Strategy.MODEL:
            ranking = self._infer_model(selection)
        elif strategy == Strategy.RULE:
            ranking = self._infer_rule(selection)
        else:
            ranking = self._infer_remote(selection)

        with self._stats_lock:
            self._requests[strategy.value] += 1
            self._dropped_total += len(ranking.dropped_symptoms)

        logger.info(
            "infer strategy=%s selection=%s (%d ids) primary=%s p=%.3f",
            strategy.value, selection.fingerprint, len(selection),
            ranking.primary.disease_name, ranking.confidence
        )
        return ranking

    def _resolve_strategy(self, strategy: Optional[Union[Strategy, str]]) -> Strategy:
        if strategy is None:
            return self.config.inference.default_strategy
        try:
            return Strategy(strategy)
        except ValueError:
            valid = ", ".join(s.value for s in Strategy)
            raise ValidationError(f"Unknown strategy: {strategy!r} (expected one of {valid})")

    def _infer_model(self, selection: SymptomSelection) -> Ranking:
        if self.classifier.state in (ClassifierState.UNLOADED, ClassifierState.FAILED):
            raise ModelUnavailableError(
                f"Model strategy unavailable: classifier is {self.classifier.state.value}"
            )

        if self.config.encoder.reject_out_of_range:
            for symptom_id in selection.sorted_ids:
                self.encoder.index.check_range(symptom_id)

        encoding = self.encoder.encode_with_report(selection.ids)

        try:
            ranking = self.classifier.predict(encoding.vector, top_k=self.config.inference.top_k)
        except NotReadyError as e:
            raise ModelUnavailableError(str(e)) from e

        return ranking.model_copy(update={
            "selected_symptoms": list(selection.sorted_ids),
            "dropped_symptoms": list(encoding.dropped),
        })

    def _infer_rule(self, selection: SymptomSelection) -> Ranking:
        matches = self.rule_scorer.score(selection.ids)
        if not matches:
            raise NoMatchingDiseaseError(
                f"No disease matches the selected symptoms ({selection.fingerprint})"
            )

        predictions = [
            Prediction(
                disease_name=match.disease.name,
                specialist=match.disease.specialist_type,
                triage=match.disease.urgency.triage_label,
                probability=match.probability / 100,
            )
            for match in matches[:self.config.inference.top_k]
        ]

        return Ranking(
            predictions=predictions,
            strategy=Strategy.RULE,
            selected_symptoms=list(selection.sorted_ids),
            dropped_symptoms=[s for s in selection.sorted_ids if s not in self.catalog],
            total_candidates=len(matches),
        )

    def _infer_remote(self, selection: SymptomSelection) -> Ranking:
        if self.remote_client is None:
            raise ModelUnavailableError("Remote strategy unavailable: no prediction client configured")

        response = self.remote_client.predict_disease(list(selection.sorted_ids))

        disease_name = response.prediction or UNKNOWN_DISEASE
        mapper = self.classifier.label_mapper
        if mapper is not None:
            labels = mapper.map(disease_name)
            specialist, triage = labels.specialist, labels.triage
        else:
            specialist, triage = UNKNOWN_SPECIALIST, UNKNOWN_TRIAGE

        return Ranking(
            predictions=[Prediction(
                disease_name=disease_name,
                specialist=specialist,
                triage=triage,
                probability=response.confidence,
            )],
            strategy=Strategy.REMOTE,
            selected_symptoms=list(selection.sorted_ids),
            total_candidates=1,
        )

    # -------------------------------------------------------------------------
    # Introspection
    # -------------------------------------------------------------------------

    @property
    def stats(self) -> Dict[str, Any]:
        with self._stats_lock:
            return {
                "requests": dict(self._requests),
                "dropped_symptoms": self._dropped_total,
                "classifier_state": self.classifier.state.value,
            }

    def __repr__(self) -> str:
        return (
            f"InferenceEngine(diseases={len(self.knowledge_base)}, "
            f"vector_dim={self.encoder.vector_dim}, classifier={self.classifier.state.value})"
        )
