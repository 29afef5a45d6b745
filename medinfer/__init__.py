"""
MedInfer — Symptom-to-diagnosis inference engine

Given a set of selected symptoms, produces a ranked list of candidate
diseases, each with a probability, a recommended specialist and a triage
level.

Strategies:
- RULE: weighted overlap against a static disease/symptom knowledge base
- MODEL: feed-forward neural classifier over a binary symptom vector
- REMOTE: delegate to a remote prediction API

Modules:
- config: engine settings (dataclasses + YAML)
- schemas: pydantic data models
- knowledge: SymptomCatalog, KnowledgeBase
- rule_scorer: RuleScorer
- encoding: SymptomIndex, VectorEncoder
- neural_network: Classifier, ClassifierWeights, asset loaders, LabelMapper
- remote: PredictionClient
- inference: InferenceEngine, SymptomSelection, health utilities
- api: FastAPI service

Example:
    from medinfer import InferenceEngine, Strategy

    engine = InferenceEngine.from_config()
    ranking = engine.infer(["runny_nose", "cough"], Strategy.RULE)

    for p in ranking.top_predictions:
        print(f"{p.disease_name}: {p.probability:.0%} ({p.specialist}, {p.triage})")

    engine.load_model("models")
    ranking = engine.infer(["symptom_12", "symptom_40"])
"""

__version__ = "1.0.0"
__author__ = "MedInfer Team"

from medinfer.config import MedInferConfig, Strategy, get_default_config
from medinfer.exceptions import MedInferError
from medinfer.schemas import Prediction, Ranking
from medinfer.inference import InferenceEngine, SymptomSelection


__all__ = [
    "__version__",
    "MedInferConfig",
    "Strategy",
    "get_default_config",
    "MedInferError",
    "Prediction",
    "Ranking",
    "InferenceEngine",
    "SymptomSelection",
]
