"""
MedInfer — Neural network module

Feed-forward classifier over the binary symptom vector.

Components:
- TriageNN: network architecture (PyTorch)
- ClassifierWeights: dense layer weights and the float32 blob format
- ModelAssets, DirectoryAssetLoader, HTTPAssetLoader: shipped asset files
- LabelMapper: disease name -> specialist / triage
- Classifier: load-once, predict-many inference

Example:
    from medinfer.config import ClassifierConfig
    from medinfer.encoding import SymptomIndex, VectorEncoder
    from medinfer.neural_network import Classifier, DirectoryAssetLoader

    config = ClassifierConfig()
    classifier = Classifier(config)
    classifier.load(DirectoryAssetLoader("models", config), timeout=30)

    encoder = VectorEncoder(SymptomIndex.from_convention(config.input_dim))
    ranking = classifier.predict(encoder.encode({"symptom_12", "symptom_40"}))

    for prediction in ranking.top_predictions:
        print(f"  {prediction.disease_name}: {prediction.probability:.2%}")
"""

from .model import TriageNN
from .weights import ClassifierWeights, DenseLayer, parameter_count
from .assets import (
    ModelAssets,
    DirectoryAssetLoader,
    HTTPAssetLoader,
    build_topology,
    parse_topology,
)
from .label_mapper import (
    LabelMapper,
    LabelInfo,
    UNKNOWN_SPECIALIST,
    UNKNOWN_TRIAGE,
    UNKNOWN_DISEASE,
)
from .classifier import Classifier, ClassifierState, LoadedModel, softmax


__all__ = [
    # Model
    "TriageNN",
    "ClassifierWeights",
    "DenseLayer",
    "parameter_count",

    # Assets
    "ModelAssets",
    "DirectoryAssetLoader",
    "HTTPAssetLoader",
    "build_topology",
    "parse_topology",

    # Labels
    "LabelMapper",
    "LabelInfo",
    "UNKNOWN_SPECIALIST",
    "UNKNOWN_TRIAGE",
    "UNKNOWN_DISEASE",

    # Classifier
    "Classifier",
    "ClassifierState",
    "LoadedModel",
    "softmax",
]
