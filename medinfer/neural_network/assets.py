"""
MedInfer — Model assets

The classifier is shipped as a handful of files:

    model.json              topology (Keras / TF.js layout, optional)
    group1-shard1of1.bin    float32 weights blob (see weights.py)
    label_map.json          ["Disease A", "Disease B", ...]  (length M)
    disease_mappings.json   {"disease_to_specialist": {...}, "disease_to_triage": {...}}
    symptom_names.json      ["Fever", ...]  (length N, optional)

ModelAssets holds the raw payloads; the loaders fetch them from a directory
or over HTTP. Parsing and validation happen in Classifier.load.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import requests

from medinfer.config import ClassifierConfig
from medinfer.exceptions import LoadError, MissingAssetError
from .weights import ClassifierWeights


logger = logging.getLogger(__name__)


@dataclass
class ModelAssets:
    """Raw asset payloads handed to Classifier.load"""
    weights: Optional[bytes] = None
    labels: Optional[List[str]] = None
    mappings: Optional[Dict[str, Any]] = None
    topology: Optional[Dict[str, Any]] = None
    symptom_names: Optional[List[str]] = None

    @classmethod
    def from_weights(
        cls,
        weights: ClassifierWeights,
        labels: List[str],
        mappings: Dict[str, Any],
        symptom_names: Optional[List[str]] = None
    ) -> "ModelAssets":
        """Package in-memory weights the way they are shipped"""
        return cls(
            weights=weights.to_buffer(),
            labels=list(labels),
            mappings=mappings,
            topology=build_topology(weights.layer_dims),
            symptom_names=list(symptom_names) if symptom_names is not None else None,
        )

    def save(self, directory: str, config: Optional[ClassifierConfig] = None) -> Path:
        """Write the asset files into directory"""
        config = config or ClassifierConfig()
        directory = Path(directory)
        directory.mkdir(parents=True, exist_ok=True)

        if self.weights is not None:
            (directory / config.weights_file).write_bytes(self.weights)

        json_files = [
            (config.topology_file, self.topology),
            (config.labels_file, self.labels),
            (config.mappings_file, self.mappings),
            (config.symptom_names_file, self.symptom_names),
        ]
        for filename, payload in json_files:
            if payload is None:
                continue
            with open(directory / filename, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2, ensure_ascii=False)

        return directory


# =============================================================================
# TOPOLOGY
# =============================================================================

def build_topology(layer_dims: List[int]) -> Dict[str, Any]:
    """Minimal Keras-style Sequential topology for layer_dims"""
    layers = []
    n_layers = len(layer_dims) - 1
    for k, units in enumerate(layer_dims[1:]):
        layer_config = {
            "units": units,
            "activation": "relu" if k < n_layers - 1 else "linear",
        }
        if k == 0:
            layer_config["batch_input_shape"] = [None, layer_dims[0]]
        layers.append({"class_name": "Dense", "config": layer_config})

    return {
        "format": "layers-model",
        "modelTopology": {
            "class_name": "Sequential",
            "config": {"layers": layers},
        },
    }


def parse_topology(topology: Dict[str, Any]) -> Optional[List[int]]:
    """
    Read [input, units...] from a Keras / TF.js topology.

    Returns None when the input dimension cannot be determined.
    """
    model = topology.get("modelTopology", topology)
    if "model_config" in model:
        model = model["model_config"]

    config = model.get("config", model)
    layers = config.get("layers", []) if isinstance(config, dict) else config

    input_dim = None
    units = []
    for layer in layers:
        layer_config = layer.get("config", {})
        shape = layer_config.get("batch_input_shape") or layer_config.get("batch_shape")
        if shape and input_dim is None:
            input_dim = int(shape[-1])
        if layer.get("class_name") == "Dense":
            units.append(int(layer_config["units"]))

    if input_dim is None or not units:
        return None
    return [input_dim, *units]


# =============================================================================
# LOADERS
# =============================================================================

class DirectoryAssetLoader:
    """
    Read assets from a local directory.

    Example:
        loader = DirectoryAssetLoader("models")
        classifier.load(loader, timeout=30)
    """

    def __init__(self, directory: str, config: Optional[ClassifierConfig] = None):
        self.directory = Path(directory)
        self.config = config or ClassifierConfig()

    def _path(self, filename: str, required: bool = True) -> Optional[Path]:
        path = self.directory / filename
        if path.exists():
            return path
        if required:
            raise MissingAssetError(filename, str(self.directory))
        return None

    def _read_json(self, filename: str, required: bool = True) -> Any:
        path = self._path(filename, required)
        if path is None:
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise LoadError(f"Corrupt asset {filename}: {e}") from e

    def fetch(self) -> ModelAssets:
        logger.info("Reading model assets from %s", self.directory)
        c = self.config
        return ModelAssets(
            weights=self._path(c.weights_file).read_bytes(),
            labels=self._read_json(c.labels_file),
            mappings=self._read_json(c.mappings_file),
            topology=self._read_json(c.topology_file, required=False),
            symptom_names=self._read_json(c.symptom_names_file, required=False),
        )

    def __repr__(self) -> str:
        return f"DirectoryAssetLoader({str(self.directory)!r})"


class HTTPAssetLoader:
    """
    Fetch assets from a static file server (same layout as the directory).

    Example:
        loader = HTTPAssetLoader("https://cdn.example.org/model/")
        classifier.load(loader, timeout=30)
    """

    def __init__(
        self,
        base_url: str,
        config: Optional[ClassifierConfig] = None,
        session: Optional[requests.Session] = None,
        request_timeout: float = 10.0
    ):
        self.base_url = base_url.rstrip("/")
        self.config = config or ClassifierConfig()
        self.session = session or requests.Session()
        self.request_timeout = request_timeout

    def _get(self, filename: str, required: bool = True) -> Optional[requests.Response]:
        url = f"{self.base_url}/{filename}"
        try:
            response = self.session.get(url, timeout=self.request_timeout)
        except requests.RequestException as e:
            raise MissingAssetError(filename, f"request failed: {e}") from e

        if response.status_code == 404 and not required:
            return None
        if not response.ok:
            raise MissingAssetError(filename, f"HTTP {response.status_code}")
        return response

    def _get_json(self, filename: str, required: bool = True) -> Any:
        response = self._get(filename, required)
        if response is None:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise LoadError(f"Corrupt asset {filename}: {e}") from e

    def fetch(self) -> ModelAssets:
        logger.info("Fetching model assets from %s", self.base_url)
        c = self.config
        return ModelAssets(
            weights=self._get(c.weights_file).content,
            labels=self._get_json(c.labels_file),
            mappings=self._get_json(c.mappings_file),
            topology=self._get_json(c.topology_file, required=False),
            symptom_names=self._get_json(c.symptom_names_file, required=False),
        )

    def __repr__(self) -> str:
        return f"HTTPAssetLoader({self.base_url!r})"
