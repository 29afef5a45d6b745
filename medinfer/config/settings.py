"""
MedInfer — Engine settings

All engine parameters are collected in dataclasses for:
- typed access via config.classifier.hidden_dims
- YAML serialization (see loader.py)
- one place to change the source data dimensions
"""

from dataclasses import dataclass, field
from typing import List, Optional
from enum import Enum
import os


# =============================================================================
# ENUMS
# =============================================================================

class Strategy(str, Enum):
    """Inference strategy"""
    MODEL = "model"     # neural classifier
    RULE = "rule"       # weighted symptom overlap
    REMOTE = "remote"   # remote prediction API


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


# =============================================================================
# ENCODER CONFIGURATION
# =============================================================================

@dataclass
class EncoderConfig:
    """Symptom index table and vector encoding"""

    n_symptoms: int = 377
    id_prefix: str = "symptom_"
    index_version: str = "v1"

    # JSON table {"version": ..., "symptom_to_index": {...}}; None = convention table
    index_path: Optional[str] = None

    # Reject symptom_<n> ids with n outside [1, n_symptoms] at the engine boundary
    reject_out_of_range: bool = True


# =============================================================================
# CLASSIFIER CONFIGURATION
# =============================================================================

@dataclass
class ClassifierConfig:
    """Feed-forward classifier topology and asset layout"""

    input_dim: int = 377
    hidden_dims: List[int] = field(default_factory=lambda: [512, 256])
    output_dim: int = 773

    top_k: int = 5
    probability_tolerance: float = 1e-5

    # Assets
    assets_dir: str = "models"
    topology_file: str = "model.json"
    weights_file: str = "group1-shard1of1.bin"
    labels_file: str = "label_map.json"
    mappings_file: str = "disease_mappings.json"
    symptom_names_file: str = "symptom_names.json"

    # Deadline for fetching assets (seconds); None = no deadline
    load_timeout: Optional[float] = 30.0

    # Max time predict() waits for a load in progress
    ready_wait_timeout: Optional[float] = 60.0

    @property
    def layer_dims(self) -> List[int]:
        """[input, hidden..., output]"""
        return [self.input_dim, *self.hidden_dims, self.output_dim]


# =============================================================================
# RULE SCORER CONFIGURATION
# =============================================================================

@dataclass
class RuleScorerConfig:
    """Weighted overlap scoring"""
    common_weight: float = 0.8
    rare_weight: float = 0.3
    probability_cap: int = 95   # never report certainty


# =============================================================================
# INFERENCE CONFIGURATION
# =============================================================================

@dataclass
class InferenceConfig:
    """Orchestration"""
    default_strategy: Strategy = Strategy.MODEL
    top_k: int = 5


# =============================================================================
# REMOTE API CONFIGURATION
# =============================================================================

@dataclass
class RemoteConfig:
    """Remote prediction API client"""
    base_url: str = "http://localhost:5000"
    timeout: float = 10.0
    enabled: bool = False

    @classmethod
    def from_env(cls) -> "RemoteConfig":
        base_url = os.getenv("PREDICTION_API_URL")
        return cls(
            base_url=base_url or cls.base_url,
            timeout=float(os.getenv("PREDICTION_API_TIMEOUT", cls.timeout)),
            enabled=base_url is not None,
        )


# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

@dataclass
class LoggingConfig:
    level: LogLevel = LogLevel.INFO
    log_file: Optional[str] = None
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# =============================================================================
# MAIN CONFIGURATION
# =============================================================================

@dataclass
class MedInferConfig:
    """
    Main MedInfer configuration

    Example:
        config = MedInferConfig()
        print(config.classifier.hidden_dims)  # [512, 256]
        print(config.rule_scorer.probability_cap)  # 95
    """

    version: str = "1.0.0"
    project_name: str = "MedInfer"

    encoder: EncoderConfig = field(default_factory=EncoderConfig)
    classifier: ClassifierConfig = field(default_factory=ClassifierConfig)
    rule_scorer: RuleScorerConfig = field(default_factory=RuleScorerConfig)
    inference: InferenceConfig = field(default_factory=InferenceConfig)
    remote: RemoteConfig = field(default_factory=RemoteConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def for_dimensions(
        cls,
        n_symptoms: int,
        n_diseases: int,
        hidden_dims: Optional[List[int]] = None
    ) -> "MedInferConfig":
        """Create a configuration for a specific symptom/label space"""
        config = cls()

        config.encoder.n_symptoms = n_symptoms
        config.classifier.input_dim = n_symptoms
        config.classifier.output_dim = n_diseases
        if hidden_dims is not None:
            config.classifier.hidden_dims = list(hidden_dims)

        return config


# =============================================================================
# DEFAULT CONFIG INSTANCE
# =============================================================================

def get_default_config() -> MedInferConfig:
    """Default configuration for the 377 symptom / 773 disease model"""
    return MedInferConfig.for_dimensions(n_symptoms=377, n_diseases=773)
