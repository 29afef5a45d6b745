"""MedInfer — Configuration module"""
from .settings import (
    MedInferConfig,
    get_default_config,
    EncoderConfig,
    ClassifierConfig,
    RuleScorerConfig,
    InferenceConfig,
    RemoteConfig,
    LoggingConfig,
    LogLevel,
    Strategy,
)
from .loader import (
    save_config,
    load_config,
    save_yaml,
    load_yaml,
    config_to_dict,
    config_from_dict,
)

__all__ = [
    "MedInferConfig",
    "get_default_config",
    "EncoderConfig",
    "ClassifierConfig",
    "RuleScorerConfig",
    "InferenceConfig",
    "RemoteConfig",
    "LoggingConfig",
    "LogLevel",
    "Strategy",
    "save_config",
    "load_config",
    "save_yaml",
    "load_yaml",
    "config_to_dict",
    "config_from_dict",
]
