"""MedInfer — Config loading (YAML)"""
import yaml
from enum import Enum
from pathlib import Path
from dataclasses import asdict, fields
from typing import Any, Dict

from .settings import (
    MedInferConfig,
    EncoderConfig,
    ClassifierConfig,
    RuleScorerConfig,
    InferenceConfig,
    RemoteConfig,
    LoggingConfig,
    LogLevel,
    Strategy,
)


_SECTIONS = {
    "encoder": EncoderConfig,
    "classifier": ClassifierConfig,
    "rule_scorer": RuleScorerConfig,
    "inference": InferenceConfig,
    "remote": RemoteConfig,
    "logging": LoggingConfig,
}


def _plain(value: Any) -> Any:
    """Enums -> values, so safe_load can read the file back"""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_plain(v) for v in value]
    return value


def config_to_dict(config: MedInferConfig) -> Dict[str, Any]:
    return _plain(asdict(config))


def config_from_dict(data: Dict[str, Any]) -> MedInferConfig:
    """Build MedInferConfig from a (possibly partial) dict; unknown keys are ignored"""
    config = MedInferConfig()

    for key in ("version", "project_name"):
        if key in data:
            setattr(config, key, data[key])

    for section, section_cls in _SECTIONS.items():
        values = data.get(section) or {}
        known = {f.name for f in fields(section_cls)}
        setattr(config, section, section_cls(**{k: v for k, v in values.items() if k in known}))

    config.inference.default_strategy = Strategy(config.inference.default_strategy)
    config.logging.level = LogLevel(config.logging.level)

    return config


def save_yaml(config: MedInferConfig, path: str) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(config_to_dict(config), f, default_flow_style=False, sort_keys=False)


def load_yaml(path: str) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def save_config(config: MedInferConfig, path: str) -> None:
    save_yaml(config, path)


def load_config(path: str) -> MedInferConfig:
    return config_from_dict(load_yaml(path))
