"""
Tests for the config module

Run: pytest tests/test_config.py -v
"""

from medinfer.config import (
    MedInferConfig,
    RemoteConfig,
    Strategy,
    LogLevel,
    get_default_config,
    config_from_dict,
    config_to_dict,
    save_config,
    load_config,
)


def test_default_config():
    """Default dimensions and rule weights"""
    config = get_default_config()

    assert config.classifier.layer_dims == [377, 512, 256, 773]
    assert config.encoder.n_symptoms == 377
    assert config.rule_scorer.common_weight == 0.8
    assert config.rule_scorer.rare_weight == 0.3
    assert config.rule_scorer.probability_cap == 95
    assert config.inference.default_strategy == Strategy.MODEL
    assert config.inference.top_k == 5

    print(f"✓ Default layers: {config.classifier.layer_dims}")


def test_for_dimensions():
    config = MedInferConfig.for_dimensions(n_symptoms=40, n_diseases=16, hidden_dims=[32, 16])

    assert config.encoder.n_symptoms == 40
    assert config.classifier.layer_dims == [40, 32, 16, 16]


def test_yaml_round_trip(tmp_path):
    """save_config -> load_config gives back an equal config with enums restored"""
    config = MedInferConfig.for_dimensions(n_symptoms=10, n_diseases=4, hidden_dims=[8])
    config.inference.default_strategy = Strategy.RULE
    config.logging.level = LogLevel.DEBUG

    path = tmp_path / "configs" / "medinfer.yaml"
    save_config(config, str(path))
    loaded = load_config(str(path))

    assert loaded == config
    assert isinstance(loaded.inference.default_strategy, Strategy)
    assert loaded.logging.level is LogLevel.DEBUG

    text = path.read_text(encoding="utf-8")
    assert "default_strategy: rule" in text


def test_partial_dict():
    """Missing sections keep defaults, unknown keys are ignored"""
    config = config_from_dict({
        "rule_scorer": {"probability_cap": 90, "unknown_key": 1},
        "inference": {"default_strategy": "rule"},
        "something_else": {},
    })

    assert config.rule_scorer.probability_cap == 90
    assert config.rule_scorer.common_weight == 0.8
    assert config.inference.default_strategy is Strategy.RULE
    assert config.classifier.layer_dims == [377, 512, 256, 773]


def test_config_to_dict_is_plain():
    data = config_to_dict(get_default_config())

    assert data["inference"]["default_strategy"] == "model"
    assert data["logging"]["level"] == "INFO"
    assert data["classifier"]["hidden_dims"] == [512, 256]


def test_remote_config_from_env(monkeypatch):
    monkeypatch.setenv("PREDICTION_API_URL", "http://predict.local:5000")
    monkeypatch.setenv("PREDICTION_API_TIMEOUT", "3.5")

    config = RemoteConfig.from_env()

    assert config.base_url == "http://predict.local:5000"
    assert config.timeout == 3.5
    assert config.enabled


def test_remote_config_from_env_unset(monkeypatch):
    monkeypatch.delenv("PREDICTION_API_URL", raising=False)
    monkeypatch.delenv("PREDICTION_API_TIMEOUT", raising=False)

    config = RemoteConfig.from_env()

    assert config.base_url == "http://localhost:5000"
    assert not config.enabled
