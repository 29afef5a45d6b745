"""
MedInfer — API Configuration

Server settings and where the engine gets its configuration and model assets.
"""

from dataclasses import dataclass, field
from typing import Optional
import os


@dataclass
class APIConfig:
    """API server configuration"""

    # Server
    host: str = "0.0.0.0"
    port: int = 5000
    debug: bool = False
    reload: bool = False

    # CORS
    cors_origins: list = field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = True
    cors_allow_methods: list = field(default_factory=lambda: ["*"])
    cors_allow_headers: list = field(default_factory=lambda: ["*"])

    # Engine
    config_path: Optional[str] = None       # MedInferConfig YAML; None = defaults
    assets_dir: Optional[str] = None        # overrides classifier.assets_dir
    assets_url: Optional[str] = None        # fetch assets over HTTP instead
    load_timeout: Optional[float] = None    # None = classifier.load_timeout
    load_on_startup: bool = True

    # API
    api_prefix: str = "/api"
    api_title: str = "MedInfer API"
    api_description: str = "Symptom-to-diagnosis inference (rule, model and remote strategies)"

    @classmethod
    def from_env(cls) -> "APIConfig":
        """Create configuration from environment variables"""
        load_timeout = os.getenv("MODEL_LOAD_TIMEOUT")
        return cls(
            host=os.getenv("API_HOST", "0.0.0.0"),
            port=int(os.getenv("API_PORT", "5000")),
            debug=os.getenv("API_DEBUG", "false").lower() == "true",
            config_path=os.getenv("MEDINFER_CONFIG"),
            assets_dir=os.getenv("MODEL_ASSETS_DIR"),
            assets_url=os.getenv("MODEL_ASSETS_URL"),
            load_timeout=float(load_timeout) if load_timeout else None,
            load_on_startup=os.getenv("MODEL_LOAD_ON_STARTUP", "true").lower() == "true",
        )
