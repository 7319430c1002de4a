from __future__ import annotations
from typing import Any, Callable, Dict, Optional, Union
from pathlib import Path
import logging
import threading

from .config import RelayConfig, ProviderConfig, SecretsConfig, load_config
from .providers.base import PredictionProvider, PredictionRequest, Prediction
from .providers.replicate_sdk import ReplicateProvider
from .services.secret_base import SecretProvider
from .services.secret_manager import SecretManagerProvider, EnvSecretProvider

logger = logging.getLogger(__name__)

ProviderFactory = Callable[[str], PredictionProvider]


def build_secret_provider(cfg: SecretsConfig) -> SecretProvider:
    if cfg.type == "gcp_secret_manager":
        return SecretManagerProvider(**cfg.settings)
    if cfg.type == "env":
        return EnvSecretProvider(**cfg.settings)
    raise ValueError(f"Unknown secrets type: {cfg.type}")


def build_provider_factory(cfg: ProviderConfig) -> ProviderFactory:
    """Return a callable that builds a provider authenticated with a given token."""
    if cfg.type == "replicate":
        return lambda api_token: ReplicateProvider(api_token=api_token, **cfg.settings)
    raise ValueError(f"Unknown provider type: {cfg.type}")


class RelayService:
    """
    Stateless relay between inbound requests and the remote prediction API.

    Every call fetches the API credential (or reuses it when secret caching is
    enabled), builds a provider with it and performs exactly one remote call.
    """

    def __init__(self, config: RelayConfig, secrets: SecretProvider, provider_factory: ProviderFactory):
        self.config = config
        self.secrets = secrets
        self.provider_factory = provider_factory
        self._cached_secret: Optional[str] = None
        self._lock = threading.Lock() #guards the optional secret cache

    @classmethod
    def from_config(cls, config_path: Union[Path, str, None] = None) -> "RelayService":
        config = load_config(config_path)
        return cls(
            config=config,
            secrets=build_secret_provider(config.secrets),
            provider_factory=build_provider_factory(config.provider),
        )

    def _api_key(self) -> str:
        name = self.config.secrets.secret_name
        if not self.config.secrets.cache:
            return self.secrets.get_secret(name)
        with self._lock:
            if self._cached_secret is None:
                self._cached_secret = self.secrets.get_secret(name)
                logger.info(f"Cached secret '{name}' for the process lifetime")
            return self._cached_secret

    def _provider(self) -> PredictionProvider:
        return self.provider_factory(self._api_key())

    def create_task(self, prompt: str, image_url: str, resolution: Optional[str] = None) -> str:
        """Start a generation job and return the remote task id."""
        request = PredictionRequest(
            model=self.config.generation.model,
            input={
                "prompt": prompt,
                "image": image_url,
                "resolution": resolution if resolution is not None else self.config.generation.default_resolution,
            },
        )
        prediction = self._provider().create_prediction(request)
        return prediction.id

    def check_status(self, task_id: str) -> Dict[str, Any]:
        """Fetch the current snapshot of a remote task as a TaskStatus mapping."""
        prediction = self._provider().get_prediction(task_id)
        return task_status(prediction)


def task_status(prediction: Prediction) -> Dict[str, Any]:
    status = {
        "taskId": prediction.id,
        "status": prediction.status,
        "created_at": prediction.created_at,
        "started_at": prediction.started_at,
        "completed_at": prediction.completed_at,
        "model": prediction.model,
        "version": prediction.version,
    }
    if prediction.status == "succeeded":
        status["output_url"] = prediction.output
    elif prediction.status == "failed":
        status["error"] = prediction.error
    return status
