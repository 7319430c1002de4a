from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Union
import os
import yaml

DEFAULT_CONFIG_PATH = Path(__file__).parents[1] / "config" / "config.yaml"
CONFIG_ENV_VAR = "RELAY_CONFIG_PATH"

SECRET_TYPES = {"gcp_secret_manager", "env"}
PROVIDER_TYPES = {"replicate"}


@dataclass(frozen=True)
class SecretsConfig:
    type: str
    secret_name: str = "Replicate_APIKey"
    cache: bool = False
    settings: Dict[str, Any] = field(default_factory=dict)

@dataclass(frozen=True)
class ProviderConfig:
    type: str
    settings: Dict[str, Any] = field(default_factory=dict)

@dataclass(frozen=True)
class GenerationConfig:
    provider: str
    model: str = "bytedance/seedance-1-lite"
    default_resolution: str = "480p"

@dataclass(frozen=True)
class RelayConfig:
    secrets: SecretsConfig
    providers: Dict[str, ProviderConfig]
    generation: GenerationConfig
    expose_error_details: bool = True

    @property
    def provider(self) -> ProviderConfig:
        return self.providers[self.generation.provider]


def resolve_config_path(config_path: Union[Path, str, None] = None) -> Path:
    if config_path:
        return Path(config_path)
    return Path(os.getenv(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH)


def load_config(config_path: Union[Path, str, None] = None) -> RelayConfig:
    path = resolve_config_path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")
    with open(path) as f:
        config = yaml.safe_load(f) or {}
    return parse_config(config)


def parse_config(config: Dict[str, Any]) -> RelayConfig:
    for section in ("secrets", "providers", "generation"):
        if not config.get(section):
            raise ValueError(f"Config missing '{section}'")

    secrets_cfg = config["secrets"]
    if secrets_cfg.get("type") not in SECRET_TYPES:
        raise ValueError(f"Unknown secrets type: {secrets_cfg.get('type')}")
    secrets = SecretsConfig(
        type=secrets_cfg["type"],
        secret_name=secrets_cfg.get("secret_name", SecretsConfig.secret_name),
        cache=bool(secrets_cfg.get("cache", False)),
        settings=secrets_cfg.get("settings") or {},
    )

    providers = {}
    for name, provider_cfg in config["providers"].items():
        if provider_cfg.get("type") not in PROVIDER_TYPES:
            raise ValueError(f"Provider '{name}' has unknown type '{provider_cfg.get('type')}'")
        providers[name] = ProviderConfig(type=provider_cfg["type"], settings=provider_cfg.get("settings") or {})

    generation_cfg = config["generation"]
    if "provider" not in generation_cfg:
        raise ValueError("Generation config missing provider")
    if generation_cfg["provider"] not in providers:
        raise ValueError(f"Generation references unknown provider '{generation_cfg['provider']}'")
    generation = GenerationConfig(
        provider=generation_cfg["provider"],
        model=generation_cfg.get("model", GenerationConfig.model),
        default_resolution=generation_cfg.get("default_resolution", GenerationConfig.default_resolution),
    )

    errors_cfg = config.get("errors") or {}
    return RelayConfig(
        secrets=secrets,
        providers=providers,
        generation=generation,
        expose_error_details=bool(errors_cfg.get("expose_details", True)),
    )
