"""Load settings.yaml into typed dataclasses. Reports which credentials the environment provides."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

_SETTINGS_PATH = Path(__file__).parent / "settings.yaml"


@dataclass
class ModelOption:
    id: str
    label: str


@dataclass
class ProviderConfig:
    name: str
    api_key_env: str
    base_url: str | None = None
    timeout_sec: float | None = None   # None = no timeout


@dataclass
class GenerationConfig:
    max_length: int
    min_length: int
    max_new_tokens: int
    generation_temperature: float
    chat_max_tokens: int
    chat_temperature: float


@dataclass
class PromptsConfig:
    text_generation: str
    system: str
    user: str
    placeholder: str


@dataclass
class DefaultsConfig:
    open_source_model: str
    proprietary_model: str


@dataclass
class AppConfig:
    defaults: DefaultsConfig
    providers: dict[str, ProviderConfig]
    generation: GenerationConfig
    prompts: PromptsConfig
    open_source_models: list[ModelOption] = field(default_factory=list)
    proprietary_models: list[ModelOption] = field(default_factory=list)
    available_credentials: set[str] = field(default_factory=set)


def _model_options(raw: list[dict]) -> list[ModelOption]:
    return [ModelOption(id=str(m["id"]), label=str(m["label"])) for m in raw]


def load_config(settings_path: Path = _SETTINGS_PATH) -> AppConfig:
    """Load and validate configuration from settings.yaml.

    Raises FileNotFoundError if settings file missing.
    Missing API keys are only logged: credentials may still be typed in
    at the prompt, so callers check available_credentials themselves.
    """
    if not settings_path.exists():
        raise FileNotFoundError(f"Settings file not found: {settings_path}")

    with settings_path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)

    defaults_raw = raw["defaults"]
    defaults = DefaultsConfig(
        open_source_model=str(defaults_raw["open_source_model"]),
        proprietary_model=str(defaults_raw["proprietary_model"]),
    )

    gen_raw = raw["generation"]
    generation = GenerationConfig(
        max_length=int(gen_raw["summarization"]["max_length"]),
        min_length=int(gen_raw["summarization"]["min_length"]),
        max_new_tokens=int(gen_raw["text_generation"]["max_new_tokens"]),
        generation_temperature=float(gen_raw["text_generation"]["temperature"]),
        chat_max_tokens=int(gen_raw["chat"]["max_tokens"]),
        chat_temperature=float(gen_raw["chat"]["temperature"]),
    )

    prompts_raw = raw["prompts"]
    prompts = PromptsConfig(
        text_generation=prompts_raw["text_generation"],
        system=prompts_raw["system"],
        user=prompts_raw["user"],
        placeholder=prompts_raw["placeholder"],
    )

    providers: dict[str, ProviderConfig] = {}
    available_credentials: set[str] = set()

    for provider_name, provider_raw in raw["providers"].items():
        timeout = provider_raw.get("timeout_sec")
        providers[provider_name] = ProviderConfig(
            name=provider_name,
            api_key_env=provider_raw["api_key_env"],
            base_url=provider_raw.get("base_url"),
            timeout_sec=float(timeout) if timeout is not None else None,
        )

        api_key = os.environ.get(provider_raw["api_key_env"], "").strip()
        if api_key:
            available_credentials.add(provider_name)
            logger.info("Credential found in environment: %s", provider_name)
        else:
            logger.debug(
                "No credential in environment for %s (%s), will prompt",
                provider_name,
                provider_raw["api_key_env"],
            )

    models_raw = raw.get("models", {})

    return AppConfig(
        defaults=defaults,
        providers=providers,
        generation=generation,
        prompts=prompts,
        open_source_models=_model_options(models_raw.get("open_source", [])),
        proprietary_models=_model_options(models_raw.get("proprietary", [])),
        available_credentials=available_credentials,
    )
