"""Shared pytest fixtures."""

from unittest.mock import AsyncMock

import pytest

from config.config_loader import (
    AppConfig,
    DefaultsConfig,
    GenerationConfig,
    ModelOption,
    PromptsConfig,
    ProviderConfig,
)
from src.models import (
    OPEN_SOURCE,
    PROPRIETARY,
    Comparison,
    Credentials,
    Rating,
    SessionState,
    SummaryResponse,
    SummaryResult,
)
from src.providers.base import SummaryProvider


@pytest.fixture
def hf_provider_config() -> ProviderConfig:
    return ProviderConfig(
        name="huggingface",
        api_key_env="TEST_HF_KEY",
        base_url="https://hf.test/models",
        timeout_sec=None,
    )


@pytest.fixture
def openai_provider_config() -> ProviderConfig:
    return ProviderConfig(name="openai", api_key_env="TEST_OPENAI_KEY", base_url=None, timeout_sec=None)


@pytest.fixture
def sample_generation_config() -> GenerationConfig:
    return GenerationConfig(
        max_length=150,
        min_length=30,
        max_new_tokens=150,
        generation_temperature=0.7,
        chat_max_tokens=150,
        chat_temperature=0.5,
    )


@pytest.fixture
def sample_prompts_config() -> PromptsConfig:
    return PromptsConfig(
        text_generation="Summarize the following text in a concise way:\n\n{text}",
        system="You are a helpful assistant that summarizes text concisely and accurately.",
        user="Please summarize the following text in about 100 words:\n\n{text}",
        placeholder="Claude API integration would go here. This is a placeholder summary.",
    )


@pytest.fixture
def sample_app_config(
    hf_provider_config: ProviderConfig,
    openai_provider_config: ProviderConfig,
    sample_generation_config: GenerationConfig,
    sample_prompts_config: PromptsConfig,
) -> AppConfig:
    return AppConfig(
        defaults=DefaultsConfig(open_source_model="facebook/bart-large-cnn", proprietary_model="gpt-3.5-turbo"),
        providers={"huggingface": hf_provider_config, "openai": openai_provider_config},
        generation=sample_generation_config,
        prompts=sample_prompts_config,
        open_source_models=[
            ModelOption("facebook/bart-large-cnn", "BART (Facebook)"),
            ModelOption("mistralai/Mixtral-8x7B-Instruct-v0.1", "Mixtral 8x7B"),
        ],
        proprietary_models=[
            ModelOption("gpt-3.5-turbo", "GPT-3.5 Turbo (OpenAI)"),
            ModelOption("claude-2", "Claude 2 (Anthropic)"),
        ],
    )


@pytest.fixture
def sample_credentials() -> Credentials:
    return Credentials(open_source_key="hf_test", proprietary_key="sk-test")


@pytest.fixture
def sample_state(sample_credentials: Credentials) -> SessionState:
    return SessionState(
        open_source_model="facebook/bart-large-cnn",
        proprietary_model="gpt-3.5-turbo",
        credentials=sample_credentials,
        text="The quick brown fox jumps over the lazy dog.",
    )


def make_response(model_class: str, content: str, model: str | None = None) -> SummaryResponse:
    if model is None:
        model = "facebook/bart-large-cnn" if model_class == OPEN_SOURCE else "gpt-3.5-turbo"
    return SummaryResponse(
        provider="huggingface" if model_class == OPEN_SOURCE else "openai",
        model=model,
        model_class=model_class,
        content=content,
        latency_sec=0.1,
        token_count=None,
    )


@pytest.fixture
def sample_result() -> SummaryResult:
    return SummaryResult(
        open_source=make_response(OPEN_SOURCE, "A fox jumps over a dog."),
        proprietary=make_response(PROPRIETARY, "A quick fox leaps over a lazy dog."),
    )


def make_comparison(os_rating: tuple[int, int, int], prop_rating: tuple[int, int, int], preference: str) -> Comparison:
    return Comparison(
        open_source_model="facebook/bart-large-cnn",
        proprietary_model="gpt-3.5-turbo",
        ratings={OPEN_SOURCE: Rating(*os_rating), PROPRIETARY: Rating(*prop_rating)},
        preference=preference,
    )


class MockProvider(SummaryProvider):
    """Test double SummaryProvider."""

    def __init__(
        self,
        provider_name: str = "mock",
        model_class: str = OPEN_SOURCE,
        response_content: str = "Mock summary",
    ) -> None:
        self._name = provider_name
        self._model_class = model_class
        self._response_content = response_content
        # Shadow the class method with an AsyncMock at the instance level.
        # ABC check passes because summarize is defined in the class body below.
        self.summarize = AsyncMock(  # type: ignore[assignment]
            return_value=SummaryResponse(
                provider=provider_name,
                model="mock-model",
                model_class=model_class,
                content=response_content,
                latency_sec=0.1,
                token_count=10,
            )
        )

    def name(self) -> str:
        return self._name

    def model_string(self) -> str:
        return "mock-model"

    async def summarize(self, text: str) -> SummaryResponse:  # type: ignore[override]
        """Default implementation; replaced by AsyncMock in __init__."""
        return SummaryResponse(
            provider=self._name,
            model="mock-model",
            model_class=self._model_class,
            content=self._response_content,
            latency_sec=0.1,
            token_count=10,
        )


@pytest.fixture
def two_mock_providers() -> tuple[MockProvider, MockProvider]:
    return (
        MockProvider("huggingface", OPEN_SOURCE, "Open source summary"),
        MockProvider("openai", PROPRIETARY, "Proprietary summary"),
    )
