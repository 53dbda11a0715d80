"""Dual summary acquisition: validate, fan out to both providers, join all-or-nothing."""

import asyncio
import logging

from config.config_loader import AppConfig
from src.models import (
    OPEN_SOURCE,
    PROPRIETARY,
    DualOutcome,
    ProviderOutcome,
    SummaryRequest,
    SummaryResult,
)
from src.providers.base import ProviderError, SummaryProvider
from src.providers.huggingface import HuggingFaceProvider
from src.providers.openai_provider import OpenAIProvider
from src.providers.placeholder import PlaceholderProvider
from src.registry import CHAT, UNIMPLEMENTED, proprietary_family

logger = logging.getLogger(__name__)

GENERIC_FAILURE_MESSAGE = "Error generating summaries. Please check your API keys and try again."

_OPEN_SOURCE_PROVIDER = "huggingface"
_CHAT_PROVIDER = "openai"
_UNIMPLEMENTED_PROVIDER = "claude"


class ValidationError(Exception):
    """Raised when a request or rating is rejected before any provider is involved."""


class AcquisitionError(ProviderError):
    """One or both providers failed. Carries both slots for logging and inspection."""

    def __init__(self, outcome: DualOutcome) -> None:
        self.outcome = outcome
        super().__init__("summaries", GENERIC_FAILURE_MESSAGE)

    @property
    def user_message(self) -> str:
        return GENERIC_FAILURE_MESSAGE


def validate_request(request: SummaryRequest) -> None:
    """Raise ValidationError unless text and both credentials are present."""
    if not request.source_text or not request.source_text.strip():
        raise ValidationError("Please enter text to summarize")
    creds = request.credentials
    if not creds.open_source_key.strip() or not creds.proprietary_key.strip():
        raise ValidationError("Please enter both API keys")


def build_open_source_provider(request: SummaryRequest, config: AppConfig) -> SummaryProvider:
    return HuggingFaceProvider(
        config.providers[_OPEN_SOURCE_PROVIDER],
        model=request.open_source_model,
        api_key=request.credentials.open_source_key,
        generation=config.generation,
        prompts=config.prompts,
    )


def build_proprietary_provider(request: SummaryRequest, config: AppConfig) -> SummaryProvider:
    family = proprietary_family(request.proprietary_model)
    if family == CHAT:
        return OpenAIProvider(
            config.providers[_CHAT_PROVIDER],
            model=request.proprietary_model,
            api_key=request.credentials.proprietary_key,
            generation=config.generation,
            prompts=config.prompts,
        )
    if family == UNIMPLEMENTED:
        return PlaceholderProvider(
            _UNIMPLEMENTED_PROVIDER,
            model=request.proprietary_model,
            placeholder_text=config.prompts.placeholder,
        )
    raise ProviderError("proprietary", f"Unsupported model family: {request.proprietary_model}")


async def _call_provider(
    provider: SummaryProvider,
    model_class: str,
    text: str,
) -> ProviderOutcome:
    """Call a single provider. Never raises, failures land in the outcome slot."""
    try:
        response = await provider.summarize(text)
        return ProviderOutcome(model_class=model_class, response=response)
    except ProviderError as exc:
        return ProviderOutcome(model_class=model_class, error=exc)
    except Exception as exc:
        err = ProviderError(provider.name(), f"Unexpected error: {exc}")
        err.__cause__ = exc
        return ProviderOutcome(model_class=model_class, error=err)


async def acquire_summaries(
    request: SummaryRequest,
    config: AppConfig,
    open_source: SummaryProvider | None = None,
    proprietary: SummaryProvider | None = None,
) -> SummaryResult:
    """Fetch both summaries concurrently.

    Args:
        request: Text, selected model ids and credentials.
        config: App config used to build providers that were not injected.
        open_source: Optional pre-built open-source provider.
        proprietary: Optional pre-built proprietary provider.

    Returns:
        SummaryResult holding both summaries.

    Raises:
        ValidationError: Text or a credential is missing. No provider is called.
        AcquisitionError: Either provider failed. No partial result is kept.
    """
    validate_request(request)

    outcomes: dict[str, ProviderOutcome] = {}
    # Providers built here are closed here; injected ones belong to the caller
    built: list[SummaryProvider] = []
    try:
        if open_source is None:
            open_source = build_open_source_provider(request, config)
            built.append(open_source)
    except ProviderError as exc:
        outcomes[OPEN_SOURCE] = ProviderOutcome(model_class=OPEN_SOURCE, error=exc)
    try:
        if proprietary is None:
            proprietary = build_proprietary_provider(request, config)
            built.append(proprietary)
    except ProviderError as exc:
        outcomes[PROPRIETARY] = ProviderOutcome(model_class=PROPRIETARY, error=exc)

    try:
        if not outcomes:
            logger.info(
                "Requesting summaries: %s + %s",
                open_source.model_string(),
                proprietary.model_string(),
            )
            os_outcome, prop_outcome = await asyncio.gather(
                _call_provider(open_source, OPEN_SOURCE, request.source_text),
                _call_provider(proprietary, PROPRIETARY, request.source_text),
            )
            outcomes = {OPEN_SOURCE: os_outcome, PROPRIETARY: prop_outcome}
    finally:
        for provider in built:
            await provider.aclose()

    dual = DualOutcome(
        open_source=outcomes.get(OPEN_SOURCE) or ProviderOutcome(model_class=OPEN_SOURCE),
        proprietary=outcomes.get(PROPRIETARY) or ProviderOutcome(model_class=PROPRIETARY),
    )

    failed = [o for o in (dual.open_source, dual.proprietary) if o.error is not None]
    if failed:
        for o in failed:
            logger.warning("Summary failed for %s: %s", o.model_class, o.error)
        for o in (dual.open_source, dual.proprietary):
            if o.error is None and o.response is None:
                logger.debug("Summary skipped for %s", o.model_class)
        raise AcquisitionError(dual)

    return SummaryResult(open_source=dual.open_source.response, proprietary=dual.proprietary.response)
