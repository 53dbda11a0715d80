"""OpenAI chat-completion provider using openai SDK with native async."""

import asyncio
import logging
import time

from openai import AsyncOpenAI

from config.config_loader import GenerationConfig, PromptsConfig, ProviderConfig
from src.models import PROPRIETARY, SummaryResponse
from src.providers.base import ProviderError, SummaryProvider

logger = logging.getLogger(__name__)


class OpenAIProvider(SummaryProvider):
    """OpenAI provider via openai SDK."""

    def __init__(
        self,
        config: ProviderConfig,
        model: str,
        api_key: str,
        generation: GenerationConfig,
        prompts: PromptsConfig,
    ) -> None:
        self._config = config
        self._model = model
        self._generation = generation
        self._prompts = prompts
        api_key = api_key.strip()
        if not api_key:
            raise ProviderError(config.name, "Missing API key")
        if config.base_url:
            self._client = AsyncOpenAI(api_key=api_key, base_url=config.base_url)
        else:
            self._client = AsyncOpenAI(api_key=api_key)

    def name(self) -> str:
        return self._config.name

    def model_string(self) -> str:
        return self._model

    async def summarize(self, text: str) -> SummaryResponse:
        start = time.monotonic()
        try:
            response = await asyncio.wait_for(
                self._client.chat.completions.create(
                    model=self._model,
                    messages=[
                        {"role": "system", "content": self._prompts.system},
                        {"role": "user", "content": self._prompts.user.format(text=text)},
                    ],
                    max_tokens=self._generation.chat_max_tokens,
                    temperature=self._generation.chat_temperature,
                ),
                timeout=self._config.timeout_sec,
            )
        except TimeoutError as exc:
            raise ProviderError(self._config.name, f"Request timed out after {self._config.timeout_sec}s") from exc
        except Exception as exc:
            raise ProviderError(self._config.name, f"API call failed: {exc}") from exc

        latency = time.monotonic() - start

        choice = response.choices[0] if response.choices else None
        if not choice or not choice.message.content:
            raise ProviderError(self._config.name, "Empty response content")

        token_count: int | None = None
        if response.usage:
            token_count = response.usage.total_tokens

        logger.info("OpenAI %s: %.2fs, %s tokens", self._model, latency, token_count)

        return SummaryResponse(
            provider=self._config.name,
            model=self._model,
            model_class=PROPRIETARY,
            content=choice.message.content.strip(),
            latency_sec=latency,
            token_count=token_count,
        )

    async def aclose(self) -> None:
        await self._client.close()
