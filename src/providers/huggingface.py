"""Hugging Face Inference API provider over httpx.

Seq2seq models (BART, Pegasus, T5) go through the summarization task and
return ``summary_text``. Instruction-tuned models (Mixtral) go through text
generation and echo the prompt back in ``generated_text``, so the prompt is
stripped before the summary is returned.
"""

import asyncio
import logging
import time
from typing import Any

import httpx

from config.config_loader import GenerationConfig, PromptsConfig, ProviderConfig
from src.models import OPEN_SOURCE, SummaryResponse
from src.providers.base import ProviderError, SummaryProvider
from src.registry import SUMMARIZATION, TEXT_GENERATION, open_source_family

logger = logging.getLogger(__name__)


class HuggingFaceProvider(SummaryProvider):
    """Open-source models hosted on the Hugging Face Inference API."""

    def __init__(
        self,
        config: ProviderConfig,
        model: str,
        api_key: str,
        generation: GenerationConfig,
        prompts: PromptsConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._model = model
        self._generation = generation
        self._prompts = prompts
        self._transport = transport
        self._api_key = api_key.strip()
        if not self._api_key:
            raise ProviderError(config.name, "Missing API key")
        if not config.base_url:
            raise ProviderError(config.name, "base_url is required for Hugging Face provider")

    def name(self) -> str:
        return self._config.name

    def model_string(self) -> str:
        return self._model

    def _endpoint(self) -> str:
        return f"{self._config.base_url.rstrip('/')}/{self._model}"

    async def _post(self, payload: dict[str, Any]) -> Any:
        headers = {"Authorization": f"Bearer {self._api_key}"}
        # Client timeout disabled; asyncio.wait_for owns the deadline.
        async with httpx.AsyncClient(timeout=None, transport=self._transport) as client:
            r = await client.post(self._endpoint(), json=payload, headers=headers)
        if r.status_code != 200:
            raise ProviderError(
                self._config.name,
                f"HTTP {r.status_code} from {self._model}: {r.text[:200]!r}",
            )
        return r.json()

    def _first_field(self, data: Any, key: str) -> str:
        item = data[0] if isinstance(data, list) and data else data
        if not isinstance(item, dict) or not isinstance(item.get(key), str):
            raise ProviderError(self._config.name, f"Unexpected response shape, missing '{key}'")
        return item[key]

    async def _summarization(self, text: str) -> str:
        data = await self._post({
            "inputs": text,
            "parameters": {
                "max_length": self._generation.max_length,
                "min_length": self._generation.min_length,
            },
        })
        return self._first_field(data, "summary_text")

    async def _text_generation(self, text: str) -> str:
        prompt = self._prompts.text_generation.format(text=text)
        data = await self._post({
            "inputs": prompt,
            "parameters": {
                "max_new_tokens": self._generation.max_new_tokens,
                "temperature": self._generation.generation_temperature,
            },
        })
        generated = self._first_field(data, "generated_text")
        return generated.replace(prompt, "", 1).strip()

    async def summarize(self, text: str) -> SummaryResponse:
        family = open_source_family(self._model)
        if family == SUMMARIZATION:
            call = self._summarization(text)
        elif family == TEXT_GENERATION:
            call = self._text_generation(text)
        else:
            raise ProviderError(self._config.name, f"Unsupported model family: {self._model}")

        start = time.monotonic()
        try:
            content = await asyncio.wait_for(call, timeout=self._config.timeout_sec)
        except ProviderError:
            raise
        except TimeoutError as exc:
            raise ProviderError(self._config.name, f"Request timed out after {self._config.timeout_sec}s") from exc
        except Exception as exc:
            raise ProviderError(self._config.name, f"API call failed: {exc}") from exc

        latency = time.monotonic() - start

        logger.info("Hugging Face %s (%s): %.2fs", self._model, family, latency)

        return SummaryResponse(
            provider=self._config.name,
            model=self._model,
            model_class=OPEN_SOURCE,
            content=content,
            latency_sec=latency,
            token_count=None,
        )
