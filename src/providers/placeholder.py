"""Stand-in for proprietary families with no integration yet (Claude)."""

import logging

from src.models import PROPRIETARY, SummaryResponse
from src.providers.base import SummaryProvider

logger = logging.getLogger(__name__)


class PlaceholderProvider(SummaryProvider):
    """Returns a fixed placeholder summary without touching the network."""

    def __init__(self, provider_name: str, model: str, placeholder_text: str) -> None:
        self._name = provider_name
        self._model = model
        self._text = placeholder_text

    def name(self) -> str:
        return self._name

    def model_string(self) -> str:
        return self._model

    async def summarize(self, text: str) -> SummaryResponse:
        logger.info("No integration for %s, returning placeholder summary", self._model)
        return SummaryResponse(
            provider=self._name,
            model=self._model,
            model_class=PROPRIETARY,
            content=self._text,
            latency_sec=0.0,
            token_count=None,
            placeholder=True,
        )
