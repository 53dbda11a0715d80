"""Abstract base for all summarization providers."""

from abc import ABC, abstractmethod

from src.models import SummaryResponse


class ProviderError(Exception):
    """Raised when a provider call fails."""

    def __init__(self, provider_name: str, message: str) -> None:
        self.provider_name = provider_name
        super().__init__(f"[{provider_name}] {message}")


class SummaryProvider(ABC):
    """Abstract base for all summarization providers."""

    @abstractmethod
    def name(self) -> str:
        """Return the short provider name (e.g. 'huggingface', 'openai')."""
        ...

    @abstractmethod
    def model_string(self) -> str:
        """Return the model identifier the provider summarizes with."""
        ...

    @abstractmethod
    async def summarize(self, text: str) -> SummaryResponse:
        """Summarize the given source text.

        Args:
            text: The user's source text, unmodified.

        Returns:
            SummaryResponse dataclass with content and metadata.

        Raises:
            ProviderError: On API failure, timeout, or unexpected response shape.
        """
        ...

    async def aclose(self) -> None:
        """Release any client the provider holds. No-op by default."""
        return None
