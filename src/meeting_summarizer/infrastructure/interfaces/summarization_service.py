"""Abstract interface for summarization providers."""

from abc import ABC, abstractmethod


class SummarizationService(ABC):
    """Abstract base class for generative-text backends."""

    @abstractmethod
    async def summarize(self, system_prompt: str, user_prompt: str) -> str:
        """
        Generates a summary from a system prompt and a user prompt.

        Args:
            system_prompt: Style rules for the model.
            user_prompt: Custom instruction plus the full transcript.

        Returns:
            The generated text, unmodified.

        Raises:
            SummarizationError: If the provider call fails or times out.
        """
        pass
