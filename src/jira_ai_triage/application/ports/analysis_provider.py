from abc import ABC, abstractmethod


class AnalysisProvider(ABC):
    """Produces a natural-language analysis of an issue."""

    @abstractmethod
    async def analyze(self, system_instruction: str, user_content: str) -> str:
        """Raises UpstreamError when the remote call fails or the response has no text."""
