from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import openai

from jira_ai_triage.application.ports.analysis_provider import AnalysisProvider
from jira_ai_triage.core.exceptions.upstream_error import UpstreamError
from jira_ai_triage.infrastructure.observability.logger_factory_service import LoggerFactoryService
from jira_ai_triage.infrastructure.providers.llms.openai.mappers.openai_request_mapper import (
    OpenAiRequestMapper,
)
from jira_ai_triage.infrastructure.providers.llms.openai.mappers.openai_response_mapper import (
    OpenAiResponseMapper,
)

logger = LoggerFactoryService.build_logger(__name__)


@dataclass(frozen=True, slots=True)
class OpenAiAnalysisProvider(AnalysisProvider):
    """Chat-completion analysis against any OpenAI-compatible endpoint (Groq by default)."""

    client: Any
    model: str
    provider_name: str = "groq"
    request_mapper: OpenAiRequestMapper = field(default_factory=OpenAiRequestMapper)
    response_mapper: OpenAiResponseMapper = field(default_factory=OpenAiResponseMapper)

    async def analyze(self, system_instruction: str, user_content: str) -> str:
        kwargs = self.request_mapper.to_kwargs(self.model, system_instruction, user_content)
        logger.debug(f"Chat completion request model={self.model}")

        try:
            response = await self.client.chat.completions.create(**kwargs)
        except Exception as exc:
            raise self._map_error(exc) from exc

        try:
            return self.response_mapper.to_text(response)
        except ValueError as exc:
            raise UpstreamError(provider=self.provider_name, message=f"Malformed response: {exc}") from exc

    def _map_error(self, exc: Exception) -> UpstreamError:
        if isinstance(exc, openai.APIStatusError):
            return UpstreamError(
                provider=self.provider_name,
                message=str(exc),
                status_code=exc.status_code,
                body=exc.body,
            )
        return UpstreamError(provider=self.provider_name, message=str(exc))
