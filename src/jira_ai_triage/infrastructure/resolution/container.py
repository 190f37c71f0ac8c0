from __future__ import annotations

from dataclasses import dataclass

from openai import AsyncOpenAI

from jira_ai_triage.application.ports.issue_tracker_gateway import IssueTrackerGateway
from jira_ai_triage.application.usecases.triage.triage_issue_usecase import TriageIssueUseCase
from jira_ai_triage.configuration.main_settings import Settings
from jira_ai_triage.infrastructure.observability.logger_factory_service import LoggerFactoryService
from jira_ai_triage.infrastructure.providers.llms.openai.clients.openai_client_factory import (
    OpenAiClientFactory,
)
from jira_ai_triage.infrastructure.providers.llms.openai.openai_analysis_provider import (
    OpenAiAnalysisProvider,
)
from jira_ai_triage.infrastructure.providers.tools.jira.clients.jira_http_client import (
    JiraHttpClient,
)
from jira_ai_triage.infrastructure.providers.tools.jira.jira_provider_impl import JiraProviderImpl
from jira_ai_triage.infrastructure.repositories.in_flight_delivery_registry import (
    InFlightDeliveryRegistry,
)

logger = LoggerFactoryService.build_logger(__name__)


@dataclass(frozen=True)
class TriageContainer:
    """Process-scoped services shared by every webhook request."""

    usecase: TriageIssueUseCase
    tracker: IssueTrackerGateway
    in_flight: InFlightDeliveryRegistry | None = None
    jira_client: JiraHttpClient | None = None
    llm_client: AsyncOpenAI | None = None

    @classmethod
    def build(cls, settings: Settings) -> TriageContainer:
        """Wires the real Groq and Jira clients. Fails fast on missing credentials."""
        settings.validate_credentials()

        llm_client = OpenAiClientFactory(settings).create()
        analysis_provider = OpenAiAnalysisProvider(client=llm_client, model=settings.llm_model)

        jira_client = JiraHttpClient(settings)
        tracker = JiraProviderImpl(jira_client)

        in_flight = InFlightDeliveryRegistry() if settings.webhook_skip_in_flight_duplicates else None
        logger.info(
            f"Container ready: model={settings.llm_model}, jira={settings.jira_base_url}, "
            f"skip_in_flight_duplicates={in_flight is not None}"
        )
        return cls(
            usecase=TriageIssueUseCase(analysis_provider=analysis_provider, tracker=tracker),
            tracker=tracker,
            in_flight=in_flight,
            jira_client=jira_client,
            llm_client=llm_client,
        )

    async def aclose(self) -> None:
        if self.jira_client is not None:
            await self.jira_client.aclose()
        if self.llm_client is not None:
            await self.llm_client.close()
