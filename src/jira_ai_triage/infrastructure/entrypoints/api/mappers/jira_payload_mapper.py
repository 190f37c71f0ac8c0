from typing import Any

from jira_ai_triage.core.value_objects.issue_event import IssueEvent
from jira_ai_triage.infrastructure.entrypoints.api.dtos.jira_webhook_dto import JiraWebhookDTO
from jira_ai_triage.infrastructure.providers.tools.jira.mappers.jira_description_mapper import (
    JiraDescriptionMapper,
)


class JiraPayloadMapper:
    """Maps a Jira webhook payload to the IssueEvent the triage use case works on."""

    _description_mapper = JiraDescriptionMapper()

    @classmethod
    def map_to_event(cls, payload: JiraWebhookDTO) -> IssueEvent | None:
        """Returns None when the payload carries no issue key."""
        issue = payload.issue
        if issue is None or not issue.key or not issue.key.strip():
            return None

        fields = issue.fields
        summary = cls._to_summary(fields.summary if fields else None)
        description = cls._description_mapper.to_text(fields.description if fields else None)
        return IssueEvent(issue_key=issue.key.strip(), summary=summary, description=description)

    @staticmethod
    def _to_summary(value: Any) -> str:
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)
