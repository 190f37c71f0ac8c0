from typing import Any

import httpx

from jira_ai_triage.application.ports.issue_tracker_gateway import IssueTrackerGateway
from jira_ai_triage.core.exceptions.upstream_error import UpstreamError
from jira_ai_triage.core.value_objects.issue_summary import IssueSummary
from jira_ai_triage.infrastructure.observability.logger_factory_service import LoggerFactoryService
from jira_ai_triage.infrastructure.providers.tools.jira.clients.jira_http_client import (
    JiraHttpClient,
)

logger = LoggerFactoryService.build_logger(__name__)

SIMILAR_ISSUES_LIMIT = 3


def _jql_string(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def build_similar_issues_jql(query: str, project: str) -> str:
    return f"project = {_jql_string(project)} AND text ~ {_jql_string(query)} ORDER BY created DESC"


class JiraProviderImpl(IssueTrackerGateway):
    def __init__(self, http_client: JiraHttpClient):
        self.client = http_client

    async def search_similar_issues(self, query: str, project: str) -> list[IssueSummary]:
        payload = {
            "jql": build_similar_issues_jql(query, project),
            "maxResults": SIMILAR_ISSUES_LIMIT,
        }
        logger.info(f"Searching similar issues in {project}")
        response = await self._send("rest/api/3/search", payload)
        return [self._to_summary(issue) for issue in response.json().get("issues") or []]

    async def post_comment(self, issue_key: str, comment_body: dict[str, Any]) -> None:
        logger.info(f"Adding comment to Jira issue: {issue_key}")
        logger.debug(f"Sending comment payload to Jira: {comment_body}")
        await self._send(f"rest/api/3/issue/{issue_key}/comment", {"body": comment_body})

    async def _send(self, path: str, payload: dict[str, Any]) -> httpx.Response:
        try:
            response = await self.client.post(path, payload)
        except httpx.HTTPError as exc:
            raise UpstreamError(provider="jira", message=f"{type(exc).__name__}: {exc}") from exc

        if not response.is_success:
            raise UpstreamError(
                provider="jira",
                message=f"POST {path} returned HTTP {response.status_code}",
                status_code=response.status_code,
                body=self._error_body(response),
            )
        return response

    @staticmethod
    def _error_body(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return response.text

    @staticmethod
    def _to_summary(issue: dict[str, Any]) -> IssueSummary:
        fields = issue.get("fields") or {}
        status = (fields.get("status") or {}).get("name")
        return IssueSummary(key=issue.get("key", ""), summary=fields.get("summary") or "", status=status)
