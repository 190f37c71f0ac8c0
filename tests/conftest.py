from typing import Any

import pytest

from jira_ai_triage.application.ports.analysis_provider import AnalysisProvider
from jira_ai_triage.application.ports.issue_tracker_gateway import IssueTrackerGateway
from jira_ai_triage.configuration.main_settings import Settings
from jira_ai_triage.configuration.tools.tool_settings import JiraAuthMode
from jira_ai_triage.core.exceptions.upstream_error import UpstreamError
from jira_ai_triage.core.value_objects.issue_summary import IssueSummary


class FakeAnalysisProvider(AnalysisProvider):
    def __init__(self, text: str = "Check the identity provider logs.", error: Exception | None = None):
        self.text = text
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def analyze(self, system_instruction: str, user_content: str) -> str:
        self.calls.append((system_instruction, user_content))
        if self.error:
            raise self.error
        return self.text


class FakeTracker(IssueTrackerGateway):
    def __init__(self, error: Exception | None = None):
        self.error = error
        self.comments: list[tuple[str, dict[str, Any]]] = []
        self.searches: list[tuple[str, str]] = []

    async def search_similar_issues(self, query: str, project: str) -> list[IssueSummary]:
        self.searches.append((query, project))
        return []

    async def post_comment(self, issue_key: str, comment_body: dict[str, Any]) -> None:
        self.comments.append((issue_key, comment_body))
        if self.error:
            raise self.error


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        jira_base_url="https://jira.example.com",
        jira_auth_mode=JiraAuthMode.BASIC,
        jira_email="bot@example.com",
        jira_api_token="mock_jira_token",
        groq_api_key="mock_groq_key",
    )


@pytest.fixture
def analysis_provider():
    return FakeAnalysisProvider()


@pytest.fixture
def tracker():
    return FakeTracker()


@pytest.fixture
def jira_rejection():
    return UpstreamError(
        provider="jira",
        message="POST rest/api/3/issue/KAN-1/comment returned HTTP 400",
        status_code=400,
        body={"errorMessages": ["Comment body is not valid!"]},
    )


@pytest.fixture
def failing_analysis_provider():
    return FakeAnalysisProvider(
        error=UpstreamError(provider="groq", message="Service unavailable", status_code=503)
    )


@pytest.fixture
def failing_tracker(jira_rejection):
    return FakeTracker(error=jira_rejection)
