from abc import ABC, abstractmethod
from typing import Any

from jira_ai_triage.core.value_objects.issue_summary import IssueSummary


class IssueTrackerGateway(ABC):
    @abstractmethod
    async def search_similar_issues(self, query: str, project: str) -> list[IssueSummary]:
        """Up to three issues of `project` matching `query`, newest first."""

    @abstractmethod
    async def post_comment(self, issue_key: str, comment_body: dict[str, Any]) -> None:
        """Posts a structured document as a comment. Raises UpstreamError on failure."""
