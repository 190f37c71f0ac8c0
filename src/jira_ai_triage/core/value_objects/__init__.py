from jira_ai_triage.core.value_objects.issue_event import IssueEvent
from jira_ai_triage.core.value_objects.issue_summary import IssueSummary
from jira_ai_triage.core.value_objects.knowledge_article import KnowledgeArticle
from jira_ai_triage.core.value_objects.message import Message, MessageRole
from jira_ai_triage.core.value_objects.triage_comment import TriageComment
from jira_ai_triage.core.value_objects.triage_stage import TriageStage

__all__ = [
    "IssueEvent",
    "IssueSummary",
    "KnowledgeArticle",
    "Message",
    "MessageRole",
    "TriageComment",
    "TriageStage",
]
